"""Loading source documents and saving converted text.

HTML pages (``.html``/``.htm``) are read leniently, replacing undecodable
bytes, because saved pages often carry a mislabelled charset.  Plain ``.txt``
sources are read strictly.  Either way the markup is returned untouched in a
:class:`SourceDocument` together with the kind of source and the encoding
that decoded it.  Converted text can only be saved as ``.txt``.

``UnsupportedFormatError`` is raised for any other extension.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..utils.errors import UnsupportedFormatError
from .readers.html_reader import read_html
from .readers.txt_reader import read_text
from .writers.txt_writer import write_text

SourceKind = Literal["html", "text"]

SOURCE_KINDS: dict[str, SourceKind] = {
    ".html": "html",
    ".htm": "html",
    ".txt": "text",
}
OUTPUT_EXTENSIONS = frozenset({".txt"})


@dataclass(slots=True, frozen=True)
class SourceDocument:
    """Markup loaded from disk, ready for conversion."""

    path: Path
    text: str
    kind: SourceKind
    encoding: str


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def source_kind(path: str | os.PathLike[str]) -> SourceKind:
    """Classify ``path`` as an HTML or plain-text source."""

    ext = get_extension(path)
    try:
        return SOURCE_KINDS[ext]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported input extension: '{ext}'") from None


def read_document(path: str | os.PathLike[str], *, encoding: str = "utf-8-sig") -> SourceDocument:
    """Load the document at ``path``.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not an HTML or text extension.
    """

    kind = source_kind(path)
    if kind == "html":
        text = read_html(path, encoding=encoding)
    else:
        text = read_text(path, encoding=encoding)
    return SourceDocument(Path(path), text, kind, encoding)


def write_output(path: str | os.PathLike[str], text: str, *, encoding: str = "utf-8") -> None:
    """Save converted ``text`` to a ``.txt`` file at ``path``.

    Raises
    ------
    UnsupportedFormatError
        If ``path`` does not end in ``.txt``.
    """

    ext = get_extension(path)
    if ext not in OUTPUT_EXTENSIONS:
        raise UnsupportedFormatError(f"Unsupported output extension: '{ext}'")
    write_text(path, text, encoding=encoding)


__all__ = [
    "OUTPUT_EXTENSIONS",
    "SOURCE_KINDS",
    "SourceDocument",
    "SourceKind",
    "get_extension",
    "read_document",
    "source_kind",
    "write_output",
]
