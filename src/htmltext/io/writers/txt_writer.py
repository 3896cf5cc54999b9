"""Plain-text writer for converted documents.

The converter already chooses the line terminator, so :func:`write_text`
disables newline translation by default and writes the string as given.
Missing parent directories are created.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path``.

    ``newline`` is forwarded to :func:`open`; the default ``""`` keeps the
    terminators already present in ``text``.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_text"]
