"""HTML document reader.

:func:`read_html` loads the markup of an HTML file as text.  Nothing is
stripped or decoded here; conversion to plain text is the job of
:func:`htmltext.scan.scanner.convert`.  A UTF-8 byte-order mark is consumed
when present and line endings are kept as stored.
"""

from __future__ import annotations

import os

from .txt_reader import read_text

PathLikeStr = os.PathLike[str]


def read_html(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "replace",
) -> str:
    """Return the raw markup stored at ``path``.

    Undecodable bytes are replaced rather than rejected by default, since web
    pages saved to disk often carry stray bytes in a mislabelled charset.
    """

    return read_text(path, encoding=encoding, errors=errors)


__all__ = ["read_html"]
