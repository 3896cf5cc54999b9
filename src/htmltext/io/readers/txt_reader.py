"""Plain-text reader.

:func:`read_text` loads a text file exactly as stored: ``\\r\\n`` and ``\\r``
line endings reach the converter untouched (the text builder drops ``\\r``
itself), and a UTF-8 byte-order mark is consumed by the default
``"utf-8-sig"`` codec.  I/O errors propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read ``path`` without newline translation.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding.  The default consumes a UTF-8 BOM when present.
    errors:
        Decoding error strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
