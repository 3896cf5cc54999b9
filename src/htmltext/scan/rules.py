"""Static tag tables used by the scanner.

``TAG_OUTPUT`` maps a lowercased tag name (closing tags spelled with a leading
``/``) to the text written when the tag is seen.  ``IGNORE_TAGS`` lists the
containers whose whole content is discarded.  Both are read-only and safe to
share between threads.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")

TAG_OUTPUT: Mapping[str, str] = MappingProxyType(
    {
        "address": "\n",
        "blockquote": "\n",
        "div": "\n",
        "dl": "\n",
        "fieldset": "\n",
        "form": "\n",
        **{name: "\n" for name in _HEADINGS},
        **{"/" + name: "\n" for name in _HEADINGS},
        "p": "\n",
        "/p": "\n",
        "table": "\n",
        "/table": "\n",
        "ul": "\n",
        "/ul": "\n",
        "ol": "\n",
        "/ol": "\n",
        "/li": "\n",
        "br": "\n",
        "/td": "\t",
        "/tr": "\n",
        "/pre": "\n",
    }
)

IGNORE_TAGS: frozenset[str] = frozenset({"script", "noscript", "style", "object"})


__all__ = ["IGNORE_TAGS", "TAG_OUTPUT"]
