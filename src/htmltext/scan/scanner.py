"""HTML to plain text conversion.

The scanner walks the document once, character by character, and feeds a
:class:`~htmltext.output.text_builder.TextBuilder`:

* ``<body>`` discards everything written so far and ``</body>`` ends the scan;
* ``<pre>`` switches the builder to preformatted mode and drops the newline
  that directly follows the tag; ``</pre>`` switches it back;
* tags in :data:`~htmltext.scan.rules.TAG_OUTPUT` write a line break or tab;
* tags in :data:`~htmltext.scan.rules.IGNORE_TAGS` have their whole content
  skipped;
* whitespace outside ``<pre>`` is written as a single space, everything else
  is written unchanged.

Entities are decoded once, on the finished text, with :func:`html.unescape`.
The conversion is a pure function of its input and never raises on malformed
markup.

Example
-------

>>> convert("<p>Hello &amp; World</p>", newline="\\n")
'Hello & World\\n'
"""

from __future__ import annotations

import html
from typing import Mapping

from ..output.text_builder import TextBuilder
from ..utils.logging import get_logger
from .cursor import DocumentCursor
from .rules import IGNORE_TAGS, TAG_OUTPUT
from .tags import parse_tag, skip_inner_content

logger = get_logger(__name__)


class HtmlToText:
    """Converts HTML to plain text.

    One instance may be reused; every :meth:`convert` call starts from a
    fresh cursor and builder.
    """

    def __init__(
        self,
        *,
        newline: str | None = None,
        decode_entities: bool = True,
        tags: Mapping[str, str] = TAG_OUTPUT,
        ignore_tags: frozenset[str] = IGNORE_TAGS,
    ) -> None:
        self.newline = newline
        self.decode_entities = decode_entities
        self._tags = tags
        self._ignore_tags = ignore_tags

    def convert(self, html_text: str) -> str:
        """Convert ``html_text`` and return the resulting plain text."""

        if not isinstance(html_text, str):
            raise TypeError(f"html must be str, not {type(html_text).__name__}")

        text = TextBuilder(newline=self.newline)
        cursor = DocumentCursor(html_text)

        while not cursor.end_of_text:
            ch = cursor.peek()
            if ch == "<":
                self._handle_tag(cursor, text)
            elif ch.isspace():
                text.write_char(ch if text.preformatted else " ")
                cursor.move_ahead()
            else:
                text.write_char(ch)
                cursor.move_ahead()

        result = text.to_string()
        return html.unescape(result) if self.decode_entities else result

    def _handle_tag(self, cursor: DocumentCursor, text: TextBuilder) -> None:
        tag = parse_tag(cursor).name

        if tag == "body":
            logger.debug("<body> at offset %d: discarding earlier content", cursor.pos)
            text.clear()
        elif tag == "/body":
            logger.debug("</body> at offset %d: ignoring remaining input", cursor.pos)
            cursor.move_to_end()
        elif tag == "pre":
            text.preformatted = True
            cursor.eat_whitespace_to_next_line()
        elif tag == "/pre":
            text.preformatted = False

        output = self._tags.get(tag)
        if output is not None:
            text.write(output)

        if tag in self._ignore_tags:
            skip_inner_content(cursor, tag)


def convert(
    html_text: str,
    *,
    newline: str | None = None,
    decode_entities: bool = True,
) -> str:
    """Convert ``html_text`` to plain text with the default tag tables.

    Parameters
    ----------
    html_text:
        The HTML document.  Must be a ``str``; ``None`` raises ``TypeError``.
    newline:
        Line terminator for the output.  Defaults to :data:`os.linesep`.
    decode_entities:
        Decode HTML entities in the finished text.
    """

    return HtmlToText(newline=newline, decode_entities=decode_entities).convert(html_text)


__all__ = ["HtmlToText", "convert"]
