"""Tag parsing and ignored-subtree skipping.

Attributes are consumed and discarded; only the tag name and whether the tag
was written self-closing (``<br/>``) survive parsing.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import DocumentCursor


@dataclass(slots=True, frozen=True)
class TagDescriptor:
    """Parsed tag.

    Attributes
    ----------
    name:
        Lowercased tag name, prefixed with ``/`` for closing tags.  Empty when
        ``<`` is not followed by a name.
    self_closing:
        ``True`` when an unquoted ``/`` appears after the name.
    """

    name: str
    self_closing: bool = False

    @property
    def is_closing(self) -> bool:
        return self.name.startswith("/")


def _ends_name(ch: str) -> bool:
    return ch.isspace() or ch in ("/", ">")


def parse_tag(cursor: DocumentCursor) -> TagDescriptor:
    """Consume the tag at the cursor and return its descriptor.

    The cursor must be on ``<``; otherwise nothing is consumed and an empty
    descriptor is returned.  Parsing stops after ``>`` or at the end of text.
    """

    if cursor.peek() != "<":
        return TagDescriptor("")

    cursor.move_ahead()
    cursor.eat_whitespace()
    start = cursor.pos
    if cursor.peek() == "/":
        cursor.move_ahead()
    while not cursor.end_of_text and not _ends_name(cursor.peek()):
        cursor.move_ahead()
    name = cursor.slice_from(start).lower()

    self_closing = False
    while not cursor.end_of_text and cursor.peek() != ">":
        if cursor.peek() in ('"', "'"):
            cursor.eat_quoted_value()
        else:
            if cursor.peek() == "/":
                self_closing = True
            cursor.move_ahead()
    cursor.move_ahead()

    return TagDescriptor(name, self_closing)


def skip_inner_content(cursor: DocumentCursor, tag: str) -> None:
    """Discard everything up to and including the closing tag of ``tag``.

    Opened tags are tracked on a stack so nested elements (including nested
    ``tag`` elements) are balanced.  A closing tag matching any open element
    closes every element opened after it, which keeps stray pseudo-tags such
    as ``"<b>"`` inside a script body from running to the end of the document.
    """

    open_tags = [tag]
    while open_tags and not cursor.end_of_text:
        if cursor.peek() != "<":
            cursor.move_ahead()
            continue
        parsed = parse_tag(cursor)
        if parsed.is_closing:
            name = parsed.name[1:]
            if name in open_tags:
                # Innermost match wins.
                idx = len(open_tags) - 1 - open_tags[::-1].index(name)
                del open_tags[idx:]
        elif parsed.name and not parsed.self_closing:
            open_tags.append(parsed.name)


__all__ = ["TagDescriptor", "parse_tag", "skip_inner_content"]
