"""Character-level HTML scanning."""

from .cursor import DocumentCursor
from .rules import IGNORE_TAGS, TAG_OUTPUT
from .scanner import HtmlToText, convert
from .tags import TagDescriptor, parse_tag, skip_inner_content

__all__ = [
    "DocumentCursor",
    "HtmlToText",
    "IGNORE_TAGS",
    "TAG_OUTPUT",
    "TagDescriptor",
    "convert",
    "parse_tag",
    "skip_inner_content",
]
