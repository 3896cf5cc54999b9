"""Convert HTML documents to readable plain text.

The package pairs a character-level HTML scanner (:mod:`htmltext.scan`) with a
whitespace-normalizing text builder (:mod:`htmltext.output`).  Use
:func:`convert` for one-off conversions or :class:`HtmlToText` to reuse
settings across documents.
"""

from .output.text_builder import TextBuilder
from .scan.scanner import HtmlToText, convert

__version__ = "0.1.0"

__all__ = ["HtmlToText", "TextBuilder", "__version__", "convert"]
