"""Output accumulation for converted text."""

from .text_builder import NBSP_PLACEHOLDER, TextBuilder

__all__ = ["NBSP_PLACEHOLDER", "TextBuilder"]
