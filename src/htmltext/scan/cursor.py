"""Forward-only cursor over an immutable document.

All reads are bounds-safe: :meth:`DocumentCursor.peek` returns the sentinel
:data:`END` (an empty string) once the end is reached and
:meth:`DocumentCursor.move_ahead` never moves past ``len(text)``.
"""

from __future__ import annotations

END = ""


class DocumentCursor:
    """Text plus a position that only moves forward."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def end_of_text(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the character at the current position or :data:`END`."""

        return self.text[self.pos] if self.pos < len(self.text) else END

    def move_ahead(self) -> None:
        self.pos = min(self.pos + 1, len(self.text))

    def move_to_end(self) -> None:
        self.pos = len(self.text)

    def eat_whitespace(self) -> None:
        """Advance to the next non-whitespace character."""

        while self.peek().isspace():
            self.move_ahead()

    def eat_whitespace_to_next_line(self) -> None:
        """Advance past whitespace, stopping after the first line feed."""

        while self.peek().isspace():
            ch = self.peek()
            self.move_ahead()
            if ch == "\n":
                break

    def eat_quoted_value(self) -> None:
        """Advance past a quoted value starting at the current position.

        The value ends at the matching quote.  An unterminated value ends at
        the next ``\\r``/``\\n`` (which is consumed) or at the end of text.
        """

        quote = self.peek()
        if quote not in ('"', "'"):
            return
        self.move_ahead()
        end = self._find_any((quote, "\r", "\n"))
        if end < 0:
            self.pos = len(self.text)
        else:
            self.pos = end
            self.move_ahead()

    def _find_any(self, chars: tuple[str, ...]) -> int:
        hits = [i for i in (self.text.find(c, self.pos) for c in chars) if i >= 0]
        return min(hits) if hits else -1

    def slice_from(self, start: int) -> str:
        return self.text[start : self.pos]


__all__ = ["END", "DocumentCursor"]
