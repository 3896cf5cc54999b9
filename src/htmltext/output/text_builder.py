"""Whitespace-normalizing text accumulator.

:class:`TextBuilder` receives characters one at a time and turns them into
clean lines.  It knows nothing about HTML; the scanner decides which
characters and line breaks to write.

Rules
-----
Normal mode:

1. ``\\r`` is dropped.  A following ``\\n`` (if any) ends the line.
2. ``\\n`` flushes the pending line.
3. Any other whitespace is appended only when the pending line is non-empty
   and does not already end in whitespace, so a run keeps its first
   character.  A tab replaces a trailing space, so the tab written for a
   table cell survives whitespace that preceded the closing tag.
4. Everything else is appended unchanged.

Preformatted (verbatim) mode appends every character straight to the output,
bypassing the pending line and blank-line suppression.

Flushing trims the pending line.  A line that is empty once ``&nbsp;``
placeholders are removed counts as blank: at most one blank line is emitted
in a row and never while the output is still empty.

Example
-------

>>> b = TextBuilder(newline="\\n")
>>> b.write("  Hello   world \\n\\n\\n next")
>>> str(b)
'Hello world\\n\\nnext\\n'
"""

from __future__ import annotations

import os

NBSP_PLACEHOLDER = "&nbsp;"


class TextBuilder:
    """Accumulates text while eliminating excess whitespace.

    Parameters
    ----------
    newline:
        Terminator appended after every flushed line.  Defaults to
        :data:`os.linesep`.
    """

    def __init__(self, newline: str | None = None) -> None:
        self._newline = os.linesep if newline is None else newline
        self._text: list[str] = []
        self._curr_line: list[str] = []
        self._empty_lines = 0
        self._preformatted = False

    @property
    def newline(self) -> str:
        return self._newline

    @property
    def preformatted(self) -> bool:
        """Whether whitespace is passed through unchanged."""

        return self._preformatted

    @preformatted.setter
    def preformatted(self, value: bool) -> None:
        if value:
            # Pending text must not leak into the verbatim block.
            if self._curr_line:
                self._flush_curr_line()
            self._empty_lines = 0
        self._preformatted = value

    # ``verbatim`` is the same switch under its descriptive name.
    verbatim = preformatted

    def clear(self) -> None:
        """Discard all text written so far.  The preformatted flag is kept."""

        self._text.clear()
        self._curr_line.clear()
        self._empty_lines = 0

    def write(self, text: str) -> None:
        """Write ``text`` one character at a time."""

        for ch in text:
            self.write_char(ch)

    def write_str(self, text: str) -> None:
        self.write(text)

    def write_char(self, ch: str) -> None:
        """Write a single character applying the whitespace rules."""

        if self._preformatted:
            self._text.append(ch)
        elif ch == "\r":
            pass
        elif ch == "\n":
            self._flush_curr_line()
        elif ch.isspace():
            if self._curr_line:
                last = self._curr_line[-1]
                if not last.isspace():
                    self._curr_line.append(ch)
                elif ch == "\t" and last == " ":
                    self._curr_line[-1] = ch
        else:
            self._curr_line.append(ch)

    def _flush_curr_line(self) -> None:
        line = "".join(self._curr_line).strip()

        if not line.replace(NBSP_PLACEHOLDER, ""):
            self._empty_lines += 1
            if self._empty_lines < 2 and self._text:
                self._text.append(line)
                self._text.append(self._newline)
        else:
            self._empty_lines = 0
            self._text.append(line)
            self._text.append(self._newline)

        self._curr_line.clear()

    def to_string(self) -> str:
        """Flush any pending line and return the accumulated text."""

        if self._curr_line:
            self._flush_curr_line()
        return "".join(self._text)

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["NBSP_PLACEHOLDER", "TextBuilder"]
