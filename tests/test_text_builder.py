"""Tests for the whitespace-normalizing text builder."""

from __future__ import annotations

import os

from htmltext.output.text_builder import TextBuilder


def _builder() -> TextBuilder:
    return TextBuilder(newline="\n")


def test_collapses_whitespace_runs() -> None:
    b = _builder()
    b.write("  one   two    three  ")
    assert b.to_string() == "one two three\n"


def test_whitespace_run_keeps_first_character() -> None:
    b = _builder()
    b.write("a\t \tb")
    assert str(b) == "a\tb\n"


def test_tab_replaces_trailing_space() -> None:
    b = _builder()
    b.write("a \t b \t")
    assert str(b) == "a\tb\n"


def test_carriage_return_dropped() -> None:
    b = _builder()
    b.write("a\r\nb\rc")
    assert str(b) == "a\nbc\n"


def test_no_leading_blank_line() -> None:
    b = _builder()
    b.write("\n\n\nx")
    assert str(b) == "x\n"


def test_at_most_one_blank_line() -> None:
    b = _builder()
    b.write("a\n\n\n\n\nb\n")
    assert str(b) == "a\n\nb\n"


def test_nbsp_only_line_counts_as_blank() -> None:
    b = _builder()
    b.write("a\n\n&nbsp;\n &nbsp;&nbsp; \nb")
    assert str(b) == "a\n\nb\n"


def test_nbsp_blank_line_is_emitted_untouched() -> None:
    b = _builder()
    b.write("a\n&nbsp;\nb")
    assert str(b) == "a\n&nbsp;\nb\n"


def test_empty_builder() -> None:
    assert _builder().to_string() == ""


def test_to_string_is_repeatable() -> None:
    b = _builder()
    b.write("pending")
    assert b.to_string() == "pending\n"
    assert b.to_string() == "pending\n"


def test_preformatted_passes_everything_through() -> None:
    b = _builder()
    b.preformatted = True
    b.write("  x  \n\n\n\ty\r\n")
    assert str(b) == "  x  \n\n\n\ty\r\n"


def test_entering_preformatted_flushes_pending_line() -> None:
    b = _builder()
    b.write("  abc  ")
    b.preformatted = True
    b.write(" raw")
    assert str(b) == "abc\n raw"


def test_entering_preformatted_resets_blank_counter() -> None:
    b = _builder()
    b.write("a\n\n")
    b.preformatted = True
    b.preformatted = False
    b.write("\n")
    assert str(b) == "a\n\n\n"


def test_clear_keeps_preformatted_flag() -> None:
    b = _builder()
    b.write("dropped\n")
    b.preformatted = True
    b.clear()
    assert b.preformatted is True
    b.write(" kept ")
    assert str(b) == " kept "


def test_clear_resets_leading_blank_suppression() -> None:
    b = _builder()
    b.write("dropped\n")
    b.clear()
    b.write("\nx")
    assert str(b) == "x\n"


def test_verbatim_alias() -> None:
    b = _builder()
    b.verbatim = True
    assert b.preformatted is True
    b.preformatted = False
    assert b.verbatim is False


def test_write_char_and_write_str() -> None:
    b = _builder()
    b.write_char("a")
    b.write_str(" b\n")
    assert str(b) == "a b\n"


def test_custom_newline() -> None:
    b = TextBuilder(newline="\r\n")
    b.write("a\n\nb")
    assert str(b) == "a\r\n\r\nb\r\n"


def test_default_newline_is_platform() -> None:
    b = TextBuilder()
    b.write("a")
    assert b.newline == os.linesep
    assert str(b) == "a" + os.linesep
