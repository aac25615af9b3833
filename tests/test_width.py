from __future__ import annotations

from vtgrid.iodata import AnsiWidth, PlainWidth, TabWidth, char_width, has_escape, strip, tokenize


def test_east_asian_characters_measure_two_columns() -> None:
    assert char_width("日") == 2
    assert PlainWidth().line_width("日本") == 4
    assert PlainWidth().line_width("a日b") == 4


def test_control_characters_measure_zero() -> None:
    assert char_width("\x1b") == 0
    assert char_width("\u200b") == 0


def test_tab_width_expands_tabs() -> None:
    widthfunc = TabWidth(4)
    assert widthfunc.line_width("a\tb") == 6
    assert TabWidth(2).expand("\tx") == "  x"


def test_ansi_width_ignores_escape_sequences() -> None:
    widthfunc = AnsiWidth()
    assert widthfunc.line_width("\x1b[31mred\x1b[0m") == 3
    assert widthfunc.expand("\x1b[31mred\x1b[0m") == "\x1b[31mred\x1b[0m"
    assert AnsiWidth(tab_size=2).line_width("\x1b[1m\tx") == 3


def test_ansi_width_hyperlink_and_malformed_sequences() -> None:
    widthfunc = AnsiWidth()
    assert widthfunc.line_width("\x1b]8;;http://x\x1b\\link\x1b]8;;\x1b\\") == 4
    assert widthfunc.line_width("ab\x1b[31") == 2
    assert widthfunc.line_width("ab\x1b") == 2


def test_tokenize_never_splits_sequences() -> None:
    assert list(tokenize("a\x1b[1;31mb")) == [("a", False), ("\x1b[1;31m", True), ("b", False)]
    assert strip("\x1b[1mX\x1b[0m") == "X"
    assert has_escape("\x1b[0m")
    assert not has_escape("plain")


def test_width_functions_compare_by_settings() -> None:
    assert TabWidth(4) == TabWidth(4)
    assert TabWidth(4) != TabWidth(2)
    assert TabWidth(4) != AnsiWidth(4)
    assert hash(AnsiWidth()) == hash(AnsiWidth())
    assert repr(TabWidth(3)) == "TabWidth(tab_size=3)"
