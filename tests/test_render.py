from __future__ import annotations

import pytest
from wcwidth import wcswidth

from vtgrid import (
    AnsiWidth,
    Borders,
    CellMatrix,
    Color,
    Dimension,
    Entity,
    Formatting,
    GeometrieError,
    Grid,
    GridConfig,
    Offset,
    Renderer,
    Shadow,
    Sides,
    TabWidth,
    TextLimit,
    render,
)


def test_padded_ascii_table(small_grid: Grid) -> None:
    assert small_grid.render() == (
        "+-----+----+\n"
        "| a   | bb |\n"
        "+-----+----+\n"
        "| ccc | d  |\n"
        "+-----+----+"
    )


def test_wide_characters() -> None:
    assert Grid([["日本", "x"]]).render() == (
        "+----+-+\n"
        "|日本|x|\n"
        "+----+-+"
    )


def test_vertical_alignment_in_a_tall_row() -> None:
    grid = Grid([["a\nb\nc", "x", "y"]])
    grid.config.set_alignment(Entity.column(1), vertical="center")
    grid.config.set_alignment(Entity.column(2), vertical="bottom")
    assert grid.render() == (
        "+-+-+-+\n"
        "|a| | |\n"
        "|b|x| |\n"
        "|c| |y|\n"
        "+-+-+-+"
    )


def test_horizontal_alignment() -> None:
    grid = Grid([["a", "b", "c"], ["xxx", "yyy", "zzz"]])
    grid.config.set_alignment(Entity.column(1), horizontal="center")
    grid.config.set_alignment(Entity.column(2), horizontal="right")
    assert grid.render() == (
        "+---+---+---+\n"
        "|a  | b |  c|\n"
        "+---+---+---+\n"
        "|xxx|yyy|zzz|\n"
        "+---+---+---+"
    )


def test_vertical_center_puts_the_odd_line_below() -> None:
    grid = Grid([["a\nb\nc\nd", "x"]])
    grid.config.set_alignment(Entity.column(1), vertical="center")
    assert grid.render() == (
        "+-+-+\n"
        "|a| |\n"
        "|b|x|\n"
        "|c| |\n"
        "|d| |\n"
        "+-+-+"
    )


def test_horizontal_center_puts_the_odd_column_right() -> None:
    grid = Grid([["ab"], ["abcde"]])
    grid.config.set_alignment(Entity.GLOBAL, horizontal="center")
    assert grid.render() == (
        "+-----+\n"
        "| ab  |\n"
        "+-----+\n"
        "|abcde|\n"
        "+-----+"
    )


def test_block_and_line_alignment() -> None:
    grid = Grid([["abc\nx"], ["abcde"]])
    grid.config.set_alignment(Entity.GLOBAL, horizontal="right")
    assert grid.render().splitlines()[1:3] == ["|  abc|", "|  x  |"]
    grid.config.set_formatting(Entity.GLOBAL, Formatting(allow_lines_alignment=True))
    assert grid.render().splitlines()[1:3] == ["|  abc|", "|    x|"]


def test_padding_and_justification_fill() -> None:
    grid = Grid([["a"], ["bbb"]])
    grid.config.set_padding(Entity.cell(0, 0), Sides.new(left=1, fill="~"))
    grid.config.set_justification(Entity.GLOBAL, ".")
    assert grid.render() == (
        "+---+\n"
        "|~a.|\n"
        "+---+\n"
        "|bbb|\n"
        "+---+"
    )


def test_vertical_padding() -> None:
    grid = Grid([["a"]])
    grid.config.set_padding(Entity.GLOBAL, Sides.new(top=1, bottom=1))
    assert grid.render() == "+-+\n| |\n|a|\n| |\n+-+"


def test_column_span(modern_config: GridConfig) -> None:
    grid = Grid([["abcd", ""], ["a", "b"]], modern_config)
    grid.set_span((0, 0), column_span=2)
    assert grid.render() == (
        "┌────┐\n"
        "│abcd│\n"
        "├──┬─┤\n"
        "│a │b│\n"
        "└──┴─┘"
    )


def test_row_span(modern_config: GridConfig) -> None:
    grid = Grid([["a", "b"], ["c", "d"]], modern_config)
    grid.set_span((0, 0), row_span=2)
    assert grid.render() == (
        "┌─┬─┐\n"
        "│a│b│\n"
        "│ ├─┤\n"
        "│ │d│\n"
        "└─┴─┘"
    )


def test_row_span_text_crosses_grid_lines(modern_config: GridConfig) -> None:
    grid = Grid([["x", "1"], ["", "2"]], modern_config)
    grid.set_span((0, 0), row_span=2)
    grid.config.set_alignment(Entity.cell(0, 0), vertical="center")
    assert grid.render() == (
        "┌─┬─┐\n"
        "│ │1│\n"
        "│x├─┤\n"
        "│ │2│\n"
        "└─┴─┘"
    )


def test_no_borders() -> None:
    assert Grid([["a", "b"], ["c", "d"]], GridConfig(Borders.empty())).render() == "ab\ncd"


def test_missing_char() -> None:
    grid = Grid([["a"]], GridConfig(Borders(top="-", left="|")))
    assert grid.render() == " -\n|a"
    grid.config.set_missing_char("*")
    assert grid.render() == "*-\n|a"


def test_border_colors_are_merged() -> None:
    grid = Grid([["a", "b"]])
    grid.config.set_border_color_default(Color("<", ">"))
    assert grid.render() == (
        "<+-+-+>\n"
        "<|>a<|>b<|>\n"
        "<+-+-+>"
    )


def test_cell_color() -> None:
    grid = Grid([["ab", "c"]], GridConfig(Borders.empty()))
    grid.config.set_color(Entity.column(0), Color("[", "]"))
    assert grid.render() == "[ab]c"


def test_shadow() -> None:
    grid = Grid([["ab"]])
    grid.config.set_shadow(Shadow())
    assert grid.render() == (
        "+--+ \n"
        "|ab|▒\n"
        "+--+▒\n"
        " ▒▒▒▒"
    )
    grid.config.set_shadow(None)
    assert grid.render() == "+--+\n|ab|\n+--+"


def test_truncate_limit() -> None:
    grid = Grid([["abcdef"]])
    grid.config.set_limit(Entity.GLOBAL, TextLimit(3, suffix="."))
    assert grid.render() == "+---+\n|ab.|\n+---+"


def test_wrap_limit() -> None:
    grid = Grid([["abcdef"]])
    grid.config.set_limit(Entity.GLOBAL, TextLimit(3, mode="wrap"))
    assert grid.render() == "+---+\n|abc|\n|def|\n+---+"


def test_trim() -> None:
    grid = Grid([["\n  a  \n\n"]])
    grid.config.set_formatting(Entity.GLOBAL, Formatting(horizontal_trim=True, vertical_trim=True))
    assert grid.render() == "+-+\n|a|\n+-+"


def test_ansi_cells() -> None:
    grid = Grid([["\x1b[31mab\x1b[0m", "c"]], widthfunc=AnsiWidth())
    assert grid.render() == "+--+-+\n|\x1b[31mab\x1b[0m|c|\n+--+-+"


def test_tabs() -> None:
    assert Grid([["\tx"]], widthfunc=TabWidth(2)).render() == "+---+\n|  x|\n+---+"


def test_every_line_has_the_same_width(padded_config: GridConfig) -> None:
    rows = [["日本語", "a\nbb", "x"], ["", "long text here", "y"], ["z", "", "東京\n\n."]]
    grid = Grid(rows, padded_config)
    grid.set_span((0, 1), column_span=2)
    grid.set_span((1, 0), row_span=2)
    grid.config.set_alignment(Entity.column(2), horizontal="center", vertical="bottom")
    grid.config.set_margin(N=1, O=(2, "#"), E=1)
    lines = grid.render().split("\n")
    width = grid.dimension.total_width(grid.resolver()) + 3
    assert len(lines) == grid.dimension.total_height(grid.resolver()) + 1
    assert {wcswidth(line) for line in lines} == {width}


def test_rendering_is_stable(small_grid: Grid) -> None:
    assert small_grid.render() == small_grid.render()


def test_module_render_function(small_grid: Grid) -> None:
    output = render(small_grid.matrix, small_grid.spans, small_grid.dimension, small_grid.resolver(),
                    small_grid.config)
    assert output == small_grid.render()


def test_empty_grid() -> None:
    assert Grid().render() == ""


def test_dimension_must_fit_the_matrix() -> None:
    matrix = CellMatrix([["a", "b"]])
    config = GridConfig()
    config.spans.reshape(matrix.shape)
    with pytest.raises(GeometrieError):
        Renderer(matrix, config, Dimension((1,), (1,)))
    with pytest.raises(GeometrieError):
        Renderer(matrix, config, Dimension((1, 1), ()))


def test_content_wider_than_the_column_raises() -> None:
    matrix = CellMatrix([["abc"]])
    config = GridConfig()
    config.spans.reshape(matrix.shape)
    with pytest.raises(GeometrieError):
        Renderer(matrix, config, Dimension((1,), (1,))).render()
    config.set_padding(Entity.GLOBAL, Sides.new(left=2))
    with pytest.raises(GeometrieError):
        Renderer(matrix, config, Dimension((1,), (1,))).render()


def test_offset_chars_and_colors() -> None:
    grid = Grid([["abc", "de"]])
    grid.config.set_horizontal_char((0, 0), "T", Offset.begin(1))
    grid.config.set_horizontal_char((1, 1), "E", Offset.end(0))
    grid.config.set_horizontal_color((0, 1), Color("<", ">"), Offset.begin(0))
    assert grid.render() == (
        "+-T-+<->-+\n"
        "|abc|de|\n"
        "+---+-E+"
    )


def test_offset_char_in_a_vertical_line() -> None:
    grid = Grid([["a\nb", "c"]])
    grid.config.set_vertical_char((0, 1), "V", Offset.begin(0))
    assert grid.render() == (
        "+-+-+\n"
        "|aVc|\n"
        "|b| |\n"
        "+-+-+"
    )


def test_color_template() -> None:
    grid = Grid([["a", "b"]])
    grid.config.set_borders_color(Borders(top=Color("<", ">")))
    assert grid.render() == (
        "+<->+<->+\n"
        "|a|b|\n"
        "+-+-+"
    )
