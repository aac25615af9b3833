from __future__ import annotations

import pytest

from vtgrid import Entity, Grid, GridConfig, Position, PositionError, Sides, SpanMap, TabWidth, VisualTarget


def test_dimension_is_cached_until_a_change(small_grid: Grid) -> None:
    first = small_grid.dimension
    assert small_grid.dimension is first
    small_grid.set_text((0, 0), "abcdef")
    assert small_grid.dimension.widths == (8, 4)
    small_grid.config.set_padding(Entity.GLOBAL, Sides())
    assert small_grid.dimension.widths == (6, 2)
    small_grid.set_span((0, 0), column_span=2)
    assert small_grid.dimension.widths == (4, 1)


def test_invalidate_drops_the_cache(small_grid: Grid) -> None:
    first = small_grid.dimension
    small_grid.invalidate()
    second = small_grid.dimension
    assert second is not first
    assert second == first


def test_widthfunc_change_is_measured() -> None:
    grid = Grid([["\t"]])
    assert grid.dimension.widths == (0,)
    grid.set_widthfunc(TabWidth(3))
    assert grid.dimension.widths == (3,)


def test_negative_span_moves_text_to_the_anchor() -> None:
    grid = Grid([["a", "b", "c"]])
    anchor = grid.set_span((0, 2), column_span=-1)
    assert anchor == Position(0, 1)
    assert grid.get_span((0, 1)) == (2, 1)
    assert grid.get_text((0, 1)) == "c"
    assert grid.render() == "+-+-+\n|a|c|\n+-+-+"


def test_span_outside_the_grid_raises() -> None:
    grid = Grid([["a"]])
    with pytest.raises(PositionError):
        grid.set_span((1, 1), column_span=2)


def test_config_spans_are_reshaped() -> None:
    spans = SpanMap((5, 5))
    spans.set_span((0, 0), column_span=5)
    spans.set_span((4, 0), column_span=2)
    grid = Grid([["a", "b"], ["c", "d"]], GridConfig(spans=spans))
    assert list(grid.spans) == [(Position(0, 0), (2, 1))]


def test_visual_targets(small_grid: Grid) -> None:
    assert small_grid.get_visualtarget(2, 1) == VisualTarget((2, 1), "cell", Position(0, 0), (1, 0))
    assert small_grid.get_visualtarget(8, 3) == VisualTarget((8, 3), "cell", Position(1, 1), (1, 0))
    assert small_grid.get_visualtarget(6, 1).kind == "border"
    assert small_grid.get_visualtarget(0, 0).kind == "border"
    assert small_grid.get_visualtarget(12, 0).kind == "outside"
    assert small_grid.get_visualtarget(-1, 0).kind == "outside"


def test_visual_targets_with_margin(small_grid: Grid) -> None:
    small_grid.config.set_margin(N=1, E=2)
    assert small_grid.get_visualtarget(0, 0).kind == "margin"
    assert small_grid.get_visualtarget(2, 1).kind == "border"
    assert small_grid.get_visualtarget(4, 2) == VisualTarget((4, 2), "cell", Position(0, 0), (1, 0))
    assert small_grid.get_visualtarget(14, 6).kind == "outside"


def test_visual_targets_inside_spans() -> None:
    grid = Grid([["abcd", ""], ["a", "b"]])
    grid.set_span((0, 0), column_span=2)
    assert grid.get_visualtarget(3, 1) == VisualTarget((3, 1), "cell", Position(0, 0), (2, 0))
    assert grid.get_visualtarget(3, 3).kind == "border"


def test_container_protocol(small_grid: Grid) -> None:
    assert len(small_grid) == 2
    assert small_grid.shape == (2, 2)
    assert small_grid[1][0].text == "ccc"
    assert small_grid.get_cell(0, 1).text == "bb"
    assert [[cell.text for cell in row] for row in small_grid] == [["a", "bb"], ["ccc", "d"]]
    assert str(small_grid) == small_grid.render()
