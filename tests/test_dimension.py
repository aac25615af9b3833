from __future__ import annotations

from vtgrid import (
    Borders,
    CellMatrix,
    DimensionEstimator,
    Entity,
    GridConfig,
    SpanMap,
    TextLimit,
    estimate,
)


def _estimate(rows, config: GridConfig = None, workers: int = None):
    config = config or GridConfig()
    matrix = CellMatrix(rows)
    config.spans.reshape(matrix.shape)
    return matrix, config, estimate(matrix, config.spans, config, workers=workers)


def test_widths_include_padding(padded_config: GridConfig) -> None:
    _, _, dimension = _estimate([["a", "bb"], ["ccc", "d"]], padded_config)
    assert dimension.widths == (5, 4)
    assert dimension.heights == (1, 1)


def test_wide_characters_widen_the_column() -> None:
    _, _, dimension = _estimate([["日本", "x"], ["a", "b"]])
    assert dimension.widths == (4, 1)


def test_multiline_cell_sets_row_height() -> None:
    _, _, dimension = _estimate([["a\nb\nc", "x"], ["y", "z"]])
    assert dimension.heights == (3, 1)


def test_vertical_padding_adds_to_height() -> None:
    config = GridConfig()
    config.set_padding(Entity.cell(1, 1), 1)
    _, _, dimension = _estimate([["a", "b"], ["c", "d"]], config)
    assert dimension.heights == (1, 3)
    assert dimension.widths == (1, 3)


def test_column_span_that_fits_changes_nothing() -> None:
    config = GridConfig()
    config.spans.reshape((2, 2))
    config.spans.set_span((0, 0), column_span=2)
    _, _, dimension = _estimate([["abc", ""], ["a", "b"]], config)
    assert dimension.widths == (1, 1)


def test_column_span_excess_goes_to_the_first_column() -> None:
    config = GridConfig()
    config.spans.reshape((2, 2))
    config.spans.set_span((0, 0), column_span=2)
    _, _, dimension = _estimate([["abcd", ""], ["a", "b"]], config)
    assert dimension.widths == (2, 1)


def test_column_span_shortfall_is_split_with_remainder_first() -> None:
    config = GridConfig(Borders.empty())
    config.spans.reshape((2, 3))
    config.spans.set_span((0, 0), column_span=3)
    _, _, dimension = _estimate([["abcdefghij", "", ""], ["a", "b", "c"]], config)
    # shortfall 7 over 3 columns
    assert dimension.widths == (1 + 3, 1 + 2, 1 + 2)
    assert sum(dimension.widths) == 10


def test_smaller_spans_are_resolved_first() -> None:
    config = GridConfig()
    config.spans.reshape((3, 3))
    config.spans.set_span((0, 0), column_span=3)
    config.spans.set_span((1, 0), column_span=2)
    _, _, dimension = _estimate([["abcdefgh", "", ""], ["abcd", "", ""], ["a", "b", "c"]], config)
    assert dimension.widths == (4, 1, 1)


def test_row_span_heights() -> None:
    config = GridConfig()
    config.spans.reshape((2, 2))
    config.spans.set_span((0, 0), row_span=2)
    _, _, dimension = _estimate([["a\nb\nc\nd\ne", "x"], ["", "y"]], config)
    # two rows plus the grid line between them hold five lines
    assert dimension.heights == (2, 2)


def test_limits_are_measured() -> None:
    config = GridConfig()
    config.set_limit(Entity.column(0), TextLimit(3, mode="wrap"))
    config.set_limit(Entity.column(1), TextLimit(2))
    _, _, dimension = _estimate([["abcdefg", "xyz"]], config)
    assert dimension.widths == (3, 2)
    assert dimension.heights == (3,)


def test_estimation_is_idempotent_and_parallel_safe(padded_config: GridConfig) -> None:
    rows = [["%d" % (r * c) * (c + 1) for c in range(6)] for r in range(8)]
    padded_config.spans.reshape((8, 6))
    padded_config.spans.set_span((2, 1), column_span=3, row_span=2)
    matrix, config, first = _estimate(rows, padded_config)
    assert estimate(matrix, config.spans, config) == first
    assert DimensionEstimator(workers=4).estimate(matrix, config.spans, config) == first


def test_empty_matrix() -> None:
    matrix = CellMatrix()
    dimension = estimate(matrix, SpanMap(), GridConfig())
    assert dimension.widths == ()
    assert dimension.heights == ()
