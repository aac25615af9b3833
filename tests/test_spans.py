from __future__ import annotations

import logging

import pytest

from vtgrid import Position, PositionError, SpanMap


def test_span_hides_covered_positions() -> None:
    spans = SpanMap((4, 5))
    spans.set_span((1, 2), column_span=2, row_span=2)
    assert spans.get_span((1, 2)) == (2, 2)
    assert spans.anchor_of((2, 3)) == Position(1, 2)
    assert spans.is_visible((1, 2))
    assert not spans.is_visible((2, 3))
    assert spans.is_spanned((1, 2))
    assert not spans.is_spanned((0, 0))


def test_covered_predicates() -> None:
    spans = SpanMap((4, 5))
    spans.set_span((1, 2), column_span=2, row_span=2)
    assert spans.is_covered_by_column_span((1, 3))
    assert not spans.is_covered_by_column_span((2, 2))
    assert spans.is_covered_by_row_span((2, 2))
    assert not spans.is_covered_by_row_span((1, 3))
    assert spans.is_covered_by_both_spans((2, 3))
    assert not spans.is_covered_by_both_spans((1, 2))


def test_zero_span_extends_to_the_end() -> None:
    spans = SpanMap((2, 5))
    spans.set_span((0, 1), column_span=0)
    assert spans.get_span((0, 1)) == (4, 1)
    spans.set_span((0, 0), row_span=0)
    assert spans.get_span((0, 0)) == (1, 2)


def test_negative_span_moves_the_anchor() -> None:
    spans = SpanMap((1, 5))
    anchor = spans.set_span((0, 3), column_span=-2)
    assert anchor == Position(0, 1)
    assert spans.get_span((0, 1)) == (3, 1)
    assert spans.get_span((0, 3)) is None


def test_span_is_clamped_to_bounds() -> None:
    spans = SpanMap((2, 3))
    spans.set_span((0, 1), column_span=10, row_span=10)
    assert spans.get_span((0, 1)) == (2, 2)


def test_span_of_one_removes_the_axis() -> None:
    spans = SpanMap((3, 3))
    spans.set_span((0, 0), column_span=2)
    spans.set_span((0, 0), row_span=2)
    assert spans.get_span((0, 0)) == (2, 2)
    spans.set_span((0, 0), column_span=1)
    assert spans.get_span((0, 0)) == (1, 2)
    spans.set_span((0, 0), row_span=1)
    assert spans.get_span((0, 0)) is None
    assert len(spans) == 0


def test_overlapping_span_is_cleared() -> None:
    spans = SpanMap((3, 3))
    spans.set_span((0, 0), row_span=3)
    spans.set_span((1, 0), column_span=2)
    assert spans.get_span((0, 0)) is None
    assert spans.get_span((1, 0)) == (2, 1)
    assert spans.is_visible((0, 0))


def test_out_of_bounds_span_raises() -> None:
    spans = SpanMap((2, 2))
    with pytest.raises(PositionError):
        spans.set_span((2, 0), column_span=2)
    with pytest.raises(PositionError):
        spans.get_span((0, 5))


def test_reshape_drops_and_clamps() -> None:
    spans = SpanMap((4, 4))
    spans.set_span((0, 0), column_span=4)
    spans.set_span((3, 3), row_span=1, column_span=1)
    spans.set_span((2, 1), row_span=2)
    spans.reshape((2, 2))
    assert list(spans) == [(Position(0, 0), (2, 1))]


def test_iteration_is_sorted() -> None:
    spans = SpanMap((3, 3))
    spans.set_span((2, 0), column_span=2)
    spans.set_span((0, 1), column_span=2)
    assert [anchor for anchor, _ in spans] == [Position(0, 1), Position(2, 0)]
    assert dict(spans.column_spans()) == {Position(0, 1): 2, Position(2, 0): 2}
    assert list(spans.row_spans()) == []


def test_clearing_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="vtgrid.config.spans")
    spans = SpanMap((2, 2))
    spans.set_span((0, 0), column_span=2)
    spans.set_span((0, 1), row_span=2)
    assert "cleared" in caplog.text
