# MIT License
#
# Copyright (c) 2023 Adrian F. Hoefflin [srccircumflex]
#
# Permission is hereby granted, free of chunk, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#

from __future__ import annotations

import logging
from typing import Iterator

from vtgrid.exceptions import PositionError
from vtgrid.records.matrix import Position

_log = logging.getLogger(__name__)


def _normalize(anchor: int, span: int, bound: int) -> tuple[int, int]:
    """
    -> (anchor, span)

    0 extends to `bound`; a negative span extends towards 0 by shifting the anchor.
    """
    if span == 0:
        span = bound - anchor
    elif span < 0:
        new_anchor = max(0, anchor + span)
        span = anchor - new_anchor + 1
        anchor = new_anchor
    return anchor, max(1, min(span, bound - anchor))


class SpanMap:
    """
    Merged cell areas of the grid.

    A span is stored under its anchor position (the top-left position of the area) as
    ``(column_span, row_span)``. All other positions in the area are hidden; they are resolved to the anchor via an
    index that is rebuilt on every change.

    >>> spans = SpanMap((4, 5))
    >>> spans.set_span((1, 2), column_span=2, row_span=2)
    ...     |col0 |col1 |col2 |col3 |col4 |
    ... row0│     │     │     │     │     │
    ... row1│     │     │ ANCHOR    │     │
    ... row2│     │     │ hidden    │     │
    ... row3│     │     │     │     │     │
    >>> spans.get_span((1, 2)), spans.anchor_of((2, 3)), spans.is_visible((2, 3))
    ... ((2, 2), Position(row=1, col=2), False)
    """

    count_rows: int
    count_columns: int

    __revision__: int

    _spans: dict[Position, tuple[int, int]]
    _hidden: dict[Position, Position]

    def __init__(self, shape: tuple[int, int] = (0, 0)):
        self.count_rows, self.count_columns = shape
        self._spans = dict()
        self._hidden = dict()
        self.__revision__ = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.count_rows, self.count_columns

    def _check(self, pos: tuple[int, int]) -> Position:
        if not (0 <= pos[0] < self.count_rows and 0 <= pos[1] < self.count_columns):
            raise PositionError("Position %r outside of the span map %r." % (tuple(pos), self.shape))
        return Position(*pos)

    def _rebuild(self) -> None:
        self._hidden = dict()
        for anchor, (cspan, rspan) in self._spans.items():
            for r in range(anchor.row, anchor.row + rspan):
                for c in range(anchor.col, anchor.col + cspan):
                    if (r, c) != anchor:
                        self._hidden[Position(r, c)] = anchor
        self.__revision__ += 1

    def reshape(self, shape: tuple[int, int]) -> None:
        """
        Adapt the map to a new matrix shape: spans with an anchor outside the shape are dropped, the others are
        clamped to the bounds.
        """
        self.count_rows, self.count_columns = shape
        spans = dict()
        for anchor, (cspan, rspan) in self._spans.items():
            if anchor.row < self.count_rows and anchor.col < self.count_columns:
                cspan = min(cspan, self.count_columns - anchor.col)
                rspan = min(rspan, self.count_rows - anchor.row)
                if (cspan, rspan) != (1, 1):
                    spans[anchor] = (cspan, rspan)
        self._spans = spans
        self._rebuild()

    def _area(self, anchor: Position, cspan: int, rspan: int) -> tuple[range, range]:
        return range(anchor.row, anchor.row + rspan), range(anchor.col, anchor.col + cspan)

    @staticmethod
    def _intersects(a: tuple[range, range], b: tuple[range, range]) -> bool:
        return (a[0].start < b[0].stop and b[0].start < a[0].stop
                and a[1].start < b[1].stop and b[1].start < a[1].stop)

    def set_span(self, pos: tuple[int, int], column_span: int = None, row_span: int = None) -> Position:
        """
        Merge the area starting at `pos`.

        A span of ``0`` extends the area to the last column/row, a negative span extends the area to the left/top
        by moving the anchor (the new anchor is returned). A span of ``1`` removes the span on that axis and ``None``
        keeps the current value of the axis. Spans exceeding the bounds are clamped.

        Existing spans whose area intersects the new area are removed before (for each existing anchor the
        column span and the row span are considered separately; if the remaining area still intersects, the
        span is removed entirely).

        :raises PositionError: `pos` outside the map.
        """
        pos = self._check(pos)
        cur_cspan, cur_rspan = self._spans.get(pos, (1, 1))
        col, cspan = _normalize(pos.col, cur_cspan if column_span is None else column_span, self.count_columns)
        row, rspan = _normalize(pos.row, cur_rspan if row_span is None else row_span, self.count_rows)
        anchor = Position(row, col)

        self._spans.pop(pos, None)
        area = self._area(anchor, cspan, rspan)
        for other, (o_cspan, o_rspan) in list(self._spans.items()):
            if not self._intersects(area, self._area(other, o_cspan, o_rspan)):
                continue
            if o_cspan > 1 and self._intersects(area, self._area(other, o_cspan, 1)):
                o_cspan = 1
            if o_rspan > 1 and self._intersects(area, self._area(other, 1, o_rspan)):
                o_rspan = 1
            if self._intersects(area, self._area(other, o_cspan, o_rspan)):
                o_cspan = o_rspan = 1
            _log.debug("span at %r cleared by span at %r", other, anchor)
            if (o_cspan, o_rspan) == (1, 1):
                del self._spans[other]
            else:
                self._spans[other] = (o_cspan, o_rspan)

        if (cspan, rspan) != (1, 1):
            self._spans[anchor] = (cspan, rspan)
        self._rebuild()
        return anchor

    def remove_span(self, pos: tuple[int, int]) -> None:
        if self._spans.pop(self._check(pos), None):
            self._rebuild()

    def clear(self) -> None:
        self._spans.clear()
        self._rebuild()

    def get_span(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        """
        -> (column_span, row_span) of the anchor `pos` or ``None`` if no span is anchored there.

        :raises PositionError: `pos` outside the map.
        """
        return self._spans.get(self._check(pos))

    def extent(self, pos: tuple[int, int]) -> tuple[int, int]:
        """-> (column_span, row_span); ``(1, 1)`` for positions without a span."""
        return self._spans.get(Position(*pos), (1, 1))

    def anchor_of(self, pos: tuple[int, int]) -> Position:
        """The anchor of the span hiding `pos`, or `pos` itself."""
        pos = Position(*pos)
        return self._hidden.get(pos, pos)

    def is_visible(self, pos: tuple[int, int]) -> bool:
        return Position(*pos) not in self._hidden

    def is_spanned(self, pos: tuple[int, int]) -> bool:
        """Whether `pos` is part of a span area (anchor or hidden)."""
        pos = Position(*pos)
        return pos in self._spans or pos in self._hidden

    def is_covered_by_column_span(self, pos: tuple[int, int]) -> bool:
        """Hidden in the anchor row, right of the anchor."""
        anchor = self._hidden.get(pos := Position(*pos))
        return anchor is not None and anchor.row == pos.row

    def is_covered_by_row_span(self, pos: tuple[int, int]) -> bool:
        """Hidden in the anchor column, below the anchor."""
        anchor = self._hidden.get(pos := Position(*pos))
        return anchor is not None and anchor.col == pos.col

    def is_covered_by_both_spans(self, pos: tuple[int, int]) -> bool:
        """Hidden below and right of the anchor."""
        anchor = self._hidden.get(pos := Position(*pos))
        return anchor is not None and anchor.row != pos.row and anchor.col != pos.col

    def column_spans(self) -> Iterator[tuple[Position, int]]:
        for anchor, (cspan, _) in self._spans.items():
            if cspan > 1:
                yield anchor, cspan

    def row_spans(self) -> Iterator[tuple[Position, int]]:
        for anchor, (_, rspan) in self._spans.items():
            if rspan > 1:
                yield anchor, rspan

    def __iter__(self) -> Iterator[tuple[Position, tuple[int, int]]]:
        return iter(sorted(self._spans.items()))

    def __len__(self) -> int:
        return self._spans.__len__()

    def __bool__(self) -> bool:
        return bool(self._spans)

    def __repr__(self) -> str:
        return "<%s %r %r>" % (self.__class__.__name__, self.shape, dict(self))
