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
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Callable

from vtgrid.records.matrix import CellMatrix
from vtgrid.config.config import GridConfig
from vtgrid.config.spans import SpanMap
from vtgrid.video.borders import BorderResolver
from vtgrid.video.content import cell_lines, content_width

_log = logging.getLogger(__name__)


class Dimension(NamedTuple):
    """Column widths and row heights of a grid, without grid lines."""
    widths: tuple[int, ...]
    heights: tuple[int, ...]

    def total_width(self, resolver: BorderResolver) -> int:
        return sum(self.widths) + resolver.count_vertical(0, len(self.widths) + 1)

    def total_height(self, resolver: BorderResolver) -> int:
        return sum(self.heights) + resolver.count_horizontal(0, len(self.heights) + 1)


def _distribute(sizes: list[int], start: int, span: int, need: int, lines: int) -> int:
    """
    Widen ``sizes[start:start + span]`` so that their sum plus the `lines` between them is at least `need`.
    The first size receives the remainder of the division.

    :return: the shortfall that was distributed
    """
    have = sum(sizes[start:start + span]) + lines
    if need <= have:
        return 0
    base, remainder = divmod(need - have, span)
    sizes[start] += base + remainder
    for i in range(start + 1, start + span):
        sizes[i] += base
    return need - have


class DimensionEstimator:
    """
    Calculates the :class:`Dimension` of a grid.

    First the width of each column (height of each row) is the maximum of the required sizes of the visible cells
    that do not span on the axis. Then the spans are processed in ascending order of their size (ties by anchor
    position): if the covered columns (rows) together with the grid lines between them are too small for the
    spanned cell, the shortfall is distributed evenly over the covered columns (rows), the first one receives the
    remainder.

    With `workers` greater than 1, the cells are measured column by column in a thread pool; the span
    pass waits for all results. The result is the same as the sequential one.
    """

    workers: int | None

    __slots__ = ('workers',)

    def __init__(self, workers: int = None):
        self.workers = workers

    def estimate(self,
                 matrix: CellMatrix,
                 spans: SpanMap,
                 config: GridConfig,
                 resolver: BorderResolver = None) -> Dimension:
        rows, cols = matrix.shape
        if resolver is None:
            resolver = BorderResolver(config, matrix.shape, spans)
        if not (rows and cols):
            return Dimension((0,) * cols, (0,) * rows)

        def measure_column(c: int) -> list[tuple[int, int] | None]:
            column = list()
            for r in range(rows):
                if spans.is_visible((r, c)):
                    lines = cell_lines(matrix, config, (r, c))
                    padding = config.padding.get((r, c))
                    column.append((content_width(lines) + padding.horizontal, len(lines) + padding.vertical))
                else:
                    column.append(None)
            return column

        # (width, height) required by each visible cell, column by column
        sizes = self._first_pass(measure_column, cols)

        widths = [max((size[0] for r, size in enumerate(sizes[c])
                       if size and spans.extent((r, c))[0] == 1), default=0) for c in range(cols)]
        heights = [max((sizes[c][r][1] for c in range(cols)
                        if sizes[c][r] and spans.extent((r, c))[1] == 1), default=0) for r in range(rows)]

        for anchor, span in sorted(spans.column_spans(), key=lambda s: (s[1], s[0].col, s[0].row)):
            lines = resolver.count_vertical(anchor.col + 1, anchor.col + span)
            if shortfall := _distribute(widths, anchor.col, span, sizes[anchor.col][anchor.row][0], lines):
                _log.debug("column span %r x%d widened columns %d..%d by %d",
                           anchor, span, anchor.col, anchor.col + span - 1, shortfall)

        for anchor, span in sorted(spans.row_spans(), key=lambda s: (s[1], s[0].row, s[0].col)):
            lines = resolver.count_horizontal(anchor.row + 1, anchor.row + span)
            if shortfall := _distribute(heights, anchor.row, span, sizes[anchor.col][anchor.row][1], lines):
                _log.debug("row span %r x%d heightened rows %d..%d by %d",
                           anchor, span, anchor.row, anchor.row + span - 1, shortfall)

        return Dimension(tuple(widths), tuple(heights))

    def _first_pass(self, func: Callable[[int], list], n: int) -> list[list]:
        if self.workers and self.workers > 1 and n > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                return list(pool.map(func, range(n)))
        return [func(i) for i in range(n)]


def estimate(matrix: CellMatrix,
             spans: SpanMap,
             config: GridConfig,
             resolver: BorderResolver = None,
             workers: int = None) -> Dimension:
    """Shortcut for ``DimensionEstimator(workers).estimate(...)``."""
    return DimensionEstimator(workers).estimate(matrix, spans, config, resolver)
