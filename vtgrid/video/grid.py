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

from typing import Iterable, Iterator, Literal, NamedTuple, Callable

from vtgrid.records.matrix import CellMatrix, Cell, Position
from vtgrid.iodata.width import WidthFunc
from vtgrid.config.config import GridConfig
from vtgrid.config.spans import SpanMap
from vtgrid.video.borders import BorderResolver
from vtgrid.video.dimension import Dimension, DimensionEstimator
from vtgrid.video.render import Renderer


class VisualTarget(NamedTuple):
    """
    Result of :meth:`Grid.get_visualtarget`.

    `kind` is ``"cell"`` when the coordinate is on the content (or padding) of a cell, then `position` is the
    position of the cell (the anchor for spans) and `coord_in_cell` the ``(x, y)`` coordinate relative to the top left
    of the cell area. Otherwise, `kind` is ``"border"``, ``"margin"`` or ``"outside"``.
    """
    coord: tuple[int, int]
    kind: Literal["cell", "border", "margin", "outside"]
    position: Position | None = None
    coord_in_cell: tuple[int, int] | None = None


class _AxisEntry(NamedTuple):
    start: int
    stop: int
    kind: Literal["cell", "line"]
    index: int


def _axis(sizes: tuple[int, ...], has_line: Callable[[int], bool]) -> list[_AxisEntry]:
    """Character ranges of the rows/columns and grid lines of an axis."""
    entries = list()
    p = 0
    for i, size in enumerate(sizes):
        if has_line(i):
            entries.append(_AxisEntry(p, p := p + 1, "line", i))
        if size:
            entries.append(_AxisEntry(p, p := p + size, "cell", i))
    if has_line(len(sizes)):
        entries.append(_AxisEntry(p, p + 1, "line", len(sizes)))
    return entries


def _search(axis: list[_AxisEntry], val: int) -> _AxisEntry | None:

    def __search(start: int, stop: int):
        if stop >= start:

            mid = (start + stop) // 2
            entry = axis[mid]

            if val >= entry.start:
                if val < entry.stop:
                    return entry
                else:
                    return __search(mid + 1, stop)
            else:
                return __search(start, mid - 1)
        else:
            return

    return __search(0, len(axis) - 1)


class Grid:
    """
    A table of text cells with its settings.

    The grid owns the :class:`CellMatrix` built from `rows` (any iterable of iterables of strings, consumed once)
    and the :class:`GridConfig`. The :class:`Dimension` is estimated on demand and kept until the matrix or the
    configuration is changed (both count their changes in ``__revision__``).

    >>> grid = Grid([["a", "bb"], ["ccc", "d"]])
    >>> grid.config.set_padding(Entity.GLOBAL, Sides.new(left=1, right=1))
    >>> print(grid.render())
    ... +-----+----+
    ... | a   | bb |
    ... +-----+----+
    ... | ccc | d  |
    ... +-----+----+
    """

    matrix: CellMatrix
    config: GridConfig
    estimator: DimensionEstimator

    _dimension: tuple[tuple, Dimension] | None

    def __init__(self,
                 rows: Iterable[Iterable[str]] = (),
                 config: GridConfig = None,
                 widthfunc: WidthFunc = None,
                 workers: int = None):
        self.matrix = CellMatrix(rows, widthfunc)
        self.config = config or GridConfig()
        self.config.spans.reshape(self.matrix.shape)
        self.estimator = DimensionEstimator(workers)
        self._dimension = None

    @property
    def spans(self) -> SpanMap:
        return self.config.spans

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape

    def _revision(self) -> tuple:
        return self.matrix.__revision__, self.config.revision

    @property
    def dimension(self) -> Dimension:
        """The cached :class:`Dimension`, estimated again after changes."""
        rev = self._revision()
        if self._dimension is None or self._dimension[0] != rev:
            self._dimension = rev, self.estimator.estimate(self.matrix, self.spans, self.config, self.resolver())
        return self._dimension[1]

    def invalidate(self) -> None:
        """Drop the cached dimension."""
        self._dimension = None

    def resolver(self) -> BorderResolver:
        return BorderResolver(self.config, self.shape, self.spans)

    def render(self) -> str:
        resolver = self.resolver()
        return Renderer(self.matrix, self.config, self.dimension, resolver, self.spans).render()

    def set_text(self, pos: tuple[int, int], text: str) -> None:
        """
        :raises PositionError: `pos` outside the grid.
        """
        self.matrix.set_text(pos, text)

    def get_text(self, pos: tuple[int, int]) -> str:
        return self.matrix.text(pos)

    def set_widthfunc(self, widthfunc: WidthFunc) -> None:
        self.matrix.set_widthfunc(widthfunc)

    def set_span(self, pos: tuple[int, int], column_span: int = None, row_span: int = None) -> Position:
        """
        Merge the area starting at `pos` (see :meth:`SpanMap.set_span`). If a negative span moves the anchor, the
        text of `pos` is moved to the new anchor.

        :return: the anchor of the span
        :raises PositionError: `pos` outside the grid.
        """
        anchor = self.spans.set_span(pos, column_span, row_span)
        if anchor != tuple(pos):
            self.matrix.set_text(anchor, self.matrix.text(pos))
        return anchor

    def get_span(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        return self.spans.get_span(pos)

    #                                   w/x  h/y
    def get_visualtarget(self, x: int, y: int) -> VisualTarget:
        """
        Translates a character coordinate within the rendered output (0-based, margin included) to
        :class:`VisualTarget`.
        """
        resolver = self.resolver()
        dimension = self.dimension
        margin = self.config.margin
        width = dimension.total_width(resolver)
        height = dimension.total_height(resolver)
        _x = x - margin.expanse_E
        _y = y - margin.expanse_N

        if not (0 <= _x < width and 0 <= _y < height):
            if (0 <= x < width + margin.expanse_E + margin.expanse_O
                    and 0 <= y < height + margin.expanse_N + margin.expanse_S):
                return VisualTarget((x, y), "margin")
            return VisualTarget((x, y), "outside")

        x_axis = _axis(dimension.widths, resolver.has_vertical)
        y_axis = _axis(dimension.heights, resolver.has_horizontal)
        x_entry = _search(x_axis, _x)
        y_entry = _search(y_axis, _y)

        if x_entry.kind == "cell" and y_entry.kind == "cell":
            anchor = self.spans.anchor_of((y_entry.index, x_entry.index))
        elif x_entry.kind == "cell":
            anchor = self._crossed(y_entry.index - 1, x_entry.index, y_entry.index, x_entry.index)
        elif y_entry.kind == "cell":
            anchor = self._crossed(y_entry.index, x_entry.index - 1, y_entry.index, x_entry.index)
        else:
            anchor = self._crossed(y_entry.index - 1, x_entry.index - 1, y_entry.index, x_entry.index)
        if anchor is None:
            return VisualTarget((x, y), "border")

        x_start = sum(dimension.widths[:anchor.col]) + resolver.count_vertical(0, anchor.col + 1)
        y_start = sum(dimension.heights[:anchor.row]) + resolver.count_horizontal(0, anchor.row + 1)
        return VisualTarget((x, y), "cell", anchor, (_x - x_start, _y - y_start))

    def _crossed(self, r0: int, c0: int, r1: int, c1: int) -> Position | None:
        """The anchor if all positions of the rectangle are inside the same span, otherwise ``None``."""
        rows, cols = self.shape
        if not (0 <= r0 and 0 <= c0 and r1 < rows and c1 < cols):
            return None
        anchors = {self.spans.anchor_of((r, c)) for r in range(r0, r1 + 1) for c in range(c0, c1 + 1)}
        if len(anchors) == 1:
            return anchors.pop()
        return None

    def get_cell(self, row: int, column: int) -> Cell:
        return self.matrix.get((row, column))

    def __getitem__(self, item: int) -> list[Cell]:
        return self.matrix.__getitem__(item)

    def __iter__(self) -> Iterator[list[Cell]]:
        return self.matrix.__iter__()

    def __len__(self) -> int:
        return self.matrix.__len__()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return str().join(str().join("%-20r" % c.text for c in row) + "\n" for row in self.matrix)
