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

from vtgrid.exceptions import GeometrieError
from vtgrid.iodata.sgr import Color
from vtgrid.records.matrix import CellMatrix, CellLine, Position
from vtgrid.config.config import GridConfig
from vtgrid.config.spans import SpanMap
from vtgrid.video.borders import BorderResolver
from vtgrid.video.dimension import Dimension
from vtgrid.video.content import cell_lines, content_width

_log = logging.getLogger(__name__)


class _Line:
    """Output line under construction; adjacent segments of the same color share one prefix/suffix pair."""

    __slots__ = ('parts', 'color', 'run')

    def __init__(self):
        self.parts = list()
        self.color = None
        self.run = str()

    def push(self, text: str, color: Color | None = None) -> None:
        if not text:
            return
        if color != self.color:
            self._flush()
            self.color = color
        self.run += text

    def _flush(self) -> None:
        if self.run:
            self.parts.append(self.color.wrap(self.run) if self.color else self.run)
        self.run = str()

    def build(self) -> str:
        self._flush()
        return str().join(self.parts)


class Renderer:
    """
    Writes a grid as text.

    The logical rows are walked once; a row emits the horizontal grid line above it (if it exists) followed by
    exactly ``heights[row]`` content lines. A content line consists of the vertical grid line glyphs and the lines
    of the cells between them; cells of a row span continue their text in the following rows and across the
    horizontal grid lines inside the span.

    The cell line is composed of the left padding, the aligned text in the remaining width filled with the
    justification character and the right padding. Rows of a cell that are not occupied by text are filled
    according to the vertical alignment (``"top"``: blank lines below, ``"bottom"``: above, ``"center"``: split,
    the odd line below).

    :raises GeometrieError: the `dimension` does not fit the matrix or is too narrow for the content.
    """

    matrix: CellMatrix
    config: GridConfig
    spans: SpanMap
    dimension: Dimension
    resolver: BorderResolver

    _cell_lines: dict[Position, tuple[CellLine, ...]]

    def __init__(self,
                 matrix: CellMatrix,
                 config: GridConfig,
                 dimension: Dimension,
                 resolver: BorderResolver = None,
                 spans: SpanMap = None):
        self.matrix = matrix
        self.config = config
        self.spans = config.spans if spans is None else spans
        self.dimension = dimension
        self.resolver = resolver or BorderResolver(config, matrix.shape, self.spans)
        if len(dimension.widths) != matrix.count_columns:
            raise GeometrieError("Number of column widths (%d) does not match the number of columns (%d)." %
                                 (len(dimension.widths), matrix.count_columns))
        if len(dimension.heights) != matrix.count_rows:
            raise GeometrieError("Number of row heights (%d) does not match the number of rows (%d)." %
                                 (len(dimension.heights), matrix.count_rows))
        self._cell_lines = dict()

    def render(self) -> str:
        rows, cols = self.matrix.shape
        if not (rows and cols):
            return ""
        lines = list()
        for row in range(rows):
            if self.resolver.has_horizontal(row):
                lines.append(self._split_line(row))
            for i in range(self.dimension.heights[row]):
                lines.append(self._content_line(row, i))
        if self.resolver.has_horizontal(rows):
            lines.append(self._split_line(rows))
        if self.config.margin:
            lines = self.config.margin.wrap(lines, self.dimension.total_width(self.resolver))
        _log.debug("rendered %dx%d grid into %d lines", rows, cols, len(lines))
        return "\n".join(lines)

    def _lines_of(self, pos: Position) -> tuple[CellLine, ...]:
        try:
            return self._cell_lines[pos]
        except KeyError:
            lines = self._cell_lines[pos] = cell_lines(self.matrix, self.config, pos)
            return lines

    def span_width(self, pos: Position) -> int:
        """Width of the area of `pos` including the vertical grid lines inside."""
        cspan = self.spans.extent(pos)[0]
        return (sum(self.dimension.widths[pos.col:pos.col + cspan])
                + self.resolver.count_vertical(pos.col + 1, pos.col + cspan))

    def span_height(self, pos: Position) -> int:
        """Height of the area of `pos` including the horizontal grid lines inside."""
        rspan = self.spans.extent(pos)[1]
        return (sum(self.dimension.heights[pos.row:pos.row + rspan])
                + self.resolver.count_horizontal(pos.row + 1, pos.row + rspan))

    def _glyph(self, line: _Line, glyph: str | None, color: Color | None, n: int = 1) -> None:
        if glyph is None:
            line.push(self.config.missing_char * n)
        else:
            line.push(glyph * n, color)

    def _vertical(self, line: _Line, row: int, col: int, i: int) -> None:
        if self.resolver.has_offsets(row, col, vertical=True):
            self._glyph(line, *self.resolver.vertical_at(row, col, i, self.dimension.heights[row]))
        else:
            self._glyph(line, *self.resolver.vertical(row, col))

    def _content_line(self, row: int, i: int) -> str:
        line = _Line()
        col = 0
        while col < self.matrix.count_columns:
            anchor = self.spans.anchor_of((row, col))
            if self.resolver.has_vertical(col):
                self._vertical(line, row, col, i)
            if anchor.row == row:
                index = i
            else:
                index = (sum(self.dimension.heights[anchor.row:row])
                         + self.resolver.count_horizontal(anchor.row + 1, row + 1) + i)
            self._cell_line(line, anchor, index)
            col = anchor.col + self.spans.extent(anchor)[0]
        if self.resolver.has_vertical(col):
            self._vertical(line, row, col, i)
        return line.build()

    def _split_line(self, row: int) -> str:
        line = _Line()
        if self.resolver.has_vertical(0):
            self._glyph(line, *self.resolver.intersection(row, 0))
        col = 0
        while col < self.matrix.count_columns:
            if self.resolver.has_horizontal(row, col):
                width = self.dimension.widths[col]
                if self.resolver.has_offsets(row, col):
                    for i in range(width):
                        self._glyph(line, *self.resolver.horizontal_at(row, col, i, width))
                else:
                    self._glyph(line, *self.resolver.horizontal(row, col), n=width)
                col += 1
            else:
                # the grid line crosses a row span
                anchor = self.spans.anchor_of((row, col))
                index = (sum(self.dimension.heights[anchor.row:row])
                         + self.resolver.count_horizontal(anchor.row + 1, row))
                self._cell_line(line, anchor, index)
                col = anchor.col + self.spans.extent(anchor)[0]
            if self.resolver.has_vertical(col):
                self._glyph(line, *self.resolver.intersection(row, col))
        return line.build()

    def _cell_line(self, line: _Line, pos: Position, index: int) -> None:
        """Write line `index` of the area of `pos`."""
        config = self.config
        width = self.span_width(pos)
        height = self.span_height(pos)
        padding = config.padding.get(pos)
        if (inner := width - padding.horizontal) < 0:
            raise GeometrieError("Width %d of %r is smaller than its padding." % (width, pos))
        if index < padding.top.size:
            line.push(padding.top.fill * width, padding.top.color)
            return
        if index >= height - padding.bottom.size:
            line.push(padding.bottom.fill * width, padding.bottom.color)
            return

        lines = self._lines_of(pos)
        available = height - padding.vertical
        count = min(len(lines), available)
        alignment = config.alignment_vertical.get(pos)
        if alignment == "bottom":
            indent = available - count
        elif alignment == "center":
            indent = (available - count) // 2
        else:
            indent = 0

        justification = config.justification.get(pos)
        line.push(padding.left.fill * padding.left.size, padding.left.color)
        if 0 <= (k := index - padding.top.size - indent) < count:
            text = lines[k]
            if text.width > inner:
                raise GeometrieError("Line of width %d does not fit into the width %d of %r." %
                                     (text.width, inner, pos))
            if config.formatting.get(pos).allow_lines_alignment:
                block = text.width
            else:
                block = content_width(lines)
            space = max(0, inner - block)
            alignment = config.alignment_horizontal.get(pos)
            if alignment == "right":
                left = space
            elif alignment == "center":
                left = space // 2
            else:
                left = 0
            line.push(justification.fill * left, justification.color)
            line.push(text.text, config.colors.get(pos))
            line.push(justification.fill * (inner - left - text.width), justification.color)
        else:
            line.push(justification.fill * inner, justification.color)
        line.push(padding.right.fill * padding.right.size, padding.right.color)


def render(matrix: CellMatrix,
           spans: SpanMap,
           dimension: Dimension,
           borders: BorderResolver,
           config: GridConfig) -> str:
    """Render the `matrix` with the geometry `dimension` and the grid lines resolved by `borders`."""
    return Renderer(matrix, config, dimension, borders, spans).render()
