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

from typing import Literal

from vtgrid.iodata.sgr import Color
from vtgrid.records.matrix import Position
from vtgrid.config.config import GridConfig
from vtgrid.config.spans import SpanMap
from vtgrid.config.borders import BorderSet, lookup_offset

#              up     down   left   right
_ARM_GLYPHS: dict[tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "intersection",
    (False, True, True, True): "top_intersection",
    (True, False, True, True): "bottom_intersection",
    (True, True, False, True): "left_intersection",
    (True, True, True, False): "right_intersection",
    (False, True, False, True): "top_left",
    (False, True, True, False): "top_right",
    (True, False, False, True): "bottom_left",
    (True, False, True, False): "bottom_right",
}


class BorderResolver:
    """
    Decides the glyph and color of every grid line segment and intersection.

    Grid lines are indexed from the top (horizontal lines ``0 .. count_rows``) and from the left (vertical lines
    ``0 .. count_columns``); the horizontal line `n` lies above row `n`, the vertical line `n` left of column `n`.
    Whether a line exists is decided once for the whole grid (it does not depend on the dimension), a line exists
    if any setting places a glyph on it.

    The glyph of a segment is resolved with the priority:
        1. single position override of the config
        2. segments inside a span are suppressed (``None``)
        3. glyph of the :class:`BorderSet`'s of the adjacent cells (span anchors), the cell above/left wins over the
           cell below/right
        4. per line glyphs and the :class:`Borders` template

    Colors follow the same owners; without a cell border color the color template of the config
    (:attr:`GridConfig.borders_color`) is selected by the location like a glyph of the :class:`Borders` template,
    the default border color comes last. Characters and colors placed at an :class:`Offset` within a segment are
    applied on top of that, per character, if the segment is drawn.

    Template glyphs of intersections at the edge of a span are corrected to the glyph that connects the segments
    actually drawn around them:

    >>> grid.set_span((0, 0), column_span=2)
    ...  without correction     corrected
    ...  ┌─────┬─────┐          ┌───────────┐
    ...  │ spanned   │          │ spanned   │
    ...  ├─────┼─────┤          ├─────┬─────┤
    ...  │     │     │          │     │     │
    ...  └─────┴─────┘          └─────┴─────┘
    """

    config: GridConfig
    spans: SpanMap
    count_rows: int
    count_columns: int

    _horizontal_lines: frozenset[int]
    _vertical_lines: frozenset[int]

    #                                                h/y  w/x
    def __init__(self, config: GridConfig, shape: tuple[int, int], spans: SpanMap = None):
        self.config = config
        self.spans = config.spans if spans is None else spans
        self.count_rows, self.count_columns = shape
        self._horizontal_lines, self._vertical_lines = self._collect_lines()

    def _collect_lines(self) -> tuple[frozenset[int], frozenset[int]]:
        rows, cols = self.count_rows, self.count_columns
        if not (rows and cols):
            return frozenset(), frozenset()
        config = self.config
        borders = config.borders
        horizontal = set()
        vertical = set()
        if borders.has_top():
            horizontal.add(0)
        if borders.has_bottom():
            horizontal.add(rows)
        if borders.has_horizontal():
            horizontal.update(range(1, rows))
        if borders.has_left():
            vertical.add(0)
        if borders.has_right():
            vertical.add(cols)
        if borders.has_vertical():
            vertical.update(range(1, cols))
        horizontal.update(line for line in config.horizontal_lines if line <= rows)
        vertical.update(line for line in config.vertical_lines if line <= cols)
        for r, c in config.horizontal_overrides:
            if r <= rows and c < cols:
                horizontal.add(r)
        for r, c in config.vertical_overrides:
            if r < rows and c <= cols:
                vertical.add(c)
        for r, c in config.intersection_overrides:
            if r <= rows and c <= cols:
                horizontal.add(r)
                vertical.add(c)
        for entity, border in config.border_sets.items():
            for pos in entity.positions(self.shape):
                if not self.spans.is_visible(pos):
                    continue
                cspan, rspan = self.spans.extent(pos)
                r, c = pos
                if border.top or border.top_left or border.top_right:
                    horizontal.add(r)
                if border.bottom or border.bottom_left or border.bottom_right:
                    horizontal.add(r + rspan)
                if border.left or border.top_left or border.bottom_left:
                    vertical.add(c)
                if border.right or border.top_right or border.bottom_right:
                    vertical.add(c + cspan)
        return frozenset(horizontal), frozenset(vertical)

    @property
    def shape(self) -> tuple[int, int]:
        return self.count_rows, self.count_columns

    def _h_suppressed(self, line: int, col: int) -> bool:
        return 0 < line < self.count_rows and (
                self.spans.anchor_of((line - 1, col)) == self.spans.anchor_of((line, col)))

    def _v_suppressed(self, row: int, line: int) -> bool:
        return 0 < line < self.count_columns and (
                self.spans.anchor_of((row, line - 1)) == self.spans.anchor_of((row, line)))

    def has_horizontal(self, row: int, col: int = None) -> bool:
        """
        Whether the horizontal grid line `row` exists; if `col` is given, whether its segment above column `col`
        is drawn (not inside a span).
        """
        return row in self._horizontal_lines and (col is None or not self._h_suppressed(row, col))

    def has_vertical(self, col: int, row: int = None) -> bool:
        """
        Whether the vertical grid line `col` exists; if `row` is given, whether its segment in row `row` is drawn
        (not inside a span).
        """
        return col in self._vertical_lines and (row is None or not self._v_suppressed(row, col))

    def count_horizontal(self, start: int, stop: int) -> int:
        """Number of existing horizontal lines in ``range(start, stop)``."""
        return sum(1 for line in range(start, stop) if line in self._horizontal_lines)

    def count_vertical(self, start: int, stop: int) -> int:
        """Number of existing vertical lines in ``range(start, stop)``."""
        return sum(1 for line in range(start, stop) if line in self._vertical_lines)

    def _specific(self, pos: Position, field: str) -> str | None:
        for border in self.config.border_sets.specific(pos):
            if (glyph := getattr(border, field)) is not None:
                return glyph
        return None

    def _color(self, owners: list[tuple[Position, str]], location: str) -> Color | None:
        for pos, field in owners:
            for colors in self.config.border_colors.chain(pos):
                if (color := getattr(colors, field)) is not None:
                    return color
        if (color := getattr(self.config.borders_color, location)) is not None:
            return color
        return self.config.border_color

    def _glyph(self, owners: list[tuple[Position, str]]) -> str | None:
        for pos, field in owners:
            if (glyph := self._specific(pos, field)) is not None:
                return glyph
        return None

    @staticmethod
    def _override(override: tuple[str | None, Color | None], glyph: str | None,
                  color: Color | None) -> tuple[str | None, Color | None]:
        return (glyph if override[0] is None else override[0]), (color if override[1] is None else override[1])

    def _horizontal_location(self, line: int) -> str:
        return "top" if line == 0 else "bottom" if line == self.count_rows else "horizontal"

    def _vertical_location(self, line: int) -> str:
        return "left" if line == 0 else "right" if line == self.count_columns else "vertical"

    def _intersection_location(self, row: int, col: int) -> str:
        rows, cols = self.shape
        if row == 0:
            return "top_left" if col == 0 else "top_right" if col == cols else "top_intersection"
        if row == rows:
            return "bottom_left" if col == 0 else "bottom_right" if col == cols else "bottom_intersection"
        return "left_intersection" if col == 0 else "right_intersection" if col == cols else "intersection"

    def _template_horizontal(self, line: int) -> str | None:
        if (hline := self.config.horizontal_lines.get(line)) and hline.main is not None:
            return hline.main
        return getattr(self.config.borders, self._horizontal_location(line))

    def _template_vertical(self, line: int) -> str | None:
        if (vline := self.config.vertical_lines.get(line)) and vline.main is not None:
            return vline.main
        return getattr(self.config.borders, self._vertical_location(line))

    def _template_intersection(self, row: int, col: int) -> str | None:
        rows, cols = self.shape
        if hline := self.config.horizontal_lines.get(row):
            if (glyph := hline.left if col == 0 else hline.right if col == cols else hline.intersection) is not None:
                return glyph
        if vline := self.config.vertical_lines.get(col):
            if (glyph := vline.top if row == 0 else vline.bottom if row == rows else vline.intersection) is not None:
                return glyph
        return getattr(self.config.borders, self._intersection_location(row, col))

    #                                 h/y  w/x
    def horizontal(self, line: int, col: int) -> tuple[str | None, Color | None]:
        """
        -> (glyph, color) of the segment of horizontal grid line `line` above column `col`.
        """
        owners = list()
        if line > 0:
            owners.append((self.spans.anchor_of((line - 1, col)), "bottom"))
        if line < self.count_rows:
            owners.append((self.spans.anchor_of((line, col)), "top"))
        if line not in self._horizontal_lines or self._h_suppressed(line, col):
            glyph = color = None
        else:
            if (glyph := self._glyph(owners)) is None:
                glyph = self._template_horizontal(line)
            color = self._color(owners, self._horizontal_location(line))
        if (override := self.config.horizontal_overrides.get((line, col))) is not None:
            return self._override(override, glyph, color)
        return glyph, color

    def vertical(self, row: int, line: int) -> tuple[str | None, Color | None]:
        """
        -> (glyph, color) of the segment of vertical grid line `line` in row `row`.
        """
        owners = list()
        if line > 0:
            owners.append((self.spans.anchor_of((row, line - 1)), "right"))
        if line < self.count_columns:
            owners.append((self.spans.anchor_of((row, line)), "left"))
        if line not in self._vertical_lines or self._v_suppressed(row, line):
            glyph = color = None
        else:
            if (glyph := self._glyph(owners)) is None:
                glyph = self._template_vertical(line)
            color = self._color(owners, self._vertical_location(line))
        if (override := self.config.vertical_overrides.get((row, line))) is not None:
            return self._override(override, glyph, color)
        return glyph, color

    def has_offsets(self, line: int, index: int, vertical: bool = False) -> bool:
        """
        Whether characters or colors are placed at an :class:`Offset` in the segment of horizontal grid line `line`
        above column `index` (or of vertical grid line `index` in row `line` with `vertical`).
        """
        key = (line, index)
        if vertical:
            return key in self.config.vertical_chars or key in self.config.vertical_colors
        return key in self.config.horizontal_chars or key in self.config.horizontal_colors

    @staticmethod
    def _at(chars: dict, colors: dict, key: tuple[int, int], i: int, length: int,
            glyph: str | None, color: Color | None) -> tuple[str | None, Color | None]:
        if (char := lookup_offset(chars.get(key, {}), i, length)) is not None:
            glyph = char
        if (char_color := lookup_offset(colors.get(key, {}), i, length)) is not None:
            color = char_color
        return glyph, color

    #                                    h/y  w/x
    def horizontal_at(self, line: int, col: int, i: int, length: int) -> tuple[str | None, Color | None]:
        """
        -> (glyph, color) of character `i` of the segment of horizontal grid line `line` above column `col`,
        `length` is the width of the column.
        """
        glyph, color = self.horizontal(line, col)
        if not self.has_horizontal(line, col):
            return glyph, color
        return self._at(self.config.horizontal_chars, self.config.horizontal_colors, (line, col), i, length,
                        glyph, color)

    def vertical_at(self, row: int, line: int, i: int, length: int) -> tuple[str | None, Color | None]:
        """
        -> (glyph, color) of character `i` of the segment of vertical grid line `line` in row `row`, `length` is
        the height of the row.
        """
        glyph, color = self.vertical(row, line)
        if not self.has_vertical(line, row):
            return glyph, color
        return self._at(self.config.vertical_chars, self.config.vertical_colors, (row, line), i, length,
                        glyph, color)

    def _corner(self, anchor: Position, corner: Literal["top_left", "top_right", "bottom_left", "bottom_right"],
                row: int, col: int) -> bool:
        cspan, rspan = self.spans.extent(anchor)
        return (row == (anchor.row + rspan if corner.startswith("bottom") else anchor.row)
                and col == (anchor.col + cspan if corner.endswith("right") else anchor.col))

    def intersection(self, row: int, col: int) -> tuple[str | None, Color | None]:
        """
        -> (glyph, color) of the intersection of horizontal grid line `row` and vertical grid line `col`.
        """
        rows, cols = self.shape
        around = list()
        for r, c, corner in ((row - 1, col - 1, "bottom_right"), (row - 1, col, "bottom_left"),
                             (row, col - 1, "top_right"), (row, col, "top_left")):
            if 0 <= r < rows and 0 <= c < cols:
                around.append((Position(r, c), corner))
        anchors = [self.spans.anchor_of(pos) for pos, _ in around]

        if (row not in self._horizontal_lines or col not in self._vertical_lines
                or (len(anchors) == 4 and len(set(anchors)) == 1)):
            glyph = color = None
        else:
            owners = [(anchor, corner) for anchor, (_, corner) in zip(anchors, around)
                      if self._corner(anchor, corner, row, col)]
            if (glyph := self._glyph(owners)) is None:
                glyph = self._template_intersection(row, col)
                if any(self.spans.is_spanned(pos) for pos, _ in around):
                    glyph = self._corrected(row, col, glyph)
            color = self._color(owners, self._intersection_location(row, col))
        if (override := self.config.intersection_overrides.get((row, col))) is not None:
            return self._override(override, glyph, color)
        return glyph, color

    def _corrected(self, row: int, col: int, glyph: str | None) -> str | None:
        arms = (
            row > 0 and self.has_vertical(col, row - 1),
            row < self.count_rows and self.has_vertical(col, row),
            col > 0 and self.has_horizontal(row, col - 1),
            col < self.count_columns and self.has_horizontal(row, col),
        )
        up, down, left, right = arms
        if field := _ARM_GLYPHS.get(arms):
            corrected = getattr(self.config.borders, field)
        elif left or right:
            corrected = self.horizontal(row, col if right else col - 1)[0]
        elif up or down:
            corrected = self.vertical(row if down else row - 1, col)[0]
        else:
            return None
        return glyph if corrected is None else corrected

    def border_for(self, pos: tuple[int, int]) -> BorderSet:
        """
        The glyphs around the cell at `pos` (around the whole area for a span anchor); empty for hidden positions.
        """
        if not self.spans.is_visible(pos):
            return BorderSet()
        row, col = pos
        cspan, rspan = self.spans.extent(pos)
        return BorderSet(
            top=self.horizontal(row, col)[0],
            bottom=self.horizontal(row + rspan, col)[0],
            left=self.vertical(row, col)[0],
            right=self.vertical(row, col + cspan)[0],
            top_left=self.intersection(row, col)[0],
            top_right=self.intersection(row, col + cspan)[0],
            bottom_left=self.intersection(row + rspan, col)[0],
            bottom_right=self.intersection(row + rspan, col + cspan)[0],
        )
