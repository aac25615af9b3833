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

from typing import NamedTuple, Iterable, Iterator

from vtgrid.exceptions import PositionError
from vtgrid.iodata.width import WidthFunc, PlainWidth


class Position(NamedTuple):
    row: int
    col: int


class CellLine(NamedTuple):
    text: str
    width: int


class Cell:
    """
    Text of a grid position.

    The text is split into lines lazily on the first access of ``lines``/``width``; each line is stored as it is
    written to the output (expanded by the width function) together with its display width.
    """

    text: str
    widthfunc: WidthFunc

    _lines: tuple[CellLine, ...] | None

    __slots__ = ('text', 'widthfunc', '_lines')

    def __init__(self, text: str, widthfunc: WidthFunc):
        self.text = text
        self.widthfunc = widthfunc
        self._lines = None

    @property
    def lines(self) -> tuple[CellLine, ...]:
        if self._lines is None:
            self._lines = tuple(
                CellLine(self.widthfunc.expand(ln), self.widthfunc.line_width(ln)) for ln in self.text.split("\n")
            )
        return self._lines

    @property
    def width(self) -> int:
        """Display width of the widest line."""
        return max(ln.width for ln in self.lines)

    @property
    def height(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self.text)


class CellMatrix:
    """
    Row-major two-dimensional collection of :class:`Cell`'s.

    The `rows` are consumed once; they can be any (also lazy) iterable of iterables of strings. Rows shorter than
    the longest row are filled up with empty cells. The `widthfunc` defines how the display width of the texts is
    measured (:class:`PlainWidth` by default).

    Every mutation increments ``__revision__``, which is used by :class:`vtgrid.video.grid.Grid` to invalidate
    derived geometry.
    """

    widthfunc: WidthFunc
    count_rows: int
    count_columns: int

    __revision__: int

    _rows: list[list[Cell]]

    def __init__(self, rows: Iterable[Iterable[str]] = (), widthfunc: WidthFunc = None):
        self.widthfunc = widthfunc or PlainWidth()
        self._rows = [[Cell(str(text), self.widthfunc) for text in row] for row in rows]
        self.count_rows = len(self._rows)
        self.count_columns = max((len(row) for row in self._rows), default=0)
        for row in self._rows:
            row.extend(Cell("", self.widthfunc) for _ in range(self.count_columns - len(row)))
        self.__revision__ = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.count_rows, self.count_columns

    def _check(self, pos: tuple[int, int]) -> None:
        if not (0 <= pos[0] < self.count_rows and 0 <= pos[1] < self.count_columns):
            raise PositionError("Position %r outside of the matrix %r." % (tuple(pos), self.shape))

    def get(self, pos: tuple[int, int]) -> Cell:
        """
        :raises PositionError: `pos` outside the matrix.
        """
        self._check(pos)
        return self._rows[pos[0]][pos[1]]

    def text(self, pos: tuple[int, int]) -> str:
        return self.get(pos).text

    def set_text(self, pos: tuple[int, int], text: str) -> None:
        """
        :raises PositionError: `pos` outside the matrix.
        """
        self._check(pos)
        self._rows[pos[0]][pos[1]] = Cell(text, self.widthfunc)
        self.__revision__ += 1

    def set_widthfunc(self, widthfunc: WidthFunc) -> None:
        """Change the width measurement; all lines are measured again on the next access."""
        self.widthfunc = widthfunc
        self._rows = [[Cell(cell.text, widthfunc) for cell in row] for row in self._rows]
        self.__revision__ += 1

    def positions(self) -> Iterator[Position]:
        for r in range(self.count_rows):
            for c in range(self.count_columns):
                yield Position(r, c)

    def __getitem__(self, item: int) -> list[Cell]:
        return self._rows.__getitem__(item)

    def __iter__(self) -> Iterator[list[Cell]]:
        return self._rows.__iter__()

    def __len__(self) -> int:
        return self._rows.__len__()

    def __repr__(self) -> str:
        return str().join(str().join("%-20r" % c.text for c in row) + "\n" for row in self._rows)
