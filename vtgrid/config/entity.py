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

from typing import NamedTuple, Literal, Generic, TypeVar, Iterator

from vtgrid.exceptions import GridConfigurationError

_T = TypeVar("_T")


class Entity(NamedTuple):
    """
    Scope of a setting: the whole grid, a row, a column or a single cell.

    >>> Entity.GLOBAL
    >>> Entity.row(2)
    >>> Entity.column(0)
    >>> Entity.cell(2, 0)
    """
    kind: Literal["global", "row", "column", "cell"]
    y: int
    x: int

    @staticmethod
    def row(n: int) -> Entity:
        return Entity._new("row", n, 0)

    @staticmethod
    def column(n: int) -> Entity:
        return Entity._new("column", 0, n)

    @staticmethod
    def cell(row: int, column: int) -> Entity:
        return Entity._new("cell", row, column)

    @staticmethod
    def _new(kind: str, y: int, x: int) -> Entity:
        if y < 0 or x < 0:
            raise GridConfigurationError("Negative index in %s entity: %d/%d" % (kind, y, x))
        return Entity(kind, y, x)

    def covers(self, pos: tuple[int, int]) -> bool:
        if self.kind == "global":
            return True
        if self.kind == "row":
            return pos[0] == self.y
        if self.kind == "column":
            return pos[1] == self.x
        return (self.y, self.x) == tuple(pos)

    #                                             h/y  w/x
    def positions(self, shape: tuple[int, int]) -> Iterator[tuple[int, int]]:
        """The positions within `shape` to which the entity applies."""
        rows, cols = shape
        if self.kind == "global":
            for r in range(rows):
                for c in range(cols):
                    yield r, c
        elif self.kind == "row":
            if self.y < rows:
                for c in range(cols):
                    yield self.y, c
        elif self.kind == "column":
            if self.x < cols:
                for r in range(rows):
                    yield r, self.x
        elif self.y < rows and self.x < cols:
            yield self.y, self.x


Entity.GLOBAL = Entity("global", 0, 0)


class EntityMap(Generic[_T]):
    """
    Sparse storage of a setting per :class:`Entity`.

    The value for a position is looked up with the precedence ``cell > row/column > global``. A row and a column
    value apply to the same position at the same precedence level; the one that was set last wins.

    >>> padding = EntityMap(0)
    >>> padding.set(Entity.column(1), 2)
    >>> padding.set(Entity.row(0), 1)
    >>> padding.get((0, 1)), padding.get((1, 1)), padding.get((1, 0))
    ... (1, 2, 0)
    """

    _global: _T
    _rows: dict[int, tuple[int, _T]]
    _columns: dict[int, tuple[int, _T]]
    _cells: dict[tuple[int, int], _T]
    _seq: int

    __slots__ = ('_global', '_rows', '_columns', '_cells', '_seq')

    def __init__(self, default: _T):
        self._global = default
        self._rows = dict()
        self._columns = dict()
        self._cells = dict()
        self._seq = 0

    @property
    def global_value(self) -> _T:
        return self._global

    def set(self, entity: Entity, value: _T) -> None:
        if entity.kind == "global":
            self._global = value
        elif entity.kind == "row":
            self._seq += 1
            self._rows[entity.y] = (self._seq, value)
        elif entity.kind == "column":
            self._seq += 1
            self._columns[entity.x] = (self._seq, value)
        elif entity.kind == "cell":
            self._cells[(entity.y, entity.x)] = value
        else:
            raise GridConfigurationError("Unknown entity kind %r." % (entity.kind,))

    def unset(self, entity: Entity) -> None:
        """Remove a row/column/cell value; the global value cannot be removed."""
        if entity.kind == "row":
            self._rows.pop(entity.y, None)
        elif entity.kind == "column":
            self._columns.pop(entity.x, None)
        elif entity.kind == "cell":
            self._cells.pop((entity.y, entity.x), None)

    def specific(self, pos: tuple[int, int]) -> Iterator[_T]:
        """Values set for `pos` by cell, row or column entities, most specific first."""
        pos = tuple(pos)
        if pos in self._cells:
            yield self._cells[pos]
        line_values = [v for v in (self._rows.get(pos[0]), self._columns.get(pos[1])) if v is not None]
        for _, value in sorted(line_values, key=lambda v: v[0], reverse=True):
            yield value

    def chain(self, pos: tuple[int, int]) -> Iterator[_T]:
        """All values applying to `pos` by precedence, the global value last."""
        yield from self.specific(pos)
        yield self._global

    def get(self, pos: tuple[int, int]) -> _T:
        return next(self.chain(pos))

    def items(self) -> Iterator[tuple[Entity, _T]]:
        """The row, column and cell entries."""
        for y, (_, value) in self._rows.items():
            yield Entity("row", y, 0), value
        for x, (_, value) in self._columns.items():
            yield Entity("column", 0, x), value
        for (y, x), value in self._cells.items():
            yield Entity("cell", y, x), value

    def is_empty(self) -> bool:
        return not (self._rows or self._columns or self._cells)

    def __repr__(self) -> str:
        return "<%s global=%r rows=%d columns=%d cells=%d>" % (
            self.__class__.__name__, self._global, len(self._rows), len(self._columns), len(self._cells))
