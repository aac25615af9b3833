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

from typing import NamedTuple, Literal, Any

from wcwidth import wcswidth

from vtgrid.exceptions import GridConfigurationError


def check_glyph(glyph: str | None, attr: str = "glyph") -> str | None:
    """
    :raises GridConfigurationError: `glyph` is not a single character occupying one terminal column.
    """
    if glyph is not None and (len(glyph) != 1 or wcswidth(glyph) != 1):
        raise GridConfigurationError("%s must be a single character of width 1, got %r" % (attr, glyph))
    return glyph


class BorderSet(NamedTuple):
    """
    The border of a single cell: four edges and four corners, ``None`` for undefined.

    Used for glyphs (``str``) and in the same layout for colors (:class:`vtgrid.iodata.sgr.Color`).

    >>> BorderSet(top="─", bottom="─", top_left="┌", ...)
    ...      top_left   top   top_right
    ...            ┌─────────────┐
    ...       left │             │ right
    ...            └─────────────┘
    ...  bottom_left  bottom  bottom_right
    """
    top: Any = None
    bottom: Any = None
    left: Any = None
    right: Any = None
    top_left: Any = None
    top_right: Any = None
    bottom_left: Any = None
    bottom_right: Any = None

    @classmethod
    def filled(cls, value: Any) -> BorderSet:
        return cls(*(value for _ in cls._fields))

    def is_empty(self) -> bool:
        return all(v is None for v in self)

    def checked(self) -> BorderSet:
        """
        :raises GridConfigurationError: invalid glyph.
        """
        for attr, glyph in zip(self._fields, self):
            check_glyph(glyph, attr)
        return self


class Borders(NamedTuple):
    """
    Glyph template for the whole grid.

    The glyph of a grid line or intersection is selected by its location: outer lines use `top`, `bottom`, `left`
    and `right`, inner lines `horizontal` and `vertical`; at the outer corners the corner glyphs, on the outer
    lines the tees and inside the grid `intersection`.

    >>> Borders.modern()
    ... ┌───┬───┐   top_left         top_intersection    top_right
    ... │   │   │
    ... ├───┼───┤   left_intersection  intersection      right_intersection
    ... │   │   │
    ... └───┴───┘   bottom_left      bottom_intersection bottom_right
    """
    top: str | None = None
    bottom: str | None = None
    left: str | None = None
    right: str | None = None
    horizontal: str | None = None
    vertical: str | None = None
    top_left: str | None = None
    top_right: str | None = None
    bottom_left: str | None = None
    bottom_right: str | None = None
    top_intersection: str | None = None
    bottom_intersection: str | None = None
    left_intersection: str | None = None
    right_intersection: str | None = None
    intersection: str | None = None

    @classmethod
    def empty(cls) -> Borders:
        return cls()

    @classmethod
    def blank(cls) -> Borders:
        return cls(*(" " for _ in cls._fields))

    @classmethod
    def ascii(cls) -> Borders:
        return cls(top="-", bottom="-", left="|", right="|", horizontal="-", vertical="|",
                   top_left="+", top_right="+", bottom_left="+", bottom_right="+",
                   top_intersection="+", bottom_intersection="+", left_intersection="+",
                   right_intersection="+", intersection="+")

    @classmethod
    def modern(cls) -> Borders:
        return cls(top="─", bottom="─", left="│", right="│", horizontal="─", vertical="│",
                   top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘",
                   top_intersection="┬", bottom_intersection="┴", left_intersection="├",
                   right_intersection="┤", intersection="┼")

    @classmethod
    def rounded(cls) -> Borders:
        return cls.modern()._replace(top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯")

    @classmethod
    def double(cls) -> Borders:
        return cls(top="═", bottom="═", left="║", right="║", horizontal="═", vertical="║",
                   top_left="╔", top_right="╗", bottom_left="╚", bottom_right="╝",
                   top_intersection="╦", bottom_intersection="╩", left_intersection="╠",
                   right_intersection="╣", intersection="╬")

    @classmethod
    def from_border_set(cls, border: BorderSet) -> Borders:
        """Use the glyphs of a single cell border for every cell."""
        return cls(top=border.top, bottom=border.bottom, left=border.left, right=border.right,
                   horizontal=border.bottom or border.top, vertical=border.right or border.left,
                   top_left=border.top_left, top_right=border.top_right,
                   bottom_left=border.bottom_left, bottom_right=border.bottom_right,
                   top_intersection=border.top_right or border.top_left,
                   bottom_intersection=border.bottom_right or border.bottom_left,
                   left_intersection=border.bottom_left or border.top_left,
                   right_intersection=border.bottom_right or border.top_right,
                   intersection=border.bottom_right or border.top_left)

    def has_top(self) -> bool:
        return any((self.top, self.top_left, self.top_right, self.top_intersection))

    def has_bottom(self) -> bool:
        return any((self.bottom, self.bottom_left, self.bottom_right, self.bottom_intersection))

    def has_left(self) -> bool:
        return any((self.left, self.top_left, self.bottom_left, self.left_intersection))

    def has_right(self) -> bool:
        return any((self.right, self.top_right, self.bottom_right, self.right_intersection))

    def has_horizontal(self) -> bool:
        return any((self.horizontal, self.left_intersection, self.right_intersection, self.intersection))

    def has_vertical(self) -> bool:
        return any((self.vertical, self.top_intersection, self.bottom_intersection, self.intersection))

    def checked(self) -> Borders:
        """
        :raises GridConfigurationError: invalid glyph.
        """
        for attr, glyph in zip(self._fields, self):
            check_glyph(glyph, attr)
        return self


class HorizontalLine(NamedTuple):
    """Glyphs of one horizontal grid line, taking precedence over :class:`Borders`."""
    main: str | None = None
    intersection: str | None = None
    left: str | None = None
    right: str | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in self)


class VerticalLine(NamedTuple):
    """Glyphs of one vertical grid line, taking precedence over :class:`Borders`."""
    main: str | None = None
    intersection: str | None = None
    top: str | None = None
    bottom: str | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in self)


class Offset(NamedTuple):
    """
    Location of a single character within a grid line segment, counted from the beginning (left/top) or from
    the end (right/bottom) of the segment.

    >>> config.set_horizontal_char((0, 1), "T", Offset.begin(1))
    ... +-----+-T----+
    >>> config.set_horizontal_char((0, 1), "E", Offset.end(0))
    ... +-----+-----E+
    """
    kind: Literal["begin", "end"]
    n: int

    @staticmethod
    def begin(n: int) -> Offset:
        """
        :raises GridConfigurationError: negative `n`.
        """
        return Offset._new("begin", n)

    @staticmethod
    def end(n: int) -> Offset:
        """
        :raises GridConfigurationError: negative `n`.
        """
        return Offset._new("end", n)

    @staticmethod
    def _new(kind: str, n: int) -> Offset:
        if n < 0:
            raise GridConfigurationError("Negative offset: %d" % n)
        return Offset(kind, n)


def lookup_offset(values: dict[Offset, Any], i: int, length: int) -> Any:
    """The value for character `i` of a segment of `length` characters, or ``None``."""
    if (value := values.get(Offset("begin", i))) is not None:
        return value
    if i < length:
        return values.get(Offset("end", length - i - 1))
    return None
