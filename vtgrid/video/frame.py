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

from typing import Literal, NamedTuple, overload

from vtgrid.exceptions import GridConfigurationError
from vtgrid.config.borders import check_glyph
from vtgrid.iodata.sgr import Color


class MarginSide(NamedTuple):
    """
    One side of a :class:`FrameMargin`.

    `offset_begin` and `offset_end` leave the given number of positions at the start/end of the side blank
    (positions are rows for the ``E``/``O`` sides and columns for ``N``/``S``).
    """
    size: int = 0
    fill: str = " "
    color: Color | None = None
    offset_begin: int = 0
    offset_end: int = 0


class FrameMargin:
    """
    Margin around the rendered grid.

    The sides are named by the cardinal direction: ``N`` above, ``S`` below, ``E`` left and ``O`` right of the
    grid. A side can be defined by a :class:`MarginSide`, by its size (filled with spaces), by a tuple
    ``(size, fill)`` or ``None`` for no margin. The ``N`` and ``S`` lines span the whole width including the
    ``E``/``O`` margins.

    >>> frame = FrameMargin(N=1, O=(2, ">"), S=MarginSide(1, "_", offset_begin=2), E=(1, "<"))
    >>> frame.wrap(["+--+", "|ab|", "+--+"], 4)
    ...
    ... <+--+>>
    ... <|ab|>>
    ... <+--+>>
    ...   _____
    """

    N: MarginSide
    O: MarginSide
    S: MarginSide
    E: MarginSide

    __slots__ = ('N', 'O', 'S', 'E')

    def __init__(self,
                 N: MarginSide | int | tuple[int, str] | None = None,
                 O: MarginSide | int | tuple[int, str] | None = None,
                 S: MarginSide | int | tuple[int, str] | None = None,
                 E: MarginSide | int | tuple[int, str] | None = None):
        self.settings(N=N, O=O, S=S, E=E)

    @overload
    def settings(self, *,
                 N: MarginSide | int | tuple[int, str] | None = ...,
                 O: MarginSide | int | tuple[int, str] | None = ...,
                 S: MarginSide | int | tuple[int, str] | None = ...,
                 E: MarginSide | int | tuple[int, str] | None = ...) -> None:
        ...

    def settings(self, **kwargs) -> None:
        """
        Change sides of the margin.

        :raises GridConfigurationError: negative size or offset, or an invalid fill character.
        """
        sides = dict()
        for attr in ('N', 'O', 'S', 'E'):
            try:
                o = kwargs.pop(attr)
            except KeyError:
                continue
            if o is None:
                side = MarginSide()
            elif isinstance(o, MarginSide):
                side = o
            elif isinstance(o, int):
                side = MarginSide(o)
            else:
                side = MarginSide(*o)
            if min(side.size, side.offset_begin, side.offset_end) < 0:
                raise GridConfigurationError("Negative value in margin %s: %r" % (attr, side))
            check_glyph(side.fill, "margin fill")
            sides[attr] = side

        if kwargs:
            raise ValueError(kwargs)
        # nothing is changed if a side is invalid
        for attr, side in sides.items():
            setattr(self, attr, side)

    @property
    def expanse_N(self) -> int:
        return self.N.size

    @property
    def expanse_O(self) -> int:
        return self.O.size

    @property
    def expanse_S(self) -> int:
        return self.S.size

    @property
    def expanse_E(self) -> int:
        return self.E.size

    @staticmethod
    def _run(side: MarginSide, length: int) -> str:
        begin = min(side.offset_begin, length)
        end = min(side.offset_end, length - begin)
        fill = side.fill * (length - begin - end)
        if fill and side.color:
            fill = side.color.wrap(fill)
        return " " * begin + fill + " " * end

    @staticmethod
    def _column(side: MarginSide, i: int, n: int) -> str:
        if not side.size:
            return ""
        if i < side.offset_begin or i >= n - side.offset_end:
            return " " * side.size
        if side.color:
            return side.color.wrap(side.fill * side.size)
        return side.fill * side.size

    #                                       w/x
    def wrap(self, body: list[str], width: int) -> list[str]:
        """
        Frame the lines of `body` of the display width `width`.
        """
        total = width + self.E.size + self.O.size
        lines = [self._run(self.N, total) for _ in range(self.N.size)]
        n = len(body)
        for i, line in enumerate(body):
            lines.append(self._column(self.E, i, n) + line + self._column(self.O, i, n))
        lines.extend(self._run(self.S, total) for _ in range(self.S.size))
        return lines

    def __bool__(self) -> bool:
        return any(side.size for side in (self.N, self.O, self.S, self.E))

    def __repr__(self) -> str:
        return "%s(N=%r, O=%r, S=%r, E=%r)" % (self.__class__.__name__, self.N, self.O, self.S, self.E)


class Shadow(NamedTuple):
    """
    A shadow is a margin on two adjacent sides whose start is shifted by `offset`.

    `orient` names the corner the shadow is cast to (``"SO"``: below and right).

    >>> Shadow(size=1, orient="SO")
    ... +--+
    ... |ab|▒
    ... +--+▒
    ...  ▒▒▒▒
    """
    size: int = 1
    fill: str = "▒"
    orient: Literal["NO", "NE", "SO", "SE"] = "SO"
    offset: int = 1
    color: Color | None = None

    def sides(self) -> dict[str, MarginSide]:
        """
        :raises GridConfigurationError: unknown `orient`.
        """
        side = MarginSide(self.size, self.fill, self.color)
        if self.orient == "SO":
            return dict(S=side._replace(offset_begin=self.offset), O=side._replace(offset_begin=self.offset))
        if self.orient == "SE":
            return dict(S=side._replace(offset_end=self.offset), E=side._replace(offset_begin=self.offset))
        if self.orient == "NO":
            return dict(N=side._replace(offset_begin=self.offset), O=side._replace(offset_end=self.offset))
        if self.orient == "NE":
            return dict(N=side._replace(offset_end=self.offset), E=side._replace(offset_end=self.offset))
        raise GridConfigurationError("Unknown shadow orientation %r." % (self.orient,))
