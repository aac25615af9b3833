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

from typing import NamedTuple, overload, Literal
from functools import lru_cache


class SGRParams(tuple):
    """
    Select Graphic Rendition - Parameters

    -> (param, ...)
    """

    def __new__(cls, *sgr: int) -> SGRParams:
        return tuple.__new__(cls, sgr)

    def __add__(self, x: tuple) -> SGRParams:
        return SGRParams(*self, *x)


class SGRSeqs(str):
    """
    Select Graphic Rendition - Sequence

    -> CSI param;... m

    # Resources:
     ; `xterm/CSI/SGR`_

    .. _`xterm/CSI/SGR`: https://invisible-island.net/xterm/ctlseqs/ctlseqs.html#h4-Functions-using-CSI-%5F-ordered-by-the-final-character-lparen-s-rparen%3ACSI-Pm-m.1CA7
    """

    def __new__(cls, *params: SGRParams) -> SGRSeqs:
        return str.__new__(cls, "\x1b[" + ";".join(str(p) for __params in params for p in __params) + "m")


class SGRReset(str):
    """-> CSI m"""

    def __new__(cls) -> SGRReset:
        return str.__new__(cls, "\x1b[m")


@lru_cache()
def _getrgb(r: int, g: int, b: int) -> tuple[int, int, int, int]:
    """
    :return: (2, r, g, b)

    :raise ValueError(r, g, b):
    """
    if any(c not in range(256) for c in (r, g, b)):
        raise ValueError(r, g, b)
    return 2, r, g, b


#             name       r    g    b
_NAMED_COLORS = (("black", (0, 0, 0)),
                 ("red", (255, 0, 0)),
                 ("green", (0, 255, 0)),
                 ("yellow", (255, 255, 0)),
                 ("blue", (0, 0, 255)),
                 ("magenta", (255, 0, 255)),
                 ("cyan", (0, 255, 255)),
                 ("white", (255, 255, 255)))


class _Palette:
    """
    Factory methods for the color parameters of one SGR layer.

    A subclass declares the layer with ``select`` (the extended color parameter, 38 or 48) and ``relative``
    (the parameter of the first of the eight terminal colors, 30 or 40) and receives the predefined colors as
    attributes: ``red`` as true color and ``red_rel`` from the palette of the terminal.
    """
    select: int
    reset: SGRParams

    __slots__ = ()

    def __init_subclass__(cls, select: int, relative: int, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.select = select
        cls.reset = cls.default = SGRParams(select + 1)
        for i, (name, rgb) in enumerate(_NAMED_COLORS):
            setattr(cls, name + "_rel", SGRParams(relative + i))
            setattr(cls, name, SGRParams(select, *_getrgb(*rgb)))

    @classmethod
    def name(cls, color: str) -> SGRParams:
        """
        Get one of the predefined colors by name (``"red"``, ``"blue_rel"``, ...).

        :raise LookupError(color):
        """
        if isinstance(params := getattr(cls, color, None), SGRParams):
            return params
        raise LookupError(color)

    @classmethod
    def b256(cls, _256: int) -> SGRParams:
        """
        :return: SGRParams(select, 5, _256)

        :raise ValueError(_256):
        """
        if _256 not in range(256):
            raise ValueError(str(_256))
        return SGRParams(cls.select, 5, _256)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> SGRParams:
        """
        :return: SGRParams(select, 2, r, g, b)

        :raise ValueError(r, g, b):
        """
        return SGRParams(cls.select, *_getrgb(r, g, b))

    @classmethod
    def hex(cls, x: str) -> SGRParams:
        """
        Get the color from a hex string. [ ! ] '#' not allowed.

        :raise ValueError(r, g, b):
        :raise ValueError(invalid literal):
        """
        return cls.rgb(int(x[:2], 16), int(x[2:4], 16), int(x[4:], 16))

    @classmethod
    @overload
    def get(cls, color_name: str, /) -> SGRParams:
        ...

    @classmethod
    @overload
    def get(cls, hex_string: Literal["#rrggbb"], /) -> SGRParams:
        ...

    @classmethod
    @overload
    def get(cls, b256: int, /) -> SGRParams:
        ...

    @classmethod
    @overload
    def get(cls, r: int, g: int, b: int, /) -> SGRParams:
        ...

    @classmethod
    def get(cls, *args) -> SGRParams:
        """
        Get the color from a hex string, from numeric rgb values, from the name or from base 256.

        :param args: str(color name) | str(#rrggbb) | int(r), int(g), int(b) | int(base 256)

        :raise LookupError(color name):
        :raise ValueError(r, g, b):
        :raise ValueError(base 256):
        :raise ValueError(invalid hex-literal):
        """
        if isinstance(args[0], str):
            if args[0][0] == '#':
                return cls.hex(args[0][1:])
            return cls.name(args[0])
        elif len(args) == 3:
            return cls.rgb(*args)
        return cls.b256(args[0])


class Fore(_Palette, select=38, relative=30):
    """Foreground color parameters."""
    __slots__ = ()


class Ground(_Palette, select=48, relative=40):
    """Background color parameters."""
    __slots__ = ()


class StyleBasics:
    purge_sgr = SGRParams(0)
    bold = SGRParams(1)
    dim = SGRParams(2)
    italic = SGRParams(3)
    underline = SGRParams(4)
    blink = SGRParams(5)
    invert = SGRParams(7)
    strike = SGRParams(9)


RESET = StyleBasics.purge_sgr
BOLD = StyleBasics.bold
DIM = StyleBasics.dim
UNDERLINE = StyleBasics.underline
INVERT = StyleBasics.invert


class Color(NamedTuple):
    """
    A color as an opaque pair of strings written before and after a colored segment.

    The renderer does not interpret the strings, so any escape sequence (or markup) can be used:

    >>> Color("\\x1b[31m", "\\x1b[39m").wrap("red")
    >>> Color.new(Fore.red, BOLD).wrap("bold red")
    ... '\\x1b[38;2;255;0;0;1mbold red\\x1b[m'
    >>> Color.fore("#00ff00") + Color.ground("blue")
    """
    prefix: str
    suffix: str

    @classmethod
    def new(cls, *params: SGRParams) -> Color:
        """Build the color from SGR parameters; the suffix is the full reset."""
        return cls(SGRSeqs(*params), SGRReset())

    @classmethod
    def fore(cls, *args) -> Color:
        """Foreground color via :meth:`Fore.get`; the suffix restores the default foreground."""
        return cls(SGRSeqs(Fore.get(*args)), SGRSeqs(Fore.reset))

    @classmethod
    def ground(cls, *args) -> Color:
        """Background color via :meth:`Ground.get`; the suffix restores the default background."""
        return cls(SGRSeqs(Ground.get(*args)), SGRSeqs(Ground.reset))

    def wrap(self, string: str) -> str:
        return self.prefix + string + self.suffix

    def __add__(self, other: Color) -> Color:
        return Color(self.prefix + other.prefix, other.suffix + self.suffix)
