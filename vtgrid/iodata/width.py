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

from abc import ABC, abstractmethod
from typing import Iterator

from wcwidth import wcwidth

from vtgrid.iodata.ansi import tokenize


def char_width(char: str) -> int:
    """
    Terminal columns of a single codepoint; control characters count as 0.
    """
    return max(0, wcwidth(char))


class WidthFunc(ABC):
    """
    Strategy for measuring the display width of a line of text.

    Implementations decompose a line into tokens ``(segment, width, is_escape)``, where a segment is a single
    codepoint, an expansion of a codepoint (tabulators) or a complete escape sequence. All width dependent text
    operations (measurement, truncation, wrapping) are built on the token stream, so a segment is never split.

        - :class:`PlainWidth`
        - :class:`TabWidth`
        - :class:`AnsiWidth`
    """

    __slots__ = ()

    @abstractmethod
    def tokens(self, line: str) -> Iterator[tuple[str, int, bool]]:
        ...

    def line_width(self, line: str) -> int:
        return sum(w for _, w, _ in self.tokens(line))

    def expand(self, line: str) -> str:
        """Return the `line` as it is written to the output."""
        return str().join(seg for seg, _, _ in self.tokens(line))

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and all(
            getattr(self, a) == getattr(other, a) for a in self.__slots__)

    def __hash__(self) -> int:
        return hash((type(self),) + tuple(getattr(self, a) for a in self.__slots__))

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__,
                           ", ".join("%s=%r" % (a, getattr(self, a)) for a in self.__slots__))


class PlainWidth(WidthFunc):
    """Every codepoint is measured by ``wcwidth``; escape sequences are not recognized."""

    __slots__ = ()

    def tokens(self, line: str) -> Iterator[tuple[str, int, bool]]:
        for c in line:
            yield c, char_width(c), False

    def line_width(self, line: str) -> int:
        return sum(char_width(c) for c in line)

    def expand(self, line: str) -> str:
        return line


class TabWidth(WidthFunc):
    """A tabulator occupies `tab_size` columns and is written as that many spaces."""

    tab_size: int

    __slots__ = ('tab_size',)

    def __init__(self, tab_size: int = 4):
        if tab_size < 0:
            raise ValueError(tab_size)
        self.tab_size = tab_size

    def tokens(self, line: str) -> Iterator[tuple[str, int, bool]]:
        for c in line:
            if c == "\t":
                yield " " * self.tab_size, self.tab_size, False
            else:
                yield c, char_width(c), False


class AnsiWidth(WidthFunc):
    """
    Escape sequences are passed through with zero width. If `tab_size` is not ``None``, tabulators are
    expanded as in :class:`TabWidth`.
    """

    tab_size: int | None

    __slots__ = ('tab_size',)

    def __init__(self, tab_size: int = None):
        self.tab_size = tab_size

    def tokens(self, line: str) -> Iterator[tuple[str, int, bool]]:
        for seg, esc in tokenize(line):
            if esc:
                yield seg, 0, True
            elif self.tab_size is None:
                for c in seg:
                    yield c, char_width(c), False
            else:
                for c in seg:
                    if c == "\t":
                        yield " " * self.tab_size, self.tab_size, False
                    else:
                        yield c, char_width(c), False
