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

from vtgrid.iodata.ansi import SGRState
from vtgrid.iodata.width import WidthFunc

try:
    from vtgrid.records.matrix import Cell
    __4doc = Cell
except ImportError:
    pass

REPLACEMENT_CHAR = "\ufffd"


def truncate(line: str, width: int, widthfunc: WidthFunc, suffix: str = "") -> str:
    """
    Cut `line` to a display width of `width`.

    A codepoint that would exceed the budget is dropped as a whole. If the line is cut and `suffix` is defined, space
    for the suffix is reserved (as far as the budget allows) and the suffix is appended. Escape sequences before the
    cut remain untouched; an active graphic rendition is closed by a reset.
    """
    if widthfunc.line_width(line) <= width:
        return widthfunc.expand(line)
    if (suffix_width := widthfunc.line_width(suffix)) > width:
        suffix = ""
        suffix_width = 0
    budget = width - suffix_width
    state = SGRState()
    out = str()
    used = 0
    for seg, w, esc in widthfunc.tokens(line):
        if esc:
            state.feed(seg)
            out += seg
        elif used + w > budget:
            break
        else:
            out += seg
            used += w
    return out + state.close() + suffix


class _LineBuilder:
    """Collects wrapped lines while keeping the graphic rendition continuous across breaks."""

    __slots__ = ('width', 'lines', 'current', 'used', 'state')

    def __init__(self, width: int):
        self.width = width
        self.lines = list()
        self.current = str()
        self.used = 0
        self.state = SGRState()

    def escape(self, seg: str) -> None:
        self.state.feed(seg)
        self.current += seg

    def push(self, seg: str, w: int) -> None:
        if w > self.width:
            seg, w = REPLACEMENT_CHAR, 1
        if self.used + w > self.width:
            self.newline()
        self.current += seg
        self.used += w

    def newline(self) -> None:
        self.lines.append(self.current + self.state.close())
        self.current = self.state.reopen()
        self.used = 0

    def finish(self) -> list[str]:
        self.lines.append(self.current)
        return self.lines


def _units(line: str, widthfunc: WidthFunc) -> list[tuple[bool, list[tuple[str, int, bool]]]]:
    """Group the token stream into words and single spaces: ``[(is_space, tokens), ...]``"""
    units = list()
    word = list()
    for tok in widthfunc.tokens(line):
        if tok[0] == " " and not tok[2]:
            if word:
                units.append((False, word))
                word = list()
            units.append((True, [tok]))
        else:
            word.append(tok)
    if word:
        units.append((False, word))
    return units


def wrap(line: str, width: int, widthfunc: WidthFunc, keep_words: bool = False) -> list[str]:
    """
    Break `line` into lines of a display width of at most `width` (applied to each line of a :class:`Cell` with a
    wrapping text limit).

    By default, the line is broken at the codepoint that exhausts the budget. With `keep_words`, a word is moved
    to the next line as a whole when it does not fit into the remaining budget, and a space at the break is
    consumed; words longer than `width` are still broken. A codepoint wider than `width` itself is replaced by
    U+FFFD.

    :raises ValueError: `width` is less than 1.
    """
    if width < 1:
        raise ValueError("width must be at least 1, got %d" % width)
    builder = _LineBuilder(width)
    if not keep_words:
        for seg, w, esc in widthfunc.tokens(line):
            if esc:
                builder.escape(seg)
            else:
                builder.push(seg, w)
        return builder.finish()

    spaces = 0
    for is_space, tokens in _units(line, widthfunc):
        if is_space:
            spaces += 1
            continue
        unit_width = sum(w for _, w, _ in tokens)
        if builder.used + spaces + unit_width <= width or (unit_width > width and builder.used + spaces < width):
            builder.push(" " * spaces, spaces)
        elif builder.used:
            # spaces at a break are consumed
            builder.newline()
        spaces = 0
        for seg, w, esc in tokens:
            if esc:
                builder.escape(seg)
            else:
                builder.push(seg, w)
    if spaces and builder.used + spaces <= width:
        builder.push(" " * spaces, spaces)
    return builder.finish()
