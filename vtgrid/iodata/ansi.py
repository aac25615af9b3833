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

from typing import Iterator
from re import compile, Pattern

# CSI complete | OSC terminated by BEL or ST | string controls terminated by ST
# | unterminated OSC/CSI | Fe | lone ESC
_ESC_RE: Pattern[str] = compile(
    "\x1b\\[[0-?]*[ -/]*[@-~]"
    "|\x1b\\][^\x07\x1b]*(?:\x07|\x1b\\\\)"
    "|\x1b[PX^_][^\x1b]*\x1b\\\\"
    "|\x1b\\][^\x07\x1b]*"
    "|\x1b\\[[0-?]*[ -/]*"
    "|\x1b[@-_]"
    "|\x1b"
)

_SGR_RE: Pattern[str] = compile("\x1b\\[([0-9;:]*)m")

SGR_RESET = "\x1b[0m"


def tokenize(string: str) -> Iterator[tuple[str, bool]]:
    """
    Split `string` into text and escape segments.

    :return: iterator of ``(segment, is_escape)``; malformed or unterminated sequences are yielded as escapes and
     are never split.
    """
    i = 0
    for m in _ESC_RE.finditer(string):
        if (start := m.start()) > i:
            yield string[i:start], False
        yield m.group(), True
        i = m.end()
    if i < len(string):
        yield string[i:], False


def strip(string: str) -> str:
    """Remove all escape sequences from `string`."""
    return _ESC_RE.sub("", string)


def has_escape(string: str) -> bool:
    return "\x1b" in string


class SGRState:
    """
    Tracks the Select Graphic Rendition sequences that are active at a point of a string.

    Used when text is cut: the open sequences are closed by a reset at the cut and reopened at the beginning of the
    next line.

    >>> state = SGRState()
    >>> state.feed("\\x1b[31m")
    >>> state.active
    ... True
    >>> state.close() + "\\n" + state.reopen()
    ... '\\x1b[0m\\n\\x1b[31m'
    """

    _seqs: list[str]

    __slots__ = ('_seqs',)

    def __init__(self):
        self._seqs = list()

    @property
    def active(self) -> bool:
        return bool(self._seqs)

    def feed(self, seq: str) -> None:
        """Process an escape sequence; anything other than SGR is ignored."""
        if m := _SGR_RE.fullmatch(seq):
            if m.group(1) in ("", "0"):
                self._seqs.clear()
            else:
                self._seqs.append(seq)

    def close(self) -> str:
        return SGR_RESET if self._seqs else ""

    def reopen(self) -> str:
        return str().join(self._seqs)

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self._seqs)
