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

from vtgrid.records.matrix import CellMatrix, CellLine
from vtgrid.config.config import GridConfig
from vtgrid.iodata.textops import truncate, wrap
from vtgrid.iodata.ansi import strip


def _is_blank(line: str) -> bool:
    return not strip(line).strip()


def cell_lines(matrix: CellMatrix, config: GridConfig, pos: tuple[int, int]) -> tuple[CellLine, ...]:
    """
    The lines of the cell at `pos` as they are rendered: trimmed according to the :class:`Formatting` and limited
    according to the :class:`TextLimit` of the position.

    Always at least one line.
    """
    cell = matrix.get(pos)
    formatting = config.formatting.get(pos)
    limit = config.limits.get(pos)
    if not (limit or formatting.horizontal_trim or formatting.vertical_trim):
        return cell.lines

    widthfunc = matrix.widthfunc
    lines = [ln.text for ln in cell.lines]
    if formatting.vertical_trim:
        while len(lines) > 1 and _is_blank(lines[0]):
            lines.pop(0)
        while len(lines) > 1 and _is_blank(lines[-1]):
            lines.pop()
    if formatting.horizontal_trim:
        lines = [ln.strip() for ln in lines]
    if limit:
        if limit.mode == "wrap":
            lines = [wl for ln in lines for wl in wrap(ln, limit.width, widthfunc, limit.keep_words)]
        else:
            lines = [truncate(ln, limit.width, widthfunc, limit.suffix) for ln in lines]
    return tuple(CellLine(ln, widthfunc.line_width(ln)) for ln in lines)


def content_width(lines: tuple[CellLine, ...]) -> int:
    return max(ln.width for ln in lines)
