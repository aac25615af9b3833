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

from typing import NamedTuple, Literal, overload, Any

from vtgrid.exceptions import GridConfigurationError
from vtgrid.iodata.sgr import Color
from vtgrid.config.entity import Entity, EntityMap
from vtgrid.config.spans import SpanMap
from vtgrid.config.borders import BorderSet, Borders, HorizontalLine, VerticalLine, Offset, check_glyph
from vtgrid.video.frame import FrameMargin, MarginSide, Shadow

HORIZONTAL_ALIGNMENTS = ("left", "center", "right")
VERTICAL_ALIGNMENTS = ("top", "center", "bottom")


class Indent(NamedTuple):
    size: int = 0
    fill: str = " "
    color: Color | None = None


class Sides(NamedTuple):
    """
    Padding of a cell. Each side is an :class:`Indent` of a size, the fill character and an optional color.
    """
    left: Indent = Indent()
    right: Indent = Indent()
    top: Indent = Indent()
    bottom: Indent = Indent()

    @classmethod
    def new(cls, left: int = 0, right: int = 0, top: int = 0, bottom: int = 0,
            fill: str = " ", color: Color = None) -> Sides:
        return cls(Indent(left, fill, color), Indent(right, fill, color),
                   Indent(top, fill, color), Indent(bottom, fill, color))

    @classmethod
    def uniform(cls, size: int, fill: str = " ", color: Color = None) -> Sides:
        return cls.new(size, size, size, size, fill, color)

    @property
    def horizontal(self) -> int:
        return self.left.size + self.right.size

    @property
    def vertical(self) -> int:
        return self.top.size + self.bottom.size


class Formatting(NamedTuple):
    """
    `horizontal_trim` strips whitespace from both ends of each line, `vertical_trim` removes blank lines at the
    beginning and end of the text. With `allow_lines_alignment` each line is aligned by itself instead of aligning
    the text block as a whole.
    """
    horizontal_trim: bool = False
    vertical_trim: bool = False
    allow_lines_alignment: bool = False


class TextLimit(NamedTuple):
    """
    Limit of the display width of the lines of a cell, either by cutting (``"truncate"``, `suffix` marks a cut
    line) or by breaking the lines (``"wrap"``, optionally only between words).
    """
    width: int
    mode: Literal["truncate", "wrap"] = "truncate"
    keep_words: bool = False
    suffix: str = ""


class Justification(NamedTuple):
    """Fill character and color of the unused space of the content area."""
    fill: str = " "
    color: Color | None = None


class GridConfig:
    """
    Settings of a grid.

    Cell related settings are stored per :class:`Entity` (global, row, column or cell) and looked up with the
    precedence ``cell > row/column > global``. Grid line related settings (template, line glyphs and single
    position overrides, characters placed at an :class:`Offset` within a segment and the colors by location) as
    well as the margin are global. ``spans`` holds the :class:`SpanMap` of the grid.

    Every change increments ``__revision__``.

    >>> config = GridConfig()
    >>> config.set_borders(Borders.modern())
    >>> config.set_padding(Entity.GLOBAL, Sides.new(left=1, right=1))
    >>> config.set_alignment(Entity.column(2), horizontal="right")
    >>> config.settings(Entity.row(0), color=Color.new(BOLD), border=BorderSet(bottom="═"))
    """

    padding: EntityMap[Sides]
    alignment_horizontal: EntityMap[str]
    alignment_vertical: EntityMap[str]
    formatting: EntityMap[Formatting]
    limits: EntityMap[TextLimit | None]
    justification: EntityMap[Justification]
    colors: EntityMap[Color | None]
    border_sets: EntityMap[BorderSet]
    border_colors: EntityMap[BorderSet]

    borders: Borders
    border_color: Color | None
    borders_color: Borders
    horizontal_lines: dict[int, HorizontalLine]
    vertical_lines: dict[int, VerticalLine]
    horizontal_overrides: dict[tuple[int, int], tuple[str | None, Color | None]]
    vertical_overrides: dict[tuple[int, int], tuple[str | None, Color | None]]
    intersection_overrides: dict[tuple[int, int], tuple[str | None, Color | None]]
    horizontal_chars: dict[tuple[int, int], dict[Offset, str]]
    vertical_chars: dict[tuple[int, int], dict[Offset, str]]
    horizontal_colors: dict[tuple[int, int], dict[Offset, Color]]
    vertical_colors: dict[tuple[int, int], dict[Offset, Color]]
    missing_char: str

    margin: FrameMargin
    spans: SpanMap

    __revision__: int

    def __init__(self, borders: Borders = None, spans: SpanMap = None):
        self.padding = EntityMap(Sides())
        self.alignment_horizontal = EntityMap("left")
        self.alignment_vertical = EntityMap("top")
        self.formatting = EntityMap(Formatting())
        self.limits = EntityMap(None)
        self.justification = EntityMap(Justification())
        self.colors = EntityMap(None)
        self.border_sets = EntityMap(BorderSet())
        self.border_colors = EntityMap(BorderSet())

        self.borders = (Borders.ascii() if borders is None else borders).checked()
        self.border_color = None
        self.borders_color = Borders()
        self.horizontal_lines = dict()
        self.vertical_lines = dict()
        self.horizontal_overrides = dict()
        self.vertical_overrides = dict()
        self.intersection_overrides = dict()
        self.horizontal_chars = dict()
        self.vertical_chars = dict()
        self.horizontal_colors = dict()
        self.vertical_colors = dict()
        self.missing_char = " "

        self.margin = FrameMargin()
        self.spans = spans if spans is not None else SpanMap()
        self.__revision__ = 0

    def _changed(self) -> None:
        self.__revision__ += 1

    @property
    def revision(self) -> tuple[int, int]:
        """Revision of the settings including the span map."""
        return self.__revision__, self.spans.__revision__

    def set_padding(self, entity: Entity, padding: Sides | int) -> None:
        """
        :raises GridConfigurationError: negative size or invalid fill character.
        """
        if isinstance(padding, int):
            padding = Sides.uniform(padding)
        for side in padding:
            if side.size < 0:
                raise GridConfigurationError("Negative padding: %r" % (padding,))
            check_glyph(side.fill, "padding fill")
        self.padding.set(entity, padding)
        self._changed()

    def set_alignment(self, entity: Entity,
                      horizontal: Literal["left", "center", "right"] = None,
                      vertical: Literal["top", "center", "bottom"] = None) -> None:
        """
        :raises GridConfigurationError: unknown alignment.
        """
        if horizontal is not None:
            if horizontal not in HORIZONTAL_ALIGNMENTS:
                raise GridConfigurationError("Unknown horizontal alignment %r." % (horizontal,))
            self.alignment_horizontal.set(entity, horizontal)
        if vertical is not None:
            if vertical not in VERTICAL_ALIGNMENTS:
                raise GridConfigurationError("Unknown vertical alignment %r." % (vertical,))
            self.alignment_vertical.set(entity, vertical)
        self._changed()

    def set_formatting(self, entity: Entity, formatting: Formatting) -> None:
        self.formatting.set(entity, formatting)
        self._changed()

    def set_limit(self, entity: Entity, limit: TextLimit | None) -> None:
        """
        :raises GridConfigurationError: width less than 1 or unknown mode.
        """
        if limit is not None:
            if limit.width < 1:
                raise GridConfigurationError("Text limit width must be at least 1, got %d." % limit.width)
            if limit.mode not in ("truncate", "wrap"):
                raise GridConfigurationError("Unknown text limit mode %r." % (limit.mode,))
        self.limits.set(entity, limit)
        self._changed()

    def set_justification(self, entity: Entity, justification: Justification | str) -> None:
        if isinstance(justification, str):
            justification = Justification(justification)
        check_glyph(justification.fill, "justification fill")
        self.justification.set(entity, justification)
        self._changed()

    def set_color(self, entity: Entity, color: Color | None) -> None:
        self.colors.set(entity, color)
        self._changed()

    def set_border(self, entity: Entity, border: BorderSet) -> None:
        """
        Set the border glyphs of the cells of `entity`.
        For :attr:`Entity.GLOBAL` the border is converted to a template (:meth:`Borders.from_border_set`).

        :raises GridConfigurationError: invalid glyph.
        """
        border = border.checked()
        if entity.kind == "global":
            self.borders = Borders.from_border_set(border)
        else:
            self.border_sets.set(entity, border)
        self._changed()

    def set_border_color(self, entity: Entity, colors: BorderSet) -> None:
        """Colors of the border glyphs of the cells of `entity`, in the layout of a :class:`BorderSet`."""
        self.border_colors.set(entity, colors)
        self._changed()

    def remove_border(self, entity: Entity) -> None:
        self.border_sets.unset(entity)
        self.border_colors.unset(entity)
        self._changed()

    def set_borders(self, borders: Borders) -> None:
        """
        Set the glyph template of the grid.

        :raises GridConfigurationError: invalid glyph.
        """
        self.borders = borders.checked()
        self._changed()

    def set_border_color_default(self, color: Color | None) -> None:
        """Color of every border glyph without a more specific color."""
        self.border_color = color
        self._changed()

    def set_borders_color(self, colors: Borders) -> None:
        """
        Colors by location, in the layout of the :class:`Borders` template (e.g. ``Borders(top=Color(...))`` colors
        the top line). Takes precedence over :meth:`set_border_color_default` and is overridden by the colors of
        the cell borders.
        """
        self.borders_color = colors
        self._changed()

    def set_horizontal_line(self, line: int, glyphs: HorizontalLine | None) -> None:
        """
        Override the glyphs of the horizontal grid line `line` (0 is above the first row).

        :raises GridConfigurationError: invalid glyph.
        """
        if glyphs is None or glyphs.is_empty():
            self.horizontal_lines.pop(line, None)
        else:
            for attr, glyph in zip(glyphs._fields, glyphs):
                check_glyph(glyph, attr)
            self.horizontal_lines[line] = glyphs
        self._changed()

    def set_vertical_line(self, line: int, glyphs: VerticalLine | None) -> None:
        """
        Override the glyphs of the vertical grid line `line` (0 is left of the first column).

        :raises GridConfigurationError: invalid glyph.
        """
        if glyphs is None or glyphs.is_empty():
            self.vertical_lines.pop(line, None)
        else:
            for attr, glyph in zip(glyphs._fields, glyphs):
                check_glyph(glyph, attr)
            self.vertical_lines[line] = glyphs
        self._changed()

    #                                    h/y  w/x
    def override_horizontal(self, pos: tuple[int, int], glyph: str | None, color: Color = None) -> None:
        """
        Glyph of the horizontal segment on grid line ``pos[0]`` above column ``pos[1]``.
        ``None`` with no color removes the override.
        """
        self._override(self.horizontal_overrides, pos, glyph, color)

    def override_vertical(self, pos: tuple[int, int], glyph: str | None, color: Color = None) -> None:
        """
        Glyph of the vertical segment in row ``pos[0]`` on grid line ``pos[1]``.
        """
        self._override(self.vertical_overrides, pos, glyph, color)

    def override_intersection(self, pos: tuple[int, int], glyph: str | None, color: Color = None) -> None:
        """
        Glyph of the intersection of horizontal grid line ``pos[0]`` and vertical grid line ``pos[1]``.
        """
        self._override(self.intersection_overrides, pos, glyph, color)

    def _override(self, store: dict, pos: tuple[int, int], glyph: str | None, color: Color | None) -> None:
        check_glyph(glyph, "override")
        if min(pos) < 0:
            raise GridConfigurationError("Negative override position %r." % (tuple(pos),))
        if glyph is None and color is None:
            store.pop(tuple(pos), None)
        else:
            store[tuple(pos)] = (glyph, color)
        self._changed()

    #                                        h/y  w/x
    def set_horizontal_char(self, pos: tuple[int, int], glyph: str, offset: Offset) -> None:
        """
        Place `glyph` at `offset` within the segment of horizontal grid line ``pos[0]`` above column ``pos[1]``.
        The character is only drawn if the grid line exists.

        :raises GridConfigurationError: invalid glyph or negative position.
        """
        self._offset_override(self.horizontal_chars, pos, offset, check_glyph(glyph, "horizontal char"))

    def set_vertical_char(self, pos: tuple[int, int], glyph: str, offset: Offset) -> None:
        """
        Place `glyph` at `offset` (counted in content lines of the row) within the segment of vertical grid line
        ``pos[1]`` in row ``pos[0]``.

        :raises GridConfigurationError: invalid glyph or negative position.
        """
        self._offset_override(self.vertical_chars, pos, offset, check_glyph(glyph, "vertical char"))

    def set_horizontal_color(self, pos: tuple[int, int], color: Color, offset: Offset) -> None:
        """Color of the character at `offset` within a horizontal segment (see :meth:`set_horizontal_char`)."""
        self._offset_override(self.horizontal_colors, pos, offset, color)

    def set_vertical_color(self, pos: tuple[int, int], color: Color, offset: Offset) -> None:
        """Color of the character at `offset` within a vertical segment (see :meth:`set_vertical_char`)."""
        self._offset_override(self.vertical_colors, pos, offset, color)

    def remove_horizontal_chars(self, pos: tuple[int, int]) -> None:
        """Remove the characters and colors placed within a horizontal segment."""
        self.horizontal_chars.pop(tuple(pos), None)
        self.horizontal_colors.pop(tuple(pos), None)
        self._changed()

    def remove_vertical_chars(self, pos: tuple[int, int]) -> None:
        """Remove the characters and colors placed within a vertical segment."""
        self.vertical_chars.pop(tuple(pos), None)
        self.vertical_colors.pop(tuple(pos), None)
        self._changed()

    def _offset_override(self, store: dict, pos: tuple[int, int], offset: Offset, value: Any) -> None:
        if min(pos) < 0:
            raise GridConfigurationError("Negative override position %r." % (tuple(pos),))
        if not isinstance(offset, Offset):
            raise GridConfigurationError("Expected an Offset, got %r." % (offset,))
        store.setdefault(tuple(pos), dict())[offset] = value
        self._changed()

    def set_missing_char(self, char: str) -> None:
        """Glyph drawn where a grid line exists but no glyph is defined."""
        self.missing_char = check_glyph(char, "missing char")
        self._changed()

    @overload
    def set_margin(self, *,
                   N: MarginSide | int | tuple[int, str] | None = ...,
                   O: MarginSide | int | tuple[int, str] | None = ...,
                   S: MarginSide | int | tuple[int, str] | None = ...,
                   E: MarginSide | int | tuple[int, str] | None = ...) -> None:
        ...

    def set_margin(self, **kwargs) -> None:
        self.margin.settings(**kwargs)
        self._changed()

    def set_shadow(self, shadow: Shadow | None) -> None:
        """
        Apply a :class:`Shadow` to the margin; ``None`` removes every margin.
        """
        if shadow is None:
            self.margin = FrameMargin()
        else:
            self.margin.settings(**shadow.sides())
        self._changed()

    _SETTERS = {
        'padding': 'set_padding',
        'formatting': 'set_formatting',
        'limit': 'set_limit',
        'justification': 'set_justification',
        'color': 'set_color',
        'border': 'set_border',
        'border_color': 'set_border_color',
    }

    @overload
    def settings(self, entity: Entity = Entity.GLOBAL, *,
                 padding: Sides | int = ...,
                 alignment: Literal["left", "center", "right"] = ...,
                 vertical_alignment: Literal["top", "center", "bottom"] = ...,
                 formatting: Formatting = ...,
                 limit: TextLimit | None = ...,
                 justification: Justification | str = ...,
                 color: Color | None = ...,
                 border: BorderSet = ...,
                 border_color: BorderSet = ...) -> None:
        ...

    def settings(self, entity: Entity = Entity.GLOBAL, **kwargs: Any) -> None:
        """
        Apply several settings to `entity` at once.

        :raises ValueError: unknown keyword.
        :raises GridConfigurationError: invalid value.
        """
        horizontal = kwargs.pop('alignment', None)
        vertical = kwargs.pop('vertical_alignment', None)
        if horizontal is not None or vertical is not None:
            self.set_alignment(entity, horizontal, vertical)
        for key in tuple(kwargs):
            try:
                setter = self._SETTERS[key]
            except KeyError:
                raise ValueError(kwargs)
            getattr(self, setter)(entity, kwargs.pop(key))
