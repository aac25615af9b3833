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

from vtgrid.exceptions import (
    GridConfigurationError,
    GeometrieError,
    PositionError,
)
from vtgrid.iodata import (
    PlainWidth,
    TabWidth,
    AnsiWidth,
    Color,
    Fore,
    Ground,
)
from vtgrid.records import (
    Position,
    CellMatrix,
)
from vtgrid.config import (
    Entity,
    SpanMap,
    BorderSet,
    Borders,
    HorizontalLine,
    VerticalLine,
    Offset,
    Indent,
    Sides,
    Formatting,
    TextLimit,
    Justification,
    GridConfig,
)
from vtgrid.video.frame import (
    FrameMargin,
    MarginSide,
    Shadow,
)
from vtgrid.video.borders import BorderResolver
from vtgrid.video.dimension import (
    Dimension,
    DimensionEstimator,
    estimate,
)
from vtgrid.video.render import (
    Renderer,
    render,
)
from vtgrid.video.grid import (
    Grid,
    VisualTarget,
)

__version__ = "0.1.0"
