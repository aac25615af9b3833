from __future__ import annotations

import pytest

from vtgrid import Color, FrameMargin, GridConfigurationError, MarginSide, Shadow


def test_margin_sides_from_shortcuts() -> None:
    frame = FrameMargin(N=1, O=(2, ">"), E=MarginSide(1, "<"))
    assert frame.N == MarginSide(1)
    assert frame.O == MarginSide(2, ">")
    assert frame.S == MarginSide()
    assert frame.expanse_O == 2
    assert frame


def test_margin_wrap() -> None:
    frame = FrameMargin(N=1, O=(2, ">"), S=MarginSide(1, "_", offset_begin=2), E=(1, "<"))
    assert frame.wrap(["+--+", "|ab|", "+--+"], 4) == [
        "       ",
        "<+--+>>",
        "<|ab|>>",
        "<+--+>>",
        "  _____",
    ]


def test_margin_color() -> None:
    frame = FrameMargin(E=MarginSide(1, "#", Color("<", ">")))
    assert frame.wrap(["x"], 1) == ["<#>x"]


def test_margin_rejects_invalid_values() -> None:
    with pytest.raises(GridConfigurationError):
        FrameMargin(N=-1)
    with pytest.raises(GridConfigurationError):
        FrameMargin(N=(1, "ab"))
    with pytest.raises(ValueError):
        FrameMargin().settings(W=1)


def test_invalid_settings_change_nothing() -> None:
    frame = FrameMargin(N=1)
    with pytest.raises(GridConfigurationError):
        frame.settings(N=2, S=-1)
    assert frame.N == MarginSide(1)
    assert frame.S == MarginSide()
    with pytest.raises(ValueError):
        frame.settings(O=3, W=1)
    assert frame.O == MarginSide()


def test_shadow_sides() -> None:
    sides = Shadow(size=2, fill="#", orient="SE", offset=1).sides()
    assert sides == {"S": MarginSide(2, "#", None, 0, 1), "E": MarginSide(2, "#", None, 1, 0)}
    with pytest.raises(GridConfigurationError):
        Shadow(orient="XY").sides()
