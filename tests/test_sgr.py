from __future__ import annotations

import pytest

from vtgrid import Color, Fore, Ground
from vtgrid.iodata import BOLD, SGRParams, SGRSeqs


def test_sgr_sequences() -> None:
    assert SGRSeqs(Fore.red_rel) == "\x1b[31m"
    assert SGRSeqs(Fore.red_rel, BOLD) == "\x1b[31;1m"
    assert Fore.rgb(1, 2, 3) == SGRParams(38, 2, 1, 2, 3)
    assert Ground.b256(7) == SGRParams(48, 5, 7)


def test_color_lookup() -> None:
    assert Fore.get("#ff0000") == Fore.red
    assert Fore.get("blue_rel") == Fore.blue_rel
    assert Ground.get(0, 0, 0) == Ground.black
    with pytest.raises(LookupError):
        Fore.name("nope")
    with pytest.raises(ValueError):
        Fore.b256(256)
    with pytest.raises(ValueError):
        Ground.rgb(0, 300, 0)


def test_color_wrap() -> None:
    assert Color.new(Fore.red_rel).wrap("x") == "\x1b[31mx\x1b[m"
    assert Color.fore("red_rel") == Color("\x1b[31m", "\x1b[39m")
    assert Color.ground("#000000").suffix == "\x1b[49m"


def test_color_addition_nests_suffixes() -> None:
    combined = Color("<a>", "</a>") + Color("<b>", "</b>")
    assert combined.wrap("x") == "<a><b>x</b></a>"


def test_both_layers_share_the_named_colors() -> None:
    assert Fore.white_rel == SGRParams(37)
    assert Ground.red_rel == SGRParams(41)
    assert Ground.white == SGRParams(48, 2, 255, 255, 255)
    assert (Fore.reset, Ground.reset) == (SGRParams(39), SGRParams(49))
    assert Ground.get("#0000ff") == Ground.blue
    with pytest.raises(LookupError):
        Ground.name("select")
