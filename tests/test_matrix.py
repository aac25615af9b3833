from __future__ import annotations

import pytest

from vtgrid import CellMatrix, PositionError, TabWidth


def test_ragged_rows_are_padded() -> None:
    matrix = CellMatrix([["a", "b", "c"], ["d"]])
    assert matrix.shape == (2, 3)
    assert matrix.text((1, 2)) == ""


def test_rows_can_be_lazy() -> None:
    matrix = CellMatrix((str(r * 2 + c) for c in range(2)) for r in range(3))
    assert matrix.shape == (3, 2)
    assert matrix.text((2, 1)) == "5"


def test_cell_lines_and_width() -> None:
    cell = CellMatrix([["ab\n日本語\n"]]).get((0, 0))
    assert cell.height == 3
    assert cell.width == 6
    assert [ln.width for ln in cell.lines] == [2, 6, 0]


def test_out_of_bounds_access_raises() -> None:
    matrix = CellMatrix([["a"]])
    with pytest.raises(PositionError):
        matrix.get((1, 0))
    with pytest.raises(PositionError):
        matrix.set_text((0, -1), "x")
    with pytest.raises(IndexError):
        matrix.text((0, 1))


def test_mutations_bump_revision() -> None:
    matrix = CellMatrix([["a"]])
    matrix.set_text((0, 0), "b")
    assert matrix.__revision__ == 1
    matrix.set_widthfunc(TabWidth(2))
    assert matrix.__revision__ == 2
    assert matrix.text((0, 0)) == "b"


def test_widthfunc_applies_to_cells() -> None:
    matrix = CellMatrix([["\tx"]], TabWidth(2))
    assert matrix.get((0, 0)).lines[0].text == "  x"
    assert matrix.get((0, 0)).width == 3


def test_empty_matrix() -> None:
    matrix = CellMatrix()
    assert matrix.shape == (0, 0)
    assert list(matrix.positions()) == []
