from __future__ import annotations

import pytest

from vtgrid import GridConfigurationError
from vtgrid.config import Entity, EntityMap


def test_row_and_column_last_write_wins() -> None:
    padding = EntityMap(0)
    padding.set(Entity.column(1), 2)
    padding.set(Entity.row(0), 1)
    assert padding.get((0, 1)) == 1
    assert padding.get((1, 1)) == 2
    assert padding.get((1, 0)) == 0

    padding.set(Entity.column(1), 3)
    assert padding.get((0, 1)) == 3


def test_cell_beats_row_and_column() -> None:
    values = EntityMap("global")
    values.set(Entity.cell(0, 1), "cell")
    values.set(Entity.row(0), "row")
    values.set(Entity.column(1), "column")
    assert values.get((0, 1)) == "cell"
    assert list(values.chain((0, 1))) == ["cell", "column", "row", "global"]


def test_global_does_not_clear_specific_values() -> None:
    values = EntityMap(0)
    values.set(Entity.cell(0, 1), 9)
    values.set(Entity.GLOBAL, 5)
    assert values.get((0, 1)) == 9
    assert values.get((2, 2)) == 5
    assert values.global_value == 5


def test_unset() -> None:
    values = EntityMap(0)
    values.set(Entity.row(1), 4)
    assert not values.is_empty()
    values.unset(Entity.row(1))
    assert values.get((1, 0)) == 0
    assert values.is_empty()


def test_entity_positions() -> None:
    assert list(Entity.row(1).positions((2, 2))) == [(1, 0), (1, 1)]
    assert list(Entity.column(0).positions((2, 2))) == [(0, 0), (1, 0)]
    assert list(Entity.cell(5, 5).positions((2, 2))) == []
    assert len(list(Entity.GLOBAL.positions((2, 3)))) == 6
    assert Entity.column(2).covers((7, 2))


def test_negative_entity_index_raises() -> None:
    with pytest.raises(GridConfigurationError):
        Entity.row(-1)
    with pytest.raises(GridConfigurationError):
        Entity.cell(0, -2)
