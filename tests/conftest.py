from __future__ import annotations

import pytest

from vtgrid import Borders, Entity, Grid, GridConfig, Sides


@pytest.fixture
def padded_config() -> GridConfig:
    config = GridConfig()
    config.set_padding(Entity.GLOBAL, Sides.new(left=1, right=1))
    return config


@pytest.fixture
def modern_config() -> GridConfig:
    return GridConfig(Borders.modern())


@pytest.fixture
def small_grid(padded_config: GridConfig) -> Grid:
    return Grid([["a", "bb"], ["ccc", "d"]], padded_config)
