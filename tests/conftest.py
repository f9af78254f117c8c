# tests/conftest.py
import pytest

from gridpath.core.grid import Grid
from gridpath.search.moves import FOUR_DIRECTIONAL


@pytest.fixture
def open_grid():
    """Factory for obstacle-free grids."""

    def _make(width: int = 5, height: int = 5) -> Grid:
        return Grid.open(width, height)

    return _make


@pytest.fixture
def four_moves():
    return FOUR_DIRECTIONAL
