import pytest

from gridpath.core.coordinate import Coordinate
from gridpath.errors import InvalidMoveSetError
from gridpath.search.moves import EIGHT_DIRECTIONAL, FOUR_DIRECTIONAL, resolve_moves


def test_named_move_sets():
    assert resolve_moves("four") is FOUR_DIRECTIONAL
    assert resolve_moves(4) is FOUR_DIRECTIONAL
    assert resolve_moves("EIGHT") is EIGHT_DIRECTIONAL
    assert len(EIGHT_DIRECTIONAL) == 8
    assert set(FOUR_DIRECTIONAL) < set(EIGHT_DIRECTIONAL)


def test_custom_moves_keep_order():
    moves = resolve_moves([(1, 0), (0, 1)])
    assert moves == (Coordinate(1, 0), Coordinate(0, 1))


@pytest.mark.parametrize("bad", ["six", [], ()])
def test_invalid_move_sets(bad):
    with pytest.raises(InvalidMoveSetError):
        resolve_moves(bad)
