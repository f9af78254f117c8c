"""Named move sets describing grid connectivity."""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from ..core.coordinate import Coordinate, CoordinateLike
from ..errors import InvalidMoveSetError


MoveSet = Tuple[Coordinate, ...]

FOUR_DIRECTIONAL: MoveSet = (
    Coordinate(0, -1),
    Coordinate(0, 1),
    Coordinate(-1, 0),
    Coordinate(1, 0),
)

EIGHT_DIRECTIONAL: MoveSet = FOUR_DIRECTIONAL + (
    Coordinate(-1, -1),
    Coordinate(1, -1),
    Coordinate(-1, 1),
    Coordinate(1, 1),
)

_NAMED_MOVES = {
    "four": FOUR_DIRECTIONAL,
    "4": FOUR_DIRECTIONAL,
    "eight": EIGHT_DIRECTIONAL,
    "8": EIGHT_DIRECTIONAL,
}


def resolve_moves(moves: Union[str, int, Iterable[CoordinateLike]]) -> MoveSet:
    """Return ``moves`` as a tuple of offsets.

    ``moves`` is either a name (``"four"``, ``"eight"``, ``4`` or ``8``) or an
    iterable of ``(dx, dy)`` offsets whose order is preserved.
    """

    if isinstance(moves, (str, int)):
        key = str(moves).strip().lower()
        if key not in _NAMED_MOVES:
            raise InvalidMoveSetError(f"Unknown move set '{moves}'")
        return _NAMED_MOVES[key]

    resolved = tuple(Coordinate.of(m) for m in moves)
    if not resolved:
        raise InvalidMoveSetError("Move set must contain at least one offset")
    return resolved


__all__ = ["MoveSet", "FOUR_DIRECTIONAL", "EIGHT_DIRECTIONAL", "resolve_moves"]
