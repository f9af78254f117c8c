"""Exceptions raised when a search is requested with invalid arguments."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for all gridpath errors."""


class CoordinateOutOfBoundsError(PathfindingError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, position: tuple[int, int], size: tuple[int, int]) -> None:
        self.position = tuple(position)
        self.size = size
        super().__init__(
            f"Coordinate {self.position} is outside grid of size {size[0]}x{size[1]}"
        )


class ObstacleEndpointError(PathfindingError, ValueError):
    """The search origin is an obstacle cell."""


class InvalidMoveSetError(PathfindingError, ValueError):
    """A move set is empty or could not be resolved."""


class GridShapeError(PathfindingError, ValueError):
    """A grid is empty or its rows have different lengths."""


__all__ = [
    "PathfindingError",
    "CoordinateOutOfBoundsError",
    "ObstacleEndpointError",
    "InvalidMoveSetError",
    "GridShapeError",
]
