"""Per-position search state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .coordinate import Coordinate
from .distance import DistanceMetric, distance


@dataclass(eq=False)
class Cell:
    """One grid position and the state a search records for it.

    Cells compare and hash by identity so they can be kept in the frontier
    directly. ``parent`` points at another cell of the same grid.
    """

    position: Coordinate
    is_obstacle: bool = False
    is_explored: bool = field(init=False)
    distance_to_start: float = field(default=math.inf, init=False)
    distance_to_end: float = field(default=math.inf, init=False)
    parent: Optional["Cell"] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = Coordinate.of(self.position)
        # Obstacles start out explored so they never join the frontier.
        self.is_explored = self.is_obstacle

    @property
    def cost(self) -> float:
        return self.distance_to_start + self.distance_to_end

    def update_distance_to_start(
        self,
        start: Coordinate,
        parent: "Cell",
        metric: DistanceMetric = DistanceMetric.MANHATTAN,
    ) -> bool:
        """Lower ``distance_to_start`` and adopt ``parent`` if it improves.

        The distance is measured straight from ``start`` rather than summed
        along the path, and truncated to an integer.
        """

        new_distance = int(distance(start, self.position, metric))
        if self.distance_to_start > new_distance:
            self.distance_to_start = new_distance
            self.parent = parent
            return True
        return False

    def update_distance_to_end(
        self,
        end: Coordinate,
        parent: "Cell",
        metric: DistanceMetric = DistanceMetric.MANHATTAN,
    ) -> bool:
        """Lower ``distance_to_end`` and adopt ``parent`` if it improves."""

        new_distance = int(distance(end, self.position, metric))
        if self.distance_to_end > new_distance:
            self.distance_to_end = new_distance
            self.parent = parent
            return True
        return False

    def reset(self) -> None:
        """Restore the search fields to their creation values."""

        self.is_explored = self.is_obstacle
        self.distance_to_start = math.inf
        self.distance_to_end = math.inf
        self.parent = None


__all__ = ["Cell"]
