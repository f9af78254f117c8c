"""Config-driven front end for :func:`~gridpath.search.path_search.find_path`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union
import logging

from ..config import CONFIG, SearchConfig
from ..core.cell import Cell
from ..core.coordinate import Coordinate, CoordinateLike
from ..core.grid import Grid
from ..core.distance import DistanceMetric
from .moves import MoveSet, resolve_moves
from .path_search import find_path

logger = logging.getLogger(__name__)


@dataclass
class PlanResult:
    """Outcome of :meth:`GridPlanner.plan`."""

    path: List[Cell]
    reached_goal: bool
    expanded: int

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [cell.position.as_tuple() for cell in self.path]


class GridPlanner:
    """Run searches with a fixed move set and metric.

    Arguments left as ``None`` are taken from ``settings`` (``CONFIG.search``
    by default).
    """

    def __init__(
        self,
        moves: Union[str, int, Iterable[CoordinateLike], None] = None,
        metric: Union[DistanceMetric, str, None] = None,
        reset_grid: Optional[bool] = None,
        settings: Optional[SearchConfig] = None,
    ) -> None:
        settings = settings if settings is not None else CONFIG.search
        self.moves: MoveSet = resolve_moves(moves if moves is not None else settings.moves)
        self.metric = DistanceMetric.parse(metric if metric is not None else settings.metric)
        self.reset_grid = settings.reset_grid if reset_grid is None else reset_grid

    def plan(self, grid: Grid, start: CoordinateLike, end: CoordinateLike) -> PlanResult:
        """Search ``grid`` from ``start`` to ``end`` and summarise the result."""

        if self.reset_grid:
            grid.reset()
        path = find_path(grid, start, end, self.moves, self.metric)
        reached = (
            bool(path)
            and path[0].position == Coordinate.of(start)
            and path[-1].position == Coordinate.of(end)
        )
        expanded = sum(
            1 for cell in grid.iter_cells() if cell.is_explored and not cell.is_obstacle
        )
        if not reached:
            logger.info(
                "[Planner] No route to %s; partial path of %d cells ends at %s",
                tuple(end),
                len(path),
                path[-1].position.as_tuple() if path else None,
            )
        return PlanResult(path=path, reached_goal=reached, expanded=expanded)


__all__ = ["GridPlanner", "PlanResult"]
