"""Grid path search with a closest-cell fallback.

The search expands the cheapest frontier cell until the goal is touched. When
the frontier runs dry first, the explored cell nearest the goal becomes the
terminal cell, so callers always get the best partial path instead of an
error.

Two properties differ from textbook A* and are relied on by callers:

* ``distance_to_start`` is the metric distance from the start coordinate, not
  the accumulated path length.
* Explored cells are never put back on the frontier.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..core.cell import Cell
from ..core.coordinate import Coordinate, CoordinateLike
from ..core.grid import Grid
from ..errors import CoordinateOutOfBoundsError, ObstacleEndpointError
from ..core.distance import DistanceMetric, distance
from .moves import resolve_moves

logger = logging.getLogger(__name__)

# Insertion-ordered set of cells; values are unused.
Frontier = Dict[Cell, None]


def select_lowest_cost(frontier: Iterable[Cell]) -> Optional[Cell]:
    """Return the cell with the lowest cost, preferring the one nearer the goal.

    Cells with equal cost and equal ``distance_to_end`` keep iteration order,
    so the earliest one wins.
    """

    best: Optional[Cell] = None
    for cell in frontier:
        if best is None or best.cost > cell.cost:
            best = cell
        elif best.cost == cell.cost and best.distance_to_end > cell.distance_to_end:
            best = cell
    return best


def closest_explored_cell(
    grid: Grid,
    end: Coordinate,
    fallback: Cell,
    metric: DistanceMetric = DistanceMetric.MANHATTAN,
) -> Cell:
    """Return the explored, non-obstacle cell nearest ``end``.

    ``fallback`` is kept unless a cell is strictly closer.
    """

    closest = fallback
    closest_distance = distance(closest.position, end, metric)
    for cell in grid.iter_cells():
        if not cell.is_explored or cell.is_obstacle:
            continue
        d = distance(cell.position, end, metric)
        if d < closest_distance:
            closest = cell
            closest_distance = d
    return closest


def walk_back(terminal: Optional[Cell], start: Coordinate) -> List[Cell]:
    """Follow ``parent`` links from ``terminal`` to ``start`` and return them in order.

    The walk also stops at a missing parent or at a cell it has already
    visited; stale links on a grid that was not reset can form a loop.
    """

    path: List[Cell] = []
    seen: set[Cell] = set()
    current = terminal
    while current is not None and current not in seen:
        seen.add(current)
        path.append(current)
        if current.position == start:
            break
        current = current.parent
    path.reverse()
    return path


def _explore(
    grid: Grid,
    start: Coordinate,
    end: Coordinate,
    moves: Iterable[Coordinate],
    metric: DistanceMetric,
) -> Cell:
    """Run the frontier loop and return the terminal cell."""

    current: Optional[Cell] = None
    frontier: Frontier = {grid.cell_at(start): None}
    expanded = 0

    while frontier:
        current = select_lowest_cost(frontier)
        del frontier[current]
        current.is_explored = True
        expanded += 1

        for neighbour in grid.moveable_cells(current.position, moves):
            if neighbour.is_obstacle:
                continue
            if not neighbour.is_explored:
                frontier.setdefault(neighbour, None)

            neighbour.update_distance_to_start(start, current, metric)
            neighbour.update_distance_to_end(end, current, metric)

            if neighbour.position == end:
                neighbour.parent = current
                logger.debug(
                    "[PathSearch] Reached %s after expanding %d cells", end.as_tuple(), expanded
                )
                return neighbour

    closest = closest_explored_cell(grid, end, current, metric)
    logger.debug(
        "[PathSearch] Goal %s unreachable after expanding %d cells; closest explored cell is %s",
        end.as_tuple(),
        expanded,
        closest.position.as_tuple(),
    )
    return closest


def find_path(
    grid: Grid,
    start: CoordinateLike,
    end: CoordinateLike,
    moves: Iterable[CoordinateLike],
    metric: DistanceMetric = DistanceMetric.MANHATTAN,
) -> List[Cell]:
    """Return the cells from ``start`` towards ``end`` using ``moves`` as connectivity.

    The path ends at ``end`` when it is reachable and otherwise at the explored
    cell closest to it. Cell state on ``grid`` is modified; call
    :meth:`Grid.reset` before searching the same grid again.

    Raises
    ------
    CoordinateOutOfBoundsError
        ``start`` or ``end`` is outside the grid.
    ObstacleEndpointError
        ``start`` is an obstacle.
    InvalidMoveSetError
        ``moves`` is empty.
    """

    start_pos = Coordinate.of(start)
    end_pos = Coordinate.of(end)
    move_set = resolve_moves(moves)
    metric = DistanceMetric.parse(metric)

    for pos in (start_pos, end_pos):
        if not grid.in_bounds(pos):
            raise CoordinateOutOfBoundsError(pos.as_tuple(), grid.size)

    start_cell = grid.cell_at(start_pos)
    if start_cell.is_obstacle:
        raise ObstacleEndpointError(f"Start {start_pos.as_tuple()} is an obstacle")
    if grid.cell_at(end_pos).is_obstacle:
        logger.warning(
            "[PathSearch] Goal %s is an obstacle; returning path to the closest reachable cell",
            end_pos.as_tuple(),
        )

    if start_pos == end_pos:
        return [start_cell]

    logger.debug(
        "[PathSearch] Searching %s -> %s on %r with %d moves (%s)",
        start_pos.as_tuple(),
        end_pos.as_tuple(),
        grid,
        len(move_set),
        metric.value,
    )
    terminal = _explore(grid, start_pos, end_pos, move_set, metric)
    return walk_back(terminal, start_pos)


__all__ = [
    "find_path",
    "select_lowest_cost",
    "closest_explored_cell",
    "walk_back",
]
