"""Fixed-size grid of :class:`Cell` objects."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .cell import Cell
from .coordinate import Coordinate, CoordinateLike
from ..errors import CoordinateOutOfBoundsError, GridShapeError


class Grid:
    """Rectangular array of cells indexed ``cells[y][x]``.

    The grid owns every cell. A search mutates cell state in place, so a grid
    must not be shared by two searches at once and has to be :meth:`reset`
    before it is searched again.
    """

    def __init__(self, cells: Sequence[Sequence[Cell]]):
        rows: List[List[Cell]] = [list(row) for row in cells]
        if not rows or not rows[0]:
            raise GridShapeError("Grid must contain at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise GridShapeError("Grid rows must all have the same length")
        self.cells = rows
        self.size: Tuple[int, int] = (width, len(rows))

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    @classmethod
    def open(
        cls, width: int, height: int, obstacles: Iterable[CoordinateLike] = ()
    ) -> "Grid":
        """Return a ``width`` x ``height`` grid with ``obstacles`` blocked."""

        if width <= 0 or height <= 0:
            raise GridShapeError(f"Invalid grid size {width}x{height}")
        blocked = {Coordinate.of(p) for p in obstacles}
        return cls(
            [
                [Cell(Coordinate(x, y), Coordinate(x, y) in blocked) for x in range(width)]
                for y in range(height)
            ]
        )

    @classmethod
    def from_rows(cls, rows: Iterable[str], obstacle: str = "#") -> "Grid":
        """Build a grid from strings, one per row; ``obstacle`` marks blocked cells."""

        return cls(
            [
                [Cell(Coordinate(x, y), ch == obstacle) for x, ch in enumerate(row)]
                for y, row in enumerate(rows)
            ]
        )

    # ------------------------------------------------------------------
    # Shape and lookup
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: CoordinateLike) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def try_get(self, pos: CoordinateLike) -> Optional[Cell]:
        """Return the cell at ``pos`` or ``None`` when it lies off the grid."""

        if not self.in_bounds(pos):
            return None
        x, y = pos
        return self.cells[y][x]

    def cell_at(self, pos: CoordinateLike) -> Cell:
        cell = self.try_get(pos)
        if cell is None:
            raise CoordinateOutOfBoundsError(tuple(pos), self.size)
        return cell

    def moveable_cells(
        self, pos: CoordinateLike, moves: Iterable[CoordinateLike]
    ) -> List[Cell]:
        """Return the in-bounds cells reached from ``pos`` by each move, in order."""

        origin = Coordinate.of(pos)
        found: List[Cell] = []
        for move in moves:
            cell = self.try_get(origin + move)
            if cell is not None:
                found.append(cell)
        return found

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""

        for row in self.cells:
            yield from row

    def reset(self) -> None:
        """Clear search state on every cell."""

        for cell in self.iter_cells():
            cell.reset()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


__all__ = ["Grid"]
