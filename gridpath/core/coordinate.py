"""Integer grid coordinate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable ``(x, y)`` cell address. ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    @classmethod
    def of(cls, value: "CoordinateLike") -> "Coordinate":
        """Return ``value`` as a :class:`Coordinate`."""

        if isinstance(value, Coordinate):
            return value
        x, y = value
        return cls(int(x), int(y))

    def __add__(self, other: "CoordinateLike") -> "Coordinate":
        dx, dy = other
        return Coordinate(self.x + dx, self.y + dy)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


CoordinateLike = Union[Coordinate, Tuple[int, int]]


__all__ = ["Coordinate", "CoordinateLike"]
