"""Distance policies shared by the search cost model and the fallback scan."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union


class DistanceMetric(Enum):
    """Selectable separation estimate between two grid coordinates."""

    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    @classmethod
    def parse(cls, value: "DistanceMetric | str") -> "DistanceMetric":
        """Resolve ``value`` from a metric or a case-insensitive name."""

        if isinstance(value, DistanceMetric):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown distance metric '{value}' (expected one of: {names})"
            ) from None


def distance(a, b, metric: DistanceMetric = DistanceMetric.MANHATTAN) -> Union[int, float]:
    """Return the separation between coordinates ``a`` and ``b``.

    Manhattan distance is returned as an ``int``; Euclidean as a ``float``.
    Both accept :class:`~gridpath.core.coordinate.Coordinate` instances or
    plain ``(x, y)`` tuples.
    """

    ax, ay = a
    bx, by = b
    if metric is DistanceMetric.EUCLIDEAN:
        return math.hypot(bx - ax, by - ay)
    return abs(bx - ax) + abs(by - ay)


__all__ = ["DistanceMetric", "distance"]
