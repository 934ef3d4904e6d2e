"""Planar geometry on the game canvas.

Provides the geometry atom and helper functions used by every other layer:
- Point: canvas-local (x, y) coordinate
- Distance calculation (Euclidean)
- Centroid calculation (arithmetic mean)

Coordinates are canvas pixels with the origin in the top-left corner.
"""

from dataclasses import dataclass
from math import hypot
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Point:
    """A canvas-local position.

    Attributes:
        x: Horizontal coordinate in pixels
        y: Vertical coordinate in pixels

    Example:
        point = Point(x=120.0, y=45.5)
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (np.isfinite(self.x) and np.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")

    @property
    def xy(self) -> tuple[float, float]:
        """Return (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return Geometry.distance(a=self, b=other)

    def __repr__(self) -> str:
        return f"Point(x={self.x:.1f}, y={self.y:.1f})"


class Geometry:
    """Static methods for planar calculations on the canvas."""

    @staticmethod
    def distance(a: Point, b: Point) -> float:
        """Euclidean distance between two points.

        Args:
            a: First point
            b: Second point

        Returns:
            Straight-line distance in pixels.
        """
        return hypot(b.x - a.x, b.y - a.y)

    @staticmethod
    def centroid(points: Iterable[Point]) -> Point:
        """Arithmetic mean of a non-empty point collection.

        Args:
            points: Points to average

        Returns:
            Point at the mean x and mean y.

        Raises:
            ValueError: If points is empty.
        """
        coords = np.array([p.xy for p in points], dtype=float)
        if coords.size == 0:
            raise ValueError("Cannot compute centroid of an empty point set")
        mean_x, mean_y = coords.mean(axis=0)
        return Point(x=float(mean_x), y=float(mean_y))

    @staticmethod
    def mean_distance_to_centroid(points: Iterable[Point]) -> float:
        """Average distance of the points to their own centroid."""
        point_list = list(points)
        center = Geometry.centroid(points=point_list)
        return float(np.mean([Geometry.distance(a=p, b=center) for p in point_list]))
