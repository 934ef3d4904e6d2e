"""Vertex - A point of the puzzle graph.

A Vertex is either an original target placed by the point generator or an
intermediate vertex created when a stroke ends in empty space.
It wraps a Point for its location (single source of truth) and never moves.
"""

from dataclasses import dataclass

from dotlink.core.geometry import Point


@dataclass(frozen=True)
class Vertex:
    """A vertex of the puzzle graph.

    Attributes:
        id: Unique within a session, assigned in creation order
        location: Canvas position (immutable)
        is_generated: False for puzzle targets, True for vertices created
            by a stroke ending away from every existing vertex

    Example:
        vertex = Vertex(id=0, location=Point(x=10.0, y=20.0))
        vertex.x  # 10.0
    """

    id: int
    location: Point
    is_generated: bool = False

    @property
    def x(self) -> float:
        """X coordinate delegated from location."""
        return self.location.x

    @property
    def y(self) -> float:
        """Y coordinate delegated from location."""
        return self.location.y

    def distance_to(self, point: Point) -> float:
        """Euclidean distance from this vertex to a canvas point."""
        return self.location.distance_to(other=point)

    def __repr__(self) -> str:
        kind = "generated" if self.is_generated else "target"
        return f"Vertex({self.id}, {kind}, {self.location})"
