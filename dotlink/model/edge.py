"""Edge - A committed stroke between two vertices.

Edges are undirected in meaning but keep the orientation of the stroke that
created them (start = drag origin, end = snapped stroke end). Duplicate edges
are allowed; each one adds its length to the session total.
"""

from dataclasses import dataclass

from dotlink.model.vertex import Vertex


@dataclass(frozen=True)
class Edge:
    """A stroke joining two vertices.

    Attributes:
        start: Vertex the drag originated from
        end: Vertex the stroke end resolved to
    """

    start: Vertex
    end: Vertex

    @property
    def length(self) -> float:
        """Raw Euclidean length in canvas pixels (unscaled)."""
        return self.start.location.distance_to(other=self.end.location)

    @property
    def vertex_ids(self) -> tuple[int, int]:
        """Return (start.id, end.id)."""
        return (self.start.id, self.end.id)

    def __repr__(self) -> str:
        return f"Edge({self.start.id} -> {self.end.id})"
