"""Session - The complete mutable state of one puzzle attempt.

A Session is created by the point generator for every game start, level
change and reset. It owns:
- vertices: targets plus intermediate vertices, in creation order
- edges: append-only list of committed strokes
- accumulated_length: running sum of scaled edge lengths
- reference_score: fixed par value for this layout
- reachable_ids: ids of vertices connected to the first dragged vertex

Replacing the game means constructing a new Session; nothing is shared
between sessions.
"""

import logging
from dataclasses import dataclass, field

from dotlink.core.geometry import Point
from dotlink.model.edge import Edge
from dotlink.model.vertex import Vertex

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """State of a single puzzle attempt.

    Attributes:
        level: Difficulty level the layout was generated for (>= 1)
        reference_score: Scaled mean distance of targets to their centroid
        vertices: All vertices in id order
        edges: Committed strokes in commit order
        accumulated_length: Sum of scaled lengths of all edges
        reachable_ids: Vertex ids connected to the seed vertex
        game_over: True once every target is reachable

    Example:
        session = Session(level=1, reference_score=12.5)
        vertex = session.add_vertex(location=Point(x=50.0, y=50.0), is_generated=False)
    """

    level: int
    reference_score: float
    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    accumulated_length: float = 0.0
    reachable_ids: set[int] = field(default_factory=set)
    game_over: bool = False

    _vertex_counter: int = field(default=0, repr=False)

    def _next_vertex_id(self) -> int:
        vertex_id = self._vertex_counter
        self._vertex_counter += 1
        return vertex_id

    # =========================================================================
    # Vertex Operations
    # =========================================================================

    def add_vertex(self, location: Point, is_generated: bool) -> Vertex:
        """Create a vertex with the next id and append it.

        Args:
            location: Canvas position of the new vertex
            is_generated: True for intermediate vertices

        Returns:
            The newly created Vertex.
        """
        vertex = Vertex(id=self._next_vertex_id(), location=location, is_generated=is_generated)
        self.vertices.append(vertex)
        return vertex

    @property
    def target_vertices(self) -> list[Vertex]:
        """Original puzzle targets (not generated by snapping)."""
        return [v for v in self.vertices if not v.is_generated]

    @property
    def generated_vertices(self) -> list[Vertex]:
        """Intermediate vertices created by strokes ending in empty space."""
        return [v for v in self.vertices if v.is_generated]

    # =========================================================================
    # Reachability and Scoring
    # =========================================================================

    def seed_reachability(self, vertex: Vertex) -> bool:
        """Seed the reachable set with the first dragged vertex.

        Only the very first drag of a session seeds; later calls are no-ops.

        Returns:
            True if the vertex became the seed.
        """
        if self.reachable_ids:
            return False
        self.reachable_ids.add(vertex.id)
        logger.debug(f"Reachability seeded with vertex {vertex.id}")
        return True

    def is_reachable(self, vertex: Vertex) -> bool:
        """Check whether a vertex is connected to the seed."""
        return vertex.id in self.reachable_ids

    def all_targets_reachable(self) -> bool:
        """Win condition: every original target is in the reachable set."""
        targets = self.target_vertices
        return bool(targets) and all(v.id in self.reachable_ids for v in targets)

    @property
    def score(self) -> float:
        """Current score (reference minus accumulated length, may be negative)."""
        return self.reference_score - self.accumulated_length

    def __repr__(self) -> str:
        return (
            f"Session(level={self.level}, vertices={len(self.vertices)}, edges={len(self.edges)}, "
            f"reachable={len(self.reachable_ids)}, score={self.score:.2f})"
        )
