"""RenderSnapshot - Read-only view of a session for the rendering layer.

Built after every state-affecting change and handed to the render callback.
Renderers decide visuals from it (reachable vs not, target vs generated)
without touching the live Session.
"""

from dataclasses import dataclass
from typing import Optional

from dotlink.core.geometry import Point
from dotlink.model.edge import Edge
from dotlink.model.session import Session
from dotlink.model.vertex import Vertex


@dataclass(frozen=True)
class DragSegment:
    """Line from the drag origin to the current pointer position."""

    start: Point
    end: Point


@dataclass(frozen=True)
class RenderSnapshot:
    """Immutable copy of everything a renderer needs.

    Attributes:
        vertices: All vertices in id order
        edges: All committed edges
        live_drag: Segment being dragged, None when idle
        reachable_ids: Ids connected to the seed vertex
        score: Current score (reference minus accumulated length)
        level: Level of the session
        won: True once the puzzle is solved
    """

    vertices: tuple[Vertex, ...]
    edges: tuple[Edge, ...]
    live_drag: Optional[DragSegment]
    reachable_ids: frozenset[int]
    score: float
    level: int
    won: bool

    @classmethod
    def from_session(cls, session: Session, live_drag: Optional[DragSegment] = None) -> "RenderSnapshot":
        """Copy the renderable state out of a session."""
        return cls(
            vertices=tuple(session.vertices),
            edges=tuple(session.edges),
            live_drag=live_drag,
            reachable_ids=frozenset(session.reachable_ids),
            score=session.score,
            level=session.level,
            won=session.game_over,
        )

    @property
    def score_label(self) -> str:
        """Score formatted for display."""
        return f"Score: {self.score:.2f}"

    def is_reachable(self, vertex: Vertex) -> bool:
        return vertex.id in self.reachable_ids
