"""ConnectionLedger - Append-only edge list with length and score bookkeeping.

Committing a stroke:
1. Resolve the stroke end (snap to a vertex or create a generated one)
2. Append the edge
3. Add its scaled length to the running total
4. Propagate reachability

Lengths accumulate incrementally; the total is never recomputed from the
edge list. Edges are never removed during a session.
"""

import logging
from dataclasses import dataclass

from dotlink.core.geometry import Point
from dotlink.model.edge import Edge
from dotlink.model.reachability import ReachabilityTracker
from dotlink.model.session import Session
from dotlink.model.snap_resolver import SnapResolver
from dotlink.model.vertex import Vertex
from dotlink.settings import GameSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeResult:
    """Outcome of committing one stroke.

    Attributes:
        edge: The appended edge
        end_created: True if the stroke end created a generated vertex
        length: Scaled length added to the session total
        score: Session score after the edge
        newly_reachable: Vertex ids that joined the reachable set
    """

    edge: Edge
    end_created: bool
    length: float
    score: float
    newly_reachable: frozenset[int]


class ConnectionLedger:
    """Records strokes as edges and keeps the score current.

    Example:
        ledger = ConnectionLedger(settings=GameSettings())
        result = ledger.add_edge(session=session, start=vertex, raw_end=Point(x=50.0, y=50.0))
        print(f"Score: {result.score:.2f}")
    """

    def __init__(self, settings: GameSettings, snap_resolver: SnapResolver | None = None) -> None:
        self.settings = settings
        self.snap_resolver = snap_resolver or SnapResolver(settings=settings)

    def add_edge(self, session: Session, start: Vertex, raw_end: Point) -> EdgeResult:
        """Commit a stroke from start to raw_end.

        Args:
            session: Session to extend
            start: Vertex the drag originated from (must belong to session)
            raw_end: Canvas position where the stroke ended

        Returns:
            EdgeResult describing the committed edge.
        """
        end, created = self.snap_resolver.resolve(raw_end=raw_end, session=session)

        edge = Edge(start=start, end=end)
        session.edges.append(edge)

        length = edge.length / self.settings.score_scale
        session.accumulated_length += length

        newly_reachable = ReachabilityTracker.propagate(session=session)

        logger.info(
            f"Edge {start.id} -> {end.id} added (+{length:.2f}), "
            f"score {session.score:.2f}, reachable {len(session.reachable_ids)}/{len(session.vertices)}"
        )
        return EdgeResult(
            edge=edge,
            end_created=created,
            length=length,
            score=session.score,
            newly_reachable=frozenset(newly_reachable),
        )
