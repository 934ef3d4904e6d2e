"""SnapResolver - Binds free-form stroke positions to graph vertices.

Two thresholds apply:
- Drag start: the nearest vertex must lie within the point radius, so drags
  only originate from a visible vertex
- Stroke end: the nearest vertex within the snap distance is reused,
  otherwise a generated vertex is created at the exact stroke end
"""

import logging
from typing import Iterable, Optional

from dotlink.core.geometry import Point
from dotlink.model.session import Session
from dotlink.model.vertex import Vertex
from dotlink.settings import GameSettings

logger = logging.getLogger(__name__)


class SnapResolver:
    """Resolves canvas positions to existing or new vertices.

    Example:
        resolver = SnapResolver(settings=GameSettings())
        vertex, created = resolver.resolve(raw_end=Point(x=5.0, y=5.0), session=session)
    """

    def __init__(self, settings: GameSettings) -> None:
        self.settings = settings

    @staticmethod
    def find_nearest(point: Point, vertices: Iterable[Vertex]) -> tuple[Optional[Vertex], float]:
        """Find the vertex closest to point.

        Ties keep the first vertex in iteration order.

        Returns:
            Tuple of (nearest vertex or None if no vertices, its distance).
        """
        best_vertex = None
        best_dist = float("inf")

        for vertex in vertices:
            dist = vertex.distance_to(point=point)
            if dist < best_dist:
                best_dist = dist
                best_vertex = vertex

        return best_vertex, best_dist

    def find_drag_start_vertex(self, point: Point, vertices: Iterable[Vertex]) -> Optional[Vertex]:
        """Vertex a drag may start from, if point lies within the point radius of it."""
        nearest, dist = self.find_nearest(point=point, vertices=vertices)
        if nearest is None or dist > self.settings.point_radius:
            return None
        return nearest

    def resolve(self, raw_end: Point, session: Session) -> tuple[Vertex, bool]:
        """Resolve a stroke end to a vertex, creating one if nothing is in reach.

        Args:
            raw_end: Canvas position where the stroke ended
            session: Session whose vertices are searched (and extended)

        Returns:
            Tuple of (vertex, was_created).
        """
        nearest, dist = self.find_nearest(point=raw_end, vertices=session.vertices)
        if nearest is not None and dist <= self.settings.snap_distance:
            logger.debug(f"Stroke end {raw_end} snapped to vertex {nearest.id} ({dist:.1f}px)")
            return nearest, False

        vertex = session.add_vertex(location=raw_end, is_generated=True)
        logger.debug(f"Stroke end {raw_end} created generated vertex {vertex.id}")
        return vertex, True
