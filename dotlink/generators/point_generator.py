"""PointGenerator - Random target layouts sized by difficulty level.

Places 2 * level + 1 non-overlapping target points by rejection sampling:
1. Draw a candidate uniformly inside the canvas, inset by one point radius
2. Accept it only if it keeps twice the point radius to every accepted point
3. Repeat until the layout is full or the attempt cap is exhausted

The reference score of a layout is the mean distance of its targets to their
centroid, divided by the score scale.
"""

import logging
import random
from dataclasses import dataclass

from dotlink.constants import LevelConfig
from dotlink.core.geometry import Geometry, Point
from dotlink.model.session import Session
from dotlink.model.vertex import Vertex
from dotlink.settings import GameSettings

logger = logging.getLogger(__name__)


class LayoutError(RuntimeError):
    """Raised when the requested number of points does not fit on the canvas.

    Attributes:
        requested: Number of points the level needs
        placed: Number of points accepted before giving up
        attempts: Candidate draws made
    """

    def __init__(self, requested: int, placed: int, attempts: int) -> None:
        self.requested = requested
        self.placed = placed
        self.attempts = attempts
        super().__init__(
            f"Could only place {placed} of {requested} points after {attempts} attempts - "
            f"canvas too small for this level"
        )


@dataclass(frozen=True)
class GeneratedLayout:
    """Result of point generation.

    Attributes:
        vertices: Target vertices with ids 0..N-1 in placement order
        reference_score: Scaled mean distance of targets to their centroid
    """

    vertices: tuple[Vertex, ...]
    reference_score: float


class PointGenerator:
    """Generates target layouts and fresh sessions.

    Example:
        generator = PointGenerator(settings=GameSettings(), rng=random.Random(7))
        session = generator.create_session(level=2)
        len(session.vertices)  # 5
    """

    def __init__(self, settings: GameSettings, rng: random.Random | None = None) -> None:
        """Initialize generator.

        Args:
            settings: Canvas bounds, point radius and attempt cap
            rng: Random source (defaults to a fresh unseeded Random)
        """
        self.settings = settings
        self.rng = rng or random.Random()

    def generate(self, level: int) -> GeneratedLayout:
        """Place the targets for a level.

        Args:
            level: Difficulty level (integer >= 1)

        Returns:
            GeneratedLayout with 2 * level + 1 vertices.

        Raises:
            ValueError: If level is not an integer >= 1.
            LayoutError: If the points cannot be placed within the attempt cap.
        """
        if isinstance(level, bool) or not isinstance(level, int) or level < 1:
            raise ValueError(f"Level must be an integer >= 1, got {level!r}")

        count = LevelConfig.points_for_level(level)
        positions = self._place_points(count=count)
        vertices = tuple(Vertex(id=i, location=p, is_generated=False) for i, p in enumerate(positions))
        reference_score = self.reference_score(points=positions)

        logger.info(f"Generated level {level}: {count} points, reference score {reference_score:.2f}")
        return GeneratedLayout(vertices=vertices, reference_score=reference_score)

    def create_session(self, level: int) -> Session:
        """Generate a layout and wrap it in a new Session.

        Raises:
            ValueError, LayoutError: As for generate().
        """
        layout = self.generate(level=level)
        session = Session(level=level, reference_score=layout.reference_score)
        for vertex in layout.vertices:
            session.add_vertex(location=vertex.location, is_generated=False)
        return session

    def reference_score(self, points: list[Point]) -> float:
        """Scaled mean distance of points to their centroid (order independent)."""
        return Geometry.mean_distance_to_centroid(points=points) / self.settings.score_scale

    def _place_points(self, count: int) -> list[Point]:
        """Rejection-sample count points with minimum spacing."""
        radius = self.settings.point_radius
        x_max = self.settings.canvas_width - radius
        y_max = self.settings.canvas_height - radius
        if x_max < radius or y_max < radius:
            raise LayoutError(requested=count, placed=0, attempts=0)

        min_spacing = self.settings.min_vertex_spacing
        accepted: list[Point] = []
        attempts = 0

        while len(accepted) < count:
            if attempts >= self.settings.max_placement_attempts:
                logger.warning(f"Point placement gave up after {attempts} attempts ({len(accepted)}/{count})")
                raise LayoutError(requested=count, placed=len(accepted), attempts=attempts)
            attempts += 1

            candidate = Point(x=self.rng.uniform(radius, x_max), y=self.rng.uniform(radius, y_max))
            if all(Geometry.distance(a=p, b=candidate) >= min_spacing for p in accepted):
                accepted.append(candidate)

        logger.debug(f"Placed {count} points in {attempts} attempts")
        return accepted
