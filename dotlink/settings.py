"""GameSettings - Runtime parameters for the connectivity engine.

Every core component receives a GameSettings instance instead of reading
constants directly, so a host can tune radius, snapping, scoring and canvas
size per game.
"""

from dataclasses import dataclass

from dotlink.constants import GameConfig


@dataclass(frozen=True)
class GameSettings:
    """Tunable parameters for point generation, snapping and scoring.

    Attributes:
        point_radius: Radius of an original target point
        snap_distance_factor: Endpoint snap reach as a multiple of point_radius
        score_scale: Divisor applied to lengths and the reference score
        canvas_width: Width of the generation area
        canvas_height: Height of the generation area
        max_placement_attempts: Candidate draws before generation gives up

    Example:
        settings = GameSettings(point_radius=10.0, canvas_width=400.0)
        settings.snap_distance  # 15.0
    """

    point_radius: float = GameConfig.POINT_RADIUS
    snap_distance_factor: float = GameConfig.SNAP_DISTANCE_FACTOR
    score_scale: float = GameConfig.SCORE_SCALE
    canvas_width: float = GameConfig.CANVAS_WIDTH
    canvas_height: float = GameConfig.CANVAS_HEIGHT
    max_placement_attempts: int = GameConfig.MAX_PLACEMENT_ATTEMPTS

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.point_radius <= 0:
            raise ValueError(f"point_radius must be positive, got {self.point_radius}")
        if self.snap_distance_factor <= 0:
            raise ValueError(f"snap_distance_factor must be positive, got {self.snap_distance_factor}")
        if self.score_scale <= 0:
            raise ValueError(f"score_scale must be positive, got {self.score_scale}")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(f"Canvas must have positive size, got {self.canvas_width}x{self.canvas_height}")
        if self.max_placement_attempts < 1:
            raise ValueError(f"max_placement_attempts must be at least 1, got {self.max_placement_attempts}")

    @property
    def snap_distance(self) -> float:
        """Maximum distance at which a stroke end binds to an existing vertex."""
        return self.point_radius * self.snap_distance_factor

    @property
    def min_vertex_spacing(self) -> float:
        """Minimum distance between generated target points (no overlap)."""
        return self.point_radius * 2

    @property
    def generated_point_radius(self) -> float:
        """Display radius of vertices created by snapping into empty space."""
        return self.point_radius * GameConfig.GENERATED_RADIUS_FACTOR
