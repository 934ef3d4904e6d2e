"""Configuration constants for DotLink.

All configurable parameters are centralized here for easy tuning.
Runtime code receives them through GameSettings (settings.py) so a host
can override any of them without touching this module.

Classes:
    AppConfig: UI application settings
    GameConfig: Board geometry, snapping and scoring parameters
    LevelConfig: Selectable difficulty levels
    StyleConfig: Visual colors and styling
    ChartConfig: Board rendering settings
"""


class AppConfig:
    """UI application settings."""

    TITLE = "DotLink - Connect the Dots"
    ICON = "🔵"
    LAYOUT = "wide"


class GameConfig:
    """Board geometry, snapping and scoring parameters."""

    # Radius of an original target point (canvas pixels)
    POINT_RADIUS = 15.0

    # Endpoint snapping reaches this multiple of the point radius
    SNAP_DISTANCE_FACTOR = 1.5

    # Stroke lengths and the reference score are divided by this for display
    SCORE_SCALE = 10.0

    # Canvas bounds used for point generation
    CANVAS_WIDTH = 800.0
    CANVAS_HEIGHT = 600.0

    # Rejection sampling gives up after this many candidate draws
    MAX_PLACEMENT_ATTEMPTS = 10_000

    # Generated (intermediate) vertices are drawn smaller
    GENERATED_RADIUS_FACTOR = 0.5


assert GameConfig.SNAP_DISTANCE_FACTOR >= 1.0, "Snapping must reach at least the visible point radius"
assert 0 < GameConfig.GENERATED_RADIUS_FACTOR <= 1.0


class LevelConfig:
    """Selectable difficulty levels."""

    DEFAULT_LEVEL = 1
    LEVELS = [1, 2, 3, 4, 5]

    assert DEFAULT_LEVEL in LEVELS

    @staticmethod
    def points_for_level(level: int) -> int:
        """Number of target points for a level (always odd, at least 3)."""
        return 2 * level + 1


class StyleConfig:
    """Visual colors and styling for the board."""

    BACKGROUND_COLOR = "#ffffff"
    EDGE_COLOR = "black"
    EDGE_WIDTH = 2
    DRAG_LINE_COLOR = "gray"
    DRAG_LINE_WIDTH = 1

    REACHABLE_COLOR = "green"
    TARGET_COLOR = "blue"
    GENERATED_COLOR = "black"

    WIN_ICON = "🎉"
    ERROR_ICON = "⚠️"


class ChartConfig:
    """Board rendering settings."""

    # Plotly marker size is a diameter in pixels
    MARKER_SIZE_PER_RADIUS = 2.0

    # Spacing of the invisible click grid covering empty canvas space
    CLICK_GRID_STEP = 10.0

    # Decimal places for click dedup keys
    DEDUP_KEY_DECIMALS = 3
