"""Click detector - turns Plotly selection events into board clicks.

Streamlit reruns the script on every interaction and keeps returning the
last selection, so the detector remembers the last processed click and
reports each click only once.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from dotlink.constants import ChartConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickInfo:
    """A click on the board in canvas coordinates.

    Attributes:
        x: Canvas x of the click
        y: Canvas y of the click
        vertex_id: Id of the clicked vertex, None for empty space
    """

    x: float
    y: float
    vertex_id: Optional[int] = None

    @property
    def dedup_key(self) -> tuple[float, float, Optional[int]]:
        decimals = ChartConfig.DEDUP_KEY_DECIMALS
        return (round(self.x, decimals), round(self.y, decimals), self.vertex_id)


@dataclass
class ClickDetector:
    """Detects new clicks from Plotly selection points.

    Attributes:
        last_key: Dedup key of the last reported click
    """

    last_key: Optional[tuple[float, float, Optional[int]]] = None

    def detect(self, points: list[dict[str, Any]] | None) -> ClickInfo | None:
        """Return the click behind a selection, or None if nothing new.

        Vertex points (with customdata) win over grid points when a
        selection contains both.
        """
        if not points:
            return None

        click = None
        for point in points:
            parsed = self._parse_point(point=point)
            if parsed is None:
                continue
            if parsed.vertex_id is not None:
                click = parsed
                break
            if click is None:
                click = parsed

        if click is None or click.dedup_key == self.last_key:
            return None

        self.last_key = click.dedup_key
        logger.debug(f"Board click at ({click.x:.1f}, {click.y:.1f}), vertex={click.vertex_id}")
        return click

    def clear(self) -> None:
        """Forget the last click (after the board was replaced)."""
        self.last_key = None

    @staticmethod
    def _parse_point(point: dict[str, Any]) -> ClickInfo | None:
        x = point.get("x")
        y = point.get("y")
        if x is None or y is None:
            logger.debug(f"Selection point without coordinates: {point}")
            return None

        vertex_id = point.get("customdata")
        if isinstance(vertex_id, (list, tuple)):
            vertex_id = vertex_id[0] if vertex_id else None
        return ClickInfo(
            x=float(x),
            y=float(y),
            vertex_id=int(vertex_id) if vertex_id is not None else None,
        )
