"""BoardChart - Plotly rendering of the puzzle board.

Renders a RenderSnapshot as:
- Committed edges (black lines)
- Live drag segment (thin gray line)
- Vertices: green when reachable, otherwise blue (target) or black (generated);
  generated vertices are drawn at half size
- An invisible grid of pickable points so clicks on empty space can be
  selected like any other point

The y axis is reversed so the board uses canvas coordinates (origin top-left).
"""

import logging

import numpy as np
import plotly.graph_objects as go

from dotlink.constants import ChartConfig, StyleConfig
from dotlink.model.snapshot import RenderSnapshot
from dotlink.model.vertex import Vertex
from dotlink.settings import GameSettings

logger = logging.getLogger(__name__)

# Trace names, also used by tests and the click detector
TRACE_CLICK_GRID = "Click grid"
TRACE_EDGES = "Strokes"
TRACE_DRAG = "Drag"
TRACE_VERTICES = "Points"


class BoardChart:
    """Renders the board using Plotly.

    Example:
        chart = BoardChart(settings=GameSettings(), width=800, height=600)
        fig = chart.render(snapshot=sm.context.snapshot())
        st.plotly_chart(fig, on_select="rerun", selection_mode="points")
    """

    def __init__(self, settings: GameSettings, width: int, height: int) -> None:
        """Initialize board renderer.

        Args:
            settings: Canvas bounds and point radii
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.settings = settings
        self.width = width
        self.height = height

    @property
    def pixel_scale(self) -> float:
        """Screen pixels per canvas unit."""
        return self.width / self.settings.canvas_width

    def vertex_color(self, vertex: Vertex, snapshot: RenderSnapshot) -> str:
        if snapshot.is_reachable(vertex):
            return StyleConfig.REACHABLE_COLOR
        return StyleConfig.GENERATED_COLOR if vertex.is_generated else StyleConfig.TARGET_COLOR

    def vertex_size(self, vertex: Vertex) -> float:
        """Marker diameter in screen pixels."""
        radius = self.settings.generated_point_radius if vertex.is_generated else self.settings.point_radius
        return radius * ChartConfig.MARKER_SIZE_PER_RADIUS * self.pixel_scale

    def render(self, snapshot: RenderSnapshot) -> go.Figure:
        """Build the board figure for a snapshot.

        Returns:
            Plotly Figure object.
        """
        fig = go.Figure()
        self._add_click_grid(fig=fig)
        self._add_edges(fig=fig, snapshot=snapshot)
        self._add_drag_segment(fig=fig, snapshot=snapshot)
        self._add_vertices(fig=fig, snapshot=snapshot)

        fig.update_layout(
            width=self.width,
            height=self.height,
            showlegend=False,
            plot_bgcolor=StyleConfig.BACKGROUND_COLOR,
            paper_bgcolor=StyleConfig.BACKGROUND_COLOR,
            margin=dict(l=0, r=0, t=0, b=0),
            clickmode="event+select",
            dragmode=False,
        )
        fig.update_xaxes(range=[0, self.settings.canvas_width], visible=False, fixedrange=True)
        fig.update_yaxes(
            range=[self.settings.canvas_height, 0],
            visible=False,
            fixedrange=True,
            scaleanchor="x",
            scaleratio=1,
        )
        return fig

    def _add_click_grid(self, fig: go.Figure) -> None:
        step = ChartConfig.CLICK_GRID_STEP
        xs = np.arange(0.0, self.settings.canvas_width + step / 2, step)
        ys = np.arange(0.0, self.settings.canvas_height + step / 2, step)
        grid_x, grid_y = np.meshgrid(xs, ys)
        fig.add_trace(
            go.Scatter(
                x=grid_x.ravel(),
                y=grid_y.ravel(),
                mode="markers",
                marker=dict(size=step * self.pixel_scale, opacity=0),
                hoverinfo="none",
                name=TRACE_CLICK_GRID,
            )
        )

    def _add_edges(self, fig: go.Figure, snapshot: RenderSnapshot) -> None:
        xs: list[float | None] = []
        ys: list[float | None] = []
        for edge in snapshot.edges:
            xs.extend([edge.start.x, edge.end.x, None])
            ys.extend([edge.start.y, edge.end.y, None])
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line=dict(color=StyleConfig.EDGE_COLOR, width=StyleConfig.EDGE_WIDTH),
                hoverinfo="skip",
                name=TRACE_EDGES,
            )
        )

    def _add_drag_segment(self, fig: go.Figure, snapshot: RenderSnapshot) -> None:
        if snapshot.live_drag is None:
            return
        segment = snapshot.live_drag
        fig.add_trace(
            go.Scatter(
                x=[segment.start.x, segment.end.x],
                y=[segment.start.y, segment.end.y],
                mode="lines",
                line=dict(color=StyleConfig.DRAG_LINE_COLOR, width=StyleConfig.DRAG_LINE_WIDTH),
                hoverinfo="skip",
                name=TRACE_DRAG,
            )
        )

    def _add_vertices(self, fig: go.Figure, snapshot: RenderSnapshot) -> None:
        vertices = snapshot.vertices
        fig.add_trace(
            go.Scatter(
                x=[v.x for v in vertices],
                y=[v.y for v in vertices],
                mode="markers",
                marker=dict(
                    color=[self.vertex_color(vertex=v, snapshot=snapshot) for v in vertices],
                    size=[self.vertex_size(vertex=v) for v in vertices],
                    line=dict(width=0),
                ),
                customdata=[v.id for v in vertices],
                hovertemplate="Point %{customdata}<extra></extra>",
                name=TRACE_VERTICES,
            )
        )
