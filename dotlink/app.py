"""DotLink - Connect all points with the shortest total stroke length.

Click a point to start a stroke, click again to end it. Ending near a point
snaps to it; ending in empty space creates a small intermediate point.
The score starts at the layout's reference value and drops with every
stroke; the game is won once every large point is connected.

Run: streamlit run dotlink/app.py
"""

import logging

import streamlit as st

from dotlink.constants import AppConfig, GameConfig
from dotlink.model.message import DragInstructionMessage, LevelCompleteMessage
from dotlink.ui import BoardChart, ClickDetector, GameStateMachine, dispatch_click
from dotlink.ui.left_panel import SidebarRenderer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def _record_win(final_score: float) -> None:
    """Win callback: show the announcement on the next render."""
    st.session_state.pending_win = final_score


def init_session_state() -> None:
    """Initialize session state with the state machine and UI helpers."""
    if "state_machine" not in st.session_state:
        sm, ctx = GameStateMachine.create(on_win=_record_win)
        st.session_state.state_machine = sm
        st.session_state.context = ctx

    if "click_detector" not in st.session_state:
        st.session_state.click_detector = ClickDetector()

    if "board_version" not in st.session_state:
        st.session_state.board_version = 0

    if "pending_win" not in st.session_state:
        st.session_state.pending_win = None


def bump_board_version() -> None:
    """Force a fresh chart component so stale selections are dropped."""
    st.session_state.board_version += 1
    st.session_state.click_detector.clear()


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()
    sm: GameStateMachine = st.session_state.state_machine

    if SidebarRenderer(sm=sm).render():
        bump_board_version()
        st.rerun()

    snapshot = sm.context.snapshot()
    st.title(AppConfig.TITLE)
    st.subheader(snapshot.score_label)
    DragInstructionMessage(dragging=sm.is_dragging, won=sm.is_won).display()

    chart = BoardChart(
        settings=sm.settings,
        width=int(GameConfig.CANVAS_WIDTH),
        height=int(GameConfig.CANVAS_HEIGHT),
    )
    event = st.plotly_chart(
        chart.render(snapshot=snapshot),
        key=f"board_{st.session_state.board_version}",
        on_select="rerun",
        selection_mode="points",
        config={"displayModeBar": False},
    )

    points = event.get("selection", {}).get("points", []) if event else []
    click = st.session_state.click_detector.detect(points=points)
    if click is not None:
        dispatch_click(sm=sm, click=click)
        bump_board_version()
        st.rerun()

    if st.session_state.pending_win is not None:
        LevelCompleteMessage(final_score=st.session_state.pending_win).display()
        st.balloons()
        st.session_state.pending_win = None


main()
