"""Sidebar with level selection, reset and progress.

Buttons call the action layer; a LayoutError from generation is shown as a
toast and the current game stays on the board.
"""

import logging
from typing import Callable

import streamlit as st

from dotlink.constants import LevelConfig
from dotlink.generators.point_generator import LayoutError
from dotlink.model.message import GameStatusMessage, LayoutFailedMessage
from dotlink.ui.actions import change_level, reset_game
from dotlink.ui.state_machine import GameStateMachine

logger = logging.getLogger(__name__)


def _run_new_session(sm: GameStateMachine, start: Callable[[], object], level: int) -> bool:
    """Run a session-replacing action, reporting layout failures."""
    try:
        start()
    except LayoutError as e:
        logger.warning(f"Level {level} layout failed: {e}")
        LayoutFailedMessage(level=level, requested=e.requested, placed=e.placed).display()
        return False
    return True


class SidebarRenderer:
    """Renders the sidebar controls.

    Example:
        if SidebarRenderer(sm=sm).render():
            st.rerun()
    """

    def __init__(self, sm: GameStateMachine) -> None:
        self.sm = sm

    def render(self) -> bool:
        """Draw the sidebar.

        Returns:
            True if a new session was started (board must be redrawn).
        """
        changed = False
        with st.sidebar:
            st.header("Level")
            columns = st.columns(len(LevelConfig.LEVELS))
            for column, level in zip(columns, LevelConfig.LEVELS):
                selected = level == self.sm.context.level
                if column.button(str(level), key=f"level_{level}", type="primary" if selected else "secondary"):
                    changed = _run_new_session(
                        sm=self.sm, start=lambda lvl=level: change_level(sm=self.sm, level=lvl), level=level
                    )

            if st.button("Reset", key="reset_game", use_container_width=True):
                changed = _run_new_session(
                    sm=self.sm, start=lambda: reset_game(sm=self.sm), level=self.sm.context.level
                )

            self._status_message().display()
        return changed

    def _status_message(self) -> GameStatusMessage:
        session = self.sm.context.session
        targets = session.target_vertices
        return GameStatusMessage(
            game_level=session.level,
            connected_targets=sum(1 for v in targets if session.is_reachable(vertex=v)),
            total_targets=len(targets),
            edge_count=len(session.edges),
        )
