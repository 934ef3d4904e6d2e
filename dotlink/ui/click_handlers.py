"""Click handlers - map board clicks onto drag gestures.

A click-driven host has no press/move/release stream, so a stroke takes
two clicks:
- IDLE: click = drag start (must hit a vertex)
- DRAGGING: click = drag end (snaps or creates a vertex)
- WON: clicks are ignored until a new session starts
"""

import logging

from dotlink.model.connection_ledger import EdgeResult
from dotlink.ui.actions import begin_drag, finish_drag
from dotlink.ui.click_detector import ClickInfo
from dotlink.ui.state_machine import GameStateMachine

logger = logging.getLogger(__name__)


def dispatch_click(sm: GameStateMachine, click: ClickInfo) -> EdgeResult | None:
    """Route a click to the action matching the current state.

    Returns:
        EdgeResult when the click committed a stroke, None otherwise.
    """
    if sm.is_idle:
        begin_drag(sm=sm, x=click.x, y=click.y)
        return None
    if sm.is_dragging:
        return finish_drag(sm=sm, x=click.x, y=click.y)

    logger.info(f"Click ignored in state {sm.get_state_name()}")
    return None
