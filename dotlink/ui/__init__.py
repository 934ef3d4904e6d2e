"""User interface components for DotLink.

Core Components:
- state_machine.py: GameStateMachine (3 states) + GameContext + GameEventListener
- actions.py: Gesture and session actions (the host entry points)
- validators.py: Input validation with Optional[ToastMessage] returns
- click_detector.py / click_handlers.py: Plotly clicks to drag gestures

Rendering:
- board_chart.py: Plotly board figure
- left_panel.py: Streamlit sidebar (imported directly, needs Streamlit)
"""

from dotlink.ui.actions import (
    begin_drag,
    change_level,
    finish_drag,
    reset_game,
    update_drag,
)
from dotlink.ui.board_chart import BoardChart
from dotlink.ui.click_detector import ClickDetector, ClickInfo
from dotlink.ui.click_handlers import dispatch_click
from dotlink.ui.state_machine import (
    GameContext,
    GameEventListener,
    GameStateMachine,
)

__all__ = [
    "GameStateMachine",
    "GameContext",
    "GameEventListener",
    "BoardChart",
    "ClickDetector",
    "ClickInfo",
    "dispatch_click",
    "begin_drag",
    "update_drag",
    "finish_drag",
    "change_level",
    "reset_game",
]
