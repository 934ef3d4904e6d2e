"""Message - User-facing messages for the DotLink UI.

Architecture:
- SIDEBAR: ONE blue info message with level and progress
- BOARD: ONE yellow instruction for what to do NOW
- TOASTS: transient feedback (win, rejected input, layout failure)

Messages know their own display level; callers decide when to show them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from dotlink.constants import StyleConfig

logger = logging.getLogger(__name__)


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for inline messages (sidebar/panels)."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger.info(f"Toast: {self.message}")
        st.toast(self.message, icon=self.icon)


# =============================================================================
# Toasts
# =============================================================================


@dataclass(frozen=True)
class LevelCompleteMessage(ToastMessage):
    """All targets connected."""

    final_score: float

    @property
    def message(self) -> str:
        return f"Congratulations! You've connected all points. Final Score: {self.final_score:.2f}"

    @property
    def icon(self) -> str:
        return StyleConfig.WIN_ICON


@dataclass(frozen=True)
class InvalidGestureMessage(ToastMessage):
    """Gesture coordinates were not finite numbers."""

    x: float
    y: float

    @property
    def message(self) -> str:
        return f"Ignored gesture with invalid coordinates ({self.x}, {self.y})"

    @property
    def icon(self) -> str:
        return StyleConfig.ERROR_ICON


@dataclass(frozen=True)
class LayoutFailedMessage(ToastMessage):
    """Level does not fit on the canvas."""

    level: int
    requested: int
    placed: int

    @property
    def message(self) -> str:
        return (
            f"Level {self.level} does not fit: placed {self.placed} of {self.requested} points. "
            f"Keeping the current game."
        )

    @property
    def icon(self) -> str:
        return StyleConfig.ERROR_ICON


# =============================================================================
# Inline messages
# =============================================================================


@dataclass(frozen=True)
class GameStatusMessage(Message):
    """Sidebar context: level and connection progress."""

    game_level: int
    connected_targets: int
    total_targets: int
    edge_count: int

    @property
    def message(self) -> str:
        return (
            f"**Level {self.game_level}** - connected {self.connected_targets}/{self.total_targets} points "
            f"with {self.edge_count} strokes"
        )

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO


@dataclass(frozen=True)
class DragInstructionMessage(Message):
    """Board instruction for the next click."""

    dragging: bool
    won: bool

    @property
    def message(self) -> str:
        if self.won:
            return "Puzzle solved! Pick a level or press Reset to play again."
        if self.dragging:
            return "Click where the stroke should end - near a point to snap to it, or on empty space."
        return "Click a point to start a stroke."

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING
