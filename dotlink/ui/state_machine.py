"""State machine for the DotLink game session.

Uses python-statemachine for robust state management with:
- Clear state definitions
- Guarded transitions (conditions)
- Entry/exit hooks for side effects
- Explicit event-driven transitions

Architecture Overview
---------------------
Hosts never mutate the Session directly. They call the action functions in
actions.py, which resolve gestures against the graph and then fire events
on this machine:

1. Gesture arrives (drag start/move/end) → action validates coordinates
2. Graph work happens first (snap resolution, edge, reachability)
3. The matching event fires; guards read the already-updated Session
4. GameEventListener.after_transition hands a RenderSnapshot to the host

States (3 states):
    IDLE: No drag in progress, waiting for a drag start on a vertex
    DRAGGING: Drag started on a vertex, live end follows the pointer
    WON: Every target is connected, drag starts are refused

Transitions:
    IDLE -> DRAGGING: start_drag (gesture within point radius of a vertex)
    DRAGGING -> DRAGGING: move_drag (live end update, no graph change)
    DRAGGING -> WON: end_drag (when all targets are reachable)
    DRAGGING -> IDLE: end_drag (otherwise)
    ANY -> IDLE: new_session (reset or level change)
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from dotlink.constants import LevelConfig
from dotlink.core.geometry import Point
from dotlink.generators.point_generator import PointGenerator
from dotlink.model.connection_ledger import ConnectionLedger
from dotlink.model.session import Session
from dotlink.model.snap_resolver import SnapResolver
from dotlink.model.snapshot import DragSegment, RenderSnapshot
from dotlink.model.vertex import Vertex
from dotlink.settings import GameSettings

logger = logging.getLogger(__name__)

RenderCallback = Callable[[RenderSnapshot], None]
WinCallback = Callable[[float], None]


@dataclass
class DragContext:
    """Drag in progress."""

    start_vertex: Vertex | None = None
    live_end: Point | None = None

    def clear(self) -> None:
        self.start_vertex = None
        self.live_end = None

    def segment(self) -> DragSegment | None:
        """Segment from the drag origin to the live end, if dragging."""
        if self.start_vertex is None or self.live_end is None:
            return None
        return DragSegment(start=self.start_vertex.location, end=self.live_end)


@dataclass
class GameContext:
    """Shared context/model for the state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    session: Session | None = None
    level: int = LevelConfig.DEFAULT_LEVEL
    drag: DragContext = field(default_factory=DragContext)
    final_score: float | None = None

    def snapshot(self) -> RenderSnapshot:
        """Read-only view of the current session for rendering."""
        if self.session is None:
            raise RuntimeError("No session to render - start a game first")
        return RenderSnapshot.from_session(session=self.session, live_drag=self.drag.segment())

    def __repr__(self) -> str:
        return f"GameContext(state={self.state}, level={self.level}, session={self.session!r})"


class GameEventListener:
    """Listener that forwards machine changes to the host.

    Usage:
        sm.add_listener(GameEventListener(on_render=draw, on_win=announce))
    """

    def __init__(self, on_render: Optional[RenderCallback] = None, on_win: Optional[WinCallback] = None) -> None:
        self.on_render = on_render
        self.on_win = on_win

    def after_transition(self, event: str, source: State, target: State, model: GameContext) -> None:
        """Log the transition and push a fresh snapshot to the renderer."""
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        if self.on_render is not None and model.session is not None:
            self.on_render(model.snapshot())

    def on_enter_won(self, model: GameContext) -> None:
        """Announce the final score (once per session)."""
        if self.on_win is not None and model.session is not None:
            self.on_win(model.session.score)


class GameStateMachine(StateMachine):
    """State machine for one game of connecting the dots.

    Owns the graph services (point generator, snap resolver, ledger) built
    from a single GameSettings, and the GameContext holding the Session.
    See module docstring for complete transition documentation.
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    dragging = State("Dragging")
    won = State("Won")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    # Press on a vertex
    start_drag = idle.to(dragging)
    # Pointer moved while dragging
    move_drag = dragging.to(dragging)
    # Stroke committed by the caller, then win check
    end_drag = dragging.to(won, cond="all_targets_reachable") | dragging.to(idle, unless="all_targets_reachable")
    # Reset or level change (session already generated by the caller)
    new_session = idle.to(idle) | dragging.to(idle) | won.to(idle)

    # ==========================================================================
    # Guards (Conditions)
    # ==========================================================================

    def all_targets_reachable(self) -> bool:
        """Guard: every original target is connected to the seed."""
        return self.context.session is not None and self.context.session.all_targets_reachable()

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_dragging(self) -> bool:
        return self.dragging.is_active

    @property
    def is_won(self) -> bool:
        return self.won.is_active

    # ==========================================================================
    # Entry / Exit Hooks
    # ==========================================================================

    def on_enter_idle(self) -> None:
        self.context.drag.clear()

    def on_enter_won(self) -> None:
        """Hook: freeze the session and record the final score."""
        self.context.drag.clear()
        session = self.context.session
        session.game_over = True
        self.context.final_score = session.score
        logger.info(f"Level {session.level} solved with final score {session.score:.2f}")

    # ==========================================================================
    # Transition Actions (before_* hooks)
    # ==========================================================================

    def before_start_drag(self, vertex: Vertex) -> None:
        """Capture the drag origin and seed reachability on the first drag."""
        self.context.session.seed_reachability(vertex=vertex)
        self.context.drag.start_vertex = vertex
        self.context.drag.live_end = vertex.location

    def before_move_drag(self, point: Point) -> None:
        self.context.drag.live_end = point

    def before_new_session(self, session: Session) -> None:
        """Replace the session; the old one is discarded."""
        self.context.session = session
        self.context.level = session.level
        self.context.final_score = None

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(
        self,
        context: GameContext | None = None,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        start_value: str | None = None,
    ) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            settings: Game parameters (defaults if None)
            rng: Random source for point generation
            start_value: Optional initial state value (for restoring state)
        """
        self.settings = settings or GameSettings()
        self.generator = PointGenerator(settings=self.settings, rng=rng)
        self.snap_resolver = SnapResolver(settings=self.settings)
        self.ledger = ConnectionLedger(settings=self.settings, snap_resolver=self.snap_resolver)
        model = context or GameContext()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> GameContext:
        """Alias for model."""
        return self.model

    def get_state_name(self) -> str:
        """Get current state name for display."""
        return next(state.name for state in (self.idle, self.dragging, self.won) if state.is_active)

    def __repr__(self) -> str:
        return f"GameStateMachine(state={self.get_state_name()}, model={self.context!r})"

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event=event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    @staticmethod
    def create(
        level: int = LevelConfig.DEFAULT_LEVEL,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        on_render: Optional[RenderCallback] = None,
        on_win: Optional[WinCallback] = None,
    ) -> tuple["GameStateMachine", GameContext]:
        """Factory method to create a machine with a freshly generated session.

        Args:
            level: Starting level
            settings: Game parameters (defaults if None)
            rng: Random source for point generation
            on_render: Called with the opening board, then after every transition
            on_win: Called with the final score when the puzzle is solved

        Returns:
            Tuple of (GameStateMachine, GameContext)

        Raises:
            ValueError, LayoutError: If the first session cannot be generated.
        """
        context = GameContext()
        sm = GameStateMachine(context=context, settings=settings, rng=rng)
        context.session = sm.generator.create_session(level=level)
        context.level = level
        if on_render is not None or on_win is not None:
            sm.add_listener(GameEventListener(on_render=on_render, on_win=on_win))
        if on_render is not None:
            on_render(context.snapshot())
        logger.info(f"Created GameStateMachine at level {level}")
        return sm, context
