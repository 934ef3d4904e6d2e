"""Game actions - the entry points a host calls for user input.

Each action validates its input, performs the graph work, then fires the
matching state machine event so listeners see the updated session:

- begin_drag: press near a vertex starts a stroke
- update_drag: pointer movement while dragging
- finish_drag: release commits the stroke as an edge, then checks for a win
- change_level: new layout for another level
- reset_game: new layout for the current level

Rejected input (non-finite coordinates, presses away from vertices, drags
after a win) leaves all state untouched.
"""

import logging
from typing import Any

from dotlink.core.geometry import Point
from dotlink.model.connection_ledger import EdgeResult
from dotlink.model.session import Session
from dotlink.ui.state_machine import GameStateMachine
from dotlink.ui.validators import validate_gesture_coordinates

logger = logging.getLogger(__name__)


def _gesture_point(x: Any, y: Any) -> Point | None:
    """Convert gesture coordinates to a Point, or None if malformed."""
    error = validate_gesture_coordinates(x=x, y=y)
    if error is not None:
        logger.warning(error.message)
        return None
    return Point(x=float(x), y=float(y))


def begin_drag(sm: GameStateMachine, x: float, y: float) -> bool:
    """Start a stroke if (x, y) lies within the point radius of a vertex.

    The first successful drag of a session seeds the reachable set.

    Returns:
        True if the machine is now dragging.
    """
    point = _gesture_point(x=x, y=y)
    if point is None:
        return False
    if not sm.is_idle:
        logger.warning(f"Drag start ignored in state {sm.get_state_name()}")
        return False

    vertex = sm.snap_resolver.find_drag_start_vertex(point=point, vertices=sm.context.session.vertices)
    if vertex is None:
        logger.debug(f"No vertex within reach of {point}, staying idle")
        return False

    return sm.try_transition("start_drag", vertex=vertex)


def update_drag(sm: GameStateMachine, x: float, y: float) -> bool:
    """Move the live end of the current stroke (rendering feedback only).

    Returns:
        True if the live end was updated.
    """
    point = _gesture_point(x=x, y=y)
    if point is None or not sm.is_dragging:
        return False
    return sm.try_transition("move_drag", point=point)


def finish_drag(sm: GameStateMachine, x: float, y: float) -> EdgeResult | None:
    """Commit the current stroke ending at (x, y) and check for a win.

    A release with malformed coordinates is ignored and the drag stays open.

    Returns:
        EdgeResult for the committed edge, or None if nothing was committed.
    """
    point = _gesture_point(x=x, y=y)
    if point is None or not sm.is_dragging:
        return None

    ctx = sm.context
    # Release position is the final live end
    ctx.drag.live_end = point
    result = sm.ledger.add_edge(session=ctx.session, start=ctx.drag.start_vertex, raw_end=ctx.drag.live_end)
    sm.try_transition("end_drag")
    return result


def change_level(sm: GameStateMachine, level: int) -> Session:
    """Discard the current session and start a new one at level.

    The layout is generated before any state changes, so a failure leaves
    the current session active.

    Returns:
        The new Session.

    Raises:
        ValueError: If level is not an integer >= 1.
        LayoutError: If the level does not fit on the canvas.
    """
    session = sm.generator.create_session(level=level)
    sm.send("new_session", session=session)
    logger.info(f"Started level {level} with {len(session.vertices)} points")
    return session


def reset_game(sm: GameStateMachine) -> Session:
    """Start over at the current level with a fresh layout.

    Raises:
        LayoutError: If the layout cannot be generated.
    """
    return change_level(sm=sm, level=sm.context.level)
