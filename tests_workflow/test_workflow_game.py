"""Workflow tests: complete games driven through the action layer.

Each test plays gestures the way a host would (begin_drag, update_drag,
finish_drag, change_level, reset_game, dispatch_click) and checks the
session, the machine state and what the listener received.

Layout (default settings, point radius 15, snap 22.5):
    A = (100, 100), B = (200, 100), C = (300, 100), reference score 25
"""

import math
import random

import numpy as np
import pytest

from dotlink.core.geometry import Point
from dotlink.generators.point_generator import LayoutError
from dotlink.settings import GameSettings
from dotlink.ui.actions import begin_drag, change_level, finish_drag, reset_game, update_drag
from dotlink.ui.click_detector import ClickInfo
from dotlink.ui.click_handlers import dispatch_click
from dotlink.ui.state_machine import GameStateMachine

A = (100.0, 100.0)
B = (200.0, 100.0)
C = (300.0, 100.0)


def stroke(sm: GameStateMachine, start: tuple[float, float], end: tuple[float, float]):
    """Press at start, move halfway, release at end."""
    assert begin_drag(sm=sm, x=start[0], y=start[1])
    update_drag(sm=sm, x=(start[0] + end[0]) / 2, y=(start[1] + end[1]) / 2)
    return finish_drag(sm=sm, x=end[0], y=end[1])


class TestWinningGame:
    """Connecting every target wins exactly once."""

    def test_chain_a_b_c_wins(self, sm: GameStateMachine, recorder) -> None:
        stroke(sm=sm, start=A, end=B)
        assert sm.is_idle
        assert sm.context.session.reachable_ids == {0, 1}

        stroke(sm=sm, start=B, end=C)

        session = sm.context.session
        assert sm.is_won
        assert session.game_over
        assert session.reachable_ids == {0, 1, 2}
        assert session.accumulated_length == pytest.approx(20.0)
        assert sm.context.final_score == pytest.approx(5.0)
        assert recorder.wins == [pytest.approx(5.0)]

    def test_won_game_refuses_new_drags(self, sm: GameStateMachine, recorder) -> None:
        stroke(sm=sm, start=A, end=B)
        stroke(sm=sm, start=B, end=C)
        edges_before = len(sm.context.session.edges)

        assert not begin_drag(sm=sm, x=A[0], y=A[1])
        assert finish_drag(sm=sm, x=C[0], y=C[1]) is None
        assert sm.is_won
        assert len(sm.context.session.edges) == edges_before
        assert len(recorder.wins) == 1

    def test_win_through_generated_vertex(self, sm: GameStateMachine) -> None:
        """Steiner-style solution: strokes meet at an intermediate vertex."""
        hub = (200.0, 160.0)
        stroke(sm=sm, start=A, end=hub)
        assert sm.context.session.vertices[-1].is_generated

        stroke(sm=sm, start=hub, end=B)
        stroke(sm=sm, start=hub, end=C)

        assert sm.is_won
        assert len(sm.context.session.generated_vertices) == 1

    def test_win_requires_only_targets(self, sm: GameStateMachine) -> None:
        stroke(sm=sm, start=A, end=B)
        # Stray generated vertex off a reachable vertex, not needed for the win
        stroke(sm=sm, start=B, end=(200.0, 400.0))
        assert sm.is_idle
        stroke(sm=sm, start=C, end=B)
        assert sm.is_won

    def test_edge_between_unreached_vertices_then_bridge(self, sm: GameStateMachine) -> None:
        """Edges added before they touch the component are picked up later."""
        stroke(sm=sm, start=A, end=(100.0, 300.0))
        stroke(sm=sm, start=C, end=B)
        assert sm.context.session.reachable_ids == {0, 3}

        stroke(sm=sm, start=A, end=B)
        assert sm.is_won


class TestDragLifecycle:
    """Drag start thresholds, seeding and live feedback."""

    def test_press_away_from_vertices_stays_idle(self, sm: GameStateMachine, recorder) -> None:
        assert not begin_drag(sm=sm, x=A[0] + 16.0, y=A[1])
        assert sm.is_idle
        assert sm.context.session.reachable_ids == set()
        assert recorder.renders == []

    def test_press_within_radius_starts_drag(self, sm: GameStateMachine) -> None:
        assert begin_drag(sm=sm, x=A[0] + 15.0, y=A[1])
        assert sm.is_dragging
        assert sm.context.drag.start_vertex.id == 0

    def test_first_drag_seeds_reachability(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=C[0], y=C[1])
        assert sm.context.session.reachable_ids == {2}

    def test_later_drags_do_not_reseed(self, sm: GameStateMachine) -> None:
        stroke(sm=sm, start=A, end=(100.0, 300.0))
        begin_drag(sm=sm, x=C[0], y=C[1])
        assert 2 not in sm.context.session.reachable_ids

    def test_move_updates_live_segment_only(self, sm: GameStateMachine, recorder) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        assert update_drag(sm=sm, x=150.0, y=130.0)

        snapshot = recorder.renders[-1]
        assert snapshot.live_drag.start == Point(x=100.0, y=100.0)
        assert snapshot.live_drag.end == Point(x=150.0, y=130.0)
        assert sm.context.session.edges == []

    def test_move_while_idle_is_ignored(self, sm: GameStateMachine, recorder) -> None:
        assert not update_drag(sm=sm, x=10.0, y=10.0)
        assert recorder.renders == []

    def test_release_without_move_uses_release_position(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        result = finish_drag(sm=sm, x=B[0] + 5.0, y=B[1])
        assert result.edge.end.id == 1
        assert sm.is_idle

    def test_release_on_start_vertex_adds_zero_length_loop(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        result = finish_drag(sm=sm, x=A[0] + 3.0, y=A[1])
        assert result.edge.start is result.edge.end
        assert result.length == 0.0

    def test_every_transition_renders(self, sm: GameStateMachine, recorder) -> None:
        stroke(sm=sm, start=A, end=B)
        # start, move, end
        assert len(recorder.renders) == 3
        final = recorder.renders[-1]
        assert final.live_drag is None
        assert final.reachable_ids == frozenset({0, 1})
        assert final.score == pytest.approx(15.0)
        assert final.score_label == "Score: 15.00"


class TestNumpyCoordinates:
    """Finite numpy scalars are ordinary gestures."""

    @pytest.mark.parametrize("to_scalar", [np.float32, np.float64, np.int64])
    def test_stroke_with_numpy_scalars(self, sm: GameStateMachine, to_scalar) -> None:
        assert begin_drag(sm=sm, x=to_scalar(100), y=to_scalar(100))
        assert update_drag(sm=sm, x=to_scalar(150), y=to_scalar(100))
        result = finish_drag(sm=sm, x=to_scalar(200), y=to_scalar(100))

        assert result is not None
        assert result.edge.vertex_ids == (0, 1)
        assert sm.context.session.reachable_ids == {0, 1}


class TestMalformedInput:
    """Non-finite coordinates never change state."""

    @pytest.mark.parametrize("x, y", [(math.nan, 100.0), (100.0, math.inf), (None, 100.0)])
    def test_bad_press_ignored(self, sm: GameStateMachine, recorder, x, y) -> None:
        assert not begin_drag(sm=sm, x=x, y=y)
        assert sm.is_idle
        assert recorder.renders == []

    def test_bad_release_keeps_drag_open(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        assert finish_drag(sm=sm, x=math.nan, y=0.0) is None
        assert sm.is_dragging
        assert sm.context.session.edges == []

        assert finish_drag(sm=sm, x=B[0], y=B[1]) is not None
        assert sm.is_idle

    def test_bad_move_keeps_last_live_end(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        update_drag(sm=sm, x=120.0, y=120.0)
        assert not update_drag(sm=sm, x=-math.inf, y=0.0)
        assert sm.context.drag.live_end == Point(x=120.0, y=120.0)


class TestSessionReplacement:
    """Reset and level change build a fresh Session."""

    def test_change_level_replaces_session(self, sm: GameStateMachine, recorder) -> None:
        old = sm.context.session
        stroke(sm=sm, start=A, end=B)

        new = change_level(sm=sm, level=3)

        assert sm.context.session is new
        assert new is not old
        assert sm.context.level == 3
        assert len(new.vertices) == 7
        assert new.edges == [] and new.reachable_ids == set()
        assert sm.is_idle
        assert recorder.renders[-1].level == 3

    def test_reset_keeps_level(self, sm: GameStateMachine) -> None:
        change_level(sm=sm, level=2)
        reset_game(sm=sm)
        assert sm.context.level == 2
        assert len(sm.context.session.vertices) == 5

    def test_reset_while_dragging_drops_drag(self, sm: GameStateMachine) -> None:
        begin_drag(sm=sm, x=A[0], y=A[1])
        reset_game(sm=sm)
        assert sm.is_idle
        assert sm.context.drag.start_vertex is None

    def test_new_session_after_win_can_win_again(self, sm: GameStateMachine, recorder) -> None:
        stroke(sm=sm, start=A, end=B)
        stroke(sm=sm, start=B, end=C)
        session = change_level(sm=sm, level=1)
        assert sm.context.final_score is None

        a, b, c = session.vertices
        stroke(sm=sm, start=a.location.xy, end=b.location.xy)
        stroke(sm=sm, start=b.location.xy, end=c.location.xy)

        assert sm.is_won
        assert len(recorder.wins) == 2

    def test_layout_error_keeps_current_session(self, recorder) -> None:
        # Room for a few points, never for 21
        cramped = GameSettings(canvas_width=120.0, canvas_height=120.0, max_placement_attempts=500)
        sm, _ = GameStateMachine.create(level=1, settings=cramped, rng=random.Random(3))
        sm.add_listener(recorder.listener())
        current = sm.context.session

        with pytest.raises(LayoutError):
            change_level(sm=sm, level=10)

        assert sm.context.session is current
        assert sm.context.level == 1
        assert recorder.renders == []

    def test_invalid_level_rejected(self, sm: GameStateMachine) -> None:
        with pytest.raises(ValueError):
            change_level(sm=sm, level=0)
        assert sm.context.level == 1


class TestFactory:
    """GameStateMachine.create wires settings, session and callbacks."""

    def test_create_generates_first_session(self) -> None:
        wins: list[float] = []
        sm, ctx = GameStateMachine.create(level=2, on_win=wins.append)
        assert sm.is_idle
        assert ctx.level == 2
        assert len(ctx.session.vertices) == 5
        assert sm.context is ctx

    def test_create_renders_opening_board(self) -> None:
        renders: list = []
        _, ctx = GameStateMachine.create(level=1, rng=random.Random(5), on_render=renders.append)

        assert len(renders) == 1
        assert renders[0].vertices == tuple(ctx.session.vertices)
        assert renders[0].live_drag is None
        assert renders[0].edges == ()

    def test_create_uses_custom_settings(self) -> None:
        custom = GameSettings(point_radius=5.0, canvas_width=200.0, canvas_height=200.0)
        sm, ctx = GameStateMachine.create(level=1, settings=custom)
        assert sm.snap_resolver.settings.snap_distance == pytest.approx(7.5)
        assert all(5.0 <= v.x <= 195.0 for v in ctx.session.vertices)


class TestClickDispatch:
    """Two-click strokes for click-driven hosts."""

    def test_two_clicks_make_a_stroke(self, sm: GameStateMachine) -> None:
        assert dispatch_click(sm=sm, click=ClickInfo(x=A[0], y=A[1], vertex_id=0)) is None
        assert sm.is_dragging

        result = dispatch_click(sm=sm, click=ClickInfo(x=B[0], y=B[1], vertex_id=1))
        assert result is not None
        assert result.edge.vertex_ids == (0, 1)
        assert sm.is_idle

    def test_click_on_empty_space_when_idle_does_nothing(self, sm: GameStateMachine) -> None:
        dispatch_click(sm=sm, click=ClickInfo(x=500.0, y=500.0))
        assert sm.is_idle

    def test_clicks_ignored_after_win(self, sm: GameStateMachine) -> None:
        stroke(sm=sm, start=A, end=B)
        stroke(sm=sm, start=B, end=C)
        assert dispatch_click(sm=sm, click=ClickInfo(x=A[0], y=A[1], vertex_id=0)) is None
        assert sm.is_won
