"""Shared pytest fixtures for dotlink workflow tests.

Workflow tests drive the game through the action layer (actions.py,
click_handlers.py) exactly as a host would, and observe it through a
recording GameEventListener.

Layout used by most tests (default settings, point radius 15):
    A = (100, 100), B = (200, 100), C = (300, 100)
"""

import random
from dataclasses import dataclass, field

import pytest

from dotlink.core.geometry import Point
from dotlink.model.session import Session
from dotlink.model.snapshot import RenderSnapshot
from dotlink.settings import GameSettings
from dotlink.ui.state_machine import GameContext, GameEventListener, GameStateMachine

A = (100.0, 100.0)
B = (200.0, 100.0)
C = (300.0, 100.0)


@dataclass
class Recorder:
    """Collects render snapshots and win notifications."""

    renders: list[RenderSnapshot] = field(default_factory=list)
    wins: list[float] = field(default_factory=list)

    def listener(self) -> GameEventListener:
        return GameEventListener(on_render=self.renders.append, on_win=self.wins.append)


def _build_session(coords: list[tuple[float, float]], reference_score: float = 25.0) -> Session:
    session = Session(level=1, reference_score=reference_score)
    for x, y in coords:
        session.add_vertex(location=Point(x=x, y=y), is_generated=False)
    return session


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def line_session() -> Session:
    """Targets A, B, C with reference score 25."""
    return _build_session(coords=[A, B, C])


@pytest.fixture
def sm(line_session: Session, recorder: Recorder) -> GameStateMachine:
    """Machine in IDLE playing line_session, observed by recorder."""
    context = GameContext(session=line_session, level=line_session.level)
    machine = GameStateMachine(context=context, settings=GameSettings(), rng=random.Random(42))
    machine.add_listener(recorder.listener())
    return machine


@pytest.fixture
def build_session():
    """Factory fixture: build_session(coords, reference_score=25.0) -> Session of targets."""
    return _build_session
