"""Shared pytest fixtures for dotlink tests.

Provides hand-placed sessions with known geometry so snapping, scoring and
reachability can be checked against exact values.

COORDINATE SYSTEM:
    Canvas pixels, origin top-left. Default settings use point radius 15,
    so the drag-start threshold is 15 and the snap distance is 22.5.
"""

import pytest

from dotlink.core.geometry import Point
from dotlink.model.connection_ledger import ConnectionLedger
from dotlink.model.session import Session
from dotlink.model.snap_resolver import SnapResolver
from dotlink.settings import GameSettings


def _make_session(coords: list[tuple[float, float]], reference_score: float = 10.0, level: int = 1) -> Session:
    """Session with original targets at the given coordinates (ids in order)."""
    session = Session(level=level, reference_score=reference_score)
    for x, y in coords:
        session.add_vertex(location=Point(x=x, y=y), is_generated=False)
    return session


@pytest.fixture
def settings() -> GameSettings:
    """Default game parameters (radius 15, snap 22.5, scale 10, 800x600)."""
    return GameSettings()


@pytest.fixture
def snap_resolver(settings: GameSettings) -> SnapResolver:
    return SnapResolver(settings=settings)


@pytest.fixture
def ledger(settings: GameSettings) -> ConnectionLedger:
    return ConnectionLedger(settings=settings)


@pytest.fixture
def two_point_session() -> Session:
    """Targets at (0,0) and (100,100) - the snapping reference layout."""
    return _make_session(coords=[(0.0, 0.0), (100.0, 100.0)])


@pytest.fixture
def make_session():
    """Factory fixture: make_session(coords, reference_score=10.0, level=1) -> Session."""
    return _make_session

