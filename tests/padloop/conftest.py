"""
Pytest fixtures for padloop tests.

Provides fake clock, mock audio bus and engines driven into each state.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from mocks import TEST_BARS, TEST_BPM, FakeClock, MockAudioBus

from padloop.engine import LoopEngine, Playing, Recording
from padloop.session import LoopSession


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock at t=0 stepping 125ms."""
    return FakeClock()


@pytest.fixture
def audio() -> MockAudioBus:
    """Create a fresh MockAudioBus for testing."""
    return MockAudioBus()


@pytest.fixture
def engine(clock: FakeClock, audio: MockAudioBus) -> LoopEngine:
    """LoopEngine with fake clock and recording audio bus."""
    return LoopEngine(clock, audio)


@pytest.fixture
def advance(clock: FakeClock, engine: LoopEngine) -> Callable[[int], None]:
    """Advance the clock one step and poll, `steps` times."""

    def _advance(steps: int = 1) -> None:
        for _ in range(steps):
            clock.advance()
            engine.update()

    return _advance


@pytest.fixture
def recording_engine(engine: LoopEngine, advance: Callable[[int], None]) -> LoopEngine:
    """Engine that finished the count-in and is recording the first loop."""
    engine.handle_space(TEST_BPM, TEST_BARS)
    advance(4 * 4)  # four 500ms beats in 125ms steps
    assert isinstance(engine.state(), Recording)
    return engine


@pytest.fixture
def playing_engine(
    recording_engine: LoopEngine,
    advance: Callable[[int], None],
    audio: MockAudioBus,
) -> LoopEngine:
    """Engine playing a one-track loop: 'q' at 250ms into a 2s cycle."""
    advance(2)
    recording_engine.record_event("q")
    advance(14)
    assert isinstance(recording_engine.state(), Playing)
    assert recording_engine.tracks_count() == 1
    audio.reset()
    return recording_engine


@pytest.fixture
def session(engine: LoopEngine) -> LoopSession:
    return LoopSession(engine, bpm=TEST_BPM, bars=TEST_BARS)
