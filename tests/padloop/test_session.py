"""Tests for LoopSession command dispatch and tempo handling."""

from __future__ import annotations

from collections.abc import Callable

from mocks import MS, TEST_BARS, TEST_BPM, MockAudioBus

from padloop.engine import Idle, LoopEngine, Paused, Playing, Ready, Recording
from padloop.engine.tempo import BARS_MAX, BPM_MIN
from padloop.session import LoopSession


class TestDispatch:
    def test_registered_commands(self, session: LoopSession):
        assert session.commands == ["space", "pad", "cancel", "clear", "tempo"]

    def test_unknown_command(self, session: LoopSession):
        result = session.handle("explode")

        assert result.success is False
        assert "Unknown command" in result.message

    def test_space_returns_snapshot(self, session: LoopSession, audio: MockAudioBus):
        result = session.handle("space")

        assert result.success is True
        assert result.snapshot.status.value == "ready"
        assert result.snapshot.ticks_remaining == 4
        assert audio.sent == [("metronome", None)]

    def test_space_uses_session_tempo(self, session: LoopSession):
        session.set_tempo(60, 2)
        session.handle("space")

        assert session.engine.state().cycle_length == 8000 * MS

    def test_pad_reaches_engine(
        self, session: LoopSession, audio: MockAudioBus, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)
        audio.reset()

        result = session.handle("pad", {"key": "a"})

        assert result.success is True
        assert audio.sent == [("pad", "a")]
        assert session.engine.overdub_size == 1

    def test_pad_requires_single_character(self, session: LoopSession):
        assert session.handle("pad", {"key": "ab"}).success is False
        assert session.handle("pad", {"key": ""}).success is False

    def test_pad_outside_layout_is_rejected(
        self, session: LoopSession, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)

        result = session.handle("pad", {"key": "1"})

        assert result.success is False
        assert "not a pad key" in result.message
        assert session.engine.overdub_size == 0

    def test_pad_result_reports_state_after_the_hit(
        self, session: LoopSession, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)

        result = session.handle("pad", {"key": "q"})

        assert result.snapshot.status.value == "recording"
        assert result.snapshot.track_count == 0

    def test_result_to_dict(self, session: LoopSession):
        data = session.handle("space").to_dict()

        assert data["success"] is True
        assert data["message"] is None
        assert data["snapshot"]["status"] == "ready"
        assert data["snapshot"]["cycle_length"] == 2.0

    def test_rejected_command_has_no_snapshot(self, session: LoopSession):
        result = session.handle("tempo", {"bpm": 5, "bars": 1})

        assert result.snapshot is None
        assert result.to_dict()["snapshot"] is None

    def test_pad_missing_key(self, session: LoopSession):
        result = session.handle("pad", {})

        assert result.success is False
        assert "Invalid pad command" in result.message

    def test_cancel(self, session: LoopSession, advance: Callable[[int], None]):
        session.handle("space")
        advance(16)

        assert session.handle("cancel").success is True
        assert isinstance(session.engine.state(), Idle)

    def test_clear(self, session: LoopSession, advance: Callable[[int], None]):
        session.handle("space")
        advance(16)
        session.handle("pad", {"key": "q"})
        advance(16)
        assert session.engine.tracks_count() == 1

        assert session.handle("clear").success is True
        assert isinstance(session.engine.state(), Idle)
        assert session.engine.tracks_count() == 0

    def test_update_polls_engine(self, session: LoopSession, clock):
        session.handle("space")
        clock.advance_ms(2000)
        session.update()

        assert isinstance(session.engine.state(), Recording)

    def test_snapshot(self, session: LoopSession):
        assert session.snapshot().status.value == "idle"


class TestTempo:
    def test_defaults_are_clamped(self, engine: LoopEngine):
        session = LoopSession(engine, bpm=5, bars=9999)

        assert session.bpm == BPM_MIN
        assert session.bars == BARS_MAX

    def test_tempo_change_resets_loop(
        self, session: LoopSession, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)
        session.handle("pad", {"key": "q"})
        advance(16)
        assert isinstance(session.engine.state(), Playing)

        result = session.handle("tempo", {"bpm": 90, "bars": 2})

        assert result.success is True
        assert (session.bpm, session.bars) == (90, 2)
        assert isinstance(session.engine.state(), Idle)
        assert session.engine.tracks_count() == 0

    def test_unchanged_tempo_keeps_loop(
        self, session: LoopSession, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)
        session.handle("pad", {"key": "q"})
        advance(16)

        result = session.handle("tempo", {"bpm": TEST_BPM, "bars": TEST_BARS})

        assert result.success is True
        assert result.message == "Tempo unchanged"
        assert result.snapshot.status.value == "playing"
        assert isinstance(session.engine.state(), Playing)
        assert session.engine.tracks_count() == 1

    def test_bars_change_alone_resets(self, session: LoopSession):
        session.handle("space")
        assert isinstance(session.engine.state(), Ready)

        assert session.set_tempo(TEST_BPM, TEST_BARS + 1) is True
        assert isinstance(session.engine.state(), Idle)

    def test_out_of_range_tempo_is_rejected(self, session: LoopSession):
        result = session.handle("tempo", {"bpm": 500, "bars": 4})

        assert result.success is False
        assert "Invalid tempo command" in result.message
        assert session.bpm == TEST_BPM

    def test_set_tempo_clamps(self, session: LoopSession):
        assert session.set_tempo(1000, 0) is True
        assert (session.bpm, session.bars) == (300, 1)

    def test_tempo_change_while_paused(
        self, session: LoopSession, advance: Callable[[int], None]
    ):
        session.handle("space")
        advance(16)
        session.handle("pad", {"key": "q"})
        advance(16)
        session.handle("space")
        assert isinstance(session.engine.state(), Paused)

        session.handle("tempo", {"bpm": 140, "bars": 4})

        assert isinstance(session.engine.state(), Idle)
