"""
Tests for overdub layers.

A pad pressed while the loop plays starts recording on the running cycle,
without a count-in, and commits a new track at the next cycle boundary.
"""

from __future__ import annotations

from collections.abc import Callable

from mocks import MS, FakeClock, MockAudioBus

from padloop.engine import LoopEngine, Playing, Recording


class TestOverdubStart:
    def test_pad_while_playing_starts_recording_without_metronome(
        self, playing_engine: LoopEngine, audio: MockAudioBus, advance: Callable[[int], None]
    ):
        advance(6)
        audio.reset()

        playing_engine.record_event("w")

        assert playing_engine.state() == Recording(start_time=4000 * MS, cycle_length=2000 * MS)
        assert audio.sent == [("pad", "w")]
        assert audio.count("metronome") == 0
        assert playing_engine.overdub_size == 1

    def test_overdub_offset_is_current_phase(
        self, playing_engine: LoopEngine, advance: Callable[[int], None]
    ):
        advance(16 + 3)  # second cycle, 375ms in
        playing_engine.record_event("w")
        advance(13)  # reach the boundary at phase 2000ms

        assert isinstance(playing_engine.state(), Playing)
        assert [(e.key, e.offset) for e in playing_engine.tracks[1]] == [("w", 375 * MS)]

    def test_overdub_reuses_running_cycle_boundary(
        self, playing_engine: LoopEngine, clock: FakeClock, advance: Callable[[int], None]
    ):
        advance(12)  # phase 1500ms
        playing_engine.record_event("w")

        advance(3)  # phase 1875ms
        assert isinstance(playing_engine.state(), Recording)

        advance(1)  # phase 2000ms: same boundary the loop would have wrapped at
        assert playing_engine.state() == Playing(cycle_start=clock.now(), cycle_length=2000 * MS)
        assert playing_engine.tracks_count() == 2

    def test_overdub_with_several_hits_is_one_track(
        self, playing_engine: LoopEngine, advance: Callable[[int], None]
    ):
        advance(1)
        playing_engine.record_event("w")
        advance(4)
        playing_engine.record_event("e")
        advance(4)
        playing_engine.record_event("w")
        advance(7)

        assert playing_engine.tracks_count() == 2
        assert [(e.key, e.offset) for e in playing_engine.tracks[1]] == [
            ("w", 125 * MS),
            ("e", 625 * MS),
            ("w", 1125 * MS),
        ]

    def test_late_poll_overdub_wraps_offset(
        self, playing_engine: LoopEngine, clock: FakeClock
    ):
        clock.advance_ms(2100)  # the loop has not been rebased yet
        playing_engine.record_event("w")
        playing_engine.update()

        assert isinstance(playing_engine.state(), Playing)
        assert playing_engine.tracks[1].events[0].offset == 100 * MS


class TestOverdubPlayback:
    def test_existing_tracks_keep_playing_during_overdub(
        self, playing_engine: LoopEngine, audio: MockAudioBus, advance: Callable[[int], None]
    ):
        advance(1)  # 125ms
        playing_engine.record_event("w")
        audio.reset()

        advance(1)  # 250ms: 'q' is due

        assert isinstance(playing_engine.state(), Recording)
        assert audio.sent == [("scheduled", "q")]

    def test_both_layers_replay_after_commit(
        self, playing_engine: LoopEngine, audio: MockAudioBus, advance: Callable[[int], None]
    ):
        advance(4)
        playing_engine.record_event("w")  # phase 500ms
        advance(12)
        assert isinstance(playing_engine.state(), Playing)
        audio.reset()

        advance(16)

        assert audio.sent == [("scheduled", "q"), ("scheduled", "w")]
        assert audio.count("metronome") == 0

    def test_layers_accumulate(self, playing_engine: LoopEngine, advance: Callable[[int], None]):
        for key in "wer":
            advance(2)
            playing_engine.record_event(key)
            advance(14)
            assert isinstance(playing_engine.state(), Playing)

        assert playing_engine.tracks_count() == 4

    def test_committed_tracks_are_not_changed_by_overdub(
        self, playing_engine: LoopEngine, advance: Callable[[int], None]
    ):
        base_events = playing_engine.tracks[0].events
        advance(5)
        playing_engine.record_event("w")
        advance(11)

        assert playing_engine.tracks[0].events == base_events
