"""
padloop Loop Engine

Timing-driven state machine for a live-looping sampler:
- Metronome count-in (one bar) before the first recording
- Phase-aligned capture of pad triggers
- Endless replay of committed tracks
- Overdub layers recorded on top of a running loop
- Pause/resume that preserves the loop phase

The engine owns no thread and never sleeps. The caller polls update()
(about once per millisecond) and forwards input through handle_space(),
record_event(), handle_cancel(), handle_control_space() and
reset_for_new_tempo(). Time comes from an injected Clock, sound goes out
through an injected AudioBus.
"""

from __future__ import annotations

import logging
from collections import deque

from ..output.fire_and_forget import fire_and_forget
from ..protocols import AudioBus, Clock
from .loop_state import Idle, LoopState, Paused, Playing, Ready, Recording
from .snapshot import LoopSnapshot
from .timing import (
    COUNT_IN_BEATS,
    Nanos,
    beat_interval,
    cycle_length,
    normalize_offset,
    to_seconds,
)
from .track import LoopTrack, OverdubBuffer, RecordedEvent

logger = logging.getLogger(__name__)


class LoopEngine:
    """
    Loop recorder and player.

    Transitions (unlisted input/state pairs are no-ops):

        Idle      --space-->   Ready        count-in armed, first tick now
        Ready     --poll-->    Recording    after the last count-in tick
        Recording --poll-->    Playing      once a full cycle has elapsed
        Playing   --pad-->     Recording    overdub on the running cycle
        Playing   --space-->   Paused
        Recording --space-->   Paused       overdub stays pending
        Paused    --space-->   Playing / Recording (whichever was paused)
        any       --cancel / clear / tempo reset-->  Idle

    Dependencies are injected via constructor for testability.
    Use create_loop_engine() factory for production instances.
    """

    def __init__(self, clock: Clock, audio: AudioBus):
        """
        Initialize LoopEngine with injected dependencies.

        Args:
            clock: Time source (SystemClock or fake)
            audio: Audio sink; wrapped in FireAndForgetAudio
        """
        self._clock = clock
        self._audio = fire_and_forget(audio)

        self._state: LoopState = Idle()
        self._tracks: list[LoopTrack] = []
        self._overdub = OverdubBuffer()

        # Count-in deadlines, oldest first
        self._tick_deadlines: deque[Nanos] = deque()

    def __repr__(self) -> str:
        return f"LoopEngine(state={self._state!r}, tracks={len(self._tracks)})"

    # ================================================================
    # Read access
    # ================================================================

    def state(self) -> LoopState:
        """Current loop state."""
        return self._state

    def tracks_count(self) -> int:
        """Number of committed tracks."""
        return len(self._tracks)

    @property
    def tracks(self) -> tuple[LoopTrack, ...]:
        return tuple(self._tracks)

    @property
    def overdub_size(self) -> int:
        """Number of events waiting in the uncommitted overdub buffer."""
        return len(self._overdub)

    @property
    def pending_ticks(self) -> int:
        """Count-in deadlines not yet reached."""
        return len(self._tick_deadlines)

    def now(self) -> Nanos:
        """Current clock reading."""
        return self._clock.now()

    def snapshot(self) -> LoopSnapshot:
        """Flattened view of the current state for display."""
        return LoopSnapshot.from_state(self._state, len(self._tracks), self._clock.now())

    # ================================================================
    # Input
    # ================================================================

    def handle_space(self, bpm: float, bars: int) -> None:
        """
        Start the count-in, pause, or resume depending on state.

        Args:
            bpm: Current tempo, only used when starting from Idle
            bars: Current loop size in bars, only used when starting from Idle
        """
        now = self._clock.now()

        match self._state:
            case Idle():
                self._start_count_in(bpm, bars, now)

            case Playing(cycle_start=cycle_start, cycle_length=length):
                self._state = Paused(
                    cycle_start=cycle_start,
                    cycle_length=length,
                    saved_offset=normalize_offset(now - cycle_start, length),
                    was_recording=False,
                    paused_at=now,
                )
                self._audio.pause_all()
                logger.info("Loop paused")

            case Recording(start_time=start_time, cycle_length=length):
                self._state = Paused(
                    cycle_start=start_time,
                    cycle_length=length,
                    saved_offset=normalize_offset(now - start_time, length),
                    was_recording=True,
                    paused_at=now,
                )
                self._audio.pause_all()
                logger.info(f"Recording paused ({len(self._overdub)} pending events)")

            case Paused(cycle_start=anchor, cycle_length=length, was_recording=was_recording, paused_at=paused_at):
                # Shift the anchor by the time spent paused so the phase is unchanged
                anchor += now - paused_at
                if was_recording:
                    self._state = Recording(start_time=anchor, cycle_length=length)
                else:
                    self._state = Playing(cycle_start=anchor, cycle_length=length)
                self._audio.resume_all()
                logger.info(f"Loop resumed ({self._state.status.value})")

            case _:
                pass

    def record_event(self, key: str) -> None:
        """
        Capture a pad trigger.

        While recording, the trigger is added to the overdub buffer. While
        playing, it starts an overdub on the running cycle (no count-in).
        Otherwise ignored.
        """
        now = self._clock.now()

        match self._state:
            case Recording(start_time=start_time, cycle_length=length):
                offset = normalize_offset(now - start_time, length)
                self._overdub.add(RecordedEvent(key=key, offset=offset))
                self._audio.play_pad(key)

            case Playing(cycle_start=cycle_start, cycle_length=length):
                offset = normalize_offset(now - cycle_start, length)
                self._audio.play_pad(key)
                self._state = Recording(start_time=cycle_start, cycle_length=length)
                self._overdub.clear()
                self._overdub.add(RecordedEvent(key=key, offset=offset))
                logger.info(f"Overdub started at {to_seconds(offset):.3f}s")

            case _:
                pass

    def handle_cancel(self) -> None:
        """Abort whatever is running and drop all tracks."""
        if isinstance(self._state, Idle):
            return
        self._reset()
        logger.info("Loop cancelled")

    def handle_control_space(self) -> None:
        """Hard reset: drop all tracks and return to Idle from any state."""
        self._reset()
        logger.info("Loop cleared")

    def reset_for_new_tempo(self, bpm: float, bars: int) -> None:
        """
        Drop the loop after a tempo or bar-count change.

        Recorded offsets are only meaningful for the cycle length they
        were captured with, so nothing survives. Does not restart.
        """
        self._reset()
        logger.info(f"Loop reset for new tempo: {bpm} BPM, {bars} bars")

    # ================================================================
    # Polling
    # ================================================================

    def update(self) -> None:
        """
        Advance the state machine to the current time.

        Non-blocking. Uses a single clock reading for every decision in
        the call. A late call still processes every deadline that became
        due since the previous one.
        """
        now = self._clock.now()

        match self._state:
            case Ready() as ready:
                self._drain_count_in(ready, now)

            case Recording(start_time=start_time, cycle_length=length):
                elapsed = now - start_time
                # Layers committed earlier keep playing under an overdub
                self._play_due(elapsed)
                if elapsed >= length:
                    self._commit_recording(length, now)

            case Playing(cycle_start=cycle_start, cycle_length=length):
                elapsed = now - cycle_start
                self._play_due(elapsed)
                if elapsed >= length:
                    self._state = Playing(cycle_start=now, cycle_length=length)
                    self._reset_cursors()

            case Idle() | Paused():
                pass

    # ================================================================
    # Internals
    # ================================================================

    def _start_count_in(self, bpm: float, bars: int, now: Nanos) -> None:
        length = cycle_length(bpm, bars)
        interval = beat_interval(bpm)

        self._tick_deadlines.clear()
        self._tick_deadlines.extend(now + interval * beat for beat in range(1, COUNT_IN_BEATS + 1))
        self._state = Ready(ticks_remaining=COUNT_IN_BEATS, cycle_length=length)

        logger.info(
            f"Count-in started: {bpm} BPM, {bars} bars "
            f"(cycle {to_seconds(length):.3f}s)"
        )
        self._audio.play_metronome_beep()
        self.update()

    def _drain_count_in(self, state: Ready, now: Nanos) -> None:
        ticks = state.ticks_remaining

        while self._tick_deadlines and self._tick_deadlines[0] <= now:
            self._tick_deadlines.popleft()
            if ticks == 0:
                break
            ticks -= 1
            if ticks == 0:
                self._start_recording(state.cycle_length, now)
                return
            self._audio.play_metronome_beep()

        self._state = Ready(ticks_remaining=ticks, cycle_length=state.cycle_length)

    def _start_recording(self, length: Nanos, now: Nanos) -> None:
        self._tracks.clear()
        self._overdub.clear()
        self._tick_deadlines.clear()
        self._state = Recording(start_time=now, cycle_length=length)
        logger.info("Recording started")

    def _commit_recording(self, length: Nanos, now: Nanos) -> None:
        track = self._overdub.take()
        if track is not None:
            self._tracks.append(track)
            logger.info(f"Track committed: {len(track)} events ({len(self._tracks)} tracks)")
        else:
            logger.debug("Recording ended with no events; nothing committed")
        self._reset_cursors()
        self._state = Playing(cycle_start=now, cycle_length=length)

    def _play_due(self, elapsed: Nanos) -> None:
        for track in self._tracks:
            for event in track.due_events(elapsed):
                self._audio.play_scheduled(event.key)

    def _reset_cursors(self) -> None:
        for track in self._tracks:
            track.reset()

    def _reset(self) -> None:
        self._tick_deadlines.clear()
        self._tracks.clear()
        self._overdub.clear()
        self._state = Idle()
