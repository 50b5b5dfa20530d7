"""Time-stepping policy — the only place mutable simulation state lives.

A TimeSource turns play/pause/speed controls plus scheduler clock readings into
one effective simulation time. Two strategies share the state machine:

    ContinuousClock  seconds accumulate at 1x-1000x
    SteppedClock     whole days accumulate at 1-365 days/s, shown at a fixed time of day

States are Paused and Playing. Ticking while paused changes nothing, including
the timestamp, so a later resume never catches up on time spent paused.
"""

import logging
import math
from abc import ABC, abstractmethod

from siderealday.astronomy import (
    SIDEREAL_DAY_SECONDS,
    SOLAR_DAY_SECONDS,
    time_to_next_sidereal_day,
    time_to_next_solar_day,
)
from siderealday.config import (
    DEFAULT_DAY_SPEED,
    DEFAULT_PLAY_SPEED,
    DEFAULT_STEP_MODE,
    MAX_MARKERS,
    NOON_SECONDS,
)
from siderealday.models import (
    DayMarker,
    DaySpeed,
    PlaybackState,
    PlaySpeed,
    ReferenceConvention,
    StepMode,
    TickResult,
)

logger = logging.getLogger(__name__)

_DAY_LENGTHS: dict[StepMode, int] = {
    StepMode.SOLAR: SOLAR_DAY_SECONDS,
    StepMode.SIDEREAL: SIDEREAL_DAY_SECONDS,
}


def day_length(mode: StepMode) -> int:
    return _DAY_LENGTHS[mode]


def get_effective_time(
    day_count: int,
    time_of_day: float,
    step_mode: StepMode,
    accumulator: float = 0.0,
    animate_within_day: bool = False,
) -> float:
    """Continuous time for a day-count representation.

    Each step shows the same time of day one solar or sidereal day later.
    With animate_within_day the fractional accumulator is blended in.
    """
    days = day_count + accumulator if animate_within_day else day_count
    return days * day_length(step_mode) + time_of_day


def boundary_crossed(before: float, after: float, length: float) -> bool:
    """True when a multiple of length lies in (before, after]."""
    return math.floor(after / length) > math.floor(before / length)


class TimeSource(ABC):
    """Play/pause state machine shared by both clocks."""

    def __init__(self, speed: int, now: float, convention: ReferenceConvention):
        self.playback = PlaybackState(is_playing=False, speed=speed, last_timestamp=now)
        self.convention = convention
        self.markers: list[DayMarker] = []

    @property
    def is_playing(self) -> bool:
        return self.playback.is_playing

    @property
    def speed(self) -> int:
        return self.playback.speed

    def set_speed(self, speed: int) -> None:
        self.playback.speed = speed

    @abstractmethod
    def effective_time(self) -> float:
        """Simulation time for the current snapshot. Never reads a clock."""

    @abstractmethod
    def _advance(self, real_delta: float) -> None:
        """Move counters forward by real_delta real seconds at the current speed."""

    @abstractmethod
    def _zero(self) -> None:
        """Return counters to their initial values."""

    def _on_play(self) -> None:
        pass

    def play(self, now: float) -> None:
        """Paused → Playing. Restarts elapsed-time measurement at now."""
        if self.playback.is_playing:
            return
        self._on_play()
        self.playback.is_playing = True
        self.playback.last_timestamp = now
        logger.debug("%s playing at speed %s", type(self).__name__, self.speed)

    def pause(self) -> None:
        """Playing → Paused."""
        if not self.playback.is_playing:
            return
        self.playback.is_playing = False
        logger.debug("%s paused at t=%.1f", type(self).__name__, self.effective_time())

    def reset(self) -> None:
        """Any state → Paused with counters zeroed and markers cleared."""
        self._zero()
        self.markers.clear()
        self.playback.is_playing = False
        logger.debug("%s reset", type(self).__name__)

    def tick(self, now: float) -> TickResult:
        """Advance by the real time since the last tick.

        Args:
            now: Scheduler clock reading in seconds.

        Returns:
            TickResult with the simulated advance and which day boundaries were crossed.
        """
        if not self.playback.is_playing:
            return TickResult(elapsed=0.0)

        before = self.effective_time()
        self._advance(now - self.playback.last_timestamp)
        self.playback.last_timestamp = now
        after = self.effective_time()

        return TickResult(
            elapsed=after - before,
            sidereal_day_completed=self._record_crossing(
                before, after, StepMode.SIDEREAL
            ),
            solar_day_completed=self._record_crossing(before, after, StepMode.SOLAR),
        )

    def _record_crossing(self, before: float, after: float, kind: StepMode) -> bool:
        length = day_length(kind)
        if not boundary_crossed(before, after, length):
            return False
        boundary = math.floor(after / length) * length
        self.markers.append(DayMarker(kind=kind, time=boundary))
        del self.markers[:-MAX_MARKERS]
        logger.debug("%s day completed at t=%d", kind.value, boundary)
        return True


class ContinuousClock(TimeSource):
    """Elapsed seconds at a fixed multiple of real time.

    t=0 is Greenwich solar noon (NOON_AT_ZERO).
    """

    def __init__(self, speed: PlaySpeed = DEFAULT_PLAY_SPEED, now: float = 0.0):
        super().__init__(speed, now, ReferenceConvention.NOON_AT_ZERO)
        self.current_time = 0.0

    def effective_time(self) -> float:
        return self.current_time

    def _advance(self, real_delta: float) -> None:
        self.current_time += real_delta * self.speed

    def _zero(self) -> None:
        self.current_time = 0.0

    def set_time(self, t: float) -> None:
        self.current_time = max(0.0, t)

    def jump_forward(self, seconds: float) -> None:
        self.set_time(self.current_time + seconds)

    def jump_to_next_sidereal_day(self) -> None:
        self.jump_forward(time_to_next_sidereal_day(self.current_time))

    def jump_to_next_solar_day(self) -> None:
        self.jump_forward(time_to_next_solar_day(self.current_time))


class SteppedClock(TimeSource):
    """Whole solar or sidereal days at a chosen time of day.

    t=0 is Greenwich midnight (MIDNIGHT_AT_ZERO), so time_of_day reads as a clock.
    """

    def __init__(
        self,
        speed: DaySpeed = DEFAULT_DAY_SPEED,
        now: float = 0.0,
        step_mode: StepMode = DEFAULT_STEP_MODE,
    ):
        super().__init__(speed, now, ReferenceConvention.MIDNIGHT_AT_ZERO)
        self.step_mode = step_mode
        self.animate_within_day = False
        self.day_count = 0
        self.time_of_day: float = NOON_SECONDS
        self.accumulator = 0.0

    def effective_time(self) -> float:
        return get_effective_time(
            self.day_count,
            self.time_of_day,
            self.step_mode,
            self.accumulator,
            self.animate_within_day,
        )

    def _advance(self, real_delta: float) -> None:
        accumulated = self.accumulator + real_delta * self.speed
        whole_days = math.floor(accumulated)
        self.day_count += whole_days
        self.accumulator = accumulated - whole_days

    def _zero(self) -> None:
        self.day_count = 0
        self.accumulator = 0.0
        self.time_of_day = NOON_SECONDS

    def _on_play(self) -> None:
        self.accumulator = 0.0

    def step_forward(self) -> None:
        """Advance exactly one day. A manual step always pauses."""
        self.day_count += 1
        self.playback.is_playing = False

    def set_time_of_day(self, seconds: float) -> None:
        self.time_of_day = max(0.0, min(float(SOLAR_DAY_SECONDS), seconds))

    def set_step_mode(self, mode: StepMode) -> None:
        self.step_mode = mode

    def set_animate_within_day(self, enabled: bool) -> None:
        self.animate_within_day = enabled
