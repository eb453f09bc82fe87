"""
countdown_bot/countdown.py

Remaining-time model and calculation.

Provides:
- RemainingDuration dataclass (days / hours / minutes / seconds / reached)
- compute_remaining() for decomposing the time left until a target
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


# Milliseconds per unit
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)


# =============================================================================
# Remaining Duration Model
# =============================================================================

@dataclass(frozen=True)
class RemainingDuration:
    """
    Time left until the target instant.

    Attributes:
        days: Whole days remaining (unbounded, non-negative).
        hours: Hours of the current day (0-23).
        minutes: Minutes of the current hour (0-59).
        seconds: Seconds of the current minute (0-59).
        reached: True once the target instant is at or in the past.
            All numeric fields are zero when set.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    reached: bool = False

    @classmethod
    def target_reached(cls) -> "RemainingDuration":
        """Duration reported once the countdown is over."""
        return cls(reached=True)

    @property
    def time_of_day(self) -> str:
        """Hours, minutes and seconds as zero-padded HH:MM:SS."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    @property
    def total_seconds(self) -> int:
        """Whole seconds represented by the decomposition."""
        return (
            self.days * 86400
            + self.hours * 3600
            + self.minutes * 60
            + self.seconds
        )


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are treated as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def compute_remaining(now: datetime, target: datetime) -> RemainingDuration:
    """
    Decompose the time between now and target.

    A difference of zero or less means the target has been reached. Any
    positive difference, even one too small to show up in the fields,
    is reported as not reached.

    Args:
        now: Current instant.
        target: Instant being counted down to.

    Returns:
        RemainingDuration for this moment.
    """
    difference = _as_utc(target) - _as_utc(now)

    if difference <= timedelta(0):
        return RemainingDuration.target_reached()

    total_ms = difference // _ONE_MS

    return RemainingDuration(
        days=total_ms // MS_PER_DAY,
        hours=(total_ms % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(total_ms % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(total_ms % MS_PER_MINUTE) // MS_PER_SECOND,
        reached=False,
    )

