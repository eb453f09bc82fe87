"""
tests/test_countdown.py

Unit tests for the remaining-time calculation.

Tests cover:
- Field ranges and reconstruction of the difference
- The reached boundary
"""

import pytest
from datetime import datetime, timedelta, timezone

from countdown_bot.countdown import (
    RemainingDuration,
    compute_remaining,
)


# =============================================================================
# compute_remaining Tests
# =============================================================================

class TestComputeRemaining:
    """Tests for compute_remaining()."""

    def test_days_hours_minutes_seconds(self, now):
        """+2d 3h 4m 5s decomposes into its parts."""
        target = now + timedelta(days=2, hours=3, minutes=4, seconds=5)

        result = compute_remaining(now, target)

        assert result == RemainingDuration(
            days=2, hours=3, minutes=4, seconds=5, reached=False
        )
        assert result.time_of_day == "03:04:05"

    def test_past_target_is_reached(self, now):
        """A target one second ago is reached with all fields zero."""
        result = compute_remaining(now, now - timedelta(seconds=1))

        assert result == RemainingDuration(
            days=0, hours=0, minutes=0, seconds=0, reached=True
        )

    def test_exact_target_is_reached(self, now):
        """Zero difference counts as reached."""
        result = compute_remaining(now, now)

        assert result.reached is True
        assert result.total_seconds == 0

    def test_one_millisecond_left_not_reached(self, now):
        """1ms before target is not reached, yet every field is zero."""
        target = now + timedelta(milliseconds=1)

        result = compute_remaining(now, target)

        assert result.reached is False
        assert (result.days, result.hours, result.minutes, result.seconds) == (0, 0, 0, 0)

    def test_sub_millisecond_left_not_reached(self, now):
        """Any positive difference is not reached."""
        result = compute_remaining(now, now + timedelta(microseconds=1))

        assert result.reached is False

    def test_fractional_seconds_truncate(self, now):
        """Partial seconds are dropped, not rounded."""
        target = now + timedelta(seconds=59, milliseconds=999)

        result = compute_remaining(now, target)

        assert result.seconds == 59
        assert result.minutes == 0

    def test_day_rollover(self, now):
        """Exactly one day is 1 day and 00:00:00."""
        result = compute_remaining(now, now + timedelta(days=1))

        assert result.days == 1
        assert result.time_of_day == "00:00:00"

    def test_large_day_count(self, now):
        """Days are not capped."""
        result = compute_remaining(now, now + timedelta(days=400, hours=23))

        assert result.days == 400
        assert result.hours == 23

    @pytest.mark.parametrize("offset_ms", [
        1, 999, 1000, 59_999, 60_000, 3_599_999, 3_600_000,
        86_399_999, 86_400_000, 187_445_123, 1_000_000_007,
    ])
    def test_ranges_and_reconstruction(self, now, offset_ms):
        """Fields stay in range and rebuild the truncated difference."""
        target = now + timedelta(milliseconds=offset_ms)

        result = compute_remaining(now, target)

        assert result.reached is False
        assert 0 <= result.hours <= 23
        assert 0 <= result.minutes <= 59
        assert 0 <= result.seconds <= 59
        assert result.total_seconds * 1000 == (offset_ms // 1000) * 1000

    @pytest.mark.parametrize("offset", [
        timedelta(0),
        timedelta(milliseconds=-1),
        timedelta(hours=-5),
        timedelta(days=-365),
    ])
    def test_now_at_or_after_target(self, now, offset):
        """Every now >= target is reached with zero fields."""
        result = compute_remaining(now, now + offset)

        assert result == RemainingDuration.target_reached()

    def test_mixed_offsets(self):
        """Targets with a UTC offset compare by instant."""
        target = datetime.fromisoformat("2025-07-18T17:00:00-07:00")
        now = datetime(2025, 7, 18, 23, 0, 0, tzinfo=timezone.utc)

        result = compute_remaining(now, target)

        assert result.hours == 1
        assert result.reached is False

    def test_naive_treated_as_utc(self, now):
        """Naive datetimes are interpreted as UTC."""
        naive_now = now.replace(tzinfo=None)

        result = compute_remaining(naive_now, now + timedelta(minutes=5))

        assert result.minutes == 5


# =============================================================================
# RemainingDuration Tests
# =============================================================================

class TestRemainingDuration:
    """Tests for the RemainingDuration dataclass."""

    def test_time_of_day_padding(self):
        """Single digits are zero-padded."""
        remaining = RemainingDuration(days=0, hours=1, minutes=2, seconds=3)
        assert remaining.time_of_day == "01:02:03"

    def test_target_reached_defaults(self):
        """target_reached() has every numeric field at zero."""
        remaining = RemainingDuration.target_reached()

        assert remaining.reached is True
        assert remaining.total_seconds == 0

    def test_is_immutable(self):
        """Durations cannot be mutated."""
        remaining = RemainingDuration(days=1)

        with pytest.raises(AttributeError):
            remaining.days = 2

