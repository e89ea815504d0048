"""Tests for time arithmetic and duration formatting."""

import math

import pytest

from pace_table.metrics.timing import (
    PLACEHOLDER,
    format_duration,
    round_half_up,
    time_for,
    vma_pace_seconds,
)


class TestTimeFor:
    """Tests for time_for function."""

    def test_one_km_at_five_minutes(self):
        """5:00/km over 1000m takes 300 seconds."""
        assert time_for(1000, 300) == 300

    def test_five_km_at_four_minutes(self):
        assert time_for(5000, 240) == 1200

    def test_marathon(self):
        """Marathon at 5:00/km is 42.195 * 300 seconds."""
        assert time_for(42195, 300) == pytest.approx(12658.5)

    def test_zero_pace_is_undefined(self):
        assert time_for(1000, 0) is None

    def test_negative_pace_is_undefined(self):
        assert time_for(1000, -30) is None


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_minutes_and_seconds(self):
        assert format_duration(65) == "01:05"

    def test_hours_minutes_seconds(self):
        assert format_duration(3661) == "01:01:01"

    def test_exact_hour(self):
        assert format_duration(3600) == "01:00:00"

    def test_under_a_minute(self):
        assert format_duration(42) == "00:42"

    def test_seconds_round_half_up(self):
        assert format_duration(62.5) == "01:03"
        assert format_duration(62.4) == "01:02"

    def test_rounded_seconds_carry_into_minutes(self):
        """59.6 seconds rounds to 60 and becomes one minute."""
        assert format_duration(59.6) == "01:00"

    def test_carry_cascades_into_hours(self):
        """3599.6 rounds to 59:60 which becomes 1 hour."""
        assert format_duration(3599.6) == "01:00:00"

    @pytest.mark.parametrize("value", [0, -1, -3600, math.nan, math.inf, None])
    def test_invalid_input_gives_placeholder(self, value):
        assert format_duration(value) == PLACEHOLDER == "--:--"

    def test_undefined_time_formats_to_placeholder(self):
        assert format_duration(time_for(1000, 0)) == "--:--"


class TestRoundHalfUp:
    """Tests for round_half_up function."""

    def test_half_rounds_up(self):
        # Python's round() would give 2 here
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2


class TestVmaPace:
    """Tests for vma_pace_seconds function."""

    def test_vma_15_is_four_minutes(self):
        assert vma_pace_seconds(15) == 240

    def test_vma_18(self):
        assert vma_pace_seconds(18) == 200

    @pytest.mark.parametrize("vma", [0, -5, None, math.nan])
    def test_unusable_vma(self, vma):
        assert vma_pace_seconds(vma) is None
