"""
Tests for the wall-clock helpers shared by both engines.
"""

import sys
import os
import itertools

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cricket_scheduler.services.time_utils import (
    time_to_minutes, minutes_to_time, match_window, calculate_end_time,
    fits_in_day, time_overlaps, slot_window,
    InvalidTimeFormat, InvalidMatchWindow, SchedulingError
)


def test_time_to_minutes():
    """Test parsing of HH:MM strings."""
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("06:30") == 390
    assert time_to_minutes("23:59") == 1439
    assert minutes_to_time(390) == "06:30"
    print("[PASS] Time parsing test passed")


@pytest.mark.parametrize("value", [
    "25:00", "10:60", "10-00", "ten", "", None, 600,
    "9:5", "7:00", " 10:00 ", "10:0"
])
def test_malformed_time_rejected(value):
    with pytest.raises(InvalidTimeFormat):
        time_to_minutes(value)


def test_invalid_time_is_a_value_error():
    """Callers catching ValueError still see bad input."""
    with pytest.raises(ValueError):
        match_window("7pm", 60)
    assert issubclass(InvalidTimeFormat, SchedulingError)
    assert issubclass(InvalidMatchWindow, SchedulingError)


def test_match_window():
    assert match_window("10:00", 180) == (600, 780)
    assert calculate_end_time("10:00", 180) == "13:00"
    # Finishing exactly at midnight is still the same day
    assert match_window("21:00", 180) == (1260, 1440)


def test_window_past_midnight_rejected():
    with pytest.raises(InvalidMatchWindow):
        match_window("22:00", 180)
    assert not fits_in_day("22:00", 180)
    assert fits_in_day("21:00", 180)


@pytest.mark.parametrize("duration", [0, -30])
def test_non_positive_duration_rejected(duration):
    with pytest.raises(InvalidMatchWindow):
        match_window("10:00", duration)


def test_half_open_overlap():
    """A window ending when another begins does not overlap it."""
    assert not time_overlaps(600, 660, 660, 720)
    assert not time_overlaps(660, 720, 600, 660)
    assert time_overlaps(600, 661, 660, 720)
    assert time_overlaps(600, 780, 630, 640)
    print("[PASS] Half-open overlap test passed")


def test_overlap_symmetry():
    points = [0, 60, 90, 120, 180, 240]
    windows = [(s, e) for s, e in itertools.combinations(points, 2)]

    for a, b in itertools.product(windows, repeat=2):
        assert time_overlaps(a[0], a[1], b[0], b[1]) == time_overlaps(b[0], b[1], a[0], a[1])


def test_slot_window():
    assert slot_window("09:00", "12:00") == (540, 720)

    with pytest.raises(InvalidMatchWindow):
        slot_window("12:00", "09:00")
    with pytest.raises(InvalidMatchWindow):
        slot_window("12:00", "12:00")
