"""
Wall-clock arithmetic shared by the availability and scheduling engines.
Times are "HH:MM" 24-hour strings and are compared as minutes past midnight.
"""

import re
from typing import Tuple

from cricket_scheduler.core.config import MINUTES_PER_DAY


# Two-digit 24-hour clock, 00:00 to 23:59
TIME_PATTERN = re.compile(r"([01]\d|2[0-3]):[0-5]\d")


class SchedulingError(ValueError):
    """Base class for invalid input handed to the engines."""


class InvalidTimeFormat(SchedulingError):
    """Raised when a time value is not a valid "HH:MM" string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time {value!r}, expected HH:MM (24-hour)")


class InvalidMatchWindow(SchedulingError):
    """Raised when a match window is empty or runs past midnight."""


def time_to_minutes(value: str) -> int:
    """Convert a "HH:MM" string to minutes past midnight."""
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise InvalidTimeFormat(value)
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes past midnight back to "HH:MM"."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def match_window(start_time: str, duration_minutes: int) -> Tuple[int, int]:
    """
    Resolve a start time and duration into a half-open [start, end) window.

    Raises:
        InvalidTimeFormat: If start_time is not "HH:MM"
        InvalidMatchWindow: If the duration is not positive or the window
            would end after midnight
    """
    start = time_to_minutes(start_time)
    check_duration(duration_minutes)

    end = start + duration_minutes
    if end > MINUTES_PER_DAY:
        raise InvalidMatchWindow(
            f"A {duration_minutes} minute match starting at {start_time} runs past midnight"
        )
    return start, end


def check_duration(duration_minutes: int) -> None:
    if duration_minutes <= 0:
        raise InvalidMatchWindow(f"Duration must be positive, got {duration_minutes} minutes")


def slot_window(start: str, end: str) -> Tuple[int, int]:
    """Resolve a declared slot, which must start before it ends on the same day."""
    window = (time_to_minutes(start), time_to_minutes(end))
    if window[0] >= window[1]:
        raise InvalidMatchWindow(f"Slot {start}-{end} does not start before it ends")
    return window


def fits_in_day(start_time: str, duration_minutes: int) -> bool:
    return time_to_minutes(start_time) + duration_minutes <= MINUTES_PER_DAY


def calculate_end_time(start_time: str, duration_minutes: int) -> str:
    _, end = match_window(start_time, duration_minutes)
    return minutes_to_time(end)


def time_overlaps(start1: int, end1: int, start2: int, end2: int) -> bool:
    # Half-open: a window ending exactly when another starts does not overlap
    return start1 < end2 and start2 < end1


def windows_overlap(first: Tuple[int, int], second: Tuple[int, int]) -> bool:
    return time_overlaps(first[0], first[1], second[0], second[1])
