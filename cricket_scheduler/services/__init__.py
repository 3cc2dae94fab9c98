"""
Services for player availability and match scheduling.
"""

from .availability import AvailabilityEngine
from .scheduling import SchedulingEngine
from .time_utils import SchedulingError, InvalidTimeFormat, InvalidMatchWindow

__all__ = [
    "AvailabilityEngine",
    "SchedulingEngine",
    "SchedulingError",
    "InvalidTimeFormat",
    "InvalidMatchWindow"
]
