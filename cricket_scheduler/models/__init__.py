"""
Data models for the scheduling system.
"""

from .models import (
    MatchStatus,
    ConflictReason,
    MemberRole,
    TimeSlot,
    PlayerAvailability,
    Player,
    TeamMember,
    Team,
    PlayingXI,
    ScheduledMatch,
    Conflict,
    AvailabilityResult,
    MultiAvailabilityResult,
    ScheduleResult,
    RescheduleResult,
    MatchStatistics
)

__all__ = [
    "MatchStatus",
    "ConflictReason",
    "MemberRole",
    "TimeSlot",
    "PlayerAvailability",
    "Player",
    "TeamMember",
    "Team",
    "PlayingXI",
    "ScheduledMatch",
    "Conflict",
    "AvailabilityResult",
    "MultiAvailabilityResult",
    "ScheduleResult",
    "RescheduleResult",
    "MatchStatistics"
]
