"""
Data models for the Cricket Match Scheduling System.
Defines all data structures passed into and returned from the engines.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set
from enum import Enum


class MatchStatus(Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ConflictReason(Enum):
    PLAYER_UNAVAILABLE = "player_unavailable"
    TIME_OVERLAP = "time_overlap"
    LOCATION_CONFLICT = "location_conflict"  # Reserved, no check produces it yet


class MemberRole(Enum):
    MEMBER = "member"
    CAPTAIN = "captain"
    VICE_CAPTAIN = "vice-captain"
    COACH = "coach"


@dataclass
class TimeSlot:
    start: str
    end: str
    is_available: bool = True

    def __str__(self):
        state = "free" if self.is_available else "busy"
        return f"{self.start}-{self.end} ({state})"


@dataclass
class PlayerAvailability:
    date: str
    time_slots: List[TimeSlot] = field(default_factory=list)
    is_available: bool = True
    reason: Optional[str] = None
    id: Optional[str] = None


@dataclass
class Player:
    id: str
    name: str = ""
    availability: List[PlayerAvailability] = field(default_factory=list)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Player):
            return self.id == other.id
        return False


@dataclass
class TeamMember:
    player_id: str
    is_active: bool = True
    role: MemberRole = MemberRole.MEMBER


@dataclass
class Team:
    id: str
    name: str = ""
    members: List[TeamMember] = field(default_factory=list)

    def active_player_ids(self) -> Set[str]:
        return {member.player_id for member in self.members if member.is_active}

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Team):
            return self.id == other.id
        return False


@dataclass
class PlayingXI:
    home_team: Set[str] = field(default_factory=set)
    away_team: Set[str] = field(default_factory=set)


@dataclass
class ScheduledMatch:
    id: str
    home_team: Team
    away_team: Team
    venue: str
    date: str
    start_time: str
    duration_minutes: int
    status: MatchStatus = MatchStatus.SCHEDULED
    playing_xi: PlayingXI = field(default_factory=PlayingXI)

    def __str__(self):
        return f"{self.away_team.id} @ {self.home_team.id} on {self.date} {self.start_time} at {self.venue}"

    def involves_team(self, team_id: str) -> bool:
        return self.home_team.id == team_id or self.away_team.id == team_id

    def includes_player(self, player_id: str) -> bool:
        return player_id in self.playing_xi.home_team or player_id in self.playing_xi.away_team


@dataclass
class Conflict:
    player_id: str
    conflicting_match_ids: List[str] = field(default_factory=list)
    reason: ConflictReason = ConflictReason.TIME_OVERLAP


@dataclass
class AvailabilityResult:
    is_available: bool
    conflicts: List[Conflict] = field(default_factory=list)


@dataclass
class MultiAvailabilityResult:
    available_players: List[Player] = field(default_factory=list)
    unavailable_players: List[Player] = field(default_factory=list)
    conflicts: List[Conflict] = field(default_factory=list)


@dataclass
class ScheduleResult:
    success: bool
    match: Optional[ScheduledMatch] = None
    conflicts: List[Conflict] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass
class RescheduleResult:
    success: bool
    match: Optional[ScheduledMatch] = None
    conflicts: List[Conflict] = field(default_factory=list)


@dataclass
class MatchStatistics:
    total_matches: int = 0
    scheduled_matches: int = 0
    live_matches: int = 0
    completed_matches: int = 0
    cancelled_matches: int = 0

    def get_summary(self) -> str:
        summary = f"Total Matches: {self.total_matches}\n"
        summary += f"Scheduled: {self.scheduled_matches}\n"
        summary += f"Live: {self.live_matches}\n"
        summary += f"Completed: {self.completed_matches}\n"
        summary += f"Cancelled: {self.cancelled_matches}\n"
        return summary
