"""
Match scheduling for the Cricket Match Scheduling System.
Validates a proposed fixture against team fixtures and player availability
and builds the new match record.
"""

import uuid
from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from cricket_scheduler.models import (
    Team, Player, ScheduledMatch, MatchStatus, PlayingXI,
    Conflict, ConflictReason, ScheduleResult, RescheduleResult, MatchStatistics
)
from cricket_scheduler.core.config import (
    SUGGESTION_CANDIDATE_TIMES, HOURLY_SLOT_TIMES, TEAM_CONFLICT_SENTINEL
)
from cricket_scheduler.core.logging_config import get_logger
from cricket_scheduler.services.availability import AvailabilityEngine
from cricket_scheduler.services.time_utils import check_duration, fits_in_day, match_window, windows_overlap

logger = get_logger(__name__)


class SchedulingEngine:
    """
    Schedules matches between two teams.

    Team fixtures are checked before player availability, and each check is
    a hard gate. The engine keeps no state between calls.
    """

    def __init__(self, availability: Optional[AvailabilityEngine] = None):
        self.availability = availability or AvailabilityEngine()

    def schedule_match(
        self,
        home_team: Team,
        away_team: Team,
        venue: str,
        date: str,
        start_time: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch],
        all_players: List[Player]
    ) -> ScheduleResult:
        """
        Schedule a new match with conflict checking.

        Args:
            home_team: Team playing at home
            away_team: Visiting team
            venue: Ground name
            date: Match date
            start_time: "HH:MM" start time
            duration_minutes: Match length
            existing_matches: Matches already on the calendar
            all_players: Player records used to resolve both rosters

        Returns:
            ScheduleResult holding either the new match or the conflicts
            plus fixture-free alternative start times
        """
        team_conflicts = self._check_team_conflicts(
            home_team, away_team, date, start_time, duration_minutes, existing_matches
        )
        if team_conflicts:
            logger.info(f"Cannot schedule {home_team.id} v {away_team.id} on {date} {start_time}: team conflict")
            return ScheduleResult(
                success=False,
                conflicts=team_conflicts,
                suggestions=self.suggest_alternative_times(date, duration_minutes, existing_matches)
            )

        player_conflicts = self._check_player_conflicts(
            home_team, away_team, date, start_time, duration_minutes, existing_matches, all_players
        )
        if player_conflicts:
            logger.info(
                f"Cannot schedule {home_team.id} v {away_team.id} on {date} {start_time}: "
                f"{len(player_conflicts)} player conflict(s)"
            )
            return ScheduleResult(
                success=False,
                conflicts=player_conflicts,
                suggestions=self.suggest_alternative_times(date, duration_minutes, existing_matches)
            )

        match = ScheduledMatch(
            id=uuid.uuid4().hex,
            home_team=home_team,
            away_team=away_team,
            venue=venue,
            date=date,
            start_time=start_time,
            duration_minutes=duration_minutes,
            status=MatchStatus.SCHEDULED,
            playing_xi=PlayingXI()
        )
        logger.info(f"Scheduled match {match.id}: {match}")
        return ScheduleResult(success=True, match=match)

    def _check_team_conflicts(
        self,
        home_team: Team,
        away_team: Team,
        date: str,
        start_time: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch]
    ) -> List[Conflict]:
        """Check for a self-match and for fixtures either team already has."""
        conflicts = []

        if home_team.id == away_team.id:
            conflicts.append(Conflict(TEAM_CONFLICT_SENTINEL, [], ConflictReason.TIME_OVERLAP))

        for team in (home_team, away_team):
            clashing_ids = [
                match.id for match in self._overlapping_matches(date, start_time, duration_minutes, existing_matches)
                if match.involves_team(team.id)
            ]
            if clashing_ids:
                conflicts.append(Conflict(team.id, clashing_ids, ConflictReason.TIME_OVERLAP))

        return conflicts

    def _check_player_conflicts(
        self,
        home_team: Team,
        away_team: Team,
        date: str,
        start_time: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch],
        all_players: List[Player]
    ) -> List[Conflict]:
        conflicts = []

        for team in (home_team, away_team):
            roster = self._active_roster(team, all_players)
            result = self.availability.check_multiple_players_availability(
                roster, date, start_time, duration_minutes, existing_matches
            )
            conflicts.extend(result.conflicts)

        return conflicts

    def _active_roster(self, team: Team, all_players: List[Player]) -> List[Player]:
        active_ids = team.active_player_ids()
        return [player for player in all_players if player.id in active_ids]

    def _overlapping_matches(
        self,
        date: str,
        start_time: str,
        duration_minutes: int,
        matches: List[ScheduledMatch]
    ) -> List[ScheduledMatch]:
        window = match_window(start_time, duration_minutes)
        return [
            match for match in matches
            if match.date == date
            and windows_overlap(window, match_window(match.start_time, match.duration_minutes))
        ]

    def suggest_alternative_times(
        self,
        date: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch]
    ) -> List[str]:
        """
        Suggest start times that clash with no fixture on the date.

        Player availability is not considered here; see
        AvailabilityEngine.suggest_alternative_times for the squad-based
        variant.
        """
        check_duration(duration_minutes)
        return [
            candidate for candidate in SUGGESTION_CANDIDATE_TIMES
            if fits_in_day(candidate, duration_minutes)
            and not self._overlapping_matches(date, candidate, duration_minutes, existing_matches)
        ]

    def get_matches_for_date(self, date: str, matches: List[ScheduledMatch]) -> List[ScheduledMatch]:
        return [match for match in matches if match.date == date]

    def get_matches_for_team(self, team_id: str, matches: List[ScheduledMatch]) -> List[ScheduledMatch]:
        return [match for match in matches if match.involves_team(team_id)]

    def get_upcoming_matches_for_team(
        self,
        team_id: str,
        matches: List[ScheduledMatch],
        now: Optional[datetime] = None
    ) -> List[ScheduledMatch]:
        """Scheduled matches for a team that start after now, earliest first."""
        now = now or datetime.now()

        upcoming = [
            match for match in self.get_matches_for_team(team_id, matches)
            if match.status == MatchStatus.SCHEDULED and self._kickoff(match) > now
        ]
        return sorted(upcoming, key=self._kickoff)

    def _kickoff(self, match: ScheduledMatch) -> datetime:
        return datetime.fromisoformat(f"{match.date}T{match.start_time}")

    def is_time_slot_available(
        self,
        date: str,
        start_time: str,
        duration_minutes: int,
        matches: List[ScheduledMatch]
    ) -> bool:
        return not self._overlapping_matches(date, start_time, duration_minutes, matches)

    def get_available_time_slots(
        self,
        date: str,
        duration_minutes: int,
        matches: List[ScheduledMatch]
    ) -> List[str]:
        """Hourly start times on the date that clash with no fixture."""
        check_duration(duration_minutes)
        return [
            slot for slot in HOURLY_SLOT_TIMES
            if fits_in_day(slot, duration_minutes)
            and self.is_time_slot_available(date, slot, duration_minutes, matches)
        ]

    def reschedule_match(
        self,
        match_id: str,
        new_date: str,
        new_time: str,
        matches: List[ScheduledMatch],
        players: List[Player],
        check_team_fixtures: bool = False
    ) -> RescheduleResult:
        """
        Move a match to a new date and time.

        Both active rosters are re-checked against the new window, ignoring
        the match being moved. Team fixtures are only re-checked when
        check_team_fixtures is set; by default a team can end up
        double-booked by a reschedule.

        Returns:
            RescheduleResult with the moved copy of the match, or the
            conflicts. An unknown match id fails with no conflicts.
        """
        match = next((m for m in matches if m.id == match_id), None)
        if match is None:
            logger.info(f"Cannot reschedule unknown match {match_id}")
            return RescheduleResult(success=False)

        other_matches = [m for m in matches if m.id != match_id]

        if check_team_fixtures:
            team_conflicts = self._check_team_conflicts(
                match.home_team, match.away_team, new_date, new_time, match.duration_minutes, other_matches
            )
            if team_conflicts:
                return RescheduleResult(success=False, conflicts=team_conflicts)

        conflicts = self._check_player_conflicts(
            match.home_team, match.away_team, new_date, new_time,
            match.duration_minutes, other_matches, players
        )
        if conflicts:
            logger.info(f"Cannot reschedule {match_id} to {new_date} {new_time}: {len(conflicts)} conflict(s)")
            return RescheduleResult(success=False, conflicts=conflicts)

        logger.info(f"Rescheduled {match_id} to {new_date} {new_time}")
        return RescheduleResult(success=True, match=replace(match, date=new_date, start_time=new_time))

    def cancel_match(self, match_id: str, matches: List[ScheduledMatch]) -> List[ScheduledMatch]:
        """Return the matches with match_id marked cancelled. Nothing is removed."""
        return [
            replace(match, status=MatchStatus.CANCELLED) if match.id == match_id else match
            for match in matches
        ]

    def get_match_statistics(self, matches: List[ScheduledMatch]) -> MatchStatistics:
        counts = Counter(match.status for match in matches)
        return MatchStatistics(
            total_matches=len(matches),
            scheduled_matches=counts[MatchStatus.SCHEDULED],
            live_matches=counts[MatchStatus.LIVE],
            completed_matches=counts[MatchStatus.COMPLETED],
            cancelled_matches=counts[MatchStatus.CANCELLED]
        )
