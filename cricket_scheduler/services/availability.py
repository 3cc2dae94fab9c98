"""
Player availability checks for the Cricket Match Scheduling System.
Decides whether players can take part in a proposed match window.
"""

import uuid
from dataclasses import replace
from typing import List, Optional

from cricket_scheduler.models import (
    Player, PlayerAvailability, TimeSlot, ScheduledMatch,
    Conflict, ConflictReason, AvailabilityResult, MultiAvailabilityResult
)
from cricket_scheduler.core.config import (
    SUGGESTION_CANDIDATE_TIMES, MIN_AVAILABLE_RATIO,
    DEFAULT_DAY_START, DEFAULT_DAY_END
)
from cricket_scheduler.core.logging_config import get_logger
from cricket_scheduler.services.time_utils import (
    check_duration, fits_in_day, match_window, slot_window, windows_overlap
)

logger = get_logger(__name__)

CONFLICT_DESCRIPTIONS = {
    ConflictReason.PLAYER_UNAVAILABLE: "Player marked as unavailable",
    ConflictReason.TIME_OVERLAP: "Player has another match at the same time",
    ConflictReason.LOCATION_CONFLICT: "Player has location conflict",
}


class AvailabilityEngine:
    """
    Checks declared player availability and existing fixtures against a
    proposed match window. Holds no state; every input is passed per call.
    """

    def check_player_availability(
        self,
        player: Player,
        match_date: str,
        match_start_time: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch]
    ) -> AvailabilityResult:
        """
        Check whether one player can play in the proposed window.

        Rules are applied in order and the first one that fails decides:
        a day-level veto, then busy slots declared for the day, then other
        matches the player is already named in.

        Args:
            player: The player to check
            match_date: Date of the proposed match
            match_start_time: "HH:MM" start of the proposed match
            duration_minutes: Length of the proposed match
            existing_matches: Matches already on the calendar

        Returns:
            AvailabilityResult with at most one conflict
        """
        window = match_window(match_start_time, duration_minutes)
        record = self.get_player_availability_for_date(player, match_date)

        if record and not record.is_available:
            logger.debug(f"{player.id} has vetoed {match_date}")
            return AvailabilityResult(
                is_available=False,
                conflicts=[Conflict(player.id, [], ConflictReason.PLAYER_UNAVAILABLE)]
            )

        if record and record.time_slots:
            for slot in record.time_slots:
                if slot.is_available:
                    continue
                if windows_overlap(window, slot_window(slot.start, slot.end)):
                    logger.debug(f"{player.id} is busy {slot.start}-{slot.end} on {match_date}")
                    return AvailabilityResult(
                        is_available=False,
                        conflicts=[Conflict(player.id, [], ConflictReason.TIME_OVERLAP)]
                    )

        clashing_ids = [
            match.id for match in existing_matches
            if match.date == match_date
            and match.includes_player(player.id)
            and windows_overlap(window, match_window(match.start_time, match.duration_minutes))
        ]
        if clashing_ids:
            logger.debug(f"{player.id} already plays in {clashing_ids} on {match_date}")
            return AvailabilityResult(
                is_available=False,
                conflicts=[Conflict(player.id, clashing_ids, ConflictReason.TIME_OVERLAP)]
            )

        return AvailabilityResult(is_available=True)

    def check_multiple_players_availability(
        self,
        players: List[Player],
        match_date: str,
        match_start_time: str,
        duration_minutes: int,
        existing_matches: List[ScheduledMatch]
    ) -> MultiAvailabilityResult:
        """Split players into available and unavailable, keeping input order."""
        result = MultiAvailabilityResult()

        for player in players:
            check = self.check_player_availability(
                player, match_date, match_start_time, duration_minutes, existing_matches
            )
            if check.is_available:
                result.available_players.append(player)
            else:
                result.unavailable_players.append(player)
                result.conflicts.extend(check.conflicts)

        return result

    def suggest_alternative_times(
        self,
        players: List[Player],
        date: str,
        duration_minutes: int
    ) -> List[str]:
        """
        Suggest start times when most of the squad has declared itself free.

        Only declared availability is considered; other fixtures are ignored.
        A candidate is kept when at least MIN_AVAILABLE_RATIO of the players
        are available for it. Candidates that would run past midnight are
        skipped.
        """
        check_duration(duration_minutes)
        suggestions = []

        for candidate in SUGGESTION_CANDIDATE_TIMES:
            if not fits_in_day(candidate, duration_minutes):
                continue
            result = self.check_multiple_players_availability(
                players, date, candidate, duration_minutes, []
            )
            if len(result.available_players) >= len(players) * MIN_AVAILABLE_RATIO:
                suggestions.append(candidate)

        return suggestions

    def get_player_availability_for_date(self, player: Player, date: str) -> Optional[PlayerAvailability]:
        for record in player.availability:
            if record.date == date:
                return record
        return None

    def set_player_availability(
        self,
        player: Player,
        date: str,
        time_slots: List[TimeSlot],
        is_available: bool,
        reason: Optional[str] = None
    ) -> Player:
        """
        Return a copy of the player with the record for date replaced.

        An existing record keeps its position and id; otherwise a new record
        is appended. No history is kept.
        """
        records = list(player.availability)

        for index, record in enumerate(records):
            if record.date == date:
                records[index] = replace(
                    record,
                    time_slots=list(time_slots),
                    is_available=is_available,
                    reason=reason
                )
                break
        else:
            records.append(PlayerAvailability(
                date=date,
                time_slots=list(time_slots),
                is_available=is_available,
                reason=reason,
                id=uuid.uuid4().hex
            ))

        return replace(player, availability=records)

    def get_player_time_slots(self, player: Player, date: str) -> List[TimeSlot]:
        """Free slots for a player on a date; all day when nothing is declared."""
        record = self.get_player_availability_for_date(player, date)

        if record is None:
            return [TimeSlot(start=DEFAULT_DAY_START, end=DEFAULT_DAY_END, is_available=True)]

        return [slot for slot in record.time_slots if slot.is_available]

    def get_conflict_summary(self, conflicts: List[Conflict]) -> str:
        if not conflicts:
            return "No conflicts"

        reasons = []
        for conflict in conflicts:
            if conflict.reason not in reasons:
                reasons.append(conflict.reason)

        return ", ".join(CONFLICT_DESCRIPTIONS.get(reason, "Unknown conflict") for reason in reasons)
