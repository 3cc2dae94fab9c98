"""
API routes for availability checks and match scheduling.
Every request carries its own rosters and match lists; nothing is stored.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List
from datetime import datetime

from cricket_scheduler.models import Player, Team, ScheduledMatch
from cricket_scheduler.services import AvailabilityEngine, SchedulingEngine, SchedulingError
from cricket_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["schedule"])

availability_engine = AvailabilityEngine()
scheduling_engine = SchedulingEngine(availability_engine)


class PlayerCheckRequest(BaseModel):
    """Request model for a single player availability check."""
    player: Player
    date: str
    start_time: str
    duration_minutes: int
    existing_matches: List[ScheduledMatch] = []


class PlayersCheckRequest(BaseModel):
    """Request model for a squad availability check."""
    players: List[Player]
    date: str
    start_time: str
    duration_minutes: int
    existing_matches: List[ScheduledMatch] = []


class PlayerSuggestionRequest(BaseModel):
    players: List[Player]
    date: str
    duration_minutes: int


class ScheduleMatchRequest(BaseModel):
    """Request model for scheduling a new match."""
    home_team: Team
    away_team: Team
    venue: str
    date: str
    start_time: str
    duration_minutes: int
    existing_matches: List[ScheduledMatch] = []
    players: List[Player] = []


class RescheduleRequest(BaseModel):
    match_id: str
    new_date: str
    new_time: str
    matches: List[ScheduledMatch]
    players: List[Player] = []
    check_team_fixtures: bool = False


class CancelRequest(BaseModel):
    match_id: str
    matches: List[ScheduledMatch]


class TimeSlotsRequest(BaseModel):
    date: str
    duration_minutes: int
    matches: List[ScheduledMatch] = []


class MatchListRequest(BaseModel):
    matches: List[ScheduledMatch] = []


def _invalid_input(e: SchedulingError) -> HTTPException:
    logger.info(f"Rejected request: {e}")
    return HTTPException(status_code=422, detail=str(e))


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@router.post("/availability/check")
async def check_player(request: PlayerCheckRequest):
    try:
        return availability_engine.check_player_availability(
            request.player,
            request.date,
            request.start_time,
            request.duration_minutes,
            request.existing_matches
        )
    except SchedulingError as e:
        raise _invalid_input(e)


@router.post("/availability/check-multiple")
async def check_players(request: PlayersCheckRequest):
    try:
        return availability_engine.check_multiple_players_availability(
            request.players,
            request.date,
            request.start_time,
            request.duration_minutes,
            request.existing_matches
        )
    except SchedulingError as e:
        raise _invalid_input(e)


@router.post("/availability/suggestions")
async def suggest_player_times(request: PlayerSuggestionRequest):
    """Start times when most of the squad has declared itself free."""
    try:
        suggestions = availability_engine.suggest_alternative_times(
            request.players, request.date, request.duration_minutes
        )
    except SchedulingError as e:
        raise _invalid_input(e)
    return {"date": request.date, "suggestions": suggestions}


@router.post("/schedule")
async def schedule_match(request: ScheduleMatchRequest):
    """
    Schedule a new match.

    Returns the new match on success. On failure returns the conflicts
    and start times on the same date that clash with no fixture.
    """
    try:
        return scheduling_engine.schedule_match(
            request.home_team,
            request.away_team,
            request.venue,
            request.date,
            request.start_time,
            request.duration_minutes,
            request.existing_matches,
            request.players
        )
    except SchedulingError as e:
        raise _invalid_input(e)


@router.post("/schedule/reschedule")
async def reschedule_match(request: RescheduleRequest):
    try:
        return scheduling_engine.reschedule_match(
            request.match_id,
            request.new_date,
            request.new_time,
            request.matches,
            request.players,
            check_team_fixtures=request.check_team_fixtures
        )
    except SchedulingError as e:
        raise _invalid_input(e)


@router.post("/schedule/cancel")
async def cancel_match(request: CancelRequest):
    if not any(match.id == request.match_id for match in request.matches):
        raise HTTPException(status_code=404, detail=f"Match {request.match_id} not found")
    return {"matches": scheduling_engine.cancel_match(request.match_id, request.matches)}


@router.post("/schedule/slots")
async def get_available_slots(request: TimeSlotsRequest):
    try:
        slots = scheduling_engine.get_available_time_slots(
            request.date, request.duration_minutes, request.matches
        )
    except SchedulingError as e:
        raise _invalid_input(e)
    return {"date": request.date, "available_slots": slots}


@router.post("/schedule/stats")
async def get_statistics(request: MatchListRequest):
    return scheduling_engine.get_match_statistics(request.matches)
