"""
Configuration constants for the Cricket Match Scheduling System.
All configurable settings are defined here.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Time Arithmetic
MINUTES_PER_DAY = 24 * 60

# Candidate start times offered when a proposed window has conflicts
SUGGESTION_CANDIDATE_TIMES = [
    "06:00", "08:00", "10:00", "12:00",
    "14:00", "16:00", "18:00", "20:00"
]

# Hourly grid used for free-slot listings
HOURLY_SLOT_TIMES = [
    "06:00", "07:00", "08:00", "09:00", "10:00", "11:00", "12:00",
    "13:00", "14:00", "15:00", "16:00", "17:00", "18:00", "19:00", "20:00"
]

# Share of a squad that must be free for a player-based suggestion
MIN_AVAILABLE_RATIO = float(os.getenv("MIN_AVAILABLE_RATIO", "0.8"))

# Day assumed free when a player has not declared availability
DEFAULT_DAY_START = "06:00"
DEFAULT_DAY_END = "23:59"

# Player id used on the conflict raised when a team is drawn against itself
TEAM_CONFLICT_SENTINEL = "team_conflict"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:8081,http://localhost:19006").split(",")
    if origin.strip()
]

# Server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_RELOAD = os.getenv("API_RELOAD", "false").lower() in ("1", "true", "yes")
