"""
Main FastAPI application for the Cricket Match Scheduling System.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cricket_scheduler.api import routes
from cricket_scheduler.core.config import CORS_ORIGINS, LOG_LEVEL
from cricket_scheduler.core.logging_config import setup_logging

setup_logging(LOG_LEVEL)

app = FastAPI(
    title="Cricket Match Scheduling API",
    description="API for checking player availability and scheduling cricket matches",
    version="1.0.0"
)

# Enable CORS for the mobile app's dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Cricket Match Scheduling API",
        "version": "1.0.0",
        "endpoints": {
            "schedule": "/api/schedule",
            "availability": "/api/availability/check",
            "health": "/api/health"
        }
    }
