"""
Run the cricket scheduling API under uvicorn.
Host, port, reload and log level come from the environment (see core/config.py).
"""

import uvicorn
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cricket_scheduler.core.config import API_HOST, API_PORT, API_RELOAD, LOG_LEVEL


if __name__ == "__main__":
    print(f"Cricket Match Scheduling API on http://{API_HOST}:{API_PORT} (docs at /docs)")
    if API_RELOAD:
        print("Reloading on code changes")

    uvicorn.run(
        "cricket_scheduler.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD,
        log_level=LOG_LEVEL.lower()
    )
