"""
Demo Day - Configuration
Environment-driven settings for the dashboard service
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()
load_dotenv(Path(__file__).parent.parent / ".env")


def _optional_int(name: str):
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


PORT = int(os.getenv("DEMODAY_PORT", 3003))

# Live feed simulation
FEED_INTERVAL_SECONDS = float(os.getenv("DEMODAY_FEED_INTERVAL", 5))
FEED_EMIT_PROBABILITY = float(os.getenv("DEMODAY_FEED_PROBABILITY", 0.5))
FEED_SEED = _optional_int("DEMODAY_FEED_SEED")  # None = nondeterministic
FEED_MAX_EVENTS = int(os.getenv("FEED_MAX_EVENTS", 50))

# Match buckets for the investor portal
MATCH_THRESHOLD = int(os.getenv("MATCH_THRESHOLD", 60))
TOP_MATCH_THRESHOLD = int(os.getenv("TOP_MATCH_THRESHOLD", 70))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "DEMODAY_CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]
