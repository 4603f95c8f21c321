"""
Demo Day - QR Scan
Resolve a scanned booth code and capture the investor's interest
"""

from datetime import datetime
from typing import List, Optional

from .events import LiveEvent, LiveEventType, make_event
from .models import InterestLevel, Investor, Startup


def find_startup_by_qr(startups: List[Startup], qr_code: str) -> Optional[Startup]:
    for startup in startups:
        if startup.qr_code == qr_code:
            return startup
    return None


def capture_interest(
    startup: Startup,
    investor: Investor,
    level: InterestLevel,
    notes: Optional[str] = None,
    now: Optional[datetime] = None
) -> LiveEvent:
    """
    Scan event for a booth visit. Applying it records an Interest with
    scanned_via_qr set and the scan time stamped.
    """
    return make_event(LiveEventType.SCAN, startup, investor, level=level, notes=notes, now=now)
