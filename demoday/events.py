"""
Demo Day - Live Events
Explicit event log for the dashboards: a pure reducer over dashboard state
and a seeded random source that stands in for booth traffic.
"""

import random
import uuid
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from .config import FEED_MAX_EVENTS
from .models import (
    AnalyticsEvent, EventType, Interest, InterestLevel, Investor, Meeting,
    MeetingStatus, Startup
)


class LiveEventType(str, Enum):
    INTEREST = "interest"
    VIEW = "view"
    MEETING = "meeting"
    SCAN = "scan"


class LiveEvent(BaseModel):
    """One item of the admin live feed"""
    id: str
    type: LiveEventType
    startup_id: str
    startup_name: str
    investor_id: str
    investor_name: str
    investor_firm: Optional[str] = None
    investor_avatar: Optional[str] = None
    level: Optional[InterestLevel] = None  # interest/scan only
    notes: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class DashboardState(BaseModel):
    interests: List[Interest] = []
    meetings: List[Meeting] = []
    analytics: List[AnalyticsEvent] = []
    feed: List[LiveEvent] = []  # newest first


def make_event(
    event_type: LiveEventType,
    startup: Startup,
    investor: Investor,
    level: Optional[InterestLevel] = None,
    notes: Optional[str] = None,
    now: Optional[datetime] = None,
    event_id: Optional[str] = None
) -> LiveEvent:
    return LiveEvent(
        id=event_id or uuid.uuid4().hex[:12],
        type=event_type,
        startup_id=startup.id,
        startup_name=startup.name,
        investor_id=investor.id,
        investor_name=investor.name,
        investor_firm=investor.firm,
        investor_avatar=investor.avatar_url,
        level=level,
        notes=notes,
        timestamp=now or datetime.now(),
    )


def _upsert_interest(interests: List[Interest], event: LiveEvent) -> List[Interest]:
    """Replace level and timestamp for a known pair, else append"""
    level = event.level or InterestLevel.WANT_TO_LEARN_MORE
    scanned = event.type == LiveEventType.SCAN

    for idx, existing in enumerate(interests):
        if existing.startup_id == event.startup_id and existing.investor_id == event.investor_id:
            changes = {"level": level, "created_at": event.timestamp}
            if event.notes is not None:
                changes["notes"] = event.notes
            if scanned:
                changes.update(scanned_via_qr=True, scan_timestamp=event.timestamp)
            updated = existing.model_copy(update=changes)
            return interests[:idx] + [updated] + interests[idx + 1:]

    return interests + [Interest(
        id=f"interest-{event.id}",
        startup_id=event.startup_id,
        investor_id=event.investor_id,
        investor_name=event.investor_name,
        investor_firm=event.investor_firm,
        investor_avatar=event.investor_avatar,
        level=level,
        notes=event.notes,
        scanned_via_qr=scanned,
        scan_timestamp=event.timestamp if scanned else None,
        created_at=event.timestamp,
    )]


def _analytics_for(event: LiveEvent, event_type: EventType, **extra) -> AnalyticsEvent:
    return AnalyticsEvent(
        id=f"analytics-{event.id}",
        startup_id=event.startup_id,
        investor_id=event.investor_id,
        investor_name=event.investor_name,
        event_type=event_type,
        timestamp=event.timestamp,
        **extra
    )


def apply_event(
    state: DashboardState,
    event: LiveEvent,
    max_feed: int = FEED_MAX_EVENTS
) -> DashboardState:
    """Return the state after `event`; the input state is left untouched"""
    interests = state.interests
    meetings = state.meetings
    analytics = state.analytics

    if event.type == LiveEventType.INTEREST:
        interests = _upsert_interest(interests, event)
        analytics = analytics + [_analytics_for(event, EventType.INTEREST_EXPRESSED)]

    elif event.type == LiveEventType.SCAN:
        interests = _upsert_interest(interests, event)
        analytics = analytics + [_analytics_for(event, EventType.QR_SCAN)]

    elif event.type == LiveEventType.VIEW:
        analytics = analytics + [
            _analytics_for(event, EventType.PROFILE_VIEW, event_data={"source": "live_feed"})
        ]

    elif event.type == LiveEventType.MEETING:
        meetings = meetings + [Meeting(
            id=f"meeting-{event.id}",
            startup_id=event.startup_id,
            startup_name=event.startup_name,
            investor_id=event.investor_id,
            investor_name=event.investor_name,
            investor_firm=event.investor_firm,
            title=f"{event.startup_name} x {event.investor_firm or event.investor_name}",
            scheduled_at=event.timestamp + timedelta(days=1),
            status=MeetingStatus.PENDING,
            notes=event.notes,
            created_at=event.timestamp,
        )]
        analytics = analytics + [_analytics_for(event, EventType.MEETING_SCHEDULED)]

    return DashboardState(
        interests=interests,
        meetings=meetings,
        analytics=analytics,
        feed=([event] + state.feed)[:max_feed],
    )


def apply_events(state: DashboardState, events: Iterable[LiveEvent]) -> DashboardState:
    for event in events:
        state = apply_event(state, event)
    return state


class RandomEventSource:
    """
    Simulated booth traffic. Each call to next_event() emits at most one
    event; timing is up to the caller.
    """

    def __init__(
        self,
        startups: List[Startup],
        investors: List[Investor],
        seed: Optional[int] = None,
        emit_probability: float = 0.5
    ):
        if not startups or not investors:
            raise ValueError("Event source needs at least one startup and one investor")
        self.startups = startups
        self.investors = investors
        self.emit_probability = emit_probability
        self.rng = random.Random(seed)

    def next_event(self, now: Optional[datetime] = None) -> Optional[LiveEvent]:
        if self.rng.random() >= self.emit_probability:
            return None

        event_type = self.rng.choice(list(LiveEventType))
        startup = self.rng.choice(self.startups)
        investor = self.rng.choice(self.investors)

        level = None
        if event_type in (LiveEventType.INTEREST, LiveEventType.SCAN):
            level = (
                InterestLevel.STRONGLY_INTERESTED if self.rng.random() > 0.5
                else InterestLevel.WANT_TO_LEARN_MORE
            )

        return make_event(
            event_type,
            startup,
            investor,
            level=level,
            now=now,
            event_id=uuid.UUID(int=self.rng.getrandbits(128)).hex[:12],
        )
