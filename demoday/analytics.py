"""
Demo Day - Dashboard Analytics
Read-only aggregates for the gallery, founder and admin dashboards.
Empty collections yield zeros, never NaN.
"""

import math
from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from .models import (
    AnalyticsEvent, DashboardStats, Document, DocumentView, EventType, Interest,
    InterestLevel, Investor, Meeting, MeetingStatus, MomentumScore, Startup
)
from .momentum import average_momentum_score, get_momentum

RECENT_ACTIVITY_DAYS = 7


def percentage(part: int, total: int) -> int:
    """Rounded percent (half-up); 0 when there is nothing to divide by"""
    if total <= 0:
        return 0
    return math.floor(part * 100 / total + 0.5)


def _is_strong(interest: Interest) -> bool:
    return interest.level == InterestLevel.STRONGLY_INTERESTED


def count_strong(interests: List[Interest]) -> int:
    return sum(1 for i in interests if _is_strong(i))


def conversion_rate(interests: List[Interest]) -> int:
    """Share of interests that are STRONGLY_INTERESTED"""
    return percentage(count_strong(interests), len(interests))


def meeting_rate(interests: List[Interest], meetings: List[Meeting]) -> int:
    """Meetings booked per expressed interest"""
    return percentage(len(meetings), len(interests))


def find_stuck_connections(
    interests: List[Interest],
    meetings: List[Meeting]
) -> List[Interest]:
    """Interests whose (startup, investor) pair has no meeting yet"""
    met = {(m.startup_id, m.investor_id) for m in meetings}
    return [i for i in interests if (i.startup_id, i.investor_id) not in met]


def hours_without_follow_up(interest: Interest, now: Optional[datetime] = None) -> int:
    """Whole hours elapsed since the interest was expressed"""
    now = now or datetime.now()
    return math.floor((now - interest.created_at).total_seconds() / 3600)


def startup_heat(startup_id: str, interests: List[Interest]) -> Dict:
    """Live gallery badge: hot if any strong interest, warm if any interest"""
    startup_interests = [i for i in interests if i.startup_id == startup_id]
    strong = count_strong(startup_interests)
    total = len(startup_interests)

    if strong > 0:
        heat = "hot"
    elif total > 0:
        heat = "warm"
    else:
        heat = "cool"

    return {
        "interests": total,
        "strong_interests": strong,
        "heat": heat,
    }


def average_engagement(document_views: List[DocumentView]) -> int:
    """Mean completion rate across views; missing rates count as 0"""
    if not document_views:
        return 0
    total = sum(dv.completion_rate or 0 for dv in document_views)
    return math.floor(total / len(document_views) + 0.5)


def recent_activity(
    analytics: List[AnalyticsEvent],
    now: Optional[datetime] = None,
    days: int = RECENT_ACTIVITY_DAYS
) -> List[AnalyticsEvent]:
    now = now or datetime.now()
    cutoff = now - timedelta(days=days)
    return [a for a in analytics if a.timestamp > cutoff]


def event_type_counts(analytics: List[AnalyticsEvent]) -> Dict[str, int]:
    """Count of analytics events per type, every type present"""
    counts = Counter(a.event_type for a in analytics)
    return {t.value: counts.get(t, 0) for t in EventType}


def views_for_startup(
    startup_id: str,
    documents: List[Document],
    document_views: List[DocumentView]
) -> List[DocumentView]:
    """Views of any document belonging to the startup"""
    doc_ids = {d.id for d in documents if d.startup_id == startup_id}
    return [dv for dv in document_views if dv.document_id in doc_ids]


def founder_stats(
    startup: Startup,
    interests: List[Interest],
    meetings: List[Meeting],
    documents: List[Document],
    document_views: List[DocumentView],
    analytics: List[AnalyticsEvent],
    momentum_scores: List[MomentumScore],
    now: Optional[datetime] = None
) -> Dict:
    """Founder dashboard numbers for one startup"""
    own_interests = [i for i in interests if i.startup_id == startup.id]
    own_meetings = [m for m in meetings if m.startup_id == startup.id]
    own_analytics = [a for a in analytics if a.startup_id == startup.id]
    own_views = views_for_startup(startup.id, documents, document_views)

    return {
        "startup_id": startup.id,
        "total_interests": len(own_interests),
        "strong_interests": count_strong(own_interests),
        "conversion_rate": conversion_rate(own_interests),
        "unique_investors": len({i.investor_id for i in own_interests}),
        "total_meetings": len(own_meetings),
        "confirmed_meetings": sum(
            1 for m in own_meetings if m.status == MeetingStatus.CONFIRMED
        ),
        "document_views": len(own_views),
        "average_engagement": average_engagement(own_views),
        "recent_activity": len(recent_activity(own_analytics, now)),
        "momentum": get_momentum(momentum_scores, startup.id),
        "total_startups": len(momentum_scores),
    }


def admin_overview(
    interests: List[Interest],
    meetings: List[Meeting],
    momentum_scores: List[MomentumScore]
) -> Dict:
    """Command center headline numbers"""
    return {
        "total_interests": len(interests),
        "strong_interests": count_strong(interests),
        "total_meetings": len(meetings),
        "confirmed_meetings": sum(1 for m in meetings if m.status == MeetingStatus.CONFIRMED),
        "conversion_rate": conversion_rate(interests),
        "meeting_rate": meeting_rate(interests, meetings),
        "average_momentum_score": average_momentum_score(momentum_scores),
        "stuck_connections": len(find_stuck_connections(interests, meetings)),
    }


def startup_summaries(
    startups: List[Startup],
    interests: List[Interest],
    meetings: List[Meeting],
    momentum_scores: List[MomentumScore]
) -> List[Dict]:
    """Admin startups tab: per-startup engagement counts"""
    summaries = []
    for startup in startups:
        own_interests = [i for i in interests if i.startup_id == startup.id]
        momentum = get_momentum(momentum_scores, startup.id)
        summaries.append({
            "startup_id": startup.id,
            "name": startup.name,
            "industry": startup.industry,
            "stage": startup.stage,
            "interests": len(own_interests),
            "strong_interests": count_strong(own_interests),
            "meetings": sum(1 for m in meetings if m.startup_id == startup.id),
            "momentum_score": momentum.score if momentum else None,
            "rank": momentum.rank if momentum else None,
        })
    return summaries


def investor_summaries(
    investors: List[Investor],
    interests: List[Interest],
    meetings: List[Meeting]
) -> List[Dict]:
    """Admin investors tab: per-investor activity counts"""
    summaries = []
    for investor in investors:
        own_interests = [i for i in interests if i.investor_id == investor.id]
        summaries.append({
            "investor_id": investor.id,
            "name": investor.name,
            "firm": investor.firm,
            "interests": len(own_interests),
            "strong_interests": count_strong(own_interests),
            "meetings": sum(1 for m in meetings if m.investor_id == investor.id),
        })
    return summaries


def dashboard_stats(
    interests: List[Interest],
    meetings: List[Meeting],
    document_views: List[DocumentView],
    analytics: List[AnalyticsEvent]
) -> DashboardStats:
    return DashboardStats(
        total_views=sum(1 for a in analytics if a.event_type == EventType.PROFILE_VIEW),
        total_interests=len(interests),
        total_meetings=len(meetings),
        document_views=len(document_views),
        unique_investors=len({i.investor_id for i in interests}),
        conversion_rate=conversion_rate(interests),
        average_engagement=average_engagement(document_views),
    )
