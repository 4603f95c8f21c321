"""
Demo Day - Mock Data
Static collections served by the dashboards (Spring 2026 batch)
"""

from datetime import datetime, timedelta

from .models import (
    AnalyticsEvent, Document, DocumentView, EventType, Interest, InterestLevel,
    Investor, Meeting, MeetingStatus, MomentumScore, Startup, StartupUpdate, Trend
)

BATCH = "Spring 2026"

_NOW = datetime.now()


def _ago(**kwargs) -> datetime:
    return _NOW - timedelta(**kwargs)


def _ahead(**kwargs) -> datetime:
    return _NOW + timedelta(**kwargs)


mock_startups = [
    Startup(
        id="startup-1", user_id="user-1", name="NeuralFlow AI",
        tagline="Workflow automation that learns from your team",
        description="NeuralFlow watches repetitive back-office work and turns it into reliable automations.",
        industry="AI/ML", stage="Seed", funding_goal=2_000_000,
        website="https://neuralflow.ai", demo_day_batch=BATCH,
        pitch_date=_ahead(hours=2), qr_code="DEMO-NEURALFLOW",
        founder_name="Sarah Chen", founder_email="sarah@neuralflow.ai",
        created_at=_ago(days=30),
    ),
    Startup(
        id="startup-2", user_id="user-2", name="GreenGrid",
        tagline="Grid-scale storage scheduling for utilities",
        description="Forecasts demand and dispatches battery storage to cut peak costs.",
        industry="Climate Tech", stage="Series A", funding_goal=8_000_000,
        website="https://greengrid.energy", demo_day_batch=BATCH,
        qr_code="DEMO-GREENGRID",
        founder_name="Marcus Johnson", founder_email="marcus@greengrid.energy",
        created_at=_ago(days=28),
    ),
    Startup(
        id="startup-3", user_id="user-3", name="MediSync",
        tagline="Shared care plans between clinics and patients",
        description="HIPAA-ready care coordination for independent practices.",
        industry="Healthcare", stage="Seed", funding_goal=1_500_000,
        website="https://medisync.health", demo_day_batch=BATCH,
        qr_code="DEMO-MEDISYNC",
        founder_name="Priya Patel", founder_email="priya@medisync.health",
        created_at=_ago(days=25),
    ),
    Startup(
        id="startup-4", user_id="user-4", name="PayLoop",
        tagline="Embedded payouts for marketplaces",
        description="One API for instant seller payouts across 40 countries.",
        industry="Fintech", stage="Pre-Seed", funding_goal=750_000,
        website="https://payloop.io", demo_day_batch=BATCH,
        qr_code="DEMO-PAYLOOP",
        founder_name="Diego Alvarez", founder_email="diego@payloop.io",
        created_at=_ago(days=21),
    ),
    Startup(
        id="startup-5", user_id="user-5", name="CodeMentor",
        tagline="Pair programming tutor for bootcamps",
        description="AI tutor that reviews student code and explains mistakes in context.",
        industry="EdTech", stage="Seed", funding_goal=None,
        website="https://codementor.dev", demo_day_batch=BATCH,
        qr_code="DEMO-CODEMENTOR",
        founder_name="Aisha Okafor", founder_email="aisha@codementor.dev",
        created_at=_ago(days=20),
    ),
    Startup(
        id="startup-6", user_id="user-6", name="ShieldOps",
        tagline="Cloud misconfiguration detection in minutes",
        description="Agentless scanning of cloud accounts with auto-remediation playbooks.",
        industry="Cybersecurity", stage="Series A", funding_goal=5_000_000,
        website="https://shieldops.sec", demo_day_batch=BATCH,
        qr_code="DEMO-SHIELDOPS",
        founder_name="Tom Becker", founder_email="tom@shieldops.sec",
        created_at=_ago(days=18),
    ),
]

mock_investors = [
    Investor(
        id="investor-1", user_id="user-10", name="Emily Rodriguez",
        email="emily@sequoia.example", firm="Sequoia Capital", title="Partner",
        investment_thesis="AI-native software for the enterprise",
        sectors=["AI/ML", "Fintech", "Cybersecurity"], stages=["Seed", "Series A"],
        check_size_min=1_000_000, check_size_max=5_000_000,
        portfolio_companies=["DataPilot", "Ledgerly"],
        created_at=_ago(days=60),
    ),
    Investor(
        id="investor-2", user_id="user-11", name="David Kim",
        email="david@a16z.example", firm="Andreessen Horowitz", title="General Partner",
        investment_thesis="Climate and infrastructure",
        sectors=["Climate Tech", "AI/ML"], stages=["Series A", "Series B"],
        check_size_min=5_000_000, check_size_max=20_000_000,
        portfolio_companies=["VoltStack"],
        created_at=_ago(days=55),
    ),
    Investor(
        id="investor-3", user_id="user-12", name="Rachel Green",
        email="rachel@angel.example", firm=None, title="Angel Investor",
        investment_thesis="Early bets on healthcare and education founders",
        sectors=["Healthcare", "EdTech"], stages=["Pre-Seed", "Seed"],
        check_size_min=25_000, check_size_max=250_000,
        portfolio_companies=[],
        created_at=_ago(days=50),
    ),
    Investor(
        id="investor-4", user_id="user-13", name="James Wilson",
        email="james@accel.example", firm="Accel", title="Principal",
        investment_thesis="Fintech infrastructure",
        sectors=["Fintech"], stages=["Pre-Seed", "Seed"],
        check_size_min=500_000, check_size_max=2_000_000,
        portfolio_companies=["Paystream"],
        created_at=_ago(days=45),
    ),
]

mock_interests = [
    Interest(
        id="interest-1", startup_id="startup-1", investor_id="investor-1",
        investor_name="Emily Rodriguez", investor_firm="Sequoia Capital",
        level=InterestLevel.STRONGLY_INTERESTED, notes="Strong team, want to see the pipeline",
        scanned_via_qr=True, scan_timestamp=_ago(hours=5), created_at=_ago(hours=5),
    ),
    Interest(
        id="interest-2", startup_id="startup-1", investor_id="investor-2",
        investor_name="David Kim", investor_firm="Andreessen Horowitz",
        level=InterestLevel.WANT_TO_LEARN_MORE,
        created_at=_ago(hours=30),
    ),
    Interest(
        id="interest-3", startup_id="startup-2", investor_id="investor-2",
        investor_name="David Kim", investor_firm="Andreessen Horowitz",
        level=InterestLevel.STRONGLY_INTERESTED,
        scanned_via_qr=True, scan_timestamp=_ago(hours=3), created_at=_ago(hours=3),
    ),
    Interest(
        id="interest-4", startup_id="startup-3", investor_id="investor-3",
        investor_name="Rachel Green",
        level=InterestLevel.STRONGLY_INTERESTED,
        created_at=_ago(hours=48),
    ),
    Interest(
        id="interest-5", startup_id="startup-4", investor_id="investor-4",
        investor_name="James Wilson", investor_firm="Accel",
        level=InterestLevel.MAYBE_LATER,
        created_at=_ago(hours=12),
    ),
    Interest(
        id="interest-6", startup_id="startup-6", investor_id="investor-1",
        investor_name="Emily Rodriguez", investor_firm="Sequoia Capital",
        level=InterestLevel.WANT_TO_LEARN_MORE, is_anonymous=True,
        created_at=_ago(hours=20),
    ),
]

mock_meetings = [
    Meeting(
        id="meeting-1", startup_id="startup-1", startup_name="NeuralFlow AI",
        investor_id="investor-1", investor_name="Emily Rodriguez",
        investor_firm="Sequoia Capital", title="NeuralFlow AI x Sequoia",
        scheduled_at=_ahead(days=2), duration=45, status=MeetingStatus.CONFIRMED,
        meeting_link="https://meet.example.com/neuralflow-sequoia",
        created_at=_ago(hours=4),
    ),
    Meeting(
        id="meeting-2", startup_id="startup-2", startup_name="GreenGrid",
        investor_id="investor-2", investor_name="David Kim",
        investor_firm="Andreessen Horowitz", title="GreenGrid x a16z",
        scheduled_at=_ahead(days=3), duration=30, status=MeetingStatus.PENDING,
        created_at=_ago(hours=2),
    ),
]

mock_momentum_scores = [
    MomentumScore(
        id="momentum-1", startup_id="startup-1", score=92, rank=1,
        profile_views=342, document_views=128, interests_count=24, meetings_count=8,
        trend=Trend.UP, change=15.0,
    ),
    MomentumScore(
        id="momentum-2", startup_id="startup-2", score=87, rank=2,
        profile_views=298, document_views=102, interests_count=19, meetings_count=6,
        trend=Trend.UP, change=8.5,
    ),
    MomentumScore(
        id="momentum-3", startup_id="startup-3", score=78, rank=3,
        profile_views=245, document_views=87, interests_count=15, meetings_count=4,
        trend=Trend.STABLE, change=0.0,
    ),
    MomentumScore(
        id="momentum-4", startup_id="startup-6", score=71, rank=4,
        profile_views=201, document_views=66, interests_count=11, meetings_count=3,
        trend=Trend.UP, change=4.2,
    ),
    MomentumScore(
        id="momentum-5", startup_id="startup-4", score=65, rank=5,
        profile_views=188, document_views=54, interests_count=9, meetings_count=2,
        trend=Trend.DOWN, change=-3.1,
    ),
    MomentumScore(
        id="momentum-6", startup_id="startup-5", score=58, rank=6,
        profile_views=150, document_views=40, interests_count=6, meetings_count=1,
        trend=Trend.DOWN, change=-6.0,
    ),
]

mock_documents = [
    Document(
        id="doc-1", startup_id="startup-1", title="NeuralFlow Pitch Deck",
        type="pitch_deck", file_url="/files/neuralflow-deck.pdf",
        file_size=4_200_000, mime_type="application/pdf", created_at=_ago(days=10),
    ),
    Document(
        id="doc-2", startup_id="startup-1", title="NeuralFlow Financial Model",
        type="financials", file_url="/files/neuralflow-financials.xlsx",
        mime_type="application/vnd.ms-excel", created_at=_ago(days=9),
    ),
    Document(
        id="doc-3", startup_id="startup-2", title="GreenGrid Pitch Deck",
        type="pitch_deck", file_url="/files/greengrid-deck.pdf",
        mime_type="application/pdf", created_at=_ago(days=8),
    ),
]

mock_document_views = [
    DocumentView(
        id="dv-1", document_id="doc-1", viewer_id="investor-1",
        viewer_email="emily@sequoia.example", viewer_name="Emily Rodriguez",
        viewer_firm="Sequoia Capital", duration=420, pages_viewed=18,
        completion_rate=95, viewed_at=_ago(hours=6),
    ),
    DocumentView(
        id="dv-2", document_id="doc-2", viewer_id="investor-1",
        viewer_email="emily@sequoia.example", viewer_name="Emily Rodriguez",
        viewer_firm="Sequoia Capital", duration=300, pages_viewed=6,
        completion_rate=80, viewed_at=_ago(hours=5),
    ),
    DocumentView(
        id="dv-3", document_id="doc-1", viewer_id="investor-2",
        viewer_email="david@a16z.example", viewer_name="David Kim",
        viewer_firm="Andreessen Horowitz", duration=180, pages_viewed=9,
        completion_rate=50, viewed_at=_ago(hours=28),
    ),
    DocumentView(
        id="dv-4", document_id="doc-3", viewer_id="investor-2",
        viewer_email="david@a16z.example", viewer_name="David Kim",
        viewer_firm="Andreessen Horowitz", duration=240, pages_viewed=14,
        completion_rate=None, viewed_at=_ago(hours=4),
    ),
]

mock_updates = [
    StartupUpdate(
        id="update-1", startup_id="startup-1", title="Crossed $50k MRR",
        content="Three new enterprise pilots converted this month.",
        metrics={"mrr": 50_000, "users": 1_200, "growth": 22},
        created_at=_ago(days=2),
    ),
]

mock_analytics = [
    AnalyticsEvent(
        id="analytics-1", startup_id="startup-1", investor_id="investor-1",
        investor_name="Emily Rodriguez", event_type=EventType.PROFILE_VIEW,
        timestamp=_ago(hours=6),
    ),
    AnalyticsEvent(
        id="analytics-2", startup_id="startup-1", investor_id="investor-1",
        investor_name="Emily Rodriguez", event_type=EventType.DOCUMENT_VIEW,
        event_data={"document_id": "doc-1"}, timestamp=_ago(hours=6),
    ),
    AnalyticsEvent(
        id="analytics-3", startup_id="startup-1", investor_id="investor-1",
        investor_name="Emily Rodriguez", event_type=EventType.QR_SCAN,
        timestamp=_ago(hours=5),
    ),
    AnalyticsEvent(
        id="analytics-4", startup_id="startup-2", investor_id="investor-2",
        investor_name="David Kim", event_type=EventType.MEETING_SCHEDULED,
        timestamp=_ago(hours=2),
    ),
    AnalyticsEvent(
        id="analytics-5", startup_id="startup-1", investor_id="investor-2",
        investor_name="David Kim", event_type=EventType.PROFILE_VIEW,
        timestamp=_ago(days=9),
    ),
]
