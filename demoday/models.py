"""
Demo Day - Data Models
Pydantic schemas for startups, investors and engagement records
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Literal
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    FOUNDER = "FOUNDER"
    INVESTOR = "INVESTOR"
    ADMIN = "ADMIN"


class InterestLevel(str, Enum):
    STRONGLY_INTERESTED = "STRONGLY_INTERESTED"
    WANT_TO_LEARN_MORE = "WANT_TO_LEARN_MORE"
    MAYBE_LATER = "MAYBE_LATER"


class MeetingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class EventType(str, Enum):
    """Analytics event kinds recorded per startup"""
    PROFILE_VIEW = "profile_view"
    DOCUMENT_VIEW = "document_view"
    INTEREST_EXPRESSED = "interest_expressed"
    MEETING_SCHEDULED = "meeting_scheduled"
    QR_SCAN = "qr_scan"


DocumentType = Literal["pitch_deck", "financials", "demo", "product_roadmap", "team_bios"]


class User(BaseModel):
    id: str
    email: str
    name: str
    role: UserRole
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Startup(BaseModel):
    """Company presenting at demo day"""
    id: str
    user_id: str
    name: str
    tagline: str
    description: str
    industry: str
    stage: str
    funding_goal: Optional[int] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    pitch_deck_url: Optional[str] = None
    demo_video_url: Optional[str] = None
    demo_day_batch: Optional[str] = None
    pitch_date: Optional[datetime] = None
    qr_code: Optional[str] = None
    founder_name: str
    founder_email: str
    founder_avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Investor(BaseModel):
    """Investor profile with stated thesis"""
    id: str
    user_id: str
    name: str
    email: str
    firm: Optional[str] = None
    title: Optional[str] = None
    investment_thesis: Optional[str] = None
    sectors: List[str] = []
    stages: List[str] = []
    check_size_min: Optional[int] = None
    check_size_max: Optional[int] = None
    portfolio_companies: List[str] = []
    linkedin_url: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Document(BaseModel):
    id: str
    startup_id: str
    title: str
    type: DocumentType
    file_url: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class DocumentView(BaseModel):
    id: str
    document_id: str
    viewer_id: str
    viewer_email: str
    viewer_name: str
    viewer_firm: Optional[str] = None
    duration: Optional[int] = None  # seconds
    pages_viewed: Optional[int] = None
    completion_rate: Optional[int] = None  # 0-100
    viewed_at: datetime = Field(default_factory=datetime.now)


class Interest(BaseModel):
    """Investor's expressed engagement with a startup"""
    id: str
    startup_id: str
    investor_id: str
    investor_name: str
    investor_firm: Optional[str] = None
    investor_avatar: Optional[str] = None
    level: InterestLevel
    notes: Optional[str] = None
    is_anonymous: bool = False
    scanned_via_qr: bool = False
    scan_timestamp: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Meeting(BaseModel):
    id: str
    startup_id: str
    startup_name: str
    investor_id: str
    investor_name: str
    investor_firm: Optional[str] = None
    title: str
    scheduled_at: datetime
    duration: int = 30  # minutes
    status: MeetingStatus = MeetingStatus.PENDING
    meeting_link: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class StartupUpdate(BaseModel):
    id: str
    startup_id: str
    title: str
    content: str
    metrics: Optional[Dict[str, Any]] = None  # mrr, users, growth, ...
    created_at: datetime = Field(default_factory=datetime.now)


class AnalyticsEvent(BaseModel):
    id: str
    startup_id: str
    investor_id: Optional[str] = None
    investor_name: Optional[str] = None
    event_type: EventType
    event_data: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class MomentumScore(BaseModel):
    """Engagement ranking record; score, trend and change come from upstream"""
    id: str
    startup_id: str
    score: int
    rank: Optional[int] = None
    profile_views: int = 0
    document_views: int = 0
    interests_count: int = 0
    meetings_count: int = 0
    last_calculated: datetime = Field(default_factory=datetime.now)
    trend: Trend = Trend.STABLE
    change: float = 0  # signed percentage


class Compatibility(BaseModel):
    """Points awarded per scoring band"""
    sector: int = 0
    stage: int = 0
    check_size: int = 0


class MatchScore(BaseModel):
    """Startup/investor compatibility breakdown"""
    startup_id: str
    investor_id: str
    score: int = Field(..., ge=0, le=100, description="0-100 compatibility")
    reasons: List[str] = []
    compatibility: Compatibility = Compatibility()


class DashboardStats(BaseModel):
    total_views: int = 0
    total_interests: int = 0
    total_meetings: int = 0
    document_views: int = 0
    unique_investors: int = 0
    conversion_rate: int = 0
    average_engagement: int = 0
