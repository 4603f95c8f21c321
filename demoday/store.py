"""
Demo Day - In-Memory Store
Holds the demo day collections for the session. Static records (startups,
investors, momentum, documents) never change; engagement records move
forward only through the event reducer. Nothing is persisted.
"""

from typing import List, Optional

from . import mock_data
from .analytics import views_for_startup
from .events import DashboardState, LiveEvent, apply_event
from .models import (
    AnalyticsEvent, Document, DocumentView, Interest, Investor, Meeting,
    MomentumScore, Startup, StartupUpdate
)


class DemoDayStore:
    def __init__(
        self,
        startups: List[Startup],
        investors: List[Investor],
        momentum_scores: List[MomentumScore],
        documents: Optional[List[Document]] = None,
        document_views: Optional[List[DocumentView]] = None,
        updates: Optional[List[StartupUpdate]] = None,
        state: Optional[DashboardState] = None
    ):
        self.startups = startups
        self.investors = investors
        self.momentum_scores = momentum_scores
        self.documents = documents or []
        self.document_views = document_views or []
        self.updates = updates or []
        self.state = state or DashboardState()

    @classmethod
    def from_mock_data(cls) -> "DemoDayStore":
        """Store seeded with the static demo day collections"""
        return cls(
            startups=list(mock_data.mock_startups),
            investors=list(mock_data.mock_investors),
            momentum_scores=list(mock_data.mock_momentum_scores),
            documents=list(mock_data.mock_documents),
            document_views=list(mock_data.mock_document_views),
            updates=list(mock_data.mock_updates),
            state=DashboardState(
                interests=list(mock_data.mock_interests),
                meetings=list(mock_data.mock_meetings),
                analytics=list(mock_data.mock_analytics),
            ),
        )

    # === Lookups ===

    def get_startup(self, startup_id: str) -> Optional[Startup]:
        return next((s for s in self.startups if s.id == startup_id), None)

    def get_investor(self, investor_id: str) -> Optional[Investor]:
        return next((i for i in self.investors if i.id == investor_id), None)

    def get_interests(
        self,
        startup_id: Optional[str] = None,
        investor_id: Optional[str] = None
    ) -> List[Interest]:
        """Interests with optional filtering"""
        return [
            i for i in self.state.interests
            if (startup_id is None or i.startup_id == startup_id)
            and (investor_id is None or i.investor_id == investor_id)
        ]

    def get_meetings(
        self,
        startup_id: Optional[str] = None,
        investor_id: Optional[str] = None
    ) -> List[Meeting]:
        return [
            m for m in self.state.meetings
            if (startup_id is None or m.startup_id == startup_id)
            and (investor_id is None or m.investor_id == investor_id)
        ]

    def get_analytics(self, startup_id: Optional[str] = None) -> List[AnalyticsEvent]:
        return [
            a for a in self.state.analytics
            if startup_id is None or a.startup_id == startup_id
        ]

    def get_document_views(self, startup_id: str) -> List[DocumentView]:
        return views_for_startup(startup_id, self.documents, self.document_views)

    def get_updates(self, startup_id: str) -> List[StartupUpdate]:
        return [u for u in self.updates if u.startup_id == startup_id]

    @property
    def feed(self) -> List[LiveEvent]:
        return self.state.feed

    # === Writes ===

    def record(self, event: LiveEvent) -> LiveEvent:
        """Advance the session state by one event"""
        self.state = apply_event(self.state, event)
        return event
