"""
Demo Day - FastAPI Server
REST API for the dashboards + WebSocket live feed
"""

import asyncio
from datetime import datetime
from typing import List, Optional, Set
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .analytics import (
    admin_overview, dashboard_stats, event_type_counts, find_stuck_connections,
    founder_stats, hours_without_follow_up, investor_summaries, recent_activity,
    startup_heat, startup_summaries
)
from .config import (
    CORS_ORIGINS, FEED_EMIT_PROBABILITY, FEED_INTERVAL_SECONDS, FEED_MAX_EVENTS,
    FEED_SEED, MATCH_THRESHOLD, PORT, TOP_MATCH_THRESHOLD
)
from .events import LiveEvent, LiveEventType, RandomEventSource, make_event
from .models import (
    AnalyticsEvent, DashboardStats, DocumentView, Interest, InterestLevel,
    Meeting, MatchScore, MomentumScore, Startup, StartupUpdate
)
from .momentum import leaderboard, rank_momentum
from .scan import capture_interest, find_startup_by_qr
from .scorer import (
    count_matches, explain_match, filter_startups, get_match_label, score_to_color,
    VIEW_MODES
)
from .store import DemoDayStore


# WebSocket connections manager
class ConnectionManager:
    def __init__(self):
        self.active_connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.add(websocket)
        print(f"[WS] Client connected. Total: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket):
        self.active_connections.discard(websocket)
        print(f"[WS] Client disconnected. Total: {len(self.active_connections)}")

    async def broadcast(self, message: dict):
        """Send to all connected clients"""
        for connection in self.active_connections.copy():
            try:
                await connection.send_json(message)
            except Exception:
                self.active_connections.discard(connection)


manager = ConnectionManager()
store = DemoDayStore.from_mock_data()


async def publish(event: LiveEvent) -> LiveEvent:
    """Apply an event to the session and push it to live dashboards"""
    store.record(event)
    await manager.broadcast({
        "type": "live_event",
        "data": event.model_dump(mode="json")
    })
    return event


# Background task for simulated booth traffic
async def background_live_feed(source: RandomEventSource):
    """Emit at most one simulated event per interval"""
    while True:
        try:
            event = source.next_event()
            if event:
                await publish(event)
                print(f"[Feed] {event.type.value}: {event.investor_name} -> {event.startup_name}")
        except Exception as e:
            print(f"[Feed] Error: {e}")

        await asyncio.sleep(FEED_INTERVAL_SECONDS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """App lifecycle - start the simulated live feed"""
    source = RandomEventSource(
        store.startups,
        store.investors,
        seed=FEED_SEED,
        emit_probability=FEED_EMIT_PROBABILITY
    )
    task = asyncio.create_task(background_live_feed(source))
    print("[Server] Live feed simulator started")

    yield

    # Cleanup
    task.cancel()


app = FastAPI(
    title="Demo Day API",
    version="1.0.0",
    lifespan=lifespan
)

# CORS for the dashboard frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GalleryStartup(BaseModel):
    startup: Startup
    interests: int
    strong_interests: int
    heat: str


class ScoredStartup(BaseModel):
    startup: Startup
    match: MatchScore
    label: str
    color: str
    interest_level: Optional[InterestLevel] = None


class InterestRequest(BaseModel):
    startup_id: str
    level: str
    notes: Optional[str] = None


class ScanRequest(BaseModel):
    investor_id: str
    level: str
    notes: Optional[str] = None


class StuckConnection(BaseModel):
    interest: Interest
    startup_name: Optional[str] = None
    hours_without_follow_up: int


class FounderDashboard(BaseModel):
    startup: Startup
    stats: dict
    leaderboard: List[MomentumScore]
    interests: List[Interest]
    meetings: List[Meeting]
    document_views: List[DocumentView]
    recent_activity: List[AnalyticsEvent]
    updates: List[StartupUpdate]


def _startup_or_404(startup_id: str) -> Startup:
    startup = store.get_startup(startup_id)
    if not startup:
        raise HTTPException(status_code=404, detail="Startup not found")
    return startup


def _investor_or_404(investor_id: str):
    investor = store.get_investor(investor_id)
    if not investor:
        raise HTTPException(status_code=404, detail="Investor not found")
    return investor


def _parse_level(level: str) -> InterestLevel:
    try:
        return InterestLevel(level)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid interest level")


# === REST Endpoints ===

@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now().isoformat()}


# --- Live gallery ---

@app.get("/startups", response_model=List[GalleryStartup])
async def list_startups():
    """Gallery cards with live interest heat"""
    interests = store.get_interests()
    return [
        GalleryStartup(startup=s, **startup_heat(s.id, interests))
        for s in store.startups
    ]


@app.get("/startups/{startup_id}")
async def get_startup(startup_id: str):
    startup = _startup_or_404(startup_id)
    return {
        "startup": startup,
        "stats": startup_heat(startup_id, store.get_interests()),
        "interested_investors": store.get_interests(startup_id=startup_id),
    }


# --- Investor portal ---

@app.get("/investors/{investor_id}/startups", response_model=List[ScoredStartup])
async def list_investor_startups(investor_id: str, view: str = "all"):
    """Startups for the portal view mode (all, matched, interested)"""
    investor = _investor_or_404(investor_id)
    if view not in VIEW_MODES:
        raise HTTPException(status_code=400, detail="Invalid view mode")

    my_interests = store.get_interests(investor_id=investor_id)
    levels = {i.startup_id: i.level for i in my_interests}

    results = []
    for startup in filter_startups(store.startups, investor, view, my_interests):
        match = explain_match(startup, investor)
        results.append(ScoredStartup(
            startup=startup,
            match=match,
            label=get_match_label(match.score),
            color=score_to_color(match.score),
            interest_level=levels.get(startup.id),
        ))
    return results


@app.get("/investors/{investor_id}/summary")
async def investor_portal_summary(investor_id: str):
    """Header counts for the investor portal"""
    investor = _investor_or_404(investor_id)
    return {
        "investor": investor,
        "total_startups": len(store.startups),
        "matched": count_matches(store.startups, investor, MATCH_THRESHOLD),
        "top_matches": count_matches(store.startups, investor, TOP_MATCH_THRESHOLD),
        "interests": len(store.get_interests(investor_id=investor_id)),
        "meetings": store.get_meetings(investor_id=investor_id),
    }


@app.get("/investors/{investor_id}/matches/{startup_id}", response_model=MatchScore)
async def get_match(investor_id: str, startup_id: str):
    investor = _investor_or_404(investor_id)
    startup = _startup_or_404(startup_id)
    return explain_match(startup, investor)


@app.post("/investors/{investor_id}/interests", response_model=LiveEvent)
async def express_interest(investor_id: str, request: InterestRequest):
    """Create or update this investor's interest in a startup"""
    investor = _investor_or_404(investor_id)
    startup = _startup_or_404(request.startup_id)
    level = _parse_level(request.level)

    event = make_event(LiveEventType.INTEREST, startup, investor, level=level, notes=request.notes)
    return await publish(event)


# --- Founder dashboard ---

@app.get("/founders/{startup_id}/dashboard", response_model=FounderDashboard)
async def founder_dashboard(startup_id: str):
    startup = _startup_or_404(startup_id)
    document_views = store.get_document_views(startup_id)
    analytics = store.get_analytics(startup_id=startup_id)

    return FounderDashboard(
        startup=startup,
        stats=founder_stats(
            startup,
            store.get_interests(startup_id=startup_id),
            store.get_meetings(startup_id=startup_id),
            store.documents,
            store.document_views,
            analytics,
            store.momentum_scores,
        ),
        leaderboard=leaderboard(store.momentum_scores),
        interests=store.get_interests(startup_id=startup_id),
        meetings=store.get_meetings(startup_id=startup_id),
        document_views=document_views,
        recent_activity=sorted(
            recent_activity(analytics), key=lambda a: a.timestamp, reverse=True
        ),
        updates=store.get_updates(startup_id),
    )


# --- QR scan ---

@app.get("/scan/{qr_code}", response_model=Startup)
async def resolve_scan(qr_code: str):
    startup = find_startup_by_qr(store.startups, qr_code)
    if not startup:
        raise HTTPException(status_code=404, detail="Unknown QR code")
    return startup


@app.post("/scan/{qr_code}/interest", response_model=LiveEvent)
async def scan_interest(qr_code: str, request: ScanRequest):
    """Capture interest from a booth scan"""
    startup = find_startup_by_qr(store.startups, qr_code)
    if not startup:
        raise HTTPException(status_code=404, detail="Unknown QR code")
    investor = _investor_or_404(request.investor_id)
    level = _parse_level(request.level)

    return await publish(capture_interest(startup, investor, level, request.notes))


# --- Admin command center ---

@app.get("/admin/overview")
async def get_admin_overview():
    return admin_overview(store.get_interests(), store.get_meetings(), store.momentum_scores)


@app.get("/admin/stuck-connections", response_model=List[StuckConnection])
async def list_stuck_connections():
    """Interests that never turned into a meeting"""
    now = datetime.now()
    return [
        StuckConnection(
            interest=interest,
            startup_name=getattr(store.get_startup(interest.startup_id), "name", None),
            hours_without_follow_up=hours_without_follow_up(interest, now),
        )
        for interest in find_stuck_connections(store.get_interests(), store.get_meetings())
    ]


@app.get("/admin/momentum", response_model=List[MomentumScore])
async def list_momentum():
    return rank_momentum(store.momentum_scores)


@app.get("/admin/startups")
async def list_startup_summaries():
    return startup_summaries(
        store.startups, store.get_interests(), store.get_meetings(), store.momentum_scores
    )


@app.get("/admin/investors")
async def list_investor_summaries():
    return investor_summaries(store.investors, store.get_interests(), store.get_meetings())


@app.get("/admin/analytics")
async def get_admin_analytics():
    analytics = store.get_analytics()
    stats: DashboardStats = dashboard_stats(
        store.get_interests(),
        store.get_meetings(),
        store.document_views,
        analytics,
    )
    return {
        "stats": stats,
        "event_counts": event_type_counts(analytics),
    }


@app.get("/feed", response_model=List[LiveEvent])
async def get_feed(limit: int = Query(FEED_MAX_EVENTS, ge=0)):
    """Most recent live events, newest first"""
    return store.feed[:limit]


# === WebSocket Endpoint ===

@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """WebSocket for live dashboard events"""
    await manager.connect(websocket)
    try:
        while True:
            # Keep connection alive
            data = await websocket.receive_text()

            # Handle ping/pong
            if data == "ping":
                await websocket.send_text("pong")

    except WebSocketDisconnect:
        manager.disconnect(websocket)


def main():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
