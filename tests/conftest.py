"""Shared fixtures for demo day tests."""

from datetime import datetime

import pytest

from demoday.models import (
    Interest, InterestLevel, Investor, Meeting, MomentumScore, Startup, Trend
)

NOW = datetime(2026, 4, 15, 12, 0, 0)


def make_startup(**overrides):
    fields = dict(
        id="s1",
        user_id="u1",
        name="NeuralFlow AI",
        tagline="Automation",
        description="Workflow automation",
        industry="AI",
        stage="Seed",
        funding_goal=2_000_000,
        qr_code="QR-S1",
        founder_name="Sarah Chen",
        founder_email="sarah@example.com",
        created_at=NOW,
    )
    fields.update(overrides)
    return Startup(**fields)


def make_investor(**overrides):
    fields = dict(
        id="i1",
        user_id="u10",
        name="Emily Rodriguez",
        email="emily@example.com",
        firm="Sequoia Capital",
        sectors=["AI"],
        stages=["Seed"],
        check_size_min=1_000_000,
        check_size_max=3_000_000,
        created_at=NOW,
    )
    fields.update(overrides)
    return Investor(**fields)


def make_interest(id, startup_id, investor_id, level=InterestLevel.WANT_TO_LEARN_MORE, created_at=NOW):
    return Interest(
        id=id,
        startup_id=startup_id,
        investor_id=investor_id,
        investor_name=f"Investor {investor_id}",
        level=level,
        created_at=created_at,
    )


def make_meeting(id, startup_id, investor_id, **overrides):
    fields = dict(
        id=id,
        startup_id=startup_id,
        startup_name=f"Startup {startup_id}",
        investor_id=investor_id,
        investor_name=f"Investor {investor_id}",
        title="Intro",
        scheduled_at=NOW,
        created_at=NOW,
    )
    fields.update(overrides)
    return Meeting(**fields)


def make_momentum(startup_id, score, **overrides):
    fields = dict(
        id=f"m-{startup_id}",
        startup_id=startup_id,
        score=score,
        trend=Trend.STABLE,
        change=0,
        last_calculated=NOW,
    )
    fields.update(overrides)
    return MomentumScore(**fields)


@pytest.fixture
def startup():
    return make_startup()


@pytest.fixture
def investor():
    return make_investor()
