"""
Demo Day - Match Score Calculator
Banded compatibility score between a startup and an investor thesis
"""

from typing import Iterable, List, Optional

from .config import MATCH_THRESHOLD, TOP_MATCH_THRESHOLD
from .models import Compatibility, Interest, Investor, MatchScore, Startup


# Band weights (all-or-nothing, sum to 100)
WEIGHTS = {
    "sector": 40,      # Investor covers the startup's industry
    "stage": 30,       # Investor writes checks at this stage
    "check_size": 30,  # Funding goal inside the check-size range
}

VIEW_MODES = ("all", "matched", "interested")


def _check_size_fits(startup: Startup, investor: Investor) -> bool:
    """Funding goal within [min, max]; a missing or zero value is a non-match"""
    if not startup.funding_goal:
        return False
    if not investor.check_size_min or not investor.check_size_max:
        return False
    return investor.check_size_min <= startup.funding_goal <= investor.check_size_max


def explain_match(startup: Startup, investor: Investor) -> MatchScore:
    """
    Score a startup against an investor and record which bands passed.

    Each band contributes its full weight when its gate holds and nothing
    otherwise. No partial credit for adjacent sectors or stages.
    """
    compatibility = Compatibility()
    reasons = []

    if startup.industry in investor.sectors:
        compatibility.sector = WEIGHTS["sector"]
        reasons.append(f"+{WEIGHTS['sector']}: Invests in {startup.industry}")

    if startup.stage in investor.stages:
        compatibility.stage = WEIGHTS["stage"]
        reasons.append(f"+{WEIGHTS['stage']}: Invests at {startup.stage}")

    if _check_size_fits(startup, investor):
        compatibility.check_size = WEIGHTS["check_size"]
        reasons.append(
            f"+{WEIGHTS['check_size']}: ${startup.funding_goal:,} goal within "
            f"${investor.check_size_min:,}-${investor.check_size_max:,} checks"
        )

    score = compatibility.sector + compatibility.stage + compatibility.check_size

    return MatchScore(
        startup_id=startup.id,
        investor_id=investor.id,
        score=score,
        reasons=reasons,
        compatibility=compatibility,
    )


def calculate_match_score(startup: Startup, investor: Investor) -> int:
    """Compatibility score (0-100)"""
    return explain_match(startup, investor).score


def get_match_label(score: int) -> str:
    """Bucket a score for the investor portal"""
    if score >= TOP_MATCH_THRESHOLD:
        return "TOP MATCH"
    elif score >= MATCH_THRESHOLD:
        return "MATCH"
    else:
        return "LOW"


def score_to_color(score: int) -> str:
    """Get color for UI display"""
    if score >= TOP_MATCH_THRESHOLD:
        return "#4ADE80"  # Green
    elif score >= MATCH_THRESHOLD:
        return "#FACC15"  # Yellow
    else:
        return "#9CA3AF"  # Gray


def count_matches(
    startups: Iterable[Startup],
    investor: Investor,
    threshold: int = MATCH_THRESHOLD,
) -> int:
    return sum(1 for s in startups if calculate_match_score(s, investor) >= threshold)


def filter_startups(
    startups: List[Startup],
    investor: Investor,
    view: str = "all",
    interests: Optional[List[Interest]] = None,
) -> List[Startup]:
    """
    Investor portal view modes. Input order is kept; results are never
    sorted by score.
    """
    if view not in VIEW_MODES:
        raise ValueError(f"Unknown view mode: {view}")

    if view == "interested":
        interested_ids = {
            i.startup_id for i in (interests or []) if i.investor_id == investor.id
        }
        return [s for s in startups if s.id in interested_ids]

    if view == "matched":
        return [s for s in startups if calculate_match_score(s, investor) >= MATCH_THRESHOLD]

    return list(startups)
