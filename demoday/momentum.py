"""
Demo Day - Momentum Aggregator
Ranks precomputed momentum records. Scores, trend and change are supplied
upstream and passed through as-is.
"""

import math
from typing import List, Optional

from .models import MomentumScore


def rank_momentum(scores: List[MomentumScore]) -> List[MomentumScore]:
    """
    Order by score descending and assign 1-based ranks.

    Ties keep their input order. Returns copies; inputs are not mutated.
    """
    ordered = sorted(scores, key=lambda ms: ms.score, reverse=True)
    return [
        ms.model_copy(update={"rank": position})
        for position, ms in enumerate(ordered, start=1)
    ]


def leaderboard(scores: List[MomentumScore], limit: int = 5) -> List[MomentumScore]:
    """Top ranked startups"""
    return rank_momentum(scores)[:limit]


def get_momentum(scores: List[MomentumScore], startup_id: str) -> Optional[MomentumScore]:
    """Ranked record for one startup, or None"""
    for ms in rank_momentum(scores):
        if ms.startup_id == startup_id:
            return ms
    return None


def average_momentum_score(scores: List[MomentumScore]) -> int:
    if not scores:
        return 0
    # half-up, like the dashboard display
    return math.floor(sum(ms.score for ms in scores) / len(scores) + 0.5)
