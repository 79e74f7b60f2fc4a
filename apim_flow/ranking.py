from typing import Iterable, List, Optional
from .constants import DEFAULT_TIER_RANK, TIER_RANKS
from .schemas import TierEvaluation

def rank_for_tier_key(key: str) -> int:
    return TIER_RANKS.get(key, DEFAULT_TIER_RANK)

def rank_evaluations(evaluations: Iterable[TierEvaluation]) -> List[TierEvaluation]:
    # sorted() is stable: equal ranks keep catalog order
    return sorted(evaluations, key=lambda e: e.rank)

def recommend(ranked: Iterable[TierEvaluation]) -> Optional[TierEvaluation]:
    return next((e for e in ranked if e.eligible), None)
