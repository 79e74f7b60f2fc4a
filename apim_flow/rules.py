from typing import List, Sequence
from .constants import GAP_PRODUCTION_READY, GAP_PUBLISHED_SLA, REASON_FALLBACK, REASON_PREFIX
from .context import AnswerSet, RequirementRule, TierCapability
from .ranking import rank_for_tier_key
from .schemas import TierEvaluation

def evaluate_tier(answers: AnswerSet, tier: TierCapability, rules: Sequence[RequirementRule]) -> TierEvaluation:
    gaps: List[str] = []
    reasons: List[str] = []

    for rule in rules:
        if not answers.is_set(rule.answer_field):
            continue
        if tier.supports(rule.capability_field):
            reasons.append(f"{REASON_PREFIX}{rule.label}")
        else:
            gaps.append(rule.label)

    if answers.is_production:
        if not tier.production_ready:
            gaps.append(GAP_PRODUCTION_READY)
        if answers.require_sla and not tier.has_published_sla:
            gaps.append(GAP_PUBLISHED_SLA)

    if not gaps and not reasons:
        reasons.append(REASON_FALLBACK)

    return TierEvaluation(
        tier=tier,
        eligible=not gaps,
        gaps=tuple(gaps),
        reasons=tuple(reasons),
        rank=rank_for_tier_key(tier.key),
    )

def evaluate_tiers(answers: AnswerSet, tiers: Sequence[TierCapability], rules: Sequence[RequirementRule]) -> List[TierEvaluation]:
    return [evaluate_tier(answers, tier, rules) for tier in tiers]
