from typing import Any, Dict, List, Optional, Sequence
from .constants import AnswerField, DEPLOYMENT_HYBRID, DEPLOYMENT_PRIVATE_BACKENDS, DEPLOYMENT_PUBLIC
from .context import AnswerSet
from .schemas import ResolvedPolicy, TierEvaluation

BASE_CHECKLIST = (
    "Confirm naming, tagging, and environment strategy.",
    "Define API onboarding workflow (OpenAPI import, CI/CD, versioning approach).",
    "Define logging/metrics targets and data handling constraints.",
)
VNET_CHECKLIST_ITEM = "Define VNet, routing, and DNS requirements for inbound and outbound connectivity."
SELF_HOSTED_CHECKLIST_ITEM = "Define self-hosted gateway placement, update strategy, and monitoring."
AI_GATEWAY_CHECKLIST_ITEM = "Define token governance, metric collection, and safety/caching approach for LLM APIs."

def serialize_answers(answers: AnswerSet) -> Dict[str, Any]:
    echoed: Dict[str, Any] = {}
    if answers.environment is not None:
        echoed["environment"] = answers.environment.value
    for field in AnswerField:
        value = answers.get(field)
        if value is not None:
            echoed[field.value] = value
    return echoed

def recommend_deployment_model(answers: AnswerSet) -> str:
    if answers.require_self_hosted_gateway:
        return DEPLOYMENT_HYBRID
    if answers.require_vnet:
        return DEPLOYMENT_PRIVATE_BACKENDS
    return DEPLOYMENT_PUBLIC

def build_checklist(answers: AnswerSet) -> List[str]:
    items = list(BASE_CHECKLIST)
    if answers.require_vnet:
        items.append(VNET_CHECKLIST_ITEM)
    if answers.require_self_hosted_gateway:
        items.append(SELF_HOSTED_CHECKLIST_ITEM)
    if answers.require_ai_gateway:
        items.append(AI_GATEWAY_CHECKLIST_ITEM)
    return items

def checklist_to_markdown(items: Sequence[str]) -> str:
    return "\n".join(f"- [ ] {item}" for item in items)

def serialize_recommendation(evaluation: Optional[TierEvaluation]) -> Optional[Dict[str, Any]]:
    if evaluation is None:
        return None
    tier = evaluation.tier
    return {
        "key": tier.key,
        "name": tier.name,
        "tier": tier.tier,
        "version": tier.version,
        "sla": tier.sla,
        "reasons": list(evaluation.reasons),
    }

def serialize_evaluation(evaluation: TierEvaluation) -> Dict[str, Any]:
    tier = evaluation.tier
    return {
        "key": tier.key,
        "name": tier.name,
        "tier": tier.tier,
        "rank": evaluation.rank,
        "eligible": evaluation.eligible,
        "gaps": list(evaluation.gaps),
        "reasons": list(evaluation.reasons),
        "capabilities": tier.capability_flags(),
    }

def serialize_resolved_policy(item: ResolvedPolicy) -> Dict[str, Any]:
    return {
        "packId": item.pack_id,
        "category": item.definition.category,
        "id": item.definition.id,
        "name": item.definition.name,
        "documentation": item.definition.documentation,
        "config": dict(item.config),
    }
