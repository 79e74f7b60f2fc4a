import time
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .catalog import CatalogSource
from .constants import safe_parse_environment
from .context import ANSWER_ATTRIBUTES, AnswerSet
from .exports import (
    build_checklist,
    checklist_to_markdown,
    recommend_deployment_model,
    serialize_answers,
    serialize_evaluation,
    serialize_recommendation,
    serialize_resolved_policy,
)
from .logging_config import get_logger
from .packs import resolve_pack_policies, select_pack_ids
from .policy_bundle import assemble_bundle
from .ranking import rank_evaluations, recommend
from .rules import evaluate_tiers

logger = get_logger("apim_flow.kernel")

def parse_answers(payload: Mapping[str, Any]) -> Tuple[AnswerSet, List[str]]:
    """Build an AnswerSet from camelCase wire fields; unusable values become warnings."""
    warnings: List[str] = []
    environment, parse_warning = safe_parse_environment(payload.get("environment"))
    if parse_warning:
        warnings.append(parse_warning)

    flags: Dict[str, Optional[bool]] = {}
    for field, attribute in ANSWER_ATTRIBUTES.items():
        value = payload.get(field.value)
        flags[attribute] = None if value is None else bool(value)

    return AnswerSet(environment=environment, **flags), warnings

class FlowKernel:
    def __init__(self, catalog: CatalogSource):
        self.catalog = catalog

    def evaluate_flow(self, answers: AnswerSet, warnings: Sequence[str] = ()) -> Dict[str, Any]:
        start = time.time()

        # one snapshot per call; nothing is shared with other evaluations
        snapshot = self.catalog.load_snapshot()

        ranked = rank_evaluations(evaluate_tiers(answers, snapshot.tiers, snapshot.rules))
        recommended = recommend(ranked)

        pack_ids = select_pack_ids(answers)
        resolution = resolve_pack_policies(pack_ids, snapshot)
        bundle = assemble_bundle(resolution.policies)

        checklist = build_checklist(answers)
        all_warnings = list(warnings) + resolution.warnings

        logger.info(
            "Flow evaluated",
            pack_ids=pack_ids,
            recommended_tier=recommended.tier.key if recommended else None,
            tiers=len(ranked),
            resolved_policies=len(resolution.policies),
            warnings=len(all_warnings),
            latency_ms=int((time.time() - start) * 1000),
        )

        return {
            "input": serialize_answers(answers),
            "deploymentModel": recommend_deployment_model(answers),
            "recommendedTier": serialize_recommendation(recommended),
            "tierEvaluations": [serialize_evaluation(e) for e in ranked],
            "policyPackIds": pack_ids,
            "policyPacks": [pack.body for pack in resolution.packs],
            "checklist": checklist,
            "exports": {
                "checklistMarkdown": checklist_to_markdown(checklist),
                "policyXml": bundle.to_xml(),
                "resolvedPolicies": [serialize_resolved_policy(r) for r in resolution.policies],
            },
            "warnings": all_warnings,
        }
