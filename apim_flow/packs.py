from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence
from .constants import (
    AI_GATEWAY_PACK,
    BASELINE_PACK_IDS,
    PRIVATE_BACKEND_PACK,
    PUBLIC_API_PACK,
)
from .catalog import CatalogSnapshot
from .context import AnswerSet
from .errors import ValidationError
from .schemas import PolicyDefinition, PolicyPack, ResolvedPolicy
from .validation import parse_policy_reference

def select_pack_ids(answers: AnswerSet) -> List[str]:
    pack_ids = list(BASELINE_PACK_IDS)
    if answers.require_ai_gateway:
        pack_ids.append(AI_GATEWAY_PACK)
    if answers.require_vnet or answers.require_self_hosted_gateway:
        pack_ids.append(PRIVATE_BACKEND_PACK)
    else:
        pack_ids.append(PUBLIC_API_PACK)
    return pack_ids

def resolve_parameters(definition: PolicyDefinition, pack_defaults: Mapping[str, Any]) -> Dict[str, Any]:
    resolved: Dict[str, Any] = {}
    for name, declaration in definition.parameters.items():
        if name in pack_defaults:
            resolved[name] = pack_defaults[name]
        elif "default" in declaration:
            resolved[name] = declaration["default"]
    # packs may carry parameters the definition does not declare
    for name, value in pack_defaults.items():
        if name not in resolved:
            resolved[name] = value
    return resolved

@dataclass
class PackResolution:
    packs: List[PolicyPack] = field(default_factory=list)
    policies: List[ResolvedPolicy] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

def resolve_pack_policies(pack_ids: Sequence[str], snapshot: CatalogSnapshot) -> PackResolution:
    result = PackResolution()

    for pack_id in pack_ids:
        pack = snapshot.get_pack(pack_id)
        if pack is None:
            result.warnings.append(f"Policy pack '{pack_id}' not found in catalog.")
            continue
        result.packs.append(pack)

        for raw in pack.references:
            try:
                reference = parse_policy_reference(pack.id, raw)
            except ValidationError as e:
                result.warnings.append(e.message)
                continue

            definition = snapshot.get_policy(reference.category, reference.id)
            if definition is None:
                result.warnings.append(f"Missing policy template: {reference.category}/{reference.id}")
                continue

            result.policies.append(ResolvedPolicy(
                pack_id=pack.id,
                definition=definition,
                config=resolve_parameters(definition, reference.defaults),
            ))

    return result
