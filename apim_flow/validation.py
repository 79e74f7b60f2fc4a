from typing import Any, Dict, Optional, Union
from .constants import AnswerField, CapabilityField
from .context import RequirementRule, TierCapability
from .errors import ValidationError
from .schemas import PolicyDefinition, PolicyPack, PolicyReference

TEMPLATE_SECTIONS = ("inbound", "outbound", "on-error", "onError")

def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}

def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value else None

def parse_requirement_rule(raw: Any) -> Optional[RequirementRule]:
    """Returns None for entries missing an identifier or naming an unknown answer field.

    An unknown capability is kept as a plain string; no tier supports it.
    """
    entry = _as_dict(raw)
    answer_id = str(entry.get("id") or "")
    capability_id = str(entry.get("capabilityField") or "")
    if not answer_id or not capability_id:
        return None
    try:
        answer_field = AnswerField(answer_id)
    except ValueError:
        return None
    try:
        capability_field: Union[CapabilityField, str] = CapabilityField(capability_id)
    except ValueError:
        capability_field = capability_id
    return RequirementRule(
        answer_field=answer_field,
        capability_field=capability_field,
        label=str(entry.get("label") or answer_id),
    )

def parse_tier_capability(key: str, raw: Dict[str, Any]) -> Optional[TierCapability]:
    first = raw
    for list_key in ("skus", "tiers"):
        if list_key in raw:
            entries = raw[list_key]
            first = entries[0] if isinstance(entries, list) and entries else None
            break
    if not isinstance(first, dict):
        return None

    return TierCapability(
        key=key,
        name=str(first.get("name") or raw.get("name") or key),
        tier=str(first.get("tier") or first.get("skuTier") or ""),
        version=_optional_str(first.get("version")),
        vnet_support=bool(first.get("vnetSupport")),
        multi_region=bool(first.get("multiRegion")),
        self_hosted_gateway=bool(first.get("selfHostedGateway")),
        ai_gateway=bool(first.get("aiGateway")),
        production_ready=bool(first.get("productionReady")),
        sla=_optional_str(first.get("sla")),
        description=_optional_str(first.get("description")),
    )

def parse_policy_pack(raw: Dict[str, Any], fallback_id: str) -> PolicyPack:
    policies = raw.get("policies")
    return PolicyPack(
        id=str(raw.get("id") or fallback_id),
        name=str(raw.get("name") or ""),
        description=str(raw.get("description") or ""),
        references=tuple(policies) if isinstance(policies, list) else (),
        body=raw,
    )

def parse_policy_reference(pack_id: str, raw: Any) -> PolicyReference:
    entry = _as_dict(raw)
    policy_id = str(entry.get("id") or "")
    category = str(entry.get("category") or "")
    if not policy_id or not category:
        raise ValidationError(
            f"Policy pack '{pack_id}' contains an invalid policy reference.",
            details={"pack_id": pack_id},
        )
    return PolicyReference(category=category, id=policy_id, defaults=_as_dict(entry.get("defaults")))

def parse_policy_definition(category: str, policy_id: str, raw: Dict[str, Any]) -> PolicyDefinition:
    templates = _as_dict(raw.get("xmlTemplate") or raw.get("xml_template"))
    return PolicyDefinition(
        category=category,
        id=policy_id,
        name=str(raw.get("name") or policy_id),
        version=_optional_str(raw.get("version")),
        documentation=_optional_str(raw.get("documentation")),
        parameters={
            name: _as_dict(declaration)
            for name, declaration in _as_dict(raw.get("parameters")).items()
        },
        templates={
            section: str(templates[section])
            for section in TEMPLATE_SECTIONS
            if templates.get(section)
        },
    )
