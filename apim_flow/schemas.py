from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from .context import TierCapability

@dataclass(frozen=True)
class TierEvaluation:
    tier: TierCapability
    eligible: bool
    gaps: Tuple[str, ...]
    reasons: Tuple[str, ...]
    rank: int

@dataclass(frozen=True)
class PolicyReference:
    category: str
    id: str
    defaults: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class PolicyPack:
    id: str
    name: str = ""
    description: str = ""
    # raw entries; validated one by one when the pack is resolved
    references: Tuple[Dict[str, Any], ...] = ()
    body: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class PolicyDefinition:
    category: str
    id: str
    name: str = ""
    version: Optional[str] = None
    documentation: Optional[str] = None
    parameters: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    templates: Dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.category, self.id)

    @property
    def inbound_template(self) -> Optional[str]:
        return self.templates.get("inbound") or None

    @property
    def outbound_template(self) -> Optional[str]:
        return self.templates.get("outbound") or None

    @property
    def on_error_template(self) -> Optional[str]:
        # "on-error" wins when a template carries both spellings
        return self.templates.get("on-error") or self.templates.get("onError") or None

@dataclass(frozen=True)
class ResolvedPolicy:
    pack_id: str
    definition: PolicyDefinition
    config: Dict[str, Any]
