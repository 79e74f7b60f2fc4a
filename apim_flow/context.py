from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union
from .constants import AnswerField, CapabilityField, Environment

# wire field -> AnswerSet attribute
ANSWER_ATTRIBUTES: Dict[AnswerField, str] = {
    AnswerField.REQUIRE_VNET: "require_vnet",
    AnswerField.REQUIRE_MULTI_REGION: "require_multi_region",
    AnswerField.REQUIRE_SELF_HOSTED_GATEWAY: "require_self_hosted_gateway",
    AnswerField.REQUIRE_AI_GATEWAY: "require_ai_gateway",
    AnswerField.REQUIRE_SLA: "require_sla",
}

@dataclass(frozen=True)
class AnswerSet:
    environment: Optional[Environment] = None
    require_vnet: Optional[bool] = None
    require_multi_region: Optional[bool] = None
    require_self_hosted_gateway: Optional[bool] = None
    require_ai_gateway: Optional[bool] = None
    require_sla: Optional[bool] = None

    def get(self, field: AnswerField) -> Optional[bool]:
        return getattr(self, ANSWER_ATTRIBUTES[field])

    def is_set(self, field: AnswerField) -> bool:
        return bool(self.get(field))

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

@dataclass(frozen=True)
class TierCapability:
    key: str
    name: str
    tier: str = ""
    version: Optional[str] = None
    vnet_support: bool = False
    multi_region: bool = False
    self_hosted_gateway: bool = False
    ai_gateway: bool = False
    production_ready: bool = False
    sla: Optional[str] = None
    description: Optional[str] = None

    def supports(self, field: Union[CapabilityField, str]) -> bool:
        # capabilities the catalog names but this model does not carry read as unsupported
        getter = _CAPABILITY_GETTERS.get(field)
        return bool(getter(self)) if getter else False

    @property
    def has_published_sla(self) -> bool:
        return bool(self.sla and self.sla.strip())

    def capability_flags(self) -> Dict[str, bool]:
        return {field.value: self.supports(field) for field in CapabilityField}

_CAPABILITY_GETTERS: Dict[CapabilityField, Callable[[TierCapability], bool]] = {
    CapabilityField.VNET_SUPPORT: lambda t: t.vnet_support,
    CapabilityField.MULTI_REGION: lambda t: t.multi_region,
    CapabilityField.SELF_HOSTED_GATEWAY: lambda t: t.self_hosted_gateway,
    CapabilityField.AI_GATEWAY: lambda t: t.ai_gateway,
    CapabilityField.PRODUCTION_READY: lambda t: t.production_ready,
}

@dataclass(frozen=True)
class RequirementRule:
    answer_field: AnswerField
    capability_field: Union[CapabilityField, str]
    label: str

    @property
    def capability_id(self) -> str:
        field = self.capability_field
        return field.value if isinstance(field, CapabilityField) else field
