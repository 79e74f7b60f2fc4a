from enum import Enum
from types import MappingProxyType
from typing import Any, Optional, Tuple

class Environment(str, Enum):
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"

class AnswerField(str, Enum):
    REQUIRE_VNET = "requireVnet"
    REQUIRE_MULTI_REGION = "requireMultiRegion"
    REQUIRE_SELF_HOSTED_GATEWAY = "requireSelfHostedGateway"
    REQUIRE_AI_GATEWAY = "requireAiGateway"
    REQUIRE_SLA = "requireSla"

class CapabilityField(str, Enum):
    VNET_SUPPORT = "vnetSupport"
    MULTI_REGION = "multiRegion"
    SELF_HOSTED_GATEWAY = "selfHostedGateway"
    AI_GATEWAY = "aiGateway"
    PRODUCTION_READY = "productionReady"

# Lower is cheaper; only consulted when requirements are met.
TIER_RANKS = MappingProxyType({
    "consumption": 10,
    "developer": 20,
    "basic": 30,
    "standard": 40,
    "premium": 50,
})
DEFAULT_TIER_RANK = 100

SECURITY_BASELINE_PACK = "baseline-security"
OBSERVABILITY_BASELINE_PACK = "baseline-observability"
AI_GATEWAY_PACK = "ai-gateway-baseline"
PRIVATE_BACKEND_PACK = "private-backend"
PUBLIC_API_PACK = "public-api"
BASELINE_PACK_IDS: Tuple[str, ...] = (SECURITY_BASELINE_PACK, OBSERVABILITY_BASELINE_PACK)

GAP_PRODUCTION_READY = "Requires production-ready tier"
GAP_PUBLISHED_SLA = "Requires published SLA"
REASON_FALLBACK = "Meets selected requirements"
REASON_PREFIX = "Meets requirement: "

DEPLOYMENT_HYBRID = "Hybrid with self-hosted gateway"
DEPLOYMENT_PRIVATE_BACKENDS = "Public gateway, private backends"
DEPLOYMENT_PUBLIC = "Public gateway, public backends"

_ENVIRONMENT_ALIASES = MappingProxyType({
    "dev": Environment.DEVELOPMENT,
    "prod": Environment.PRODUCTION,
})

def safe_parse_environment(value: Any) -> Tuple[Optional[Environment], Optional[str]]:
    if value is None or value == "":
        return None, None
    str_value = str(value).lower().strip()
    if str_value in _ENVIRONMENT_ALIASES:
        return _ENVIRONMENT_ALIASES[str_value], None
    try:
        return Environment(str_value), None
    except ValueError:
        return None, f"Invalid environment '{value}', ignoring environment checks"
