"""
Shared fixtures for the flow kernel tests.
"""

from pathlib import Path

import pytest

from apim_flow.catalog import InMemoryCatalog, JsonDirectoryCatalog
from apim_flow.constants import AnswerField, CapabilityField
from apim_flow.context import RequirementRule, TierCapability
from apim_flow.schemas import PolicyDefinition, PolicyPack

REPO_CATALOG = Path(__file__).resolve().parent.parent / "catalog"


@pytest.fixture
def repo_catalog():
    """The sample catalog shipped with the repository."""
    return JsonDirectoryCatalog(REPO_CATALOG)


@pytest.fixture
def requirement_rules():
    return [
        RequirementRule(AnswerField.REQUIRE_VNET, CapabilityField.VNET_SUPPORT, "Private networking (VNet) support"),
        RequirementRule(AnswerField.REQUIRE_MULTI_REGION, CapabilityField.MULTI_REGION, "Multi-region deployment"),
        RequirementRule(AnswerField.REQUIRE_SELF_HOSTED_GATEWAY, CapabilityField.SELF_HOSTED_GATEWAY, "Self-hosted gateway"),
        RequirementRule(AnswerField.REQUIRE_AI_GATEWAY, CapabilityField.AI_GATEWAY, "AI gateway capabilities"),
    ]


@pytest.fixture
def tiers():
    return [
        TierCapability(key="premium", name="Premium", tier="Premium", vnet_support=True, multi_region=True,
                       self_hosted_gateway=True, ai_gateway=True, production_ready=True, sla="99.99%"),
        TierCapability(key="developer", name="Developer", tier="Developer", vnet_support=True,
                       self_hosted_gateway=True, ai_gateway=True),
        TierCapability(key="consumption", name="Consumption", tier="Consumption", ai_gateway=True,
                       production_ready=True, sla="99.95%"),
    ]


@pytest.fixture
def policy_definitions():
    return [
        PolicyDefinition(
            category="traffic",
            id="rate-limit",
            name="Rate limit",
            parameters={"calls": {"default": 100}, "renewalPeriod": {"default": 60}},
            templates={"inbound": '<rate-limit calls="{{calls}}" renewal-period="{{renewalPeriod}}" />'},
        ),
        PolicyDefinition(
            category="observability",
            id="trace",
            name="Trace",
            parameters={"source": {"default": "gateway"}},
            templates={
                "inbound": '<trace source="{{source}}" />',
                "outbound": '<trace source="{{source}}" severity="verbose" />',
            },
        ),
    ]


@pytest.fixture
def policy_packs():
    return [
        PolicyPack(id="baseline-security", references=({"category": "traffic", "id": "rate-limit"},)),
        PolicyPack(id="baseline-observability", references=({"category": "observability", "id": "trace"},)),
        PolicyPack(
            id="public-api",
            references=(
                {"category": "traffic", "id": "rate-limit", "defaults": {"calls": 10}},
                {"category": "traffic"},
                {"category": "traffic", "id": "does-not-exist"},
            ),
        ),
    ]


@pytest.fixture
def in_memory_catalog(tiers, requirement_rules, policy_packs, policy_definitions):
    return InMemoryCatalog(tiers=tiers, rules=requirement_rules, packs=policy_packs, policies=policy_definitions)
