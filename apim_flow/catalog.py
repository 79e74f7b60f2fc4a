"""
Catalog sources for tier capabilities, requirement rules, policy packs and
policy definitions.

The evaluation core only ever sees a CatalogSnapshot. Where the records come
from (a directory of JSON files, embedded data) is the source's concern.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from .context import RequirementRule, TierCapability
from .errors import CatalogReadError
from .logging_config import get_logger
from .schemas import PolicyDefinition, PolicyPack
from .validation import (
    parse_policy_definition,
    parse_policy_pack,
    parse_requirement_rule,
    parse_tier_capability,
)

logger = get_logger("apim_flow.catalog")

TIERS_DIR = "tiers"
RULES_FILE = Path("rules") / "tier-requirements.json"
PACKS_DIR = "policy-packs"
POLICIES_DIR = "policies"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only catalog contents for a single evaluation."""

    tiers: Tuple[TierCapability, ...] = ()
    rules: Tuple[RequirementRule, ...] = ()
    packs: Mapping[str, PolicyPack] = field(default_factory=lambda: MappingProxyType({}))
    policies: Mapping[Tuple[str, str], PolicyDefinition] = field(default_factory=lambda: MappingProxyType({}))

    def get_pack(self, pack_id: str) -> Optional[PolicyPack]:
        return self.packs.get(pack_id)

    def get_policy(self, category: str, policy_id: str) -> Optional[PolicyDefinition]:
        return self.policies.get((category, policy_id))


class CatalogSource(Protocol):
    def load_snapshot(self) -> CatalogSnapshot:
        ...


def build_snapshot(
    tiers: Iterable[TierCapability] = (),
    rules: Iterable[RequirementRule] = (),
    packs: Iterable[PolicyPack] = (),
    policies: Iterable[PolicyDefinition] = (),
) -> CatalogSnapshot:
    return CatalogSnapshot(
        tiers=tuple(tiers),
        rules=tuple(rules),
        packs=MappingProxyType({pack.id: pack for pack in packs}),
        policies=MappingProxyType({policy.key: policy for policy in policies}),
    )


class InMemoryCatalog:
    """Catalog backed by records that are already materialized."""

    def __init__(
        self,
        tiers: Iterable[TierCapability] = (),
        rules: Iterable[RequirementRule] = (),
        packs: Iterable[PolicyPack] = (),
        policies: Iterable[PolicyDefinition] = (),
    ):
        self._snapshot = build_snapshot(tiers, rules, packs, policies)

    def load_snapshot(self) -> CatalogSnapshot:
        return self._snapshot


class JsonDirectoryCatalog:
    """Catalog read from a directory of JSON files.

    Layout::

        tiers/<key>.json
        rules/tier-requirements.json
        policy-packs/<id>.json
        policies/<category>/<id>.json

    Missing files or directories mean "no records". Files that exist but do
    not hold a JSON object raise CatalogReadError.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def load_snapshot(self) -> CatalogSnapshot:
        snapshot = build_snapshot(
            tiers=self._load_tiers(),
            rules=self._load_rules(),
            packs=self._load_packs(),
            policies=self._load_policies(),
        )
        logger.debug(
            "Catalog loaded",
            root=str(self.root),
            tiers=len(snapshot.tiers),
            rules=len(snapshot.rules),
            packs=len(snapshot.packs),
            policies=len(snapshot.policies),
        )
        return snapshot

    def _load_tiers(self) -> List[TierCapability]:
        tiers = []
        for path in self._json_files(self.root / TIERS_DIR):
            tier = parse_tier_capability(path.stem, _read_json_object(path))
            if tier is None:
                logger.debug("Tier file has no tier entry", path=str(path))
                continue
            tiers.append(tier)
        return tiers

    def _load_rules(self) -> List[RequirementRule]:
        path = self.root / RULES_FILE
        if not path.is_file():
            logger.info("Requirement rules file not found", path=str(path))
            return []

        entries = _read_json_object(path).get("requirements")
        rules = []
        for entry in entries if isinstance(entries, list) else []:
            rule = parse_requirement_rule(entry)
            if rule is None:
                logger.debug("Dropping incomplete requirement rule", entry=entry)
                continue
            rules.append(rule)
        return rules

    def _load_packs(self) -> List[PolicyPack]:
        return [
            parse_policy_pack(_read_json_object(path), fallback_id=path.stem)
            for path in self._json_files(self.root / PACKS_DIR)
        ]

    def _load_policies(self) -> List[PolicyDefinition]:
        policies_dir = self.root / POLICIES_DIR
        if not policies_dir.is_dir():
            logger.info("Policy directory not found", path=str(policies_dir))
            return []

        policies = []
        for category_dir in sorted(p for p in policies_dir.iterdir() if p.is_dir()):
            for path in self._json_files(category_dir):
                policies.append(
                    parse_policy_definition(category_dir.name, path.stem, _read_json_object(path))
                )
        return policies

    def _json_files(self, directory: Path) -> List[Path]:
        if not directory.is_dir():
            logger.info("Catalog directory not found", path=str(directory))
            return []
        return sorted(p for p in directory.iterdir() if p.suffix == ".json" and p.is_file())


def _read_json_object(path: Path) -> Dict[str, Any]:
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogReadError(f"Unable to read catalog file: {path.name}", details={"path": str(path)}) from e
    if not isinstance(parsed, dict):
        raise CatalogReadError(f"Catalog file is not a JSON object: {path.name}", details={"path": str(path)})
    return parsed
