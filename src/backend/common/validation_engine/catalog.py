from __future__ import annotations

import argparse
import json
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel

from .fields import FieldAliases
from .models import Severity, ValidationCategory
from .registry import RuleCatalog
from .rules import RULE_MODULES


class RuleCatalogEntry(BaseModel):
    category: ValidationCategory
    position: int
    rule_id: str
    name: str
    severity: Severity


def build_default_catalog(field_aliases: Optional[FieldAliases] = None) -> RuleCatalog:
    """Assemble the built-in rules, applying configured header synonyms once."""
    return RuleCatalog(
        {category: module.build_rules(field_aliases) for category, module in RULE_MODULES.items()}
    )


def build_catalog_entries(catalog: Optional[RuleCatalog] = None) -> List[RuleCatalogEntry]:
    catalog = catalog or build_default_catalog()
    entries: List[RuleCatalogEntry] = []
    for category in catalog.categories():
        for position, rule in enumerate(catalog.rules_for(category), start=1):
            entries.append(
                RuleCatalogEntry(
                    category=category,
                    position=position,
                    rule_id=rule.rule_id,
                    name=rule.name,
                    severity=rule.severity,
                )
            )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the built-in validation rule catalog.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump(mode="json") for e in build_catalog_entries()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
