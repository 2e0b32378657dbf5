from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .models import ValidationCategory
from .rule import ValidationRule


class RuleCatalog:
    """Read-only category -> ordered rules mapping.

    Built once and shared between evaluations; nothing can be registered
    after construction.
    """

    def __init__(self, rules_by_category: Mapping[ValidationCategory, Iterable[ValidationRule]]):
        by_category: Dict[ValidationCategory, Tuple[ValidationRule, ...]] = {}
        seen_ids: set[str] = set()

        for key, rules in rules_by_category.items():
            category = ValidationCategory(key)
            frozen = tuple(rules)
            for rule in frozen:
                if rule.rule_id in seen_ids:
                    raise ValueError(f"Duplicate rule_id registered: {rule.rule_id}")
                seen_ids.add(rule.rule_id)
            by_category[category] = frozen

        missing = [c.value for c in ValidationCategory if c not in by_category]
        if missing:
            raise ValueError(f"Rule catalog is missing categories: {', '.join(missing)}")

        ordered = {c: by_category[c] for c in ValidationCategory}
        self._rules: Mapping[ValidationCategory, Tuple[ValidationRule, ...]] = MappingProxyType(ordered)

    def rules_for(self, category: ValidationCategory | str) -> Tuple[ValidationRule, ...]:
        return self._rules[ValidationCategory(category)]

    def categories(self) -> List[ValidationCategory]:
        return list(self._rules.keys())

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())
