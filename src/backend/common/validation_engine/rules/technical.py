from __future__ import annotations

from typing import List, Optional

from ..fields import FieldAliases, candidate_names
from ..rule import ValidationRule, pattern_rule, required_field_rule


def build_rules(aliases: Optional[FieldAliases] = None) -> List[ValidationRule]:
    return [
        required_field_rule(
            "TECH-1",
            "Unique identifier is mandatory",
            candidate_names("Record ID", aliases),
        ),
        required_field_rule(
            "TECH-2",
            "Entity name is mandatory",
            candidate_names("Entity Name", aliases),
        ),
        pattern_rule(
            "TECH-3",
            "Reference date format",
            candidate_names("Reference Date", aliases),
            r"[0-9]{4}-[0-9]{2}-[0-9]{2}",
            "Reference Date must be formatted as YYYY-MM-DD",
        ),
    ]
