from __future__ import annotations

from typing import List, Optional

from ..fields import FieldAliases, candidate_names
from ..rule import ValidationRule, pattern_rule, required_field_rule


def build_rules(aliases: Optional[FieldAliases] = None) -> List[ValidationRule]:
    return [
        required_field_rule(
            "DPM-T-1",
            "Template code is mandatory",
            candidate_names("Template Code", aliases),
        ),
        pattern_rule(
            "DPM-T-2",
            "Data point model version check",
            candidate_names("DPM Version", aliases),
            r"[0-9]{4}\.[0-9]+",
            "DPM Version must follow YYYY.N format",
        ),
        required_field_rule(
            "DPM-T-3",
            "Data point code is mandatory",
            candidate_names("Data Point Code", aliases),
        ),
    ]
