from __future__ import annotations

from typing import List, Optional

from ..fields import FieldAliases, candidate_names, resolve_field
from ..rule import ValidationRule, pattern_rule, row_rule


def build_rules(aliases: Optional[FieldAliases] = None) -> List[ValidationRule]:
    lei_fields = tuple(candidate_names("LEI", aliases))
    euid_fields = tuple(candidate_names("EUID", aliases))
    return [
        pattern_rule(
            "LEI-1",
            "LEI structure check",
            lei_fields,
            r"[A-Z0-9]{20}",
            "LEI must be a 20-character alphanumeric code",
        ),
        pattern_rule(
            "LEI-2",
            "EUID structure check",
            euid_fields,
            r"[A-Z]{2}-[A-Z0-9]{2,32}",
            "EUID must follow CC-IDENTIFIER format",
        ),
        row_rule(
            "LEI-3",
            "At least one of LEI or EUID must be present",
            lambda row: not (resolve_field(row, lei_fields) or resolve_field(row, euid_fields)),
            lambda count: f"{count} row(s) are missing both LEI and EUID values.",
        ),
    ]
