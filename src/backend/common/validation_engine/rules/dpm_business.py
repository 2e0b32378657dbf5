from __future__ import annotations

from typing import List, Optional, Sequence

from ..fields import FieldAliases, candidate_names, resolve_field
from ..models import Row, Severity
from ..rule import ValidationRule, parse_iso_date, required_field_rule, row_rule

CRITICALITY_LEVELS = frozenset({"low", "medium", "high"})


def _invalid_criticality(fields: Sequence[str]):
    def _check(row: Row) -> bool:
        value = resolve_field(row, fields)
        if not value:
            return False
        return value.lower() not in CRITICALITY_LEVELS

    return _check


def _terminates_before_start(start_fields: Sequence[str], end_fields: Sequence[str]):
    # Rows with a missing or non-ISO date are out of scope here; date format is not this rule's concern.
    def _check(row: Row) -> bool:
        start = parse_iso_date(resolve_field(row, start_fields))
        end = parse_iso_date(resolve_field(row, end_fields))
        if start is None or end is None:
            return False
        return end < start

    return _check


def build_rules(aliases: Optional[FieldAliases] = None) -> List[ValidationRule]:
    return [
        required_field_rule(
            "DPM-B-1",
            "Service type is mandatory",
            candidate_names("Service Type", aliases),
        ),
        row_rule(
            "DPM-B-2",
            "Criticality rating must be Low/Medium/High",
            _invalid_criticality(tuple(candidate_names("Criticality", aliases))),
            lambda count: f"{count} row(s) have an invalid Criticality value (expected Low/Medium/High).",
        ),
        row_rule(
            "DPM-B-3",
            "Termination date cannot be before start date",
            _terminates_before_start(
                tuple(candidate_names("Start Date", aliases)),
                tuple(candidate_names("Termination Date", aliases)),
            ),
            lambda count: f"{count} row(s) have Termination Date earlier than Start Date.",
            severity=Severity.WARNING,
        ),
    ]
