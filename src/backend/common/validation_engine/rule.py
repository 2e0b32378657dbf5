from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence, Union

from .fields import resolve_field
from .models import Row, Severity

RuleCheck = Callable[[Sequence[Row]], List[int]]
RuleMessage = Callable[[int], str]
RowPredicate = Callable[[Row], bool]

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class ValidationRule:
    """A categorized check over a full row set.

    ``check`` returns the 0-based indexes of failing rows in ascending order;
    ``message`` renders the finding text for a failure count.
    """

    rule_id: str
    name: str
    severity: Severity
    check: RuleCheck
    message: RuleMessage

    def __post_init__(self):
        if not self.rule_id:
            raise ValueError("Rule must define rule_id")


def failing_indexes(rows: Sequence[Row], predicate: RowPredicate) -> List[int]:
    return [idx for idx, row in enumerate(rows) if predicate(row)]


def row_rule(
    rule_id: str,
    name: str,
    predicate: RowPredicate,
    message: RuleMessage,
    severity: Severity = Severity.ERROR,
) -> ValidationRule:
    """Build a custom rule that flags every row for which ``predicate`` is true."""
    return ValidationRule(
        rule_id=rule_id,
        name=name,
        severity=severity,
        check=lambda rows: failing_indexes(rows, predicate),
        message=message,
    )


def required_field_rule(
    rule_id: str,
    name: str,
    fields: Sequence[str],
    severity: Severity = Severity.ERROR,
) -> ValidationRule:
    candidates = tuple(fields)
    label = " / ".join(candidates)
    return row_rule(
        rule_id,
        name,
        lambda row: not resolve_field(row, candidates),
        lambda count: f"{count} row(s) are missing {label}.",
        severity=severity,
    )


def pattern_rule(
    rule_id: str,
    name: str,
    fields: Sequence[str],
    pattern: Union[str, re.Pattern[str]],
    description: str,
    severity: Severity = Severity.ERROR,
) -> ValidationRule:
    # Empty values are a presence concern (see required_field_rule), never a format failure.
    candidates = tuple(fields)
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _violates(row: Row) -> bool:
        value = resolve_field(row, candidates)
        if not value:
            return False
        return compiled.fullmatch(value) is None

    return row_rule(
        rule_id,
        name,
        _violates,
        lambda count: f"{count} row(s) failed rule: {description}",
        severity=severity,
    )


def parse_iso_date(value: str) -> Optional[date]:
    """Strict ``YYYY-MM-DD`` parsing; anything else (including impossible dates) is None."""
    if not value or _ISO_DATE.fullmatch(value) is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
