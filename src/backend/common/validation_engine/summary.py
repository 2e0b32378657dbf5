from __future__ import annotations

from typing import Iterable, Mapping, Union

from .models import ValidationCategory, ValidationResult, ValidationSummary

ResultSet = Union[Mapping[ValidationCategory, ValidationResult], Iterable[ValidationResult]]


def summarize(results: ResultSet) -> ValidationSummary:
    """Totals across whichever categories have been evaluated so far."""
    values = results.values() if isinstance(results, Mapping) else results

    summary = ValidationSummary()
    for result in values:
        summary.issues += len(result.issues)
        summary.passed += result.passed_rules
        summary.total += result.total_rules
    return summary
