from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from .catalog import build_default_catalog
from .models import (
    Row,
    UploadData,
    ValidationCategory,
    ValidationIssue,
    ValidationReport,
    ValidationResult,
)
from .registry import RuleCatalog
from .summary import summarize

logger = logging.getLogger(__name__)

# 1-based line numbers plus the header line.
REPORT_ROW_OFFSET = 2


class ValidationRunner:
    def __init__(self, catalog: Optional[RuleCatalog] = None, *, row_index_offset: int = REPORT_ROW_OFFSET):
        if row_index_offset < 0:
            raise ValueError("row_index_offset must be >= 0")
        self._catalog = catalog if catalog is not None else build_default_catalog()
        self._offset = row_index_offset

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    def evaluate(self, category: ValidationCategory | str, rows: Sequence[Row]) -> ValidationResult:
        category = ValidationCategory(category)
        rules = self._catalog.rules_for(category)

        issues: List[ValidationIssue] = []
        passed = 0
        for rule in rules:
            failed = rule.check(rows)
            if not failed:
                passed += 1
                continue
            logger.debug("%s flagged %d row(s) in %s", rule.rule_id, len(failed), category.value)
            issues.append(
                ValidationIssue(
                    rule_id=rule.rule_id,
                    rule_name=rule.name,
                    severity=rule.severity,
                    message=rule.message(len(failed)),
                    row_indexes=[idx + self._offset for idx in failed],
                )
            )

        logger.info(
            "%s: %d/%d rules passed over %d row(s)",
            category.value,
            passed,
            len(rules),
            len(rows),
        )
        return ValidationResult(
            category=category,
            issues=issues,
            passed_rules=passed,
            total_rules=len(rules),
        )

    def evaluate_all(
        self,
        rows: Sequence[Row],
        *,
        categories: Optional[Iterable[ValidationCategory | str]] = None,
    ) -> Dict[ValidationCategory, ValidationResult]:
        selected = self._select(categories)
        return {category: self.evaluate(category, rows) for category in selected}

    def run(
        self,
        upload: UploadData,
        *,
        categories: Optional[Iterable[ValidationCategory | str]] = None,
    ) -> ValidationReport:
        results = self.evaluate_all(upload.rows, categories=categories)
        return ValidationReport(
            file_name=upload.file_name,
            sheet_name=upload.sheet_name,
            columns=list(upload.columns),
            row_count=len(upload.rows),
            generated_at=datetime.now(timezone.utc),
            results=list(results.values()),
            summary=summarize(results),
        )

    def _select(self, categories: Optional[Iterable[ValidationCategory | str]]) -> List[ValidationCategory]:
        known = self._catalog.categories()
        if categories is None:
            return known
        wanted = {ValidationCategory(c) for c in categories}
        return [c for c in known if c in wanted]
