from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# One normalized submission record: header -> trimmed text ("" means absent).
Row = Dict[str, str]


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationCategory(str, Enum):
    # Declaration order is the canonical category (tab) order.
    TECHNICAL = "Technical checks"
    DPM_TECHNICAL = "DPM Technical checks"
    DPM_BUSINESS = "DPM Business validation rules"
    LEI_EUID = "LEI-EUID checks"


class _ConsumerModel(BaseModel):
    """Base for models serialized to consumers with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationIssue(_ConsumerModel):
    rule_id: str
    rule_name: str
    severity: Severity
    message: str
    row_indexes: List[int] = Field(default_factory=list)


class ValidationResult(_ConsumerModel):
    category: ValidationCategory
    issues: List[ValidationIssue] = Field(default_factory=list)
    passed_rules: int = 0
    total_rules: int = 0


class ValidationSummary(_ConsumerModel):
    issues: int = 0
    passed: int = 0
    total: int = 0


class UploadData(_ConsumerModel):
    file_name: str
    sheet_name: str
    columns: List[str] = Field(default_factory=list)
    rows: List[Row] = Field(default_factory=list)


class ValidationReport(_ConsumerModel):
    file_name: str
    sheet_name: str
    columns: List[str] = Field(default_factory=list)
    row_count: int = 0
    generated_at: datetime

    results: List[ValidationResult] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)
