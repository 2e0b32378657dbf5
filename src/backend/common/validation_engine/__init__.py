"""Rule evaluation engine for register-of-information submissions.

This package contains only domain logic:
- Inputs are normalized rows (header -> trimmed text) produced by ingestion.
- No file, HTTP, or rendering code lives here.
"""

from .catalog import build_default_catalog
from .config import ValidationSettings, load_settings
from .fields import resolve_field
from .models import (
    Row,
    Severity,
    UploadData,
    ValidationCategory,
    ValidationIssue,
    ValidationReport,
    ValidationResult,
    ValidationSummary,
)
from .registry import RuleCatalog
from .rule import ValidationRule, pattern_rule, required_field_rule, row_rule
from .runner import REPORT_ROW_OFFSET, ValidationRunner
from .summary import summarize
