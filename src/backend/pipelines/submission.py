from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from adapters.workbook.parser import parse_workbook, parse_workbook_bytes
from common.validation_engine.catalog import build_default_catalog
from common.validation_engine.config import ValidationSettings
from common.validation_engine.models import UploadData, ValidationCategory, ValidationReport
from common.validation_engine.runner import ValidationRunner


def build_runner(settings: Optional[ValidationSettings] = None) -> ValidationRunner:
    settings = settings or ValidationSettings()
    catalog = build_default_catalog(settings.field_aliases)
    return ValidationRunner(catalog, row_index_offset=settings.row_index_offset)


def validate_upload(
    upload: UploadData,
    settings: Optional[ValidationSettings] = None,
    *,
    categories: Optional[Iterable[ValidationCategory | str]] = None,
) -> ValidationReport:
    settings = settings or ValidationSettings()
    selected = list(categories) if categories else settings.categories
    return build_runner(settings).run(upload, categories=selected)


def validate_file(
    path: str | Path,
    settings: Optional[ValidationSettings] = None,
    *,
    categories: Optional[Iterable[ValidationCategory | str]] = None,
) -> ValidationReport:
    """Parse a submission file and evaluate it against the rule catalog."""
    settings = settings or ValidationSettings()
    upload = parse_workbook(path, sheet_name=settings.sheet_name)
    return validate_upload(upload, settings, categories=categories)


def validate_upload_bytes(
    content: bytes,
    file_name: str,
    settings: Optional[ValidationSettings] = None,
    *,
    categories: Optional[Iterable[ValidationCategory | str]] = None,
) -> ValidationReport:
    settings = settings or ValidationSettings()
    upload = parse_workbook_bytes(content, file_name, sheet_name=settings.sheet_name)
    return validate_upload(upload, settings, categories=categories)
