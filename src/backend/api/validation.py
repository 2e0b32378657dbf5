from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from adapters.workbook.parser import WorkbookParseError
from common.validation_engine.catalog import build_catalog_entries, build_default_catalog
from common.validation_engine.config import load_settings
from common.validation_engine.models import ValidationCategory
from pipelines.submission import validate_upload_bytes


router = APIRouter(prefix="/validation", tags=["validation"])


@router.get("/categories")
def list_categories() -> list[dict[str, Any]]:
    settings = load_settings()
    catalog = build_default_catalog(settings.field_aliases)
    return [entry.model_dump(mode="json") for entry in build_catalog_entries(catalog)]


@router.post("/upload")
def upload_submission(
    file: UploadFile = File(...),
    category: List[ValidationCategory] | None = Query(None),
):
    content = file.file.read()
    settings = load_settings()
    try:
        report = validate_upload_bytes(
            content,
            file.filename or "upload",
            settings,
            categories=category,
        )
    except WorkbookParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return report.model_dump(mode="json", by_alias=True)
