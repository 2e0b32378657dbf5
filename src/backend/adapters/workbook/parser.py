from __future__ import annotations

import csv
import io
import logging
import math
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, BinaryIO, List, Optional, Sequence

import pandas as pd

from common.validation_engine.models import Row, UploadData

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}
CSV_SUFFIXES = {".csv"}


class WorkbookParseError(ValueError):
    pass


def parse_workbook(path: str | Path, *, sheet_name: Optional[str] = None) -> UploadData:
    """Read the first (or named) sheet of a submission file into normalized rows."""
    file_path = Path(path)
    if not file_path.exists():
        raise WorkbookParseError(f"Submission file not found: {file_path}")
    with file_path.open("rb") as handle:
        return _parse(handle, file_path.name, sheet_name=sheet_name)


def parse_workbook_bytes(
    content: bytes,
    file_name: str,
    *,
    sheet_name: Optional[str] = None,
) -> UploadData:
    if not content:
        raise WorkbookParseError(f"The uploaded file '{file_name}' is empty.")
    return _parse(io.BytesIO(content), file_name, sheet_name=sheet_name)


def normalize_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if value is pd.NaT:
        return ""
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def build_rows(columns: Sequence[str], raw_rows: Sequence[Sequence[Any]]) -> List[Row]:
    """Zip header names onto raw cell rows; unnamed columns are dropped."""
    rows: List[Row] = []
    for raw in raw_rows:
        record: Row = {}
        for idx, column in enumerate(columns):
            if not column:
                continue
            record[column] = normalize_cell(raw[idx]) if idx < len(raw) else ""
        rows.append(record)
    return rows


def _parse(handle: BinaryIO, file_name: str, *, sheet_name: Optional[str]) -> UploadData:
    suffix = Path(file_name).suffix.lower()
    if suffix in CSV_SUFFIXES:
        resolved_sheet = sheet_name or Path(file_name).stem
        grid = _read_csv(handle, file_name)
    elif suffix in EXCEL_SUFFIXES:
        resolved_sheet, grid = _read_excel(handle, file_name, sheet_name)
    else:
        raise WorkbookParseError(
            f"Unsupported file type '{suffix or file_name}' (expected .xlsx, .xlsm, .xls or .csv)."
        )

    grid = [row for row in grid if not _is_blank(row)]
    if not grid:
        raise WorkbookParseError(f"The sheet '{resolved_sheet}' is empty.")

    columns = [normalize_cell(c) for c in grid[0]]
    rows = build_rows(columns, grid[1:])
    logger.info(
        "Parsed %s (sheet %s): %d column(s), %d data row(s)",
        file_name,
        resolved_sheet,
        len([c for c in columns if c]),
        len(rows),
    )
    return UploadData(file_name=file_name, sheet_name=resolved_sheet, columns=columns, rows=rows)


def _read_excel(
    handle: BinaryIO,
    file_name: str,
    sheet_name: Optional[str],
) -> tuple[str, List[List[Any]]]:
    try:
        xls = pd.ExcelFile(handle)
    except Exception as exc:
        raise WorkbookParseError(f"Could not read workbook '{file_name}': {exc}") from exc

    names = [str(n) for n in xls.sheet_names]
    if not names:
        raise WorkbookParseError("The uploaded workbook does not contain any sheet.")
    if sheet_name is None:
        target = names[0]
    elif sheet_name in names:
        target = sheet_name
    else:
        raise WorkbookParseError(
            f"Sheet '{sheet_name}' not found in '{file_name}' (available: {', '.join(names)})."
        )

    # Literal "NA"/"N/A"/"None" cell text is data, not a missing value.
    df = xls.parse(target, header=None, dtype=object, keep_default_na=False, na_values=[])
    grid = [[None if _is_missing(v) else v for v in row] for row in df.itertuples(index=False, name=None)]
    return target, grid


def _read_csv(handle: BinaryIO, file_name: str) -> List[List[Any]]:
    try:
        text = handle.read().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise WorkbookParseError(f"Could not decode '{file_name}' as UTF-8: {exc}") from exc
    return [list(row) for row in csv.reader(io.StringIO(text))]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _is_blank(row: Sequence[Any]) -> bool:
    return all(normalize_cell(v) == "" for v in row)
