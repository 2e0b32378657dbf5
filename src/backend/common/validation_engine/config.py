from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .models import ValidationCategory

CONFIG_PATH_ENV = "VALIDATION_CONFIG_PATH"


class SettingsError(ValueError):
    pass


class ValidationSettings(BaseModel):
    """Run-level settings for a submission validation.

    Example YAML:

        row_index_offset: 2
        sheet_name: B_01.01
        categories: ["Technical checks", "LEI-EUID checks"]
        field_aliases:
          Record ID: ["Record Identifier", "c0010"]
    """

    # Report index = 0-based data row index + offset (header occupies line 1).
    row_index_offset: int = Field(default=2, ge=0)
    categories: List[ValidationCategory] = Field(default_factory=lambda: list(ValidationCategory))
    # Defaults to the first sheet of the workbook.
    sheet_name: Optional[str] = None
    # Logical field -> extra header names accepted for it (case-insensitive).
    field_aliases: Dict[str, List[str]] = Field(default_factory=dict)


def load_settings(path: str | Path | None = None) -> ValidationSettings:
    if path is None:
        env_path = os.getenv(CONFIG_PATH_ENV, "").strip()
        if not env_path:
            return ValidationSettings()
        path = env_path

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise SettingsError(f"Validation config not found: {cfg_path}")

    text = cfg_path.read_text(encoding="utf-8")
    try:
        if cfg_path.suffix.lower() == ".json":
            raw = json.loads(text) if text.strip() else {}
        else:
            raw = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SettingsError(f"Could not parse validation config {cfg_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise SettingsError(f"Validation config {cfg_path} must contain a mapping at the top level.")

    try:
        return ValidationSettings.model_validate(raw)
    except ValidationError as exc:
        raise SettingsError(f"Invalid validation config {cfg_path}: {exc}") from exc
