import os
import sys

import pytest


# Ensure `src/backend` is on sys.path so imports like `import common...` work,
# even when pytest's rootdir is the repository root.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture
def make_row():
    def _make(**fields) -> dict[str, str]:
        # Keyword-friendly names: record_id -> "Record ID", lei -> "LEI".
        row: dict[str, str] = {}
        for key, value in fields.items():
            row[_header_for(key)] = value
        return row

    return _make


@pytest.fixture
def valid_row() -> dict[str, str]:
    return {
        "Record ID": "R-0001",
        "Entity Name": "Acme Financial Services",
        "Reference Date": "2024-12-31",
        "Template Code": "B_01.01",
        "DPM Version": "2024.1",
        "Data Point Code": "c0010",
        "Service Type": "S01",
        "Criticality": "High",
        "Start Date": "2023-01-01",
        "Termination Date": "2025-12-31",
        "LEI": "529900T8BM49AURSDO55",
        "EUID": "DE-HRB123456",
    }


_HEADERS = {
    "record_id": "Record ID",
    "entity_name": "Entity Name",
    "reference_date": "Reference Date",
    "template_code": "Template Code",
    "dpm_version": "DPM Version",
    "data_point_code": "Data Point Code",
    "service_type": "Service Type",
    "criticality": "Criticality",
    "start_date": "Start Date",
    "termination_date": "Termination Date",
    "lei": "LEI",
    "euid": "EUID",
}


def _header_for(key: str) -> str:
    return _HEADERS.get(key, key)
