from common.validation_engine.fields import candidate_names, resolve_field


def test_resolve_field_matches_case_insensitively():
    row = {"record id": "R-1", "Entity Name": "Acme"}
    assert resolve_field(row, ["Record ID"]) == "R-1"
    assert resolve_field(row, ["ENTITY NAME"]) == "Acme"


def test_resolve_field_uses_first_matching_candidate():
    row = {"Record Identifier": "alias", "Record ID": "primary"}
    assert resolve_field(row, ["Record ID", "Record Identifier"]) == "primary"
    assert resolve_field(row, ["Missing", "Record Identifier"]) == "alias"


def test_resolve_field_requires_exact_name():
    row = {"Record ID (c0010)": "R-1", "Record": "R-2"}
    assert resolve_field(row, ["Record ID"]) == ""


def test_resolve_field_returns_empty_for_missing_or_empty_values():
    assert resolve_field({}, ["LEI"]) == ""
    assert resolve_field({"LEI": ""}, ["LEI"]) == ""
    assert resolve_field({"LEI": "X"}, []) == ""


def test_resolve_field_does_not_fall_through_on_empty_hit():
    row = {"LEI": "", "Legal Entity Identifier": "529900T8BM49AURSDO55"}
    assert resolve_field(row, ["LEI", "Legal Entity Identifier"]) == ""


def test_candidate_names_appends_aliases_without_duplicates():
    aliases = {"LEI": ["Legal Entity Identifier", "lei", " "]}
    assert candidate_names("LEI", aliases) == ["LEI", "Legal Entity Identifier"]
    assert candidate_names("EUID", aliases) == ["EUID"]
    assert candidate_names("EUID") == ["EUID"]
