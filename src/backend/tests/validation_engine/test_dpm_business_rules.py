import pytest

from common.validation_engine.models import Severity
from common.validation_engine.rules import dpm_business


@pytest.fixture
def rules():
    return {rule.rule_id: rule for rule in dpm_business.build_rules()}


def test_dpm_business_rule_order_and_severity(rules):
    assert list(rules) == ["DPM-B-1", "DPM-B-2", "DPM-B-3"]
    assert rules["DPM-B-1"].severity == Severity.ERROR
    assert rules["DPM-B-2"].severity == Severity.ERROR
    assert rules["DPM-B-3"].severity == Severity.WARNING


def test_service_type_is_mandatory(rules, make_row):
    rows = [make_row(service_type="S01"), make_row(service_type="")]
    assert rules["DPM-B-1"].check(rows) == [1]


@pytest.mark.parametrize(
    "value,flagged",
    [
        ("HIGH", False),
        ("low", False),
        ("Medium", False),
        ("", False),
        ("urgent", True),
        ("Very High", True),
    ],
)
def test_criticality_enum_is_case_insensitive(rules, make_row, value, flagged):
    failed = rules["DPM-B-2"].check([make_row(criticality=value)])
    assert failed == ([0] if flagged else [])


def test_criticality_message(rules):
    assert rules["DPM-B-2"].message(4) == (
        "4 row(s) have an invalid Criticality value (expected Low/Medium/High)."
    )


def test_termination_before_start_is_flagged(rules, make_row):
    rows = [
        make_row(start_date="2024-01-10", termination_date="2024-01-01"),
        make_row(start_date="2024-01-01", termination_date="2024-01-01"),
        make_row(start_date="2024-01-01", termination_date="2024-06-30"),
        make_row(start_date="2025-03-01", termination_date="2024-12-31"),
    ]
    assert rules["DPM-B-3"].check(rows) == [0, 3]
    assert rules["DPM-B-3"].message(2) == "2 row(s) have Termination Date earlier than Start Date."


@pytest.mark.parametrize(
    "start,end",
    [
        ("", "2024-01-01"),
        ("2024-01-10", ""),
        ("not a date", "2024-01-01"),
        ("2024-01-10", "01/01/2024"),
        ("2024-02-30", "2024-01-01"),
    ],
)
def test_termination_rule_skips_missing_or_malformed_dates(rules, make_row, start, end):
    assert rules["DPM-B-3"].check([make_row(start_date=start, termination_date=end)]) == []
