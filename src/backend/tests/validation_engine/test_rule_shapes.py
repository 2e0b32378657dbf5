import re

import pytest

from common.validation_engine.models import Severity
from common.validation_engine.rule import (
    ValidationRule,
    parse_iso_date,
    pattern_rule,
    required_field_rule,
    row_rule,
)


def test_required_field_rule_flags_only_empty_values():
    rule = required_field_rule("R-1", "Name required", ["Name", "Full Name"])
    rows = [{"Name": "A"}, {"Name": ""}, {}, {"full name": "B"}, {"Other": "x"}]

    assert rule.check(rows) == [1, 2, 4]
    assert rule.severity == Severity.ERROR
    assert rule.message(3) == "3 row(s) are missing Name / Full Name."


def test_pattern_rule_ignores_empty_values():
    rule = pattern_rule("P-1", "Code format", ["Code"], r"[A-Z]{3}", "Code must be three letters")
    rows = [{"Code": ""}, {}, {"Code": "ABC"}, {"Code": "abc"}, {"Code": "ABCD"}]

    assert rule.check(rows) == [3, 4]
    assert rule.message(2) == "2 row(s) failed rule: Code must be three letters"


def test_pattern_rule_requires_full_match():
    rule = pattern_rule("P-2", "Digits", ["N"], r"[0-9]{2}", "two digits")
    assert rule.check([{"N": "12"}, {"N": "123"}, {"N": "x12"}]) == [1, 2]


def test_pattern_rule_accepts_compiled_pattern():
    rule = pattern_rule("P-3", "Lower", ["N"], re.compile(r"[a-z]+"), "lowercase")
    assert rule.check([{"N": "abc"}, {"N": "ABC"}]) == [1]


def test_row_rule_uses_predicate_and_severity():
    rule = row_rule(
        "C-1",
        "No zeros",
        lambda row: row.get("N") == "0",
        lambda count: f"{count} zero(s)",
        severity=Severity.WARNING,
    )
    assert rule.check([{"N": "0"}, {"N": "1"}, {"N": "0"}]) == [0, 2]
    assert rule.severity == Severity.WARNING
    assert rule.message(2) == "2 zero(s)"


@pytest.mark.parametrize(
    "rule",
    [
        required_field_rule("A", "a", ["F"]),
        pattern_rule("B", "b", ["F"], r"[0-9]+", "digits"),
        row_rule("C", "c", lambda row: row.get("F", "") != "ok", lambda n: str(n)),
    ],
)
def test_failing_indexes_are_strictly_ascending_and_unique(rule):
    rows = [{"F": v} for v in ["", "x", "ok", "1", "", "y", "ok", "22"]]
    failed = rule.check(rows)
    assert failed == sorted(set(failed))
    assert all(0 <= idx < len(rows) for idx in failed)


def test_rules_return_nothing_for_empty_row_set():
    assert required_field_rule("A", "a", ["F"]).check([]) == []
    assert pattern_rule("B", "b", ["F"], r"x", "x").check([]) == []


def test_rule_requires_id():
    with pytest.raises(ValueError):
        ValidationRule(rule_id="", name="x", severity=Severity.ERROR, check=lambda rows: [], message=str)


def test_rule_is_immutable():
    rule = required_field_rule("A", "a", ["F"])
    with pytest.raises(AttributeError):
        rule.rule_id = "B"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-10", (2024, 1, 10)),
        ("2024-02-29", (2024, 2, 29)),
        ("2023-02-29", None),
        ("2024-13-01", None),
        ("2024/01/10", None),
        ("20240110", None),
        ("2024-01-10T00:00:00", None),
        ("10.01.2024", None),
        ("", None),
    ],
)
def test_parse_iso_date_is_strict(value, expected):
    parsed = parse_iso_date(value)
    if expected is None:
        assert parsed is None
    else:
        assert (parsed.year, parsed.month, parsed.day) == expected
