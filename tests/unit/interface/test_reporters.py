"""Unit tests for FindingReporter."""

import json

import pytest

from parameter_number.domain.rules import Finding
from parameter_number.infrastructure.services.message_catalog import MessageCatalog
from parameter_number.interface.reporters import FindingReporter
from parameter_number.use_cases.check_files import CheckResult


@pytest.fixture
def result() -> CheckResult:
    finding = Finding(
        code="R9701",
        message_key="too-many-parameters",
        line=3,
        column=8,
        max_parameters=7,
        count=9,
        name="run",
        path="src/app.py",
    )
    return CheckResult(findings=[finding], files_checked=2)


@pytest.fixture
def registry():
    return MessageCatalog().get_registry()


def test_text_output(result, registry) -> None:
    text = FindingReporter(registry).render(result)
    assert text.splitlines() == [
        "src/app.py:3:8: R9701 too-many-parameters More than 7 parameters (found 9).",
        "1 finding(s) in 2 file(s)",
    ]


def test_localized_message(result, registry) -> None:
    reporter = FindingReporter(registry, locale="de_DE")
    assert reporter.message(result.findings[0]) == "Mehr als 7 Parameter (gefunden 9)."


def test_unknown_locale_falls_back(result, registry) -> None:
    reporter = FindingReporter(registry, locale="ja")
    assert reporter.message(result.findings[0]) == "More than 7 parameters (found 9)."


def test_empty_registry_uses_default_template(result) -> None:
    assert FindingReporter({}).message(result.findings[0]) == "More than 7 parameters (found 9)."


def test_json_output(result, registry) -> None:
    payload = json.loads(FindingReporter(registry).render(result, "json"))
    assert payload == [
        {
            "path": "src/app.py",
            "line": 3,
            "column": 8,
            "code": "R9701",
            "symbol": "too-many-parameters",
            "name": "run",
            "max": 7,
            "count": 9,
            "message": "More than 7 parameters (found 9).",
        }
    ]
