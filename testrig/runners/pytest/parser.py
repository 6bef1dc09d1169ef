"""Normalization of pytest-json-report documents."""

from pydantic import ValidationError

from testrig.models.result import TestFailure, TestResult
from testrig.runners.base import ReportParseError
from testrig.runners.pytest.models import PytestReport


def parse_pytest_report(payload: str) -> TestResult:
    """Convert a pytest-json-report document into a TestResult.

    pytest reports its duration in seconds; it is converted to
    milliseconds.

    Raises:
        ReportParseError: If the payload is not a pytest JSON report

    """
    try:
        report = PytestReport.model_validate_json(payload)
    except ValidationError as e:
        raise ReportParseError(f"Invalid pytest report: {e}") from e

    failures: list[TestFailure] = []
    for test in report.tests:
        if test.outcome != "failed":
            continue
        message = (test.call.longrepr if test.call else None) or "Test failed"
        failures.append(
            TestFailure(
                name=test.nodeid,
                message=message,
                stack=message if "\n" in message else None,
                file=test.nodeid.split("::")[0],
            )
        )

    return TestResult(
        total=report.summary.total,
        passed=report.summary.passed,
        failed=report.summary.failed,
        skipped=report.summary.skipped,
        duration=report.duration * 1000,
        failures=tuple(failures),
    )
