"""Normalization of vitest JSON reports."""

from pydantic import ValidationError

from testrig.models.result import TestFailure, TestResult
from testrig.runners.base import ReportParseError
from testrig.runners.vitest.models import VitestReport


def parse_vitest_report(payload: str) -> TestResult:
    """Convert vitest ``--reporter=json`` output into a TestResult.

    Duration spans from the first file's start to the last file's end, in
    milliseconds.

    Raises:
        ReportParseError: If the payload is not a vitest JSON report

    """
    try:
        report = VitestReport.model_validate_json(payload)
    except ValidationError as e:
        raise ReportParseError(f"Invalid vitest report: {e}") from e

    failures: list[TestFailure] = []
    for file_result in report.test_results:
        for assertion in file_result.assertion_results:
            if assertion.status != "failed":
                continue
            message = "\n".join(assertion.failure_messages) or "Test failed"
            failures.append(
                TestFailure(
                    name=assertion.full_name or assertion.title,
                    message=message,
                    stack=message if "\n" in message else None,
                    file=file_result.name or None,
                )
            )

    duration = 0.0
    if report.test_results:
        first_start = report.test_results[0].start_time
        last_end = report.test_results[-1].end_time
        if first_start and last_end:
            duration = last_end - first_start

    return TestResult(
        total=report.num_total_tests,
        passed=report.num_passed_tests,
        failed=report.num_failed_tests,
        skipped=report.num_pending_tests,
        duration=duration,
        failures=tuple(failures),
    )
