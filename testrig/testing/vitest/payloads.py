"""Payload helpers for vitest JSON reports in tests."""

from collections.abc import Sequence
from typing import Any


def assertion(
    *,
    title: str = "should work",
    ancestors: Sequence[str] = ("Service",),
    status: str = "passed",
    failure_messages: Sequence[str] = (),
    duration: float = 3.0,
) -> dict[str, Any]:
    """Create an assertion result for a single test."""
    return {
        "ancestorTitles": list(ancestors),
        "fullName": " ".join([*ancestors, title]),
        "status": status,
        "title": title,
        "duration": duration,
        "failureMessages": list(failure_messages),
        "meta": {},
    }


def file_result(
    *,
    name: str = "/project/tests/unit/service.spec.ts",
    assertions: Sequence[dict[str, Any]] = (),
    start_time: int = 1_700_000_000_000,
    end_time: int = 1_700_000_000_250,
) -> dict[str, Any]:
    """Create the results of one test file."""
    failed = any(a["status"] == "failed" for a in assertions)
    return {
        "assertionResults": list(assertions),
        "startTime": start_time,
        "endTime": end_time,
        "status": "failed" if failed else "passed",
        "message": "",
        "name": name,
    }


def report(*, files: Sequence[dict[str, Any]] = ()) -> dict[str, Any]:
    """Create a full vitest report with counters derived from ``files``.

    Returns the structure vitest prints with ``--reporter=json``.
    """
    statuses = [a["status"] for f in files for a in f["assertionResults"]]
    passed = statuses.count("passed")
    failed = statuses.count("failed")
    pending = len(statuses) - passed - failed
    return {
        "numTotalTestSuites": len(files),
        "numPassedTestSuites": sum(f["status"] == "passed" for f in files),
        "numFailedTestSuites": sum(f["status"] == "failed" for f in files),
        "numPendingTestSuites": 0,
        "numTotalTests": len(statuses),
        "numPassedTests": passed,
        "numFailedTests": failed,
        "numPendingTests": pending,
        "numTodoTests": 0,
        "startTime": files[0]["startTime"] if files else 1_700_000_000_000,
        "success": failed == 0,
        "testResults": list(files),
    }
