"""Reduction of per-component results into one report."""

from collections.abc import Mapping

from testrig.models.result import TestFailure, TestResult


def aggregate_results(results: Mapping[str, TestResult]) -> TestResult:
    """Combine component results into a single result.

    Counters are summed and the duration is the longest component duration.
    Failures are concatenated in the mapping's iteration order.
    """
    total = passed = failed = skipped = 0
    duration = 0.0
    failures: list[TestFailure] = []

    for result in results.values():
        total += result.total
        passed += result.passed
        failed += result.failed
        skipped += result.skipped
        duration = max(duration, result.duration)
        failures.extend(result.failures)

    return TestResult(
        total=total,
        passed=passed,
        failed=failed,
        skipped=skipped,
        duration=duration,
        failures=tuple(failures),
    )
