"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class TestFailure:
    """A single failed test as reported by a runner."""

    __test__ = False

    name: str
    message: str
    stack: str | None = None
    file: str | None = None


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Normalized outcome of a test run.

    For a single component, duration is that component's run time in
    milliseconds. For a combined run it is the longest component duration,
    i.e. wall-clock time under concurrency. ``total`` is expected to equal
    ``passed + failed + skipped`` but is taken as reported.
    """

    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration: float = 0.0
    failures: Sequence[TestFailure] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        """Whether no test failed."""
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for JSON output."""
        return asdict(self)


def execution_failure(component: str, message: str | None) -> TestResult:
    """Build the result recorded when a component could not be executed."""
    return TestResult(
        failed=1,
        failures=(
            TestFailure(
                name=component,
                message=message or "Test execution failed",
            ),
        ),
    )
