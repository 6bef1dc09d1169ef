"""Abstract base class for test runner collaborators."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from testrig.models.result import TestResult


class RunnerError(Exception):
    """Raised when a runner cannot produce a result."""


class ReportParseError(RunnerError):
    """Raised when a runner's JSON report cannot be parsed."""


@dataclass(frozen=True, kw_only=True)
class TestRunner(ABC):
    """Executes test files out of process and normalizes the report.

    Test failures are not errors: a run whose process exits nonzero but
    still writes a parseable report returns that report. Only a run that
    yields no usable report raises.
    """

    __test__ = False

    @abstractmethod
    async def run(self, test_files: Sequence[str]) -> TestResult:
        """Run the given test files.

        Args:
            test_files: Paths to execute; empty means the whole suite

        Returns:
            Normalized result of the run

        Raises:
            RunnerError: If the run produced no usable report

        """
