"""Vitest runner implementation."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from testrig.models.result import TestResult
from testrig.runners.base import ReportParseError, RunnerError, TestRunner
from testrig.runners.process import run_process
from testrig.runners.vitest.config import VitestConfig
from testrig.runners.vitest.parser import parse_vitest_report

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class VitestRunner(TestRunner):
    """Runs vitest and reads its JSON report from stdout."""

    config: VitestConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: VitestConfig
    ) -> AsyncGenerator["VitestRunner", None]:
        """Create runner from configuration."""
        yield cls(config=config)

    async def run(self, test_files: Sequence[str]) -> TestResult:
        """Run vitest on the given files."""
        output = await run_process(
            [*self.config.command, *test_files], cwd=self.config.cwd
        )

        try:
            result = parse_vitest_report(output.stdout)
        except ReportParseError as e:
            raise RunnerError(
                f"vitest exited with code {output.returncode} without a report: "
                f"{output.stderr_tail() or e}"
            ) from e

        log.debug(
            "vitest finished: exit=%d total=%d failed=%d",
            output.returncode,
            result.total,
            result.failed,
        )
        return result
