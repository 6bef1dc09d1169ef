"""Pytest runner implementation."""

import asyncio
import logging
import tempfile
import uuid
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

from testrig.models.result import TestResult
from testrig.runners.base import RunnerError, TestRunner
from testrig.runners.process import run_process
from testrig.runners.pytest.config import PytestConfig
from testrig.runners.pytest.parser import parse_pytest_report

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PytestRunner(TestRunner):
    """Runs pytest and reads the JSON report file it writes.

    Each run writes to its own file under ``report_dir`` so concurrent runs
    never share a report.
    """

    config: PytestConfig
    report_dir: Path = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: PytestConfig
    ) -> AsyncGenerator["PytestRunner", None]:
        """Create runner with a managed report directory."""
        with tempfile.TemporaryDirectory(prefix="testrig-pytest-") as report_dir:
            yield cls(config=config, report_dir=Path(report_dir))

    async def run(self, test_files: Sequence[str]) -> TestResult:
        """Run pytest on the given files."""
        report_file = self.report_dir / f"report-{uuid.uuid4().hex}.json"
        output = await run_process(
            [
                *self.config.command,
                "--json-report",
                f"--json-report-file={report_file}",
                *test_files,
            ],
            cwd=self.config.cwd,
        )

        try:
            payload = await asyncio.to_thread(report_file.read_text, encoding="utf-8")
        except FileNotFoundError as e:
            raise RunnerError(
                f"pytest exited with code {output.returncode} without a report: "
                f"{output.stderr_tail() or output.stdout.strip()[-500:]}"
            ) from e
        finally:
            report_file.unlink(missing_ok=True)

        result = parse_pytest_report(payload)
        log.debug(
            "pytest finished: exit=%d total=%d failed=%d",
            output.returncode,
            result.total,
            result.failed,
        )
        return result
