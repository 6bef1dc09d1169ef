"""Subprocess execution shared by runners."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from testrig.runners.base import RunnerError

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ProcessOutput:
    """Captured output of a finished process."""

    returncode: int
    stdout: str
    stderr: str

    def stderr_tail(self, lines: int = 20) -> str:
        """Last lines of stderr, where runners print their errors."""
        return "\n".join(self.stderr.strip().splitlines()[-lines:])


async def run_process(args: Sequence[str], cwd: Path) -> ProcessOutput:
    """Run ``args`` in ``cwd`` and capture its output.

    A nonzero exit status is returned, not raised.

    Raises:
        RunnerError: If the executable cannot be started

    """
    log.debug("Running %s in %s", " ".join(args), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise RunnerError(f"Cannot start {args[0]}: {e}") from e

    stdout, stderr = await process.communicate()
    returncode = process.returncode if process.returncode is not None else -1
    log.debug("%s exited with code %d", args[0], returncode)

    return ProcessOutput(
        returncode=returncode,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
