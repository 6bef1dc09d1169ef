"""Test runs requested from the CLI or the HTTP API."""

import asyncio
import logging
from pathlib import Path

from testrig.config import ConfigError, load_config
from testrig.errors import CircularDependencyError, SpecLoadError
from testrig.models.result import TestResult
from testrig.orchestrator import run_parallel, run_sequential
from testrig.runners.base import RunnerError
from testrig.runners.loading import RunnerNotFoundError

log = logging.getLogger(__name__)

DEFAULT_SPECS_DIR = Path("tests/specs")

# Errors that end a run before any result exists.
ORCHESTRATION_ERRORS = (
    ConfigError,
    SpecLoadError,
    CircularDependencyError,
    RunnerNotFoundError,
    RunnerError,
)


async def execute_run(
    project_path: Path,
    *,
    parallel: bool = False,
    agents: int | None = None,
    framework: str | None = None,
    specs_dir: Path = DEFAULT_SPECS_DIR,
) -> TestResult:
    """Run the project's tests, filling unset options from its config.

    The configuration file is only read when ``framework`` (or, for a
    parallel run, ``agents``) is not given.
    """
    if framework is None or (parallel and agents is None):
        config = await asyncio.to_thread(load_config, project_path)
        if framework is None:
            framework = config.framework
        if agents is None:
            agents = config.parallel_agents

    if not parallel:
        log.info("Running tests with %s", framework)
        return await run_sequential(framework, cwd=project_path)

    assert agents is not None
    log.info("Using %d parallel agent(s) with %s", agents, framework)
    return await run_parallel(
        project_path / specs_dir, agents, framework, cwd=project_path
    )
