"""Parallel test orchestration across a fixed pool of workers."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from testrig.aggregator import aggregate_results
from testrig.graph import topological_sort
from testrig.models.result import TestResult, execution_failure
from testrig.runners.base import TestRunner
from testrig.runners.loading import load_runner_manifest
from testrig.runners.manifest import RunnerManifest
from testrig.spec_loader import load_component_specs
from testrig.work_queue import ResultStore, WorkItem, WorkQueue

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Completed:
    """Runner produced a result, which may itself report failures."""

    result: TestResult


@dataclass(frozen=True, kw_only=True)
class Errored:
    """Runner could not execute the component."""

    message: str


ExecutionOutcome: TypeAlias = Completed | Errored


def outcome_to_result(component: str, outcome: ExecutionOutcome) -> TestResult:
    """Turn an execution outcome into the result recorded for a component."""
    match outcome:
        case Completed(result=result):
            return result
        case Errored(message=message):
            return execution_failure(component, message)


@dataclass(frozen=True, kw_only=True)
class WorkerPool:
    """Drains a work queue with a fixed number of concurrent workers.

    Queue order decides which component an idle worker picks up next; it
    does not make any worker wait for another component to finish.
    """

    runner: TestRunner
    worker_count: int

    def __post_init__(self) -> None:
        if self.worker_count < 1:
            raise ValueError(
                f"worker_count must be at least 1, got {self.worker_count}"
            )

    async def drain(self, queue: WorkQueue, results: ResultStore) -> None:
        """Run workers until the queue is empty."""
        log.info(
            "Starting %d worker(s) for %d component(s)", self.worker_count, len(queue)
        )
        await asyncio.gather(
            *(
                self._worker(worker_id, queue, results)
                for worker_id in range(self.worker_count)
            )
        )
        log.info("All workers finished")

    async def _worker(
        self, worker_id: int, queue: WorkQueue, results: ResultStore
    ) -> None:
        while (item := queue.take()) is not None:
            log.info("Worker %d running %s", worker_id, item.component)
            outcome = await self._execute(item)
            result = outcome_to_result(item.component, outcome)
            log.info(
                "Worker %d finished %s: passed=%d failed=%d skipped=%d",
                worker_id,
                item.component,
                result.passed,
                result.failed,
                result.skipped,
            )
            results.record(item.component, result)

    async def _execute(self, item: WorkItem) -> ExecutionOutcome:
        try:
            result = await self.runner.run(item.test_files)
        except Exception as e:
            log.error(
                "Execution failed for %s: %s", item.component, e, exc_info=e
            )
            return Errored(message=str(e))
        return Completed(result=result)


async def run_parallel(
    specs_dir: Path,
    worker_count: int,
    framework: str,
    *,
    cwd: Path | None = None,
) -> TestResult:
    """Run every component's tests across ``worker_count`` workers.

    Args:
        specs_dir: Directory of ``*.spec.yaml`` component specs
        worker_count: Number of concurrent workers
        framework: Runner key (e.g., "vitest", "pytest")
        cwd: Working directory for the runner (defaults to the current one)

    Returns:
        Combined result of all components

    Raises:
        SpecLoadError: If a spec cannot be loaded
        CircularDependencyError: If component dependencies form a cycle
        RunnerNotFoundError: If ``framework`` names no installed runner

    """
    manifest = load_runner_manifest(framework)

    specs = await load_component_specs(specs_dir)
    ordered = topological_sort(specs)
    log.info("Execution order: %s", ", ".join(s.component for s in ordered) or "-")

    queue = WorkQueue.from_specs(ordered)
    results = ResultStore()

    async with manifest.runner_factory(_runner_config(manifest, cwd)) as runner:
        pool = WorkerPool(runner=runner, worker_count=worker_count)
        await pool.drain(queue, results)

    return aggregate_results(results.snapshot())


async def run_sequential(framework: str, *, cwd: Path | None = None) -> TestResult:
    """Run the whole suite in a single runner invocation.

    Raises:
        RunnerNotFoundError: If ``framework`` names no installed runner
        RunnerError: If the runner produced no usable report

    """
    manifest = load_runner_manifest(framework)

    async with manifest.runner_factory(_runner_config(manifest, cwd)) as runner:
        return await runner.run(())


def _runner_config(manifest: RunnerManifest[Any], cwd: Path | None) -> Any:
    if cwd is None:
        return manifest.config_cls()
    return manifest.config_cls(cwd=cwd)
