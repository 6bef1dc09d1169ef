"""CLI entry point for testrig."""

import argparse
import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any

from testrig.models.result import TestResult
from testrig.server import serve
from testrig.service import DEFAULT_SPECS_DIR, ORCHESTRATION_ERRORS, execute_run


def log_results_summary(
    log: logging.Logger, result: TestResult, duration: float
) -> None:
    """Log a formatted summary of a test run."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)
    log.info("Total: %d", result.total)
    log.info("Passed: %d", result.passed)
    if result.failed:
        log.info("Failed: %d", result.failed)
    if result.skipped:
        log.info("Skipped: %d", result.skipped)
    log.info("Duration: %.0fms", duration)

    for failure in result.failures:
        location = f" ({failure.file})" if failure.file else ""
        summary = failure.message.splitlines()[0] if failure.message else ""
        log.info("✗ %s%s", failure.name, location)
        log.info("  Message: %s", summary)


def format_output(result: TestResult, duration: float) -> dict[str, Any]:
    """Format a test run for JSON output."""
    return {
        "success": result.success,
        "data": result.to_dict(),
        "duration": duration,
    }


async def run(
    project_path: Path,
    *,
    parallel: bool = False,
    agents: int | None = None,
    framework: str | None = None,
    specs_dir: Path = DEFAULT_SPECS_DIR,
    json_output: bool = False,
) -> int:
    """Run tests and return exit code."""
    log = logging.getLogger("testrig")
    start = time.monotonic()

    try:
        result = await execute_run(
            project_path,
            parallel=parallel,
            agents=agents,
            framework=framework,
            specs_dir=specs_dir,
        )
    except ORCHESTRATION_ERRORS as e:
        log.error("Test run failed: %s", e)
        if json_output:
            print(json.dumps({"success": False, "data": None, "error": str(e)}))
        return 1

    duration = (time.monotonic() - start) * 1000

    if json_output:
        print(json.dumps(format_output(result, duration)))
    else:
        log_results_summary(log, result, duration)

    return 0 if result.success else 1


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_project_path(parser: argparse.ArgumentParser, default: Any) -> None:
    parser.add_argument(
        "--project-path",
        type=Path,
        default=default,
        help="Project directory (defaults to the current directory)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands.

    ``--project-path`` is accepted before or after the subcommand.
    """
    parser = argparse.ArgumentParser(
        prog="testrig",
        description="Multi-agent test runner for monoliths and microservices",
    )
    _add_project_path(parser, Path.cwd())
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run tests")
    _add_project_path(run_parser, argparse.SUPPRESS)
    run_parser.add_argument(
        "-p",
        "--parallel",
        action="store_true",
        help="Run component tests in parallel across agents",
    )
    run_parser.add_argument(
        "-a",
        "--agents",
        type=_positive_int,
        default=None,
        help="Number of parallel agents (defaults to parallel_agents in config)",
    )
    run_parser.add_argument(
        "-f",
        "--framework",
        default=None,
        help="Runner key (vitest, pytest); defaults to framework in config",
    )
    run_parser.add_argument(
        "--specs-dir",
        type=Path,
        default=DEFAULT_SPECS_DIR,
        help="Component specs directory, relative to the project path",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON on stdout",
    )

    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    _add_project_path(serve_parser, argparse.SUPPRESS)
    serve_parser.add_argument("--host", default="0.0.0.0", help="Server host")
    serve_parser.add_argument("--port", type=int, default=8080, help="Server port")

    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        serve(args.host, args.port, args.project_path)
        sys.exit(0)

    exit_code = asyncio.run(
        run(
            args.project_path,
            parallel=args.parallel,
            agents=args.agents,
            framework=args.framework,
            specs_dir=args.specs_dir,
            json_output=args.json,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
