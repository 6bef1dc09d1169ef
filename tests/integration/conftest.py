"""Fixtures for integration tests.

The runners are exercised against small Python scripts that mimic the
command-line contract of vitest and pytest-json-report: test files are
passed as arguments and any file whose name contains ``broken`` fails.
"""

import sys
import textwrap
from pathlib import Path

import pytest

FAKE_VITEST = textwrap.dedent(
    """
    import json
    import sys

    files = sys.argv[1:]
    results = []
    for index, name in enumerate(files):
        failed = "broken" in name
        results.append(
            {
                "name": name,
                "startTime": 1000 + index * 10,
                "endTime": 1100 + index * 10,
                "assertionResults": [
                    {
                        "status": "failed" if failed else "passed",
                        "title": "works",
                        "fullName": f"{name} works",
                        "failureMessages": ["AssertionError: expected 1 to be 2"]
                        if failed
                        else [],
                    }
                ],
            }
        )
    failed = sum("broken" in name for name in files)
    print(
        json.dumps(
            {
                "numTotalTests": len(files),
                "numPassedTests": len(files) - failed,
                "numFailedTests": failed,
                "numPendingTests": 0,
                "testResults": results,
            }
        )
    )
    sys.exit(1 if failed else 0)
    """
)

FAKE_PYTEST = textwrap.dedent(
    """
    import json
    import sys

    report_file = None
    files = []
    for arg in sys.argv[1:]:
        if arg.startswith("--json-report-file="):
            report_file = arg.split("=", 1)[1]
        elif not arg.startswith("--"):
            files.append(arg)

    tests = []
    for name in files:
        failed = "broken" in name
        outcome = "failed" if failed else "passed"
        test = {"nodeid": f"{name}::test_it", "outcome": outcome}
        if failed:
            test["call"] = {"longrepr": "assert 1 == 2"}
        tests.append(test)
    failed = sum(t["outcome"] == "failed" for t in tests)
    summary = {"total": len(tests), "passed": len(tests) - failed, "failed": failed}

    with open(report_file, "w") as f:
        json.dump({"duration": 0.5, "summary": summary, "tests": tests}, f)
    sys.exit(1 if failed else 0)
    """
)


def _write_script(directory: Path, name: str, content: str) -> list[str]:
    script = directory / name
    script.write_text(content)
    return [sys.executable, str(script)]


@pytest.fixture
def fake_vitest(tmp_path: Path) -> list[str]:
    """Command running a stand-in for ``vitest run --reporter=json``."""
    return _write_script(tmp_path, "fake_vitest.py", FAKE_VITEST)


@pytest.fixture
def fake_pytest(tmp_path: Path) -> list[str]:
    """Command running a stand-in for ``pytest`` with pytest-json-report."""
    return _write_script(tmp_path, "fake_pytest.py", FAKE_PYTEST)
