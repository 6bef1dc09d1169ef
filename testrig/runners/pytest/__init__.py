"""Pytest runner module."""

from testrig.runners.pytest.config import PytestConfig
from testrig.runners.pytest.manifest import pytest_manifest
from testrig.runners.pytest.parser import parse_pytest_report
from testrig.runners.pytest.runner import PytestRunner

__all__ = ["PytestConfig", "PytestRunner", "parse_pytest_report", "pytest_manifest"]
