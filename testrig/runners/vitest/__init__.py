"""Vitest runner module."""

from testrig.runners.vitest.config import VitestConfig
from testrig.runners.vitest.manifest import vitest_manifest
from testrig.runners.vitest.parser import parse_vitest_report
from testrig.runners.vitest.runner import VitestRunner

__all__ = ["VitestConfig", "VitestRunner", "parse_vitest_report", "vitest_manifest"]
