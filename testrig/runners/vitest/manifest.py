"""Vitest runner manifest."""

from testrig.runners.manifest import RunnerManifest
from testrig.runners.vitest.config import VitestConfig
from testrig.runners.vitest.runner import VitestRunner

vitest_manifest = RunnerManifest(
    config_cls=VitestConfig,
    runner_factory=VitestRunner.from_config,
)
