"""Pytest runner manifest."""

from testrig.runners.manifest import RunnerManifest
from testrig.runners.pytest.config import PytestConfig
from testrig.runners.pytest.runner import PytestRunner

pytest_manifest = RunnerManifest(
    config_cls=PytestConfig,
    runner_factory=PytestRunner.from_config,
)
