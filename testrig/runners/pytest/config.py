"""Configuration for pytest runner."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field


class PytestConfig(BaseModel):
    """Configuration for pytest runner.

    Requires the pytest-json-report plugin in the target environment. The
    report flags and test files are appended to ``command``.
    """

    cwd: Path = Field(default_factory=Path.cwd)
    command: Sequence[str] = Field(default=("pytest",), min_length=1)
