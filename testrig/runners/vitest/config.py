"""Configuration for vitest runner."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field


class VitestConfig(BaseModel):
    """Configuration for vitest runner.

    ``command`` must make vitest print its JSON report on stdout; test files
    are appended to it.
    """

    cwd: Path = Field(default_factory=Path.cwd)
    command: Sequence[str] = Field(
        default=("npx", "vitest", "run", "--reporter=json"), min_length=1
    )
