"""Errors raised while preparing a test run."""

from collections.abc import Sequence


class SpecLoadError(Exception):
    """Raised when a component specification cannot be loaded."""


class CircularDependencyError(Exception):
    """Raised when component dependencies form a cycle."""

    def __init__(self, component: str, cycle: Sequence[str] = ()) -> None:
        self.component = component
        self.cycle = tuple(cycle)
        message = f"Circular dependency detected involving {component}"
        if self.cycle:
            message += f": {' -> '.join(self.cycle)}"
        super().__init__(message)
