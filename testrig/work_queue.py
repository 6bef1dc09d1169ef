"""Shared queue of per-component work items."""

import threading
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from testrig.models.result import TestResult
from testrig.models.spec import ComponentSpec


@dataclass(frozen=True, kw_only=True)
class WorkItem:
    """Scheduled test execution for one component."""

    component: str
    test_files: Sequence[str]
    dependencies: Sequence[str]

    @classmethod
    def from_spec(cls, spec: ComponentSpec) -> "WorkItem":
        """Create the work item for a component spec."""
        return cls(
            component=spec.component,
            test_files=tuple(spec.files),
            dependencies=tuple(spec.dependencies),
        )


class WorkQueue:
    """Ordered queue handing each item to exactly one caller.

    ``take`` never blocks: it returns ``None`` once the queue is drained,
    and nothing is added after construction.
    """

    def __init__(self, items: Iterable[WorkItem]) -> None:
        self._items = deque(items)
        self._lock = threading.Lock()

    @classmethod
    def from_specs(cls, specs: Iterable[ComponentSpec]) -> "WorkQueue":
        """Seed a queue from specs already in dependency order."""
        return cls(WorkItem.from_spec(spec) for spec in specs)

    def take(self) -> WorkItem | None:
        """Remove and return the next item, or ``None`` when empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class ResultStore:
    """Per-component results written concurrently by workers."""

    def __init__(self) -> None:
        self._results: dict[str, TestResult] = {}
        self._lock = threading.Lock()

    def record(self, component: str, result: TestResult) -> None:
        """Store the result for ``component``."""
        with self._lock:
            self._results[component] = result

    def snapshot(self) -> Mapping[str, TestResult]:
        """Return a copy of everything recorded so far."""
        with self._lock:
            return dict(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
