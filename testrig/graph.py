"""Dependency ordering of component specs."""

from collections.abc import Iterator, Sequence
from enum import Enum, auto

from testrig.errors import CircularDependencyError
from testrig.models.spec import ComponentSpec


class _Mark(Enum):
    IN_PROGRESS = auto()
    DONE = auto()


def topological_sort(specs: Sequence[ComponentSpec]) -> list[ComponentSpec]:
    """Order specs so every dependency precedes its dependents.

    Depth-first traversal: roots are taken in input order and dependencies
    in declared order. Dependencies naming components that are not in
    ``specs`` are skipped. A component is emitted once, at the point its
    own traversal finishes, so shared dependencies do not repeat.

    The traversal keeps an explicit stack, so large graphs do not hit the
    interpreter's recursion limit.

    Raises:
        CircularDependencyError: If traversal reaches a component that is
            still in progress (including a component depending on itself)

    """
    by_name: dict[str, ComponentSpec] = {}
    for spec in specs:
        by_name.setdefault(spec.component, spec)

    marks: dict[str, _Mark] = {}
    ordered: list[ComponentSpec] = []

    for root in specs:
        if root.component in marks:
            continue

        marks[root.component] = _Mark.IN_PROGRESS
        stack: list[tuple[ComponentSpec, Iterator[str]]] = [
            (root, iter(root.dependencies))
        ]

        while stack:
            spec, pending = stack[-1]
            for dependency in pending:
                dep_spec = by_name.get(dependency)
                if dep_spec is None:
                    continue

                mark = marks.get(dependency)
                if mark is _Mark.DONE:
                    continue
                if mark is _Mark.IN_PROGRESS:
                    path = [entry.component for entry, _ in stack]
                    cycle = [*path[path.index(dependency) :], dependency]
                    raise CircularDependencyError(dependency, cycle)

                marks[dependency] = _Mark.IN_PROGRESS
                stack.append((dep_spec, iter(dep_spec.dependencies)))
                break
            else:
                stack.pop()
                marks[spec.component] = _Mark.DONE
                ordered.append(spec)

    return ordered
