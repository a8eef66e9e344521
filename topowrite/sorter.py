"""Dependency ordering of items via depth-first topological sort."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .models import Item


class Mark(Enum):
    """Visitation state of a node during the depth-first traversal."""

    UNMARKED = "unmarked"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class IssueKind(Enum):
    CYCLE = "cycle"
    UNKNOWN_DEPENDENCY = "unknown_dependency"


@dataclass(frozen=True)
class SortIssue:
    """Reason a sort was aborted.

    ``name`` is the node where the cycle was re-entered or the missing
    dependency name; ``referrer`` is the item whose dependency list led there
    and ``path`` the chain of items being visited at that moment.
    """

    kind: IssueKind
    name: str
    referrer: str
    path: Tuple[str, ...] = ()

    def describe(self) -> str:
        if self.kind is IssueKind.CYCLE:
            return f"Given input is not sortable: dependency cycle {' -> '.join(self.path)}"
        return f"Item '{self.referrer}' depends on unknown item '{self.name}'"


class OrderingError(RuntimeError):
    """Raised when items cannot be put in dependency order."""

    def __init__(self, issue: SortIssue) -> None:
        self.issue = issue
        super().__init__(issue.describe())


class CycleError(OrderingError):
    """The dependency graph contains a cycle."""


class UnknownDependency(OrderingError):
    """A dependency name does not resolve to a known item."""

    @property
    def name(self) -> str:
        return self.issue.name


_ERRORS = {
    IssueKind.CYCLE: CycleError,
    IssueKind.UNKNOWN_DEPENDENCY: UnknownDependency,
}


@dataclass
class SortResult:
    """Outcome of :func:`sort_items`: either a full order or the issue that stopped it."""

    items: List[Item] = field(default_factory=list)
    issue: Optional[SortIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @property
    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def unwrap(self) -> List[Item]:
        """Return the ordered items or raise the error matching the issue."""
        if self.issue is not None:
            raise _ERRORS[self.issue.kind](self.issue)
        return self.items


def sort_items(items: Mapping[str, Item]) -> SortResult:
    """Order ``items`` so every item follows all of its dependencies.

    Dependencies of one item are placed in the order they are listed;
    unrelated items keep the iteration order of ``items``. A cycle or an
    unknown dependency aborts the sort and no partial order is returned.
    """
    marks: Dict[str, Mark] = {name: Mark.UNMARKED for name in items}
    ordered: List[Item] = []

    for name in items:
        if marks[name] is Mark.UNMARKED:
            issue = _visit(name, items, marks, ordered)
            if issue is not None:
                return SortResult(issue=issue)

    return SortResult(items=ordered)


def sort_dependencies(items: Mapping[str, Item]) -> List[Item]:
    """Like :func:`sort_items` but raises :class:`OrderingError` on failure."""
    return sort_items(items).unwrap()


def _visit(
    root: str,
    items: Mapping[str, Item],
    marks: Dict[str, Mark],
    ordered: List[Item],
) -> Optional[SortIssue]:
    # Explicit stack of (name, remaining dependencies); its names are the current DFS path.
    marks[root] = Mark.IN_PROGRESS
    stack: List[Tuple[str, Iterator[str]]] = [(root, iter(items[root].dependencies))]

    while stack:
        name, pending = stack[-1]
        dependency = next(pending, None)
        if dependency is None:
            stack.pop()
            marks[name] = Mark.DONE
            ordered.append(items[name])
            continue

        mark = marks.get(dependency)
        if mark is None:
            return SortIssue(
                kind=IssueKind.UNKNOWN_DEPENDENCY,
                name=dependency,
                referrer=name,
                path=tuple(entry for entry, _ in stack),
            )
        if mark is Mark.IN_PROGRESS:
            path = [entry for entry, _ in stack]
            cycle = path[path.index(dependency):] + [dependency]
            return SortIssue(
                kind=IssueKind.CYCLE,
                name=dependency,
                referrer=name,
                path=tuple(cycle),
            )
        if mark is Mark.UNMARKED:
            marks[dependency] = Mark.IN_PROGRESS
            stack.append((dependency, iter(items[dependency].dependencies)))

    return None


__all__ = [
    "CycleError",
    "IssueKind",
    "Mark",
    "OrderingError",
    "SortIssue",
    "SortResult",
    "UnknownDependency",
    "sort_dependencies",
    "sort_items",
]
