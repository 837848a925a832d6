"""Search outcomes shared by the BFS and Dijkstra engines."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

S = TypeVar("S", bound=Hashable)
P = TypeVar("P")


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """One path from the start state to a goal state.

    "No path" is an ordinary result: ``path`` is empty, ``cost`` is
    infinite and :attr:`found` is False.
    """

    path: tuple[S, ...] = ()
    cost: float = math.inf
    expanded: int = 0

    @classmethod
    def not_found(cls, expanded: int = 0) -> SearchResult[S]:
        return cls(expanded=expanded)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> int:
        """Number of edges on the path, or -1 when no path was found."""
        return len(self.path) - 1 if self.path else -1

    @property
    def goal(self) -> S | None:
        return self.path[-1] if self.path else None


@dataclass(frozen=True)
class MultiPathResult(Generic[S]):
    """Every state lying on at least one minimum-cost path."""

    states: frozenset[S] = field(default_factory=frozenset)
    goals: frozenset[S] = field(default_factory=frozenset)
    cost: float = math.inf

    @property
    def found(self) -> bool:
        return bool(self.goals)

    def project(self, fn: Callable[[S], P]) -> set[P]:
        """Map the state set through *fn*, e.g. to drop a heading."""
        return {fn(s) for s in self.states}
