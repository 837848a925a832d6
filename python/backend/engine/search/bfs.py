"""Breadth-first search over caller-defined states."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from enum import StrEnum
from typing import Optional, TypeVar

from backend.engine.search.result import SearchResult

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)

# A path stored back to front as nested pairs: (state, rest-or-None).
# Extending it is O(1), so every frontier entry can carry its own history.
_Trail = tuple[Hashable, Optional["_Trail"]]


class Traversal(StrEnum):
    """How the frontier treats states it has already seen."""

    SHORTEST_PATH = "shortest_path"
    ALL_PATHS = "all_paths"


def _unwind(trail: _Trail) -> tuple:
    states: list = []
    node: Optional[_Trail] = trail
    while node is not None:
        states.append(node[0])
        node = node[1]
    states.reverse()
    return tuple(states)


class BFS:
    """Stateless breadth-first engine; all methods are static.

    ``neighbors(state)`` is called lazily, once per expanded state, and
    may return any iterable of next states.
    """

    @staticmethod
    def _explore(
        start: S,
        neighbors: Callable[[S], Iterable[S]],
        traversal: Traversal,
    ) -> Iterator[tuple[S, int, _Trail]]:
        """Yield ``(state, depth, trail)`` in FIFO order.

        With ``SHORTEST_PATH`` a state is enqueued only on its first
        discovery.  With ``ALL_PATHS`` nothing is deduplicated and every
        walk from *start* is followed.
        """
        dedup = traversal is Traversal.SHORTEST_PATH
        frontier: deque[tuple[S, int, _Trail]] = deque([(start, 0, (start, None))])
        seen: set[S] = {start}
        while frontier:
            state, depth, trail = frontier.popleft()
            yield state, depth, trail
            for nxt in neighbors(state):
                if dedup:
                    if nxt in seen:
                        continue
                    seen.add(nxt)
                frontier.append((nxt, depth + 1, (nxt, trail)))

    # -- shortest path --------------------------------------------------------

    @staticmethod
    def shortest_path(
        start: S,
        is_goal: Callable[[S], bool],
        neighbors: Callable[[S], Iterable[S]],
    ) -> SearchResult[S]:
        """Return one fewest-edge path to a goal, or the not-found result."""
        expanded = 0
        for state, depth, trail in BFS._explore(start, neighbors, Traversal.SHORTEST_PATH):
            if is_goal(state):
                logger.debug("BFS reached %r in %d steps (%d expanded)", state, depth, expanded)
                return SearchResult(path=_unwind(trail), cost=depth, expanded=expanded)
            expanded += 1
        logger.debug("BFS exhausted the frontier after %d expansions", expanded)
        return SearchResult.not_found(expanded)

    # -- enumeration ----------------------------------------------------------

    @staticmethod
    def all_paths(
        start: S,
        is_goal: Callable[[S], bool],
        neighbors: Callable[[S], Iterable[S]],
    ) -> Iterator[tuple[S, ...]]:
        """Yield every walk from *start* that ends on a goal state.

        States are revisited freely, so *neighbors* must describe an
        acyclic graph or the enumeration never ends.
        """
        for state, _, trail in BFS._explore(start, neighbors, Traversal.ALL_PATHS):
            if is_goal(state):
                yield _unwind(trail)

    @staticmethod
    def count_paths(
        start: S,
        is_goal: Callable[[S], bool],
        neighbors: Callable[[S], Iterable[S]],
    ) -> int:
        """Count the walks :meth:`all_paths` would yield."""
        count = sum(
            1
            for state, _, _ in BFS._explore(start, neighbors, Traversal.ALL_PATHS)
            if is_goal(state)
        )
        logger.debug("BFS counted %d walks from %r", count, start)
        return count

    # -- flood fill -----------------------------------------------------------

    @staticmethod
    def distances(start: S, neighbors: Callable[[S], Iterable[S]]) -> dict[S, int]:
        """Return the edge count from *start* to every reachable state."""
        return {
            state: depth
            for state, depth, _ in BFS._explore(start, neighbors, Traversal.SHORTEST_PATH)
        }

    @staticmethod
    def reachable(start: S, neighbors: Callable[[S], Iterable[S]]) -> set[S]:
        return set(BFS.distances(start, neighbors))
