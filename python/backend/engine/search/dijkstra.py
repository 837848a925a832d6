"""Dijkstra search over caller-defined states, with all-optimal-paths mode.

``neighbor_costs(state, cost)`` receives the accumulated cost of *state*
and returns a mapping of each next state to its new accumulated cost.
Costs must be non-negative; negative edges are not detected and give
undefined results.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections import deque
from collections.abc import Callable, Hashable, Mapping
from typing import TypeVar

from backend.engine.search.result import MultiPathResult, SearchResult

S = TypeVar("S", bound=Hashable)

NeighborCosts = Callable[[S, float], Mapping[S, float]]

logger = logging.getLogger(__name__)


class _Frontier:
    """Min-heap of ``(cost, state)``; equal costs pop in insertion order.

    States never need to be comparable, the counter settles every tie.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Hashable]] = []
        self._counter = itertools.count()

    def push(self, state: Hashable, cost: float) -> None:
        heapq.heappush(self._heap, (cost, next(self._counter), state))

    def pop(self) -> tuple[Hashable, float]:
        cost, _, state = heapq.heappop(self._heap)
        return state, cost

    def peek_cost(self) -> float:
        return self._heap[0][0]

    def __len__(self) -> int:
        return len(self._heap)


class Dijkstra:
    """Stateless weighted engine; all methods are static."""

    @staticmethod
    def shortest_path(
        start: S,
        is_goal: Callable[[S], bool],
        neighbor_costs: NeighborCosts,
    ) -> SearchResult[S]:
        """Return one minimum-cost path to a goal, or the not-found result."""
        frontier = _Frontier()
        frontier.push(start, 0)
        best: dict[S, float] = {start: 0}
        parent: dict[S, S] = {}
        closed: set[S] = set()

        while frontier:
            state, cost = frontier.pop()
            # Stale entry: superseded by a cheaper push after it was queued.
            if state in closed:
                continue
            closed.add(state)

            if is_goal(state):
                path = [state]
                while path[-1] in parent:
                    path.append(parent[path[-1]])
                path.reverse()
                logger.debug(
                    "Dijkstra reached %r at cost %s (%d closed)", state, cost, len(closed)
                )
                return SearchResult(path=tuple(path), cost=cost, expanded=len(closed))

            for nxt, new_cost in neighbor_costs(state, cost).items():
                if new_cost < best.get(nxt, math.inf):
                    best[nxt] = new_cost
                    parent[nxt] = state
                    frontier.push(nxt, new_cost)

        logger.debug("Dijkstra exhausted the frontier after %d states", len(closed))
        return SearchResult.not_found(len(closed))

    @staticmethod
    def all_optimal_states(
        start: S,
        is_goal: Callable[[S], bool],
        neighbor_costs: NeighborCosts,
    ) -> MultiPathResult[S]:
        """Return every state on any minimum-cost path to any goal.

        Each state keeps the set of predecessors that reach it at its
        best known cost: a cheaper route replaces the set, an equally
        cheap one joins it.  The search keeps going after the first goal
        until the frontier's cheapest entry costs more than that goal,
        then walks the predecessor sets back from every goal reached at
        the best cost.
        """
        frontier = _Frontier()
        frontier.push(start, 0)
        best: dict[S, float] = {start: 0}
        backtrack: dict[S, set[S]] = {start: set()}
        closed: set[S] = set()
        goals: list[S] = []
        best_goal_cost = math.inf

        while frontier:
            if frontier.peek_cost() > best_goal_cost:
                break
            state, cost = frontier.pop()
            if state in closed or cost > best[state]:
                continue
            closed.add(state)

            if is_goal(state):
                best_goal_cost = cost
                goals.append(state)

            for nxt, new_cost in neighbor_costs(state, cost).items():
                known = best.get(nxt, math.inf)
                if new_cost < known:
                    best[nxt] = new_cost
                    backtrack[nxt] = {state}
                    frontier.push(nxt, new_cost)
                elif new_cost == known and nxt in backtrack:
                    # An infinite cost to an unseen state is no route at all.
                    backtrack[nxt].add(state)

        if not goals:
            logger.debug("Dijkstra found no goal after %d states", len(closed))
            return MultiPathResult()

        seen: set[S] = set(goals)
        pending: deque[S] = deque(goals)
        while pending:
            current = pending.popleft()
            for previous in backtrack.get(current, ()):
                if previous not in seen:
                    seen.add(previous)
                    pending.append(previous)

        logger.debug(
            "Dijkstra found %d goal(s) at cost %s covering %d states",
            len(goals), best_goal_cost, len(seen),
        )
        return MultiPathResult(
            states=frozenset(seen), goals=frozenset(goals), cost=best_goal_cost
        )
