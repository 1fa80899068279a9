"""
Title: A* Recovery Planner
Date Created: 2026-10-13
Last Modified: 2026-10-17
Version: 1.3

Purpose:
Computes the minimum-cost sequence of unit corrective actions that returns the
vehicle from a given altitude into the safe band. The planner is consulted only
while the environment is CRITICAL; it pre-empts the active policy and its first
planned action is applied on that tick.

Search model:
- State: altitude level (the full state; no other variables).
- Actions: {-1, 0, +1}; neighbours outside the altitude bounds are discarded.
- Edge cost: 1 per non-zero action, 0 for the no-op.
- Heuristic: distance to the nearest safe altitude. Each action moves at most
  one level, so the heuristic is admissible and consistent.
- Closed set keyed by altitude; a settled altitude is never reopened.
- Frontier ordered by total cost, ties broken by insertion order.

Scope and Limitations:
- Search nodes live in a per-call arena; predecessor links are arena indices
  and nothing survives the call.
- Exhausting the frontier without reaching the safe band cannot happen with
  valid bands, but returns an infinite-cost single-point plan rather than
  raising.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- heapq (standard library)
- math (standard library)
- altitude_bands.py
"""

import heapq
import itertools
import math
from dataclasses import dataclass

from altitude_bands import AltitudeBands

POSSIBLE_ACTIONS = (-1, 0, 1)


@dataclass(frozen=True)
class PlanResult:
    path: tuple[int, ...]
    actions: tuple[int, ...]
    total_cost: float
    nodes_explored: int

    @property
    def found(self) -> bool:
        return math.isfinite(self.total_cost)


@dataclass
class _SearchNode:
    altitude: int
    cost_so_far: int
    heuristic: int
    total_cost: int
    predecessor: int | None  # arena index
    action_taken: int


class RecoveryPlanner:
    def __init__(self, bands: AltitudeBands | None = None):
        self._bands = bands or AltitudeBands()

    @property
    def bands(self) -> AltitudeBands:
        return self._bands

    def heuristic(self, altitude: int) -> int:
        return self._bands.distance_to_safe_band(altitude)

    def is_goal(self, altitude: int) -> bool:
        return self._bands.in_safe_band(altitude)

    def find_path(self, start_altitude: int) -> PlanResult:
        start = self._bands.clamp(start_altitude)

        arena: list[_SearchNode] = []
        frontier: list[tuple[int, int, int]] = []  # (total_cost, seq, arena index)
        best_cost: dict[int, int] = {}
        closed: set[int] = set()
        seq = itertools.count()

        h0 = self.heuristic(start)
        arena.append(_SearchNode(start, 0, h0, h0, None, 0))
        best_cost[start] = 0
        heapq.heappush(frontier, (h0, next(seq), 0))

        nodes_explored = 0

        while frontier:
            _, _, idx = heapq.heappop(frontier)
            current = arena[idx]

            # Stale entry superseded by a cheaper route, or altitude already settled.
            if current.altitude in closed or current.cost_so_far > best_cost[current.altitude]:
                continue

            nodes_explored += 1

            if self.is_goal(current.altitude):
                path, actions = self._reconstruct(arena, idx)
                return PlanResult(
                    path=path,
                    actions=actions,
                    total_cost=current.cost_so_far,
                    nodes_explored=nodes_explored,
                )

            closed.add(current.altitude)

            for action in POSSIBLE_ACTIONS:
                altitude = current.altitude + action
                if altitude < self._bands.min_altitude or altitude > self._bands.max_altitude:
                    continue
                if altitude in closed:
                    continue

                cost = current.cost_so_far + (1 if action != 0 else 0)
                known = best_cost.get(altitude)
                if known is not None and cost >= known:
                    continue

                h = self.heuristic(altitude)
                arena.append(_SearchNode(altitude, cost, h, cost + h, idx, action))
                best_cost[altitude] = cost
                heapq.heappush(frontier, (cost + h, next(seq), len(arena) - 1))

        return PlanResult(
            path=(start,),
            actions=(),
            total_cost=math.inf,
            nodes_explored=nodes_explored,
        )

    def next_action(self, altitude: int) -> int:
        result = self.find_path(altitude)
        return result.actions[0] if result.actions else 0

    def explain_path(self, altitude: int) -> str:
        result = self.find_path(altitude)
        route = " -> ".join(str(a) for a in result.path)
        return f"A* path: {route} ({result.nodes_explored} nodes explored)"

    @staticmethod
    def _reconstruct(arena: list[_SearchNode], goal_idx: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
        path: list[int] = []
        actions: list[int] = []

        idx: int | None = goal_idx
        while idx is not None:
            node = arena[idx]
            path.append(node.altitude)
            if node.predecessor is not None:
                actions.append(node.action_taken)
            idx = node.predecessor

        path.reverse()
        actions.reverse()
        return tuple(path), tuple(actions)
