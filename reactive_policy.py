"""
Title: Reactive Altitude Policy
Date Created: 2026-10-13
Last Modified: 2026-10-13
Version: 1.0

Purpose:
Fixed-threshold reflex strategy. Climbs when below the safe band, descends when
above it and holds otherwise. Only the current altitude influences the decision.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

import time
from typing import Callable

from altitude_bands import AltitudeBands
from control_policy import DecisionRecord


class ReactivePolicy:
    def __init__(
        self,
        bands: AltitudeBands | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._bands = bands or AltitudeBands()
        self._clock = clock
        self._decisions: list[DecisionRecord] = []

    @property
    def name(self) -> str:
        return "Reactive Policy"

    @property
    def description(self) -> str:
        return "Rule-based policy that reacts to the current altitude without prediction"

    def observe(self, disturbance: int) -> None:
        # No belief state to update.
        return None

    def decide(self, altitude: int) -> int:
        if altitude < self._bands.safe_min:
            action = 1
        elif altitude > self._bands.safe_max:
            action = -1
        else:
            action = 0

        self._decisions.append(
            DecisionRecord(altitude=altitude, action=action, timestamp=float(self._clock()))
        )
        return action

    def explain(self, altitude: int, action: int) -> str:
        if action == 1:
            return f"Altitude {altitude} < {self._bands.safe_min} -> Increase +1"
        if action == -1:
            return f"Altitude {altitude} > {self._bands.safe_max} -> Decrease -1"
        return f"Altitude {altitude} in safe band -> No adjustment"

    def decision_history(self) -> list[DecisionRecord]:
        return list(self._decisions)

    def reset(self) -> None:
        self._decisions = []
