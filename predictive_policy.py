"""
Title: Predictive (Model-Based) Altitude Policy
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.2

Purpose:
Stateful strategy that keeps a rolling window of recent wind disturbances as
its belief about the environment, forecasts the next altitude from the mean
trend and corrects pre-emptively when the forecast leaves the safe band.

Decision precedence (first match wins):
1. predicted altitude below the safe band  -> +1
2. predicted altitude above the safe band  -> -1
3. current altitude below the safe band    -> +1
4. current altitude above the safe band    -> -1
5. otherwise                               ->  0

The forecast is advisory: a currently unsafe altitude is always corrected even
when the forecast looks benign.

Scope and Limitations:
- The trend is an unweighted mean; older samples count as much as newer ones.
- State changes only through observe() and reset().

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- collections (standard library)
- altitude_bands.py
- control_policy.py
"""

import time
from collections import deque
from typing import Callable

from altitude_bands import AltitudeBands
from control_policy import DecisionRecord


class PredictivePolicy:
    def __init__(
        self,
        bands: AltitudeBands | None = None,
        window_size: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1 (got {window_size})")

        self._bands = bands or AltitudeBands()
        self._clock = clock

        # Wind window: oldest sample evicted first once full.
        self._window: deque[int] = deque(maxlen=int(window_size))
        self._decisions: list[DecisionRecord] = []

    @property
    def name(self) -> str:
        return "Predictive Policy"

    @property
    def description(self) -> str:
        return "Model-based policy that predicts altitude changes from recent wind trends"

    @property
    def window_size(self) -> int:
        return self._window.maxlen

    @property
    def trend(self) -> float:
        if not self._window:
            return 0.0
        return sum(self._window) / float(len(self._window))

    def window(self) -> list[int]:
        return list(self._window)

    def observe(self, disturbance: int) -> None:
        self._window.append(int(disturbance))

    def predict(self, altitude: int) -> float:
        return altitude + self.trend

    def decide(self, altitude: int) -> int:
        trend = self.trend
        predicted = altitude + trend
        safe_min, safe_max = self._bands.safe_min, self._bands.safe_max

        if predicted < safe_min:
            action = 1
        elif predicted > safe_max:
            action = -1
        elif altitude < safe_min:
            action = 1
        elif altitude > safe_max:
            action = -1
        else:
            action = 0

        self._decisions.append(
            DecisionRecord(
                altitude=altitude,
                action=action,
                timestamp=float(self._clock()),
                predicted_altitude=predicted,
                trend=trend,
            )
        )
        return action

    def explain(self, altitude: int, action: int) -> str:
        trend = self.trend
        predicted = altitude + trend

        if action == 1:
            return f"Predicted altitude {predicted:.1f} (trend: {trend:.2f}) -> Increase +1"
        if action == -1:
            return f"Predicted altitude {predicted:.1f} (trend: {trend:.2f}) -> Decrease -1"
        return f"Predicted altitude {predicted:.1f} (trend: {trend:.2f}) in safe band -> No adjustment"

    def decision_history(self) -> list[DecisionRecord]:
        return list(self._decisions)

    def reset(self) -> None:
        self._window.clear()
        self._decisions = []
