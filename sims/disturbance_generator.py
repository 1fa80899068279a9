"""
Title: Wind Disturbance Generator
Date Created: 2026-10-12
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Provides the stochastic wind model for the Discrete Altitude Control
Simulation (DACS). Each draw yields a unit disturbance in {-1, 0, +1}. A
configurable intensity in [0, 1] scales how often the wind blows: intensity 0
never disturbs the vehicle, intensity 1 gives an even one-third split.

Scope and Limitations:
- Disturbances are independent between draws; no gusts or correlation.
- Upward and downward pushes are always equally likely.
- Intended solely for simulation and test stimulation.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- random (standard library)
"""

import random


class DisturbanceGenerator:
    def __init__(
        self,
        intensity: float = 1.0,
        rng: random.Random | None = None,
    ):
        self.rng = rng or random.Random()
        self._intensity = 1.0
        self.set_intensity(intensity)

    @property
    def intensity(self) -> float:
        return self._intensity

    def set_intensity(self, intensity: float) -> None:
        # Out-of-range intensities are clamped, never rejected.
        self._intensity = max(0.0, min(1.0, float(intensity)))

    def calm_probability(self) -> float:
        # P(0): 1.0 at intensity 0, 1/3 at intensity 1, linear in between.
        return 1.0 / 3.0 + (1.0 - self._intensity) * (2.0 / 3.0)

    def draw(self) -> int:
        p_calm = self.calm_probability()
        p_down = (1.0 - p_calm) / 2.0

        r = self.rng.random()
        if r < p_down:
            return -1
        if r < p_down + p_calm:
            return 0
        return 1
