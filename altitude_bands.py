"""
Title: Altitude Band Configuration Model (AltitudeBands)
Date Created: 2026-10-12
Last Modified: 2026-10-16
Version: 1.1

Purpose:
Defines immutable data models describing the static altitude geometry of the
Discrete Altitude Control Simulation (DACS): the hard altitude bounds, the safe
target band and the wider critical thresholds that trigger recovery planning.
A second model groups the run-level simulation parameters used to wire the
environment, policies and control loop together.

Scope and Limitations:
- Altitudes are integer levels; no continuous or physical units are modelled.
- Bands are validated once at construction and never change afterwards.
- The critical region must strictly enclose the safe band so that the three
  zones (critical / unstable / safe) never overlap.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AltitudeBands:
    # Immutable altitude geometry shared by the environment, policies and planner.
    min_altitude: int = 0
    max_altitude: int = 10
    safe_min: int = 4
    safe_max: int = 6
    critical_low: int = 3    # altitude < critical_low is critical
    critical_high: int = 7   # altitude > critical_high is critical

    def __post_init__(self) -> None:
        if self.min_altitude > self.max_altitude:
            raise ValueError(
                f"Invalid bounds: min_altitude={self.min_altitude} > max_altitude={self.max_altitude}"
            )
        if self.safe_min > self.safe_max:
            raise ValueError(
                f"Invalid safe band: safe_min={self.safe_min} > safe_max={self.safe_max}"
            )
        if self.safe_min < self.min_altitude or self.safe_max > self.max_altitude:
            raise ValueError(
                f"Safe band [{self.safe_min}, {self.safe_max}] outside bounds "
                f"[{self.min_altitude}, {self.max_altitude}]"
            )
        if self.critical_low > self.safe_min or self.critical_high < self.safe_max:
            raise ValueError(
                f"Critical thresholds ({self.critical_low}, {self.critical_high}) "
                f"must enclose the safe band [{self.safe_min}, {self.safe_max}]"
            )

    def clamp(self, altitude: int) -> int:
        # Pure calculation, no side effects.
        return max(self.min_altitude, min(self.max_altitude, int(altitude)))

    def in_safe_band(self, altitude: float) -> bool:
        return self.safe_min <= altitude <= self.safe_max

    def is_critical(self, altitude: float) -> bool:
        return altitude < self.critical_low or altitude > self.critical_high

    def distance_to_safe_band(self, altitude: int) -> int:
        if altitude < self.safe_min:
            return self.safe_min - altitude
        if altitude > self.safe_max:
            return altitude - self.safe_max
        return 0


@dataclass(frozen=True)
class SimulationConfiguration:
    # Run-level parameters used when assembling a simulation.
    name: str = "DACS-1"
    initial_altitude: int = 5
    wind_window_size: int = 5
    disturbance_intensity: float = 1.0
    tick_period_s: float = 0.8
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.wind_window_size < 1:
            raise ValueError(
                f"wind_window_size must be >= 1 (got {self.wind_window_size})"
            )
        if self.tick_period_s <= 0.0:
            raise ValueError(
                f"tick_period_s must be > 0 (got {self.tick_period_s})"
            )
