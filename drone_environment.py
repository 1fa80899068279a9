"""
Title: Drone Altitude Environment (DACS Environment)
Date Created: 2026-10-12
Last Modified: 2026-10-16
Version: 1.3

Purpose:
Owns the authoritative altitude state of the simulated vehicle. The environment
applies wind disturbances and corrective actions, clamps the altitude to its
bounds, classifies the current altitude into safe / unstable / critical zones
and keeps an append-only history of post-disturbance states for charting and
diagnostics.

Scope and Limitations:
- History is captured on disturbance only. Corrective actions change the
  current altitude but never append a record, so the recorded series tracks
  post-disturbance, pre-action states.
- Out-of-range altitudes passed to the constructor or reset() are clamped,
  never rejected.
- Single-threaded use is assumed; callers serialise stepping and reset.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- random (standard library)
- time (standard library)
- altitude_bands.py
- altitude_zones.py
- sims/disturbance_generator.py
"""

import random
import time
from dataclasses import dataclass
from typing import Callable

from altitude_bands import AltitudeBands
from altitude_zones import AltitudeZone
from sims.disturbance_generator import DisturbanceGenerator


@dataclass(frozen=True)
class HistoryRecord:
    altitude: int
    disturbance: int
    timestamp: float
    is_stable: bool


class DroneEnvironment:
    def __init__(
        self,
        initial_altitude: int = 5,
        bands: AltitudeBands | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        disturbance_intensity: float = 1.0,
        disturbance_provider: Callable[[], int] | None = None,
    ):
        self._bands = bands or AltitudeBands()
        self._clock = clock
        self._generator = DisturbanceGenerator(intensity=disturbance_intensity, rng=rng)

        # Optional scripted wind source (replay / tests); overrides the generator.
        self.disturbance_provider = disturbance_provider

        self._altitude = self._bands.clamp(initial_altitude)
        self._history: list[HistoryRecord] = []
        self._record_state(0)

    # -------------------------
    # Properties / queries
    # -------------------------

    @property
    def altitude(self) -> int:
        return self._altitude

    @property
    def bands(self) -> AltitudeBands:
        return self._bands

    @property
    def disturbance_intensity(self) -> float:
        return self._generator.intensity

    def set_disturbance_intensity(self, intensity: float) -> None:
        self._generator.set_intensity(intensity)

    def safe_band(self) -> tuple[int, int]:
        return (self._bands.safe_min, self._bands.safe_max)

    def bounds(self) -> tuple[int, int]:
        return (self._bands.min_altitude, self._bands.max_altitude)

    def is_in_safe_band(self) -> bool:
        return self._bands.in_safe_band(self._altitude)

    def is_critical(self) -> bool:
        return self._bands.is_critical(self._altitude)

    def zone(self) -> AltitudeZone:
        # Critical is checked first; it is independent of safe-band membership.
        if self.is_critical():
            return AltitudeZone.CRITICAL
        if self.is_in_safe_band():
            return AltitudeZone.SAFE
        return AltitudeZone.UNSTABLE

    def history(self) -> list[HistoryRecord]:
        return list(self._history)

    def recent_disturbance_trend(self, window_size: int = 5) -> float:
        # Mean disturbance over the most recent history records.
        if not self._history or window_size < 1:
            return 0.0
        recent = self._history[-window_size:]
        return sum(r.disturbance for r in recent) / float(len(recent))

    def current_state(self) -> HistoryRecord:
        last_disturbance = self._history[-1].disturbance if self._history else 0
        return HistoryRecord(
            altitude=self._altitude,
            disturbance=last_disturbance,
            timestamp=float(self._clock()),
            is_stable=self.is_in_safe_band(),
        )

    # -------------------------
    # Mutators
    # -------------------------

    def apply_disturbance(self) -> int:
        if self.disturbance_provider is not None:
            disturbance = int(self.disturbance_provider())
        else:
            disturbance = self._generator.draw()
        self._altitude = self._bands.clamp(self._altitude + disturbance)
        self._record_state(disturbance)
        return disturbance

    def apply_action(self, action: int) -> None:
        # No history record here; history is disturbance-triggered only.
        self._altitude = self._bands.clamp(self._altitude + int(action))

    def reset(self, initial_altitude: int = 5) -> None:
        self._altitude = self._bands.clamp(initial_altitude)
        self._history = []
        self._record_state(0)

    def _record_state(self, disturbance: int) -> None:
        self._history.append(
            HistoryRecord(
                altitude=self._altitude,
                disturbance=int(disturbance),
                timestamp=float(self._clock()),
                is_stable=self.is_in_safe_band(),
            )
        )
