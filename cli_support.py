"""
Title: Control Loop Driver
Date Created: 2026-10-14
Last Modified: 2026-10-16
Version: 1.1

Purpose:
Provides the tick driver for the Discrete Altitude Control Simulation. The
ControlLoop advances an AltitudeController either step-wise (interactive use
and tests) or from a background thread at a fixed period, handing each step
record to an optional on_tick callback.

Scope and Limitations:
- Intended for CLI-driven simulation and test support only.
- Timing is approximate and not real-time deterministic.
- At most one step is in flight; the controller serialises step and reset.
- An exception raised by a tick is logged and the loop keeps running.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.

Dependencies:
- Python 3.10+
- logging (standard library)
- threading (standard library)
- altitude_controller.py
"""

import logging
import threading
from typing import Callable, Optional

from altitude_controller import AltitudeController, StepRecord

logger = logging.getLogger(__name__)

MIN_PERIOD_S = 0.01


class ControlLoop:
    def __init__(self,
                 controller: AltitudeController,
                 period_s: float = 0.8,
                 on_tick: Optional[Callable[[StepRecord], None]] = None,):
        self._controller = controller
        self._period_s = max(MIN_PERIOD_S, float(period_s))
        self._on_tick = on_tick
        self._running = False
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def running(self) -> bool:
        return self._running

    def set_period(self, period_s: float) -> None:
        self._period_s = max(MIN_PERIOD_S, float(period_s))

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._stop_evt.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if not self._running:
            return
        self._stop_evt.set()
        if self._thread is not None:
            self._thread.join(timeout=max(1.0, 2 * self._period_s))
        self._running = False
        self._thread = None

    def step(self, n: int = 1) -> list[StepRecord]:
        records = []
        for _ in range(max(1, int(n))):
            records.append(self._tick())
        return records

    def _tick(self) -> StepRecord:
        record = self._controller.step()
        if self._on_tick:
            self._on_tick(record)
        return record

    def _run(self) -> None:
        while not self._stop_evt.is_set():
            try:
                self._tick()
            except Exception:
                logger.exception("Unhandled exception in control loop")
            self._stop_evt.wait(self._period_s)
