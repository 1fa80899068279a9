"""
Title: Application Context Container for DACS
Date Created: 2026-10-14
Last Modified: 2026-10-14
Version: 1.0

Purpose:
Defines a central application context object for the Discrete Altitude Control
Simulation (DACS). The AppContext aggregates the controller, its configuration,
the tick driver and lifecycle control primitives into a single, explicit
container to simplify wiring and controlled shutdown.

Scope and Limitations:
- Acts purely as a dependency container; contains no control logic.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- threading (standard library)
- typing (standard library)
- altitude_bands.py
- altitude_controller.py
- cli_support.py
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from altitude_bands import AltitudeBands, SimulationConfiguration
from altitude_controller import AltitudeController

from cli_support import ControlLoop


@dataclass
class AppContext:
    controller: AltitudeController
    config: SimulationConfiguration
    bands: AltitudeBands
    clock: Callable[[], float]
    shutdown_event: Event
    loop: ControlLoop

    def shutdown(self) -> None:
        self.loop.stop()
        self.shutdown_event.set()
