"""
Title: Altitude Zone Definitions (DACS AltitudeZone Enum)
Date Created: 2026-10-12
Last Modified: 2026-10-12
Version: 1.0

Purpose:
Defines the three-zone classification of the vehicle altitude used by the
environment and the control loop. CRITICAL altitudes hand control to the
recovery planner, UNSTABLE altitudes are outside the safe band but still
handled by the active policy, and SAFE altitudes lie inside the target band.

Scope and Limitations:
- Zones are derived from a single altitude value; no hysteresis is modelled.
- CRITICAL takes precedence over every other classification.

Dependencies:
- Python 3.10+
- enum (standard library)
"""

from enum import Enum, auto

class AltitudeZone(Enum):
    CRITICAL = auto()
    UNSTABLE = auto()
    SAFE = auto()
