"""
Title: Control Policy Capability (DACS ControlPolicy)
Date Created: 2026-10-13
Last Modified: 2026-10-15
Version: 1.1

Purpose:
Defines the single polymorphic capability shared by every decision strategy in
the Discrete Altitude Control Simulation, the tag used by the control loop to
select the active strategy, and the immutable decision record each policy
keeps for observability.

Scope and Limitations:
- The decision log is never read back into a decision.
- Every policy accepts observe(); stateless policies ignore it.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
- typing (standard library)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class PolicyKind(Enum):
    REACTIVE = "reactive"
    PREDICTIVE = "predictive"


@dataclass(frozen=True)
class DecisionRecord:
    altitude: int
    action: int
    timestamp: float
    predicted_altitude: float | None = None
    trend: float | None = None


class ControlPolicy(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    def observe(self, disturbance: int) -> None: ...

    def decide(self, altitude: int) -> int: ...

    def explain(self, altitude: int, action: int) -> str: ...

    def reset(self) -> None: ...

    def decision_history(self) -> list[DecisionRecord]: ...
