"""
Title: Altitude Control Orchestrator (DACS Controller)
Date Created: 2026-10-14
Last Modified: 2026-10-17
Version: 1.4

Purpose:
Implements the per-tick orchestration of the Discrete Altitude Control
Simulation. A tick draws a wind disturbance, checks whether the vehicle is
critical, consults either the recovery planner (critical) or the active policy
(otherwise), applies the chosen action and emits an immutable step record.

Tick contract (order is required behaviour):
1. environment.apply_disturbance()
2. if critical: planner.next_action() -- the active policy is bypassed and does
   not observe the disturbance on this tick
3. else: policy.observe(disturbance), then policy.decide() / policy.explain()
4. environment.apply_action(action)
5. record emitted (post-action altitude and stability)

Scope and Limitations:
- Exactly one step is in flight at a time; step() and reset() are serialised
  with a lock so a reset never interleaves with a step.
- The step log is in-memory only and cleared on reset.

Safety Notice:
This software is for academic and illustrative purposes only.
It is not flight-certified and must not be used in operational systems.
"""

# Change Log:
#
# 1.4 (2026-10-17)
#   - Policy switching goes through PolicyKind tags; no isinstance dispatch.
#   - Planner interventions logged at WARNING.
#
# 1.3 (2026-10-16)
#   - Extracted run_step() as a standalone transition function so ticks can be
#     tested without the controller, loop or CLI.
#
# 1.2 (2026-10-15)
#   - reset() now clears both policies, the step counter and the step log.
#
# 1.0 (2026-10-14)
#   - Initial orchestration: disturbance -> planner-or-policy -> action -> record.

import logging
import threading
from dataclasses import dataclass

from control_policy import ControlPolicy, PolicyKind
from drone_environment import DroneEnvironment
from predictive_policy import PredictivePolicy
from reactive_policy import ReactivePolicy
from recovery_planner import RecoveryPlanner

logger = logging.getLogger(__name__)

PLANNER_NAME = "A* Planner"


@dataclass(frozen=True)
class StepRecord:
    step: int
    altitude: int
    disturbance: int
    action: int
    agent: str
    explanation: str
    is_stable: bool
    used_planner: bool


def run_step(
    environment: DroneEnvironment,
    policy: ControlPolicy,
    planner: RecoveryPlanner,
    step: int,
) -> StepRecord:
    # Advances the simulation by exactly one tick.
    disturbance = environment.apply_disturbance()
    altitude_after_wind = environment.altitude

    if environment.is_critical():
        action = planner.next_action(altitude_after_wind)
        explanation = f"CRITICAL! {planner.explain_path(altitude_after_wind)}"
        agent = PLANNER_NAME
        used_planner = True
    else:
        policy.observe(disturbance)
        action = policy.decide(altitude_after_wind)
        explanation = policy.explain(altitude_after_wind, action)
        agent = policy.name
        used_planner = False

    environment.apply_action(action)

    return StepRecord(
        step=step,
        altitude=environment.altitude,
        disturbance=disturbance,
        action=action,
        agent=agent,
        explanation=explanation,
        is_stable=environment.is_in_safe_band(),
        used_planner=used_planner,
    )


class AltitudeController:
    def __init__(
        self,
        environment: DroneEnvironment,
        reactive: ReactivePolicy | None = None,
        predictive: PredictivePolicy | None = None,
        planner: RecoveryPlanner | None = None,
        active: PolicyKind = PolicyKind.REACTIVE,
    ):
        self._environment = environment
        bands = environment.bands

        self._policies: dict[PolicyKind, ControlPolicy] = {
            PolicyKind.REACTIVE: reactive or ReactivePolicy(bands=bands),
            PolicyKind.PREDICTIVE: predictive or PredictivePolicy(bands=bands),
        }
        self._planner = planner or RecoveryPlanner(bands=bands)
        self._active = active

        self._step_count = 0
        self._step_log: list[StepRecord] = []
        self._lock = threading.Lock()

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def environment(self) -> DroneEnvironment:
        return self._environment

    @property
    def planner(self) -> RecoveryPlanner:
        return self._planner

    @property
    def active_kind(self) -> PolicyKind:
        return self._active

    @property
    def active_policy(self) -> ControlPolicy:
        return self._policies[self._active]

    @property
    def step_count(self) -> int:
        return self._step_count

    def policy(self, kind: PolicyKind) -> ControlPolicy:
        return self._policies[kind]

    def step_log(self) -> list[StepRecord]:
        with self._lock:
            return list(self._step_log)

    # -------------------------
    # Commands
    # -------------------------

    def set_policy(self, kind: PolicyKind) -> None:
        with self._lock:
            if kind is self._active:
                return
            self._active = kind
        logger.info("Active policy set to %s", self._policies[kind].name)

    def toggle_policy(self) -> PolicyKind:
        nxt = PolicyKind.PREDICTIVE if self._active is PolicyKind.REACTIVE else PolicyKind.REACTIVE
        self.set_policy(nxt)
        return nxt

    def step(self) -> StepRecord:
        with self._lock:
            record = run_step(
                self._environment,
                self._policies[self._active],
                self._planner,
                self._step_count + 1,
            )
            self._step_count = record.step
            self._step_log.append(record)

        if record.used_planner:
            logger.warning(
                "Step %d: wind=%+d action=%+d altitude=%d %s",
                record.step, record.disturbance, record.action, record.altitude, record.explanation,
            )
        else:
            logger.info(
                "Step %d: wind=%+d action=%+d altitude=%d [%s] %s",
                record.step, record.disturbance, record.action, record.altitude,
                record.agent, record.explanation,
            )
        return record

    def reset(self, initial_altitude: int = 5) -> None:
        with self._lock:
            self._environment.reset(initial_altitude)
            for policy in self._policies.values():
                policy.reset()
            self._step_count = 0
            self._step_log = []
        logger.info("Simulation reset (altitude=%d)", self._environment.altitude)
