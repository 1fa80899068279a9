#!/usr/bin/env python3

import time

from altitude_controller import AltitudeController, StepRecord
from altitude_zones import AltitudeZone
from app_context import AppContext
from control_policy import PolicyKind
from main import initialize, setup_logging


class ZoneAnnunciator:
    # Prints the altitude zone only when it changes.
    def __init__(self):
        self._last: AltitudeZone | None = None

    def __call__(self, controller: AltitudeController) -> None:
        zone = controller.environment.zone()
        if zone is not self._last:
            print(f"ZONE: {zone.name}")
            self._last = zone

    def clear(self) -> None:
        self._last = None


def _fmt_record(r: StepRecord) -> str:
    marker = "*" if r.used_planner else " "
    stable = "STABLE" if r.is_stable else "UNSTABLE"
    return (
        f"{marker}#{r.step:<4d} alt={r.altitude:<2d} wind={r.disturbance:+d} "
        f"action={r.action:+d} {stable:<8s} [{r.agent}] {r.explanation}"
    )


def _print_status(ctx: AppContext) -> None:
    controller = ctx.controller
    env = controller.environment
    safe_min, safe_max = env.safe_band()
    lo, hi = env.bounds()

    print("\n=== STATUS ===")
    print(f"Altitude: {env.altitude}  Zone: {env.zone().name}")
    print(f"Bounds: [{lo}, {hi}]  SafeBand: [{safe_min}, {safe_max}]")
    print(f"Policy: {controller.active_policy.name} ({controller.active_kind.value})")
    print(f"WindIntensity: {env.disturbance_intensity:.2f}")
    print(f"Steps: {controller.step_count}  HistoryRecords: {len(env.history())}")
    print(f"Loop: {'running' if ctx.loop.running else 'stopped'} @ {ctx.loop.period_s:.3f}s")

    predictive = controller.policy(PolicyKind.PREDICTIVE)
    print(f"WindWindow: {predictive.window()}  Trend: {predictive.trend:.2f}")
    print("=============\n")


def _print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Loop control
  run [period_s]               Start background update loop (default period unchanged)
  stop                         Stop background loop
  step [n]                     Run n ticks (default 1)
  period <seconds>             Set background period (min 0.01)

Simulation inputs
  policy reactive|predictive   Select the active policy (stops the loop)
  toggle                       Switch between policies (stops the loop)
  wind <0..1>                  Set disturbance intensity
  reset [altitude]             Stop the loop and reset environment and policies

Diagnostics
  alt                          Print current altitude
  status                       Print full status block
  history [n]                  Print last n post-disturbance history records
  log [n]                      Print last n step records
  trend [n]                    Print mean disturbance over last n records
  plan [altitude]              Print A* recovery path (default: current altitude)
"""
    )


def _int_arg(parts: list[str], index: int, default: int) -> int:
    return int(parts[index]) if len(parts) > index else default


def handle_command(ctx: AppContext, annunciator: ZoneAnnunciator, cmd: str) -> bool:
    # Returns False when the shell should exit.
    controller = ctx.controller
    env = controller.environment
    loop = ctx.loop

    parts = cmd.split()
    if not parts:
        return True
    op = parts[0].lower()

    if op in ("q", "quit", "exit"):
        return False

    if op in ("help", "?"):
        _print_help()
        return True

    if op == "run":
        if len(parts) >= 2:
            try:
                loop.set_period(float(parts[1]))
            except ValueError:
                print("Usage: run [period_s]")
                return True
        loop.start()
        print(f"Loop running @ {loop.period_s:.3f}s")
        return True

    if op == "stop":
        loop.stop()
        print("Loop stopped")
        return True

    if op == "period":
        if len(parts) != 2:
            print("Usage: period <seconds>")
            return True
        try:
            loop.set_period(float(parts[1]))
        except ValueError:
            print("Usage: period <seconds>")
            return True
        print(f"Loop period set to {loop.period_s:.3f}s")
        return True

    if op == "step":
        try:
            n = _int_arg(parts, 1, 1)
        except ValueError:
            print("Usage: step [n]")
            return True
        for record in loop.step(n):
            print(_fmt_record(record))
        annunciator(controller)
        return True

    if op == "policy":
        if len(parts) != 2 or parts[1].lower() not in [k.value for k in PolicyKind]:
            print("Usage: policy reactive|predictive")
            return True
        loop.stop()
        controller.set_policy(PolicyKind(parts[1].lower()))
        print(f"Policy: {controller.active_policy.name}")
        return True

    if op == "toggle":
        loop.stop()
        controller.toggle_policy()
        print(f"Policy: {controller.active_policy.name}")
        return True

    if op == "wind":
        try:
            value = float(parts[1])
        except (IndexError, ValueError):
            print("Usage: wind <0..1>")
            return True
        env.set_disturbance_intensity(value)
        print(f"Wind intensity set to {env.disturbance_intensity:.2f}")
        return True

    if op == "reset":
        try:
            altitude = _int_arg(parts, 1, ctx.config.initial_altitude)
        except ValueError:
            print("Usage: reset [altitude]")
            return True
        loop.stop()
        controller.reset(altitude)
        annunciator.clear()
        print(f"Simulation reset (altitude={env.altitude})")
        annunciator(controller)
        return True

    if op == "alt":
        print(env.altitude)
        return True

    if op == "status":
        _print_status(ctx)
        return True

    if op == "history":
        try:
            n = _int_arg(parts, 1, 10)
        except ValueError:
            print("Usage: history [n]")
            return True
        for h in env.history()[-n:]:
            print(f"alt={h.altitude:<2d} wind={h.disturbance:+d} stable={h.is_stable} t={h.timestamp:.3f}")
        return True

    if op == "log":
        try:
            n = _int_arg(parts, 1, 10)
        except ValueError:
            print("Usage: log [n]")
            return True
        records = controller.step_log()
        if not records:
            print("No steps yet.")
        for r in records[-n:]:
            print(_fmt_record(r))
        return True

    if op == "trend":
        try:
            n = _int_arg(parts, 1, 5)
        except ValueError:
            print("Usage: trend [n]")
            return True
        print(f"Trend over last {n}: {env.recent_disturbance_trend(n):+.2f}")
        return True

    if op == "plan":
        try:
            altitude = _int_arg(parts, 1, env.altitude)
        except ValueError:
            print("Usage: plan [altitude]")
            return True
        result = controller.planner.find_path(altitude)
        print(controller.planner.explain_path(altitude))
        print(f"Actions: {list(result.actions)}  Cost: {result.total_cost}")
        return True

    print("Unknown command. Type 'help'.")
    return True


def main() -> int:
    setup_logging()
    ctx = initialize(clock=time.monotonic)
    annunciator = ZoneAnnunciator()

    _print_help()
    annunciator(ctx.controller)
    while True:
        try:
            cmd = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not handle_command(ctx, annunciator, cmd):
            break

    ctx.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
