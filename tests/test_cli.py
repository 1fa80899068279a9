"""
Title: CLI and Zone Annunciation Tests
Date Created: 2026-10-16
Last Modified: 2026-10-17
Version: 1.1

Purpose:
Verifies the zone annunciator and the interactive command handler: stepping,
policy selection, wind intensity, reset, planning diagnostics and input
validation messages.

Dependencies:
- Python 3.10+
- pytest
- cli.py (ZoneAnnunciator, handle_command)
- main.py (initialize)
"""

import pytest

from altitude_bands import SimulationConfiguration
from altitude_zones import AltitudeZone
from cli import ZoneAnnunciator, handle_command
from control_policy import PolicyKind
from main import initialize


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.t: float = float(start)

    def __call__(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += float(dt)


@pytest.fixture
def ctx():
    config = SimulationConfiguration(name="TEST", seed=1234, tick_period_s=0.05)
    context = initialize(config=config, clock=FakeClock())
    yield context
    context.shutdown()


@pytest.fixture
def ann():
    return ZoneAnnunciator()


@pytest.mark.parametrize(
    "altitude, zone",
    [(1, AltitudeZone.CRITICAL), (3, AltitudeZone.UNSTABLE), (5, AltitudeZone.SAFE)],
)
def test_zone_annunciator_prints_zone(ctx, ann, capsys, altitude, zone):
    ctx.controller.environment.reset(altitude)
    ann(ctx.controller)

    out = capsys.readouterr().out.strip().splitlines()
    assert out == [f"ZONE: {zone.name}"]


def test_zone_annunciator_prints_only_on_change(ctx, ann, capsys):
    env = ctx.controller.environment

    env.reset(5)
    ann(ctx.controller)
    ann(ctx.controller)
    env.reset(3)
    ann(ctx.controller)
    env.reset(9)
    ann(ctx.controller)

    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["ZONE: SAFE", "ZONE: UNSTABLE", "ZONE: CRITICAL"]


def test_quit_returns_false(ctx, ann):
    assert handle_command(ctx, ann, "q") is False
    assert handle_command(ctx, ann, "exit") is False


def test_blank_command_is_ignored(ctx, ann, capsys):
    assert handle_command(ctx, ann, "   ") is True
    assert capsys.readouterr().out == ""


def test_step_runs_ticks_and_prints_records(ctx, ann, capsys):
    assert handle_command(ctx, ann, "step 3") is True

    assert ctx.controller.step_count == 3
    out = capsys.readouterr().out
    assert "#1" in out and "#3" in out
    assert "ZONE:" in out


def test_step_rejects_bad_count(ctx, ann, capsys):
    handle_command(ctx, ann, "step many")
    assert "Usage: step [n]" in capsys.readouterr().out
    assert ctx.controller.step_count == 0


def test_policy_command_selects_policy(ctx, ann, capsys):
    handle_command(ctx, ann, "policy predictive")
    assert ctx.controller.active_kind is PolicyKind.PREDICTIVE
    assert "Predictive Policy" in capsys.readouterr().out

    handle_command(ctx, ann, "policy bogus")
    assert "Usage: policy reactive|predictive" in capsys.readouterr().out
    assert ctx.controller.active_kind is PolicyKind.PREDICTIVE


def test_toggle_command(ctx, ann):
    handle_command(ctx, ann, "toggle")
    assert ctx.controller.active_kind is PolicyKind.PREDICTIVE
    handle_command(ctx, ann, "toggle")
    assert ctx.controller.active_kind is PolicyKind.REACTIVE


def test_wind_command(ctx, ann, capsys):
    handle_command(ctx, ann, "wind 0.25")
    assert ctx.controller.environment.disturbance_intensity == 0.25
    assert "0.25" in capsys.readouterr().out

    handle_command(ctx, ann, "wind")
    assert "Usage: wind <0..1>" in capsys.readouterr().out


def test_reset_command(ctx, ann, capsys):
    handle_command(ctx, ann, "step 5")
    capsys.readouterr()

    handle_command(ctx, ann, "reset 2")

    env = ctx.controller.environment
    assert env.altitude == 2
    assert len(env.history()) == 1
    assert ctx.controller.step_count == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ["Simulation reset (altitude=2)", "ZONE: CRITICAL"]


def test_reset_without_argument_uses_configured_altitude(ctx, ann):
    ctx.controller.environment.reset(9)
    handle_command(ctx, ann, "reset")
    assert ctx.controller.environment.altitude == 5


def test_plan_command(ctx, ann, capsys):
    handle_command(ctx, ann, "plan 0")

    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        "A* path: 0 -> 1 -> 2 -> 3 -> 4 (5 nodes explored)",
        "Actions: [1, 1, 1, 1]  Cost: 4",
    ]


def test_log_command_without_steps(ctx, ann, capsys):
    handle_command(ctx, ann, "log")
    assert "No steps yet." in capsys.readouterr().out


def test_history_and_trend_commands(ctx, ann, capsys):
    handle_command(ctx, ann, "step 2")
    capsys.readouterr()

    handle_command(ctx, ann, "history")
    assert len(capsys.readouterr().out.strip().splitlines()) == 3

    handle_command(ctx, ann, "trend 3")
    assert capsys.readouterr().out.startswith("Trend over last 3:")


def test_status_command(ctx, ann, capsys):
    handle_command(ctx, ann, "status")
    out = capsys.readouterr().out
    assert "Altitude: 5  Zone: SAFE" in out
    assert "SafeBand: [4, 6]" in out
    assert "Policy: Reactive Policy (reactive)" in out


def test_period_command(ctx, ann, capsys):
    handle_command(ctx, ann, "period 0.001")
    assert ctx.loop.period_s == 0.01
    assert "Loop period set to 0.010s" in capsys.readouterr().out


def test_unknown_command(ctx, ann, capsys):
    assert handle_command(ctx, ann, "launch") is True
    assert "Unknown command" in capsys.readouterr().out
