#!/usr/bin/env python3
import argparse
import logging
import random
import signal
import time
from threading import Event

from altitude_bands import AltitudeBands, SimulationConfiguration
from altitude_controller import AltitudeController
from app_context import AppContext
from cli_support import ControlLoop
from control_policy import PolicyKind
from drone_environment import DroneEnvironment
from predictive_policy import PredictivePolicy
from reactive_policy import ReactivePolicy
from recovery_planner import RecoveryPlanner


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def initialize(
    config: SimulationConfiguration | None = None,
    bands: AltitudeBands | None = None,
    active: PolicyKind = PolicyKind.REACTIVE,
    clock=time.monotonic,
) -> AppContext:
    logging.info("Initializing simulation")

    config = config or SimulationConfiguration()
    bands = bands or AltitudeBands()

    rng = random.Random(config.seed)
    environment = DroneEnvironment(
        initial_altitude=config.initial_altitude,
        bands=bands,
        rng=rng,
        clock=clock,
        disturbance_intensity=config.disturbance_intensity,
    )

    controller = AltitudeController(
        environment=environment,
        reactive=ReactivePolicy(bands=bands, clock=clock),
        predictive=PredictivePolicy(bands=bands, window_size=config.wind_window_size, clock=clock),
        planner=RecoveryPlanner(bands=bands),
        active=active,
    )

    return AppContext(
        controller=controller,
        config=config,
        bands=bands,
        clock=clock,
        shutdown_event=Event(),
        loop=ControlLoop(controller, period_s=config.tick_period_s),
    )


def run_headless(ctx: AppContext, ticks: int) -> None:
    logging.info(
        "Running %d ticks with %s (period=%.3fs)",
        ticks, ctx.controller.active_policy.name, ctx.loop.period_s,
    )

    stable = 0
    interventions = 0
    for _ in range(ticks):
        if ctx.shutdown_event.is_set():
            break
        record = ctx.loop.step()[0]
        stable += int(record.is_stable)
        interventions += int(record.used_planner)
        ctx.shutdown_event.wait(ctx.loop.period_s)

    completed = ctx.controller.step_count
    if completed:
        logging.info(
            "Completed %d ticks: %.1f%% stable, %d planner interventions",
            completed, 100.0 * stable / completed, interventions,
        )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Discrete altitude control simulation")
    parser.add_argument("--ticks", type=int, default=50)
    parser.add_argument("--period", type=float, default=0.8, help="seconds between ticks")
    parser.add_argument(
        "--policy",
        choices=[k.value for k in PolicyKind],
        default=PolicyKind.REACTIVE.value,
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--wind", type=float, default=1.0, help="disturbance intensity in [0, 1]")
    parser.add_argument("--altitude", type=int, default=5, help="initial altitude")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()

    config = SimulationConfiguration(
        initial_altitude=args.altitude,
        disturbance_intensity=args.wind,
        tick_period_s=args.period,
        seed=args.seed,
    )
    ctx = initialize(config=config, active=PolicyKind(args.policy))
    setup_signal_handlers(ctx)

    run_headless(ctx, args.ticks)

    logging.info("Simulation terminated")


if __name__ == "__main__":
    main()
