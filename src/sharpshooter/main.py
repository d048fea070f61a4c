"""Range entry point.

1. Load configuration (config/range.yaml)
2. Spawn a row of targets, motion generated from a seed
3. Either print sampled frames, or run the live frame loop

Usage:
    python -m sharpshooter.main --seed 42 --targets 3 --frames 5
    # or via entry point:
    sharpshooter --live
    sharpshooter --seed 7 --windage -1.0 --frames 3
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal

from sharpshooter.engine.target_field import FrameLoop, TargetField, TargetSnapshot, seed_from_clock
from sharpshooter.engine.turret import apply_turret_offset, quantize_to_click
from sharpshooter.loaders.range_config_loader import DEFAULT_RANGE_CONFIG_PATH, RangeConfig, load_range_config
from sharpshooter.models.motion import WorldPoint
from sharpshooter.models.turret import TurretState
from sharpshooter.util.events import EventBus, TargetSpawned
from sharpshooter.util.types import format_offset_cm, format_turret_state

log = logging.getLogger(__name__)

TARGET_SPACING_M = 0.5


def build_field(config: RangeConfig, seed: int, count: int) -> TargetField:
    """Spawn ``count`` targets side by side, seeds ``seed``, ``seed + 1``, …"""
    bus = EventBus()
    bus.on(TargetSpawned, lambda e: log.info(
        "  target %d spawned (%s)", e.target_id, "moving" if e.moving else "static"))

    field = TargetField(bus, config)
    first_z = -TARGET_SPACING_M * (count - 1) / 2
    for i in range(count):
        field.spawn(WorldPoint(y=0.0, z=first_z + i * TARGET_SPACING_M), seed=seed + i)
    return field


def turret_readout(config: RangeConfig, elevation_mils: float, windage_mils: float) -> str:
    """Snap dials to whole clicks and describe the POI shift at the configured distance."""
    turret = TurretState(
        elevation_mils=quantize_to_click(elevation_mils, config.click_mils),
        windage_mils=quantize_to_click(windage_mils, config.click_mils),
    )
    poi_y, poi_z = apply_turret_offset(0.0, 0.0, turret, config.distance_m)
    return (f"{format_turret_state(turret)} @ {config.distance_m:.0f} m"
            f"  POI y={format_offset_cm(poi_y)} z={format_offset_cm(poi_z)}")


def _print_frame(time_ms: float, snapshots: list[TargetSnapshot]) -> None:
    cells = ", ".join(
        f"#{s.tid} y={format_offset_cm(s.y)} z={format_offset_cm(s.z)}" for s in snapshots
    )
    print(f"{time_ms:8.1f} ms  {cells}")


async def _run_live(field: TargetField, config: RangeConfig) -> None:
    loop = FrameLoop(field, _print_frame, frame_interval_ms=config.frame_interval_ms)

    def _shutdown() -> None:
        log.info("Shutdown signal received, stopping …")
        loop.stop()

    aloop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        aloop.add_signal_handler(sig, _shutdown)
    await loop.run()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sample moving-target positions on the range.")
    parser.add_argument("--config", default=DEFAULT_RANGE_CONFIG_PATH, help="range YAML file")
    parser.add_argument("--seed", type=int, default=None, help="generation seed (default: clock)")
    parser.add_argument("--targets", type=int, default=3, help="number of targets to spawn")
    parser.add_argument("--frames", type=int, default=10, help="frames to print")
    parser.add_argument("--interval-ms", type=float, default=None,
                        help="time between printed frames (default: config frame interval)")
    parser.add_argument("--elevation", type=float, default=None, help="elevation dial in mils")
    parser.add_argument("--windage", type=float, default=None, help="windage dial in mils")
    parser.add_argument("--live", action="store_true", help="run the real-time frame loop")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = load_range_config(args.config)
    seed = args.seed if args.seed is not None else seed_from_clock()
    log.info("=== Range starting (seed=%d) ===", seed)
    field = build_field(config, seed, args.targets)

    if args.elevation is not None or args.windage is not None:
        print(turret_readout(config, args.elevation or 0.0, args.windage or 0.0))

    if args.live:
        asyncio.run(_run_live(field, config))
        return

    interval = args.interval_ms if args.interval_ms is not None else config.frame_interval_ms
    for frame in range(args.frames):
        time_ms = frame * interval
        _print_frame(time_ms, field.snapshot(time_ms))


if __name__ == "__main__":
    main()
