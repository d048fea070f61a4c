"""Target motion model — sinusoidal oscillation around a fixed center.

    phase    = speed * time_ms / 1000
    offset   = amplitude * sin(2π * phase)
    velocity = amplitude * speed * 2π * cos(2π * phase)

Only the configured axis moves; the other component stays exactly at the
center value with zero velocity. Every function here is pure: no clock,
no hidden state, safe to call from any thread in any order.
"""

from __future__ import annotations

import math

from sharpshooter.models.motion import Axis, MotionBounds, MotionConfig, WorldPoint
from sharpshooter.util.constants import MS_PER_SECOND, TWO_PI
from sharpshooter.util.rng import Lcg

DEFAULT_BOUNDS = MotionBounds()


def _phase(config: MotionConfig, time_ms: float) -> float:
    if not math.isfinite(time_ms):
        raise ValueError(f"time_ms must be finite, got {time_ms}")
    if time_ms < 0:
        raise ValueError(f"time_ms must be >= 0, got {time_ms}")
    return config.speed * time_ms / MS_PER_SECOND


def position(center: WorldPoint, config: MotionConfig, time_ms: float) -> WorldPoint:
    """Current (Y, Z) position of a target oscillating around ``center``.

    Args:
        center: Base position from level data. Never modified.
        config: Oscillation parameters.
        time_ms: Milliseconds since session start.

    Raises:
        ValueError: If the center or time is not finite, or time is negative.
    """
    if not (math.isfinite(center.y) and math.isfinite(center.z)):
        raise ValueError(f"center must be finite, got {center}")
    phase = _phase(config, time_ms)
    if config.amplitude == 0:
        return center

    offset = config.amplitude * math.sin(TWO_PI * phase)
    if config.axis is Axis.HORIZONTAL:
        return WorldPoint(y=center.y, z=center.z + offset)
    return WorldPoint(y=center.y + offset, z=center.z)


def velocity(config: MotionConfig, time_ms: float) -> tuple[float, float]:
    """Instantaneous ``(vy, vz)`` in m/s, the time derivative of :func:`position`."""
    phase = _phase(config, time_ms)
    v = config.amplitude * config.speed * TWO_PI * math.cos(TWO_PI * phase)
    if config.axis is Axis.HORIZONTAL:
        return (0.0, v)
    return (v, 0.0)


def generate_config(seed: int, bounds: MotionBounds | None = None) -> MotionConfig:
    """Derive a motion configuration from ``seed``.

    The same seed yields the same config forever. Draw order is axis,
    speed, amplitude; changing it would change every generated level.
    Callers wanting fresh randomness pick the seed themselves (see
    :func:`sharpshooter.engine.target_field.seed_from_clock`).
    """
    bounds = bounds or DEFAULT_BOUNDS
    rng = Lcg(seed)

    axis = Axis.HORIZONTAL if rng.next() < 0.5 else Axis.VERTICAL
    speed = rng.range(bounds.min_speed, bounds.max_speed)
    amplitude = rng.range(bounds.min_amplitude, bounds.max_amplitude)

    return MotionConfig(speed=speed, axis=axis, amplitude=amplitude)
