"""Motion model data — axis, oscillation parameters, generation bounds.

A MotionConfig is created once at target spawn (authored or generated)
and never changes for the target's lifetime.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from sharpshooter.util.constants import (
    DEFAULT_MAX_AMPLITUDE_M,
    DEFAULT_MAX_SPEED,
    DEFAULT_MIN_AMPLITUDE_M,
    DEFAULT_MIN_SPEED,
    MS_PER_SECOND,
)


class Axis(Enum):
    """Oscillation axis of a moving target."""

    HORIZONTAL = "horizontal"  # perturbs world Z
    VERTICAL = "vertical"  # perturbs world Y


@dataclass(frozen=True)
class WorldPoint:
    """A (Y, Z) position in world coordinates, meters.

    Attributes:
        y: Vertical coordinate, positive up.
        z: Lateral coordinate, positive right.
    """

    y: float
    z: float

    def __iter__(self):
        yield self.y
        yield self.z


@dataclass(frozen=True)
class MotionConfig:
    """Immutable oscillation parameters.

    Attributes:
        speed: Oscillation frequency in cycles per second. 0 = stationary.
        axis: Which world axis the target moves along.
        amplitude: Half the peak-to-peak travel in meters.

    Raises:
        ValueError: For negative or non-finite speed/amplitude.
    """

    speed: float
    axis: Axis
    amplitude: float

    def __post_init__(self) -> None:
        if not isinstance(self.axis, Axis):
            raise ValueError(f"axis must be an Axis, got {self.axis!r}")
        if not math.isfinite(self.speed) or self.speed < 0:
            raise ValueError(f"speed must be finite and >= 0, got {self.speed}")
        if not math.isfinite(self.amplitude) or self.amplitude < 0:
            raise ValueError(f"amplitude must be finite and >= 0, got {self.amplitude}")

    @property
    def is_stationary(self) -> bool:
        return self.speed == 0 or self.amplitude == 0

    @property
    def period_ms(self) -> float | None:
        """Length of one full cycle in milliseconds, None when speed is 0."""
        if self.speed == 0:
            return None
        return MS_PER_SECOND / self.speed


@dataclass(frozen=True)
class MotionBounds:
    """Inclusive ranges for procedurally generated motion."""

    min_speed: float = DEFAULT_MIN_SPEED
    max_speed: float = DEFAULT_MAX_SPEED
    min_amplitude: float = DEFAULT_MIN_AMPLITUDE_M
    max_amplitude: float = DEFAULT_MAX_AMPLITUDE_M

    def __post_init__(self) -> None:
        for name in ("min_speed", "max_speed", "min_amplitude", "max_amplitude"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and >= 0, got {value}")
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) exceeds max_speed ({self.max_speed})"
            )
        if self.min_amplitude > self.max_amplitude:
            raise ValueError(
                f"min_amplitude ({self.min_amplitude}) exceeds max_amplitude ({self.max_amplitude})"
            )
