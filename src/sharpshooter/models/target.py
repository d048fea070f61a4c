"""Target model — a single target on the range.

Targets are pure data plus read-only derived queries. The center comes
from level data and never changes; moving targets carry an immutable
MotionConfig, static targets carry None.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sharpshooter.engine import motion
from sharpshooter.models.motion import MotionConfig, WorldPoint
from sharpshooter.util.constants import DEFAULT_TARGET_RADIUS_M


@dataclass(frozen=True)
class Target:
    """A target on the range.

    Attributes:
        tid: Unique target instance ID.
        center: Base (Y, Z) world position in meters.
        motion: Oscillation parameters, None for a static target.
        radius_m: Hit radius around the current position.
    """

    tid: int
    center: WorldPoint
    motion: MotionConfig | None = None
    radius_m: float = DEFAULT_TARGET_RADIUS_M

    @property
    def is_moving(self) -> bool:
        return self.motion is not None and not self.motion.is_stationary

    def position_at(self, time_ms: float) -> WorldPoint:
        """World position at ``time_ms`` since session start."""
        if self.motion is None:
            return self.center
        return motion.position(self.center, self.motion, time_ms)

    def velocity_at(self, time_ms: float) -> tuple[float, float]:
        if self.motion is None:
            return (0.0, 0.0)
        return motion.velocity(self.motion, time_ms)

    def is_hit(self, impact_y: float, impact_z: float, time_ms: float) -> bool:
        """Whether an impact lands within ``radius_m`` of the current position."""
        pos = self.position_at(time_ms)
        return math.hypot(impact_y - pos.y, impact_z - pos.z) <= self.radius_m
