"""Target field — the set of live targets and the frame loop that samples them.

Responsibilities:
- Spawn targets, generating motion from a seed when none is authored
- Produce per-frame snapshots (position + velocity) for rendering and lead
- Resolve shots against the targets' positions at the shot time

The motion model itself is pure; the only clock in the package lives in
:class:`FrameLoop` and :func:`seed_from_clock`.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from sharpshooter.engine.motion import generate_config
from sharpshooter.loaders.range_config_loader import RangeConfig
from sharpshooter.models.motion import MotionConfig, WorldPoint
from sharpshooter.models.target import Target
from sharpshooter.util.constants import DEFAULT_FRAME_INTERVAL_MS, MS_PER_SECOND
from sharpshooter.util.events import TargetDespawned, TargetHit, TargetSpawned

if TYPE_CHECKING:
    from sharpshooter.util.events import EventBus

log = logging.getLogger(__name__)


def seed_from_clock() -> int:
    """Pick a generation seed from the wall clock (milliseconds)."""
    return int(time.time() * MS_PER_SECOND)


@dataclass(frozen=True)
class TargetSnapshot:
    """One target's state at one frame."""

    tid: int
    y: float
    z: float
    vy: float
    vz: float


class TargetField:
    """All targets of the current session.

    Args:
        event_bus: Bus receiving spawn/despawn/hit events.
        config: Range configuration (bounds, default radius).
    """

    def __init__(self, event_bus: EventBus, config: RangeConfig | None = None) -> None:
        self._events = event_bus
        self._config = config or RangeConfig()
        self._targets: dict[int, Target] = {}
        self._next_tid = 1
        self._last_time_ms: float | None = None

    @property
    def targets(self) -> list[Target]:
        return [self._targets[tid] for tid in sorted(self._targets)]

    def get(self, tid: int) -> Target:
        try:
            return self._targets[tid]
        except KeyError:
            raise KeyError(f"Unknown target id {tid}") from None

    def spawn(
        self,
        center: WorldPoint,
        motion: MotionConfig | None = None,
        radius_m: float | None = None,
        seed: int | None = None,
    ) -> Target:
        """Place a target on the range.

        An authored ``motion`` wins. Otherwise, when ``seed`` is given and
        moving targets are enabled, motion is generated from the seed
        within the configured bounds. Without either the target is static.
        """
        if motion is None and seed is not None and self._config.moving_targets:
            motion = generate_config(seed, self._config.motion_bounds)

        target = Target(
            tid=self._next_tid,
            center=center,
            motion=motion,
            radius_m=self._config.target_radius_m if radius_m is None else radius_m,
        )
        self._next_tid += 1
        self._targets[target.tid] = target

        if motion is not None:
            log.debug("Spawned target %d at %s: %s %.2f Hz, %.3f m",
                      target.tid, center, motion.axis.value, motion.speed, motion.amplitude)
        else:
            log.debug("Spawned static target %d at %s", target.tid, center)
        self._events.emit(TargetSpawned(target_id=target.tid, moving=target.is_moving))
        return target

    def despawn(self, tid: int) -> None:
        self.get(tid)
        del self._targets[tid]
        self._events.emit(TargetDespawned(target_id=tid))

    def reset_clock(self) -> None:
        """Start a new playback session; time may restart from 0."""
        self._last_time_ms = None

    def snapshot(self, time_ms: float) -> list[TargetSnapshot]:
        """Positions and velocities of all targets at ``time_ms``.

        Raises:
            ValueError: If ``time_ms`` is not finite or earlier than the previous snapshot
                of this session.
        """
        if not math.isfinite(time_ms):
            raise ValueError(f"time_ms must be finite, got {time_ms}")
        if self._last_time_ms is not None and time_ms < self._last_time_ms:
            raise ValueError(
                f"time went backwards: {time_ms} ms after {self._last_time_ms} ms"
            )
        self._last_time_ms = time_ms

        snapshots = []
        for target in self.targets:
            pos = target.position_at(time_ms)
            vy, vz = target.velocity_at(time_ms)
            snapshots.append(TargetSnapshot(tid=target.tid, y=pos.y, z=pos.z, vy=vy, vz=vz))
        return snapshots

    def resolve_shot(self, impact_y: float, impact_z: float, time_ms: float) -> int | None:
        """Return the id of the first target hit by an impact, or None."""
        for target in self.targets:
            if target.is_hit(impact_y, impact_z, time_ms):
                log.info("Target %d hit at %.0f ms (y=%+.3f, z=%+.3f)",
                         target.tid, time_ms, impact_y, impact_z)
                self._events.emit(TargetHit(
                    target_id=target.tid, time_ms=time_ms,
                    impact_y=impact_y, impact_z=impact_z,
                ))
                return target.tid
        return None


class FrameLoop:
    """Asyncio loop sampling the target field once per frame.

    Args:
        field: Target field to sample.
        on_frame: Called with ``(time_ms, snapshots)`` every frame.
        frame_interval_ms: Sleep between frames.
        clock: Monotonic clock in seconds.
    """

    def __init__(
        self,
        field: TargetField,
        on_frame: Callable[[float, list[TargetSnapshot]], None],
        frame_interval_ms: float = DEFAULT_FRAME_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._field = field
        self._on_frame = on_frame
        self._interval = frame_interval_ms / MS_PER_SECOND
        self._clock = clock
        self._running = False

        self.frame_count: int = 0
        self.started_at: float = 0.0

    async def run(self) -> None:
        """Run frames until stop() is called."""
        self._running = True
        self.started_at = self._clock()
        self._field.reset_clock()
        log.info("Frame loop started (%.0f ms interval)", self._interval * MS_PER_SECOND)
        while self._running:
            elapsed_ms = (self._clock() - self.started_at) * MS_PER_SECOND
            self._on_frame(elapsed_ms, self._field.snapshot(elapsed_ms))
            self.frame_count += 1
            await asyncio.sleep(self._interval)
        log.info("Frame loop stopped after %d frames", self.frame_count)

    @property
    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Signal the loop to stop after the current frame."""
        self._running = False
