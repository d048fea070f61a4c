"""Range configuration — loads tunable constants from config/range.yaml.

Provides a single ``RangeConfig`` dataclass that is loaded once at startup
and then passed wherever motion bounds or timing are needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from sharpshooter.models.motion import MotionBounds
from sharpshooter.util.constants import (
    DEFAULT_CLICK_MILS,
    DEFAULT_FRAME_INTERVAL_MS,
    DEFAULT_TARGET_RADIUS_M,
    REFERENCE_DISTANCE_M,
)

log = logging.getLogger(__name__)

DEFAULT_RANGE_CONFIG_PATH = "config/range.yaml"


@dataclass
class RangeConfig:
    """All tunable range constants.

    Every field has a default so the range runs even without the file.
    """

    # -- Targets -----------------------------------------------------
    moving_targets: bool = True
    target_radius_m: float = DEFAULT_TARGET_RADIUS_M
    motion_bounds: MotionBounds = field(default_factory=MotionBounds)

    # -- Shooting ----------------------------------------------------
    distance_m: float = REFERENCE_DISTANCE_M
    click_mils: float = DEFAULT_CLICK_MILS

    # -- Timing ------------------------------------------------------
    frame_interval_ms: float = DEFAULT_FRAME_INTERVAL_MS


def load_range_config(path: str | Path = DEFAULT_RANGE_CONFIG_PATH) -> RangeConfig:
    """Load range configuration from a YAML file.

    Missing keys fall back to dataclass defaults. If the file does not
    exist, a warning is logged and pure defaults are returned.

    Raises:
        ValueError: If the motion bounds are inconsistent (min > max).
    """
    p = Path(path)
    if not p.exists():
        log.warning("Range config not found at %s, using defaults", p)
        return RangeConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    log.info("Loaded range config from %s (%d keys)", p, len(raw))

    bounds_raw = raw.pop("motion_bounds", None)
    if isinstance(bounds_raw, dict):
        bounds = MotionBounds(**_known_keys(bounds_raw, MotionBounds, "motion_bounds"))
    else:
        bounds = MotionBounds()

    return RangeConfig(motion_bounds=bounds, **_known_keys(raw, RangeConfig, "range config"))


def _known_keys(raw: dict, cls: type, section: str) -> dict:
    """Drop keys ``cls`` has no field for, warning about each one."""
    unknown = sorted(str(k) for k in raw if k not in cls.__dataclass_fields__)
    if unknown:
        log.warning("Ignoring unknown %s keys: %s", section, ", ".join(unknown))
    return {k: v for k, v in raw.items() if k in cls.__dataclass_fields__}
