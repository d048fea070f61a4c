"""Turret dialing — mil clicks and their point-of-impact shift.

At distance D meters, X mils correspond to D * 0.001 * X meters. Signs
follow :mod:`sharpshooter.util.conventions`: positive elevation moves the
point of impact up, positive windage moves it right.
"""

from __future__ import annotations

from sharpshooter.models.turret import TurretState
from sharpshooter.util.constants import DEFAULT_CLICK_MILS, METERS_PER_MIL_PER_METER
from sharpshooter.util.conventions import ELEVATION_POI_SIGN, WINDAGE_POI_SIGN


def quantize_to_click(value: float, click_mils: float = DEFAULT_CLICK_MILS) -> float:
    """Snap a dial value to the nearest whole click."""
    if click_mils <= 0:
        raise ValueError(f"click_mils must be > 0, got {click_mils}")
    return round(value / click_mils) * click_mils


def next_click_value(
    current_mils: float, direction: int, click_mils: float = DEFAULT_CLICK_MILS
) -> float:
    """Dial value one click away from ``current_mils`` in ``direction`` (+1 or -1)."""
    if direction not in (1, -1):
        raise ValueError(f"direction must be +1 or -1, got {direction}")
    quantized = quantize_to_click(current_mils, click_mils)
    return quantize_to_click(quantized + direction * click_mils, click_mils)


def mils_to_meters(distance_m: float, mils: float) -> float:
    return distance_m * METERS_PER_MIL_PER_METER * mils


def meters_to_mils(distance_m: float, meters: float) -> float:
    if distance_m == 0:
        raise ValueError("distance_m must be non-zero")
    return meters / (distance_m * METERS_PER_MIL_PER_METER)


def apply_turret_offset(
    aim_y: float, aim_z: float, turret: TurretState, distance_m: float
) -> tuple[float, float]:
    """Shift an aim offset by the turret dials.

    Returns:
        The adjusted ``(aim_y, aim_z)`` in meters relative to target center.
    """
    adjusted_y = aim_y + ELEVATION_POI_SIGN * mils_to_meters(distance_m, turret.elevation_mils)
    adjusted_z = aim_z + WINDAGE_POI_SIGN * mils_to_meters(distance_m, turret.windage_mils)
    return adjusted_y, adjusted_z
