"""Formatting utilities for range read-outs."""

from __future__ import annotations

from sharpshooter.models.turret import TurretState


def format_signed(value: float, digits: int = 1) -> str:
    """Format a number with an explicit sign, e.g. ``+0.0`` or ``-2.1``."""
    return f"{value + 0.0:+.{digits}f}"


def format_turret_state(turret: TurretState) -> str:
    """Format dials as ``E: +0.0, W: -2.1``."""
    return f"E: {format_signed(turret.elevation_mils)}, W: {format_signed(turret.windage_mils)}"


def format_offset_cm(meters: float) -> str:
    """Format a metric offset in centimeters."""
    return f"{meters * 100:+.1f} cm"
