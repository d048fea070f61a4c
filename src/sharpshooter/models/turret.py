"""Turret dial state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TurretState:
    """Scope turret dials in mils.

    Attributes:
        elevation_mils: Positive shifts the point of impact up.
        windage_mils: Positive shifts the point of impact right.
    """

    elevation_mils: float = 0.0
    windage_mils: float = 0.0
