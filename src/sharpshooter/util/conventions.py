"""Sign conventions and coordinate systems — single source of truth.

World coordinates (origin at the target center):

- X: along the flight path, positive toward the target.
- Y: vertical, positive UP.
- Z: lateral, positive RIGHT from the shooter's perspective.

Aim and impact offsets are relative to the target center and carry the
world sign: positive ``aim_y`` is above center, positive ``aim_z`` right
of center. Turret dials shift the point of impact (POI): positive
elevation moves it up (+Y), positive windage moves it right (+Z). One mil
at 100 m is a 0.1 m shift. A positive crosswind blows left to right and
drifts the impact toward +Z.

Canvas coordinates have their origin top-left with X growing right and
Y growing DOWN, so any world → canvas conversion must negate world Y.

The conventions are not enforced on the hot path. They are asserted once,
by tests, and by :func:`check_impact_solver` for ballistic engines that
plug into the range.
"""

from __future__ import annotations

from typing import Protocol

# -- World axes ----------------------------------------------------------

WORLD_X: tuple[float, float, float] = (1.0, 0.0, 0.0)
"""Longitudinal axis, positive toward the target."""

WORLD_Y: tuple[float, float, float] = (0.0, 1.0, 0.0)
"""Vertical axis, positive up."""

WORLD_Z: tuple[float, float, float] = (0.0, 0.0, 1.0)
"""Lateral axis, positive right."""

# -- Signs ---------------------------------------------------------------

AIM_Y_SIGN: int = +1
AIM_Z_SIGN: int = +1
ELEVATION_POI_SIGN: int = +1
WINDAGE_POI_SIGN: int = +1
CROSSWIND_DRIFT_SIGN: int = +1
CANVAS_X_SIGN: int = +1
CANVAS_Y_SIGN: int = -1
"""Canvas Y grows downward, the inverse of world Y."""


def cross(
    a: tuple[float, float, float], b: tuple[float, float, float]
) -> tuple[float, float, float]:
    """Vector cross product ``a × b``."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


# -- Ballistic engine contract -------------------------------------------


class ImpactSolver(Protocol):
    """Anything that maps an aim offset and crosswind to an impact offset."""

    def impact(self, aim_y: float, aim_z: float, wind_mps: float) -> tuple[float, float]:
        ...


def check_impact_solver(
    solver: ImpactSolver,
    aim_offset_m: float = 0.1,
    wind_mps: float = 5.0,
    tolerance: float = 1e-3,
) -> list[str]:
    """Probe a ballistic engine against the sign conventions.

    Returns a list of violation messages; an empty list means the solver
    honours every convention that is observable through its interface.
    """
    violations: list[str] = []

    # Zero wind: lateral aim passes through with its sign.
    _, z = solver.impact(0.0, aim_offset_m, 0.0)
    if abs(z - AIM_Z_SIGN * aim_offset_m) > tolerance:
        violations.append(
            f"aim_z={aim_offset_m:+} with no wind landed at impact_z={z:+.4f}"
        )

    y_low, _ = solver.impact(0.0, 0.0, 0.0)
    y_high, _ = solver.impact(aim_offset_m, 0.0, 0.0)
    if not y_high > y_low:
        violations.append("raising aim_y did not raise impact_y")

    _, z_left = solver.impact(0.0, -aim_offset_m, 0.0)
    _, z_right = solver.impact(0.0, aim_offset_m, 0.0)
    if not z_right > z_left:
        violations.append("moving aim_z right did not move impact_z right")

    _, z_calm = solver.impact(0.0, 0.0, 0.0)
    _, z_pos = solver.impact(0.0, 0.0, wind_mps)
    _, z_neg = solver.impact(0.0, 0.0, -wind_mps)
    if not CROSSWIND_DRIFT_SIGN * (z_pos - z_calm) > 0:
        violations.append(f"crosswind {wind_mps:+} m/s did not drift impact right")
    if not CROSSWIND_DRIFT_SIGN * (z_neg - z_calm) < 0:
        violations.append(f"crosswind {-wind_mps:+} m/s did not drift impact left")

    _, z_strong = solver.impact(0.0, 0.0, 2.0 * wind_mps)
    if not z_strong > z_pos:
        violations.append("stronger crosswind did not drift impact further right")

    return violations
