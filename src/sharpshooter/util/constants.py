"""Range constants — units, default motion bounds, turret geometry.

All magic numbers of the simulation, centralized here.
"""

import math

# -- Units ---------------------------------------------------------------

MS_PER_SECOND: float = 1000.0
"""Game time is supplied in milliseconds; phase math runs in seconds."""

TWO_PI: float = 2.0 * math.pi

# -- Moving targets ------------------------------------------------------

DEFAULT_MIN_SPEED: float = 2.0
"""Lower bound for generated oscillation speed (cycles per second)."""

DEFAULT_MAX_SPEED: float = 5.0
"""Upper bound for generated oscillation speed (cycles per second)."""

DEFAULT_MIN_AMPLITUDE_M: float = 0.08
"""Lower bound for generated amplitude in meters (half peak-to-peak travel)."""

DEFAULT_MAX_AMPLITUDE_M: float = 0.2
"""Upper bound for generated amplitude in meters."""

DEFAULT_TARGET_RADIUS_M: float = 0.1
"""Hit radius of a spawned target."""

# -- Seeded generator (Park-Miller modulus) ------------------------------

LCG_MULTIPLIER: int = 16807
LCG_INCREMENT: int = 12345
LCG_MODULUS: int = 2147483647

LCG_FIXED_POINT: int = 1700123165
"""State with ``s * 16807 + 12345 ≡ s (mod 2**31 - 1)``; never drawn from."""

# -- Turret --------------------------------------------------------------

METERS_PER_MIL_PER_METER: float = 0.001
"""One mil subtends 1 mm per meter of distance (0.1 m at 100 m)."""

REFERENCE_DISTANCE_M: float = 100.0
DEFAULT_CLICK_MILS: float = 0.1
"""Turret click size in mils."""

# -- Frame loop ----------------------------------------------------------

DEFAULT_FRAME_INTERVAL_MS: float = 16.0
