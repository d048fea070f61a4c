"""Seeded linear congruential generator.

Every draw depends only on the previous state, so a given seed always
yields the same sequence. No wall clock or OS entropy is read here.
"""

from __future__ import annotations

from sharpshooter.util.constants import (
    LCG_FIXED_POINT,
    LCG_INCREMENT,
    LCG_MODULUS,
    LCG_MULTIPLIER,
)


def _safe_state(state: int) -> int:
    """Replace the two degenerate states with 1.

    From 0 the sequence would restart at the increment, and
    ``LCG_FIXED_POINT`` maps onto itself forever.
    """
    if state == 0 or state == LCG_FIXED_POINT:
        return 1
    return state


class Lcg:
    """``state' = (state * 16807 + 12345) mod (2**31 - 1)``.

    The degenerate-state guard runs before every draw, not only on the
    seed, so a sequence passing through 0 continues as if seeded with 1.

    Args:
        seed: Any integer. Its absolute value is the initial state.
    """

    def __init__(self, seed: int) -> None:
        self.state = abs(int(seed))

    def next(self) -> float:
        """Advance and return a float in [0, 1)."""
        self.state = (_safe_state(self.state) * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def range(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi)."""
        return lo + self.next() * (hi - lo)

    def symmetric_range(self, spread: float) -> float:
        return self.range(-spread, spread)
