"""World ↔ canvas transform.

Canvas Y grows downward while world Y grows upward, so the vertical axis
is flipped around the canvas height. The horizontal world axis (X in a
side view, Z in a downrange view) maps straight onto canvas X.
"""

from __future__ import annotations

from dataclasses import dataclass

from sharpshooter.util.conventions import CANVAS_X_SIGN, CANVAS_Y_SIGN


@dataclass(frozen=True)
class Viewport:
    """Visible world extent and the canvas it is drawn on."""

    world_width: float
    world_height: float
    canvas_width: float
    canvas_height: float

    def __post_init__(self) -> None:
        for name in ("world_width", "world_height", "canvas_width", "canvas_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")

    @property
    def scale_x(self) -> float:
        return self.canvas_width / self.world_width

    @property
    def scale_y(self) -> float:
        return self.canvas_height / self.world_height


def world_to_canvas(point: tuple[float, float], viewport: Viewport) -> tuple[float, float]:
    """Map a world ``(horizontal, y)`` point to canvas pixels."""
    x, y = point
    return (
        CANVAS_X_SIGN * x * viewport.scale_x,
        viewport.canvas_height + CANVAS_Y_SIGN * y * viewport.scale_y,
    )


def canvas_to_world(point: tuple[float, float], viewport: Viewport) -> tuple[float, float]:
    """Inverse of :func:`world_to_canvas`."""
    cx, cy = point
    return (
        CANVAS_X_SIGN * cx / viewport.scale_x,
        CANVAS_Y_SIGN * (cy - viewport.canvas_height) / viewport.scale_y,
    )
