"""
Collision Geometry
===================
Axis-aligned rectangle overlap and hit-side classification.

Rectangles are described by their centre and full size. Everything
here is pure: no world access, no mutation.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Axis(Enum):
    """Velocity component a bounce should invert."""
    X = auto()
    Y = auto()


class HitSide(Enum):
    """Face of the obstacle that the moving rectangle struck."""
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    INSIDE = auto()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: centre (x, y) plus full width and height."""
    x: float
    y: float
    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y - self.height / 2

    @property
    def top(self) -> float:
        return self.y + self.height / 2


def overlaps(a: Rect, b: Rect) -> bool:
    """True if the rectangles intersect on both axes (touching edges count)."""
    return (
        a.right >= b.left and b.right >= a.left and
        a.top >= b.bottom and b.top >= a.bottom
    )


def hit_side(moving: Rect, obstacle: Rect) -> Optional[HitSide]:
    """
    Classify which face of `obstacle` the `moving` rectangle hit.

    An axis only yields a side when `moving` straddles exactly one of the
    obstacle's edges on it; the penetration past that edge is the depth.
    When both axes yield a side the shallower one wins, and equal depths
    go to the vertical side. Returns None if there is no overlap.
    """
    if not overlaps(moving, obstacle):
        return None

    x_side = None
    x_depth = 0.0
    if moving.left < obstacle.left <= moving.right < obstacle.right:
        x_side, x_depth = HitSide.LEFT, moving.right - obstacle.left
    elif obstacle.left < moving.left <= obstacle.right < moving.right:
        x_side, x_depth = HitSide.RIGHT, obstacle.right - moving.left

    y_side = None
    y_depth = 0.0
    if moving.bottom < obstacle.bottom <= moving.top < obstacle.top:
        y_side, y_depth = HitSide.BOTTOM, moving.top - obstacle.bottom
    elif obstacle.bottom < moving.bottom <= obstacle.top < moving.top:
        y_side, y_depth = HitSide.TOP, obstacle.top - moving.bottom

    if x_side is None and y_side is None:
        return HitSide.INSIDE
    if x_side is None:
        return y_side
    if y_side is None:
        return x_side
    return x_side if x_depth < y_depth else y_side


def resolve_direction(moving: Rect, obstacle: Rect) -> Axis:
    """
    Pick the velocity axis to invert after `moving` overlapped `obstacle`.

    Top/bottom hits (and the ambiguous inside case) flip Y, left/right
    hits flip X.
    """
    side = hit_side(moving, obstacle)
    if side in (HitSide.LEFT, HitSide.RIGHT):
        return Axis.X
    return Axis.Y
