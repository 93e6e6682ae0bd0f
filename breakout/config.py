"""
Field Configuration
====================
Play-field dimensions and tuning constants. All values are in world
units, with the origin at the centre of the field and +y pointing up.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# CONSTANTS
# =============================================================================

FIELD_WIDTH = 380.0
FIELD_HEIGHT = 640.0

PADDLE_SPEED = 190.0  # units/second
PADDLE_WIDTH = 38.0
PADDLE_HEIGHT = 10.0
PADDLE_FLOOR_OFFSET = 25.0  # paddle centre above the bottom edge

BALL_SIZE = 10.0
BALL_MARGIN = 5.0
BALL_START = (0.0, -200.0)
BALL_START_VELOCITY = (190.0, 190.0)

BLOCK_WIDTH = 20.0
BLOCK_HEIGHT = 10.0
BLOCK_GAP_FACTOR = 1.0
BLOCK_GRID_HEIGHT_FRACTION = 0.25  # share of the field height the grid may fill
BLOCK_GRID_TOP_OFFSET = 40.0  # space between the top edge and the first row


@dataclass(frozen=True)
class FieldConfig:
    """Immutable bundle of field constants passed through every system."""
    field_width: float = FIELD_WIDTH
    field_height: float = FIELD_HEIGHT
    paddle_speed: float = PADDLE_SPEED
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_floor_offset: float = PADDLE_FLOOR_OFFSET
    ball_size: float = BALL_SIZE
    ball_margin: float = BALL_MARGIN
    ball_start: Tuple[float, float] = BALL_START
    ball_start_velocity: Tuple[float, float] = BALL_START_VELOCITY
    block_width: float = BLOCK_WIDTH
    block_height: float = BLOCK_HEIGHT
    block_gap_factor: float = BLOCK_GAP_FACTOR
    grid_height_fraction: float = BLOCK_GRID_HEIGHT_FRACTION
    grid_top_offset: float = BLOCK_GRID_TOP_OFFSET

    def __post_init__(self):
        for name in ('field_width', 'field_height', 'paddle_width',
                     'paddle_height', 'ball_size', 'block_width', 'block_height'):
            if getattr(self, name) <= 0:
                raise ValueError(f'{name} must be positive, got {getattr(self, name)}')
        if self.paddle_width > self.field_width:
            raise ValueError(
                f'paddle_width {self.paddle_width} exceeds field_width {self.field_width}'
            )
        if self.block_gap_factor < 0:
            raise ValueError('block_gap_factor must not be negative')

    @property
    def half_width(self) -> float:
        return self.field_width / 2

    @property
    def half_height(self) -> float:
        return self.field_height / 2

    @property
    def paddle_bounds_x(self) -> float:
        """Largest distance the paddle centre may sit from the field centre."""
        return self.field_width / 2 - self.paddle_width / 2

    @property
    def paddle_start(self) -> Tuple[float, float]:
        return (0.0, -self.half_height + self.paddle_floor_offset)

    @property
    def block_gap(self) -> Tuple[float, float]:
        """Horizontal and vertical spacing between neighbouring blocks."""
        return (self.block_width * self.block_gap_factor,
                self.block_height * self.block_gap_factor)


DEFAULT_CONFIG = FieldConfig()
