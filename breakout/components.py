"""
Component Definitions
======================
All components are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# PHYSICS COMPONENTS
# =============================================================================

@dataclass
class Position:
    """Centre of the entity's rectangle in world units."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Size:
    """Full width and height of the entity's rectangle."""
    width: float = 1.0
    height: float = 1.0


@dataclass
class Velocity:
    """Movement velocity in units per second."""
    x: float = 0.0
    y: float = 0.0


# =============================================================================
# RENDERING COMPONENTS
# =============================================================================

@dataclass
class Renderable:
    """Glyph hint for the terminal host."""
    char: str = '#'
    color: int = 7  # ANSI 256 color
    visible: bool = True


# =============================================================================
# UI COMPONENTS
# =============================================================================

@dataclass
class MenuButton:
    """The start button shown while the menu is up."""
    label: str = 'PLAY'


@dataclass
class ScoreText:
    """Score readout, synced from the scoreboard every tick."""
    value: str = 'Score: 0'


# =============================================================================
# TAG COMPONENTS (empty, used for queries)
# =============================================================================

class Role(Enum):
    """Gameplay role of an entity."""
    PADDLE = auto()
    BALL = auto()
    BLOCK = auto()


@dataclass
class PaddleTag:
    """Marks the paddle entity."""
    pass


@dataclass
class BallTag:
    """Marks the ball entity."""
    pass


@dataclass
class BlockTag:
    """Marks a block entity."""
    row: int = 0
    column: int = 0


ROLE_TAGS = {
    Role.PADDLE: PaddleTag,
    Role.BALL: BallTag,
    Role.BLOCK: BlockTag,
}
