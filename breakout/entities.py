"""
Entity Factories
=================
Spawning and lookup for the paddle, ball, block grid and menu/HUD entities.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .config import FieldConfig
from .ecs import World
from .components import (
    Position, Size, Velocity, Renderable,
    MenuButton, ScoreText,
    Role, ROLE_TAGS, PaddleTag, BallTag, BlockTag
)
from .engine import NEON_CYAN, NEON_MAGENTA, NEON_YELLOW, NEON_GREEN, WHITE

logger = logging.getLogger(__name__)


# Block colors cycle per row, top row first
_ROW_COLORS = [NEON_MAGENTA, NEON_CYAN, NEON_GREEN, NEON_YELLOW]


def spawn(world: World, role: Role, position: Tuple[float, float],
          size: Tuple[float, float],
          velocity: Optional[Tuple[float, float]] = None) -> int:
    """Create an entity with a rectangle, a role tag and optionally a velocity."""
    entity_id = world.create_entity()
    world.add_component(entity_id, Position(*position))
    world.add_component(entity_id, Size(*size))
    if velocity is not None:
        world.add_component(entity_id, Velocity(*velocity))
    world.add_component(entity_id, ROLE_TAGS[role]())
    return entity_id


def despawn(world: World, entity_id: int) -> None:
    """Remove an entity. Despawning an unknown ID is a no-op."""
    world.destroy_entity(entity_id)


def query_role(world: World, role: Role) -> Iterator[Tuple[int, Position, Size]]:
    """Yield (entity_id, Position, Size) for every entity with the given role."""
    for entity_id, _, pos, size in world.query(ROLE_TAGS[role], Position, Size):
        yield entity_id, pos, size


def role_of(world: World, entity_id: int) -> Optional[Role]:
    """Return the role of an entity, or None for role-less (UI) entities."""
    for role, tag in ROLE_TAGS.items():
        if world.has_component(entity_id, tag):
            return role
    return None


def get_paddle_entity(world: World) -> Optional[int]:
    """Get the paddle entity ID, or None while there is no paddle."""
    for entity_id, _ in world.query(PaddleTag):
        return entity_id
    return None


def get_ball_entity(world: World) -> Optional[int]:
    """Get the ball entity ID, or None while there is no ball."""
    for entity_id, _ in world.query(BallTag):
        return entity_id
    return None


# =============================================================================
# PLAY ENTITIES
# =============================================================================

def spawn_paddle(world: World, config: FieldConfig) -> int:
    entity_id = spawn(world, Role.PADDLE, config.paddle_start,
                      (config.paddle_width, config.paddle_height))
    world.add_component(entity_id, Renderable(char='=', color=WHITE))
    return entity_id


def spawn_ball(world: World, config: FieldConfig) -> int:
    entity_id = spawn(world, Role.BALL, config.ball_start,
                      (config.ball_size, config.ball_size),
                      velocity=config.ball_start_velocity)
    world.add_component(entity_id, Renderable(char='o', color=NEON_YELLOW))
    return entity_id


def grid_dimensions(config: FieldConfig) -> Tuple[int, int]:
    """
    Number of (rows, columns) of blocks that fit the field.

    Columns fill the field width with one gap of padding on the outside;
    rows fill the configured share of the field height.
    """
    gap_x, gap_y = config.block_gap
    columns = int((config.field_width - gap_x) // (config.block_width + gap_x))
    grid_height = config.field_height * config.grid_height_fraction
    rows = int((grid_height + gap_y) // (config.block_height + gap_y))
    return max(rows, 0), max(columns, 0)


def block_layout(config: FieldConfig) -> List[Tuple[int, int, float, float]]:
    """Return (row, column, x, y) for every grid cell, top row first."""
    rows, columns = grid_dimensions(config)
    gap_x, gap_y = config.block_gap
    pitch_x = config.block_width + gap_x
    pitch_y = config.block_height + gap_y

    total_width = columns * config.block_width + (columns - 1) * gap_x
    first_x = -total_width / 2 + config.block_width / 2
    first_y = config.half_height - config.grid_top_offset - config.block_height / 2

    layout = []
    for row in range(rows):
        for column in range(columns):
            layout.append((row, column,
                           first_x + column * pitch_x,
                           first_y - row * pitch_y))
    return layout


def spawn_block_grid(world: World, config: FieldConfig) -> List[int]:
    """Spawn one block per grid cell. Returns the block IDs in spawn order."""
    block_ids = []
    size = (config.block_width, config.block_height)
    for row, column, x, y in block_layout(config):
        entity_id = spawn(world, Role.BLOCK, (x, y), size)
        tag = world.get_component(entity_id, BlockTag)
        tag.row = row
        tag.column = column
        world.add_component(entity_id, Renderable(
            char='#', color=_ROW_COLORS[row % len(_ROW_COLORS)]
        ))
        block_ids.append(entity_id)
    logger.debug(f'Spawned {len(block_ids)} blocks')
    return block_ids


# =============================================================================
# UI ENTITIES
# =============================================================================

def spawn_menu_button(world: World) -> int:
    entity_id = world.create_entity()
    world.add_component(entity_id, Position(0.0, 0.0))
    world.add_component(entity_id, MenuButton())
    return entity_id


def spawn_score_text(world: World, config: FieldConfig) -> int:
    entity_id = world.create_entity()
    world.add_component(entity_id, Position(0.0, config.half_height))
    world.add_component(entity_id, ScoreText())
    return entity_id


def despawn_menu(world: World) -> None:
    for entity_id in list(world.get_entities_with(MenuButton)):
        despawn(world, entity_id)


def despawn_play_entities(world: World) -> None:
    """Remove the paddle, ball, blocks and score text."""
    doomed = set(world.get_entities_with(ScoreText))
    for role in Role:
        doomed.update(world.get_entities_with(ROLE_TAGS[role]))
    for entity_id in doomed:
        despawn(world, entity_id)
