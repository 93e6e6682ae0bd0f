"""
ECS Systems
============
Functions that operate on entities with matching components.
Each system queries the World for its subject and updates it. A system
with nothing to act on (no paddle, no ball) returns without doing work.
"""

import logging
from typing import List, Optional

from .config import FieldConfig
from .ecs import World
from .components import Position, Size, Velocity, ScoreText, BlockTag
from .entities import get_paddle_entity, get_ball_entity, despawn
from .geometry import Axis, Rect, overlaps, resolve_direction

logger = logging.getLogger(__name__)


def entity_rect(world: World, entity_id: int) -> Rect:
    """Build the collision rectangle of an entity from its Position and Size."""
    pos = world.get_component(entity_id, Position)
    size = world.get_component(entity_id, Size)
    return Rect(pos.x, pos.y, size.width, size.height)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# =============================================================================
# MOVEMENT
# =============================================================================

def paddle_input_system(world: World, config: FieldConfig, dt: float,
                        left_held: bool, right_held: bool):
    """
    Move the paddle from held keys, then clamp it inside the field.

    Opposite keys held together cancel out.
    """
    paddle_id = get_paddle_entity(world)
    if paddle_id is None:
        return

    pos = world.get_component(paddle_id, Position)
    if left_held and not right_held:
        pos.x -= config.paddle_speed * dt
    elif right_held and not left_held:
        pos.x += config.paddle_speed * dt

    bounds = config.paddle_bounds_x
    pos.x = clamp(pos.x, -bounds, bounds)


def movement_system(world: World, dt: float):
    """Integrate velocity into position for every moving entity."""
    for entity_id, pos, vel in world.query(Position, Velocity):
        pos.x += vel.x * dt
        pos.y += vel.y * dt


# =============================================================================
# COLLISION
# =============================================================================

def wall_collision_system(world: World, config: FieldConfig) -> List[Axis]:
    """
    Bounce the ball off the field edges.

    Each axis is checked on its own, so a corner can flip both.
    Returns the axes that were flipped.
    """
    ball_id = get_ball_entity(world)
    if ball_id is None:
        return []

    pos = world.get_component(ball_id, Position)
    vel = world.get_component(ball_id, Velocity)
    flipped = []

    if abs(pos.x) > config.half_width - config.ball_margin:
        vel.x = -vel.x
        flipped.append(Axis.X)
    if abs(pos.y) > config.half_height - config.ball_margin:
        vel.y = -vel.y
        flipped.append(Axis.Y)

    return flipped


def paddle_collision_system(world: World) -> bool:
    """
    Bounce a falling ball off the paddle. Returns True on a bounce.

    Only a ball moving down can hit the paddle, so a ball still inside
    the paddle after bouncing is not bounced back again. Paddle bounces
    are always vertical.
    """
    ball_id = get_ball_entity(world)
    paddle_id = get_paddle_entity(world)
    if ball_id is None or paddle_id is None:
        return False

    vel = world.get_component(ball_id, Velocity)
    if vel.y >= 0:
        return False

    if overlaps(entity_rect(world, ball_id), entity_rect(world, paddle_id)):
        vel.y = -vel.y
        return True
    return False


def block_collision_system(world: World, scoreboard) -> Optional[int]:
    """
    Break the first block the ball overlaps, in spawn order.

    At most one block is destroyed per tick. The block is removed, the
    score goes up by one and the ball bounces on the axis of the side
    it hit. Returns the destroyed block ID, or None.
    """
    ball_id = get_ball_entity(world)
    if ball_id is None:
        return None

    ball_rect = entity_rect(world, ball_id)
    for block_id, _, pos, size in world.query(BlockTag, Position, Size):
        block_rect = Rect(pos.x, pos.y, size.width, size.height)
        if not overlaps(ball_rect, block_rect):
            continue

        scoreboard.increment()
        despawn(world, block_id)

        vel = world.get_component(ball_id, Velocity)
        if resolve_direction(ball_rect, block_rect) is Axis.X:
            vel.x = -vel.x
        else:
            vel.y = -vel.y

        logger.debug(f'Block {block_id} destroyed, score {scoreboard.score}')
        return block_id

    return None


# =============================================================================
# HUD
# =============================================================================

def score_display_system(world: World, scoreboard):
    """Copy the current score into every score text entity."""
    for entity_id, text in world.query(ScoreText):
        text.value = f'Score: {scoreboard.score}'
