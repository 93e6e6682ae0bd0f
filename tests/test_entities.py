from __future__ import annotations

import pytest

from breakout.components import (
    BlockTag, MenuButton, Position, Role, ScoreText, Size, Velocity
)
from breakout.config import FieldConfig
from breakout.ecs import World
from breakout.entities import (
    block_layout, despawn, despawn_play_entities, get_ball_entity,
    get_paddle_entity, grid_dimensions, query_role, role_of, spawn,
    spawn_ball, spawn_block_grid, spawn_menu_button, spawn_paddle,
    spawn_score_text
)


def test_spawn_attaches_rect_role_and_optional_velocity(world: World) -> None:
    block = spawn(world, Role.BLOCK, (1.0, 2.0), (20.0, 10.0))
    ball = spawn(world, Role.BALL, (0.0, 0.0), (10.0, 10.0), velocity=(3.0, -4.0))

    assert world.get_component(block, Position) == Position(1.0, 2.0)
    assert world.get_component(block, Size) == Size(20.0, 10.0)
    assert world.get_component(block, Velocity) is None
    assert world.get_component(ball, Velocity) == Velocity(3.0, -4.0)
    assert role_of(world, block) is Role.BLOCK
    assert role_of(world, ball) is Role.BALL


def test_despawn_unknown_id_is_noop(world: World) -> None:
    entity_id = spawn(world, Role.PADDLE, (0.0, 0.0), (38.0, 10.0))
    despawn(world, entity_id)
    despawn(world, entity_id)
    despawn(world, 999)
    assert get_paddle_entity(world) is None


def test_query_role_filters_by_role(world: World) -> None:
    spawn(world, Role.PADDLE, (0.0, 0.0), (38.0, 10.0))
    blocks = [spawn(world, Role.BLOCK, (float(i), 0.0), (20.0, 10.0)) for i in range(3)]

    assert [eid for eid, _, _ in query_role(world, Role.BLOCK)] == blocks
    assert list(query_role(world, Role.BALL)) == []


def test_missing_subjects_are_none(world: World) -> None:
    assert get_paddle_entity(world) is None
    assert get_ball_entity(world) is None


def test_paddle_and_ball_start_positions(world: World, config: FieldConfig) -> None:
    paddle = spawn_paddle(world, config)
    ball = spawn_ball(world, config)

    assert world.get_component(paddle, Position) == Position(0.0, -295.0)
    assert world.get_component(paddle, Size) == Size(38.0, 10.0)
    assert world.get_component(ball, Position) == Position(0.0, -200.0)
    assert world.get_component(ball, Velocity) == Velocity(190.0, 190.0)


def test_default_grid_dimensions(config: FieldConfig) -> None:
    assert grid_dimensions(config) == (8, 9)


def test_grid_gap_factor_changes_layout() -> None:
    tight = FieldConfig(block_gap_factor=0.0)
    # 380 // 20 columns, (160) // 10 rows
    assert grid_dimensions(tight) == (16, 19)


def test_block_layout_fits_field_and_is_unique(config: FieldConfig) -> None:
    layout = block_layout(config)
    rows, columns = grid_dimensions(config)
    assert len(layout) == rows * columns
    assert len({(row, col) for row, col, _, _ in layout}) == len(layout)
    assert len({(x, y) for _, _, x, y in layout}) == len(layout)

    for _, _, x, y in layout:
        assert abs(x) + config.block_width / 2 <= config.half_width
        assert y + config.block_height / 2 <= config.half_height
        assert y > 0

    xs = sorted({x for _, _, x, _ in layout})
    assert xs[0] == pytest.approx(-xs[-1])


def test_spawn_block_grid_tags_cells(world: World, config: FieldConfig) -> None:
    ids = spawn_block_grid(world, config)
    assert len(ids) == 72
    first = world.get_component(ids[0], BlockTag)
    last = world.get_component(ids[-1], BlockTag)
    assert (first.row, first.column) == (0, 0)
    assert (last.row, last.column) == (7, 8)


def test_despawn_play_entities_keeps_menu(world: World, config: FieldConfig) -> None:
    menu = spawn_menu_button(world)
    spawn_paddle(world, config)
    spawn_ball(world, config)
    spawn_block_grid(world, config)
    spawn_score_text(world, config)

    despawn_play_entities(world)

    assert world.entity_count() == 1
    assert world.has_component(menu, MenuButton)
    assert list(world.query(ScoreText)) == []
