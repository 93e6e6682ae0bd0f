from __future__ import annotations

import pytest

from breakout.config import DEFAULT_CONFIG, FieldConfig
from breakout.ecs import World
from breakout.game import Simulation


@pytest.fixture()
def config() -> FieldConfig:
    return DEFAULT_CONFIG


@pytest.fixture()
def world() -> World:
    return World()


@pytest.fixture()
def sim() -> Simulation:
    return Simulation()


@pytest.fixture()
def playing_sim(sim: Simulation) -> Simulation:
    assert sim.start_game()
    return sim
