"""
Game Flow
==========
The simulation context: world, scoreboard, game phase and the ordered
system pipeline that runs once per tick.

The host calls `Simulation.tick()` once per frame with a `FrameInput`
and reads `Simulation.snapshot()` afterwards to draw.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List, Optional, Tuple

from .config import FieldConfig, DEFAULT_CONFIG
from .ecs import World
from .components import Position, Size, MenuButton, ScoreText, Role
from .entities import (
    spawn_paddle, spawn_ball, spawn_block_grid,
    spawn_menu_button, spawn_score_text,
    despawn_menu, despawn_play_entities, role_of
)
from .geometry import Axis
from .systems import (
    paddle_input_system,
    movement_system,
    wall_collision_system,
    paddle_collision_system,
    block_collision_system,
    score_display_system,
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Top-level game flow states."""
    MENU_SHOWN = auto()
    PLAYING = auto()


class GameEvent(Enum):
    """Discrete flow events, queued and consumed once at the end of a tick."""
    START = auto()
    BALL_LOST = auto()  # reserved for a loss condition, nothing emits it yet


@dataclass(frozen=True)
class FrameInput:
    """Input snapshot the host hands to the simulation each tick."""
    elapsed_seconds: float = 0.0
    left_held: bool = False
    right_held: bool = False
    start_triggered: bool = False


@dataclass
class Scoreboard:
    """Blocks destroyed in the current session."""
    score: int = 0

    def increment(self):
        self.score += 1

    def reset(self):
        self.score = 0


@dataclass
class TickReport:
    """What the collision systems did during one tick."""
    walls_flipped: List[Axis] = field(default_factory=list)
    paddle_bounce: bool = False
    destroyed_block: Optional[int] = None
    phase_changed: bool = False


@dataclass(frozen=True)
class EntityView:
    """Read-only render data for one gameplay entity."""
    entity_id: int
    role: Role
    position: Tuple[float, float]
    size: Tuple[float, float]


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the host needs to draw a frame."""
    phase: GamePhase
    score: int
    entities: Tuple[EntityView, ...]
    score_text: Optional[str] = None
    menu_label: Optional[str] = None


# =============================================================================
# PIPELINE
# =============================================================================

def _input_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    paddle_input_system(sim.world, sim.config, frame.elapsed_seconds,
                        frame.left_held, frame.right_held)


def _movement_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    movement_system(sim.world, frame.elapsed_seconds)


def _wall_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    report.walls_flipped = wall_collision_system(sim.world, sim.config)


def _paddle_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    report.paddle_bounce = paddle_collision_system(sim.world)


def _block_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    report.destroyed_block = block_collision_system(sim.world, sim.scoreboard)


def _score_step(sim: 'Simulation', frame: FrameInput, report: TickReport):
    score_display_system(sim.world, sim.scoreboard)


# Run in this order every tick while playing
PLAYING_PIPELINE = (
    _input_step,
    _movement_step,
    _wall_step,
    _paddle_step,
    _block_step,
    _score_step,
)


# =============================================================================
# SIMULATION
# =============================================================================

class Simulation:
    """Central game state container. Owns everything the systems mutate."""

    def __init__(self, config: FieldConfig = DEFAULT_CONFIG):
        self.config = config
        self.world = World()
        self.scoreboard = Scoreboard()
        self.phase = GamePhase.MENU_SHOWN
        self.events: Deque[GameEvent] = deque()
        self.tick_count = 0

        spawn_menu_button(self.world)

    def post_event(self, event: GameEvent):
        """Queue a flow event for the end of the current (or next) tick."""
        self.events.append(event)

    def tick(self, frame: FrameInput) -> TickReport:
        """Advance the simulation by one frame."""
        if frame.start_triggered:
            self.post_event(GameEvent.START)

        report = TickReport()
        if self.phase is GamePhase.PLAYING:
            for step in PLAYING_PIPELINE:
                step(self, frame, report)

        report.phase_changed = self._process_events()
        self.tick_count += 1
        return report

    def _process_events(self) -> bool:
        """Consume the events queued so far. Returns True if the phase changed."""
        changed = False
        for _ in range(len(self.events)):
            event = self.events.popleft()
            if event is GameEvent.START:
                changed = self.start_game() or changed
            elif event is GameEvent.BALL_LOST:
                self._on_ball_lost()
        return changed

    def start_game(self) -> bool:
        """
        Leave the menu and set up a fresh session.

        Only fires from MENU_SHOWN; returns False (and changes nothing)
        while already playing.
        """
        if self.phase is not GamePhase.MENU_SHOWN:
            logger.debug('Start ignored: already playing')
            return False

        despawn_menu(self.world)
        despawn_play_entities(self.world)

        self.scoreboard.reset()
        spawn_paddle(self.world, self.config)
        spawn_ball(self.world, self.config)
        spawn_block_grid(self.world, self.config)
        spawn_score_text(self.world, self.config)

        self.phase = GamePhase.PLAYING
        logger.info(f'Session started at tick {self.tick_count}')
        return True

    def _on_ball_lost(self):
        # No loss rule yet: the session carries on.
        logger.info(f'Ball lost at tick {self.tick_count}, no loss rule configured')

    def snapshot(self) -> FrameSnapshot:
        """Read-only view of the world for rendering, taken after a tick."""
        views = []
        for entity_id, pos, size in self.world.query(Position, Size):
            role = role_of(self.world, entity_id)
            if role is None:
                continue
            views.append(EntityView(entity_id, role, (pos.x, pos.y),
                                    (size.width, size.height)))

        score_text = None
        for _, text in self.world.query(ScoreText):
            score_text = text.value
        menu_label = None
        for _, button in self.world.query(MenuButton):
            menu_label = button.label

        return FrameSnapshot(
            phase=self.phase,
            score=self.scoreboard.score,
            entities=tuple(views),
            score_text=score_text,
            menu_label=menu_label,
        )
