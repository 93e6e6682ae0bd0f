#!/usr/bin/env python3
"""
BREAKOUT - Terminal Host
=========================
Drives the simulation from a blessed terminal at a fixed frame rate.

Controls:
    LEFT/RIGHT or A/D   - Move paddle
    ENTER/SPACE         - Start
    Q/ESC               - Quit

Set BREAKOUT_LOG to a file path to write a log of the session.
"""

import logging
import os
import sys
import time

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .components import Renderable
from .controls import InputHandler
from .engine import GameRenderer, GRAY_MED, NEON_CYAN, NEON_GREEN, NEON_YELLOW, WHITE
from .game import Simulation, GamePhase
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

TARGET_FPS = 60
FRAME_TIME = 1.0 / TARGET_FPS
MIN_WIDTH = 40
MIN_HEIGHT = 20

TITLE_ART = [
    r" ___ ___ ___   _   _  _____  _   _ _____ ",
    r"| _ ) _ \ __| /_\ | |/ / _ \| | | |_   _|",
    r"| _ \   / _| / _ \| ' < (_) | |_| | | |  ",
    r"|___/_|_\___/_/ \_\_|\_\___/ \___/  |_|  ",
]


# =============================================================================
# RENDERING
# =============================================================================

def render_menu(renderer: GameRenderer, label: str, frame: int):
    """Title art plus a blinking start button."""
    art_y = max(1, renderer.height // 2 - 5)
    if renderer.width >= len(TITLE_ART[0]):
        for i, line in enumerate(TITLE_ART):
            color = NEON_CYAN if i % 2 == 0 else NEON_YELLOW
            renderer.put_centered(art_y + i, line, color)
    else:
        renderer.put_centered(art_y, 'BREAKOUT', NEON_CYAN)

    if (frame // 30) % 2 == 0:
        renderer.put_centered(art_y + len(TITLE_ART) + 2, f'[ {label} ]', NEON_GREEN)
    renderer.put_centered(art_y + len(TITLE_ART) + 4, 'ENTER/SPACE - Start', GRAY_MED)
    renderer.put_centered(art_y + len(TITLE_ART) + 5, 'ARROWS/A D - Move   Q - Quit', GRAY_MED)


def render_playing(renderer: GameRenderer, sim: Simulation):
    """Field border, every gameplay entity and the score line."""
    snapshot = sim.snapshot()
    renderer.draw_border()
    for view in snapshot.entities:
        rend = sim.world.get_component(view.entity_id, Renderable)
        if rend is None or not rend.visible:
            continue
        renderer.draw_rect(view.position[0], view.position[1],
                           view.size[0], view.size[1], rend.char, rend.color)

    score_text = snapshot.score_text or f'Score: {snapshot.score}'
    renderer.put_centered(renderer.hud_row, score_text, WHITE)


class GameHost:
    """Owns the terminal side: input handler, renderer and the simulation."""

    def __init__(self, term: Terminal):
        self.term = term
        self.sim = Simulation()
        self.renderer = GameRenderer(term, self.sim.config.field_width,
                                     self.sim.config.field_height)
        self.input_handler = InputHandler()
        self.running = True
        self.frame = 0

    def handle_input(self):
        """Drain all pending input from the terminal."""
        key = self.term.inkey(timeout=0)
        while key:
            self.input_handler.process_key(key)
            key = self.term.inkey(timeout=0)

        if self.input_handler.consume_quit():
            self.running = False

    def update(self, dt: float):
        """Run one fixed-timestep tick."""
        self.frame += 1
        self.sim.tick(self.input_handler.frame_input(dt))
        self.input_handler.update()

    def render(self):
        if (self.term.width, self.term.height) != (self.renderer.width, self.renderer.height):
            self.renderer.resize(self.term.width, self.term.height)
            print(self.term.home + self.term.clear, end='', flush=True)

        self.renderer.begin_frame()
        if self.sim.phase is GamePhase.MENU_SHOWN:
            label = self.sim.snapshot().menu_label or 'PLAY'
            render_menu(self.renderer, label, self.frame)
        else:
            render_playing(self.renderer, self.sim)

        output = self.renderer.end_frame()
        if output:
            print(output, end='', flush=True)


# =============================================================================
# MAIN LOOP
# =============================================================================

def main():
    """Entry point. Sets up terminal and runs the 60 FPS game loop."""
    setup_logging(logging.INFO, log_file=os.environ.get('BREAKOUT_LOG'), console=False)

    term = Terminal()

    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        sys.exit(1)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        host = GameHost(term)
        logger.info(f'Terminal {term.width}x{term.height}, viewport '
                    f'{host.renderer.viewport.cols}x{host.renderer.viewport.rows}')

        last_time = time.perf_counter()
        accumulator = 0.0

        print(term.home + term.clear, end='', flush=True)

        while host.running:
            now = time.perf_counter()
            delta = now - last_time
            last_time = now

            # Clamp delta to prevent spiral of death
            delta = min(delta, FRAME_TIME * 5)
            accumulator += delta

            host.handle_input()

            ticks = 0
            while accumulator >= FRAME_TIME and ticks < 4:
                host.update(FRAME_TIME)
                accumulator -= FRAME_TIME
                ticks += 1

            host.render()

            elapsed = time.perf_counter() - now
            sleep_time = FRAME_TIME - elapsed
            if sleep_time > 0.001:
                time.sleep(sleep_time * 0.9)

        print(term.normal, end='', flush=True)
        logger.info(f'Quit with score {host.sim.scoreboard.score}')


if __name__ == '__main__':
    main()
