"""
Controls
=========
Turns terminal key presses into the per-tick `FrameInput` snapshot.
"""

from typing import Dict

from .game import FrameInput


_LEFT_KEYS = ('a',)
_RIGHT_KEYS = ('d',)
_LEFT_NAMES = ('KEY_LEFT',)
_RIGHT_NAMES = ('KEY_RIGHT',)
_START_NAMES = ('KEY_ENTER',)


class InputHandler:
    """
    Handles paddle input with key hold detection.

    Uses frame-based timers to simulate key hold in terminals
    that don't support key-up events: each press (or auto-repeat)
    keeps the direction held for `hold_duration` frames.
    """

    def __init__(self, hold_duration: int = 8):
        self.keys_held: Dict[str, int] = {}  # 'left'/'right' -> frames remaining
        self.hold_duration = hold_duration

        # Actions triggered this frame (consumed on read)
        self._start_triggered = False
        self._quit_triggered = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        key_str = key.lower() if not key.is_sequence else ''
        name = key.name if key.is_sequence else None

        if key_str == 'q' or name == 'KEY_ESCAPE':
            self._quit_triggered = True
            return

        if key_str in _LEFT_KEYS or name in _LEFT_NAMES:
            self.keys_held['left'] = self.hold_duration
            # A fresh press overrides a stale hold in the other direction
            self.keys_held.pop('right', None)
        elif key_str in _RIGHT_KEYS or name in _RIGHT_NAMES:
            self.keys_held['right'] = self.hold_duration
            self.keys_held.pop('left', None)
        elif key_str == ' ' or name in _START_NAMES:
            self._start_triggered = True

    def is_held(self, direction: str) -> bool:
        return self.keys_held.get(direction, 0) > 0

    def consume_start(self) -> bool:
        triggered = self._start_triggered
        self._start_triggered = False
        return triggered

    def consume_quit(self) -> bool:
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered

    def frame_input(self, elapsed_seconds: float) -> FrameInput:
        """Build this tick's snapshot and consume the one-shot start trigger."""
        return FrameInput(
            elapsed_seconds=elapsed_seconds,
            left_held=self.is_held('left'),
            right_held=self.is_held('right'),
            start_triggered=self.consume_start(),
        )

    def update(self) -> None:
        """Decay hold timers by one frame."""
        for direction in list(self.keys_held):
            self.keys_held[direction] -= 1
            if self.keys_held[direction] <= 0:
                del self.keys_held[direction]
