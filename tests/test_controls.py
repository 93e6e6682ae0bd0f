from __future__ import annotations

from blessed.keyboard import Keystroke

from breakout.controls import InputHandler

LEFT = Keystroke('\x1b[D', code=260, name='KEY_LEFT')
RIGHT = Keystroke('\x1b[C', code=261, name='KEY_RIGHT')
ENTER = Keystroke('\n', code=343, name='KEY_ENTER')
ESCAPE = Keystroke('\x1b', code=361, name='KEY_ESCAPE')


def test_arrow_press_holds_for_duration() -> None:
    handler = InputHandler(hold_duration=3)
    handler.process_key(LEFT)

    for _ in range(3):
        frame = handler.frame_input(0.1)
        assert frame.left_held and not frame.right_held
        handler.update()

    assert not handler.frame_input(0.1).left_held


def test_letter_keys_move_too() -> None:
    handler = InputHandler()
    handler.process_key(Keystroke('D'))
    assert handler.frame_input(0.1).right_held
    handler.process_key(Keystroke('a'))
    frame = handler.frame_input(0.1)
    assert frame.left_held and not frame.right_held


def test_new_direction_replaces_old_hold() -> None:
    handler = InputHandler()
    handler.process_key(LEFT)
    handler.process_key(RIGHT)
    frame = handler.frame_input(0.1)
    assert frame.right_held and not frame.left_held


def test_start_is_one_shot() -> None:
    handler = InputHandler()
    handler.process_key(ENTER)
    assert handler.frame_input(0.1).start_triggered
    assert not handler.frame_input(0.1).start_triggered

    handler.process_key(Keystroke(' '))
    assert handler.frame_input(0.1).start_triggered


def test_quit_keys() -> None:
    handler = InputHandler()
    handler.process_key(Keystroke('q'))
    assert handler.consume_quit()
    assert not handler.consume_quit()
    handler.process_key(ESCAPE)
    assert handler.consume_quit()


def test_empty_and_unknown_keys_ignored() -> None:
    handler = InputHandler()
    handler.process_key(Keystroke(''))
    handler.process_key(None)
    handler.process_key(Keystroke('x'))
    frame = handler.frame_input(0.25)
    assert frame.elapsed_seconds == 0.25
    assert not (frame.left_held or frame.right_held or frame.start_triggered)
