from __future__ import annotations

from breakout.engine import Cell, FieldViewport, fit_viewport


def test_fit_viewport_keeps_aspect_on_standard_terminal() -> None:
    vp = fit_viewport(380.0, 640.0, 80, 24)
    assert (vp.cols, vp.rows) == (24, 20)
    assert (vp.left, vp.top) == (28, 1)


def test_fit_viewport_narrow_terminal_limits_columns() -> None:
    vp = fit_viewport(380.0, 640.0, 20, 60)
    assert vp.cols == 18
    assert vp.rows == 15


def test_to_cell_maps_corners_and_centre() -> None:
    vp = FieldViewport(380.0, 640.0, cols=24, rows=20, left=28, top=1)
    assert vp.to_cell(-190.0, 320.0) == (28, 1)
    assert vp.to_cell(190.0, -320.0) == (51, 20)
    assert vp.to_cell(0.0, 0.0) == (40, 11)


def test_to_cell_clamps_outside_points() -> None:
    vp = FieldViewport(100.0, 100.0, cols=10, rows=10)
    assert vp.to_cell(-1000.0, 1000.0) == (0, 0)
    assert vp.to_cell(1000.0, -1000.0) == (9, 9)


def test_rect_cells_spans_rectangle() -> None:
    vp = FieldViewport(100.0, 100.0, cols=10, rows=10)
    assert vp.rect_cells(0.0, 0.0, 20.0, 20.0) == (4, 4, 6, 6)


def test_cell_matches_and_reset() -> None:
    a = Cell('#', 51)
    b = Cell('#', 51)
    assert a.matches(b)
    a.reset()
    assert not a.matches(b)
    assert a.char == ' '
