"""
Rendering Engine
=================
Double-buffered terminal renderer that maps the play field onto
character cells.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


# ANSI 256 color constants
NEON_CYAN = 51
NEON_MAGENTA = 201
NEON_YELLOW = 226
NEON_GREEN = 46

GRAY_MED = 245
GRAY_DARK = 238

WHITE = 255


@dataclass
class Cell:
    """A single cell in the render buffer."""
    char: str = ' '
    fg_color: int = 7

    def matches(self, other: 'Cell') -> bool:
        """Check if two cells are visually identical."""
        return self.char == other.char and self.fg_color == other.fg_color

    def reset(self):
        """Reset to empty state."""
        self.char = ' '
        self.fg_color = 7


class DoubleBuffer:
    """
    Double-buffered terminal renderer.

    Writes to a back buffer, then swaps to front buffer,
    only updating cells that changed. No screen clears needed.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self.width = term.width
        self.height = term.height
        self.front: List[List[Cell]] = []
        self.back: List[List[Cell]] = []
        self._init_buffers()
        self._normal = term.normal  # Cache reset sequence

    def _init_buffers(self):
        self.front = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        self.back = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def resize(self, width: int, height: int):
        """Handle terminal resize."""
        self.width = width
        self.height = height
        self._init_buffers()

    def clear_back(self):
        """Clear the back buffer by resetting cells in-place."""
        for row in self.back:
            for cell in row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        """Put a character in the back buffer at exact position."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        """Put a string in the back buffer."""
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color)

    def present(self) -> str:
        """Swap buffers and generate output for changed cells only."""
        output_parts = []
        normal = self._normal

        for y in range(self.height):
            for x in range(self.width):
                back_cell = self.back[y][x]
                if back_cell.matches(self.front[y][x]):
                    continue
                output_parts.append(self.term.move_xy(x, y))
                output_parts.append(normal)
                output_parts.append(self.term.color(back_cell.fg_color))
                output_parts.append(back_cell.char or ' ')

        self.front, self.back = self.back, self.front
        return ''.join(output_parts)


@dataclass
class FieldViewport:
    """
    Maps world coordinates (origin at field centre, +y up) onto a block
    of terminal cells (origin top-left, +row down).
    """
    field_width: float
    field_height: float
    cols: int
    rows: int
    left: int = 0
    top: int = 0

    def to_cell(self, x: float, y: float) -> Tuple[int, int]:
        """Cell (col, row) containing world point (x, y), clamped to the viewport."""
        col = int((x + self.field_width / 2) / self.field_width * self.cols)
        row = int((self.field_height / 2 - y) / self.field_height * self.rows)
        col = max(0, min(self.cols - 1, col))
        row = max(0, min(self.rows - 1, row))
        return self.left + col, self.top + row

    def rect_cells(self, x: float, y: float, width: float,
                   height: float) -> Tuple[int, int, int, int]:
        """Cell span (col0, row0, col1, row1) covered by a centred rectangle, inclusive."""
        col0, row0 = self.to_cell(x - width / 2, y + height / 2)
        col1, row1 = self.to_cell(x + width / 2, y - height / 2)
        return col0, row0, col1, row1


def fit_viewport(field_width: float, field_height: float,
                 term_width: int, term_height: int,
                 reserved_rows: int = 2) -> FieldViewport:
    """
    Largest viewport that keeps the field's aspect ratio on screen.

    Terminal cells are about twice as tall as they are wide, so one row
    covers twice the world height that one column covers width.
    """
    avail_cols = max(1, term_width - 2)
    avail_rows = max(1, term_height - reserved_rows - 2)

    rows = avail_rows
    cols = int(round(rows * 2 * field_width / field_height))
    if cols > avail_cols:
        cols = avail_cols
        rows = max(1, int(round(cols * field_height / (2 * field_width))))

    left = (term_width - cols) // 2
    top = 1
    return FieldViewport(field_width, field_height, cols, rows, left, top)


@dataclass
class GameRenderer:
    """High-level renderer: field border, rectangles and HUD rows."""
    term: Terminal
    field_width: float
    field_height: float
    buffer: DoubleBuffer = field(init=False)
    viewport: FieldViewport = field(init=False)

    def __post_init__(self):
        self.buffer = DoubleBuffer(self.term)
        self.viewport = fit_viewport(self.field_width, self.field_height,
                                     self.term.width, self.term.height)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def begin_frame(self):
        self.buffer.clear_back()

    def end_frame(self) -> str:
        return self.buffer.present()

    def resize(self, width: int, height: int):
        """Handle terminal resize."""
        self.buffer.resize(width, height)
        self.viewport = fit_viewport(self.field_width, self.field_height, width, height)

    def draw_rect(self, x: float, y: float, width: float, height: float,
                  char: str, color: int):
        """Fill the cells covered by a world-space rectangle."""
        col0, row0, col1, row1 = self.viewport.rect_cells(x, y, width, height)
        for row in range(row0, row1 + 1):
            for col in range(col0, col1 + 1):
                self.buffer.put(col, row, char, color)

    def draw_border(self, color: int = GRAY_DARK):
        """Frame the play field one cell outside the viewport."""
        vp = self.viewport
        x0, y0 = vp.left - 1, vp.top - 1
        x1, y1 = vp.left + vp.cols, vp.top + vp.rows
        for x in range(x0, x1 + 1):
            self.buffer.put(x, y0, '-', color)
            self.buffer.put(x, y1, '-', color)
        for y in range(y0 + 1, y1):
            self.buffer.put(x0, y, '|', color)
            self.buffer.put(x1, y, '|', color)

    def put_centered(self, row: int, text: str, color: int = WHITE):
        self.buffer.put_string(self.width // 2 - len(text) // 2, row, text, color)

    @property
    def hud_row(self) -> int:
        """First row below the field border."""
        return self.viewport.top + self.viewport.rows + 1
