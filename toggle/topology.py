"""Adjacency on boards whose edges wrap around.

Each board type glues the left/right and top/bottom edges of the board
together (or not) according to an AxisAlignment. That's enough to describe the
plane, cylinders, Mobius strips, the torus, Klein bottles and the projective
plane.
"""

from enum import Enum, auto
from typing import NamedTuple


class AxisAlignment(Enum):
    NONE = auto()
    LINKED = auto()
    REVERSE_LINKED = auto()


class Coordinates(NamedTuple):
    x: int
    y: int


class BoardType(Enum):
    GRID = (AxisAlignment.NONE, AxisAlignment.NONE)
    X_CYLINDER = (AxisAlignment.LINKED, AxisAlignment.NONE)
    Y_CYLINDER = (AxisAlignment.NONE, AxisAlignment.LINKED)
    X_MOBIUS_STRIP = (AxisAlignment.REVERSE_LINKED, AxisAlignment.NONE)
    Y_MOBIUS_STRIP = (AxisAlignment.NONE, AxisAlignment.REVERSE_LINKED)
    TORUS = (AxisAlignment.LINKED, AxisAlignment.LINKED)
    X_KLEIN_BOTTLE = (AxisAlignment.REVERSE_LINKED, AxisAlignment.LINKED)
    Y_KLEIN_BOTTLE = (AxisAlignment.LINKED, AxisAlignment.REVERSE_LINKED)
    PROJECTIVE_PLANE = (AxisAlignment.REVERSE_LINKED, AxisAlignment.REVERSE_LINKED)

    def __init__(self, x_align: AxisAlignment, y_align: AxisAlignment):
        self.x_align = x_align
        self.y_align = y_align

    @property
    def type_name(self) -> str:
        return TYPE_NAMES[self][0]

    @property
    def description(self) -> str:
        return TYPE_NAMES[self][1]

    def convert(self, w: int, h: int, newx: int, newy: int) -> Coordinates | None:
        return convert(self, w, h, newx, newy)

    def adjacencies(self, dims: tuple[int, int], cell: Coordinates) -> set[Coordinates]:
        return adjacencies(self, dims, cell)


TYPE_NAMES = {
    BoardType.GRID: ("Grid", "A standard board that can be embedded in a plane."),
    BoardType.X_CYLINDER: (
        "Horizontal cylinder",
        "A board that can be embedded on a horizontal cylinder.",
    ),
    BoardType.Y_CYLINDER: (
        "Vertical cylinder",
        "A board that can be embedded on a vertical cylinder.",
    ),
    BoardType.X_MOBIUS_STRIP: (
        "Horizontal Mobius strip",
        "A board that can be embedded on a horizontal Mobius strip.",
    ),
    BoardType.Y_MOBIUS_STRIP: (
        "Vertical Mobius strip",
        "A board that can be embedded on a vertical Mobius strip.",
    ),
    BoardType.TORUS: ("Torus", "A board that can be embedded on a torus."),
    BoardType.X_KLEIN_BOTTLE: (
        "Horizontal Klein bottle",
        "A board that can be embedded on a horizontal Klein bottle.",
    ),
    BoardType.Y_KLEIN_BOTTLE: (
        "Vertical Klein bottle",
        "A board that can be embedded on a vertical Klein bottle.",
    ),
    BoardType.PROJECTIVE_PLANE: (
        "Projective plane",
        "A board that can be embedded on a projective plane.",
    ),
}


def cross_x_edge(align: AxisAlignment, w: int, h: int, x: int, y: int):
    """Carry a point that stepped off the left or right edge back around."""
    if align == AxisAlignment.REVERSE_LINKED:
        y = h - y - 1
    return (x + w) % w, y


def cross_y_edge(align: AxisAlignment, w: int, h: int, x: int, y: int):
    """Carry a point that stepped off the top or bottom edge back around."""
    if align == AxisAlignment.REVERSE_LINKED:
        x = w - x - 1
    return x, (y + h) % h


def convert(
    board_type: BoardType, w: int, h: int, newx: int, newy: int
) -> Coordinates | None:
    """Map a cell that may be one step off a w x h board back onto it.

    Returns None if there's no such cell, e.g. off the edge of a grid.
    """
    x_in = 0 <= newx < w
    y_in = 0 <= newy < h
    x_off = newx == -1 or newx == w
    y_off = newy == -1 or newy == h
    x_align, y_align = board_type.x_align, board_type.y_align

    if x_in and y_in:
        return Coordinates(newx, newy)
    if x_off and y_in and x_align != AxisAlignment.NONE:
        return Coordinates(*cross_x_edge(x_align, w, h, newx, newy))
    if x_in and y_off and y_align != AxisAlignment.NONE:
        return Coordinates(*cross_y_edge(y_align, w, h, newx, newy))
    if (
        x_off
        and y_off
        and x_align != AxisAlignment.NONE
        and y_align != AxisAlignment.NONE
    ):
        # Off a corner: cross one edge, then the other. A reflection picked up
        # crossing the x edge flips which side of the y edge we're on.
        x, y = cross_x_edge(x_align, w, h, newx, newy)
        return Coordinates(*cross_y_edge(y_align, w, h, x, y))
    return None


def adjacencies(
    board_type: BoardType, dims: tuple[int, int], cell: Coordinates
) -> set[Coordinates]:
    w, h = dims
    x, y = cell
    if not (0 <= x < w and 0 <= y < h):
        raise ValueError(f"Illegal coordinates: {cell} on a {w}x{h} board")

    nbrs = set[Coordinates]()
    for dx in range(-1, 2):
        for dy in range(-1, 2):
            if dx == 0 and dy == 0:
                continue
            nbr = convert(board_type, w, h, x + dx, y + dy)
            # On the projective plane, a corner wraps back to itself.
            if nbr is not None and nbr != cell:
                nbrs.add(nbr)
    return nbrs
