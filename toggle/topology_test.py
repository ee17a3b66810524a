import pytest

from toggle.topology import (
    AxisAlignment,
    BoardType,
    Coordinates,
    adjacencies,
    convert,
)


def in_bounds(v: int):
    return 0 <= v < 4


def off_board():
    """All the cells one step off a 4x4 board."""
    return [
        (x, y)
        for x in range(-1, 5)
        for y in range(-1, 5)
        if not (in_bounds(x) and in_bounds(y))
    ]


# Where each step off a 4x4 board lands, for the types that wrap both axes.
TORUS = {
    (0, -1): (0, 3), (1, -1): (1, 3), (2, -1): (2, 3), (3, -1): (3, 3),
    (0, 4): (0, 0), (1, 4): (1, 0), (2, 4): (2, 0), (3, 4): (3, 0),
    (-1, 0): (3, 0), (-1, 1): (3, 1), (-1, 2): (3, 2), (-1, 3): (3, 3),
    (4, 0): (0, 0), (4, 1): (0, 1), (4, 2): (0, 2), (4, 3): (0, 3),
    (-1, -1): (3, 3), (4, -1): (0, 3), (-1, 4): (3, 0), (4, 4): (0, 0),
}  # fmt: skip

X_KLEIN_BOTTLE = {
    (0, -1): (0, 3), (1, -1): (1, 3), (2, -1): (2, 3), (3, -1): (3, 3),
    (0, 4): (0, 0), (1, 4): (1, 0), (2, 4): (2, 0), (3, 4): (3, 0),
    (-1, 0): (3, 3), (-1, 1): (3, 2), (-1, 2): (3, 1), (-1, 3): (3, 0),
    (4, 0): (0, 3), (4, 1): (0, 2), (4, 2): (0, 1), (4, 3): (0, 0),
    (-1, -1): (3, 0), (4, -1): (0, 0), (-1, 4): (3, 3), (4, 4): (0, 3),
}  # fmt: skip

Y_KLEIN_BOTTLE = {
    (0, -1): (3, 3), (1, -1): (2, 3), (2, -1): (1, 3), (3, -1): (0, 3),
    (0, 4): (3, 0), (1, 4): (2, 0), (2, 4): (1, 0), (3, 4): (0, 0),
    (-1, 0): (3, 0), (-1, 1): (3, 1), (-1, 2): (3, 2), (-1, 3): (3, 3),
    (4, 0): (0, 0), (4, 1): (0, 1), (4, 2): (0, 2), (4, 3): (0, 3),
    (-1, -1): (0, 3), (4, -1): (3, 3), (-1, 4): (0, 0), (4, 4): (3, 0),
}  # fmt: skip

PROJECTIVE_PLANE = {
    (0, -1): (3, 3), (1, -1): (2, 3), (2, -1): (1, 3), (3, -1): (0, 3),
    (0, 4): (3, 0), (1, 4): (2, 0), (2, 4): (1, 0), (3, 4): (0, 0),
    (-1, 0): (3, 3), (-1, 1): (3, 2), (-1, 2): (3, 1), (-1, 3): (3, 0),
    (4, 0): (0, 3), (4, 1): (0, 2), (4, 2): (0, 1), (4, 3): (0, 0),
    (-1, -1): (0, 0), (4, -1): (3, 0), (-1, 4): (0, 3), (4, 4): (3, 3),
}  # fmt: skip


def test_alignments():
    assert BoardType.GRID.x_align == AxisAlignment.NONE
    assert BoardType.X_KLEIN_BOTTLE.x_align == AxisAlignment.REVERSE_LINKED
    assert BoardType.X_KLEIN_BOTTLE.y_align == AxisAlignment.LINKED
    assert len({(t.x_align, t.y_align) for t in BoardType}) == 9
    assert BoardType.TORUS.type_name == "Torus"
    assert BoardType.Y_MOBIUS_STRIP.description.endswith("vertical Mobius strip.")


@pytest.mark.parametrize("board_type", list(BoardType))
def test_in_bounds_unchanged(board_type: BoardType):
    for x in range(4):
        for y in range(4):
            assert convert(board_type, 4, 4, x, y) == Coordinates(x, y)


def test_grid():
    for x, y in off_board():
        assert BoardType.GRID.convert(4, 4, x, y) is None


def test_x_cylinder():
    for x, y in off_board():
        c = convert(BoardType.X_CYLINDER, 4, 4, x, y)
        if in_bounds(y):
            assert c == Coordinates((x + 4) % 4, y)
        else:
            assert c is None


def test_y_cylinder():
    for x, y in off_board():
        c = convert(BoardType.Y_CYLINDER, 4, 4, x, y)
        if in_bounds(x):
            assert c == Coordinates(x, (y + 4) % 4)
        else:
            assert c is None


def test_x_mobius_strip():
    for x, y in off_board():
        c = convert(BoardType.X_MOBIUS_STRIP, 4, 4, x, y)
        if in_bounds(y):
            assert c == Coordinates(3 if x == -1 else 0, 3 - y)
        else:
            assert c is None
    assert convert(BoardType.X_MOBIUS_STRIP, 4, 4, -1, 0) == (3, 3)


def test_y_mobius_strip():
    for x, y in off_board():
        c = convert(BoardType.Y_MOBIUS_STRIP, 4, 4, x, y)
        if in_bounds(x):
            assert c == Coordinates(3 - x, 3 if y == -1 else 0)
        else:
            assert c is None


@pytest.mark.parametrize(
    "board_type, expected",
    [
        (BoardType.TORUS, TORUS),
        (BoardType.X_KLEIN_BOTTLE, X_KLEIN_BOTTLE),
        (BoardType.Y_KLEIN_BOTTLE, Y_KLEIN_BOTTLE),
        (BoardType.PROJECTIVE_PLANE, PROJECTIVE_PLANE),
    ],
)
def test_both_axes_wrap(board_type: BoardType, expected: dict):
    for (x, y), (ex, ey) in expected.items():
        assert convert(board_type, 4, 4, x, y) == Coordinates(ex, ey), (x, y)


@pytest.mark.parametrize("board_type", list(BoardType))
def test_two_steps_off(board_type: BoardType):
    assert convert(board_type, 4, 4, -2, 0) is None
    assert convert(board_type, 4, 4, 0, 5) is None
    assert convert(board_type, 4, 4, 5, 5) is None


def test_grid_adjacencies():
    assert adjacencies(BoardType.GRID, (4, 4), Coordinates(0, 0)) == {
        (0, 1),
        (1, 0),
        (1, 1),
    }
    assert len(adjacencies(BoardType.GRID, (4, 4), Coordinates(3, 3))) == 3
    assert len(adjacencies(BoardType.GRID, (4, 4), Coordinates(0, 2))) == 5
    assert len(adjacencies(BoardType.GRID, (4, 4), Coordinates(2, 3))) == 5
    assert len(adjacencies(BoardType.GRID, (4, 4), Coordinates(1, 2))) == 8


def test_torus_adjacencies():
    assert (3, 3) in adjacencies(BoardType.TORUS, (4, 4), Coordinates(0, 0))
    for x in range(4):
        for y in range(4):
            assert len(BoardType.TORUS.adjacencies((4, 4), Coordinates(x, y))) == 8


@pytest.mark.parametrize(
    "board_type", [BoardType.X_KLEIN_BOTTLE, BoardType.Y_KLEIN_BOTTLE]
)
def test_klein_bottle_adjacencies(board_type: BoardType):
    # A Klein bottle has no edges or corners, so every cell has 8 neighbors.
    for x in range(4):
        for y in range(4):
            assert len(adjacencies(board_type, (4, 4), Coordinates(x, y))) == 8


def test_cylinder_adjacencies():
    nbrs = adjacencies(BoardType.X_CYLINDER, (4, 4), Coordinates(0, 0))
    assert nbrs == {(0, 1), (1, 0), (1, 1), (3, 0), (3, 1)}
    assert len(adjacencies(BoardType.X_CYLINDER, (4, 4), Coordinates(0, 1))) == 8


def test_projective_plane_corner():
    nbrs = adjacencies(BoardType.PROJECTIVE_PLANE, (4, 4), Coordinates(0, 0))
    assert (0, 0) not in nbrs
    assert (3, 3) in nbrs


@pytest.mark.parametrize("board_type", list(BoardType))
def test_adjacencies_symmetric(board_type: BoardType):
    for x in range(4):
        for y in range(4):
            for nbr in adjacencies(board_type, (4, 4), Coordinates(x, y)):
                assert (x, y) in adjacencies(board_type, (4, 4), nbr)


def test_adjacencies_out_of_range():
    with pytest.raises(ValueError):
        adjacencies(BoardType.TORUS, (4, 4), Coordinates(4, 0))
    with pytest.raises(ValueError):
        adjacencies(BoardType.GRID, (4, 4), Coordinates(0, -1))
