"""Rank and unrank boards.

A board is a permutation of the dice plus the face showing on each die, so
every board of n dice can be numbered with an integer in [0, n! * 6^n):

    rank = permutation_rank * 6^n + faces_rank

For a 5x5 board that's a 92-digit number. Python ints handle that natively.
"""

import math
from typing import Sequence

NUM_FACES = 6


def is_permutation(candidate: Sequence[int]) -> bool:
    """Is this a permutation of [0, len(candidate))?"""
    return sorted(candidate) == list(range(len(candidate)))


def rank_permutation(perm: Sequence[int]) -> int:
    """Lexicographic rank of a permutation of [0, n)."""
    if not is_permutation(perm):
        raise ValueError(f"not a permutation: {perm}")
    n = len(perm)
    unused = list(range(n))
    rank = 0
    for i, v in enumerate(perm):
        digit = unused.index(v)
        unused.pop(digit)
        rank = rank * (n - i) + digit
    return rank


def unrank_permutation(n: int, rank: int) -> list[int]:
    """Inverse of rank_permutation."""
    if not 0 <= rank < math.factorial(n):
        raise ValueError(f"illegal permutation rank for n={n}: {rank}")
    # factoradic digits, most significant first
    digits = [0] * n
    for base in range(1, n + 1):
        rank, digits[n - base] = divmod(rank, base)
    assert rank == 0
    unused = list(range(n))
    return [unused.pop(d) for d in digits]


def rank_dice_faces(faces: Sequence[int]) -> int:
    rank = 0
    for f in faces:
        if not 0 <= f < NUM_FACES:
            raise ValueError(f"illegal die side specified: {f}")
        rank = rank * NUM_FACES + f
    return rank


def unrank_dice_faces(n: int, rank: int) -> list[int]:
    if not 0 <= rank < NUM_FACES**n:
        raise ValueError(f"illegal dice faces rank for n={n}: {rank}")
    faces = [0] * n
    for i in range(n - 1, -1, -1):
        rank, faces[i] = divmod(rank, NUM_FACES)
    return faces


def num_boards(n: int) -> int:
    """Number of ways to arrange and roll n dice."""
    return math.factorial(n) * NUM_FACES**n


def rank_board(permutation: Sequence[int], dice_sides: Sequence[int]) -> int:
    assert len(permutation) == len(dice_sides)
    n = len(permutation)
    return rank_permutation(permutation) * NUM_FACES**n + rank_dice_faces(dice_sides)


def unrank_board(n: int, rank: int) -> tuple[list[int], list[int]]:
    """Board rank -> (permutation, dice_sides)."""
    if not 0 <= rank < num_boards(n):
        raise IndexError(f"Illegal board rank: {rank}")
    perm_rank, faces_rank = divmod(rank, NUM_FACES**n)
    return unrank_permutation(n, perm_rank), unrank_dice_faces(n, faces_rank)


def pair_to_index(side: int, x: int, y: int) -> int:
    if x < 0 or x >= side:
        raise ValueError(f"illegal x coordinate: {x}")
    if y < 0 or y >= side:
        raise ValueError(f"illegal y coordinate: {y}")
    return x * side + y


def index_to_pair(side: int, index: int) -> tuple[int, int]:
    if index < 0 or index >= side * side:
        raise ValueError(f"illegal index: {index}")
    return index // side, index % side
