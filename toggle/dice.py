"""Dice and dice sets.

Dice are written as six-letter strings. As in regular Boggle, "q" on a die
stands for the "Qu" face.
"""

from dataclasses import dataclass
from typing import Sequence

from toggle import ranking
from toggle.ranking import NUM_FACES


@dataclass(frozen=True)
class Die:
    faces: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "faces", tuple(self.faces))
        if len(self.faces) != NUM_FACES:
            raise ValueError(f"A die must have {NUM_FACES} faces, got {self.faces}")

    def get_char(self, i: int) -> str:
        return self.faces[i]


def make_die(letters: str) -> Die:
    return Die(tuple("Qu" if c == "q" else c.upper() for c in letters.lower()))


class DiceSet:
    """The dice that make up a side x side board.

    This doesn't account for symmetry: two different arrangements of the dice
    that look identical from above get different ranks.
    """

    def __init__(self, side: int, dice: Sequence[Die], name: str = ""):
        if side < 1:
            raise ValueError(f"DiceSet must have a positive side, got {side}")
        if len(dice) != side * side:
            raise ValueError(f"DiceSet expected {side * side} dice, got {len(dice)}")
        self.side = side
        self.name = name
        self._dice = tuple(dice)

    @property
    def num_dice(self) -> int:
        return self.side * self.side

    def get_die(self, index: int) -> Die:
        return self._dice[index]

    def num_boards(self) -> int:
        return ranking.num_boards(self.num_dice)

    def unrank_board(self, rank: int) -> tuple[list[int], list[int]]:
        """Board rank -> (permutation, dice_sides)."""
        return ranking.unrank_board(self.num_dice, rank)

    def rank_board(self, permutation: Sequence[int], dice_sides: Sequence[int]) -> int:
        if len(permutation) != self.num_dice or len(dice_sides) != self.num_dice:
            raise ValueError(f"Expected {self.num_dice} dice")
        return ranking.rank_board(permutation, dice_sides)

    def __repr__(self):
        return f"DiceSet({self.name!r}, {self.side}x{self.side})"


# "Classic" Boggle dice, 1976 to 1986
CLASSIC_16 = DiceSet(
    4,
    [
        make_die(d)
        for d in [
            "aaciot",
            "abilty",
            "abjmoq",
            "acdemp",
            "acelrs",
            "adenvz",
            "ahmors",
            "biforx",
            "denosw",
            "dknotu",
            "eefhiy",
            "egintv",
            "egkluy",
            "ehinps",
            "elpstu",
            "gilruw",
        ]
    ],
    name="classic16",
)

# Big Boggle
BIG_25 = DiceSet(
    5,
    [
        make_die(d)
        for d in [
            "aaafrs",
            "aaeeee",
            "aafirs",
            "adennn",
            "aeeeem",
            "aeegmu",
            "aegmnn",
            "afirsy",
            "bjkqxz",
            "ccnstw",
            "ceiilt",
            "ceilpt",
            "ceipst",
            "ddlnor",
            "dhhlor",
            "dhhnot",
            "dhlnor",
            "eiiitt",
            "emottt",
            "ensssu",
            "fiprsy",
            "gorrvw",
            "hiprsy",
            "ooottu",
            "nootuw",
        ]
    ],
    name="big25",
)


_DICE_SETS: list[DiceSet] = []


def register_dice_set(dice_set: DiceSet):
    if dice_set not in _DICE_SETS:
        _DICE_SETS.append(dice_set)


def unregister_dice_set(dice_set: DiceSet) -> bool:
    try:
        _DICE_SETS.remove(dice_set)
    except ValueError:
        return False
    return True


def get_dice_sets() -> tuple[DiceSet, ...]:
    """All registered dice sets. There's always at least the classic set."""
    if not _DICE_SETS:
        _DICE_SETS.append(CLASSIC_16)
    return tuple(_DICE_SETS)


def get_dice_set(name: str) -> DiceSet:
    for dice_set in get_dice_sets():
        if dice_set.name == name:
            return dice_set
    raise KeyError(name)


register_dice_set(CLASSIC_16)
register_dice_set(BIG_25)
