from typing import Self, Sequence

from toggle.dice import DiceSet, Die
from toggle.ranking import NUM_FACES, is_permutation, pair_to_index
from toggle.topology import BoardType, Coordinates, adjacencies
from toggle.trie import Trie


class Board:
    """A permutation of the dice, plus the face showing on each die.

    The words on the board are found once, at construction time.

    The die at (x, y) is permutation[x * side + y] and the face showing on it
    is dice_sides[x * side + y]; the faces don't move with the dice.
    """

    def __init__(
        self,
        board_type: BoardType,
        dice_set: DiceSet,
        permutation: Sequence[int],
        dice_sides: Sequence[int],
        trie: Trie,
        minimum_word_length: int = 3,
    ):
        n = dice_set.num_dice
        if len(permutation) != n or not is_permutation(permutation):
            raise ValueError(f"list is not a permutation of {n} dice: {permutation}")
        if len(dice_sides) != n:
            raise ValueError(f"expected {n} dice sides, got {len(dice_sides)}")
        for s in dice_sides:
            if s < 0 or s >= NUM_FACES:
                raise ValueError(f"illegal die side specified: {s}")

        self.board_type = board_type
        self.dice_set = dice_set
        self.side = dice_set.side
        self.permutation = tuple(permutation)
        self.dice_sides = tuple(dice_sides)
        self.minimum_word_length = minimum_word_length
        self._trie = trie

        cells = [Coordinates(x, y) for x in range(self.side) for y in range(self.side)]
        self._values = {c: self.get_value_at(*c).lower() for c in cells}
        self._neighbors = {c: sorted(self.get_adjacencies(*c)) for c in cells}
        self._words = self._find_words(cells)

    @staticmethod
    def from_rank(
        board_type: BoardType,
        dice_set: DiceSet,
        rank: int,
        trie: Trie,
        minimum_word_length: int = 3,
    ) -> Self:
        permutation, dice_sides = dice_set.unrank_board(rank)
        return Board(
            board_type, dice_set, permutation, dice_sides, trie, minimum_word_length
        )

    @property
    def dims(self) -> tuple[int, int]:
        return self.side, self.side

    @property
    def words(self) -> tuple[str, ...]:
        """The words on this board, sorted by length and then alphabetically."""
        return self._words

    def rank(self) -> int:
        return self.dice_set.rank_board(self.permutation, self.dice_sides)

    def get_die_at(self, x: int, y: int) -> Die:
        index = pair_to_index(self.side, x, y)
        return self.dice_set.get_die(self.permutation[index])

    def get_value_at(self, x: int, y: int) -> str:
        index = pair_to_index(self.side, x, y)
        return self.get_die_at(x, y).get_char(self.dice_sides[index])

    def get_adjacencies(self, x: int, y: int) -> set[Coordinates]:
        return adjacencies(self.board_type, self.dims, Coordinates(x, y))

    def _find_words(self, cells: list[Coordinates]) -> tuple[str, ...]:
        found = set[str]()
        for cell in cells:
            self._find_words_dfs([cell], self._values[cell], found)
        return tuple(sorted(found, key=lambda word: (len(word), word)))

    def _find_words_dfs(self, path: list[Coordinates], word: str, found: set[str]):
        if not self._trie.is_prefix(word):
            return

        if (
            len(word) >= self.minimum_word_length
            and word not in found
            and self._trie.is_word(word)
        ):
            found.add(word)

        for cell in self._neighbors[path[-1]]:
            if cell in path:
                continue
            path.append(cell)
            self._find_words_dfs(path, word + self._values[cell], found)
            path.pop()

    def __str__(self):
        return "\n".join(
            "".join(
                self.get_value_at(x, y).ljust(3) for y in range(self.side)
            ).rstrip()
            for x in range(self.side)
        )
