#!/usr/bin/env python
"""Find all the words on a board and print them.

The board is given by its rank, or chosen at random:

$ python -m toggle.find_words --dice classic16 --board_type torus 839283
"""

import argparse
import random

from toggle.args import (
    add_standard_args,
    get_board_type_from_args,
    get_dice_set_from_args,
    get_trie_from_args,
)
from toggle.board import Board


def main():
    parser = argparse.ArgumentParser(description="Find the words on a board")
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "rank",
        type=int,
        nargs="?",
        default=None,
        help="Rank of the board. If omitted, a random board is used.",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    dice_set = get_dice_set_from_args(args)
    board_type = get_board_type_from_args(args)
    rank = args.rank
    if rank is None:
        rank = random.randrange(dice_set.num_boards())

    t = get_trie_from_args(args)
    board = Board.from_rank(board_type, dice_set, rank, t, args.min_length)

    print(f"{board_type.type_name} board #{rank}:\n")
    print(board)
    print()
    for word in board.words:
        print(word)
    print(f"*** {len(board.words)} words.")


if __name__ == "__main__":
    main()
