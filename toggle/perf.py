#!/usr/bin/env python
"""I/O-free performance test.

Builds random boards and finds all the words on each of them:

$ python -m toggle.perf --dice big25 --board_type torus 1000 --random_seed 808813
"""

import argparse
import random
import sys
import time

from tqdm import tqdm

from toggle.args import (
    add_standard_args,
    get_board_type_from_args,
    get_dice_set_from_args,
    get_trie_from_args,
)
from toggle.board import Board


def main():
    parser = argparse.ArgumentParser(
        prog="Toggle perf test",
        description="Measure the speed of finding words on random boards.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to evaluate",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    t = get_trie_from_args(args)
    dice_set = get_dice_set_from_args(args)
    board_type = get_board_type_from_args(args)

    n = args.num_boards
    print(f"Generating {n} {dice_set.side}x{dice_set.side} boards...")
    ranks = [random.randrange(dice_set.num_boards()) for _ in range(n)]

    total_words = 0
    start_s = time.time()
    for rank in tqdm(ranks, smoothing=0):
        board = Board.from_rank(board_type, dice_set, rank, t, args.min_length)
        total_words += len(board.words)
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = n / elapsed_s

    print(f"{total_words=}")
    sys.stderr.write(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec\n")


if __name__ == "__main__":
    main()
