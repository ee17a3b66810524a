"""Standard command-line arguments shared across tools."""

import argparse
import sys
import time

from toggle.dice import DiceSet, get_dice_set, get_dice_sets
from toggle.topology import BoardType
from toggle.trie import Trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/dictionary.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--dice",
        type=str,
        choices=[d.name for d in get_dice_sets()],
        default="classic16",
        help="Set of dice to roll. This determines the size of the board.",
    )
    parser.add_argument(
        "--board_type",
        type=str,
        choices=[t.name.lower() for t in BoardType],
        default="torus",
        help="How the edges of the board wrap around.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=3,
        help="Minimum length of a word, counting Qu as two letters.",
    )
    parser.add_argument(
        "--no_compact",
        action="store_true",
        help="Don't compact the trie after loading it. Searches will be slower.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    start_s = time.time()
    t = Trie.create_from_file(args.dictionary, compact=not args.no_compact)
    elapsed_s = time.time() - start_s
    sys.stderr.write(
        f"Loaded {t.size()} words ({t.num_nodes()} nodes) in {elapsed_s:.2f}s\n"
    )
    return t


def get_dice_set_from_args(args: argparse.Namespace) -> DiceSet:
    return get_dice_set(args.dice)


def get_board_type_from_args(args: argparse.Namespace) -> BoardType:
    return BoardType[args.board_type.upper()]
