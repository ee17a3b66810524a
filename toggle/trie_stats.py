#!/usr/bin/env python
"""Compare the shape of a trie before and after compaction."""

import argparse

from toggle.trie import Trie, TrieStats, read_words

THRESHOLD = 25


def display_stats(stats: TrieStats, threshold: int = THRESHOLD):
    print(f"\t* Number of nodes: {stats.nodes:8d}")
    print(f"\t* Height of trie:  {stats.height:8d}")
    print(f"\t* Number of words: {stats.words:8d}\n")
    print("Number of nodes containing strings of length:")
    for k, v in sorted(stats.nodes_by_char_count.items()):
        print(f"{k:4d} {v:7d}")

    # Long contents are rare, so show all of them from the first length
    # that's rare enough. The root (length 0) doesn't count.
    rare = [
        k
        for k, v in sorted(stats.nodes_by_char_count.items())
        if k >= 1 and v <= threshold
    ]
    if not rare:
        print(f"No contents lengths with at most {threshold} nodes.")
        return
    for k in range(rare[0], max(stats.nodes_by_char_count) + 1):
        contents = stats.contents_by_char_count.get(k)
        if not contents:
            continue
        print(f"Contents of nodes with length {k}:")
        print("  " + "  ".join(sorted(contents)))

    if stats.highest_compression_by_depth:
        print("Longest contents by depth:")
        for depth, n in sorted(stats.highest_compression_by_depth.items()):
            print(f"{depth:4d} {n:7d}")


def main():
    parser = argparse.ArgumentParser(description="Trie statistics")
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/dictionary.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=THRESHOLD,
        help="List the contents of nodes whose length is this rare.",
    )
    args = parser.parse_args()

    print("Reading trie... ", end="", flush=True)
    trie = Trie.create_from_wordlist(read_words(args.dictionary), compact=False)
    print("done.\n")
    print("Statistics:")
    display_stats(trie.analyze(), args.threshold)

    print("\n\nCompacting trie... ", end="", flush=True)
    trie.compact()
    print("done.\n")
    print("Statistics:")
    display_stats(trie.analyze(), args.threshold)


if __name__ == "__main__":
    main()
