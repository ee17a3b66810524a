"""Case-insensitive prefix tree used as the dictionary for word search.

Nodes live in a flat table (an arena) and refer to their children and parent
by index. A node is never edited after it's built, apart from its parent link:
upgrading a node to a word or merging it with its only child builds a new
node and overwrites the single slot in the parent that pointed at the old one.

After all words are added, compact() collapses chains of single-child,
non-word nodes into one node holding the whole chain's text. This drastically
reduces the number of nodes that a search has to walk through.
"""

import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Self

ROOT = 0


class TrieCompactedError(RuntimeError):
    """Words can't be added to a trie after it's been compacted."""


def normalize_word(word: str) -> str:
    """Strip diacritics (and anything else that isn't ASCII) and lowercase."""
    decomposed = unicodedata.normalize("NFD", word)
    return decomposed.encode("ascii", "ignore").decode("ascii").lower()


def read_words(path: str) -> Iterator[str]:
    """Read a word list with one word per line."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                yield word


@dataclass(slots=True)
class TrieNode:
    contents: str
    is_word: bool
    children: dict[str, int] = field(default_factory=dict)
    parent: int | None = None


@dataclass
class TrieStats:
    height: int = -1
    nodes: int = 0
    words: int = 0
    # number of nodes whose contents has a given length
    nodes_by_char_count: Counter[int] = field(default_factory=Counter)
    contents_by_char_count: dict[int, list[str]] = field(default_factory=dict)
    # longest contents at each depth, for depths where some node has 2+ chars
    highest_compression_by_depth: dict[int, int] = field(default_factory=dict)


class Trie:
    _nodes: list[TrieNode]
    _compacted: bool

    def __init__(self):
        self._nodes = [TrieNode("", False)]
        self._compacted = False

    def is_compacted(self) -> bool:
        return self._compacted

    def add_word(self, word: str):
        if self._compacted:
            raise TrieCompactedError(
                f'Cannot add "{word}" to the trie: it has already been compacted.'
            )
        s = normalize_word(word)
        if not s:
            return

        idx = ROOT
        for i, c in enumerate(s):
            node = self._nodes[idx]
            child = node.children.get(c)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode(c, i == len(s) - 1, parent=idx))
                node.children[c] = child
            idx = child

        node = self._nodes[idx]
        if not node.is_word:
            self._replace(
                idx, TrieNode(node.contents, True, dict(node.children), node.parent)
            )

    def _replace(self, idx: int, node: TrieNode) -> int:
        """Install node in place of the one at idx and return its new index."""
        assert idx != ROOT
        new_idx = len(self._nodes)
        self._nodes.append(node)
        for child in node.children.values():
            self._nodes[child].parent = new_idx
        key = self._nodes[idx].contents[0]
        parent = self._nodes[node.parent]
        assert parent.children[key] == idx
        parent.children[key] = new_idx
        return new_idx

    def compact(self):
        """Merge chains of single-child, non-word nodes. Idempotent.

        This is a one-way door: add_word() will fail from here on out.
        """
        self._compact(ROOT)
        self._compacted = True
        self._collect_garbage()

    def _compact(self, idx: int) -> int:
        node = self._nodes[idx]
        for key in list(node.children):
            self._compact(node.children[key])

        if idx == ROOT or node.is_word or len(node.children) != 1:
            return idx

        (child_idx,) = node.children.values()
        child = self._nodes[child_idx]
        merged = TrieNode(
            node.contents + child.contents,
            child.is_word,
            dict(child.children),
            node.parent,
        )
        return self._replace(idx, merged)

    def _collect_garbage(self):
        """Rebuild the node table so that it only holds reachable nodes."""
        old = self._nodes
        order = [ROOT]
        remap = {ROOT: 0}
        for idx in order:
            for child in old[idx].children.values():
                remap[child] = len(order)
                order.append(child)
        self._nodes = [
            TrieNode(
                old[idx].contents,
                old[idx].is_word,
                {k: remap[c] for k, c in old[idx].children.items()},
                None if old[idx].parent is None else remap[old[idx].parent],
            )
            for idx in order
        ]

    # ---

    def is_prefix(self, s: str) -> bool:
        """Is s (case-insensitive) the start of at least one word?"""
        needle = normalize_word(s)
        node = self._nodes[ROOT]
        if not needle:
            return len(node.children) > 0
        while True:
            # Every leaf is a word, so anything along the way is a prefix.
            if node.contents.startswith(needle):
                return True
            if not needle.startswith(node.contents):
                return False
            needle = needle[len(node.contents) :]
            child = node.children.get(needle[0])
            if child is None:
                return False
            node = self._nodes[child]

    def is_word(self, s: str) -> bool:
        needle = normalize_word(s)
        node = self._nodes[ROOT]
        while True:
            if not needle.startswith(node.contents):
                return False
            needle = needle[len(node.contents) :]
            if not needle:
                return node.is_word
            child = node.children.get(needle[0])
            if child is None:
                return False
            node = self._nodes[child]

    def _walk(self) -> Iterator[tuple[TrieNode, str, int]]:
        """Pre-order traversal yielding (node, text up to and including it, depth)."""
        stack = [(ROOT, "", 0)]
        while stack:
            idx, prefix, depth = stack.pop()
            node = self._nodes[idx]
            text = prefix + node.contents
            yield node, text, depth
            stack.extend((child, text, depth + 1) for child in node.children.values())

    def dump(self) -> Iterator[str]:
        """Generate every word in the trie."""
        for node, text, _ in self._walk():
            if node.is_word:
                yield text

    def size(self) -> int:
        return sum(1 for node, _, _ in self._walk() if node.is_word)

    def num_nodes(self) -> int:
        return sum(1 for _ in self._walk())

    def analyze(self) -> TrieStats:
        """Gather statistics to see how much compaction is helping."""
        stats = TrieStats()
        for node, _, depth in self._walk():
            n = len(node.contents)
            stats.nodes += 1
            stats.nodes_by_char_count[n] += 1
            stats.contents_by_char_count.setdefault(n, []).append(node.contents)
            if node.is_word:
                stats.words += 1
            if not node.children:
                stats.height = max(stats.height, depth)
            if n > stats.highest_compression_by_depth.get(depth, 1):
                stats.highest_compression_by_depth[depth] = n
        return stats

    @staticmethod
    def create_from_wordlist(words: Iterable[str], compact=True) -> Self:
        trie = Trie()
        for word in words:
            trie.add_word(word)
        if compact:
            trie.compact()
        return trie

    @staticmethod
    def create_from_file(path: str, compact=True) -> Self:
        return Trie.create_from_wordlist(read_words(path), compact=compact)
