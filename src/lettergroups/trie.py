"""Letter-profile tries used by the group search.

`ProfileTrie` is the mutable build-time structure: each word is inserted along its letter
profile (sorted distinct letters), so anagrams end up sharing a node.  `RankedTrie` is the
frozen view handed to the search, with children reordered so that rare letters are explored
first.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from sortedcontainers import SortedDict, SortedList

from lettergroups.wordlist import letter_counts

LetterProfile: TypeAlias = tuple[str, ...]


def letter_profile(word: str) -> LetterProfile:
    """Return the sorted, duplicate-free letters of a word."""
    return tuple(sorted(set(word)))


class ProfileNode:
    """A node of the build-time trie.

    The path from the root to a node is a strictly increasing sequence of letters, so the
    path letters never repeat.
    """

    def __init__(self, letters: LetterProfile = ()) -> None:
        self.letters: LetterProfile = letters
        """Letters consumed along the path from the root."""

        self.words: list[str] = []
        """Words whose letter profile is exactly `letters`."""

        self.children: SortedDict = SortedDict()
        """Mapping of next letter -> child node, in letter order."""

    def child(self, letter: str) -> "ProfileNode":
        """Get the child for `letter`, creating it if needed."""
        node = self.children.get(letter)
        if node is None:
            node = ProfileNode(self.letters + (letter,))
            self.children[letter] = node
        return node


class ProfileTrie:
    """Trie of words keyed on their letter profiles."""

    def __init__(self) -> None:
        self.root = ProfileNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "ProfileTrie":
        """Build a trie containing every word in `words`."""
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str) -> None:
        """Insert a word at the node named by its letter profile."""
        node = self.root
        for letter in letter_profile(word):
            node = node.child(letter)
        node.words.append(word)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def nodes(self) -> Iterator[ProfileNode]:
        """Iterate over all nodes in pre-order (letter order among siblings)."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    def all_words(self) -> list[str]:
        """Return every stored word, in pre-order."""
        return [word for node in self.nodes() for word in node.words]


@dataclass(frozen=True)
class RankedNode:
    """Read-only trie node with children in ascending global letter frequency."""

    letters: LetterProfile
    """Letters on the path from the root, in letter order."""

    words: tuple[str, ...]
    """Words whose letter profile is exactly `letters`."""

    children: tuple[tuple[str, "RankedNode"], ...] = field(default=(), repr=False)
    """Ordered `(letter, child)` pairs; rarest letter first."""

    @property
    def first_letter(self) -> str | None:
        """Smallest letter of the path, i.e. the root child this node hangs under."""
        return self.letters[0] if self.letters else None

    def bears_words(self) -> bool:
        return bool(self.words)


class RankedTrie:
    """Frozen, rarity-ordered view of a `ProfileTrie`.

    Built once on the main thread and then shared read-only by all search workers.
    """

    def __init__(self, root: RankedNode, counts: dict[str, int]) -> None:
        self.root = root
        """Root node (empty path)."""

        self.counts = counts
        """Global letter occurrence counts the child order was derived from."""

        self._word_nodes: list[RankedNode] | None = None

    @classmethod
    def derive(cls, trie: ProfileTrie) -> "RankedTrie":
        """Derive the ranked view of `trie`.

        Letters are counted once over every word in the trie; every node's children are then
        sorted by `(count, letter)`.
        """
        counts = letter_counts(trie.all_words())
        return cls(_rank(trie.root, counts), dict(counts))

    def word_bearing_nodes(self) -> list[RankedNode]:
        """Pre-order list of nodes that hold at least one word.

        This is the root set that search work is partitioned over.
        """
        if self._word_nodes is None:
            out: list[RankedNode] = []
            stack = [self.root]
            while stack:
                node = stack.pop()
                if node.words:
                    out.append(node)
                stack.extend(child for _, child in reversed(node.children))
            self._word_nodes = out
        return self._word_nodes


def _rank(node: ProfileNode, counts: dict[str, int]) -> RankedNode:
    ordered = SortedList(node.children.items(), key=lambda item: (counts[item[0]], item[0]))
    return RankedNode(
        letters=node.letters,
        words=tuple(node.words),
        children=tuple((letter, _rank(child, counts)) for letter, child in ordered),
    )
