"""Canonical enumeration of disjoint groups over the ranked trie."""

from collections.abc import Iterator

from lettergroups.solver.utils import SlotWords
from lettergroups.trie import RankedNode, RankedTrie


class CanonicalSearch:
    """Trie-guided search that produces each unordered group exactly once.

    The root set is the pre-order list of word-bearing nodes.  A search seeded with root `r`
    fills the remaining slots by walking the whole trie from the top, entering only letters
    not yet used by the group.

    Uniqueness comes from the resume letter ("skip"): after a member is added, the next
    member is searched from the trie root starting at the member's first letter.  That
    letter is already used, so the branch itself is never entered and the following member
    must hang under a strictly later root child.  Members of a group are therefore found in
    ranked order of their first letters, and only from the root whose first letter ranks
    earliest.
    """

    name = "tree"

    def __init__(self, trie: RankedTrie, n: int) -> None:
        """Prepare the search.

        Args:
            trie: Ranked trie shared read-only between workers.
            n: Number of words per group.
        """
        self.trie = trie
        self.n = n
        self.roots = trie.word_bearing_nodes()

    @property
    def root_count(self) -> int:
        return len(self.roots)

    def search(self, root_idx: int) -> Iterator[tuple[RankedNode, ...]]:
        """Yield every group whose canonical first member is `roots[root_idx]`."""
        if self.n == 0:
            yield ()
            return
        node = self.roots[root_idx]
        yield from self._visit(
            self.trie.root,
            self.n - 1,
            [node],
            set(node.letters),
            node.first_letter,
        )

    def _visit(
        self,
        node: RankedNode,
        remaining: int,
        group: list[RankedNode],
        used: set[str],
        skip: str | None,
    ) -> Iterator[tuple[RankedNode, ...]]:
        if remaining == 0:
            yield tuple(group)
            return

        # Stop here: take this node as the next member and look for the one after it
        if node.words:
            group.append(node)
            yield from self._visit(self.trie.root, remaining - 1, group, used, node.first_letter)
            group.pop()

        # Descend: extend the path with letters the group has not used yet
        for letter, child in node.children:
            if skip is not None:
                if letter != skip:
                    continue
                skip = None
            if letter in used:
                continue
            used.add(letter)
            yield from self._visit(child, remaining, group, used, None)
            used.remove(letter)

    def slot_words(self, group: tuple[RankedNode, ...]) -> SlotWords:
        return [node.words for node in group]
