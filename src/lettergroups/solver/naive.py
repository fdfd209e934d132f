"""Naive brute-force search over the flat word list."""

from collections.abc import Iterator, Sequence

from bitarray import bitarray
from bitarray.util import count_and, zeros

from lettergroups.solver.utils import SlotWords


class NaiveSearch:
    """Brute-force enumeration of disjoint word groups.

    Root `i` is the group starting with `words[i]`; the rest of the group is chosen from
    later words only, so every unordered group is produced once, from its earliest word.
    No pruning beyond the overlap test is done, which makes this a baseline for checking
    the trie search rather than a practical default.
    """

    name = "naive"

    def __init__(self, words: Sequence[str], n: int) -> None:
        """Prepare the search.

        Args:
            words: Words with distinct letters each.  Shared read-only between workers.
            n: Number of words per group.
        """
        self.words = list(words)
        self.n = n

        alphabet = sorted({ch for word in self.words for ch in word})
        self.letter_index = {ch: i for i, ch in enumerate(alphabet)}
        """Maps each letter of the dictionary to its bit position."""

        self.masks = [self._mask(word) for word in self.words]
        """Letter bit mask for each word, aligned with `words`."""

    def _mask(self, word: str) -> bitarray:
        mask = zeros(len(self.letter_index))
        for ch in word:
            mask[self.letter_index[ch]] = 1
        return mask

    @property
    def root_count(self) -> int:
        return len(self.words)

    def search(self, root_idx: int) -> Iterator[tuple[str, ...]]:
        """Yield every group whose first word is `words[root_idx]`."""
        if self.n == 0:
            yield ()
            return
        yield from self._extend(
            root_idx + 1, self.n - 1, [self.words[root_idx]], self.masks[root_idx]
        )

    def _extend(
        self, start: int, remaining: int, group: list[str], used: bitarray
    ) -> Iterator[tuple[str, ...]]:
        if remaining == 0:
            yield tuple(group)
            return
        for j in range(start, len(self.words)):
            mask = self.masks[j]
            # `used` is the union of the group's masks, so this is the pairwise overlap test
            if count_and(used, mask):
                continue
            group.append(self.words[j])
            yield from self._extend(j + 1, remaining - 1, group, used | mask)
            group.pop()

    def slot_words(self, group: tuple[str, ...]) -> SlotWords:
        return [(word,) for word in group]
