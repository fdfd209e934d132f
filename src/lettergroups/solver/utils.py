"""Shared types for the word group solver."""

from collections.abc import Iterator, Sequence
from typing import Any, Protocol, TypeAlias

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

Group: TypeAlias = tuple[Any, ...]
"""One search result: a tuple of N members (words or trie nodes, depending on strategy)."""

SlotWords: TypeAlias = Sequence[Sequence[str]]
"""Per-member word lists of a group, ready for Cartesian expansion."""


class SearchStrategy(Protocol):
    """Interface shared by the search strategies.

    A strategy exposes an ordered root set; `search(root_idx)` enumerates every group whose
    canonical first member is that root.  Distinct roots never produce the same group, so
    roots can be searched independently by different workers.
    """

    name: str

    @property
    def root_count(self) -> int: ...

    def search(self, root_idx: int) -> Iterator[Group]: ...

    def slot_words(self, group: Group) -> SlotWords: ...
