"""Turning found groups into output lines."""

import threading
from collections.abc import Iterator, Sequence
from itertools import product
from typing import TextIO


class LineSink:
    """Synchronized line writer shared by all worker threads.

    Each call to `write_line` writes one complete line while holding a lock, so lines from
    different workers may interleave but never mix within a line.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.lines_written = 0
        self._lock = threading.Lock()

    def write_line(self, line: str) -> None:
        """Write `line` followed by a newline as a single atomic operation."""
        with self._lock:
            self.stream.write(line + "\n")
            self.lines_written += 1

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()


class GroupMaterializer:
    """Expands groups of word slots into concrete, sorted word lines.

    A slot is the word list of one group member.  For trie groups a slot may hold several
    anagrams, so one group expands into the Cartesian product of its slots.
    """

    def __init__(self, separator: str = ", ") -> None:
        self.separator = separator

    def expand(self, slot_words: Sequence[Sequence[str]]) -> Iterator[list[str]]:
        """Yield every combination of one word per slot, sorted lexicographically."""
        for combo in product(*slot_words):
            yield sorted(combo)

    def format_line(self, words: Sequence[str]) -> str:
        return self.separator.join(words)

    def emit(self, slot_words: Sequence[Sequence[str]], sink: LineSink) -> int:
        """Write every line of a group to `sink`.

        Returns:
            The number of lines written.
        """
        written = 0
        for words in self.expand(slot_words):
            sink.write_line(self.format_line(words))
            written += 1
        return written
