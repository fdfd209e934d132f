"""Module for word list loading and filtering."""

import sys
from collections import Counter
from collections.abc import Iterable
from pathlib import Path


def load_word_list(path: str | Path | None = None) -> list[str]:
    """Load a newline-delimited word list.

    Args:
        path: Path to the word list file.  `None` or `"-"` reads from standard input.

    Returns:
        The words in file order, with surrounding whitespace stripped and blank lines dropped.
    """
    if path is None or str(path) == "-":
        return [stripped for line in sys.stdin if (stripped := line.strip())]

    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return [stripped for line in f if (stripped := line.strip())]


def has_distinct_letters(word: str) -> bool:
    """Returns whether no letter occurs more than once in `word`."""
    return len(set(word)) == len(word)


def filter_distinct(words: Iterable[str]) -> list[str]:
    """Keep only the words made of distinct letters, preserving order."""
    return [w for w in words if has_distinct_letters(w)]


def letter_counts(words: Iterable[str]) -> Counter[str]:
    """Count the occurrences of each letter across all of `words`.

    Args:
        words: The words to count over.  Every occurrence counts, so a letter used by
            two words counts twice.
    """
    counts: Counter[str] = Counter()
    for word in words:
        counts.update(word)
    return counts
