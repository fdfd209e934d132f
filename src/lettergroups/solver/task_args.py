"""Arguments for one solver run."""

from datetime import datetime
from time import time

from lettergroups.solver.utils import TIMESTAMP_FMT
from lettergroups.wordlist import filter_distinct


class TaskArgs:
    """Wrapper for the arguments of a search run.

    Holds the filtered word list, which is built once and then shared read-only by every
    worker.
    """

    def __init__(self, *, words: list[str], n: int, strategy: str, n_workers: int) -> None:
        """Initialize the run arguments.

        Args:
            words (list[str]): The raw word list.  Words with repeated letters are dropped.
            n (int): Number of words per group.
            strategy (str): Name of the search strategy ("tree" or "naive").
            n_workers (int): Number of worker threads.
        """
        self.words_read = len(words)
        """Number of words before filtering."""

        self.words = filter_distinct(words)
        """Words made of distinct letters, in input order."""

        self.n = n
        self.strategy = strategy
        self.n_workers = n_workers

        self.start_time = time()
        """Timestamp when the run started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the run arguments."""
        return {
            "n": self.n,
            "strategy": self.strategy,
            "n_workers": self.n_workers,
            "words_read": self.words_read,
            "words_distinct": len(self.words),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
