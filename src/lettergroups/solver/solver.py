"""Main solver module: builds the search structures and runs the workers."""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from lettergroups.solver.canonical import CanonicalSearch
from lettergroups.solver.config import SolverConfig
from lettergroups.solver.config import config as solver_config
from lettergroups.solver.materialize import GroupMaterializer, LineSink
from lettergroups.solver.naive import NaiveSearch
from lettergroups.solver.parallel import WorkerResult, WorkPartitioner, make_worker_task
from lettergroups.solver.task_args import TaskArgs
from lettergroups.solver.utils import SearchStrategy
from lettergroups.trie import ProfileTrie, RankedTrie
from lettergroups.util import int_comma, time_str
from lettergroups.wordlist import load_word_list


@dataclass
class SearchSummary:
    """Totals for a completed search."""

    strategy: str
    n: int
    n_workers: int
    root_count: int
    elapsed: float
    results: list[WorkerResult] = field(default_factory=list)

    @property
    def groups_found(self) -> int:
        return sum(r.groups_found for r in self.results)

    @property
    def lines_written(self) -> int:
        return sum(r.lines_written for r in self.results)

    @property
    def failed(self) -> list[WorkerResult]:
        return [r for r in self.results if r.status == "error"]


def default_workers() -> int:
    """Number of worker threads to use when none is configured."""
    return os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None


def build_strategy(
    words: list[str], n: int, strategy: str = "tree", *, logf: TextIO | None = None
) -> SearchStrategy:
    """Build the shared search structures for `strategy`.

    Args:
        words: Words with distinct letters each.
        n: Number of words per group.
        strategy: "tree" for the ranked-trie search, "naive" for brute force.
        logf: Optional stream for diagnostics.
    """
    if strategy == "naive":
        return NaiveSearch(words, n)
    if strategy != "tree":
        raise ValueError(f"Unknown search strategy: {strategy!r}")

    trie = ProfileTrie.from_words(words)
    ranked = RankedTrie.derive(trie)
    search = CanonicalSearch(ranked, n)
    if logf is not None:
        print(f"{int_comma(trie.node_count())} trie nodes", file=logf, flush=True)
        print(f"{int_comma(search.root_count)} word-bearing nodes", file=logf, flush=True)
    return search


def find_groups(
    words: list[str],
    n: int,
    *,
    out: TextIO,
    strategy: str = "tree",
    n_workers: int = 1,
    config: SolverConfig | None = None,
    logf: TextIO | None = None,
) -> SearchSummary:
    """Find every group of `n` words with pairwise disjoint letters.

    Args:
        words: Words with distinct letters each (see `wordlist.filter_distinct`).
        n: Number of words per group.
        out: Stream receiving one line per group.
        strategy: "tree" (default) or "naive".
        n_workers: Number of worker threads.
        config: Solver settings; defaults to the module-level configuration.
        logf: Optional stream for diagnostics.

    Returns:
        A summary of the run.  With isolated worker errors, failures are listed in
        `SearchSummary.failed` instead of being raised.
    """
    config = solver_config if config is None else config
    start = time()
    search = build_strategy(words, n, strategy, logf=logf)

    sink = LineSink(out)
    task = make_worker_task(
        search,
        GroupMaterializer(config.separator),
        sink,
        logf=logf,
        report_interval=config.report_interval,
    )
    partitioner = WorkPartitioner(n_workers, isolate_errors=config.isolate_worker_errors)
    try:
        results = partitioner.run(task, search.root_count)
    finally:
        sink.flush()

    return SearchSummary(
        strategy=search.name,
        n=n,
        n_workers=n_workers,
        root_count=search.root_count,
        elapsed=time() - start,
        results=results,
    )


def run(
    n: int,
    *,
    input_path: str | None = None,
    config: SolverConfig | None = None,
    out: TextIO | None = None,
) -> SearchSummary:
    """Load the word list and run the search, writing diagnostics to the configured log.

    Args:
        n: Number of words per group.
        input_path: Word list path, or None / "-" for standard input.
        config: Solver settings; defaults to the module-level configuration.
        out: Stream for result lines (default: stdout).
    """
    config = solver_config if config is None else config
    out = out or sys.stdout

    if config.log_file is None:
        return _run_logged(n, input_path, config, out, sys.stderr)

    logfile = Path(config.log_file)
    logfile.parent.mkdir(parents=True, exist_ok=True)
    with open(logfile, "w", encoding="utf-8") as logf:
        return _run_logged(n, input_path, config, out, logf)


def _run_logged(
    n: int, input_path: str | None, config: SolverConfig, out: TextIO, logf: TextIO
) -> SearchSummary:
    # Any loading error surfaces here, before a single worker starts
    words = load_word_list(input_path)
    task_args = TaskArgs(
        words=words,
        n=n,
        strategy=config.strategy,
        n_workers=config.max_workers or default_workers(),
    )

    print("Solver config:", file=logf, flush=True)
    pprint(config.model_dump(), stream=logf, width=100)
    print("Run initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=100)

    print(f"{int_comma(task_args.words_read)} words", file=logf, flush=True)
    print(f"{int_comma(len(task_args.words))} words with distinct letters", file=logf, flush=True)
    print(f"using {task_args.n_workers} threads", file=logf, flush=True)

    summary = find_groups(
        task_args.words,
        task_args.n,
        out=out,
        strategy=task_args.strategy,
        n_workers=task_args.n_workers,
        config=config,
        logf=logf,
    )

    for result in summary.failed:
        print(f"Worker {result.worker_idx} failed:", file=logf, flush=True)
        print(result.err_msg, file=logf, flush=True)
    print(
        f"Found {int_comma(summary.groups_found)} groups "
        f"({int_comma(summary.lines_written)} lines) in {time_str(summary.elapsed)}",
        file=logf,
        flush=True,
    )
    return summary
