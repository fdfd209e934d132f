"""Static work partitioning across worker threads."""

import traceback
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Literal, TextIO

from lettergroups.solver.materialize import GroupMaterializer, LineSink
from lettergroups.solver.utils import SearchStrategy
from lettergroups.util import int_comma


@dataclass
class WorkerResult:
    """Outcome of one worker's share of the search."""

    worker_idx: int
    status: Literal["success", "error"]
    roots_searched: int = 0
    groups_found: int = 0
    lines_written: int = 0
    err_msg: str | None = None


WorkerTask = Callable[[int, range], WorkerResult]
"""Callable run by each worker with its index and its assigned root indices."""


class WorkPartitioner:
    """Round-robin assignment of root indices to a fixed pool of threads.

    Root `i` goes to worker `i % n_workers`.  The partition is static: there is no work
    stealing, which keeps each worker's order of results reproducible.
    """

    def __init__(self, n_workers: int, *, isolate_errors: bool = True) -> None:
        """Create a partitioner.

        Args:
            n_workers: Number of worker threads (at least 1).
            isolate_errors: If True, an exception inside a worker is captured in its
                `WorkerResult` and the other workers carry on.  If False, the first failure
                is re-raised once all workers have finished.
        """
        if n_workers < 1:
            raise ValueError(f"Number of workers must be positive, got {n_workers}")
        self.n_workers = n_workers
        self.isolate_errors = isolate_errors

    def assigned(self, worker_idx: int, root_count: int) -> range:
        """Return the root indices handled by `worker_idx`."""
        return range(worker_idx, root_count, self.n_workers)

    def run(self, task: WorkerTask, root_count: int) -> list[WorkerResult]:
        """Run `task` on every worker and wait for all of them.

        Returns:
            One result per worker, ordered by worker index.
        """
        with ThreadPoolExecutor(
            max_workers=self.n_workers, thread_name_prefix="lettergroups-worker"
        ) as executor:
            futures = [
                executor.submit(self._guarded, task, idx, self.assigned(idx, root_count))
                for idx in range(self.n_workers)
            ]
        # Leaving the executor joins every worker; only now are results collected.
        return [future.result() for future in futures]

    def _guarded(self, task: WorkerTask, worker_idx: int, roots: range) -> WorkerResult:
        if not self.isolate_errors:
            return task(worker_idx, roots)
        try:
            return task(worker_idx, roots)
        except Exception as e:
            return WorkerResult(
                worker_idx=worker_idx,
                status="error",
                err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
            )


def make_worker_task(
    strategy: SearchStrategy,
    materializer: GroupMaterializer,
    sink: LineSink,
    *,
    logf: TextIO | None = None,
    report_interval: int = 0,
) -> WorkerTask:
    """Build the task each worker runs over its assigned roots.

    Args:
        strategy: Search strategy shared read-only by all workers.
        materializer: Turns each found group into output lines.
        sink: Synchronized output for the lines.
        logf: Optional stream for progress reports.
        report_interval: Report progress every this many roots (0 disables reporting).
    """

    def worker_task(worker_idx: int, roots: range) -> WorkerResult:
        result = WorkerResult(worker_idx=worker_idx, status="success")
        for root_idx in roots:
            for group in strategy.search(root_idx):
                result.groups_found += 1
                result.lines_written += materializer.emit(strategy.slot_words(group), sink)
            result.roots_searched += 1
            if logf is None or not report_interval:
                continue
            if result.roots_searched % report_interval == 0:
                print(
                    f"Worker {worker_idx}: {int_comma(result.roots_searched)}/{len(roots)} roots, "
                    f"{int_comma(result.groups_found)} groups",
                    file=logf,
                    flush=True,
                )
        return result

    return worker_task
