import io
import threading
import unittest
from collections.abc import Iterator

from lettergroups.solver.config import SolverConfig
from lettergroups.solver.materialize import GroupMaterializer, LineSink
from lettergroups.solver.parallel import WorkerResult, WorkPartitioner, make_worker_task
from lettergroups.solver.solver import find_groups


class FlakyStrategy:
    """Strategy whose root 2 fails; every other root yields one single-word group."""

    name = "flaky"

    def __init__(self, words: list[str]) -> None:
        self.words = words

    @property
    def root_count(self) -> int:
        return len(self.words)

    def search(self, root_idx: int) -> Iterator[tuple[str, ...]]:
        if root_idx == 2:
            raise RuntimeError("boom")
        yield (self.words[root_idx],)

    def slot_words(self, group: tuple[str, ...]) -> list[tuple[str, ...]]:
        return [(word,) for word in group]


class PartitionTests(unittest.TestCase):
    def test_round_robin_assignment(self) -> None:
        partitioner = WorkPartitioner(3)
        self.assertEqual(list(partitioner.assigned(0, 8)), [0, 3, 6])
        self.assertEqual(list(partitioner.assigned(1, 8)), [1, 4, 7])
        self.assertEqual(list(partitioner.assigned(2, 8)), [2, 5])

    def test_every_root_assigned_exactly_once(self) -> None:
        for n_workers in (1, 2, 5, 16):
            partitioner = WorkPartitioner(n_workers)
            roots = [i for w in range(n_workers) for i in partitioner.assigned(w, 37)]
            self.assertEqual(sorted(roots), list(range(37)))

    def test_more_workers_than_roots(self) -> None:
        partitioner = WorkPartitioner(4)
        seen: list[int] = []
        lock = threading.Lock()

        def task(worker_idx: int, roots: range) -> WorkerResult:
            with lock:
                seen.extend(roots)
            return WorkerResult(worker_idx=worker_idx, status="success", roots_searched=len(roots))

        results = partitioner.run(task, 2)
        self.assertEqual([r.worker_idx for r in results], [0, 1, 2, 3])
        self.assertEqual([r.roots_searched for r in results], [1, 1, 0, 0])
        self.assertEqual(sorted(seen), [0, 1])

    def test_rejects_non_positive_worker_count(self) -> None:
        with self.assertRaises(ValueError):
            WorkPartitioner(0)


class FailurePolicyTests(unittest.TestCase):
    def _task(self, out: io.StringIO):
        strategy = FlakyStrategy(["a", "b", "c", "d", "e"])
        return make_worker_task(strategy, GroupMaterializer(), LineSink(out))

    def test_isolated_failure_only_drops_that_worker(self) -> None:
        out = io.StringIO()
        results = WorkPartitioner(2, isolate_errors=True).run(self._task(out), 5)
        self.assertEqual(results[0].status, "error")
        self.assertIn("boom", results[0].err_msg or "")
        self.assertEqual(results[1].status, "success")
        self.assertEqual(results[1].groups_found, 2)
        lines = out.getvalue().splitlines()
        self.assertIn("b", lines)
        self.assertIn("d", lines)
        self.assertNotIn("c", lines)

    def test_propagated_failure_is_raised_after_join(self) -> None:
        out = io.StringIO()
        with self.assertRaises(RuntimeError):
            WorkPartitioner(2, isolate_errors=False).run(self._task(out), 5)
        # worker 1 still ran to completion
        self.assertIn("d", out.getvalue().splitlines())

    def test_find_groups_summarizes_worker_results(self) -> None:
        config = SolverConfig(isolate_worker_errors=True, report_interval=0, log_file=None)
        out = io.StringIO()
        summary = find_groups(["ab", "cd"], 2, out=out, n_workers=2, config=config)
        self.assertEqual(summary.failed, [])
        self.assertEqual(summary.groups_found, 1)
        self.assertEqual(summary.lines_written, 1)
        self.assertEqual(summary.root_count, 2)


class ProgressReportTests(unittest.TestCase):
    def test_progress_reported_every_interval(self) -> None:
        logf = io.StringIO()
        config = SolverConfig(report_interval=2, log_file=None)
        find_groups(
            ["a", "b", "c", "d", "e"], 1, out=io.StringIO(), n_workers=1, config=config, logf=logf
        )
        reports = [line for line in logf.getvalue().splitlines() if line.startswith("Worker 0:")]
        self.assertEqual(
            reports, ["Worker 0: 2/5 roots, 2 groups", "Worker 0: 4/5 roots, 4 groups"]
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
