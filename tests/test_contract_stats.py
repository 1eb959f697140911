from __future__ import annotations

import unittest

from plandash.model import Task
from plandash.stats import compute_stats, is_overdue

TODAY = "2025-03-10"


class TestStatsContract(unittest.TestCase):
    def test_status_counts(self) -> None:
        tasks = [Task(status="done")] * 3 + [Task(status="in-progress")] * 2 + [Task(status="blocked")]
        s = compute_stats(tasks, TODAY)
        self.assertEqual((s.total, s.done, s.in_progress, s.blocked), (6, 3, 2, 1))
        self.assertEqual(s.to_dict()["total"], 6)

    def test_unknown_status_counts_only_in_total(self) -> None:
        s = compute_stats([Task(status="waiting"), Task()], TODAY)
        self.assertEqual((s.total, s.done, s.in_progress, s.blocked), (2, 0, 0, 0))

    def test_overdue_predicate(self) -> None:
        self.assertTrue(is_overdue("2025-03-09", "in-progress", TODAY))
        self.assertTrue(is_overdue("2025-03-09", None, TODAY))
        self.assertFalse(is_overdue("2025-03-10", "backlog", TODAY))
        self.assertFalse(is_overdue("2025-03-11", "backlog", TODAY))
        self.assertFalse(is_overdue("2025-01-01", "done", TODAY))
        self.assertFalse(is_overdue(None, "backlog", TODAY))
        self.assertFalse(is_overdue("", "backlog", TODAY))

    def test_overdue_count(self) -> None:
        tasks = [
            Task(status="backlog", due="2025-03-01"),
            Task(status="done", due="2025-03-01"),
            Task(status="review", due="2025-04-01"),
            Task(status="blocked"),
        ]
        self.assertEqual(compute_stats(tasks, TODAY).overdue, 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
