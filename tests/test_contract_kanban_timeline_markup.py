from __future__ import annotations

import unittest

from plandash.model import Milestone, Task
from plandash.render.labels import get_labels
from plandash.render.markup.kanban import render_kanban, render_kanban_column, render_task_card
from plandash.render.markup.timeline import milestone_state, render_timeline, sort_milestones

TODAY = "2025-03-10"
L = get_labels("en")


class TestKanbanMarkupContract(unittest.TestCase):
    def test_column_filters_and_keeps_order(self) -> None:
        tasks = [
            Task(title="first", status="backlog"),
            Task(title="other", status="done"),
            Task(title="second", status="backlog"),
        ]
        html = render_kanban_column("backlog", "Backlog", tasks, TODAY, L)
        self.assertIn('<span class="column-count">2</span>', html)
        self.assertLess(html.index("first"), html.index("second"))
        self.assertNotIn("other", html)

    def test_empty_column_shows_placeholder(self) -> None:
        html = render_kanban_column("review", "Review", [Task(status="done")], TODAY, L)
        self.assertIn('<div class="empty-state">No tasks</div>', html)
        self.assertNotIn("task-card", html)

    def test_card_fields(self) -> None:
        html = render_task_card(Task(title="T", status="backlog", priority="P0", due="2025-03-01", assignee="ann"), TODAY, L)
        self.assertIn('<span class="priority priority-p0">P0</span>', html)
        self.assertIn('<span class="due-date overdue">2025-03-01</span>', html)
        self.assertIn('<span class="assignee">@ann</span>', html)

    def test_done_card_is_never_overdue(self) -> None:
        html = render_task_card(Task(title="T", status="done", due="2025-03-01"), TODAY, L)
        self.assertIn('<span class="due-date">2025-03-01</span>', html)

    def test_untitled_and_sparse_card(self) -> None:
        html = render_task_card(Task(status="backlog"), TODAY, L)
        self.assertIn("Untitled task", html)
        self.assertNotIn("priority", html)
        self.assertNotIn("due-date", html)
        self.assertNotIn("assignee", html)

    def test_user_text_is_escaped(self) -> None:
        html = render_task_card(Task(title="<b>x</b>", status="backlog"), TODAY, L)
        self.assertIn("&lt;b&gt;x&lt;/b&gt;", html)
        self.assertNotIn("<b>x</b>", html)

    def test_board_has_five_fixed_columns(self) -> None:
        html = render_kanban([Task(title="odd", status="waiting")], TODAY, L)
        self.assertEqual(html.count('class="kanban-column"'), 5)
        for status in ("backlog", "in-progress", "blocked", "review", "done"):
            self.assertIn(f'data-status="{status}"', html)
        self.assertNotIn("odd", html)


class TestTimelineMarkupContract(unittest.TestCase):
    def test_sort_by_due_with_undated_last_and_stable(self) -> None:
        ms = [
            Milestone(title="u1"),
            Milestone(title="b", due="2025-02-01"),
            Milestone(title="u2"),
            Milestone(title="a", due="2025-01-01"),
            Milestone(title="b2", due="2025-02-01"),
        ]
        self.assertEqual([m.title for m in sort_milestones(ms)], ["a", "b", "b2", "u1", "u2"])

    def test_state(self) -> None:
        self.assertEqual(milestone_state(Milestone(status="achieved", due="2020-01-01"), TODAY), "achieved")
        self.assertEqual(milestone_state(Milestone(status="pending", due="2020-01-01"), TODAY), "overdue")
        self.assertEqual(milestone_state(Milestone(status="pending", due="2030-01-01"), TODAY), "")
        self.assertEqual(milestone_state(Milestone(), TODAY), "")

    def test_render(self) -> None:
        html = render_timeline(
            [Milestone(title="Beta", due="2025-04-01", tasks=("A", "B")), Milestone(status="achieved")],
            TODAY,
            L,
        )
        self.assertIn("Related tasks: A, B", html)
        self.assertIn("Date TBD", html)
        self.assertIn("Untitled milestone", html)
        self.assertIn('class="timeline-item achieved"', html)
        self.assertLess(html.index("Beta"), html.index("Untitled milestone"))

    def test_empty_placeholder(self) -> None:
        self.assertIn("No milestones defined", render_timeline([], TODAY, L))


if __name__ == "__main__":
    unittest.main(verbosity=2)
