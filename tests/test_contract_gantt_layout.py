from __future__ import annotations

import datetime as dt
import unittest

from plandash.layout import compute_gantt, compute_ticks, compute_window, fmt_pct, task_bar_width
from plandash.model import Milestone, Task
from plandash.render.labels import get_labels
from plandash.render.markup.gantt import render_gantt

UTC = dt.timezone.utc


def _d(s: str) -> dt.datetime:
    y, m, d = (int(x) for x in s.split("-"))
    return dt.datetime(y, m, d, tzinfo=UTC)


class TestGanttWindowContract(unittest.TestCase):
    def test_short_span_pads_seven_days(self) -> None:
        w = compute_window([_d("2025-01-10"), _d("2025-01-15")])
        self.assertEqual(w.start, _d("2025-01-03"))
        self.assertEqual(w.end, _d("2025-01-22"))
        self.assertGreaterEqual(w.total, dt.timedelta(days=5 + 14))

    def test_long_span_pads_five_percent(self) -> None:
        w = compute_window([_d("2025-01-01"), _d("2025-03-02")])  # 60 days
        self.assertEqual(w.start, _d("2025-01-01") - dt.timedelta(days=3))
        self.assertEqual(w.end, _d("2025-03-02") + dt.timedelta(days=3))

    def test_project_dates_widen_the_window(self) -> None:
        w = compute_window([_d("2025-02-01")], _d("2025-01-01"), _d("2025-03-02"))
        self.assertEqual(w.start, _d("2025-01-01") - dt.timedelta(days=3))
        self.assertEqual(w.end, _d("2025-03-02") + dt.timedelta(days=3))

    def test_project_dates_inside_window_are_ignored(self) -> None:
        w = compute_window([_d("2025-01-01"), _d("2025-03-02")], _d("2025-02-01"), _d("2025-02-02"))
        self.assertEqual(w.start, _d("2024-12-29"))

    def test_ticks_are_clamped(self) -> None:
        short = compute_window([_d("2025-01-10")])  # 14 days total -> 3 ticks
        ticks = compute_ticks(short)
        self.assertEqual(len(ticks), 4)
        self.assertEqual(ticks[0].label, "1/3")
        self.assertEqual(ticks[-1].pos, 100.0)

        long = compute_window([_d("2025-01-01"), _d("2025-12-31")])
        self.assertEqual(len(compute_ticks(long)), 7)

    def test_bar_width_clamp(self) -> None:
        self.assertEqual(task_bar_width(1), 15)
        self.assertEqual(task_bar_width(8), 10)
        self.assertEqual(task_bar_width(100), 8)


class TestGanttLayoutContract(unittest.TestCase):
    def test_empty_input(self) -> None:
        layout = compute_gantt([], [], "2025-01-01")
        self.assertEqual(layout.mode, "empty")
        html = render_gantt(layout, get_labels("en"))
        self.assertIn("No tasks or milestones to display", html)

    def test_sequential_mode_spreads_tasks(self) -> None:
        tasks = [Task(title="a", status="done"), Task(title="b"), Task(title="c")]
        layout = compute_gantt(tasks, [Milestone(title="m")], "2025-01-01")
        self.assertEqual(layout.mode, "sequential")
        self.assertEqual([b.left for b in layout.bars], [0.0, 20.0, 40.0])
        self.assertEqual({b.width for b in layout.bars}, {15.0})
        self.assertEqual(layout.bars[0].css_class, "done")

    def test_sequential_width_floor(self) -> None:
        layout = compute_gantt([Task(title=str(i)) for i in range(10)], [], "2025-01-01")
        self.assertEqual(layout.bars[0].width, 8)

    def test_dated_mode_bars(self) -> None:
        tasks = [
            Task(title="late", status="backlog", due="2025-01-15", priority="P1"),
            Task(title="early", status="done", due="2025-01-10"),
            Task(title="undated", status="backlog"),
        ]
        milestones = [Milestone(title="m", due="2025-01-12")]
        layout = compute_gantt(tasks, milestones, "2025-01-12")
        self.assertEqual(layout.mode, "dated")
        self.assertEqual([b.label for b in layout.bars], ["early", "late", "m"])
        window = layout.window
        self.assertIsNotNone(window)

        early, late, marker = layout.bars
        pos_late = window.position(_d("2025-01-15"))
        self.assertAlmostEqual(late.left + late.width, pos_late)
        self.assertAlmostEqual(late.width, 15)
        self.assertEqual(late.text, "P1")
        self.assertEqual(marker.width, 2)
        self.assertAlmostEqual(marker.left, window.position(_d("2025-01-12")) - 1)
        self.assertAlmostEqual(layout.today_pos, window.position(_d("2025-01-12")))

    def test_bar_never_starts_before_zero(self) -> None:
        tasks = [Task(title="t", due="2025-01-01"), Task(title="u", due="2025-04-11")]  # 100-day span
        layout = compute_gantt(tasks, [], "2025-01-10")
        bar = layout.bars[0]
        self.assertEqual(bar.left, 0.0)
        self.assertAlmostEqual(bar.width, 5 / 110 * 100)

    def test_today_is_clamped(self) -> None:
        layout = compute_gantt([Task(due="2025-01-10")], [], "2030-01-01")
        self.assertEqual(layout.today_pos, 100)
        layout = compute_gantt([Task(due="2025-01-10")], [], "2000-01-01")
        self.assertEqual(layout.today_pos, 0)

    def test_unparseable_dates_fall_back_to_sequential(self) -> None:
        layout = compute_gantt([Task(title="x", due="someday")], [], "2025-01-01")
        self.assertEqual(layout.mode, "sequential")

    def test_dated_markup(self) -> None:
        layout = compute_gantt([Task(title="t", due="2025-01-10", status="review")], [Milestone(due="2025-01-11")], "2025-01-10")
        html = render_gantt(layout, get_labels("en"))
        self.assertIn('class="gantt-scale"', html)
        self.assertIn('class="gantt-today"', html)
        self.assertIn('class="gantt-bar review"', html)
        self.assertIn("🎯 Untitled", html)
        self.assertEqual(html.count('class="legend-item"'), 6)

    def test_fmt_pct(self) -> None:
        self.assertEqual(fmt_pct(100.0), "100")
        self.assertEqual(fmt_pct(12.3456789), "12.3457")
        self.assertEqual(fmt_pct(0.00001), "0")
        self.assertEqual(fmt_pct(-0.00001), "0")


if __name__ == "__main__":
    unittest.main(verbosity=2)
