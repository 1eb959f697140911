# plandash/layout.py
"""Gantt geometry.

Everything here is in percent of the track width so the markup layer only
has to format numbers. Two modes exist:

  - "dated": at least one task or milestone carries a parseable due date;
    bars are placed on a padded date window.
  - "sequential": no dates at all; tasks are spread evenly in input order.

An empty input (no tasks, no milestones) yields mode "empty".
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .model import Milestone, Task
from .util.console import warn
from .util.timeparse import month_day_label, parse_iso_day

DAY = dt.timedelta(days=1)
MIN_SPAN = dt.timedelta(days=14)
SHORT_SPAN_PAD = dt.timedelta(days=7)
LONG_SPAN_PAD_RATIO = 0.05

MILESTONE_WIDTH = 2.0


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def fmt_pct(v: float) -> str:
    s = f"{v:.4f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


@dataclass(frozen=True)
class GanttWindow:
    start: dt.datetime
    end: dt.datetime

    @property
    def total(self) -> dt.timedelta:
        return self.end - self.start

    @property
    def total_days(self) -> int:
        return math.ceil(self.total / DAY)

    def position(self, t: dt.datetime) -> float:
        return (t - self.start) / self.total * 100


@dataclass(frozen=True)
class GanttBar:
    kind: str  # "task" | "milestone"
    label: Optional[str]
    css_class: str
    left: float
    width: float
    text: str = ""


@dataclass(frozen=True)
class GanttTick:
    pos: float
    label: str


@dataclass(frozen=True)
class GanttLayout:
    mode: str  # "empty" | "sequential" | "dated"
    bars: Tuple[GanttBar, ...] = ()
    ticks: Tuple[GanttTick, ...] = ()
    today_pos: Optional[float] = None
    window: Optional[GanttWindow] = None


def compute_window(
    due_days: Sequence[dt.datetime],
    project_start: Optional[dt.datetime] = None,
    project_end: Optional[dt.datetime] = None,
) -> GanttWindow:
    """Padded window covering all due days and the project's own dates."""
    if not due_days:
        raise ValueError("compute_window needs at least one date")
    start = min(due_days)
    end = max(due_days)
    if project_start is not None and project_start < start:
        start = project_start
    if project_end is not None and project_end > end:
        end = project_end

    span = end - start
    pad = SHORT_SPAN_PAD if span < MIN_SPAN else span * LONG_SPAN_PAD_RATIO
    return GanttWindow(start=start - pad, end=end + pad)


def compute_ticks(window: GanttWindow) -> Tuple[GanttTick, ...]:
    count = int(clamp(window.total_days // 7, 3, 6))
    step = window.total / count
    ticks: List[GanttTick] = []
    for i in range(count + 1):
        ticks.append(GanttTick(pos=i / count * 100, label=month_day_label(window.start + step * i)))
    return tuple(ticks)


def task_bar_width(task_count: int) -> float:
    if task_count <= 0:
        return 15.0
    return clamp(80 / task_count, 8, 15)


def _sequential(tasks: Sequence[Task], milestones: Sequence[Milestone]) -> GanttLayout:
    n = len(tasks) + len(milestones)
    width = max(60 / n, 8)
    bars = tuple(
        GanttBar(
            kind="task",
            label=t.title,
            css_class=t.status or "",
            left=(i / n) * 80,
            width=width,
            text=t.priority or "",
        )
        for i, t in enumerate(tasks)
    )
    return GanttLayout(mode="sequential", bars=bars)


def _dated_items(items, kind: str):
    out = []
    for x in items:
        if not x.due:
            continue
        day = parse_iso_day(x.due)
        if day is None:
            warn("layout", f"{kind} {x.title!r} has an unparseable due date: {x.due!r}")
            continue
        out.append((x, day))
    return out


def compute_gantt(
    tasks: Sequence[Task],
    milestones: Sequence[Milestone],
    today: str,
    project_start: object = None,
    project_end: object = None,
) -> GanttLayout:
    dated_tasks = _dated_items(tasks, "task")
    dated_milestones = _dated_items(milestones, "milestone")

    if not dated_tasks and not dated_milestones:
        if not tasks and not milestones:
            return GanttLayout(mode="empty")
        return _sequential(tasks, milestones)

    window = compute_window(
        [d for _, d in dated_tasks] + [d for _, d in dated_milestones],
        parse_iso_day(project_start),
        parse_iso_day(project_end),
    )

    width = task_bar_width(len(tasks))
    bars: List[GanttBar] = []
    for t, day in sorted(dated_tasks, key=lambda pair: pair[0].due or ""):
        pos = window.position(day)
        bars.append(
            GanttBar(
                kind="task",
                label=t.title,
                css_class=t.status or "",
                left=max(0.0, pos - width),
                width=min(width, pos),
                text=t.priority or "",
            )
        )
    for m, day in dated_milestones:
        pos = window.position(day)
        bars.append(
            GanttBar(
                kind="milestone",
                label=m.title,
                css_class="milestone",
                left=clamp(pos - MILESTONE_WIDTH / 2, 0, 100 - MILESTONE_WIDTH),
                width=MILESTONE_WIDTH,
            )
        )

    today_day = parse_iso_day(today)
    today_pos = clamp(window.position(today_day), 0, 100) if today_day is not None else None

    return GanttLayout(
        mode="dated",
        bars=tuple(bars),
        ticks=compute_ticks(window),
        today_pos=today_pos,
        window=window,
    )
