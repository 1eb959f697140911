# plandash/render/markup/timeline.py
from __future__ import annotations

import functools
from typing import Dict, List, Sequence

from ...model import MILESTONE_ACHIEVED, Milestone
from .common import empty_state, esc, or_placeholder


def _compare_due(a: Milestone, b: Milestone) -> int:
    # Undated milestones sink to the end; two undated ones tie.
    if not a.due and not b.due:
        return 0
    if not a.due:
        return 1
    if not b.due:
        return -1
    return (a.due > b.due) - (a.due < b.due)


def sort_milestones(milestones: Sequence[Milestone]) -> List[Milestone]:
    return sorted(milestones, key=functools.cmp_to_key(_compare_due))


def milestone_state(m: Milestone, today: str) -> str:
    if m.status == MILESTONE_ACHIEVED:
        return "achieved"
    if m.due and m.due < today:
        return "overdue"
    return ""


def render_milestone(m: Milestone, today: str, labels: Dict[str, str]) -> str:
    cls = f"timeline-item {milestone_state(m, today)}".strip()
    parts = [
        f'<div class="{cls}">',
        f'<div class="timeline-date">{or_placeholder(m.due, labels["date_tbd"])}</div>',
        f'<div class="timeline-title">{or_placeholder(m.title, labels["untitled_milestone"])}</div>',
    ]
    if m.tasks:
        parts.append(f'<div class="timeline-tasks">{esc(labels["related_tasks"])}: {esc(", ".join(m.tasks))}</div>')
    parts.append("</div>")
    return "".join(parts)


def render_timeline(milestones: Sequence[Milestone], today: str, labels: Dict[str, str]) -> str:
    if not milestones:
        body = empty_state(labels["no_milestones"])
    else:
        items = "\n  ".join(render_milestone(m, today, labels) for m in sort_milestones(milestones))
        body = f'<div class="timeline">\n  {items}\n</div>'
    return (
        '<div class="timeline-container">\n'
        f"<h3>{esc(labels['timeline_heading'])}</h3>\n"
        f"{body}\n"
        "</div>"
    )
