# plandash/render/markup/kanban.py
from __future__ import annotations

from typing import Dict, List, Sequence

from ...model import STATUSES, Task
from ...stats import is_overdue
from .common import empty_state, esc, or_placeholder


def render_task_card(task: Task, today: str, labels: Dict[str, str]) -> str:
    meta: List[str] = []
    if task.priority:
        meta.append(f'<span class="priority priority-{esc(task.priority.lower())}">{esc(task.priority)}</span>')
    if task.due:
        cls = "due-date overdue" if is_overdue(task.due, task.status, today) else "due-date"
        meta.append(f'<span class="{cls}">{esc(task.due)}</span>')
    if task.assignee:
        meta.append(f'<span class="assignee">@{esc(task.assignee)}</span>')
    return (
        '<div class="task-card">'
        f'<div class="task-title">{or_placeholder(task.title, labels["untitled_task"])}</div>'
        f'<div class="task-meta">{"".join(meta)}</div>'
        "</div>"
    )


def render_kanban_column(status: str, title: str, tasks: Sequence[Task], today: str, labels: Dict[str, str]) -> str:
    column = [t for t in tasks if t.status == status]
    if column:
        cards = "\n    ".join(render_task_card(t, today, labels) for t in column)
    else:
        cards = empty_state(labels["no_tasks"])
    return (
        f'<div class="kanban-column" data-status="{esc(status)}">\n'
        '  <div class="column-header">'
        f"<h3>{esc(title)}</h3>"
        f'<span class="column-count">{len(column)}</span>'
        "</div>\n"
        f"    {cards}\n"
        "</div>"
    )


def render_kanban(tasks: Sequence[Task], today: str, labels: Dict[str, str]) -> str:
    columns = [render_kanban_column(s, labels[f"col_{s}"], tasks, today, labels) for s in STATUSES]
    return '<div class="kanban">\n' + "\n".join(columns) + "\n</div>"
