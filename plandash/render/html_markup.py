# plandash/render/html_markup.py
from __future__ import annotations

from typing import Dict

from ..layout import compute_gantt
from ..model import DashboardData
from ..stats import compute_stats
from .markup.common import esc
from .markup.gantt import render_gantt
from .markup.header import render_header
from .markup.kanban import render_kanban
from .markup.stats import render_stats
from .markup.timeline import render_timeline

TABS = ("kanban", "timeline", "gantt")
DEFAULT_TAB = "kanban"


def render_tabs(labels: Dict[str, str]) -> str:
    buttons = []
    for name in TABS:
        cls = "tab active" if name == DEFAULT_TAB else "tab"
        buttons.append(f'<button class="{cls}" data-tab="{name}">{esc(labels["tab_" + name])}</button>')
    return '<div class="tabs">\n  ' + "\n  ".join(buttons) + "\n</div>"


def _tab_content(name: str, inner: str) -> str:
    cls = "tab-content active" if name == DEFAULT_TAB else "tab-content"
    return f'<div id="{name}" class="{cls}">\n{inner}\n</div>'


def render_body(data: DashboardData, today: str, labels: Dict[str, str]) -> str:
    project = data.project
    layout = compute_gantt(
        data.tasks,
        data.milestones,
        today,
        project.project.get("start_date"),
        project.project.get("target_date"),
    )
    return "\n\n".join([
        render_header(project, today, labels),
        render_stats(compute_stats(data.tasks, today), labels),
        render_tabs(labels),
        _tab_content("kanban", render_kanban(data.tasks, today, labels)),
        _tab_content("timeline", render_timeline(data.milestones, today, labels)),
        _tab_content("gantt", render_gantt(layout, labels)),
    ])
