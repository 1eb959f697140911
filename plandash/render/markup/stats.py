# plandash/render/markup/stats.py
from __future__ import annotations

from typing import Dict

from ...stats import TaskStats
from .common import esc


def _card(value: int, label: str, variant: str = "") -> str:
    cls = f"stat-card {variant}".strip()
    return (
        f'<div class="{cls}">'
        f'<div class="stat-value">{value}</div>'
        f'<div class="stat-label">{esc(label)}</div>'
        "</div>"
    )


def render_stats(stats: TaskStats, labels: Dict[str, str]) -> str:
    cards = [
        _card(stats.total, labels["stat_total"]),
        _card(stats.done, labels["stat_done"], "success"),
        _card(stats.in_progress, labels["stat_in_progress"]),
        _card(stats.blocked, labels["stat_blocked"], "danger"),
        _card(stats.overdue, labels["stat_overdue"], "warning"),
    ]
    return '<div class="stats">\n  ' + "\n  ".join(cards) + "\n</div>"
