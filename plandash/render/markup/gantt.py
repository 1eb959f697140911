# plandash/render/markup/gantt.py
from __future__ import annotations

from typing import Dict, List

from ...layout import GanttBar, GanttLayout, fmt_pct
from .common import empty_state, esc

_LEGEND = (
    ("var(--text-secondary)", "legend_backlog"),
    ("var(--accent-blue)", "legend_in-progress"),
    ("var(--accent-red)", "legend_blocked"),
    ("var(--accent-yellow)", "legend_review"),
    ("var(--accent-green)", "legend_done"),
    ("var(--accent-purple)", "legend_milestone"),
)


def render_legend(labels: Dict[str, str]) -> str:
    items = "".join(
        f'<div class="legend-item"><span class="legend-color" style="background: {color}"></span>{esc(labels[key])}</div>'
        for color, key in _LEGEND
    )
    return f'<div class="legend">{items}</div>'


def _row(bar: GanttBar, labels: Dict[str, str]) -> str:
    name = esc(bar.label) if bar.label else esc(labels["untitled"])
    if bar.kind == "milestone":
        name = "🎯 " + name
    cls = f"gantt-bar {esc(bar.css_class)}".strip()
    return (
        '<div class="gantt-row">'
        f'<div class="gantt-label" title="{esc(bar.label)}">{name}</div>'
        '<div class="gantt-bars">'
        f'<div class="{cls}" style="left: {fmt_pct(bar.left)}%; width: {fmt_pct(bar.width)}%">{esc(bar.text)}</div>'
        "</div>"
        "</div>"
    )


def render_gantt_chart(layout: GanttLayout, labels: Dict[str, str]) -> str:
    if layout.mode == "empty":
        return empty_state(labels["gantt_empty"])

    rows = "\n  ".join(_row(b, labels) for b in layout.bars)
    if layout.mode == "sequential":
        return (
            '<div class="gantt-chart">\n'
            f'  <div class="gantt-note">{esc(labels["gantt_sequential_note"])}</div>\n'
            f"  {rows}\n"
            "</div>"
        )

    scale: List[str] = ['<div class="gantt-scale">']
    for tick in layout.ticks:
        scale.append(f'<span style="left: {fmt_pct(tick.pos)}%">{esc(tick.label)}</span>')
    scale.append("</div>")
    today = ""
    if layout.today_pos is not None:
        today = f'\n  <div class="gantt-today" style="left: {fmt_pct(layout.today_pos)}%"></div>'
    return (
        '<div class="gantt-chart">\n'
        f"  {''.join(scale)}"
        f"{today}\n"
        f"  {rows}\n"
        "</div>"
    )


def render_gantt(layout: GanttLayout, labels: Dict[str, str]) -> str:
    return (
        '<div class="gantt-container">\n'
        f'<div class="gantt-header"><h3>{esc(labels["gantt_heading"])}</h3></div>\n'
        f"{render_legend(labels)}\n"
        f"{render_gantt_chart(layout, labels)}\n"
        "</div>"
    )
