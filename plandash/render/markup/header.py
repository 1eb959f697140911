# plandash/render/markup/header.py
from __future__ import annotations

from typing import Dict, List

from ...model import ProjectMeta
from .common import esc


def project_title(project: ProjectMeta, labels: Dict[str, str]) -> str:
    return project.field_text("name") or labels["default_title"]


def render_header(project: ProjectMeta, today: str, labels: Dict[str, str]) -> str:
    spans: List[str] = []
    for key, label_key in (
        ("type", "meta_type"),
        ("status", "meta_status"),
        ("start_date", "meta_start"),
        ("target_date", "meta_target"),
    ):
        v = project.field_text(key)
        if v:
            spans.append(f"<span>{esc(labels[label_key])}: {esc(v)}</span>")
    spans.append(f"<span>{esc(labels['meta_updated'])}: {esc(today)}</span>")

    return (
        "<header>\n"
        f"  <h1>{esc(project_title(project, labels))}</h1>\n"
        '  <div class="project-meta">\n    '
        + "\n    ".join(spans)
        + "\n  </div>\n</header>"
    )
