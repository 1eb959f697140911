"""plandash.api

Stable *library* entrypoint for plandash.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from plandash.blocks import parse_block
from plandash.config import DashboardConfig
from plandash.errors import InputFileError, OutputWriteError, PlandashError
from plandash.html_extract import extract_payload_json_from_html_file, extract_payload_json_from_html_text
from plandash.layout import compute_gantt, compute_window
from plandash.loaders import load_dashboard_data, load_frontmatter_list, parse_frontmatter, parse_project_meta
from plandash.model import DashboardData, Milestone, ProjectMeta, Task
from plandash.normalize import normalize_milestones, normalize_project, normalize_tasks
from plandash.render.inline import build_html
from plandash.stats import compute_stats, is_overdue
from plandash.util.scalar import parse_value

PathLike = Union[str, Path]


def dashboard_from_texts(tasks_text: str, timeline_text: str, project_text: str) -> DashboardData:
    """Parse the three documents from memory (no file access)."""
    return DashboardData(
        tasks=normalize_tasks(load_frontmatter_list(tasks_text, "tasks")),
        milestones=normalize_milestones(load_frontmatter_list(timeline_text, "milestones")),
        project=normalize_project(parse_project_meta(project_text)),
    )


def render_dashboard(root: PathLike = ".", *, today: Optional[str] = None, lang: str = "en") -> str:
    """Load the documents under `root` and return the dashboard HTML."""
    cfg = DashboardConfig.from_root(root, today=today, lang=lang)
    return build_html(load_dashboard_data(cfg), cfg.resolve_today(), lang=cfg.lang)


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
_PUBLIC_EXPORTS = (
    "DashboardConfig",
    "DashboardData",
    "InputFileError",
    "Milestone",
    "OutputWriteError",
    "PlandashError",
    "ProjectMeta",
    "Task",
    "build_html",
    "compute_gantt",
    "compute_stats",
    "compute_window",
    "dashboard_from_texts",
    "extract_payload_json_from_html_file",
    "extract_payload_json_from_html_text",
    "is_overdue",
    "load_dashboard_data",
    "load_frontmatter_list",
    "parse_block",
    "parse_frontmatter",
    "parse_project_meta",
    "parse_value",
    "render_dashboard",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
