# plandash/loaders.py
"""Document loaders: frontmatter lists and the sectioned project file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List

from .blocks import parse_block
from .config import DashboardConfig
from .errors import InputFileError
from .model import DashboardData
from .normalize import normalize_milestones, normalize_project, normalize_tasks
from .util.scalar import parse_value

_FRONTMATTER_RE = re.compile(r"---\n(.*?)\n---", re.DOTALL)
_KV_RE = re.compile(r"^(\w+):\s*(.*)$", re.ASCII)
_NOTES_RE = re.compile(r"^notes:\s*(.*)$")

PROJECT_SECTIONS = ("project", "stakeholders", "scope")


def _normalize_newlines(text: str) -> str:
    if text.startswith("\ufeff"):
        text = text[1:]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_frontmatter(text: str) -> Dict[str, Any]:
    """Parse the ``---`` delimited block at the very top of a document."""
    m = _FRONTMATTER_RE.match(_normalize_newlines(text))
    if not m:
        return {}
    return parse_block(m.group(1))


def load_frontmatter_list(text: str, name: str) -> List[Any]:
    v = parse_frontmatter(text).get(name)
    return v if isinstance(v, list) else []


def parse_project_meta(text: str) -> Dict[str, Any]:
    """Parse the flat project document.

    Column-0 ``project:``, ``stakeholders:`` and ``scope:`` switch the active
    section; indented ``key: value`` lines land in it. ``notes:`` is captured
    on its own and ends the section.
    """
    result: Dict[str, Any] = {name: {} for name in PROJECT_SECTIONS}
    section: str | None = None

    for line in _normalize_newlines(text).split("\n"):
        trimmed = line.strip()
        if trimmed == "" or trimmed.startswith("#"):
            continue

        header = next((name for name in PROJECT_SECTIONS if line.startswith(name + ":")), None)
        if header is not None:
            section = header
            continue
        nm = _NOTES_RE.match(line)
        if nm:
            section = None
            result["notes"] = parse_value(nm.group(1))
            continue

        if section is not None and line.startswith("  "):
            m = _KV_RE.match(trimmed)
            if m:
                result[section][m.group(1)] = parse_value(m.group(2))

    return result


def _read(path: Path, label: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputFileError(f"{label} not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Cannot read {label} {path}: {e}") from e


def load_dashboard_data(config: DashboardConfig) -> DashboardData:
    tasks_text = _read(config.tasks_path, "task document")
    timeline_text = _read(config.timeline_path, "timeline document")
    project_text = _read(config.project_path, "project document")

    return DashboardData(
        tasks=normalize_tasks(load_frontmatter_list(tasks_text, "tasks")),
        milestones=normalize_milestones(load_frontmatter_list(timeline_text, "milestones")),
        project=normalize_project(parse_project_meta(project_text)),
    )
