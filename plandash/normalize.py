# plandash/normalize.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from .model import Milestone, ProjectMeta, Task
from .util.console import warn
from .util.scalar import scalar_text


def _text(d: Dict[str, Any], key: str) -> str | None:
    return scalar_text(d.get(key))


def normalize_task(t: Any) -> Task:
    if not isinstance(t, dict):
        warn("normalize", f"task entry is not a mapping: {t!r}")
        return Task()
    return Task(
        title=_text(t, "title"),
        status=_text(t, "status"),
        priority=_text(t, "priority"),
        due=_text(t, "due"),
        assignee=_text(t, "assignee"),
        raw=dict(t),
    )


def _task_titles(v: Any) -> Tuple[str, ...]:
    if isinstance(v, list):
        return tuple(s for s in (scalar_text(x) for x in v) if s is not None)
    if v is None:
        return ()
    s = scalar_text(v)
    return (s,) if s else ()


def normalize_milestone(m: Any) -> Milestone:
    if not isinstance(m, dict):
        warn("normalize", f"milestone entry is not a mapping: {m!r}")
        return Milestone()
    return Milestone(
        title=_text(m, "title"),
        due=_text(m, "due"),
        status=_text(m, "status"),
        tasks=_task_titles(m.get("tasks")),
        raw=dict(m),
    )


def normalize_tasks(items: Iterable[Any]) -> Tuple[Task, ...]:
    return tuple(normalize_task(t) for t in items)


def normalize_milestones(items: Iterable[Any]) -> Tuple[Milestone, ...]:
    return tuple(normalize_milestone(m) for m in items)


def normalize_project(meta: Dict[str, Any]) -> ProjectMeta:
    def _section(name: str) -> Dict[str, Any]:
        v = meta.get(name)
        return dict(v) if isinstance(v, dict) else {}

    return ProjectMeta(
        project=_section("project"),
        stakeholders=_section("stakeholders"),
        scope=_section("scope"),
        notes=meta.get("notes"),
        has_notes="notes" in meta,
    )


def project_to_dict(p: ProjectMeta) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "project": dict(p.project),
        "stakeholders": dict(p.stakeholders),
        "scope": dict(p.scope),
    }
    if p.has_notes:
        out["notes"] = p.notes
    return out


def raw_list(records: Iterable[Task] | Iterable[Milestone]) -> List[Dict[str, Any]]:
    return [dict(r.raw) for r in records]
