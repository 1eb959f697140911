# plandash/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .util.scalar import scalar_text

# Kanban column order.
STATUSES: Tuple[str, ...] = ("backlog", "in-progress", "blocked", "review", "done")

STATUS_DONE = "done"
MILESTONE_ACHIEVED = "achieved"


@dataclass(frozen=True)
class Task:
    title: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due: Optional[str] = None
    assignee: Optional[str] = None

    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Milestone:
    title: Optional[str] = None
    due: Optional[str] = None
    status: Optional[str] = None
    tasks: Tuple[str, ...] = ()

    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class ProjectMeta:
    project: Dict[str, Any] = field(default_factory=dict)
    stakeholders: Dict[str, Any] = field(default_factory=dict)
    scope: Dict[str, Any] = field(default_factory=dict)
    notes: Any = None
    has_notes: bool = False

    def field_text(self, key: str) -> Optional[str]:
        v = scalar_text(self.project.get(key))
        return v or None


@dataclass(frozen=True)
class DashboardData:
    tasks: Tuple[Task, ...]
    milestones: Tuple[Milestone, ...]
    project: ProjectMeta


__all__ = [
    "STATUSES",
    "STATUS_DONE",
    "MILESTONE_ACHIEVED",
    "Task",
    "Milestone",
    "ProjectMeta",
    "DashboardData",
]
