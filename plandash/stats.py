# plandash/stats.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional

from .model import STATUS_DONE, Task


def is_overdue(due: Optional[str], status: Optional[str], today: str) -> bool:
    """Due strictly before today (ISO string compare) and not done."""
    return bool(due) and due < today and status != STATUS_DONE  # type: ignore[operator]


@dataclass(frozen=True)
class TaskStats:
    total: int
    done: int
    in_progress: int
    blocked: int
    overdue: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def compute_stats(tasks: Iterable[Task], today: str) -> TaskStats:
    total = done = in_progress = blocked = overdue = 0
    for t in tasks:
        total += 1
        if t.status == "done":
            done += 1
        elif t.status == "in-progress":
            in_progress += 1
        elif t.status == "blocked":
            blocked += 1
        if is_overdue(t.due, t.status, today):
            overdue += 1
    return TaskStats(total=total, done=done, in_progress=in_progress, blocked=blocked, overdue=overdue)
