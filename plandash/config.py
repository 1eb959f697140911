# plandash/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Union

from .util.timeparse import parse_date_yyyy_mm_dd
from .util.tz import normalize_tz_name, resolve_tz, today_date

PathLike = Union[str, Path]

DEFAULT_TASKS_NAME = "tasks.md"
DEFAULT_TIMELINE_NAME = "timeline.md"
DEFAULT_PROJECT_NAME = "project.yaml"
DEFAULT_OUT_PARTS = ("docs", "dashboard.html")


@dataclass(frozen=True)
class DashboardConfig:
    """Input/output locations and rendering knobs for one run."""

    root: Path
    tasks_path: Path
    timeline_path: Path
    project_path: Path
    out_path: Path
    today: Optional[str] = None
    tz: str = "UTC"
    lang: str = "en"
    open_browser: bool = False

    @classmethod
    def from_root(cls, root: PathLike = ".", **overrides: Any) -> "DashboardConfig":
        base = Path(root)
        cfg = cls(
            root=base,
            tasks_path=base / DEFAULT_TASKS_NAME,
            timeline_path=base / DEFAULT_TIMELINE_NAME,
            project_path=base / DEFAULT_PROJECT_NAME,
            out_path=base.joinpath(*DEFAULT_OUT_PARTS),
        )
        clean = {k: v for k, v in overrides.items() if v is not None}
        for key in ("tasks_path", "timeline_path", "project_path", "out_path"):
            if key in clean:
                clean[key] = Path(clean[key])
        if "tz" in clean:
            clean["tz"] = normalize_tz_name(clean["tz"])
        if clean.get("today"):
            # Overdue checks compare ISO strings, so "2025-1-5" must become "2025-01-05".
            clean["today"] = parse_date_yyyy_mm_dd(str(clean["today"])).isoformat()
        return replace(cfg, **clean)

    def resolve_today(self) -> str:
        """ISO date used for overdue checks and the Gantt today marker."""
        if self.today:
            return self.today
        return today_date(resolve_tz(self.tz)).isoformat()

