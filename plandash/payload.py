# plandash/payload.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional

from .model import DashboardData
from .normalize import project_to_dict, raw_list
from .stats import compute_stats

SCHEMA_VERSION = 1


def _now_iso_z() -> str:
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def build_payload(
    data: DashboardData,
    today: str,
    *,
    lang: str = "en",
    generated_at: Optional[str] = None,
) -> Dict[str, Any]:
    """JSON-safe snapshot of the parsed inputs embedded in the page."""
    return {
        "schema_version": SCHEMA_VERSION,
        "meta": {
            "generated_at": generated_at or _now_iso_z(),
            "today": today,
            "lang": lang,
        },
        "project": project_to_dict(data.project),
        "tasks": raw_list(data.tasks),
        "milestones": raw_list(data.milestones),
        "stats": compute_stats(data.tasks, today).to_dict(),
    }
