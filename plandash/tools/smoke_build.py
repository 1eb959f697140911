#!/usr/bin/env python3
"""
plandash smoke build

Goals:
  - Generate a dashboard from a synthetic in-memory project, without any
    input files on disk.
  - Run basic invariants so refactors fail fast (avoid blank page surprises).

Usage:
  PYTHONPATH=/path/to/repo python -m plandash.tools.smoke_build --out build/plandash_smoke.html
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from plandash.api import dashboard_from_texts
from plandash.html_extract import HtmlPayloadExtractError, extract_payload_json_from_html_text
from plandash.render.inline import build_html
from plandash.render.labels import LABELS

SMOKE_TODAY = "2025-03-10"

SMOKE_TASKS = """---
tasks:
  - title: "SMOKE: Planned task"
    status: in-progress
    priority: P0
    due: 2025-03-05
    assignee: alice
  - title: "SMOKE: Finished task"
    status: done
    priority: P2
    due: 2025-03-01
  - title: "SMOKE: Blocked task"
    status: blocked
    priority: P1
---
"""

SMOKE_TIMELINE = """---
milestones:
  - title: "SMOKE: Beta"
    due: 2025-03-20
    status: pending
    tasks: [SMOKE: Planned task, SMOKE: Blocked task]
  - title: "SMOKE: Kickoff"
    due: 2025-02-20
    status: achieved
---
"""

SMOKE_PROJECT = """project:
  name: Smoke Project
  type: internal
  status: active
  start_date: 2025-02-15
  target_date: 2025-04-01
notes: synthetic smoke data
"""

REQUIRED_IDS = ("kanban", "timeline", "gantt", "pm-data")
TEMPLATE_MARKERS = ("__HTML_LANG__", "__PAGE_TITLE__", "__CSS_BLOCK__", "__JS_BLOCK__", "__BODY_MARKUP__", "__DATA_JSON__")


def _die(msg: str, rc: int = 2) -> int:
    print(f"[plandash-smoke-build] ERROR: {msg}", file=sys.stderr)
    return rc


def basic_html_checks(html: str, *, strict: bool = False) -> None:
    # Keep these checks broad, to avoid brittleness across refactors.
    if not isinstance(html, str) or len(html) < 3000:
        raise RuntimeError(f"Smoke HTML too small ({len(html)} chars); likely a failed assembly.")

    for marker in TEMPLATE_MARKERS:
        if marker in html:
            raise RuntimeError(f"Template marker {marker} still present in generated HTML.")

    if "SMOKE: Planned task" not in html:
        raise RuntimeError("Expected synthetic task label missing from HTML output.")

    if not strict:
        return

    if "<!doctype html>" not in html.lower():
        raise RuntimeError("Strict: missing <!doctype html>.")
    if '<meta charset="utf-8"' not in html.lower():
        raise RuntimeError("Strict: missing meta charset utf-8.")

    for id_ in REQUIRED_IDS:
        n = html.count(f'id="{id_}"')
        if n != 1:
            raise RuntimeError(f"Strict: expected id={id_!r} exactly once (found {n}).")

    if html.count('class="kanban-column"') != 5:
        raise RuntimeError("Strict: expected five kanban columns.")
    if 'class="gantt-today"' not in html:
        raise RuntimeError("Strict: dated Gantt chart is missing its today marker.")

    try:
        payload = extract_payload_json_from_html_text(html)
    except HtmlPayloadExtractError as e:
        raise RuntimeError(f"Strict: {e}") from e
    for k in ("schema_version", "meta", "project", "tasks", "milestones", "stats"):
        if k not in payload:
            raise RuntimeError(f"Strict: pm-data missing key: {k}")
    if len(payload["tasks"]) != 3 or len(payload["milestones"]) != 2:
        raise RuntimeError("Strict: pm-data task/milestone counts do not match the smoke input.")
    if payload["stats"].get("overdue") != 1:
        raise RuntimeError(f"Strict: expected exactly one overdue task, got {payload['stats'].get('overdue')!r}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="plandash-smoke-build")
    p.add_argument("--out", required=True, help="Output HTML path")
    p.add_argument("--today", default=SMOKE_TODAY, help=f"Reference date (default: {SMOKE_TODAY})")
    p.add_argument("--lang", default="en", choices=sorted(LABELS), help="Dashboard language")
    p.add_argument("--strict", action="store_true", help="Enable strict smoke gating (stronger HTML invariants).")
    ns = p.parse_args(argv)

    data = dashboard_from_texts(SMOKE_TASKS, SMOKE_TIMELINE, SMOKE_PROJECT)
    html = build_html(data, ns.today, lang=ns.lang, generated_at="2025-01-01T00:00:00Z")

    try:
        basic_html_checks(html, strict=bool(ns.strict))
    except RuntimeError as e:
        return _die(str(e), rc=3)

    out = Path(ns.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8", newline="\n")

    print(f"[plandash-smoke-build] OK: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
