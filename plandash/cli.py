from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path

from .config import DashboardConfig
from .errors import OutputWriteError
from .loaders import load_dashboard_data
from .render.inline import build_html
from .render.labels import LABELS
from .util.console import eprint
from .util.timeparse import parse_date_yyyy_mm_dd
from .util.tz import normalize_tz_name, resolve_tz


def _write_output(out_path: Path, html: str) -> None:
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create output directory '{out_path.parent}': {e}") from e
    try:
        out_path.write_text(html, encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputWriteError(f"Cannot write output file '{out_path}': {e}") from e


def run(config: DashboardConfig) -> Path:
    """Read the three documents, render the dashboard and write it."""
    print("Reading project data...")
    data = load_dashboard_data(config)
    print(f"- tasks: {len(data.tasks)}")
    print(f"- milestones: {len(data.milestones)}")

    print("Generating HTML...")
    html = build_html(data, config.resolve_today(), lang=config.lang)

    out_path = Path(os.path.abspath(config.out_path))
    _write_output(out_path, html)
    print(f"Dashboard written: {out_path}")
    print("Open this file in a browser to view the dashboard.")
    return out_path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="plandash",
        description="Render tasks.md, timeline.md and project.yaml into a static HTML dashboard.",
    )
    ap.add_argument("--root", default=".", help="Directory holding the input files (default: current directory)")
    ap.add_argument("--tasks", default=None, help="Task document (default: <root>/tasks.md)")
    ap.add_argument("--timeline", default=None, help="Milestone document (default: <root>/timeline.md)")
    ap.add_argument("--project", default=None, help="Project metadata (default: <root>/project.yaml)")
    ap.add_argument("--out", default=None, help="Output HTML path (default: <root>/docs/dashboard.html)")
    ap.add_argument("--today", default=None, help="Reference date YYYY-MM-DD (default: today in --tz)")
    ap.add_argument(
        "--tz",
        default=os.getenv("PLANDASH_TZ", "UTC"),
        help="Timezone used to compute today (default: env PLANDASH_TZ or 'UTC')",
    )
    ap.add_argument("--lang", default="en", choices=sorted(LABELS), help="Dashboard language (default: en)")
    ap.add_argument("--open", action="store_true", help="Open the generated HTML in a browser")
    return ap


def config_from_args(args: argparse.Namespace) -> DashboardConfig:
    tz_name = normalize_tz_name(args.tz)
    try:
        resolve_tz(tz_name)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    today = None
    if args.today:
        try:
            today = parse_date_yyyy_mm_dd(args.today).isoformat()
        except ValueError:
            raise SystemExit(f"Invalid --today value: {args.today!r} (expected YYYY-MM-DD)")

    return DashboardConfig.from_root(
        args.root,
        tasks_path=args.tasks,
        timeline_path=args.timeline,
        project_path=args.project,
        out_path=args.out,
        today=today,
        tz=tz_name,
        lang=args.lang,
        open_browser=bool(args.open),
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        out_path = run(config)
    except Exception as e:
        eprint(f"[plandash] ERROR: {e}")
        return 1

    if config.open_browser:
        try:
            webbrowser.open(out_path.as_uri())
        except Exception as e:
            eprint(f"[plandash] WARN: could not open browser: {e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
