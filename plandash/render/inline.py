# plandash/render/inline.py
from __future__ import annotations

import json
import re
from typing import Optional

from ..model import DashboardData
from ..payload import build_payload
from .html_markup import render_body
from .labels import get_labels
from .markup.common import esc
from .markup.header import project_title
from .template import HTML_TEMPLATE, PAGE_MARKERS

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

_MARKER_RE = re.compile("|".join(re.escape(m) for m in PAGE_MARKERS))


def _dumps(payload: dict) -> str:
    if orjson is not None:
        try:
            return orjson.dumps(payload).decode("utf-8")
        except TypeError:
            # orjson rejects integers outside 64 bits; json handles them.
            pass
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def build_html(
    data: DashboardData,
    today: str,
    *,
    lang: str = "en",
    generated_at: Optional[str] = None,
) -> str:
    # Hardening:
    #   - every page marker must appear in the template exactly once;
    #   - substitution is single-pass so user text can never be re-expanded.
    if not isinstance(data, DashboardData):
        raise TypeError(f"data must be DashboardData, got {type(data).__name__}")

    for marker in PAGE_MARKERS:
        n = HTML_TEMPLATE.count(marker)
        if n != 1:
            raise RuntimeError(f"HTML_TEMPLATE must contain {marker} exactly once (found {n})")

    labels = get_labels(lang)
    payload = build_payload(data, today, lang=lang, generated_at=generated_at)
    data_json = _dumps(payload).replace("</", r"<\/")  # script-safe injection

    values = {
        "__HTML_LANG__": esc(labels["html_lang"]),
        "__PAGE_TITLE__": esc(f"{project_title(data.project, labels)} - {labels['page_suffix']}"),
        "__BODY_MARKUP__": render_body(data, today, labels),
        "__DATA_JSON__": data_json,
    }
    return _MARKER_RE.sub(lambda m: values[m.group(0)], HTML_TEMPLATE)
