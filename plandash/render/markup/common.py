# plandash/render/markup/common.py
from __future__ import annotations

import html
from typing import Optional


def esc(v: Optional[str]) -> str:
    return html.escape(v or "", quote=True)


def or_placeholder(v: Optional[str], placeholder: str) -> str:
    return esc(v) if v else esc(placeholder)


def empty_state(text: str) -> str:
    return f'<div class="empty-state">{esc(text)}</div>'
