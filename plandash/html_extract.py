# Public helper API: read the embedded dashboard payload back out of a page
from __future__ import annotations

import html as _html
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class HtmlPayloadExtractError(RuntimeError):
    message: str
    def __str__(self) -> str:
        return self.message


_BY_ID_RE = re.compile(
    r'<script\b[^>]*\bid=["\']pm-data["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)
_BY_TYPE_RE = re.compile(
    r'<script\b[^>]*\btype=["\']application/json(?:\s*;[^"\']*)?["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)


def _first_json_body(pattern: re.Pattern, html_text: str) -> Any:
    for m in pattern.finditer(html_text):
        body = (m.group("body") or "").strip()
        if not body:
            continue
        try:
            return json.loads(body)
        except ValueError:
            pass
        # entity-escaped embeddings
        try:
            return json.loads(_html.unescape(body))
        except ValueError:
            continue
    return None


def extract_payload_json_from_html_text(html_text: str) -> dict[str, Any]:
    """
    Extract the dashboard payload JSON from HTML.

    Supported embeddings:
      1) Preferred: <script id="pm-data"> ...json... </script>   (type may be absent/variant)
      2) Also:      <script type="application/json[;...]" ...> ...json... </script>
    """
    for pattern in (_BY_ID_RE, _BY_TYPE_RE):
        payload = _first_json_body(pattern, html_text)
        if isinstance(payload, dict):
            return payload
    raise HtmlPayloadExtractError("No <script type='application/json'> payload block found in HTML.")


def extract_payload_json_from_html_file(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    html = p.read_text(encoding="utf-8")
    return extract_payload_json_from_html_text(html)
