# plandash/blocks.py
"""Block parser for the lightweight key/value text used in frontmatter.

Supported shapes:

    key: scalar
    key: [a, b, c]
    key:
      - scalar
      - name: value
        other: value

Only flat ``\\w+`` keys are recognized. Anything deeper than a list of flat
objects is out of scope; unrecognized lines are skipped.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from .util.console import warn
from .util.scalar import parse_value

_KV_RE = re.compile(r"^(\w+):\s*(.*)$", re.ASCII)


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _skippable(trimmed: str) -> bool:
    return trimmed == "" or trimmed.startswith("#")


def _scan_object(lines: List[str], start: int, marker_indent: int, first: str) -> Tuple[Dict[str, Any], int]:
    """Collect one object list entry.

    `first` is the text after the ``- `` marker. Returns the object and the
    index of the first line that does not belong to it.
    """
    obj: Dict[str, Any] = {}
    m = _KV_RE.match(first)
    if m:
        obj[m.group(1)] = parse_value(m.group(2))

    j = start
    while j < len(lines):
        line = lines[j]
        trimmed = line.strip()
        if _skippable(trimmed):
            j += 1
            continue
        if _indent(line) <= marker_indent or trimmed.startswith("- "):
            break
        pm = _KV_RE.match(trimmed)
        if pm:
            obj[pm.group(1)] = parse_value(pm.group(2))
        else:
            warn("blocks", f"ignored line {j + 1} inside list object: {trimmed!r}")
        j += 1
    return obj, j


def _as_list(result: Dict[str, Any], key: str) -> List[Any]:
    cur = result.get(key)
    if isinstance(cur, list):
        return cur
    coerced: List[Any] = [] if cur is None else [cur]
    result[key] = coerced
    return coerced


def parse_block(text: str) -> Dict[str, Any]:
    lines = text.split("\n")
    result: Dict[str, Any] = {}
    current_key: Optional[str] = None

    i = 0
    while i < len(lines):
        line = lines[i]
        trimmed = line.strip()
        i += 1
        if _skippable(trimmed):
            continue

        if trimmed.startswith("- "):
            if current_key is None:
                warn("blocks", f"list item without a key on line {i}: {trimmed!r}")
                continue
            items = _as_list(result, current_key)
            item = trimmed[2:]
            if ":" in item:
                obj, i = _scan_object(lines, i, _indent(line), item)
                items.append(obj)
            else:
                items.append(parse_value(item))
            continue

        m = _KV_RE.match(trimmed)
        if not m:
            warn("blocks", f"ignored line {i}: {trimmed!r}")
            continue
        current_key = m.group(1)
        value = m.group(2)
        if value == "" or value == "[]":
            result[current_key] = []
        else:
            result[current_key] = parse_value(value)

    return result
