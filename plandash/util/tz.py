# plandash/util/tz.py
"""Timezone handling for the dashboard's notion of "today".

The rendered page has no clock of its own: overdue flags and the Gantt
today marker are computed once, from the date in the zone given by
``--tz`` / ``PLANDASH_TZ``. UTC is the default.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

try:
    from zoneinfo import ZoneInfo  # py3.9+
except Exception:  # pragma: no cover
    ZoneInfo = None  # type: ignore

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_UTC_ALIASES = {"utc", "z", "gmt"}


def normalize_tz_name(name: Optional[str]) -> str:
    """None, "" and the UTC aliases become "UTC"; "local" stays "local"."""
    s = str(name or "").strip()
    if not s or s.lower() in _UTC_ALIASES:
        return "UTC"
    if s.lower() == "local":
        return "local"
    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """tzinfo for a zone name, a fixed offset ("+08:00", "-0500") or "local".

    Raises ValueError for anything else.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc
    if tz_name == "local":
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh, mm = int(hh_s), int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        return dt.timezone(sign * dt.timedelta(hours=hh, minutes=mm))

    if ZoneInfo is not None:
        try:
            return ZoneInfo(tz_name)  # type: ignore[misc]
        except Exception as ex:
            raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex
    raise ValueError(f"Invalid timezone identifier: {tz_name!r}")


def today_date(tzinfo: dt.tzinfo) -> dt.date:
    """Calendar date right now in `tzinfo`."""
    return dt.datetime.now(tzinfo).date()
