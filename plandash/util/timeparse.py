# plandash/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional

_YMD_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def parse_iso_day(value: object) -> Optional[dt.datetime]:
    """UTC midnight for a value starting with YYYY-MM-DD, else None.

    Trailing text (a time part, a comment) is ignored.
    """
    if not isinstance(value, str):
        return None
    m = _YMD_RE.match(value.strip())
    if not m:
        return None
    try:
        d = dt.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
    return dt.datetime(d.year, d.month, d.day, tzinfo=dt.timezone.utc)


def month_day_label(t: dt.datetime) -> str:
    return f"{t.month}/{t.day}"
