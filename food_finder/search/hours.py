from __future__ import annotations

import re
from datetime import datetime, time

MINUTES_PER_DAY = 24 * 60

_HOURS_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})\s*$")


def _to_minutes(hour: str, minute: str) -> int | None:
    h, m = int(hour), int(minute)
    if h > 23 or m > 59:
        return None
    return h * 60 + m


def parse_operating_hours(operating_hours: str | None) -> tuple[int, int] | None:
    """
    Parse ``"HH:MM-HH:MM"`` into (start, end) minutes since midnight.

    Day-qualified schedules ("Mon-Fri 09:00-17:00") are not supported and
    return None.
    """
    if not operating_hours:
        return None
    match = _HOURS_RE.match(operating_hours)
    if not match:
        return None
    start = _to_minutes(match.group(1), match.group(2))
    end = _to_minutes(match.group(3), match.group(4))
    if start is None or end is None:
        return None
    return start, end


def is_open_now(operating_hours: str | None, now: datetime | time) -> bool:
    """
    Whether *now* falls inside the window, both ends inclusive.

    A window whose end is before its start runs past midnight.
    """
    window = parse_operating_hours(operating_hours)
    if window is None:
        return False
    start, end = window
    current = now.hour * 60 + now.minute

    if end < start:
        end += MINUTES_PER_DAY
        if current < start:
            current += MINUTES_PER_DAY

    return start <= current <= end
