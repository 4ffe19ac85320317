"""
Timestamps for the simulators.

Conditions depend on the local hour and month, and spots date their last report
from the local calendar day. Everything here resolves "local" against the
configured timezone name (`app.timezone`, Asia/Kolkata by default).
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Kolkata"


def attach_timezone(dt: datetime, timezone: str) -> datetime:
    """Read a naive `dt` as wall-clock time in `timezone`; aware values keep their offset."""
    if dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=ZoneInfo(timezone))


def parse_timestamp(value: str, timezone: str) -> datetime:
    """Parse a query or CLI timestamp such as `2026-04-12T05:30+05:30`.

    A trailing `Z` means UTC. A value without an offset is local to `timezone`.
    Blank or malformed input raises ValueError.
    """
    text = value.strip()
    if not text:
        raise ValueError("timestamp is empty")
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"
    return attach_timezone(datetime.fromisoformat(text), timezone)


def now_local(timezone: str) -> datetime:
    return datetime.now(ZoneInfo(timezone))


def today_local(timezone: str) -> date:
    return now_local(timezone).date()
