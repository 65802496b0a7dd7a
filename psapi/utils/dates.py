"""Datetime helpers."""

from __future__ import annotations

import os
from datetime import datetime

import pendulum

DEFAULT_TZ = "America/Los_Angeles"
RFC822_FORMAT = "%a, %d %b %y %H:%M:%S %z"


def timezone_name() -> str:
    return os.environ.get("TIMEZONE", DEFAULT_TZ)


def now_in_tz() -> pendulum.DateTime:
    tz = pendulum.timezone(timezone_name())
    return pendulum.now(tz)


def from_timestamp(ts: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(ts, tz=timezone_name())


def format_rfc822(value: datetime) -> str:
    return value.strftime(RFC822_FORMAT)
