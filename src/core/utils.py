from __future__ import annotations
from datetime import datetime, timedelta

import pandas as pd


def to_utc(value) -> pd.Timestamp:
    """Parse an ISO-8601 timestamp (or datetime) as a UTC Timestamp; naive values are taken as UTC."""
    ts = pd.Timestamp(value) if value is not None else pd.NaT
    if pd.isna(ts):
        raise ValueError(f"Missing or invalid timestamp: {value!r}")
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def month_key(published_at: str) -> str:
    return to_utc(published_at).strftime("%Y-%m")


def days_before(now: datetime, days: int) -> pd.Timestamp:
    return to_utc(now) - timedelta(days=days)


def pct(n: int, total: int) -> float:
    """Share of ``total`` in percent, 2 decimals; 0 when total is 0."""
    if not total:
        return 0.0
    return round(n * 100 / total, 2)
