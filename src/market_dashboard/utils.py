"""Shared utilities for the market dashboard."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime (timestamp columns reject naive values)."""
    return datetime.now(timezone.utc)
