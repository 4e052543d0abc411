"""Deterministic clocks for testing "now" constructors."""

from __future__ import annotations

from datetime import datetime, timezone

#: 2024-03-01 15:30 UTC, which is already 2024-03-02 in Sydney (UTC+11).
FIXED_NOW = datetime(2024, 3, 1, 15, 30, tzinfo=timezone.utc)


def fixed_now() -> datetime:
    """Clock returning ``FIXED_NOW``."""
    return FIXED_NOW
