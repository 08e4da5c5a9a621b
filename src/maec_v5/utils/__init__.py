"""Utility helpers."""

from .time import Clock, ensure_utc, utc_now

__all__ = ["Clock", "ensure_utc", "utc_now"]
