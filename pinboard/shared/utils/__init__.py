"""Shared utilities (UTC datetime helpers)."""

from pinboard.shared.utils.datetime import ensure_utc, utc_now

__all__ = ["ensure_utc", "utc_now"]
