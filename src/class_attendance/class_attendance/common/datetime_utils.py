from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_iso() -> str:
    """Current local date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it easier.
    """
    return date.today().strftime("%Y-%m-%d")
