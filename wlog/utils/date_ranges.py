"""Date option validation and filtering helpers."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

import typer

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates YYYY-MM-DD format for date options."""
    if value is None:
        return value
    if not _DATE_RE.match(value):
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    return value


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD date string."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def today_str(today: Optional[date] = None) -> str:
    return (today or date.today()).strftime("%Y-%m-%d")


def in_range(value: str, start: Optional[str] = None, end: Optional[str] = None) -> bool:
    """True when a YYYY-MM-DD date lies within the optional inclusive bounds."""
    day = parse_date(value)
    if start and day < parse_date(start):
        return False
    if end and day > parse_date(end):
        return False
    return True
