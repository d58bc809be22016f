from datetime import date

import pytest
import typer

from wlog.utils.date_ranges import in_range, parse_date, today_str, validate_date


def test_validate_date_accepts_iso_dates() -> None:
    assert validate_date("2026-02-14") == "2026-02-14"
    assert validate_date(None) is None


@pytest.mark.parametrize("value", ["2026/02/14", "14-02-2026", "2026-02-30"])
def test_validate_date_rejects_bad_values(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        validate_date(value)


def test_parse_date_ignores_time_suffix() -> None:
    assert parse_date("2026-02-14T07:30:00") == date(2026, 2, 14)


def test_today_str() -> None:
    assert today_str(date(2026, 2, 14)) == "2026-02-14"


def test_in_range_inclusive_bounds() -> None:
    assert in_range("2026-02-14", "2026-02-14", "2026-02-14")
    assert in_range("2026-02-14", start="2026-02-01")
    assert in_range("2026-02-14", end="2026-02-28")
    assert in_range("2026-02-14")
    assert not in_range("2026-02-14", start="2026-02-15")
    assert not in_range("2026-02-14", end="2026-02-13")
