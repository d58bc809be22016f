"""Loading workout logs from JSON/YAML input."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

from wlog.core.models import WorkoutLog
from wlog.core.parser import build_log
from wlog.utils.date_ranges import parse_date


class LogInputError(ValueError):
    """Raised when log input cannot be read or has an invalid shape."""


def _load_raw(file_path: Optional[Path], read_stdin: bool, stdin_text: str) -> Any:
    if file_path:
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LogInputError(f"Cannot read {file_path}: {exc}") from exc
        try:
            if file_path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(text)
            return json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise LogInputError(f"Invalid log file {file_path}: {exc}") from exc

    if read_stdin:
        text = stdin_text.strip()
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise LogInputError(f"Invalid log input on stdin: {exc}") from exc

    return None


def log_from_payload(item: Any) -> WorkoutLog:
    """Build a log from a stored dict; entries without workouts are parsed from rawText."""
    if not isinstance(item, dict):
        raise LogInputError(f"Log entries must be objects, got {type(item).__name__}")

    date = str(item.get("date") or "")
    if not date:
        raise LogInputError("Log entry is missing 'date'")
    try:
        parse_date(date)
    except ValueError as exc:
        raise LogInputError(f"Invalid date {date!r}: {exc}") from exc

    try:
        if item.get("workouts") is None and item.get("rawText"):
            return build_log(str(item["rawText"]), date=date, memo=item.get("memo"))
        return WorkoutLog.from_dict(item)
    except ValueError as exc:
        raise LogInputError(f"Invalid log entry for {date}: {exc}") from exc


def load_log_input(
    file_path: Optional[Path],
    read_stdin: bool = False,
    stdin_text: str = "",
) -> List[WorkoutLog]:
    """Load log object(s) from file or stdin text."""
    raw_data = _load_raw(file_path, read_stdin, stdin_text)
    if raw_data is None:
        return []
    if isinstance(raw_data, dict):
        if isinstance(raw_data.get("logs"), list):
            raw_data = raw_data["logs"]
        else:
            raw_data = [raw_data]
    if not isinstance(raw_data, list):
        raise LogInputError("Log input must be an object or a list of objects")
    return [log_from_payload(item) for item in raw_data]
