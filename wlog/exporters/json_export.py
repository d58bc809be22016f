"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wlog.core.models import WorkoutLog


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def write_log(out_dir: Path, log: WorkoutLog) -> Path:
    """Write a log as ``<date>.json``, suffixing ``-2``, ``-3``... on collision."""
    stem = log.date or "undated"
    path = out_dir / f"{stem}.json"
    counter = 2
    while path.exists():
        path = out_dir / f"{stem}-{counter}.json"
        counter += 1
    return write_json(path, log.to_dict())
