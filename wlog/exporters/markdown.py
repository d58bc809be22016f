"""Markdown export of parsed workout logs."""

from __future__ import annotations

from pathlib import Path
from typing import List

import yaml

from wlog.core.metrics import calculate_total_metrics, format_metric
from wlog.core.models import WorkoutLog
from wlog.utils.formatting import (
    format_cardio_details,
    format_category,
    format_distance,
    format_duration,
    format_name,
    format_number,
    format_sets_reps,
    format_type,
)


def log_to_markdown(log: WorkoutLog) -> str:
    """Convert a workout log to markdown with frontmatter."""
    totals = calculate_total_metrics(log.workouts)
    frontmatter = yaml.safe_dump(
        {"date": log.date, "rawText": log.raw_text, "workouts": len(log.workouts)},
        allow_unicode=True,
        sort_keys=False,
    )

    lines: List[str] = [
        "---",
        frontmatter.rstrip("\n"),
        "---",
        "",
        f"# Workout log {log.date}",
        "",
        f"- **Cardio distance:** {format_metric(totals['total_adjusted_distance'], 'distance')}",
        f"- **Volume:** {format_metric(totals['total_volume'], 'volume')}",
    ]
    if totals["total_run_count"]:
        lines.append(f"- **Runs:** {format_metric(totals['total_run_count'], 'count')}")
    lines.append("")

    for workout in log.workouts:
        lines.append(f"## {format_name(workout)}")
        lines.append(f"- **Type:** {format_type(workout)}")
        lines.append(f"- **Category:** {format_category(workout)}")
        if workout.weight_kg is not None:
            lines.append(f"- **Weight:** {format_number(workout.weight_kg)} kg")
        if workout.sets or workout.reps:
            lines.append(f"- **Sets x reps:** {format_sets_reps(workout)}")
        if workout.duration_min:
            lines.append(f"- **Duration:** {format_duration(workout.duration_min)}")
        if workout.distance_km is not None:
            lines.append(f"- **Distance:** {format_distance(workout.distance_km)}")
        details = format_cardio_details(workout)
        if details != "-":
            lines.append(f"- **Cardio:** {details}")
        if workout.note:
            lines.append(f"- **Note:** {workout.note}")
        lines.append("")

    if log.memo:
        lines.extend(["## Memo", log.memo, ""])

    return "\n".join(lines).strip() + "\n"


def write_markdown(path: Path, content: str) -> Path:
    """Write markdown text and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
