"""Period summaries over dated workout logs."""

from __future__ import annotations

from collections import Counter, defaultdict
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List

from wlog.core.cardio import map_to_cardio_category, round2
from wlog.core.constants import CARDIO_CATEGORY_LABELS, CATEGORY_LABELS, GROUP_BY_CHOICES, TYPE_LABELS
from wlog.core.metrics import calculate_total_metrics, format_metric, weighted_cardio_distance
from wlog.core.models import Workout, WorkoutLog, WorkoutType


def _log_date(value: str) -> datetime:
    return datetime.strptime(value[:10], "%Y-%m-%d")


def get_week_key(date_str: str) -> str:
    iso = _log_date(date_str).isocalendar()
    return f"{iso[0]}-W{iso[1]:02d}"


def get_week_start(date_str: str) -> datetime:
    dt = _log_date(date_str)
    return dt - timedelta(days=dt.weekday())


def period_key(date_str: str, group_by: str = "week") -> str:
    if group_by == "month":
        return _log_date(date_str).strftime("%Y-%m")
    if group_by == "day":
        return _log_date(date_str).strftime("%Y-%m-%d")
    return get_week_key(date_str)


def _period_bounds(dates: List[str], group_by: str) -> Dict[str, str]:
    ordered = sorted(dates)
    if group_by == "week":
        start = get_week_start(ordered[0])
        return {
            "start_date": start.strftime("%Y-%m-%d"),
            "end_date": (start + timedelta(days=6)).strftime("%Y-%m-%d"),
        }
    return {"start_date": ordered[0][:10], "end_date": ordered[-1][:10]}


def _aggregate(workouts: List[Workout]) -> Dict[str, Any]:
    by_type = Counter(workout.type.value for workout in workouts)
    by_category = Counter(workout.category.value for workout in workouts)

    cardio_distance: Dict[str, float] = defaultdict(float)
    for workout in workouts:
        if workout.type is not WorkoutType.CARDIO:
            continue
        bucket = map_to_cardio_category(workout.name).value
        cardio_distance[bucket] += weighted_cardio_distance(workout)

    return {
        "workouts": len(workouts),
        "by_type": dict(by_type),
        "by_category": dict(by_category),
        "cardio_distance": {
            key: round2(value)
            for key, value in sorted(cardio_distance.items(), key=lambda item: item[1], reverse=True)
        },
        **calculate_total_metrics(workouts),
    }


def build_summary(logs: Iterable[WorkoutLog], group_by: str = "week") -> Dict[str, Any]:
    """Aggregate logs into per-period rows plus an overall summary."""
    if group_by not in GROUP_BY_CHOICES:
        raise ValueError(f"group_by must be one of: {', '.join(GROUP_BY_CHOICES)}")

    grouped: Dict[str, List[WorkoutLog]] = defaultdict(list)
    for log in logs:
        if not log.date:
            continue
        grouped[period_key(log.date, group_by)].append(log)

    periods: List[Dict[str, Any]] = []
    all_workouts: List[Workout] = []
    for key in sorted(grouped):
        period_logs = grouped[key]
        workouts = [workout for log in period_logs for workout in log.workouts]
        all_workouts.extend(workouts)
        row = {
            "period": key,
            **_period_bounds([log.date for log in period_logs], group_by),
            "sessions": len(period_logs),
        }
        row.update(_aggregate(workouts))
        periods.append(row)

    overall = _aggregate(all_workouts)
    overall["total_periods"] = len(periods)
    overall["sessions"] = sum(row["sessions"] for row in periods)

    return {"group_by": group_by, "periods": periods, "summary": overall}


def _counter_line(counts: Dict[str, int], labels: Dict[str, str]) -> str:
    return " | ".join(f"{labels.get(key, key)} {value}" for key, value in counts.items())


def summary_to_markdown(report: Dict[str, Any]) -> str:
    """Render a summary payload to markdown."""
    summary = report.get("summary", {})
    lines: List[str] = ["# Workout Summary", ""]
    lines.append(f"**Periods:** {summary.get('total_periods', 0)} ({report.get('group_by', 'week')})")
    lines.append(f"**Sessions:** {summary.get('sessions', 0)} | **Workouts:** {summary.get('workouts', 0)}")
    lines.append(f"**Cardio distance:** {format_metric(summary.get('total_adjusted_distance', 0.0), 'distance')}")
    lines.append(f"**Volume:** {format_metric(summary.get('total_volume', 0.0), 'volume')}")
    lines.append(f"**Runs:** {format_metric(summary.get('total_run_count', 0), 'count')}")
    lines.append("")

    for row in report.get("periods", []):
        lines.append(f"## {row['period']} ({row['start_date']} to {row['end_date']})")
        lines.append(
            f"**Total:** {row['sessions']} sessions | {row['workouts']} workouts | "
            f"{format_metric(row['total_adjusted_distance'], 'distance')} | "
            f"{format_metric(row['total_volume'], 'volume')}"
        )
        if row["by_type"]:
            lines.append(f"- Types: {_counter_line(row['by_type'], TYPE_LABELS)}")
        if row["by_category"]:
            lines.append(f"- Categories: {_counter_line(row['by_category'], CATEGORY_LABELS)}")
        if row["cardio_distance"]:
            parts = [
                f"{CARDIO_CATEGORY_LABELS.get(key, key)} {value:.1f}km"
                for key, value in row["cardio_distance"].items()
            ]
            lines.append(f"- Cardio: {' | '.join(parts)}")
        if row["total_run_count"]:
            lines.append(f"- Runs: {format_metric(row['total_run_count'], 'count')}")
        lines.append("")

    return "\n".join(lines).strip() + "\n"
