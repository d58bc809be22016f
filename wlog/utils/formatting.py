"""Formatting helpers used by console output and exports."""

from __future__ import annotations

from typing import List, Optional

from wlog.core.cardio import get_cardio_icon, get_multiplier_text
from wlog.core.constants import CATEGORY_LABELS, TYPE_LABELS
from wlog.core.models import Workout, WorkoutType


def format_number(value: Optional[float]) -> str:
    """Drop a trailing ``.0`` from whole floats."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_duration(minutes: Optional[int]) -> str:
    """Format minutes as H:MM:00 or N min."""
    if not minutes:
        return "-"
    hours, mins = divmod(int(minutes), 60)
    if hours:
        return f"{hours}:{mins:02d}:00"
    return f"{mins} min"


def format_distance(km: Optional[float]) -> str:
    if km is None:
        return "-"
    return f"{km:.2f} km"


def format_sets_reps(workout: Workout) -> str:
    if workout.sets and workout.reps:
        return f"{workout.sets}x{workout.reps}"
    if workout.sets:
        return f"{workout.sets} sets"
    if workout.reps:
        return f"{workout.reps} reps"
    return "-"


def format_type(workout: Workout) -> str:
    """Korean type label, with the strength target when present."""
    label = TYPE_LABELS.get(workout.type.value, workout.type.value)
    if workout.target is not None:
        return f"{label}/{workout.target.value}"
    return label


def format_category(workout: Workout) -> str:
    return CATEGORY_LABELS.get(workout.category.value, workout.category.value)


def format_name(workout: Workout) -> str:
    """Exercise name; cardio names carry their fairness icon and multiplier."""
    if workout.type is not WorkoutType.CARDIO:
        return workout.name
    suffix = get_multiplier_text(workout.name)
    parts = [get_cardio_icon(workout.name), workout.name]
    if suffix:
        parts.append(suffix)
    return " ".join(parts)


def format_cardio_details(workout: Workout) -> str:
    parts: List[str] = []
    if workout.pace:
        parts.append(f"pace {workout.pace}")
    if workout.speed_kph is not None:
        parts.append(f"{format_number(workout.speed_kph)} km/h")
    if workout.incline_percent is not None:
        parts.append(f"incline {workout.incline_percent}%")
    if workout.resistance_level is not None:
        parts.append(f"level {workout.resistance_level}")
    return ", ".join(parts) if parts else "-"


def workout_row(workout: Workout) -> List[str]:
    """Columns shown by ``wlog parse``: name, type, category, load, time, cardio, note."""
    weight = f"{format_number(workout.weight_kg)} kg" if workout.weight_kg is not None else "-"
    load = format_sets_reps(workout)
    if weight != "-":
        load = weight if load == "-" else f"{weight} {load}"
    distance = format_distance(workout.distance_km)
    cardio = format_cardio_details(workout)
    if distance != "-":
        cardio = distance if cardio == "-" else f"{distance}, {cardio}"
    return [
        format_name(workout),
        format_type(workout),
        format_category(workout),
        load,
        format_duration(workout.duration_min),
        cardio,
        workout.note or "-",
    ]
