"""Cardio fairness weighting applied at aggregation time.

Stored workouts are never modified here: missing distance/speed fields are
filled on a copy, and category multipliers only affect aggregated distances.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from wlog.core.constants import (
    CARDIO_CATEGORY_LABELS,
    CARDIO_ICONS,
    CARDIO_KEYWORDS,
    CARDIO_MULTIPLIERS,
    DEFAULT_CARDIO_CATEGORY,
)
from wlog.core.models import CardioCategory, Workout, WorkoutType


def round2(value: float) -> float:
    return round(value, 2)


def map_to_cardio_category(name: str) -> CardioCategory:
    """Map a free-text exercise name to its cardio bucket."""
    lowered = name.lower()
    for category, keywords in CARDIO_KEYWORDS.items():
        if any(keyword.lower() in lowered for keyword in keywords):
            return CardioCategory(category)
    return CardioCategory(DEFAULT_CARDIO_CATEGORY)


def get_cardio_multiplier(name: str) -> float:
    return CARDIO_MULTIPLIERS[map_to_cardio_category(name).value]


def calculate_adjusted_distance(
    distance_km: Optional[float],
    adjusted_dist_km: Optional[float],
    name: str,
) -> float:
    """Fairness-weighted distance for aggregation.

    Prefers the incline-corrected distance, then the raw one.
    """
    base = adjusted_dist_km if adjusted_dist_km is not None else distance_km
    if not base:
        return 0.0
    return round2(base * get_cardio_multiplier(name))


def fill_missing_cardio_fields(workout: Workout) -> Workout:
    """Return a copy with distance/speed derived from each other and duration.

    Only cardio workouts are touched and populated fields are never overwritten.
    """
    if workout.type is not WorkoutType.CARDIO:
        return workout

    distance_km = workout.distance_km
    speed_kph = workout.speed_kph
    duration_min = workout.duration_min

    if distance_km is None and speed_kph is not None and duration_min is not None:
        distance_km = round2(speed_kph * duration_min / 60)

    if speed_kph is None and distance_km is not None and duration_min:
        speed_kph = round2(distance_km / (duration_min / 60))

    if distance_km == workout.distance_km and speed_kph == workout.speed_kph:
        return workout
    return replace(workout, distance_km=distance_km, speed_kph=speed_kph)


def get_cardio_icon(name: str) -> str:
    return CARDIO_ICONS[map_to_cardio_category(name).value]


def get_multiplier_text(name: str) -> str:
    """Display suffix such as ``×0.4``; empty for full-credit categories."""
    multiplier = get_cardio_multiplier(name)
    return "" if multiplier == 1.0 else f"×{multiplier}"


def get_cardio_category_name(name: str) -> str:
    return CARDIO_CATEGORY_LABELS[map_to_cardio_category(name).value]


adjusted_distance = calculate_adjusted_distance
cardio_icon = get_cardio_icon
cardio_multiplier_text = get_multiplier_text
cardio_category_label = get_cardio_category_name
