"""Type-specific comparison metrics: cardio distance, strength volume, run count."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from wlog.core.cardio import calculate_adjusted_distance, fill_missing_cardio_fields, round2
from wlog.core.constants import (
    DEFAULT_CARDIO_SPEED_KPH,
    INCLINE_LOAD_PER_PERCENT,
    RESISTANCE_LOAD_PER_LEVEL,
)
from wlog.core.models import Workout, WorkoutCategory, WorkoutType


def flat_equivalent_distance(workout: Workout) -> Optional[float]:
    """Incline/resistance corrected distance for a cardio workout.

    Each incline percent adds 10% of the distance, each resistance level adds
    5% load. Without a distance, the duration is converted at 10 km/h.
    """
    if workout.type is not WorkoutType.CARDIO:
        return None

    if workout.distance_km:
        adjusted = workout.distance_km
        if workout.incline_percent:
            adjusted += workout.distance_km * workout.incline_percent * INCLINE_LOAD_PER_PERCENT
    elif workout.duration_min:
        adjusted = workout.duration_min / 60 * DEFAULT_CARDIO_SPEED_KPH
    else:
        return None

    if workout.resistance_level:
        adjusted *= 1 + workout.resistance_level * RESISTANCE_LOAD_PER_LEVEL
    return round2(adjusted)


def calculate_volume(workout: Workout) -> Optional[float]:
    """Total lifted weight (weight x sets x reps) for strength workouts."""
    if workout.type is not WorkoutType.STRENGTH:
        return None
    if not workout.weight_kg or not workout.sets or not workout.reps:
        return None
    return round(workout.weight_kg * workout.sets * workout.reps, 1)


def calculate_run_count(workout: Workout) -> Optional[int]:
    if workout.type is not WorkoutType.SKILL and workout.category is not WorkoutCategory.SNOWBOARD:
        return None
    return workout.reps or None


def weighted_cardio_distance(workout: Workout) -> float:
    """Fairness-weighted distance of one workout; 0 for non-cardio."""
    if workout.type is not WorkoutType.CARDIO:
        return 0.0
    filled = fill_missing_cardio_fields(workout)
    return calculate_adjusted_distance(
        filled.distance_km,
        flat_equivalent_distance(filled),
        filled.name,
    )


def calculate_all_metrics(workout: Workout) -> Dict[str, Optional[float]]:
    return {
        "adjusted_dist_km": flat_equivalent_distance(fill_missing_cardio_fields(workout)),
        "volume_kg": calculate_volume(workout),
        "run_count": calculate_run_count(workout),
    }


def calculate_total_metrics(workouts: Iterable[Workout]) -> Dict[str, float]:
    """Sum weighted cardio distance, volume and run count over workouts."""
    total_distance = 0.0
    total_volume = 0.0
    total_runs = 0

    for workout in workouts:
        total_distance += weighted_cardio_distance(workout)
        total_volume += calculate_volume(workout) or 0.0
        total_runs += calculate_run_count(workout) or 0

    return {
        "total_adjusted_distance": round2(total_distance),
        "total_volume": round(total_volume, 1),
        "total_run_count": total_runs,
    }


def format_metric(value: Union[int, float], kind: str) -> str:
    """Leaderboard display text for a metric value."""
    if kind == "distance":
        return f"{value:.1f} km"
    if kind == "volume":
        if value >= 1000:
            return f"{value / 1000:.1f} t"
        return f"{value:.0f} kg"
    if kind == "count":
        return f"{value} 회"
    return str(value)


def filter_workouts_by_type(workouts: Iterable[Workout], workout_type: Union[str, WorkoutType]) -> List[Workout]:
    wanted = WorkoutType(workout_type)
    return [workout for workout in workouts if workout.type is wanted]


def filter_workouts_by_category(
    workouts: Iterable[Workout],
    category: Union[str, WorkoutCategory],
) -> List[Workout]:
    wanted = WorkoutCategory(category)
    return [workout for workout in workouts if workout.category is wanted]
