from __future__ import annotations

import pytest

from wlog.core.cardio import (
    adjusted_distance,
    calculate_adjusted_distance,
    fill_missing_cardio_fields,
    get_cardio_category_name,
    get_cardio_icon,
    get_cardio_multiplier,
    get_multiplier_text,
    map_to_cardio_category,
)
from wlog.core.models import CardioCategory, Workout, WorkoutType


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("러닝", CardioCategory.RUNNING),
        ("트레드밀", CardioCategory.RUNNING),
        ("Treadmill", CardioCategory.RUNNING),
        ("스텝밀", CardioCategory.STEPMILL),
        ("천국의계단", CardioCategory.STEPMILL),
        ("로잉머신", CardioCategory.ROWING),
        ("실내자전거", CardioCategory.CYCLE),
        ("수영", CardioCategory.OTHER),
        ("요가", CardioCategory.OTHER),
    ],
)
def test_map_to_cardio_category(name: str, expected: CardioCategory) -> None:
    assert map_to_cardio_category(name) is expected


@pytest.mark.parametrize(
    ("name", "multiplier", "text"),
    [
        ("러닝", 1.0, ""),
        ("스텝밀", 1.0, ""),
        ("로잉", 0.6, "×0.6"),
        ("사이클", 0.4, "×0.4"),
        ("엘립티컬", 0.3, "×0.3"),
    ],
)
def test_multipliers(name: str, multiplier: float, text: str) -> None:
    assert get_cardio_multiplier(name) == multiplier
    assert get_multiplier_text(name) == text


def test_adjusted_distance_applies_multiplier() -> None:
    assert calculate_adjusted_distance(5.0, None, "러닝") == 5.0
    assert calculate_adjusted_distance(5.0, None, "사이클") == 2.0
    assert calculate_adjusted_distance(5.0, None, "로잉") == 3.0
    assert calculate_adjusted_distance(5.0, None, "수영") == 1.5


def test_adjusted_distance_prefers_adjusted_input() -> None:
    assert calculate_adjusted_distance(5.0, 6.0, "러닝") == 6.0
    assert calculate_adjusted_distance(None, 10.0, "사이클") == 4.0


def test_adjusted_distance_without_distance_is_zero() -> None:
    assert calculate_adjusted_distance(None, None, "러닝") == 0.0
    assert calculate_adjusted_distance(0.0, None, "러닝") == 0.0


def test_adjusted_distance_rounds_to_two_decimals() -> None:
    assert calculate_adjusted_distance(3.333, None, "사이클") == 1.33


def test_fill_missing_distance_from_speed_and_duration() -> None:
    workout = Workout(name="러닝", type=WorkoutType.CARDIO, speed_kph=10.0, duration_min=45)
    filled = fill_missing_cardio_fields(workout)
    assert filled.distance_km == 7.5
    assert filled.speed_kph == 10.0
    assert workout.distance_km is None


def test_fill_missing_speed_from_distance_and_duration() -> None:
    workout = Workout(name="러닝", type=WorkoutType.CARDIO, distance_km=5.0, duration_min=30)
    assert fill_missing_cardio_fields(workout).speed_kph == 10.0


def test_fill_missing_rounds_derived_distance() -> None:
    workout = Workout(name="러닝", type=WorkoutType.CARDIO, speed_kph=8.0, duration_min=40)
    assert fill_missing_cardio_fields(workout).distance_km == 5.33


def test_fill_missing_never_overwrites() -> None:
    workout = Workout(
        name="러닝",
        type=WorkoutType.CARDIO,
        distance_km=5.0,
        speed_kph=12.0,
        duration_min=30,
    )
    assert fill_missing_cardio_fields(workout) is workout


def test_fill_missing_ignores_non_cardio(squat: Workout) -> None:
    assert fill_missing_cardio_fields(squat) is squat


def test_fill_missing_needs_duration() -> None:
    workout = Workout(name="러닝", type=WorkoutType.CARDIO, distance_km=3.0, duration_min=0)
    assert fill_missing_cardio_fields(workout).speed_kph is None


def test_icons_and_labels() -> None:
    assert get_cardio_icon("러닝") == "🏃"
    assert get_cardio_icon("실내자전거") == "🚴"
    assert get_cardio_category_name("사이클") == "사이클"
    assert get_cardio_category_name("요가") == "기타 유산소"


def test_aliases() -> None:
    assert adjusted_distance is calculate_adjusted_distance
