from __future__ import annotations

from wlog.core.models import Workout, WorkoutType
from wlog.utils.formatting import (
    format_distance,
    format_duration,
    format_name,
    format_number,
    format_sets_reps,
    workout_row,
)


def test_format_duration() -> None:
    assert format_duration(90) == "1:30:00"
    assert format_duration(45) == "45 min"
    assert format_duration(None) == "-"


def test_format_number_and_distance() -> None:
    assert format_number(80.0) == "80"
    assert format_number(2.5) == "2.5"
    assert format_distance(5.0) == "5.00 km"
    assert format_distance(None) == "-"


def test_format_sets_reps() -> None:
    assert format_sets_reps(Workout(name="스쿼트", sets=4, reps=8)) == "4x8"
    assert format_sets_reps(Workout(name="플랭크", sets=3)) == "3 sets"
    assert format_sets_reps(Workout(name="푸시업", reps=20)) == "20 reps"
    assert format_sets_reps(Workout(name="요가")) == "-"


def test_format_name_marks_cardio_multiplier(bike_10k: Workout, squat: Workout) -> None:
    assert format_name(bike_10k) == "🚴 실내자전거 ×0.4"
    assert format_name(Workout(name="러닝", type=WorkoutType.CARDIO)) == "🏃 러닝"
    assert format_name(squat) == "스쿼트"


def test_workout_row(squat: Workout, run_5k: Workout) -> None:
    assert workout_row(squat) == ["스쿼트", "근력/lower", "헬스장", "80 kg 4x8", "-", "-", "-"]
    row = workout_row(run_5k)
    assert row[1] == "유산소"
    assert row[2] == "러닝"
    assert row[4] == "30 min"
    assert row[5] == "5.00 km"
