from __future__ import annotations

import json

import pytest

from wlog.core.models import Workout, WorkoutLog, WorkoutTarget, WorkoutType


def test_workout_to_dict_omits_missing_target(run_5k: Workout) -> None:
    payload = run_5k.to_dict()
    assert "target" not in payload
    assert payload["type"] == "cardio"
    assert payload["distance_km"] == 5.0
    assert payload["pace"] is None


def test_workout_to_dict_is_json_serializable(squat: Workout) -> None:
    payload = json.loads(json.dumps(squat.to_dict(), ensure_ascii=False))
    assert payload["name"] == "스쿼트"
    assert payload["target"] == "lower"


def test_workout_from_dict_restores_enums(squat: Workout) -> None:
    assert Workout.from_dict(squat.to_dict()) == squat


def test_workout_from_dict_defaults_strength_target() -> None:
    workout = Workout.from_dict({"name": "스쿼트", "type": "strength"})
    assert workout.target is WorkoutTarget.NONE


def test_workout_from_dict_drops_target_for_non_strength() -> None:
    workout = Workout.from_dict({"name": "러닝", "type": "cardio", "target": "lower"})
    assert workout.type is WorkoutType.CARDIO
    assert workout.target is None


@pytest.mark.parametrize(
    "payload",
    [
        {"name": ""},
        {"name": "러닝", "type": "aerobic"},
        {"name": "러닝", "category": "park"},
        {"name": "스쿼트", "type": "strength", "target": "legs"},
    ],
)
def test_workout_from_dict_rejects_invalid_values(payload) -> None:
    with pytest.raises(ValueError):
        Workout.from_dict(payload)


def test_workout_log_uses_camel_case_keys(squat: Workout) -> None:
    log = WorkoutLog(
        date="2026-02-14",
        raw_text="스쿼트 80kg 4세트 8회",
        normalized_text="스쿼트 80kg 4세트 8회",
        workouts=[squat],
        memo="하체",
    )
    payload = log.to_dict()
    assert set(payload) == {"date", "rawText", "normalizedText", "workouts", "memo"}
    assert WorkoutLog.from_dict(payload) == log
