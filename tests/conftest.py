from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from wlog.core.models import (
    Workout,
    WorkoutCategory,
    WorkoutLog,
    WorkoutTarget,
    WorkoutType,
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "missing.toml"
    monkeypatch.setenv("WLOG_CONFIG_FILE", str(path))
    monkeypatch.setenv("WLOG_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("WLOG_OUTPUT_DIR", raising=False)
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def squat() -> Workout:
    return Workout(
        name="스쿼트",
        category=WorkoutCategory.GYM,
        type=WorkoutType.STRENGTH,
        target=WorkoutTarget.LOWER,
        sets=4,
        reps=8,
        weight_kg=80.0,
    )


@pytest.fixture()
def run_5k() -> Workout:
    return Workout(
        name="러닝",
        category=WorkoutCategory.RUNNING,
        type=WorkoutType.CARDIO,
        distance_km=5.0,
        duration_min=30,
    )


@pytest.fixture()
def bike_10k() -> Workout:
    return Workout(
        name="실내자전거",
        type=WorkoutType.CARDIO,
        distance_km=10.0,
    )


@pytest.fixture()
def snowboard_runs() -> Workout:
    return Workout(
        name="스노보드",
        category=WorkoutCategory.SNOWBOARD,
        type=WorkoutType.SKILL,
        reps=7,
        duration_min=180,
    )


@pytest.fixture()
def sample_logs(
    squat: Workout,
    run_5k: Workout,
    bike_10k: Workout,
    snowboard_runs: Workout,
) -> List[WorkoutLog]:
    return [
        WorkoutLog(
            date="2026-02-10",
            raw_text="스쿼트 80kg 4세트 8회, 러닝 5km 30분",
            normalized_text="스쿼트 80kg 4세트 8회, 러닝 5km 30분",
            workouts=[squat, run_5k],
        ),
        WorkoutLog(
            date="2026-02-14",
            raw_text="실내자전거 10km",
            normalized_text="실내자전거 10km",
            workouts=[bike_10k],
        ),
        WorkoutLog(
            date="2026-02-16",
            raw_text="스노보드 7번",
            normalized_text="스노보드 7번",
            workouts=[snowboard_runs],
            memo="휘닉스",
        ),
    ]


@pytest.fixture()
def sample_log_payloads(sample_logs: List[WorkoutLog]) -> List[Dict[str, Any]]:
    return [log.to_dict() for log in sample_logs]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write
