"""Data models shared by the parser, classifier and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class WorkoutCategory(str, Enum):
    """Where the workout happened."""

    GYM = "gym"
    SNOWBOARD = "snowboard"
    RUNNING = "running"
    SPORTS = "sports"
    HOME = "home"


class WorkoutType(str, Enum):
    """How the workout loaded the body."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    SKILL = "skill"
    UNKNOWN = "unknown"


class WorkoutTarget(str, Enum):
    """Body region emphasis for strength workouts."""

    CORE = "core"
    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"
    NONE = "none"


class CardioCategory(str, Enum):
    """Fairness bucket for cardio distance aggregation."""

    RUNNING = "running"
    STEPMILL = "stepmill"
    ROWING = "rowing"
    CYCLE = "cycle"
    OTHER = "other"


@dataclass(frozen=True)
class ParsedNumbers:
    """Numeric fields pulled out of one text segment."""

    sets: Optional[int] = None
    reps: Optional[int] = None
    weight_kg: Optional[float] = None
    duration_min: Optional[int] = None
    distance_km: Optional[float] = None
    pace: Optional[str] = None
    speed_kph: Optional[float] = None
    incline_percent: Optional[int] = None
    resistance_level: Optional[int] = None


@dataclass(frozen=True)
class Classification:
    """Category/type axes plus the strength-only target."""

    category: WorkoutCategory
    type: WorkoutType
    target: Optional[WorkoutTarget] = None


_NUMERIC_FIELDS = (
    "sets",
    "reps",
    "weight_kg",
    "duration_min",
    "distance_km",
    "pace",
    "speed_kph",
    "incline_percent",
    "resistance_level",
)


@dataclass(frozen=True)
class Workout:
    """One structured workout record parsed from a text segment."""

    name: str
    category: WorkoutCategory = WorkoutCategory.GYM
    type: WorkoutType = WorkoutType.UNKNOWN
    target: Optional[WorkoutTarget] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight_kg: Optional[float] = None
    duration_min: Optional[int] = None
    distance_km: Optional[float] = None
    pace: Optional[str] = None
    speed_kph: Optional[float] = None
    incline_percent: Optional[int] = None
    resistance_level: Optional[int] = None
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the persistence shape; ``target`` is omitted when absent."""
        payload: Dict[str, Any] = {
            "name": self.name,
            "category": self.category.value,
            "type": self.type.value,
        }
        if self.target is not None:
            payload["target"] = self.target.value
        for key in _NUMERIC_FIELDS:
            payload[key] = getattr(self, key)
        payload["note"] = self.note
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workout":
        """Build a workout from a stored dict. Unknown enum values raise ValueError."""
        name = str(data.get("name") or "").strip()
        if not name:
            raise ValueError("Workout name must be a non-empty string")

        workout_type = WorkoutType(data.get("type") or WorkoutType.UNKNOWN.value)
        target: Optional[WorkoutTarget] = None
        if workout_type is WorkoutType.STRENGTH:
            target = WorkoutTarget(data.get("target") or WorkoutTarget.NONE.value)

        values = {key: data.get(key) for key in _NUMERIC_FIELDS}
        return cls(
            name=name,
            category=WorkoutCategory(data.get("category") or WorkoutCategory.GYM.value),
            type=workout_type,
            target=target,
            note=data.get("note"),
            **values,
        )


@dataclass
class WorkoutLog:
    """A dated entry as handed to the persistence layer."""

    date: str
    raw_text: str
    normalized_text: str
    workouts: List[Workout] = field(default_factory=list)
    memo: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "rawText": self.raw_text,
            "normalizedText": self.normalized_text,
            "workouts": [workout.to_dict() for workout in self.workouts],
            "memo": self.memo,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkoutLog":
        workouts_raw = data.get("workouts") or []
        return cls(
            date=str(data.get("date") or ""),
            raw_text=str(data.get("rawText") or ""),
            normalized_text=str(data.get("normalizedText") or ""),
            workouts=[Workout.from_dict(item) for item in workouts_raw if isinstance(item, dict)],
            memo=data.get("memo"),
        )

