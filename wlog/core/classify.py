"""Two-axis workout classification (category x type, plus strength target)."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

from wlog.core.constants import (
    CATEGORY_RULES,
    DEFAULT_CATEGORY,
    DEFAULT_TARGET,
    DEFAULT_TYPE,
    NOTE_KEYWORDS,
    TARGET_RULES,
    TYPE_RULES,
)
from wlog.core.models import Classification, WorkoutCategory, WorkoutTarget, WorkoutType
from wlog.core.normalize import get_known_exercises

Rules = Sequence[Tuple[str, Sequence[str]]]

_NOTE_RE = re.compile(r"\((.*?)\)")


def _match_keywords(name: str, rules: Rules) -> Optional[str]:
    lowered = name.lower()
    for label, keywords in rules:
        if any(keyword.lower() in lowered for keyword in keywords):
            return label
    return None


def classify_category(name: str, rules: Rules = CATEGORY_RULES) -> WorkoutCategory:
    """Where the workout happened; first matching keyword set wins."""
    return WorkoutCategory(_match_keywords(name, rules) or DEFAULT_CATEGORY)


def classify_type(name: str, rules: Rules = TYPE_RULES) -> WorkoutType:
    """Physiological mode; known exercises fall back to strength."""
    label = _match_keywords(name, rules)
    if label:
        return WorkoutType(label)
    if any(exercise in name for exercise in get_known_exercises()):
        return WorkoutType.STRENGTH
    return WorkoutType(DEFAULT_TYPE)


def classify_target(name: str, rules: Rules = TARGET_RULES) -> WorkoutTarget:
    """Body region for a strength exercise."""
    return WorkoutTarget(_match_keywords(name, rules) or DEFAULT_TARGET)


def classify(name: str) -> Classification:
    """Classify a workout name on both axes.

    ``target`` is only filled in for strength workouts.
    """
    workout_type = classify_type(name)
    target = classify_target(name) if workout_type is WorkoutType.STRENGTH else None
    return Classification(
        category=classify_category(name),
        type=workout_type,
        target=target,
    )


def extract_note(segment: str) -> Optional[str]:
    """Parenthesized text first, then the first intensity/style keyword."""
    match = _NOTE_RE.search(segment)
    if match:
        return match.group(1)
    for keyword in NOTE_KEYWORDS:
        if keyword in segment:
            return keyword
    return None
