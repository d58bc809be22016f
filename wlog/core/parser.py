"""Rule-based parsing of normalized workout text into Workout records."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict
from typing import Callable, List, Match, Optional, Pattern, Tuple

from wlog.core.classify import classify, extract_note
from wlog.core.constants import INTENSITY_ADVERBS
from wlog.core.models import ParsedNumbers, Workout, WorkoutLog
from wlog.core.normalize import get_known_exercises, normalize_text

logger = logging.getLogger(__name__)

WorkoutParser = Callable[[str], List[Workout]]

_SEGMENT_SPLIT_RE = re.compile(r"[,.\n]")

_SETS_RE = re.compile(r"(\d+)\s*세트")
_REPS_RE = re.compile(r"(\d+)\s*(?:회|개|번)")
_NOT_DIGIT_BEFORE = r"(?<![\d.])"
# "N km 속도로" names a pace setting, not a distance covered.
_NOT_SPEED_AFTER = r"(?!\s*속도)"
_WEIGHT_RE = re.compile(
    _NOT_DIGIT_BEFORE + r"(\d+(?:\.\d+)?)\s*(?:kg|킬로|키로)" + _NOT_SPEED_AFTER,
    re.IGNORECASE,
)
_DISTANCE_RE = re.compile(
    _NOT_DIGIT_BEFORE + r"(\d+(?:\.\d+)?)\s*(?:km|킬로|키로)" + _NOT_SPEED_AFTER,
    re.IGNORECASE,
)
_PACE_MIN_SEC_RE = re.compile(r"(\d+)\s*분\s*(\d+)\s*초")
_PACE_MIN_RE = re.compile(r"(\d+)\s*분(?!\s*(?:간|\d+\s*초))")
_PACE_COLON_RE = re.compile(r"(\d+):(\d+)")
_DURATION_MIN_RE = re.compile(r"(\d+)\s*분(?:간)?")
_DURATION_HOUR_RE = re.compile(r"(\d+(?:\.\d+)?)\s*시간")
_MULTIPLY_RE = re.compile(r"(\d+)\s*[x×]\s*(\d+)", re.IGNORECASE)
_SPEED_RE = re.compile(
    r"시속\s*(\d+(?:\.\d+)?)\s*(?:km|킬로|키로)?"
    r"|(\d+(?:\.\d+)?)\s*(?:km|킬로|키로)?\s*(?:/h|퍼아워)",
    re.IGNORECASE,
)
_INCLINE_RE = re.compile(r"(?:인클라인|경사도?|오르막)\s*(\d+)")
_RESISTANCE_RE = re.compile(r"(?:레벨|저항|기어)\s*(\d+)")

# Short minute readings are treated as pace rather than duration.
MAX_PACE_MINUTES = 10

# Tokens removed when recovering an exercise name from an unknown segment.
_NAME_STRIP_PATTERNS = [
    re.compile(r"\d+(?:\.\d+)?\s*시간"),
    re.compile(r"\d+\s*분(?:간)?"),
    re.compile(r"\d+\s*초"),
    re.compile(r"\d+:\d+"),
    re.compile(r"\d+\s*세트"),
    re.compile(r"\d+\s*(?:회|개|번)"),
    re.compile(r"\d+(?:\.\d+)?\s*(?:kg|km|킬로|키로)", re.IGNORECASE),
    re.compile(r"\d+\s*[x×]\s*\d+", re.IGNORECASE),
    re.compile("|".join(re.escape(adverb) for adverb in INTENSITY_ADVERBS)),
]


def split_segments(text: str) -> List[str]:
    """Split text on commas, periods and newlines, dropping blank pieces."""
    return [piece.strip() for piece in _SEGMENT_SPLIT_RE.split(text) if piece.strip()]


def find_exercise_name(segment: str) -> Optional[str]:
    """Known exercise contained in the segment, else the residual text."""
    for exercise in get_known_exercises():
        if exercise in segment:
            return exercise

    cleaned = segment
    for pattern in _NAME_STRIP_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = " ".join(cleaned.split())

    if len(cleaned) > 1:
        return cleaned
    return None


def _pad_seconds(value: str) -> str:
    return str(int(value)).zfill(2)


def _search_outside(pattern: Pattern[str], segment: str, blocked: List[Tuple[int, int]]) -> Optional[Match[str]]:
    """First match of ``pattern`` that does not overlap any blocked span."""
    for match in pattern.finditer(segment):
        if not any(match.start() < end and start < match.end() for start, end in blocked):
            return match
    return None


def extract_numbers(segment: str) -> ParsedNumbers:
    """Pull numeric fields out of a segment.

    Each field is independent except for these tie-breaks, applied in order:
    weight suppresses distance, a pace reading suppresses minute durations,
    ``NxM`` overrides sets/reps, and speed x duration fills a missing distance.
    """
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight_kg: Optional[float] = None
    duration_min: Optional[int] = None
    distance_km: Optional[float] = None
    pace: Optional[str] = None
    speed_kph: Optional[float] = None
    incline_percent: Optional[int] = None
    resistance_level: Optional[int] = None

    match = _SETS_RE.search(segment)
    if match:
        sets = int(match.group(1))

    match = _REPS_RE.search(segment)
    if match:
        reps = int(match.group(1))

    # Numbers inside a speed phrase are neither weights nor distances.
    speed_spans = [found.span() for found in _SPEED_RE.finditer(segment)]

    match = _search_outside(_WEIGHT_RE, segment, speed_spans)
    if match:
        weight_kg = float(match.group(1))

    # Weight and distance share units; any weight hit wins for the segment.
    match = _search_outside(_DISTANCE_RE, segment, speed_spans)
    if match and weight_kg is None:
        distance_km = float(match.group(1))

    # Pace: later patterns overwrite earlier ones.
    match = _PACE_MIN_SEC_RE.search(segment)
    if match:
        pace = f"{int(match.group(1))}:{_pad_seconds(match.group(2))}"

    match = _PACE_MIN_RE.search(segment)
    if match and int(match.group(1)) <= MAX_PACE_MINUTES:
        pace = f"{int(match.group(1))}:00"

    match = _PACE_COLON_RE.search(segment)
    if match:
        pace = f"{int(match.group(1))}:{_pad_seconds(match.group(2))}"

    match = _DURATION_MIN_RE.search(segment)
    if match and pace is None:
        duration_min = int(match.group(1))

    # Hours always win over minutes.
    match = _DURATION_HOUR_RE.search(segment)
    if match:
        duration_min = int(float(match.group(1)) * 60 + 0.5)

    match = _MULTIPLY_RE.search(segment)
    if match:
        reps = int(match.group(1))
        sets = int(match.group(2))

    match = _SPEED_RE.search(segment)
    if match:
        speed_kph = float(match.group(1) or match.group(2))
        if duration_min is not None and distance_km is None:
            distance_km = speed_kph * duration_min / 60

    match = _INCLINE_RE.search(segment)
    if match:
        incline_percent = int(match.group(1))

    match = _RESISTANCE_RE.search(segment)
    if match:
        resistance_level = int(match.group(1))

    return ParsedNumbers(
        sets=sets,
        reps=reps,
        weight_kg=weight_kg,
        duration_min=duration_min,
        distance_km=distance_km,
        pace=pace,
        speed_kph=speed_kph,
        incline_percent=incline_percent,
        resistance_level=resistance_level,
    )


def parse_workout_text(normalized_text: str) -> List[Workout]:
    """Parse normalized text into workouts, one per recognizable segment.

    Segments without a recoverable exercise name are dropped.
    """
    if not normalized_text.strip():
        return []

    workouts: List[Workout] = []
    for segment in split_segments(normalized_text):
        name = find_exercise_name(segment)
        if not name:
            logger.debug("dropping segment without exercise name: %r", segment)
            continue

        classification = classify(name)
        workouts.append(
            Workout(
                name=name,
                category=classification.category,
                type=classification.type,
                target=classification.target,
                note=extract_note(segment),
                **asdict(extract_numbers(segment)),
            )
        )

    return workouts


def build_log(
    raw_text: str,
    date: str,
    memo: Optional[str] = None,
    parser: WorkoutParser = parse_workout_text,
) -> WorkoutLog:
    """Normalize and parse raw text into a dated log entry.

    ``parser`` can be swapped for any callable with the same contract.
    """
    normalized = normalize_text(raw_text)
    return WorkoutLog(
        date=date,
        raw_text=raw_text,
        normalized_text=normalized,
        workouts=parser(normalized),
        memo=memo,
    )


parse = parse_workout_text
