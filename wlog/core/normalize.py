"""Lexical normalization of colloquial Korean exercise phrases."""

from __future__ import annotations

import logging
import re
from typing import List, Pattern, Sequence, Tuple

from wlog.core.constants import KNOWN_EXERCISES, NORMALIZATION_RULES

logger = logging.getLogger(__name__)

NormalizationRule = Tuple[Pattern[str], str]


def compile_rules(rules: Sequence[Tuple[str, str]]) -> List[NormalizationRule]:
    """Compile (pattern, replacement) pairs, keeping their order."""
    return [(re.compile(pattern), replacement) for pattern, replacement in rules]


DEFAULT_RULES: List[NormalizationRule] = compile_rules(NORMALIZATION_RULES)


def normalize_text(text: str, rules: Sequence[NormalizationRule] = DEFAULT_RULES) -> str:
    """Rewrite misheard/colloquial exercise names into canonical ones.

    Rules run in table order and each one substitutes over the output of the
    rules before it. Unmatched text passes through unchanged.
    """
    normalized = text.strip()
    for pattern, replacement in rules:
        rewritten = pattern.sub(replacement, normalized)
        if rewritten != normalized:
            logger.debug("rule %r rewrote %r -> %r", pattern.pattern, normalized, rewritten)
        normalized = rewritten
    return normalized


def get_known_exercises() -> List[str]:
    """Canonical exercise names in match-priority order."""
    return list(KNOWN_EXERCISES)


normalize = normalize_text
known_exercises = get_known_exercises
