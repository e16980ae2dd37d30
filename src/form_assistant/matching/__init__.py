"""Keyword and pattern based intent matching."""

from .intent_matcher import (
    CONFIDENCE_THRESHOLD,
    IntentMatcher,
    MatchCandidate,
    MatchWeights,
    normalise,
    spaced_id,
)
from .rules import INTENT_PATTERNS, compile_patterns

__all__ = [
    "CONFIDENCE_THRESHOLD",
    "IntentMatcher",
    "MatchCandidate",
    "MatchWeights",
    "INTENT_PATTERNS",
    "compile_patterns",
    "normalise",
    "spaced_id",
]
