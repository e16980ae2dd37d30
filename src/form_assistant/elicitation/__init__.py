"""Schema-driven, one-field-at-a-time collection of form values."""

from .engine import (
    DEFAULT_SESSION_ID,
    ElicitationEngine,
    ElicitationProgress,
    ElicitationResult,
    ElicitationSession,
    ElicitationSummary,
)

__all__ = [
    "DEFAULT_SESSION_ID",
    "ElicitationEngine",
    "ElicitationProgress",
    "ElicitationResult",
    "ElicitationSession",
    "ElicitationSummary",
]
