"""Answer validation shared by the discovery and elicitation engines."""

from .answer_validator import (
    DATE_FORMATS,
    FALSE_VALUES,
    TRUE_VALUES,
    AnswerValidator,
    ValidationResult,
)

__all__ = ["AnswerValidator", "ValidationResult", "DATE_FORMATS", "TRUE_VALUES", "FALSE_VALUES"]
