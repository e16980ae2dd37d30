"""Type-directed validation and normalisation of a single answer.

The validator is stateless. It always checks for a missing required answer
first, then dispatches on the question type. Failures are returned, never
raised, so callers can keep their session untouched and ask again.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Literal, Optional, Pattern, Tuple

from ..errors import AssistantError, validation_failed
from ..questions import Question

DateFormat = Literal["iso", "us"]

# name -> (shape regex, strptime format, format shown to users)
DATE_FORMATS: Dict[str, Tuple[Pattern[str], str, str]] = {
    "iso": (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d", "YYYY-MM-DD"),
    "us": (re.compile(r"^(0[1-9]|1[0-2])/(0[1-9]|[12]\d|3[01])/\d{4}$"), "%m/%d/%Y", "MM/DD/YYYY"),
}

TRUE_VALUES = frozenset({"true", "yes", "y", "1"})
FALSE_VALUES = frozenset({"false", "no", "n", "0"})


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[str] = None
    error: Optional[AssistantError] = None

    @property
    def valid(self) -> bool:
        return self.error is None


def _ok(value: str) -> ValidationResult:
    return ValidationResult(value=value)


def _fail(*args, **kwargs) -> ValidationResult:
    return ValidationResult(error=validation_failed(*args, **kwargs))


@dataclass(frozen=True)
class AnswerValidator:
    date_format: DateFormat = "iso"
    enforce_numeric_bounds: bool = False

    def __post_init__(self):
        if self.date_format not in DATE_FORMATS:
            raise ValueError(f"Unknown date format: {self.date_format!r}")

    def validate(self, question: Question, raw_answer: Optional[str]) -> ValidationResult:
        answer = (raw_answer or "").strip()

        if not answer:
            if question.required:
                return _fail("RequiredFieldMissing", f"{question.label} is required.")
            return _ok("")

        if question.type == "date":
            return self._validate_date(answer)
        if question.type == "boolean":
            return self._validate_boolean(answer)
        if question.type == "select":
            return self._validate_choice(question, answer)
        return self._validate_text(question, answer)

    def _validate_date(self, answer: str) -> ValidationResult:
        shape, fmt, shown = DATE_FORMATS[self.date_format]
        if not shape.match(answer):
            return _fail("InvalidDateFormat", f"Please enter the date in {shown} format.")
        try:
            datetime.strptime(answer, fmt)
        except ValueError:
            return _fail("InvalidDateFormat", f"{answer} is not a valid calendar date ({shown}).")
        return _ok(answer)

    def _validate_boolean(self, answer: str) -> ValidationResult:
        lowered = answer.lower()
        if lowered in TRUE_VALUES:
            return _ok("true")
        if lowered in FALSE_VALUES:
            return _ok("false")
        return _fail("InvalidBooleanValue", "Please answer with yes/no, true/false, y/n or 1/0.")

    def _validate_choice(self, question: Question, answer: str) -> ValidationResult:
        lowered = answer.lower()
        for option in question.options:
            if option.lower() == lowered:
                return _ok(option)
        return _fail(
            "InvalidChoice",
            f"Please select one of: {', '.join(question.options)}",
            options=question.options,
        )

    def _validate_text(self, question: Question, answer: str) -> ValidationResult:
        if question.min_length is not None and len(answer) < question.min_length:
            return _fail(
                "TooShort", f"{question.label} must be at least {question.min_length} characters long."
            )
        if question.max_length is not None and len(answer) > question.max_length:
            return _fail(
                "TooLong", f"{question.label} must be at most {question.max_length} characters long."
            )
        if question.numeric and self.enforce_numeric_bounds:
            return self._validate_number(question, answer)
        return _ok(answer)

    def _validate_number(self, question: Question, answer: str) -> ValidationResult:
        try:
            number = float(answer)
        except ValueError:
            number = math.nan
        if not math.isfinite(number):
            return _fail("InvalidNumber", f"{question.label} must be a number.")
        low, high = question.minimum, question.maximum
        if low is not None and number < low:
            return _fail("OutOfRange", f"{question.label} must be at least {low:g}.")
        if high is not None and number > high:
            return _fail("OutOfRange", f"{question.label} must be at most {high:g}.")
        return _ok(answer)
