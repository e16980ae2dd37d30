"""Error types shared by the catalog, the validator and both engines.

Engine operations never raise for expected failures. They return an
:class:`AssistantError` inside their result object so a rejected answer leaves
the session exactly where it was. Exceptions are only used for problems found
while building the system (bad catalog data) or for misuse of lookup helpers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

ErrorKind = Literal["NotFound", "NoActiveSession", "NoCurrentQuestion", "ValidationFailed"]

ValidationKind = Literal[
    "RequiredFieldMissing",
    "InvalidDateFormat",
    "InvalidBooleanValue",
    "InvalidChoice",
    "TooShort",
    "TooLong",
    "InvalidNumber",
    "OutOfRange",
]


@dataclass(frozen=True)
class AssistantError:
    """A failure returned to the caller together with a readable message."""

    kind: ErrorKind
    message: str
    # Set only when ``kind == "ValidationFailed"``
    validation: Optional[ValidationKind] = None
    # Allowed values echoed back for choice questions
    options: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.message


def not_found(template_id: str) -> AssistantError:
    return AssistantError("NotFound", f"Form template not found: {template_id}")


def no_active_session() -> AssistantError:
    return AssistantError("NoActiveSession", "No active session. Start one before answering questions.")


def no_current_question() -> AssistantError:
    return AssistantError("NoCurrentQuestion", "No current question: the session is already complete.")


def validation_failed(
    kind: ValidationKind, message: str, options: Tuple[str, ...] = ()
) -> AssistantError:
    return AssistantError("ValidationFailed", message, validation=kind, options=tuple(options))


class FormAssistantError(Exception):
    """Base class for exceptions raised by this package."""


class CatalogError(FormAssistantError):
    """Raised when catalog data cannot be loaded or breaks an invariant."""


class TemplateNotFoundError(FormAssistantError, KeyError):
    """Raised by lookup helpers that require a known template id."""

    def __init__(self, template_id: str):
        super().__init__(template_id)
        self.template_id = template_id

    def __str__(self) -> str:
        return f"Form template not found: {self.template_id}"
