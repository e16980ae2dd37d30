"""Collect validated values for every field of one template, in order.

The session cursor walks the template's questions. An answer that fails
validation is returned as an error and the cursor stays put, so the caller can
simply ask the same question again.

``current_question`` returns ``None`` both when no session exists and when the
session is complete. Use :meth:`ElicitationEngine.summary` to tell the two
apart (``None`` vs ``completed=True``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..catalog import Template, TemplateCatalog
from ..errors import AssistantError, no_active_session, no_current_question, not_found
from ..questions import Question, derive_questions
from ..validation import AnswerValidator

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"


@dataclass
class ElicitationSession:
    template: Template
    questions: List[Question]
    current_index: int = 0
    # field name -> normalised answer
    answers: Dict[str, str] = field(default_factory=dict)
    is_complete: bool = False

    @property
    def template_id(self) -> str:
        return self.template.id

    @property
    def current(self) -> Optional[Question]:
        if self.current_index >= len(self.questions):
            return None
        return self.questions[self.current_index]


@dataclass(frozen=True)
class ElicitationResult:
    success: bool
    is_complete: bool = False
    question: Optional[Question] = None
    error: Optional[AssistantError] = None


@dataclass(frozen=True)
class ElicitationSummary:
    template_id: str
    field_answers: Dict[str, str]
    completed: bool


@dataclass(frozen=True)
class ElicitationProgress:
    current: int
    total: int
    percentage: int


class ElicitationEngine:
    def __init__(self, catalog: TemplateCatalog, validator: Optional[AnswerValidator] = None):
        self.catalog = catalog
        self.validator = validator or AnswerValidator()
        self._sessions: Dict[str, ElicitationSession] = {}

    def start(self, template_id: str, session_id: str = DEFAULT_SESSION_ID) -> ElicitationResult:
        """Begin collecting answers for ``template_id``.

        An unknown id returns a ``NotFound`` error and leaves any existing
        session for ``session_id`` untouched.
        """
        template = self.catalog.get(template_id)
        if template is None:
            logger.debug("Cannot start elicitation for unknown template %r", template_id)
            return ElicitationResult(success=False, error=not_found(template_id))

        questions = derive_questions(template)
        session = ElicitationSession(template=template, questions=questions)
        # Degenerate template without fields is complete immediately
        session.is_complete = not questions
        self._sessions[session_id] = session

        logger.info("Started elicitation session %r for %s (%d questions)", session_id, template_id, len(questions))
        return ElicitationResult(success=True, is_complete=session.is_complete, question=session.current)

    def current_question(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[Question]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return session.current

    def submit_answer(self, raw_answer: str, session_id: str = DEFAULT_SESSION_ID) -> ElicitationResult:
        session = self._sessions.get(session_id)
        if session is None:
            return ElicitationResult(success=False, error=no_active_session())

        question = session.current
        if question is None:
            return ElicitationResult(success=False, is_complete=True, error=no_current_question())

        result = self.validator.validate(question, raw_answer)
        if not result.valid:
            logger.debug("Rejected answer for %s.%s: %s", session.template_id, question.field_name, result.error)
            return ElicitationResult(success=False, question=question, error=result.error)

        session.answers[question.field_name] = result.value
        session.current_index += 1
        session.is_complete = session.current_index >= len(session.questions)

        if session.is_complete:
            logger.info("Elicitation session %r for %s complete", session_id, session.template_id)
        return ElicitationResult(success=True, is_complete=session.is_complete, question=session.current)

    def reset(self, session_id: str = DEFAULT_SESSION_ID) -> None:
        if self._sessions.pop(session_id, None) is not None:
            logger.info("Reset elicitation session %r", session_id)

    def summary(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[ElicitationSummary]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return ElicitationSummary(
            template_id=session.template_id,
            field_answers=dict(session.answers),
            completed=session.is_complete,
        )

    def progress(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[ElicitationProgress]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        total = len(session.questions)
        # Halves round up
        percentage = int(session.current_index / total * 100 + 0.5) if total else 100
        return ElicitationProgress(current=session.current_index, total=total, percentage=percentage)

    def render_summary(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[str]:
        """Readable recap of a completed session, one block per answered question."""
        session = self._sessions.get(session_id)
        if session is None or not session.is_complete:
            return None

        lines = [f"Form: {session.template.title}", ""]
        for question in session.questions:
            answer = session.answers.get(question.field_name)
            if answer:
                lines.extend([question.prompt, f"Answer: {answer}", ""])
        return "\n".join(lines).rstrip() + "\n"
