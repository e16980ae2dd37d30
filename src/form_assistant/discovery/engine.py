"""Guided discovery: narrow down the right form through a few questions.

A session starts at the root question and follows the answered node's
``follow_up`` link. When an answer has no link the session is complete and
the suggested templates are resolved exactly once, in this order:

1. a suggestion rule for the root answer (possibly refined by a later answer),
2. any template whose keyword appears in the concatenated answers,
3. the configured default suggestion, so the list is never empty.

Answers are recorded verbatim. Sessions are keyed by ``session_id``; starting a
session replaces any earlier one with the same id.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..catalog import TemplateCatalog
from ..errors import AssistantError, no_active_session, no_current_question
from .graph import (
    DEFAULT_SUGGESTION,
    SUGGESTION_RULES,
    DiscoveryGraph,
    DiscoveryNode,
    SuggestionRule,
)

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"


@dataclass
class DiscoverySession:
    current_node_id: Optional[str]
    # node id -> raw answer, in the order questions were answered
    answers: Dict[str, str] = field(default_factory=dict)
    is_complete: bool = False
    suggested_template_ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DiscoveryResult:
    completed: bool = False
    suggestions: Optional[Tuple[str, ...]] = None
    next_question: Optional[DiscoveryNode] = None
    error: Optional[AssistantError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DiscoveryProgress:
    questions_answered: int
    forms_narrowed: int
    is_complete: bool


class DiscoveryEngine:
    def __init__(
        self,
        catalog: TemplateCatalog,
        graph: Optional[DiscoveryGraph] = None,
        rules: Iterable[SuggestionRule] = SUGGESTION_RULES,
        default_suggestion: str = DEFAULT_SUGGESTION,
    ):
        self.catalog = catalog
        self.graph = graph or DiscoveryGraph()
        self.rules: Mapping[str, SuggestionRule] = {rule.root_answer: rule for rule in rules}
        self.default_suggestion = default_suggestion
        self._sessions: Dict[str, DiscoverySession] = {}

        if default_suggestion not in catalog:
            logger.warning("Default discovery suggestion %r is not in the catalog", default_suggestion)

    def start(self, session_id: str = DEFAULT_SESSION_ID) -> None:
        if session_id in self._sessions:
            logger.debug("Discarding previous discovery session %r", session_id)
        self._sessions[session_id] = DiscoverySession(current_node_id=self.graph.root_id)
        logger.info("Started discovery session %r", session_id)

    def current_question(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[DiscoveryNode]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return self.graph.get(session.current_node_id)

    def submit_answer(self, raw_answer: str, session_id: str = DEFAULT_SESSION_ID) -> DiscoveryResult:
        session = self._sessions.get(session_id)
        if session is None:
            return DiscoveryResult(error=no_active_session())

        node = self.graph.get(session.current_node_id)
        if node is None:
            return DiscoveryResult(error=no_current_question())

        session.answers[node.id] = raw_answer
        next_id = node.next_node(raw_answer)
        session.current_node_id = next_id

        if next_id is not None:
            logger.debug("Discovery %r: %r -> %r", session_id, node.id, next_id)
            return DiscoveryResult(completed=False, next_question=self.graph.get(next_id))

        session.suggested_template_ids = self._resolve_suggestions(session.answers)
        session.is_complete = True
        logger.info(
            "Discovery session %r complete, suggesting %s", session_id, session.suggested_template_ids
        )
        return DiscoveryResult(completed=True, suggestions=tuple(session.suggested_template_ids))

    def reset(self, session_id: str = DEFAULT_SESSION_ID) -> None:
        if self._sessions.pop(session_id, None) is not None:
            logger.info("Reset discovery session %r", session_id)

    def snapshot(self, session_id: str = DEFAULT_SESSION_ID) -> Optional[DiscoverySession]:
        """A copy of the session; mutating it does not affect the engine."""
        session = self._sessions.get(session_id)
        return copy.deepcopy(session) if session is not None else None

    def progress(self, session_id: str = DEFAULT_SESSION_ID) -> DiscoveryProgress:
        session = self._sessions.get(session_id)
        if session is None:
            return DiscoveryProgress(questions_answered=0, forms_narrowed=0, is_complete=False)
        return DiscoveryProgress(
            questions_answered=len(session.answers),
            forms_narrowed=len(session.suggested_template_ids),
            is_complete=session.is_complete,
        )

    def _resolve_suggestions(self, answers: Mapping[str, str]) -> List[str]:
        rule = self.rules.get(answers.get(self.graph.root_id))
        if rule is not None:
            return [rule.resolve(answers)]

        text = " ".join(answers.values()).lower()
        hits = [
            template.id
            for template in self.catalog
            if any(keyword.lower() in text for keyword in template.keywords)
        ]
        if hits:
            return hits

        logger.debug("No discovery rule or keyword matched, using default %r", self.default_suggestion)
        return [self.default_suggestion]
