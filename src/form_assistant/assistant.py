"""Entry points used by whatever layer exposes the assistant (tools, HTTP, CLI).

:class:`FormAssistant` builds the catalog, matcher and both engines from
:mod:`config.settings` and offers one method per external operation. The
engines are exposed as ``assistant.discovery`` and ``assistant.elicitation``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Optional

from config import Settings, configure_logging
from config import settings as default_settings

from .catalog import FormSummary, Template, TemplateCatalog, load_catalog
from .discovery import DEFAULT_SUGGESTION, DiscoveryEngine
from .documents import FormDocumentInfo, FormDocumentLocator, TextLayerReader
from .elicitation import ElicitationEngine
from .matching import IntentMatcher, MatchCandidate, MatchWeights
from .validation import AnswerValidator

logger = logging.getLogger(__name__)


class FormAssistant:
    def __init__(
        self,
        catalog: TemplateCatalog,
        matcher: IntentMatcher,
        discovery: DiscoveryEngine,
        elicitation: ElicitationEngine,
        documents: FormDocumentLocator,
        max_results: int = 3,
    ):
        self.catalog = catalog
        self.matcher = matcher
        self.discovery = discovery
        self.elicitation = elicitation
        self.documents = documents
        self.max_results = max_results

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, configure_logs: bool = False) -> "FormAssistant":
        """Build every component from ``settings`` (the global settings by default)."""
        cfg = settings or default_settings
        if configure_logs:
            configure_logging(cfg.logging)

        catalog = load_catalog(cfg.catalog.catalog_path)
        weights = MatchWeights(
            keyword=cfg.matching.keyword_weight,
            pattern=cfg.matching.pattern_weight,
            id_bonus=cfg.matching.id_bonus,
            threshold=cfg.matching.confidence_threshold,
        )
        validator = AnswerValidator(
            date_format=cfg.validation.date_format,
            enforce_numeric_bounds=cfg.validation.enforce_numeric_bounds,
        )
        documents = FormDocumentLocator(
            catalog,
            cfg.documents.forms_dir,
            reader=TextLayerReader(pages=cfg.documents.sample_pages),
        )

        logger.debug("Building form assistant for environment %r", cfg.environment)
        return cls(
            catalog=catalog,
            matcher=IntentMatcher(catalog, weights=weights),
            discovery=DiscoveryEngine(
                catalog, default_suggestion=cfg.discovery.default_suggestion or DEFAULT_SUGGESTION
            ),
            elicitation=ElicitationEngine(catalog, validator=validator),
            documents=documents,
            max_results=cfg.matching.max_results,
        )

    # Catalog

    def list_template_ids(self) -> List[str]:
        return self.catalog.list_ids()

    def get_template(self, template_id: str) -> Optional[Template]:
        return self.catalog.get(template_id)

    def form_summary(self, template_id: str) -> Optional[FormSummary]:
        return self.catalog.summary(template_id)

    def resource_uri(self, template_id: str, parameters: Optional[Mapping[str, object]] = None) -> str:
        return self.catalog.resource_uri(template_id, parameters)

    # Matching

    def match_intent(self, free_text: str, max_results: Optional[int] = None) -> List[MatchCandidate]:
        limit = self.max_results if max_results is None else max_results
        candidates = self.matcher.top(free_text, limit)
        logger.debug("match_intent(%r) -> %s", free_text, [c.template_id for c in candidates])
        return candidates

    def best_match(self, free_text: str) -> Optional[MatchCandidate]:
        return self.matcher.best(free_text)

    # Documents

    def locate_document(self, template_id: str) -> Optional[Path]:
        return self.documents.locate(template_id)

    def inspect_document(self, template_id: str) -> Optional[FormDocumentInfo]:
        return self.documents.describe(template_id)
