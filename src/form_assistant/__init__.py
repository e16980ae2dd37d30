"""Top-level package for the insurance form assistant.

The assistant suggests the right form for a free-text request, can narrow the
choice through a short guided questionnaire, and collects validated answers
for a chosen form. The package exposes convenience functions for the most
common one-shot operation.
"""

from .assistant import FormAssistant
from .catalog import Template, TemplateCatalog, load_catalog
from .discovery import DiscoveryEngine
from .elicitation import ElicitationEngine
from .errors import AssistantError, CatalogError, FormAssistantError, TemplateNotFoundError
from .matching import IntentMatcher, MatchCandidate


def suggest_forms(free_text: str, max_results: int = 3):
    """Rank the packaged insurance forms for ``free_text``.

    This is a convenience wrapper around :class:`IntentMatcher`.
    """
    return IntentMatcher(load_catalog()).top(free_text, max_results)


__all__ = [
    "suggest_forms",
    "FormAssistant",
    "Template",
    "TemplateCatalog",
    "load_catalog",
    "DiscoveryEngine",
    "ElicitationEngine",
    "IntentMatcher",
    "MatchCandidate",
    "AssistantError",
    "CatalogError",
    "FormAssistantError",
    "TemplateNotFoundError",
]

__version__ = "1.0.0"
