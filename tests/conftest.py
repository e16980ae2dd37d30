import pytest

from form_assistant.catalog import load_catalog
from form_assistant.discovery import DiscoveryEngine
from form_assistant.elicitation import ElicitationEngine
from form_assistant.matching import IntentMatcher


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def matcher(catalog):
    return IntentMatcher(catalog)


@pytest.fixture
def discovery(catalog):
    return DiscoveryEngine(catalog)


@pytest.fixture
def elicitation(catalog):
    return ElicitationEngine(catalog)
