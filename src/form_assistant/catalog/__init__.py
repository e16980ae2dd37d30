"""Form template catalog: schema models, the read-only catalog and its loader."""

from .loader import DEFAULT_CATALOG_PATH, load_catalog, parse_catalog
from .models import (
    BooleanField,
    CatalogDocument,
    ChoiceField,
    DateField,
    FieldDefinition,
    NumberField,
    Template,
    TextField,
)
from .template_catalog import FormSummary, TemplateCatalog

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "load_catalog",
    "parse_catalog",
    "Template",
    "FieldDefinition",
    "TextField",
    "NumberField",
    "DateField",
    "BooleanField",
    "ChoiceField",
    "CatalogDocument",
    "FormSummary",
    "TemplateCatalog",
]
