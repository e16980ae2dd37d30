"""Load the template catalog from its serialized JSON form."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..errors import CatalogError
from .models import CatalogDocument
from .template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "insurance_forms.json"


def parse_catalog(raw_json: Union[str, bytes]) -> TemplateCatalog:
    """Validate ``raw_json`` and build a :class:`TemplateCatalog` from it."""
    try:
        document = CatalogDocument.model_validate_json(raw_json)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog data: {exc}") from exc
    return TemplateCatalog(document.templates)


def load_catalog(path: Optional[Union[str, Path]] = None) -> TemplateCatalog:
    """Read a catalog file, defaulting to the packaged insurance forms."""
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        raw_json = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog file {catalog_path}: {exc}") from exc

    catalog = parse_catalog(raw_json)
    logger.info("Loaded %d form templates from %s", len(catalog), catalog_path)
    return catalog
