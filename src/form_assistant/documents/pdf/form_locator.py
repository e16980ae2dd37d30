"""Find and describe the PDF document that belongs to a template.

Form PDFs live in one directory as ``<template-id>.pdf``. Only ids present in
the catalog are resolved, so a caller-supplied id can never point outside
that directory.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ...catalog import TemplateCatalog
from .form_field_inspector import FormFieldInspector
from .text_layer import FormKind, TextLayerReader, classify_form

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormDocumentInfo:
    template_id: str
    path: Path
    page_count: int
    kind: FormKind
    widget_names: Tuple[str, ...]
    # Schema fields with no widget of the same name in the PDF
    unmapped_fields: Tuple[str, ...]


class FormDocumentLocator:
    def __init__(
        self,
        catalog: TemplateCatalog,
        forms_dir: Union[str, Path],
        reader: Optional[TextLayerReader] = None,
        inspector: Optional[FormFieldInspector] = None,
    ):
        self.catalog = catalog
        self.forms_dir = Path(forms_dir)
        self.reader = reader or TextLayerReader()
        self.inspector = inspector or FormFieldInspector()

    def locate(self, template_id: str) -> Optional[Path]:
        """Path of the template's PDF, or ``None`` if unknown or missing."""
        if template_id not in self.catalog:
            return None
        pdf_path = self.forms_dir / f"{template_id}.pdf"
        if not pdf_path.is_file():
            logger.debug("No PDF for %s at %s", template_id, pdf_path)
            return None
        return pdf_path

    def available(self) -> List[str]:
        """Template ids that have a PDF on disk, in catalog order."""
        return [template_id for template_id in self.catalog.list_ids() if self.locate(template_id)]

    def describe(self, template_id: str) -> Optional[FormDocumentInfo]:
        pdf_path = self.locate(template_id)
        if pdf_path is None:
            return None

        layout = self.inspector.inspect(pdf_path)
        kind = classify_form(len(layout.widget_names), self.reader.text_length(pdf_path))
        template = self.catalog.get(template_id)
        unmapped = tuple(name for name in template.field_names if name not in layout.widget_names)

        logger.info(
            "Inspected %s: %d pages, %s, %d widgets", pdf_path, layout.page_count, kind, len(layout.widget_names)
        )
        return FormDocumentInfo(
            template_id=template_id,
            path=pdf_path,
            page_count=layout.page_count,
            kind=kind,
            widget_names=layout.widget_names,
            unmapped_fields=unmapped,
        )
