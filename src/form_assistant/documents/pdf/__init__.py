"""PDF-specific form document helpers."""

from .form_field_inspector import FormFieldInspector, FormFieldLayout
from .form_locator import FormDocumentInfo, FormDocumentLocator
from .text_layer import FormKind, TextLayerReader, classify_form

__all__ = [
    "FormDocumentInfo",
    "FormDocumentLocator",
    "FormFieldInspector",
    "FormFieldLayout",
    "FormKind",
    "TextLayerReader",
    "classify_form",
]
