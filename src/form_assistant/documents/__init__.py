"""Form document utilities.

The ``pdf`` subpackage handles the PDF files that back each template. Other
file types can provide their own locators alongside it in the future.
"""

from .pdf import FormDocumentInfo, FormDocumentLocator, TextLayerReader

__all__ = ["FormDocumentInfo", "FormDocumentLocator", "TextLayerReader"]
