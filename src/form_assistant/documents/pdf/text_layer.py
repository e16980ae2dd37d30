"""Decide how a form PDF can be completed.

A form with AcroForm widgets can be filled in place. Without widgets, a form
that still carries a text layer was generated digitally and answers can be
overlaid at known positions. A form with neither is a scanned image, which has
to be printed and completed by hand.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

from pdfminer.high_level import extract_pages
from pdfminer.layout import LTTextContainer

logger = logging.getLogger(__name__)

FormKind = Literal["fillable", "digital", "scanned"]


@dataclass
class TextLayerReader:
    """Measure the text layer on the first ``pages`` pages of a form."""

    pages: int = 1

    def text_length(self, pdf_path: Union[str, Path]) -> int:
        try:
            return sum(
                len(element.get_text().strip())
                for page in extract_pages(str(pdf_path), maxpages=self.pages)
                for element in page
                if isinstance(element, LTTextContainer)
            )
        except Exception as exc:
            # An unreadable file has no usable text layer
            logger.warning("Could not read text layer of %s: %s", pdf_path, exc)
            return 0


def classify_form(widget_count: int, text_length: int) -> FormKind:
    if widget_count:
        return "fillable"
    return "digital" if text_length else "scanned"
