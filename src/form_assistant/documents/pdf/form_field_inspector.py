from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

import pymupdf


@dataclass(frozen=True)
class FormFieldLayout:
    page_count: int
    # Fillable widget names in page order, without duplicates
    widget_names: Tuple[str, ...]


@dataclass
class FormFieldInspector:
    """Read the page count and fillable (AcroForm) widget names of a PDF."""

    def inspect(self, pdf_path: Union[str, Path]) -> FormFieldLayout:
        names: List[str] = []
        with pymupdf.open(str(pdf_path)) as doc:
            # Get page count BEFORE walking the widgets
            page_count = len(doc)
            for page in doc:
                for widget in page.widgets():
                    if widget.field_name and widget.field_name not in names:
                        names.append(widget.field_name)
        return FormFieldLayout(page_count=page_count, widget_names=tuple(names))
