"""Read-only collection of form templates.

The catalog never changes after construction, so any number of callers can
read from it without coordination.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from ..errors import CatalogError, TemplateNotFoundError
from .models import Template

RESOURCE_SCHEME = "form"


@dataclass(frozen=True)
class FormSummary:
    """Overview of a template used when presenting it to a user."""

    id: str
    title: str
    description: str
    required_fields: Tuple[str, ...]
    total_fields: int
    keywords: Tuple[str, ...]
    scenarios: Tuple[str, ...]


class TemplateCatalog:
    """Lookup of templates by id, preserving catalog order."""

    def __init__(self, templates: Iterable[Template]):
        self._templates: Dict[str, Template] = {}
        for template in templates:
            if template.id in self._templates:
                raise CatalogError(f"duplicate template id: {template.id!r}")
            self._templates[template.id] = template

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def get(self, template_id: str) -> Optional[Template]:
        return self._templates.get(template_id)

    def list_ids(self) -> List[str]:
        return list(self._templates)

    def summary(self, template_id: str) -> Optional[FormSummary]:
        template = self.get(template_id)
        if template is None:
            return None
        return FormSummary(
            id=template.id,
            title=template.title,
            description=template.description,
            required_fields=template.required,
            total_fields=len(template.fields),
            keywords=template.keywords,
            scenarios=template.scenarios,
        )

    def resource_uri(self, template_id: str, parameters: Optional[Mapping[str, object]] = None) -> str:
        """Build a ``form://<id>`` URI, with ``parameters`` as the query string.

        Raises :class:`TemplateNotFoundError` for ids outside the catalog.
        """
        if template_id not in self._templates:
            raise TemplateNotFoundError(template_id)
        uri = f"{RESOURCE_SCHEME}://{template_id}"
        if parameters:
            uri += "?" + urlencode({key: str(value) for key, value in parameters.items()})
        return uri
