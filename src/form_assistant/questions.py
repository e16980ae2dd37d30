"""Questions asked while collecting values for a template's fields.

Each field definition becomes exactly one question. The question type decides
how the answer is validated:

==========  ==============
field kind  question type
==========  ==============
boolean     ``boolean``
date        ``date``
choice      ``select``
text        ``text``
number      ``text`` (numeric bounds are carried along, see ``numeric``)
==========  ==============
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from .catalog import BooleanField, ChoiceField, DateField, NumberField, Template, TextField

QuestionType = Literal["text", "date", "boolean", "select"]


@dataclass(frozen=True)
class Question:
    field_name: str
    label: str
    prompt: str
    type: QuestionType
    required: bool
    options: Tuple[str, ...] = ()
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    # True when the underlying field holds a number
    numeric: bool = False


def question_for_field(field, required: bool) -> Question:
    """Build the question for one field definition."""
    common = dict(
        field_name=field.name,
        label=field.title,
        prompt=field.description or field.title,
        required=required,
    )
    if isinstance(field, BooleanField):
        return Question(type="boolean", **common)
    if isinstance(field, DateField):
        return Question(type="date", **common)
    if isinstance(field, ChoiceField):
        return Question(type="select", options=field.options, **common)
    if isinstance(field, NumberField):
        return Question(type="text", minimum=field.minimum, maximum=field.maximum, numeric=True, **common)
    if isinstance(field, TextField):
        return Question(type="text", min_length=field.min_length, max_length=field.max_length, **common)
    raise TypeError(f"Unsupported field definition: {field!r}")


def derive_questions(template: Template) -> List[Question]:
    """Questions for every field of ``template`` in declaration order."""
    return [question_for_field(f, template.is_required(f.name)) for f in template.fields]
