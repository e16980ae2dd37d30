"""Loose regular-expression rules per template.

Each rule catches the general concept word of a form and common phrasings
around it. Keywords live on the templates themselves; these patterns are the
second, broader signal the matcher adds on top.
"""
from __future__ import annotations

import re
from typing import Dict, Mapping, Pattern, Sequence, Tuple

INTENT_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "beneficiary-change": (
        r"beneficiary",
        r"change.*beneficiary",
        r"update.*beneficiary",
        r"new.*beneficiary",
    ),
    "loan-form": (
        r"loan",
        r"borrow",
        r"cash.*advance",
        r"policy.*loan",
        r"loan.*against",
    ),
    "reinstatement-application": (
        r"reinstate",
        r"lapsed",
        r"restore.*policy",
        r"reactivate",
        r"bring.*back",
    ),
    "surrender-form": (
        r"surrender",
        r"cash.*out",
        r"cancel.*policy",
        r"terminate.*policy",
        r"cash.*value",
    ),
    "non-forfeiture-option": (
        r"non.?forfeiture",
        r"paid.?up",
        r"extended.*term",
        r"policy.*option",
    ),
    "annuity-contract-change": (
        r"annuity",
        r"contract.*change",
        r"payment.*frequency",
        r"investment.*allocation",
    ),
    "amendment-request": (
        r"amendment",
        r"modify.*policy",
        r"change.*policy",
        r"coverage.*change",
        r"rider",
    ),
}

CompiledPatterns = Dict[str, Tuple[Pattern[str], ...]]


def compile_patterns(rules: Mapping[str, Sequence[str]]) -> CompiledPatterns:
    """Compile every rule case-insensitively, keyed by template id."""
    return {
        template_id: tuple(re.compile(expr, re.IGNORECASE) for expr in expressions)
        for template_id, expressions in rules.items()
    }
