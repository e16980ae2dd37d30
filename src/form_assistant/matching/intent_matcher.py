"""Score free-text requests against every template in the catalog.

Matching is purely lexical. Each template collects confidence from three
independent signals:

* every template keyword found in the normalised text,
* every loose pattern rule that matches,
* the template id itself written out with spaces (``loan-form`` -> ``loan form``).

The summed score is capped at 1.0 and anything at or below the threshold is
dropped. Text that matches nothing is a normal, empty outcome.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from ..catalog import Template, TemplateCatalog
from .rules import INTENT_PATTERNS, CompiledPatterns, compile_patterns

CONFIDENCE_THRESHOLD = 0.2
MAX_CONFIDENCE = 1.0

_ID_SEPARATORS = re.compile(r"[-_]+")


@dataclass(frozen=True)
class MatchWeights:
    # Added once per keyword substring hit
    keyword: float = 0.3
    # Added once per pattern rule hit
    pattern: float = 0.4
    # Flat bonus when the spaced-out template id appears
    id_bonus: float = 0.5
    # Candidates must score strictly above this
    threshold: float = CONFIDENCE_THRESHOLD


@dataclass(frozen=True)
class MatchCandidate:
    template_id: str
    title: str
    description: str
    # Confidence score in [0,1]
    confidence: float
    matched_keywords: Tuple[str, ...] = ()


def normalise(text: Optional[str]) -> str:
    return (text or "").lower().strip()


def spaced_id(template_id: str) -> str:
    return _ID_SEPARATORS.sub(" ", template_id.lower())


@dataclass
class IntentMatcher:
    """Rank templates for a free-text request.

    The matcher holds no state between calls, so identical input always
    produces identical ordered output.
    """

    catalog: TemplateCatalog
    patterns: Mapping[str, Sequence[str]] = field(default_factory=lambda: dict(INTENT_PATTERNS))
    weights: MatchWeights = field(default_factory=MatchWeights)

    def __post_init__(self):
        self._compiled: CompiledPatterns = compile_patterns(self.patterns)

    def score(self, free_text: Optional[str]) -> List[MatchCandidate]:
        """Return candidates above the threshold, best first.

        Ties keep catalog order because :func:`sorted` is stable.
        """
        text = normalise(free_text)
        if not text:
            return []

        candidates = []
        for template in self.catalog:
            candidate = self._score_template(template, text)
            if candidate.confidence > self.weights.threshold:
                candidates.append(candidate)

        return sorted(candidates, key=lambda c: c.confidence, reverse=True)

    def best(self, free_text: Optional[str]) -> Optional[MatchCandidate]:
        ranked = self.score(free_text)
        return ranked[0] if ranked else None

    def top(self, free_text: Optional[str], n: int) -> List[MatchCandidate]:
        if n <= 0:
            return []
        return self.score(free_text)[:n]

    def _score_template(self, template: Template, text: str) -> MatchCandidate:
        confidence = 0.0
        matched: List[str] = []

        for keyword in template.keywords:
            if keyword.lower() in text:
                confidence += self.weights.keyword
                matched.append(keyword)

        for pattern in self._compiled.get(template.id, ()):
            if pattern.search(text):
                confidence += self.weights.pattern

        if spaced_id(template.id) in text:
            confidence += self.weights.id_bonus

        return MatchCandidate(
            template_id=template.id,
            title=template.title,
            description=template.description,
            confidence=min(confidence, MAX_CONFIDENCE),
            matched_keywords=tuple(matched),
        )
