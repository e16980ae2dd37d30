"""Question graph and suggestion rules for guided form discovery.

Everything here is plain data. The engine only follows ``follow_up`` links by
exact answer text and, once a session ends, consults the suggestion rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Literal, Mapping, Optional, Tuple

NodeType = Literal["select", "text"]

ROOT_NODE_ID = "intent"

# Suggested when neither the root answer nor any keyword points somewhere.
# This can name a form unrelated to what the user typed.
DEFAULT_SUGGESTION = "beneficiary-change"


@dataclass(frozen=True)
class DiscoveryNode:
    id: str
    question: str
    type: NodeType
    options: Tuple[str, ...] = ()
    # exact answer text -> next node id
    follow_up: Mapping[str, str] = field(default_factory=dict)
    description: Optional[str] = None

    def next_node(self, answer: str) -> Optional[str]:
        return self.follow_up.get(answer)


@dataclass(frozen=True)
class SuggestionRule:
    """Map a root answer to a template, optionally refined by a later answer.

    ``refinements`` maps ``(node_id, answer)`` to a template id that replaces
    ``template_id`` when that answer was given.
    """

    root_answer: str
    template_id: str
    refinements: Mapping[Tuple[str, str], str] = field(default_factory=dict)

    def resolve(self, answers: Mapping[str, str]) -> str:
        for (node_id, answer), template_id in self.refinements.items():
            if answers.get(node_id) == answer:
                return template_id
        return self.template_id


DISCOVERY_NODES: Tuple[DiscoveryNode, ...] = (
    DiscoveryNode(
        id=ROOT_NODE_ID,
        question="What would you like to do with your insurance policy?",
        type="select",
        options=(
            "Change beneficiary information",
            "Take a loan against my policy",
            "Surrender my policy",
            "Change policy details",
            "Apply for reinstatement",
            "Other",
        ),
        follow_up={
            "Change beneficiary information": "beneficiary-type",
            "Take a loan against my policy": "loan-type",
            "Surrender my policy": "surrender-type",
            "Change policy details": "change-type",
            "Apply for reinstatement": "reinstatement-reason",
            "Other": "describe-need",
        },
    ),
    DiscoveryNode(
        id="beneficiary-type",
        question="What type of beneficiary change do you need?",
        type="select",
        options=(
            "Change primary beneficiary",
            "Add or change contingent beneficiary",
            "Update beneficiary percentage",
            "All of the above",
        ),
    ),
    DiscoveryNode(
        id="loan-type",
        question="What type of loan are you looking for?",
        type="select",
        options=(
            "Policy loan (borrow against cash value)",
            "Automatic premium loan",
            "Other loan option",
        ),
    ),
    DiscoveryNode(
        id="surrender-type",
        question="What type of surrender are you considering?",
        type="select",
        options=(
            "Full surrender (cancel policy)",
            "Partial surrender (withdraw some cash value)",
            "Non-forfeiture option (keep some benefits)",
        ),
    ),
    DiscoveryNode(
        id="change-type",
        question="What policy details would you like to change?",
        type="select",
        options=(
            "Contact information",
            "Payment method or frequency",
            "Coverage amount",
            "Policy options or riders",
            "Other changes",
        ),
    ),
    DiscoveryNode(
        id="reinstatement-reason",
        question="Why do you need to reinstate your policy?",
        type="select",
        options=(
            "Policy lapsed due to non-payment",
            "Policy was surrendered and I want it back",
            "Other reinstatement situation",
        ),
    ),
    DiscoveryNode(
        id="describe-need",
        question="Please describe what you need help with:",
        type="text",
    ),
)

SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule("Change beneficiary information", "beneficiary-change"),
    SuggestionRule("Take a loan against my policy", "loan-form"),
    SuggestionRule(
        "Surrender my policy",
        "surrender-form",
        refinements={("surrender-type", "Non-forfeiture option (keep some benefits)"): "non-forfeiture-option"},
    ),
    SuggestionRule("Apply for reinstatement", "reinstatement-application"),
    SuggestionRule("Change policy details", "amendment-request"),
)


class DiscoveryGraph:
    """Indexed, checked view over a set of discovery nodes."""

    def __init__(self, nodes: Iterable[DiscoveryNode] = DISCOVERY_NODES, root_id: str = ROOT_NODE_ID):
        self._nodes: Dict[str, DiscoveryNode] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise ValueError(f"duplicate discovery node: {node.id!r}")
            self._nodes[node.id] = node
        if root_id not in self._nodes:
            raise ValueError(f"root node {root_id!r} is not part of the graph")
        for node in self._nodes.values():
            missing = [target for target in node.follow_up.values() if target not in self._nodes]
            if missing:
                raise ValueError(f"node {node.id!r} links to unknown nodes: {missing}")
        self.root_id = root_id

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def get(self, node_id: Optional[str]) -> Optional[DiscoveryNode]:
        if node_id is None:
            return None
        return self._nodes.get(node_id)
