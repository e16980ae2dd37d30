"""Guided, branching discovery of the right form."""

from .engine import (
    DEFAULT_SESSION_ID,
    DiscoveryEngine,
    DiscoveryProgress,
    DiscoveryResult,
    DiscoverySession,
)
from .graph import (
    DEFAULT_SUGGESTION,
    DISCOVERY_NODES,
    ROOT_NODE_ID,
    SUGGESTION_RULES,
    DiscoveryGraph,
    DiscoveryNode,
    SuggestionRule,
)

__all__ = [
    "DEFAULT_SESSION_ID",
    "DiscoveryEngine",
    "DiscoveryProgress",
    "DiscoveryResult",
    "DiscoverySession",
    "DEFAULT_SUGGESTION",
    "DISCOVERY_NODES",
    "ROOT_NODE_ID",
    "SUGGESTION_RULES",
    "DiscoveryGraph",
    "DiscoveryNode",
    "SuggestionRule",
]
