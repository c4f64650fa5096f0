"""
Services package for the Word Substitution Proxy.

This package contains the document fetcher and the text substitution engine.
"""

from .casing import CasingPattern, apply_casing, classify_casing, match_casing
from .fetcher import FetchedDocument, HTMLFetcher, validate_url
from .replacer import WordReplacer, build_pattern
from .substitution import SubstitutionResult, TextSubstitutionService, transform
from .substitution_exceptions import (
    HTMLParseError,
    SubstitutionConfigError,
    SubstitutionError,
)
from .text_nodes import NodeKind, classify_node, count_nodes, iter_text_nodes

__all__ = [
    # Fetching
    "HTMLFetcher",
    "FetchedDocument",
    "validate_url",
    # Substitution
    "TextSubstitutionService",
    "SubstitutionResult",
    "transform",
    "WordReplacer",
    "build_pattern",
    # Casing
    "CasingPattern",
    "classify_casing",
    "apply_casing",
    "match_casing",
    # Traversal
    "NodeKind",
    "classify_node",
    "iter_text_nodes",
    "count_nodes",
    # Errors
    "SubstitutionError",
    "HTMLParseError",
    "SubstitutionConfigError",
]
