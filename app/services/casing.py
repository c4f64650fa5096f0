"""
Letter-casing classification and reconstruction for word substitution.
"""

from enum import Enum


class CasingPattern(str, Enum):
    """Letter-case shape of a matched word."""

    UPPER = "upper"
    TITLE = "title"
    LOWER = "lower"
    MIXED = "mixed"


def classify_casing(text: str, canonical_length: int | None = None) -> CasingPattern:
    """
    Classify the casing of a matched span.

    Args:
        text: The matched source text
        canonical_length: Length of the configured target word; a title-cased
            match must have exactly this length

    Returns:
        CasingPattern: Detected pattern, MIXED when none of the others apply
    """
    if not text:
        return CasingPattern.MIXED

    if text.isupper():
        return CasingPattern.UPPER

    if canonical_length is None:
        canonical_length = len(text)
    if (
        text[0].isupper()
        and text[1:].islower()
        and len(text) == canonical_length
    ):
        return CasingPattern.TITLE

    if text.islower():
        return CasingPattern.LOWER

    return CasingPattern.MIXED


def apply_casing(word: str, pattern: CasingPattern) -> str:
    """Render ``word`` in the given casing; MIXED keeps it as configured."""
    if pattern is CasingPattern.UPPER:
        return word.upper()
    if pattern is CasingPattern.TITLE:
        return word[:1].upper() + word[1:].lower()
    if pattern is CasingPattern.LOWER:
        return word.lower()
    return word


def match_casing(source: str, word: str, canonical_length: int | None = None) -> str:
    """Render ``word`` with the casing pattern observed in ``source``."""
    return apply_casing(word, classify_casing(source, canonical_length))
