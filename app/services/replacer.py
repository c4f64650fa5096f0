"""
Case-preserving word replacement over plain strings.

The replacer rewrites every case-insensitive occurrence of a target word
with a substitute that mirrors the occurrence's casing. All matches are
located on the original string and substituted in one left-to-right pass,
so a substitute that itself contains the target never triggers a second
replacement.
"""

import re

from app.configs.substitution import BOUNDARY_POLICIES
from app.services.casing import match_casing
from app.services.substitution_exceptions import SubstitutionConfigError

# A letter is any word character that is neither a digit nor an underscore.
_NOT_AFTER_LETTER = r"(?<![^\W\d_])"
_NOT_BEFORE_LETTER = r"(?![^\W\d_])"


def build_pattern(target_word: str, boundary: str = "word") -> re.Pattern[str]:
    """
    Compile the search pattern for a target word.

    Args:
        target_word: Word to search for
        boundary: 'word' to require non-letter characters (or string edges)
            on both sides, 'substring' to match anywhere

    Returns:
        Compiled case-insensitive pattern
    """
    escaped = re.escape(target_word)
    if boundary == "word":
        return re.compile(f"{_NOT_AFTER_LETTER}{escaped}{_NOT_BEFORE_LETTER}", re.IGNORECASE)
    return re.compile(escaped, re.IGNORECASE)


class WordReplacer:
    """Replaces a target word with a case-matched substitute."""

    def __init__(self, target_word: str, substitute_word: str, boundary: str = "word"):
        if not target_word or not target_word.strip():
            raise SubstitutionConfigError("Target word must not be empty", "target_word")
        if any(ch.isspace() for ch in target_word):
            raise SubstitutionConfigError(
                f"Target word must be a single word: {target_word!r}", "target_word"
            )
        if substitute_word is None:
            raise SubstitutionConfigError("Substitute word is required", "substitute_word")
        if boundary not in BOUNDARY_POLICIES:
            raise SubstitutionConfigError(
                f"Unknown boundary policy {boundary!r}, expected one of {list(BOUNDARY_POLICIES)}",
                "boundary",
            )

        self.target_word = target_word
        self.substitute_word = substitute_word
        self.boundary = boundary
        self.pattern = build_pattern(target_word, boundary)

    def _render(self, match: re.Match[str]) -> str:
        return match_casing(match.group(0), self.substitute_word, len(self.target_word))

    def replace_with_count(self, text: str) -> tuple[str, int]:
        """
        Replace every match in ``text``.

        Returns:
            Tuple of (new text, number of replacements)
        """
        if not text:
            return text, 0
        return self.pattern.subn(self._render, text)

    def replace(self, text: str) -> str:
        """Return ``text`` with every match replaced."""
        return self.replace_with_count(text)[0]

    def __repr__(self) -> str:
        return (
            f"WordReplacer(target_word={self.target_word!r}, "
            f"substitute_word={self.substitute_word!r}, boundary={self.boundary!r})"
        )
