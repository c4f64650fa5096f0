"""
Unit tests for the case-preserving word replacer.
"""

import re

import pytest

from app.exceptions import ErrorTypes
from app.services.replacer import WordReplacer, build_pattern
from app.services.substitution_exceptions import SubstitutionConfigError


class TestWordReplacer:
    """Test cases for WordReplacer class."""

    def test_replacer_initialization(self):
        """Test replacer initialization with default policy."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.target_word == "Yale"
        assert replacer.substitute_word == "Fale"
        assert replacer.boundary == "word"
        assert replacer.pattern.flags & re.IGNORECASE

    def test_casing_fidelity(self):
        """Test that each casing is mirrored."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace("YALE") == "FALE"
        assert replacer.replace("Yale") == "Fale"
        assert replacer.replace("yale") == "fale"

    def test_multiple_occurrences_in_one_string(self):
        """Test mixed-case occurrences within a single string."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace("Yale yale YALE") == "Fale fale FALE"

    def test_mixed_case_falls_back_to_configured_substitute(self):
        """Test that irregular casing yields the substitute as configured."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace("yALE") == "Fale"

    def test_replace_with_count(self):
        """Test replacement counting."""
        replacer = WordReplacer("Yale", "Fale")
        text, count = replacer.replace_with_count("YALE UNIVERSITY, Yale College, yale school")
        assert text == "FALE UNIVERSITY, Fale College, fale school"
        assert count == 3

    def test_empty_and_unmatched_text(self):
        """Test that empty and unmatched strings pass through."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace_with_count("") == ("", 0)
        assert replacer.replace_with_count("Harvard University") == ("Harvard University", 0)

    def test_word_boundary_excludes_longer_tokens(self):
        """Test that the target inside a longer word is left alone."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace("Yalewood and Yales") == "Yalewood and Yales"
        assert replacer.replace("NewYale") == "NewYale"

    def test_word_boundary_accepts_non_letters(self):
        """Test that punctuation, digits and underscores delimit words."""
        replacer = WordReplacer("Yale", "Fale")
        assert replacer.replace("Yale's campus") == "Fale's campus"
        assert replacer.replace("visit yale.edu") == "visit fale.edu"
        assert replacer.replace("Yale2025 _yale_") == "Fale2025 _fale_"
        assert replacer.replace("(YALE)") == "(FALE)"

    def test_substring_policy(self):
        """Test that the substring policy matches inside longer words."""
        replacer = WordReplacer("Yale", "Fale", boundary="substring")
        assert replacer.replace("Yalewood") == "Falewood"
        assert replacer.replace("NEWYALE") == "NEWFALE"

    def test_no_cascading_replacement(self):
        """Test that a substitute containing the target is not replaced again."""
        replacer = WordReplacer("Yale", "Yale Yale", boundary="word")
        assert replacer.replace("Yale") == "Yale yale"

        replacer = WordReplacer("Yale", "YaleYale", boundary="substring")
        assert replacer.replace("yale") == "yaleyale"

    def test_regex_metacharacters_are_literal(self):
        """Test that the target word is matched literally."""
        replacer = WordReplacer("C++", "Rust", boundary="substring")
        assert replacer.replace("I like c++ and C") == "I like rust and C"

    @pytest.mark.parametrize("target", ["", "   ", "two words"])
    def test_invalid_target_word(self, target):
        """Test rejection of blank and multi-word targets."""
        with pytest.raises(SubstitutionConfigError) as exc_info:
            WordReplacer(target, "Fale")
        assert exc_info.value.error_type == ErrorTypes.CONFIG_ERROR
        assert exc_info.value.details["field"] == "target_word"

    def test_invalid_boundary_policy(self):
        """Test rejection of an unknown boundary policy."""
        with pytest.raises(SubstitutionConfigError) as exc_info:
            WordReplacer("Yale", "Fale", boundary="fuzzy")
        assert "Unknown boundary policy" in str(exc_info.value)


class TestBuildPattern:
    """Test cases for build_pattern."""

    def test_word_pattern_spans(self):
        """Test that match spans are located on the original string."""
        pattern = build_pattern("Yale")
        spans = [m.span() for m in pattern.finditer("Yale, yalewood, YALE")]
        assert spans == [(0, 4), (16, 20)]

    def test_substring_pattern(self):
        """Test that the substring pattern has no boundary assertions."""
        pattern = build_pattern("Yale", "substring")
        assert pattern.pattern == "Yale"
        assert len(pattern.findall("yalewood YALE")) == 2
