"""
Unit tests for application and substitution settings.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.configs.substitution import DEFAULT_SKIPPED_TAGS, SubstitutionSettings


class TestSettings:
    """Test cases for the application Settings class."""

    def test_defaults(self):
        """Test default application settings."""
        settings = Settings(_env_file=None)
        assert settings.PORT == 3001
        assert settings.FETCH_TIMEOUT > 0
        assert settings.TEMPLATES_DIR.endswith("templates")

    def test_log_level_is_upper_cased(self):
        """Test log level normalization."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"ENVIRONMENT": "testing"},
            {"LOG_LEVEL": "verbose"},
            {"FETCH_TIMEOUT": 0},
            {"FETCH_TIMEOUT": 600},
            {"MAX_CONTENT_LENGTH": 0},
            {"MAX_CONTENT_LENGTH": 100 * 1024 * 1024},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test rejection of out-of-range settings."""
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_environment_variables(self, monkeypatch):
        """Test overriding settings from the environment."""
        monkeypatch.setenv("FETCH_TIMEOUT", "30")
        monkeypatch.setenv("environment", "staging")

        settings = Settings()

        assert settings.FETCH_TIMEOUT == 30
        assert settings.ENVIRONMENT == "staging"


class TestSubstitutionSettings:
    """Test cases for SubstitutionSettings class."""

    def test_defaults(self, monkeypatch):
        """Test the default word pair and policy."""
        for name in ("TARGET_WORD", "SUBSTITUTE_WORD", "BOUNDARY", "SKIPPED_TAGS", "PARSER"):
            monkeypatch.delenv(f"SUBSTITUTION_{name}", raising=False)

        settings = SubstitutionSettings()

        assert settings.target_word == "Yale"
        assert settings.substitute_word == "Fale"
        assert settings.boundary == "word"
        assert settings.skipped_tags == list(DEFAULT_SKIPPED_TAGS)
        assert settings.parser == "html.parser"

    def test_environment_prefix(self, monkeypatch):
        """Test overriding the word pair from the environment."""
        monkeypatch.setenv("SUBSTITUTION_TARGET_WORD", "Harvard")
        monkeypatch.setenv("SUBSTITUTION_SUBSTITUTE_WORD", "Barvard")
        monkeypatch.setenv("SUBSTITUTION_SKIPPED_TAGS", '["script", "code"]')

        settings = SubstitutionSettings()

        assert settings.target_word == "Harvard"
        assert settings.substitute_word == "Barvard"
        assert settings.skipped_tags == ["script", "code"]

    def test_words_are_stripped(self):
        """Test whitespace trimming of the word pair."""
        settings = SubstitutionSettings(target_word="  Yale ", substitute_word=" Fale")
        assert settings.target_word == "Yale"
        assert settings.substitute_word == "Fale"

    @pytest.mark.parametrize("word", ["", "   ", "New Haven"])
    def test_invalid_words(self, word):
        """Test rejection of blank and multi-word terms."""
        with pytest.raises(ValidationError):
            SubstitutionSettings(target_word=word)

    def test_boundary_normalized(self):
        """Test boundary policy normalization."""
        assert SubstitutionSettings(boundary="SUBSTRING").boundary == "substring"
        with pytest.raises(ValidationError):
            SubstitutionSettings(boundary="fuzzy")

    def test_skipped_tags_normalized(self):
        """Test skipped tag normalization."""
        settings = SubstitutionSettings(skipped_tags=[" SCRIPT ", "Style", ""])
        assert settings.skipped_tags == ["script", "style"]

    def test_invalid_parser(self):
        """Test rejection of an unsupported parser."""
        with pytest.raises(ValidationError):
            SubstitutionSettings(parser="html5lib")
