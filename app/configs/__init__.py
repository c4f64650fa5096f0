"""
Configuration package for the Word Substitution Proxy.

This package contains configuration modules for different services
and components of the application.
"""

from .substitution import (
    BOUNDARY_POLICIES,
    DEFAULT_SKIPPED_TAGS,
    SUPPORTED_PARSERS,
    SubstitutionSettings,
    get_substitution_settings,
)

__all__ = [
    "SubstitutionSettings",
    "get_substitution_settings",
    "DEFAULT_SKIPPED_TAGS",
    "BOUNDARY_POLICIES",
    "SUPPORTED_PARSERS",
]
