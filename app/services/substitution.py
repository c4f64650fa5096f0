"""
Word substitution service for fetched HTML documents.

This module parses an HTML document, rewrites the human-visible text nodes
with a case-preserving word replacement and serializes the tree back to
HTML. Tags, attributes, comments and script/style bodies are never touched.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from bs4 import BeautifulSoup, FeatureNotFound, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EntitySubstitution, UnicodeDammit
from bs4.formatter import HTMLFormatter
from loguru import logger

from app.configs.substitution import (
    DEFAULT_SKIPPED_TAGS,
    SubstitutionSettings,
    get_substitution_settings,
)
from app.services.replacer import WordReplacer
from app.services.substitution_exceptions import (
    HTMLParseError,
    SubstitutionConfigError,
    SubstitutionError,
)
from app.services.text_nodes import iter_text_nodes

# Minimal escaping and HTML5-style void elements (<br> rather than <br/>).
OUTPUT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)

HTML_ROOT_TAG = re.compile(r"<html[\s>/]", re.IGNORECASE)


@dataclass
class SubstitutionResult:
    """Outcome of one substitution pass over a document."""

    content: str
    replacements: int
    text_nodes_visited: int
    text_nodes_changed: int
    title: str | None
    original_size: int
    final_size: int

    @property
    def changed(self) -> bool:
        return self.replacements > 0


def decode_markup(html_source: str | bytes, declared_encoding: str | None = None) -> str:
    """
    Decode raw HTML to text.

    Args:
        html_source: Document as text or bytes
        declared_encoding: Charset announced by the transport, tried first

    Returns:
        Decoded document

    Raises:
        HTMLParseError: If the input is not text or cannot be decoded
    """
    if isinstance(html_source, str):
        return html_source
    if not isinstance(html_source, (bytes, bytearray)):
        raise HTMLParseError(
            f"Expected str or bytes, got {type(html_source).__name__}"
        )

    candidates = [declared_encoding] if declared_encoding else []
    dammit = UnicodeDammit(bytes(html_source), candidates, is_html=True)
    if dammit.unicode_markup is None:
        raise HTMLParseError("Could not determine the document encoding")
    logger.debug(f"Decoded document as {dammit.original_encoding}")
    return dammit.unicode_markup

def serialize_document(soup: BeautifulSoup, markup: str) -> str:
    """
    Serialize a parsed tree without the wrappers the parser invented.

    lxml places a fragment such as ``<p>...</p>`` inside ``<html><body>``.
    When the source had no ``<html>`` element, only the contents of the
    generated head and body are emitted, so fragments stay fragments.
    """
    if soup.html is None or HTML_ROOT_TAG.search(markup):
        return soup.decode(formatter=OUTPUT_FORMATTER)

    parts = []
    for node in soup.contents:
        if node is not soup.html:
            parts.append(_decode_node(node))
            continue
        for section in node.contents:
            if isinstance(section, Tag) and section.name in ("head", "body"):
                parts.append(section.decode_contents(formatter=OUTPUT_FORMATTER))
            else:
                parts.append(_decode_node(section))
    return "".join(parts)


def _decode_node(node) -> str:
    if isinstance(node, Tag):
        return node.decode(formatter=OUTPUT_FORMATTER)
    return node.output_ready(OUTPUT_FORMATTER)



class TextSubstitutionService:
    """Service for rewriting the visible text of HTML documents."""

    def __init__(self, settings: SubstitutionSettings | None = None):
        """
        Initialize the substitution service.

        Args:
            settings: Substitution settings (defaults to environment-driven settings)
        """
        self.settings = settings or get_substitution_settings()

    def parse(self, markup: str, parser: str | None = None) -> BeautifulSoup:
        """Build a document tree, raising HTMLParseError if none can be built."""
        parser = parser or self.settings.parser
        try:
            return BeautifulSoup(markup, parser)
        except FeatureNotFound as exc:
            raise HTMLParseError(f"HTML parser not available: {parser}", parser) from exc
        except ParserRejectedMarkup as exc:
            raise HTMLParseError(f"Parser rejected markup: {exc}", parser) from exc
        except (TypeError, ValueError, AssertionError) as exc:
            raise HTMLParseError(f"Failed to parse document: {exc}", parser) from exc

    def substitute(
        self,
        html_source: str | bytes,
        target_word: str | None = None,
        substitute_word: str | None = None,
        *,
        boundary: str | None = None,
        skipped_tags: Iterable[str] | None = None,
        parser: str | None = None,
        declared_encoding: str | None = None,
    ) -> SubstitutionResult:
        """
        Replace the target word throughout the visible text of a document.

        Arguments left as None fall back to the service settings.

        Args:
            html_source: HTML document as text or bytes
            target_word: Word to replace
            substitute_word: Replacement word
            boundary: Word-boundary policy ('word' or 'substring')
            skipped_tags: Elements whose text is left untouched
            parser: BeautifulSoup tree builder name
            declared_encoding: Charset announced by the transport

        Returns:
            SubstitutionResult with the rewritten document and statistics

        Raises:
            HTMLParseError: If the document cannot be decoded or parsed
            SubstitutionConfigError: If the word pair or policy is invalid
        """
        replacer = WordReplacer(
            target_word if target_word is not None else self.settings.target_word,
            substitute_word if substitute_word is not None else self.settings.substitute_word,
            boundary or self.settings.boundary,
        )
        if skipped_tags is None:
            skipped_tags = self.settings.skipped_tags

        markup = decode_markup(html_source, declared_encoding)
        soup = self.parse(markup, parser)

        replacements = 0
        visited = 0
        changed = 0
        for text_node in iter_text_nodes(soup, skipped_tags):
            visited += 1
            new_text, count = replacer.replace_with_count(str(text_node))
            if count:
                text_node.replace_with(new_text)
                replacements += count
                changed += 1

        title = soup.title.get_text() if soup.title else None

        # Nothing to rewrite: hand back the source exactly as received.
        content = serialize_document(soup, markup) if replacements else markup

        logger.debug(
            f"Substitution of {replacer.target_word!r} -> {replacer.substitute_word!r}: "
            f"{replacements} replacements in {changed}/{visited} text nodes"
        )
        return SubstitutionResult(
            content=content,
            replacements=replacements,
            text_nodes_visited=visited,
            text_nodes_changed=changed,
            title=title,
            original_size=len(markup),
            final_size=len(content),
        )


def transform(
    html_source: str | bytes,
    target_word: str,
    substitute_word: str,
    *,
    boundary: str = "word",
    skipped_tags: Iterable[str] = DEFAULT_SKIPPED_TAGS,
    parser: str = "html.parser",
    declared_encoding: str | None = None,
) -> str:
    """
    Return ``html_source`` with every visible ``target_word`` replaced.

    Raises:
        HTMLParseError: If no document tree can be built from the input
    """
    result = TextSubstitutionService().substitute(
        html_source,
        target_word,
        substitute_word,
        boundary=boundary,
        skipped_tags=skipped_tags,
        parser=parser,
        declared_encoding=declared_encoding,
    )
    return result.content


__all__ = [
    "SubstitutionResult",
    "TextSubstitutionService",
    "transform",
    "decode_markup",
    "serialize_document",
    "HTMLParseError",
    "SubstitutionConfigError",
    "SubstitutionError",
]
