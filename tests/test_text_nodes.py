"""
Unit tests for text-node location and node classification.
"""

from collections.abc import Iterator

from bs4 import BeautifulSoup, Comment

from app.services.text_nodes import (
    NodeKind,
    classify_node,
    count_nodes,
    iter_text_nodes,
)

SAMPLE_HTML = (
    "<!DOCTYPE html>"
    "<html><head><title>Title</title>"
    "<script>var x = 1;</script>"
    "<style>p { color: red; }</style>"
    "</head><body>"
    "<!-- a comment -->"
    "<p>one<b>two</b>three</p>"
    "<template><span>hidden</span></template>"
    "<div><p>four</p></div>"
    "</body></html>"
)


def _soup(markup: str = SAMPLE_HTML) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


class TestClassifyNode:
    """Test cases for classify_node."""

    def test_element_and_text(self):
        """Test classification of tags and plain strings."""
        soup = _soup()
        paragraph = soup.find("p")
        assert classify_node(paragraph) is NodeKind.ELEMENT
        assert classify_node(paragraph.contents[0]) is NodeKind.TEXT

    def test_comment(self):
        """Test classification of comments."""
        soup = _soup()
        comment = soup.find(string=lambda s: isinstance(s, Comment))
        assert classify_node(comment) is NodeKind.COMMENT

    def test_doctype_is_other(self):
        """Test that the doctype is neither text nor comment."""
        soup = _soup()
        assert classify_node(soup.contents[0]) is NodeKind.OTHER

    def test_script_body_is_text_kind(self):
        """Test that script bodies are text nodes, excluded by their parent."""
        soup = _soup()
        assert classify_node(soup.find("script").contents[0]) is NodeKind.TEXT


class TestIterTextNodes:
    """Test cases for iter_text_nodes."""

    def test_yields_visible_text_in_document_order(self):
        """Test document order and exclusion of non-visible content."""
        texts = [str(node) for node in iter_text_nodes(_soup())]
        assert texts == ["Title", "one", "two", "three", "four"]

    def test_is_lazy_generator(self):
        """Test that traversal is lazy."""
        nodes = iter_text_nodes(_soup())
        assert isinstance(nodes, Iterator)
        assert str(next(nodes)) == "Title"

    def test_yields_live_nodes(self):
        """Test that yielded nodes belong to the tree."""
        soup = _soup()
        first = next(iter_text_nodes(soup))
        assert first.parent is soup.title

    def test_replacing_yielded_nodes_during_iteration(self):
        """Test that replacing each node does not cut traversal short."""
        soup = _soup()
        visited = 0
        for node in iter_text_nodes(soup):
            node.replace_with(str(node).upper())
            visited += 1

        assert visited == 5
        assert soup.title.string == "TITLE"
        assert soup.find("p").get_text() == "ONETWOTHREE"
        assert soup.find("div").get_text() == "FOUR"
        assert soup.find("script").string == "var x = 1;"
        assert soup.find("template").get_text() == "hidden"

    def test_custom_skipped_tags(self):
        """Test skipping an arbitrary element."""
        texts = [str(node) for node in iter_text_nodes(_soup(), skipped_tags=["p", "title"])]
        assert "one" not in texts
        assert "four" not in texts
        assert "Title" not in texts
        assert "var x = 1;" in texts
        assert "hidden" in texts

    def test_skipped_tag_names_are_case_insensitive(self):
        """Test that skipped tag names are compared case-insensitively."""
        texts = [str(node) for node in iter_text_nodes(_soup(), skipped_tags=["TITLE", "SCRIPT", "STYLE", "TEMPLATE"])]
        assert texts == ["one", "two", "three", "four"]

    def test_skipped_root_yields_nothing(self):
        """Test traversal rooted at a skipped element."""
        soup = _soup()
        assert list(iter_text_nodes(soup.find("script"))) == []

    def test_empty_document(self):
        """Test traversal of an empty document."""
        assert list(iter_text_nodes(_soup(""))) == []


class TestCountNodes:
    """Test cases for count_nodes."""

    def test_counts_each_kind(self):
        """Test node counting by kind."""
        counts = count_nodes(_soup())
        assert counts[NodeKind.COMMENT] == 1
        assert counts[NodeKind.OTHER] == 1
        assert counts[NodeKind.ELEMENT] == 12
        assert counts[NodeKind.TEXT] == 8
