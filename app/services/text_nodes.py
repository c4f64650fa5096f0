"""
Text-node location for BeautifulSoup document trees.

Nodes are sorted into a closed set of kinds so traversal can dispatch
on an explicit tag instead of on the BeautifulSoup class hierarchy.
Only TEXT nodes are ever handed out for rewriting.
"""

from collections.abc import Iterable, Iterator
from enum import Enum

from bs4 import Comment, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from app.configs.substitution import DEFAULT_SKIPPED_TAGS


class NodeKind(str, Enum):
    """Kinds of node found in a parsed document."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"  # doctype, CDATA, processing instructions, declarations


def classify_node(node: PageElement) -> NodeKind:
    """Map a BeautifulSoup node onto a NodeKind."""
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    # Doctype, CData, Declaration and ProcessingInstruction all derive from
    # PreformattedString, which is itself a NavigableString.
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def iter_text_nodes(
    root: Tag, skipped_tags: Iterable[str] = DEFAULT_SKIPPED_TAGS
) -> Iterator[NavigableString]:
    """
    Yield every rewritable text node under ``root`` in document order.

    Text inside any element named in ``skipped_tags`` is not yielded. Each
    element's children are snapshotted before they are visited, so the
    caller may ``replace_with`` the node it was just given.

    Args:
        root: Document or element to traverse
        skipped_tags: Element names whose descendant text is left alone

    Yields:
        Live text nodes of the tree (not copies)
    """
    skipped = frozenset(tag.lower() for tag in skipped_tags)
    if root.name and root.name.lower() in skipped:
        return

    stack: list[Iterator[PageElement]] = [iter(list(root.contents))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        kind = classify_node(child)
        if kind is NodeKind.ELEMENT:
            if child.name and child.name.lower() in skipped:
                continue
            stack.append(iter(list(child.contents)))
        elif kind is NodeKind.TEXT:
            yield child
        elif kind in (NodeKind.COMMENT, NodeKind.OTHER):
            continue


def count_nodes(root: Tag) -> dict[NodeKind, int]:
    """Count the nodes of each kind under ``root``."""
    counts = {kind: 0 for kind in NodeKind}
    for node in root.descendants:
        counts[classify_node(node)] += 1
    return counts
