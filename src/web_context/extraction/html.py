"""HTML-to-markdown conversion using BeautifulSoup and markdownify.

The document is parsed leniently with the lxml tree builder, pruned of
non-prose subtrees (comments and tables), and serialized to markdown.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PageElement, PreformattedString, Tag
from markdownify import MarkdownConverter

from web_context.errors import ConversionFailure

logger = logging.getLogger(__name__)

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


class NodeKind(str, Enum):
    """Kinds of node found in a parsed HTML document tree."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DECLARATION = "declaration"


def node_kind(node: PageElement) -> NodeKind:
    """Classify a BeautifulSoup node. Order matters: Comment subclasses NavigableString."""
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):  # doctype, CDATA, processing instructions
        return NodeKind.DECLARATION
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    raise TypeError(f"Unknown document node type: {type(node).__name__}")


@dataclass(frozen=True)
class PruneRule:
    """Removal rule: every node of ``kind`` (and, for elements, named ``tag``)."""

    kind: NodeKind
    tag: str | None = None

    def matches(self, node: PageElement) -> bool:
        if node_kind(node) is not self.kind:
            return False
        if self.tag is None:
            return True
        return isinstance(node, Tag) and node.name == self.tag


DEFAULT_PRUNE_RULES: tuple[PruneRule, ...] = (
    PruneRule(NodeKind.COMMENT),
    PruneRule(NodeKind.DECLARATION),
    PruneRule(NodeKind.ELEMENT, tag="table"),
    # Non-prose elements whose text would otherwise leak into the output
    PruneRule(NodeKind.ELEMENT, tag="head"),
    PruneRule(NodeKind.ELEMENT, tag="script"),
    PruneRule(NodeKind.ELEMENT, tag="style"),
    PruneRule(NodeKind.ELEMENT, tag="noscript"),
    PruneRule(NodeKind.ELEMENT, tag="template"),
)


def prune_tree(soup: BeautifulSoup, rules: tuple[PruneRule, ...] = DEFAULT_PRUNE_RULES) -> int:
    """Remove every subtree whose root matches one of ``rules``.

    Returns the number of subtrees removed. Nodes nested inside an already
    removed subtree are not counted separately.
    """
    removed = 0
    # Snapshot first: extracting while iterating descendants skips siblings
    for node in list(soup.descendants):
        if _is_detached(node, soup):
            continue  # removed along with an ancestor
        if any(rule.matches(node) for rule in rules):
            node.extract()
            removed += 1
    return removed


def _is_detached(node: PageElement, root: BeautifulSoup) -> bool:
    parent = node.parent
    while parent is not None:
        if parent is root:
            return False
        parent = parent.parent
    return True


def html_to_markdown(html: str) -> str:
    """Convert an HTML document to markdown with comments and tables removed.

    Output is deterministic for identical input. Raises ConversionFailure if
    any parse, prune, or serialize step fails; raw HTML is never passed
    through.
    """
    try:
        soup = BeautifulSoup(html, "lxml")
        removed = prune_tree(soup)
        markdown = MarkdownConverter(heading_style="ATX", bullets="-").convert_soup(soup)
    except Exception as exc:
        logger.warning("HTML to markdown conversion failed: %s", exc)
        raise ConversionFailure() from exc

    logger.debug("Pruned %d subtrees before markdown conversion", removed)
    markdown = _EXCESS_BLANK_LINES.sub("\n\n", markdown).strip()
    return f"{markdown}\n" if markdown else ""
