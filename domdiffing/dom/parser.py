"""HTML parser adapter: turns markup into a Node tree with BeautifulSoup."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from domdiffing.dom.nodes import Attr, Node

logger = logging.getLogger(__name__)

_DEFAULT_FEATURES = "html.parser"


class HtmlParser:
    """
    Parses HTML markup into a read-only Node tree.

    Attribute values are kept exactly as written (no splitting of `class`
    into tokens), comments are kept as comment nodes, and doctypes,
    CDATA and processing instructions are dropped.
    """

    def __init__(self, *, features: str = _DEFAULT_FEATURES) -> None:
        self._features = features

    def parse(self, markup: str) -> Node:
        """Parse markup and return a document node holding the top-level nodes."""
        logger.debug("Parsing %d characters of markup with %s", len(markup), self._features)
        soup = BeautifulSoup(markup, self._features, multi_valued_attributes=None)
        children = [n for n in (self._convert(c) for c in soup.contents) if n is not None]
        return Node.document(children=children)

    def parse_file(self, file_path: str | Path) -> Node:
        path = Path(file_path)
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        logger.debug("Read %s (%d characters)", path, len(content))
        return self.parse(content)

    def _convert(self, element: PageElement) -> Node | None:
        # Comment subclasses PreformattedString, so it is checked first
        if isinstance(element, Comment):
            return Node.comment(str(element))
        if isinstance(element, PreformattedString):
            return None
        if isinstance(element, NavigableString):
            return Node.text(str(element))
        if isinstance(element, Tag):
            node = Node.element(element.name)
            node.attributes = [Attr(name, _attr_value(value)) for name, value in element.attrs.items()]
            for child in element.contents:
                converted = self._convert(child)
                if converted is not None:
                    node.children.append(converted)
            return node
        return None


def _attr_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)
