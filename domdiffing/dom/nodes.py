"""Read-only node tree handed to the differ by a parser or page extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeType(str, Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


# Node names used for non-element nodes, mirroring DOM nodeName
_NODE_NAMES = {
    NodeType.DOCUMENT: "#document",
    NodeType.TEXT: "#text",
    NodeType.COMMENT: "#comment",
}


@dataclass(eq=False)
class Attr:
    """A single attribute on an element. Compared by identity."""

    name: str
    value: str = ""


@dataclass(eq=False)
class Node:
    """
    A single node in a parsed HTML tree.

    Nodes compare by identity: two structurally identical nodes are still two
    distinct positions in a tree.
    """

    node_type: NodeType
    name: str  # lower-cased tag name, or "#text" / "#comment" / "#document"
    value: str = ""  # character data for text and comment nodes
    attributes: list[Attr] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    @classmethod
    def element(
        cls,
        name: str,
        attrs: dict[str, str] | None = None,
        children: list[Node] | None = None,
    ) -> Node:
        return cls(
            node_type=NodeType.ELEMENT,
            name=name.lower(),
            attributes=[Attr(k, v) for k, v in (attrs or {}).items()],
            children=children or [],
        )

    @classmethod
    def text(cls, value: str) -> Node:
        return cls(node_type=NodeType.TEXT, name=_NODE_NAMES[NodeType.TEXT], value=value)

    @classmethod
    def comment(cls, value: str) -> Node:
        return cls(node_type=NodeType.COMMENT, name=_NODE_NAMES[NodeType.COMMENT], value=value)

    @classmethod
    def document(cls, children: list[Node] | None = None) -> Node:
        return cls(
            node_type=NodeType.DOCUMENT,
            name=_NODE_NAMES[NodeType.DOCUMENT],
            children=children or [],
        )

    @property
    def is_element(self) -> bool:
        return self.node_type is NodeType.ELEMENT

    @property
    def text_content(self) -> str:
        """Concatenated character data of this node and its descendants."""
        if self.node_type is NodeType.TEXT:
            return self.value
        return "".join(c.text_content for c in self.children if c.node_type is not NodeType.COMMENT)

    def get_attr(self, name: str) -> Attr | None:
        """Resolve an attribute by case-insensitive name."""
        wanted = name.lower()
        for attr in self.attributes:
            if attr.name.lower() == wanted:
                return attr
        return None

    def has_attr(self, name: str) -> bool:
        return self.get_attr(name) is not None
