"""Shared value types for the diffing pipeline: sources, comparisons, decisions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag
from typing import TYPE_CHECKING, ClassVar

from domdiffing.dom.nodes import Attr, Node, NodeType

if TYPE_CHECKING:
    from domdiffing.core.diffs import Diff


class SourceType(str, Enum):
    CONTROL = "control"  # expected tree
    TEST = "test"  # actual tree


class FilterDecision(str, Enum):
    KEEP = "keep"
    EXCLUDE = "exclude"

    @property
    def is_exclude(self) -> bool:
        return self is FilterDecision.EXCLUDE


class CompareDecision(Flag):
    """
    Outcome of comparing one pairing. Flags compose, e.g. SAME | SKIP_CHILDREN.

    BREAK tells the tree walk not to descend into the pairing's attributes
    or children. It does not stop the remaining comparers from running.
    """

    UNKNOWN = 0
    SAME = 1
    DIFFERENT = 2
    SKIP = 4
    SKIP_CHILDREN = 8
    SKIP_ATTRIBUTES = 16
    BREAK = 32
    SAME_AND_BREAK = SAME | BREAK
    DIFFERENT_AND_BREAK = DIFFERENT | BREAK


@dataclass(frozen=True)
class CompareResult:
    """A decision plus the diff a comparer attached to it, if any."""

    decision: CompareDecision = CompareDecision.UNKNOWN
    diff: Diff | None = None

    UNKNOWN: ClassVar[CompareResult]
    SAME: ClassVar[CompareResult]
    SAME_AND_BREAK: ClassVar[CompareResult]
    DIFFERENT: ClassVar[CompareResult]
    DIFFERENT_AND_BREAK: ClassVar[CompareResult]
    SKIP: ClassVar[CompareResult]
    SKIP_CHILDREN: ClassVar[CompareResult]
    SKIP_ATTRIBUTES: ClassVar[CompareResult]

    @classmethod
    def different(cls, diff: Diff | None = None, *, and_break: bool = False) -> CompareResult:
        decision = CompareDecision.DIFFERENT_AND_BREAK if and_break else CompareDecision.DIFFERENT
        return cls(decision, diff)

    def has(self, flag: CompareDecision) -> bool:
        return bool(flag) and (self.decision & flag) == flag

    @property
    def is_same(self) -> bool:
        return self.has(CompareDecision.SAME)

    @property
    def is_different(self) -> bool:
        return self.has(CompareDecision.DIFFERENT)

    @property
    def is_skip(self) -> bool:
        return self.has(CompareDecision.SKIP)

    @property
    def is_same_or_skip(self) -> bool:
        return self.is_same or self.is_skip

    @property
    def should_break(self) -> bool:
        return self.has(CompareDecision.BREAK)

    @property
    def skips_children(self) -> bool:
        return self.has(CompareDecision.SKIP_CHILDREN)

    @property
    def skips_attributes(self) -> bool:
        return self.has(CompareDecision.SKIP_ATTRIBUTES)

    def with_diff(self, diff: Diff | None) -> CompareResult:
        return replace(self, diff=diff)

    def with_decision(self, decision: CompareDecision) -> CompareResult:
        return replace(self, decision=decision)


CompareResult.UNKNOWN = CompareResult()
CompareResult.SAME = CompareResult(CompareDecision.SAME)
CompareResult.SAME_AND_BREAK = CompareResult(CompareDecision.SAME_AND_BREAK)
CompareResult.DIFFERENT = CompareResult(CompareDecision.DIFFERENT)
CompareResult.DIFFERENT_AND_BREAK = CompareResult(CompareDecision.DIFFERENT_AND_BREAK)
CompareResult.SKIP = CompareResult(CompareDecision.SKIP)
CompareResult.SKIP_CHILDREN = CompareResult(CompareDecision.SKIP_CHILDREN)
CompareResult.SKIP_ATTRIBUTES = CompareResult(CompareDecision.SKIP_ATTRIBUTES)


def node_path(parent_path: str, node: Node, index: int) -> str:
    segment = f"{node.name.lower()}[{index}]"
    return f"{parent_path}>{segment}" if parent_path else segment


@dataclass(frozen=True, eq=False)
class ComparisonSource:
    """
    One node in one of the two trees, with its position.

    Equal when pointing at the same node object through the same path.
    Build with `ComparisonSource.create()` so the path is derived once.
    """

    node: Node = field(repr=False)
    index: int  # position among the parent's child nodes
    path: str
    source_type: SourceType

    @classmethod
    def create(
        cls,
        node: Node,
        index: int,
        source_type: SourceType,
        parent_path: str = "",
    ) -> ComparisonSource:
        return cls(
            node=node,
            index=index,
            path=node_path(parent_path, node, index),
            source_type=source_type,
        )

    def get_child_sources(self) -> list[ComparisonSource]:
        return [
            ComparisonSource.create(child, i, self.source_type, self.path)
            for i, child in enumerate(self.node.children)
        ]

    def get_attribute_sources(self) -> list[AttributeComparisonSource]:
        if not self.node.is_element:
            return []
        return [AttributeComparisonSource(attr.name, self) for attr in self.node.attributes]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparisonSource):
            return NotImplemented
        return self.node is other.node and self.path == other.path

    def __hash__(self) -> int:
        return hash((id(self.node), self.path))


class AttributeComparisonSource:
    """One attribute on an element source. Construction fails if the attribute is absent."""

    __slots__ = ("attribute", "element_source", "path", "source_type")

    def __init__(self, attribute_name: str, element_source: ComparisonSource) -> None:
        if not attribute_name:
            raise ValueError("attribute_name must be a non-empty string")
        node = element_source.node
        attribute = node.get_attr(attribute_name) if node.node_type is NodeType.ELEMENT else None
        if attribute is None:
            raise ValueError(
                f"{element_source.path!r} is not an element carrying the attribute {attribute_name!r}"
            )

        self.attribute: Attr = attribute
        self.element_source = element_source
        self.source_type = element_source.source_type
        self.path = f"{element_source.path}[{attribute.name.lower()}]"

    @property
    def name(self) -> str:
        return self.attribute.name

    @property
    def value(self) -> str:
        return self.attribute.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeComparisonSource):
            return NotImplemented
        return (
            self.attribute is other.attribute
            and self.path == other.path
            and self.element_source == other.element_source
        )

    def __hash__(self) -> int:
        return hash((id(self.attribute), self.element_source))

    def __repr__(self) -> str:
        return f"AttributeComparisonSource(path={self.path!r}, source_type={self.source_type.value!r})"


@dataclass(frozen=True)
class Comparison:
    """A control/test node pairing. One-sided pairings denote a removal or an addition."""

    control: ComparisonSource | None = None
    test: ComparisonSource | None = None

    def __post_init__(self) -> None:
        if self.control is None and self.test is None:
            raise ValueError("A Comparison needs a control source, a test source, or both")

    @property
    def is_paired(self) -> bool:
        return self.control is not None and self.test is not None

    @property
    def is_removal(self) -> bool:
        return self.test is None

    @property
    def is_addition(self) -> bool:
        return self.control is None


@dataclass(frozen=True)
class AttributeComparison:
    control: AttributeComparisonSource | None = None
    test: AttributeComparisonSource | None = None

    def __post_init__(self) -> None:
        if self.control is None and self.test is None:
            raise ValueError("An AttributeComparison needs a control source, a test source, or both")

    @property
    def is_paired(self) -> bool:
        return self.control is not None and self.test is not None

    @property
    def is_removal(self) -> bool:
        return self.test is None

    @property
    def is_addition(self) -> bool:
        return self.control is None


@dataclass
class DiffContext:
    """Handed to every matcher: the two roots being compared."""

    control_root: Node
    test_root: Node
