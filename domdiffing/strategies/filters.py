"""Filter policies: decide which nodes and attributes take part in a diff."""

from __future__ import annotations

from domdiffing.core.policies import AttributeFilter
from domdiffing.core.types import AttributeComparisonSource, ComparisonSource, FilterDecision
from domdiffing.dom.nodes import NodeType

# Attributes in this namespace are instructions to the differ, not markup
DIFF_ATTRIBUTE_PREFIX = "diff:"


def comment_filter(source: ComparisonSource, decision: FilterDecision) -> FilterDecision:
    if source.node.node_type is NodeType.COMMENT:
        return FilterDecision.EXCLUDE
    return decision


def whitespace_text_filter(source: ComparisonSource, decision: FilterDecision) -> FilterDecision:
    """Exclude text nodes made only of whitespace, e.g. indentation between tags."""
    node = source.node
    if node.node_type is NodeType.TEXT and not node.value.strip():
        return FilterDecision.EXCLUDE
    return decision


def diff_attribute_filter(source: AttributeComparisonSource, decision: FilterDecision) -> FilterDecision:
    if source.name.lower().startswith(DIFF_ATTRIBUTE_PREFIX):
        return FilterDecision.EXCLUDE
    return decision


def ignore_attribute_filter(*names: str) -> AttributeFilter:
    """Build a filter that excludes the given attributes (case-insensitive) on both sides."""
    ignored = {n.lower() for n in names}

    def _filter(source: AttributeComparisonSource, decision: FilterDecision) -> FilterDecision:
        if source.name.lower() in ignored:
            return FilterDecision.EXCLUDE
        return decision

    return _filter
