"""Compare policies for nodes and attributes."""

from __future__ import annotations

import re
from enum import Enum

from domdiffing.core.diffs import AttrDiff, DiffKind, NodeDiff
from domdiffing.core.policies import NodeComparer
from domdiffing.core.types import AttributeComparison, CompareResult, Comparison
from domdiffing.dom.nodes import NodeType

_WHITESPACE_RE = re.compile(r"\s+")

# HTML boolean attributes: presence is the value
BOOLEAN_ATTRIBUTES = frozenset({
    "allowfullscreen", "async", "autofocus", "autoplay", "checked", "controls",
    "default", "defer", "disabled", "formnovalidate", "hidden", "inert",
    "ismap", "itemscope", "loop", "multiple", "muted", "nomodule",
    "novalidate", "open", "playsinline", "readonly", "required", "reversed",
    "selected",
})


class WhitespaceOption(str, Enum):
    PRESERVE = "preserve"  # compare text exactly
    NORMALIZE = "normalize"  # collapse runs to one space, trim ends
    REMOVE = "remove"  # drop all whitespace


def apply_whitespace(text: str, option: WhitespaceOption) -> str:
    if option is WhitespaceOption.NORMALIZE:
        return _WHITESPACE_RE.sub(" ", text).strip()
    if option is WhitespaceOption.REMOVE:
        return _WHITESPACE_RE.sub("", text)
    return text


# ---------------------------------------------------------------------------
# Node comparers
# ---------------------------------------------------------------------------

def node_type_comparer(comparison: Comparison, current: CompareResult) -> CompareResult:
    """
    Mismatched node types or element names are different, and their subtrees
    are not worth comparing. Matching elements are the same; matching
    text/comment nodes are left to the content comparers.
    """
    if current.is_same_or_skip:
        return current
    control, test = comparison.control.node, comparison.test.node
    if control.node_type is not test.node_type:
        return CompareResult.different(NodeDiff(comparison, DiffKind.NODE_TYPE), and_break=True)
    if control.node_type is NodeType.ELEMENT:
        if control.name == test.name:
            return CompareResult.SAME
        return CompareResult.different(NodeDiff(comparison, DiffKind.ELEMENT_NAME), and_break=True)
    return current


def text_comparer(
    whitespace: WhitespaceOption | str = WhitespaceOption.NORMALIZE,
    ignore_case: bool = False,
) -> NodeComparer:
    """Build a comparer for text nodes with the given whitespace and case handling."""
    option = WhitespaceOption(whitespace)

    def _compare(comparison: Comparison, current: CompareResult) -> CompareResult:
        if current.is_same_or_skip:
            return current
        control, test = comparison.control.node, comparison.test.node
        if control.node_type is not NodeType.TEXT or test.node_type is not NodeType.TEXT:
            return current
        control_text = apply_whitespace(control.value, option)
        test_text = apply_whitespace(test.value, option)
        if ignore_case:
            control_text, test_text = control_text.casefold(), test_text.casefold()
        if control_text == test_text:
            return CompareResult.SAME
        return CompareResult.different(NodeDiff(comparison, DiffKind.TEXT_CONTENT))

    return _compare


def comment_comparer(comparison: Comparison, current: CompareResult) -> CompareResult:
    if current.is_same_or_skip:
        return current
    control, test = comparison.control.node, comparison.test.node
    if control.node_type is not NodeType.COMMENT or test.node_type is not NodeType.COMMENT:
        return current
    if control.value.strip() == test.value.strip():
        return CompareResult.SAME
    return CompareResult.different(NodeDiff(comparison, DiffKind.COMMENT_CONTENT))


# ---------------------------------------------------------------------------
# Attribute comparers
# ---------------------------------------------------------------------------

def attribute_comparer(comparison: AttributeComparison, current: CompareResult) -> CompareResult:
    """Names are compared case-insensitively, values exactly."""
    if current.is_same_or_skip:
        return current
    control, test = comparison.control, comparison.test
    if control.name.lower() != test.name.lower():
        return CompareResult.different(AttrDiff(comparison, DiffKind.ATTRIBUTE_NAME))
    if control.value != test.value:
        return CompareResult.different(AttrDiff(comparison, DiffKind.ATTRIBUTE_VALUE))
    return CompareResult.SAME


def class_attribute_comparer(comparison: AttributeComparison, current: CompareResult) -> CompareResult:
    """`class` values are the same when they hold the same set of class names."""
    if current.is_same_or_skip or not _both_named(comparison, "class"):
        return current
    if set(comparison.control.value.split()) == set(comparison.test.value.split()):
        return CompareResult.SAME
    return current


def style_attribute_comparer(comparison: AttributeComparison, current: CompareResult) -> CompareResult:
    """`style` values are the same when their declarations match, ignoring spacing."""
    if current.is_same_or_skip or not _both_named(comparison, "style"):
        return current
    if _style_declarations(comparison.control.value) == _style_declarations(comparison.test.value):
        return CompareResult.SAME
    return current


def boolean_attribute_comparer(comparison: AttributeComparison, current: CompareResult) -> CompareResult:
    """`checked` and `checked="checked"` are the same: presence is what counts."""
    if current.is_same_or_skip:
        return current
    name = comparison.control.name.lower()
    if name in BOOLEAN_ATTRIBUTES and comparison.test.name.lower() == name:
        return CompareResult.SAME
    return current


def _both_named(comparison: AttributeComparison, name: str) -> bool:
    return comparison.control.name.lower() == name and comparison.test.name.lower() == name


def _style_declarations(style: str) -> list[tuple[str, str]]:
    declarations = []
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        declarations.append((prop.strip().lower(), _WHITESPACE_RE.sub(" ", value).strip()))
    return declarations
