"""
Ignore comparers driven by `diff:` instructions written into the control markup.

    <div diff:ignore>              the element and everything in it are ignored
    <div diff:ignorechildren>      the element is compared, its children are not
    <div diff:ignoreattributes>    the element is compared, its attributes are not
    <a href:ignore="...">          the test element's `href` value is not compared
"""

from __future__ import annotations

from domdiffing.core.types import AttributeComparison, CompareDecision, CompareResult, Comparison
from domdiffing.strategies.matchers import IGNORE_POSTFIX

IGNORE_ATTRIBUTE = "diff:ignore"
IGNORE_CHILDREN_ATTRIBUTE = "diff:ignorechildren"
IGNORE_ATTRIBUTES_ATTRIBUTE = "diff:ignoreattributes"


def _is_enabled(comparison: Comparison, attribute_name: str) -> bool:
    """An instruction is on when present without a value or set to "true" (any case)."""
    control = comparison.control.node
    if not control.is_element:
        return False
    attr = control.get_attr(attribute_name)
    if attr is None:
        return False
    return attr.value == "" or attr.value.lower() == "true"


def ignore_element_comparer(comparison: Comparison, current: CompareResult) -> CompareResult:
    if _is_enabled(comparison, IGNORE_ATTRIBUTE):
        return CompareResult.SAME_AND_BREAK
    return current


def ignore_children_comparer(comparison: Comparison, current: CompareResult) -> CompareResult:
    if current.is_skip or not _is_enabled(comparison, IGNORE_CHILDREN_ATTRIBUTE):
        return current
    return current.with_decision(current.decision | CompareDecision.SKIP_CHILDREN)


def ignore_attributes_comparer(comparison: Comparison, current: CompareResult) -> CompareResult:
    if current.is_skip or not _is_enabled(comparison, IGNORE_ATTRIBUTES_ATTRIBUTE):
        return current
    return current.with_decision(current.decision | CompareDecision.SKIP_ATTRIBUTES)


def ignore_attribute_comparer(comparison: AttributeComparison, current: CompareResult) -> CompareResult:
    if comparison.control.name.lower().endswith(IGNORE_POSTFIX):
        return CompareResult.SAME
    return current
