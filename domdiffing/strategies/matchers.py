"""Match policies: pair control and test sources within one sibling group."""

from __future__ import annotations

from typing import Iterator

from domdiffing.core.sources import SourceCollection, SourceMap
from domdiffing.core.types import AttributeComparison, Comparison, ComparisonSource, DiffContext

IGNORE_POSTFIX = ":ignore"


def forward_searching_node_matcher(
    context: DiffContext,
    control_sources: SourceCollection,
    test_sources: SourceCollection,
) -> Iterator[Comparison]:
    """
    Pair each unmatched control node with the next unmatched test node of the
    same name, searching forward from the previous pairing. Order is kept, so
    an inserted test node shows up as an addition instead of shifting every
    following pairing.
    """
    start = 0
    for control in control_sources.get_unmatched():
        for test in test_sources.get_unmatched(start):
            if test.node.name == control.node.name:
                start = test_sources.position_of(test) + 1
                yield Comparison(control=control, test=test)
                break


def one_to_one_node_matcher(
    context: DiffContext,
    control_sources: SourceCollection,
    test_sources: SourceCollection,
) -> Iterator[Comparison]:
    """
    Pair whatever is still unmatched by position, within the same gap
    between earlier pairings. A control node never pairs with a test node on
    the other side of an existing pairing, so reordered siblings surface as a
    removal plus an addition.
    """
    control_gaps = _unmatched_gaps(control_sources)
    test_gaps = _unmatched_gaps(test_sources)
    for gap, controls in control_gaps.items():
        for control, test in zip(controls, test_gaps.get(gap, [])):
            yield Comparison(control=control, test=test)


def _unmatched_gaps(sources: SourceCollection) -> dict[int, list[ComparisonSource]]:
    """Unmatched sources keyed by how many matched sources precede them."""
    gaps: dict[int, list[ComparisonSource]] = {}
    matched = 0
    for source in sources:
        if sources.is_unmatched(source):
            gaps.setdefault(matched, []).append(source)
        else:
            matched += 1
    return gaps


def attribute_name_matcher(
    context: DiffContext,
    control_sources: SourceMap,
    test_sources: SourceMap,
) -> Iterator[AttributeComparison]:
    for control in control_sources.get_unmatched():
        test = test_sources.get(control.name)
        if test is not None and test_sources.is_unmatched(test):
            yield AttributeComparison(control=control, test=test)


def postfixed_attribute_matcher(
    context: DiffContext,
    control_sources: SourceMap,
    test_sources: SourceMap,
) -> Iterator[AttributeComparison]:
    """Pair a control `name:ignore` attribute with the test attribute `name`."""
    for control in control_sources.get_unmatched():
        name = control.name.lower()
        if not name.endswith(IGNORE_POSTFIX):
            continue
        test = test_sources.get(name[: -len(IGNORE_POSTFIX)])
        if test is not None and test_sources.is_unmatched(test):
            yield AttributeComparison(control=control, test=test)
