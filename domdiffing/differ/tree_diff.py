"""Tree walk: filter, match and compare each sibling group, then recurse."""

from __future__ import annotations

import logging
from itertools import chain
from typing import Iterable, Iterator

from domdiffing.core.diffs import (
    AttrDiff,
    Diff,
    MissingAttrDiff,
    MissingNodeDiff,
    NodeDiff,
    UnexpectedAttrDiff,
    UnexpectedNodeDiff,
)
from domdiffing.core.sources import SourceCollection, SourceMap
from domdiffing.core.types import (
    AttributeComparison,
    Comparison,
    ComparisonSource,
    DiffContext,
    FilterDecision,
    SourceType,
)
from domdiffing.differ.pipeline import DiffingStrategyPipeline
from domdiffing.dom.nodes import Node, NodeType

logger = logging.getLogger(__name__)


def diff_trees(
    control_root: Node,
    test_root: Node,
    pipeline: DiffingStrategyPipeline,
) -> Iterator[Diff]:
    """
    Lazily diff two node trees.

    A document root contributes its children as the top-level sibling group;
    any other root is compared as a group of one. Nothing runs until the
    first diff is pulled, and the iterator is single-pass: iterating again
    needs a fresh call (which walks the trees again).

    Per pairing, the compare decision steers the walk:
      - SKIP: nothing is reported for the pairing or anything beneath it
      - DIFFERENT: the diff is reported
      - BREAK: attributes and children are not compared
      - SKIP_ATTRIBUTES / SKIP_CHILDREN: that half is not compared

    The BREAK bit wins over descent for both SAME and DIFFERENT: a
    SAME_AND_BREAK or DIFFERENT_AND_BREAK pairing never has its attributes
    or children compared.
    """
    context = DiffContext(control_root=control_root, test_root=test_root)
    yield from _diff_sibling_group(
        context,
        _root_sources(control_root, SourceType.CONTROL),
        _root_sources(test_root, SourceType.TEST),
        pipeline,
    )


def unmatched_node_comparisons(
    control_sources: SourceCollection,
    test_sources: SourceCollection,
) -> Iterator[Comparison]:
    """One-sided comparisons for every source no matcher claimed: removals first, then additions."""
    for source in control_sources.get_unmatched():
        control_sources.mark_as_matched(source)
        yield Comparison(control=source)
    for source in test_sources.get_unmatched():
        test_sources.mark_as_matched(source)
        yield Comparison(test=source)


def unmatched_attribute_comparisons(
    control_sources: SourceMap,
    test_sources: SourceMap,
) -> Iterator[AttributeComparison]:
    for source in control_sources.get_unmatched():
        control_sources.mark_as_matched(source)
        yield AttributeComparison(control=source)
    for source in test_sources.get_unmatched():
        test_sources.mark_as_matched(source)
        yield AttributeComparison(test=source)


def _root_sources(root: Node, source_type: SourceType) -> list[ComparisonSource]:
    if root.node_type is NodeType.DOCUMENT:
        return [ComparisonSource.create(child, i, source_type) for i, child in enumerate(root.children)]
    return [ComparisonSource.create(root, 0, source_type)]


def _diff_sibling_group(
    context: DiffContext,
    control_sources: Iterable[ComparisonSource],
    test_sources: Iterable[ComparisonSource],
    pipeline: DiffingStrategyPipeline,
) -> Iterator[Diff]:
    controls = SourceCollection(
        SourceType.CONTROL,
        (s for s in control_sources if pipeline.filter_node(s) is FilterDecision.KEEP),
    )
    tests = SourceCollection(
        SourceType.TEST,
        (s for s in test_sources if pipeline.filter_node(s) is FilterDecision.KEEP),
    )

    for comparison in pipeline.match_nodes(context, controls, tests):
        yield from _diff_comparison(context, comparison, pipeline)

    if controls.unmatched_count or tests.unmatched_count:
        logger.debug(
            "%d control and %d test node(s) left unmatched under %r",
            controls.unmatched_count,
            tests.unmatched_count,
            _group_path(controls, tests),
        )
    for comparison in unmatched_node_comparisons(controls, tests):
        yield from _diff_comparison(context, comparison, pipeline)


def _diff_comparison(
    context: DiffContext,
    comparison: Comparison,
    pipeline: DiffingStrategyPipeline,
) -> Iterator[Diff]:
    if comparison.is_removal:
        yield MissingNodeDiff(comparison)
        return
    if comparison.is_addition:
        yield UnexpectedNodeDiff(comparison)
        return

    result = pipeline.compare_nodes(comparison)
    if result.is_skip:
        return
    if result.is_different:
        yield result.diff or NodeDiff(comparison)
    if result.should_break:
        return

    if not result.skips_attributes:
        yield from _diff_attributes(context, comparison, pipeline)
    if not result.skips_children:
        yield from _diff_sibling_group(
            context,
            comparison.control.get_child_sources(),
            comparison.test.get_child_sources(),
            pipeline,
        )


def _diff_attributes(
    context: DiffContext,
    comparison: Comparison,
    pipeline: DiffingStrategyPipeline,
) -> Iterator[Diff]:
    controls = SourceMap(
        SourceType.CONTROL,
        (s for s in comparison.control.get_attribute_sources() if pipeline.filter_attribute(s) is FilterDecision.KEEP),
    )
    tests = SourceMap(
        SourceType.TEST,
        (s for s in comparison.test.get_attribute_sources() if pipeline.filter_attribute(s) is FilterDecision.KEEP),
    )
    if not controls and not tests:
        return

    attr_comparisons = chain(
        pipeline.match_attributes(context, controls, tests),
        unmatched_attribute_comparisons(controls, tests),
    )
    for attr_comparison in attr_comparisons:
        if attr_comparison.is_removal:
            yield MissingAttrDiff(attr_comparison)
            continue
        if attr_comparison.is_addition:
            yield UnexpectedAttrDiff(attr_comparison)
            continue

        result = pipeline.compare_attributes(attr_comparison)
        if result.is_different and not result.is_skip:
            yield result.diff or AttrDiff(attr_comparison)


def _group_path(controls: SourceCollection, tests: SourceCollection) -> str:
    for source in chain(controls, tests):
        parent, _, _ = source.path.rpartition(">")
        return parent or "<root>"
    return "<root>"
