"""DiffingStrategyPipeline: the ordered filter, match and compare policy chains."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from domdiffing.core.policies import (
    AttributeComparer,
    AttributeFilter,
    AttributeMatcher,
    NodeComparer,
    NodeFilter,
    NodeMatcher,
)
from domdiffing.core.sources import SourceCollection, SourceMap
from domdiffing.core.types import (
    AttributeComparison,
    AttributeComparisonSource,
    CompareResult,
    Comparison,
    ComparisonSource,
    DiffContext,
    FilterDecision,
)

_S = TypeVar("_S")
_C = TypeVar("_C", Comparison, AttributeComparison)
_Sources = TypeVar("_Sources", SourceCollection, SourceMap)

# Starting points of the compare folds. An unhandled node pairing is different
# and not worth descending into; an unhandled attribute pairing is just different.
NODE_COMPARE_SEED = CompareResult.DIFFERENT_AND_BREAK
ATTRIBUTE_COMPARE_SEED = CompareResult.DIFFERENT


class DiffingStrategyPipeline:
    """
    Holds six ordered policy lists (node/attribute x filter/match/compare).

    Registration order is the only precedence mechanism: filters and comparers
    are folded first-to-last, and earlier matchers claim sources before later
    ones see them. The `add_*` methods return the pipeline for chaining.

    With `monotonic_filters=True`, a filter fold that reaches EXCLUDE stops
    there. By default every filter runs and may overturn an earlier EXCLUDE.
    """

    def __init__(self, *, monotonic_filters: bool = False) -> None:
        self.monotonic_filters = monotonic_filters
        self._node_filters: list[NodeFilter] = []
        self._attr_filters: list[AttributeFilter] = []
        self._node_matchers: list[NodeMatcher] = []
        self._attr_matchers: list[AttributeMatcher] = []
        self._node_comparers: list[NodeComparer] = []
        self._attr_comparers: list[AttributeComparer] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_node_filter(self, strategy: NodeFilter) -> DiffingStrategyPipeline:
        self._node_filters.append(strategy)
        return self

    def add_attribute_filter(self, strategy: AttributeFilter) -> DiffingStrategyPipeline:
        self._attr_filters.append(strategy)
        return self

    def add_node_matcher(self, strategy: NodeMatcher) -> DiffingStrategyPipeline:
        self._node_matchers.append(strategy)
        return self

    def add_attribute_matcher(self, strategy: AttributeMatcher) -> DiffingStrategyPipeline:
        self._attr_matchers.append(strategy)
        return self

    def add_node_comparer(self, strategy: NodeComparer) -> DiffingStrategyPipeline:
        self._node_comparers.append(strategy)
        return self

    def add_attribute_comparer(self, strategy: AttributeComparer) -> DiffingStrategyPipeline:
        self._attr_comparers.append(strategy)
        return self

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def filter_node(self, source: ComparisonSource) -> FilterDecision:
        return self._filter(source, self._node_filters)

    def filter_attribute(self, source: AttributeComparisonSource) -> FilterDecision:
        return self._filter(source, self._attr_filters)

    def match_nodes(
        self,
        context: DiffContext,
        control_sources: SourceCollection,
        test_sources: SourceCollection,
    ) -> Iterator[Comparison]:
        """
        Lazily chain all node matchers in registration order.

        Each comparison's sources are marked as matched before the next one is
        requested, so later matchers never see them. Unmatched leftovers are
        not produced here.
        """
        return self._match(context, control_sources, test_sources, self._node_matchers)

    def match_attributes(
        self,
        context: DiffContext,
        control_sources: SourceMap,
        test_sources: SourceMap,
    ) -> Iterator[AttributeComparison]:
        return self._match(context, control_sources, test_sources, self._attr_matchers)

    def compare_nodes(self, comparison: Comparison) -> CompareResult:
        return self._compare(comparison, self._node_comparers, NODE_COMPARE_SEED)

    def compare_attributes(self, comparison: AttributeComparison) -> CompareResult:
        return self._compare(comparison, self._attr_comparers, ATTRIBUTE_COMPARE_SEED)

    # ------------------------------------------------------------------
    # Folds
    # ------------------------------------------------------------------

    def _filter(self, source: _S, strategies: list[Callable[[_S, FilterDecision], FilterDecision]]) -> FilterDecision:
        decision = FilterDecision.KEEP
        for strategy in strategies:
            decision = strategy(source, decision)
            if self.monotonic_filters and decision is FilterDecision.EXCLUDE:
                break
        return decision

    @staticmethod
    def _match(
        context: DiffContext,
        control_sources: _Sources,
        test_sources: _Sources,
        strategies: list[Callable[[DiffContext, _Sources, _Sources], Iterable[_C]]],
    ) -> Iterator[_C]:
        for strategy in strategies:
            for comparison in strategy(context, control_sources, test_sources):
                control_sources.mark_as_matched(comparison.control)
                test_sources.mark_as_matched(comparison.test)
                yield comparison

    @staticmethod
    def _compare(
        comparison: _C,
        strategies: list[Callable[[_C, CompareResult], CompareResult]],
        seed: CompareResult,
    ) -> CompareResult:
        result = seed
        for strategy in strategies:
            result = strategy(comparison, result)
        return result

