"""Call signatures of the six policy kinds a pipeline folds over."""

from __future__ import annotations

from typing import Callable, Iterable

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

# (source, running decision) -> new decision
NodeFilter = Callable[[ComparisonSource, FilterDecision], FilterDecision]
AttributeFilter = Callable[[AttributeComparisonSource, FilterDecision], FilterDecision]

# (context, control sources, test sources) -> pairings; may only use unmatched sources
NodeMatcher = Callable[[DiffContext, SourceCollection, SourceCollection], Iterable[Comparison]]
AttributeMatcher = Callable[[DiffContext, SourceMap, SourceMap], Iterable[AttributeComparison]]

# (pairing, running result) -> new result
NodeComparer = Callable[[Comparison, CompareResult], CompareResult]
AttributeComparer = Callable[[AttributeComparison, CompareResult], CompareResult]
