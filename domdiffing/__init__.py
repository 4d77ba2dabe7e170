from domdiffing.core.diffs import (
    AttrDiff,
    Diff,
    DiffKind,
    DiffResult,
    DiffTarget,
    MissingAttrDiff,
    MissingNodeDiff,
    NodeDiff,
    UnexpectedAttrDiff,
    UnexpectedNodeDiff,
)
from domdiffing.core.sources import SourceCollection, SourceMap
from domdiffing.core.types import (
    AttributeComparison,
    AttributeComparisonSource,
    CompareDecision,
    CompareResult,
    Comparison,
    ComparisonSource,
    DiffContext,
    FilterDecision,
    SourceType,
)
from domdiffing.differ import DiffingStrategyPipeline, HtmlDiffer, diff_trees
from domdiffing.dom import Attr, HtmlParser, Node, NodeType, RenderedDomExtractor
from domdiffing.strategies import WhitespaceOption, add_default_options

__all__ = [
    "HtmlDiffer",
    "DiffingStrategyPipeline",
    "diff_trees",
    "add_default_options",
    "WhitespaceOption",
    # Source model
    "AttributeComparison",
    "AttributeComparisonSource",
    "CompareDecision",
    "CompareResult",
    "Comparison",
    "ComparisonSource",
    "DiffContext",
    "FilterDecision",
    "SourceCollection",
    "SourceMap",
    "SourceType",
    # Diffs
    "AttrDiff",
    "Diff",
    "DiffKind",
    "DiffResult",
    "DiffTarget",
    "MissingAttrDiff",
    "MissingNodeDiff",
    "NodeDiff",
    "UnexpectedAttrDiff",
    "UnexpectedNodeDiff",
    # DOM
    "Attr",
    "HtmlParser",
    "Node",
    "NodeType",
    "RenderedDomExtractor",
]
