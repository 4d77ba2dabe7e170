"""HtmlDiffer: compares control (expected) markup against test (actual) markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from domdiffing.core.diffs import Diff
from domdiffing.core.policies import (
    AttributeComparer,
    AttributeFilter,
    AttributeMatcher,
    NodeComparer,
    NodeFilter,
    NodeMatcher,
)
from domdiffing.differ.pipeline import DiffingStrategyPipeline
from domdiffing.differ.tree_diff import diff_trees
from domdiffing.dom.capture import RenderedDomExtractor
from domdiffing.dom.nodes import Node
from domdiffing.dom.parser import HtmlParser
from domdiffing.strategies.comparers import WhitespaceOption
from domdiffing.strategies.defaults import add_default_options

if TYPE_CHECKING:
    from playwright.async_api import Page


class HtmlDiffer:
    """
    Parses both sides and walks them through a DiffingStrategyPipeline.

    Usage:
        differ = HtmlDiffer()
        diffs = differ.compare("<p>Hello</p>", "<p>Hi</p>")
        # diffs[0].path == "p[0]>#text[0]"

    Policies added through the `add_*` methods run after the defaults; pass
    `use_defaults=False` (or a ready-made `pipeline`) to start from nothing.
    """

    def __init__(
        self,
        *,
        pipeline: DiffingStrategyPipeline | None = None,
        use_defaults: bool = True,
        ignore_comments: bool = True,
        whitespace: WhitespaceOption | str = WhitespaceOption.NORMALIZE,
        ignore_case: bool = False,
        monotonic_filters: bool = False,
        parser: HtmlParser | None = None,
    ) -> None:
        if pipeline is None:
            pipeline = DiffingStrategyPipeline(monotonic_filters=monotonic_filters)
            if use_defaults:
                add_default_options(
                    pipeline,
                    ignore_comments=ignore_comments,
                    whitespace=whitespace,
                    ignore_case=ignore_case,
                )
        self._pipeline = pipeline
        self._parser = parser or HtmlParser()
        self._extractor = RenderedDomExtractor(self._parser)

    @property
    def pipeline(self) -> DiffingStrategyPipeline:
        return self._pipeline

    # ------------------------------------------------------------------
    # Policy registration
    # ------------------------------------------------------------------

    def add_node_filter(self, strategy: NodeFilter) -> HtmlDiffer:
        self._pipeline.add_node_filter(strategy)
        return self

    def add_attribute_filter(self, strategy: AttributeFilter) -> HtmlDiffer:
        self._pipeline.add_attribute_filter(strategy)
        return self

    def add_node_matcher(self, strategy: NodeMatcher) -> HtmlDiffer:
        self._pipeline.add_node_matcher(strategy)
        return self

    def add_attribute_matcher(self, strategy: AttributeMatcher) -> HtmlDiffer:
        self._pipeline.add_attribute_matcher(strategy)
        return self

    def add_node_comparer(self, strategy: NodeComparer) -> HtmlDiffer:
        self._pipeline.add_node_comparer(strategy)
        return self

    def add_attribute_comparer(self, strategy: AttributeComparer) -> HtmlDiffer:
        self._pipeline.add_attribute_comparer(strategy)
        return self

    # ------------------------------------------------------------------
    # Diffing
    # ------------------------------------------------------------------

    def diff(self, control_markup: str, test_markup: str) -> Iterator[Diff]:
        """
        Lazily yield the diffs between two pieces of markup.

        Parsing happens up front; the walk only advances as diffs are pulled,
        so stopping after the first diff leaves the rest of the trees untouched.
        """
        return self.diff_nodes(self._parser.parse(control_markup), self._parser.parse(test_markup))

    def diff_nodes(self, control: Node, test: Node) -> Iterator[Diff]:
        return diff_trees(control, test, self._pipeline)

    def compare(self, control_markup: str, test_markup: str) -> list[Diff]:
        """Return every diff at once."""
        return list(self.diff(control_markup, test_markup))

    async def diff_pages(
        self,
        control_page: Page,
        test_page: Page,
        *,
        selector: str | None = None,
    ) -> Iterator[Diff]:
        """Capture the rendered DOM of two live pages and diff them."""
        control = await self._extractor.extract(control_page, selector=selector)
        test = await self._extractor.extract(test_page, selector=selector)
        return self.diff_nodes(control, test)
