"""End-to-end tests for HtmlDiffer with the default policies, plus page capture (uses AsyncMock page)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from domdiffing.core.diffs import (
    AttrDiff,
    DiffKind,
    MissingAttrDiff,
    MissingNodeDiff,
    NodeDiff,
    UnexpectedAttrDiff,
    UnexpectedNodeDiff,
)
from domdiffing.core.types import CompareResult, FilterDecision
from domdiffing.differ.differ import HtmlDiffer
from domdiffing.differ.pipeline import DiffingStrategyPipeline
from domdiffing.dom.capture import RenderedDomExtractor
from domdiffing.dom.nodes import NodeType
from domdiffing.dom.parser import HtmlParser
from domdiffing.strategies.comparers import WhitespaceOption


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_page(markup: str = "<p>Hi</p>", inner: str = "<li>a</li>", url: str = "https://example.com") -> AsyncMock:
    page = AsyncMock()
    page.url = url
    page.content = AsyncMock(return_value=markup)
    page.inner_html = AsyncMock(return_value=inner)
    return page


def summarize(diffs) -> list[tuple[str, str]]:
    return [(type(d).__name__, d.path) for d in diffs]


# ---------------------------------------------------------------------------
# Default policies
# ---------------------------------------------------------------------------

class TestDefaultDiffing:
    def setup_method(self):
        self.differ = HtmlDiffer()

    def test_identical_markup(self):
        assert self.differ.compare("<p></p>", "<p></p>") == []

    def test_text_change(self):
        diffs = self.differ.compare("<p>Hello</p>", "<p>Hi</p>")
        assert summarize(diffs) == [("NodeDiff", "p[0]>#text[0]")]
        assert diffs[0].kind is DiffKind.TEXT_CONTENT

    def test_element_name_change_reports_once(self):
        diffs = self.differ.compare("<p><b>x</b></p>", "<span><i>y</i></span>")
        assert len(diffs) == 1
        assert isinstance(diffs[0], NodeDiff)
        assert diffs[0].kind is DiffKind.ELEMENT_NAME

    def test_extra_list_item(self):
        diffs = self.differ.compare("<ul><li>a</li><li>b</li></ul>", "<ul><li>a</li><li>b</li><li>c</li></ul>")
        assert len(diffs) == 1
        assert isinstance(diffs[0], UnexpectedNodeDiff)
        assert diffs[0].path == "ul[0]>li[2]"

    def test_missing_element(self):
        diffs = self.differ.compare("<div><h1>T</h1><p>body</p></div>", "<div><h1>T</h1></div>")
        assert summarize(diffs) == [("MissingNodeDiff", "div[0]>p[1]")]

    def test_inserted_element_does_not_shift_pairings(self):
        diffs = self.differ.compare(
            "<div><h1>T</h1><p>body</p></div>",
            "<div><h1>T</h1><aside>ad</aside><p>body</p></div>",
        )
        assert summarize(diffs) == [("UnexpectedNodeDiff", "div[0]>aside[1]")]

    def test_swapped_siblings_are_reported(self):
        diffs = self.differ.compare("<p>a</p><span>b</span>", "<span>b</span><p>a</p>")
        assert summarize(diffs) == [("MissingNodeDiff", "span[1]"), ("UnexpectedNodeDiff", "span[0]")]

    def test_indentation_is_ignored(self):
        control = "<ul><li>a</li><li>b</li></ul>"
        test = "<ul>\n    <li>a</li>\n    <li>  b </li>\n</ul>"
        assert self.differ.compare(control, test) == []

    def test_comments_are_ignored(self):
        assert self.differ.compare("<p>a<!-- x --></p>", "<p>a</p>") == []

    def test_attribute_diffs(self):
        diffs = self.differ.compare('<p id="a" title="t"></p>', '<p id="b" lang="en"></p>')
        assert [type(d) for d in diffs] == [AttrDiff, MissingAttrDiff, UnexpectedAttrDiff]
        assert diffs[0].kind is DiffKind.ATTRIBUTE_VALUE

    def test_class_order_and_boolean_attributes(self):
        control = '<input class="a b" checked>'
        test = '<input class="b a" checked="checked">'
        assert self.differ.compare(control, test) == []

    def test_diff_iterator_is_lazy(self):
        diffs = self.differ.diff("<p>a</p><p>b</p>", "<p>x</p><p>y</p>")
        assert next(diffs).path == "p[0]>#text[0]"
        assert next(diffs).path == "p[1]>#text[0]"
        with pytest.raises(StopIteration):
            next(diffs)


# ---------------------------------------------------------------------------
# diff: instructions
# ---------------------------------------------------------------------------

class TestIgnoreInstructions:
    def setup_method(self):
        self.differ = HtmlDiffer()

    def test_ignore_element(self):
        control = '<div><section diff:ignore><p>anything</p></section><p>kept</p></div>'
        test = '<div><section class="x"><p>else</p><p>more</p></section><p>kept</p></div>'
        assert self.differ.compare(control, test) == []

    def test_ignore_false_still_compares(self):
        diffs = self.differ.compare('<p diff:ignore="false">a</p>', "<p>b</p>")
        assert summarize(diffs) == [("NodeDiff", "p[0]>#text[0]")]

    def test_ignore_children(self):
        control = '<div diff:ignorechildren id="x"><p>a</p></div>'
        test = '<div id="y"><p>b</p><p>c</p></div>'
        assert summarize(self.differ.compare(control, test)) == [("AttrDiff", "div[0][id]")]

    def test_ignore_attributes(self):
        control = '<div diff:ignoreattributes id="x"><p>a</p></div>'
        test = '<div id="y" class="z"><p>b</p></div>'
        assert summarize(self.differ.compare(control, test)) == [("NodeDiff", "div[0]>p[0]>#text[0]")]

    def test_ignore_attribute_value(self):
        control = '<a href:ignore class="nav">Home</a>'
        test = '<a href="/home?session=123" class="nav">Home</a>'
        assert self.differ.compare(control, test) == []


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_comments_compared_when_not_ignored(self):
        differ = HtmlDiffer(ignore_comments=False)
        diffs = differ.compare("<!-- a --><p></p>", "<!-- b --><p></p>")
        assert len(diffs) == 1
        assert diffs[0].kind is DiffKind.COMMENT_CONTENT

    def test_preserve_whitespace(self):
        differ = HtmlDiffer(whitespace=WhitespaceOption.PRESERVE)
        diffs = differ.compare("<p>a b</p>", "<p>a  b</p>")
        assert [d.kind for d in diffs] == [DiffKind.TEXT_CONTENT]

    def test_ignore_case(self):
        assert HtmlDiffer(ignore_case=True).compare("<p>Hello</p>", "<p>HELLO</p>") == []

    def test_no_defaults_reports_every_pairing_as_leftover(self):
        differ = HtmlDiffer(use_defaults=False)
        diffs = differ.compare("<p></p>", "<p></p>")
        assert [type(d) for d in diffs] == [MissingNodeDiff, UnexpectedNodeDiff]

    def test_custom_pipeline_is_used_as_is(self):
        pipeline = DiffingStrategyPipeline()
        differ = HtmlDiffer(pipeline=pipeline)
        assert differ.pipeline is pipeline

    def test_add_methods_chain_and_run_after_defaults(self):
        differ = HtmlDiffer()
        returned = (
            differ
            .add_node_filter(lambda s, d: FilterDecision.EXCLUDE if s.node.name == "script" else d)
            .add_attribute_filter(lambda s, d: FilterDecision.EXCLUDE if s.name == "nonce" else d)
            .add_node_comparer(lambda c, r: CompareResult.SKIP if c.control.node.name == "time" else r)
        )
        assert returned is differ
        control = '<div nonce="1"><time>Mon</time><p>x</p></div>'
        test = '<div nonce="2"><time>Tue</time><p>x</p><script>track()</script></div>'
        assert differ.compare(control, test) == []

    def test_diff_nodes_accepts_parsed_trees(self):
        differ = HtmlDiffer()
        control = HtmlParser().parse("<p>a</p>")
        test = HtmlParser().parse("<p>b</p>")
        assert len(list(differ.diff_nodes(control, test))) == 1


# ---------------------------------------------------------------------------
# Rendered pages
# ---------------------------------------------------------------------------

class TestRenderedDomExtractor:
    @pytest.mark.asyncio
    async def test_extract_whole_page(self):
        page = make_page("<html><body><p>Hi</p></body></html>")
        root = await RenderedDomExtractor().extract(page)
        page.content.assert_awaited_once()
        assert root.node_type is NodeType.DOCUMENT
        assert root.children[0].name == "html"

    @pytest.mark.asyncio
    async def test_extract_with_selector(self):
        page = make_page(inner="<li>a</li><li>b</li>")
        root = await RenderedDomExtractor().extract(page, selector="#list")
        page.inner_html.assert_awaited_once_with("#list")
        page.content.assert_not_awaited()
        assert [c.name for c in root.children] == ["li", "li"]


class TestDiffPages:
    @pytest.mark.asyncio
    async def test_diff_pages(self):
        control = make_page("<p>Hello</p>")
        test = make_page("<p>Hi</p>", url="https://staging.example.com")
        diffs = list(await HtmlDiffer().diff_pages(control, test))
        assert summarize(diffs) == [("NodeDiff", "p[0]>#text[0]")]

    @pytest.mark.asyncio
    async def test_diff_pages_with_selector(self):
        control = make_page(inner="<li>a</li><li>b</li>")
        test = make_page(inner="<li>a</li>")
        diffs = list(await HtmlDiffer().diff_pages(control, test, selector="ul"))
        assert summarize(diffs) == [("MissingNodeDiff", "li[1]")]
        control.inner_html.assert_awaited_once_with("ul")
        test.inner_html.assert_awaited_once_with("ul")
