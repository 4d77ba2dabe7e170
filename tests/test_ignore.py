"""Tests for the comparers driven by diff: instructions in control markup."""

import pytest

from domdiffing.core.types import (
    AttributeComparison,
    AttributeComparisonSource,
    CompareDecision,
    CompareResult,
    Comparison,
    ComparisonSource,
    SourceType,
)
from domdiffing.dom.parser import HtmlParser
from domdiffing.strategies.ignore import (
    ignore_attribute_comparer,
    ignore_attributes_comparer,
    ignore_children_comparer,
    ignore_element_comparer,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

PARSER = HtmlParser()

CURRENT_RESULTS = [
    CompareResult.DIFFERENT,
    CompareResult.DIFFERENT_AND_BREAK,
    CompareResult.SAME,
    CompareResult.SAME_AND_BREAK,
]


def first_source(markup: str, source_type=SourceType.CONTROL) -> ComparisonSource:
    return ComparisonSource.create(PARSER.parse(markup).children[0], 0, source_type)


def make_comparison(control_markup: str, test_markup: str = "<p></p>") -> Comparison:
    return Comparison(control=first_source(control_markup), test=first_source(test_markup, SourceType.TEST))


# ---------------------------------------------------------------------------
# diff:ignore
# ---------------------------------------------------------------------------

class TestIgnoreElementComparer:
    @pytest.mark.parametrize(
        "markup",
        [
            "<p></p>",
            '<p diff:ignore="false"></p>',
            '<p diff:ignore="FALSE"></p>',
            '<p diff:ignore="faLsE"></p>',
        ],
    )
    @pytest.mark.parametrize("current", CURRENT_RESULTS)
    def test_returns_current_when_not_ignored(self, markup, current):
        assert ignore_element_comparer(make_comparison(markup), current) is current

    @pytest.mark.parametrize(
        "markup",
        [
            "<p diff:ignore></p>",
            '<p diff:ignore=""></p>',
            '<p diff:ignore="true"></p>',
            '<p diff:ignore="TRUE"></p>',
            '<p diff:ignore="TrUe"></p>',
        ],
    )
    @pytest.mark.parametrize("current", CURRENT_RESULTS)
    def test_returns_same_and_break_when_ignored(self, markup, current):
        assert ignore_element_comparer(make_comparison(markup), current) == CompareResult.SAME_AND_BREAK

    def test_instruction_on_test_side_is_not_read(self):
        comparison = make_comparison("<p></p>", "<p diff:ignore></p>")
        assert ignore_element_comparer(comparison, CompareResult.DIFFERENT) is CompareResult.DIFFERENT

    def test_text_nodes_are_never_ignored(self):
        comparison = make_comparison("hello", "world")
        assert ignore_element_comparer(comparison, CompareResult.DIFFERENT) is CompareResult.DIFFERENT


# ---------------------------------------------------------------------------
# diff:ignorechildren / diff:ignoreattributes
# ---------------------------------------------------------------------------

class TestIgnoreChildrenComparer:
    def test_adds_skip_children_to_same(self):
        result = ignore_children_comparer(make_comparison("<div diff:ignorechildren></div>"), CompareResult.SAME)
        assert result.decision == CompareDecision.SAME | CompareDecision.SKIP_CHILDREN

    def test_keeps_diff_of_different_result(self):
        base = make_comparison("<div diff:ignorechildren></div>", "<div></div>")
        current = CompareResult.different(None)
        result = ignore_children_comparer(base, current)
        assert result.is_different
        assert result.skips_children

    def test_false_value_leaves_current(self):
        comparison = make_comparison('<div diff:ignorechildren="false"></div>')
        assert ignore_children_comparer(comparison, CompareResult.SAME) is CompareResult.SAME

    def test_skip_is_left_alone(self):
        comparison = make_comparison("<div diff:ignorechildren></div>")
        assert ignore_children_comparer(comparison, CompareResult.SKIP) is CompareResult.SKIP


class TestIgnoreAttributesComparer:
    def test_adds_skip_attributes(self):
        result = ignore_attributes_comparer(make_comparison('<div diff:ignoreattributes="TRUE"></div>'), CompareResult.SAME)
        assert result.is_same
        assert result.skips_attributes
        assert not result.skips_children

    def test_absent_instruction_leaves_current(self):
        assert ignore_attributes_comparer(make_comparison("<div></div>"), CompareResult.SAME) is CompareResult.SAME


# ---------------------------------------------------------------------------
# name:ignore
# ---------------------------------------------------------------------------

class TestIgnoreAttributeComparer:
    def test_postfixed_attribute_is_same(self):
        control = first_source('<a href:ignore=""></a>')
        test = first_source('<a href="/somewhere"></a>', SourceType.TEST)
        comparison = AttributeComparison(
            control=AttributeComparisonSource("href:ignore", control),
            test=AttributeComparisonSource("href", test),
        )
        assert ignore_attribute_comparer(comparison, CompareResult.DIFFERENT) == CompareResult.SAME

    def test_other_attributes_untouched(self):
        control = first_source('<a href="/a"></a>')
        test = first_source('<a href="/b"></a>', SourceType.TEST)
        comparison = AttributeComparison(
            control=AttributeComparisonSource("href", control),
            test=AttributeComparisonSource("href", test),
        )
        assert ignore_attribute_comparer(comparison, CompareResult.DIFFERENT) is CompareResult.DIFFERENT
