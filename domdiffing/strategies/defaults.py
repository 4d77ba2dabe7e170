"""The default policy set registered by HtmlDiffer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domdiffing.strategies.comparers import (
    WhitespaceOption,
    attribute_comparer,
    boolean_attribute_comparer,
    class_attribute_comparer,
    comment_comparer,
    node_type_comparer,
    style_attribute_comparer,
    text_comparer,
)
from domdiffing.strategies.filters import comment_filter, diff_attribute_filter, whitespace_text_filter
from domdiffing.strategies.ignore import (
    ignore_attribute_comparer,
    ignore_attributes_comparer,
    ignore_children_comparer,
    ignore_element_comparer,
)
from domdiffing.strategies.matchers import (
    attribute_name_matcher,
    forward_searching_node_matcher,
    one_to_one_node_matcher,
    postfixed_attribute_matcher,
)

if TYPE_CHECKING:
    from domdiffing.differ.pipeline import DiffingStrategyPipeline


def add_default_options(
    pipeline: DiffingStrategyPipeline,
    *,
    ignore_comments: bool = True,
    whitespace: WhitespaceOption | str = WhitespaceOption.NORMALIZE,
    ignore_case: bool = False,
) -> DiffingStrategyPipeline:
    """
    Register the built-in policies in their intended order.

    Ignore comparers come after the structural ones so a `diff:` instruction
    has the last word. Whitespace-only text nodes are filtered out unless
    whitespace is preserved.
    """
    whitespace = WhitespaceOption(whitespace)

    if ignore_comments:
        pipeline.add_node_filter(comment_filter)
    if whitespace is not WhitespaceOption.PRESERVE:
        pipeline.add_node_filter(whitespace_text_filter)
    pipeline.add_attribute_filter(diff_attribute_filter)

    pipeline.add_node_matcher(forward_searching_node_matcher)
    pipeline.add_node_matcher(one_to_one_node_matcher)
    pipeline.add_attribute_matcher(attribute_name_matcher)
    pipeline.add_attribute_matcher(postfixed_attribute_matcher)

    pipeline.add_node_comparer(node_type_comparer)
    pipeline.add_node_comparer(text_comparer(whitespace=whitespace, ignore_case=ignore_case))
    pipeline.add_node_comparer(comment_comparer)
    pipeline.add_node_comparer(ignore_element_comparer)
    pipeline.add_node_comparer(ignore_children_comparer)
    pipeline.add_node_comparer(ignore_attributes_comparer)

    pipeline.add_attribute_comparer(attribute_comparer)
    pipeline.add_attribute_comparer(class_attribute_comparer)
    pipeline.add_attribute_comparer(style_attribute_comparer)
    pipeline.add_attribute_comparer(boolean_attribute_comparer)
    pipeline.add_attribute_comparer(ignore_attribute_comparer)
    return pipeline
