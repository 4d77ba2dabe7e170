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
from domdiffing.strategies.defaults import add_default_options
from domdiffing.strategies.filters import (
    comment_filter,
    diff_attribute_filter,
    ignore_attribute_filter,
    whitespace_text_filter,
)
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

__all__ = [
    "WhitespaceOption",
    "add_default_options",
    # filters
    "comment_filter",
    "diff_attribute_filter",
    "ignore_attribute_filter",
    "whitespace_text_filter",
    # matchers
    "attribute_name_matcher",
    "forward_searching_node_matcher",
    "one_to_one_node_matcher",
    "postfixed_attribute_matcher",
    # comparers
    "attribute_comparer",
    "boolean_attribute_comparer",
    "class_attribute_comparer",
    "comment_comparer",
    "ignore_attribute_comparer",
    "ignore_attributes_comparer",
    "ignore_children_comparer",
    "ignore_element_comparer",
    "node_type_comparer",
    "style_attribute_comparer",
    "text_comparer",
]
