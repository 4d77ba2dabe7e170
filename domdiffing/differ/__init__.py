from domdiffing.differ.differ import HtmlDiffer
from domdiffing.differ.pipeline import DiffingStrategyPipeline
from domdiffing.differ.tree_diff import diff_trees

__all__ = ["DiffingStrategyPipeline", "HtmlDiffer", "diff_trees"]
