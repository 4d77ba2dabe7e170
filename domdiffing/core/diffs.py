"""Diff records produced by comparers and by the tree walk."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from domdiffing.core.types import AttributeComparison, Comparison, ComparisonSource
from domdiffing.dom.nodes import NodeType


class DiffResult(str, Enum):
    DIFFERENT = "different"
    MISSING = "missing"  # present in control only
    UNEXPECTED = "unexpected"  # present in test only


class DiffTarget(str, Enum):
    NODE = "node"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    ATTRIBUTE = "attribute"


class DiffKind(str, Enum):
    UNRESOLVED = "unresolved"  # the fold ended different without a comparer saying why
    NODE_TYPE = "node_type"
    ELEMENT_NAME = "element_name"
    TEXT_CONTENT = "text_content"
    COMMENT_CONTENT = "comment_content"
    ATTRIBUTE_NAME = "attribute_name"
    ATTRIBUTE_VALUE = "attribute_value"


_TARGETS = {
    NodeType.ELEMENT: DiffTarget.ELEMENT,
    NodeType.TEXT: DiffTarget.TEXT,
    NodeType.COMMENT: DiffTarget.COMMENT,
}


def _node_target(source: ComparisonSource) -> DiffTarget:
    return _TARGETS.get(source.node.node_type, DiffTarget.NODE)


class Diff(ABC):
    """Base for every diff record. Each one keeps the comparison it came from."""

    @property
    @abstractmethod
    def result(self) -> DiffResult: ...

    @property
    @abstractmethod
    def target(self) -> DiffTarget: ...

    @property
    @abstractmethod
    def path(self) -> str: ...


@dataclass(frozen=True)
class NodeDiff(Diff):
    comparison: Comparison
    kind: DiffKind = DiffKind.UNRESOLVED

    @property
    def result(self) -> DiffResult:
        return DiffResult.DIFFERENT

    @property
    def target(self) -> DiffTarget:
        control, test = self.comparison.control, self.comparison.test
        if control is not None and test is not None and control.node.node_type is not test.node.node_type:
            return DiffTarget.NODE
        return _node_target(control or test)

    @property
    def path(self) -> str:
        return (self.comparison.control or self.comparison.test).path


@dataclass(frozen=True)
class MissingNodeDiff(Diff):
    comparison: Comparison

    @property
    def result(self) -> DiffResult:
        return DiffResult.MISSING

    @property
    def target(self) -> DiffTarget:
        return _node_target(self.comparison.control)

    @property
    def path(self) -> str:
        return self.comparison.control.path


@dataclass(frozen=True)
class UnexpectedNodeDiff(Diff):
    comparison: Comparison

    @property
    def result(self) -> DiffResult:
        return DiffResult.UNEXPECTED

    @property
    def target(self) -> DiffTarget:
        return _node_target(self.comparison.test)

    @property
    def path(self) -> str:
        return self.comparison.test.path


@dataclass(frozen=True)
class AttrDiff(Diff):
    comparison: AttributeComparison
    kind: DiffKind = DiffKind.UNRESOLVED

    @property
    def result(self) -> DiffResult:
        return DiffResult.DIFFERENT

    @property
    def target(self) -> DiffTarget:
        return DiffTarget.ATTRIBUTE

    @property
    def path(self) -> str:
        return (self.comparison.control or self.comparison.test).path


@dataclass(frozen=True)
class MissingAttrDiff(Diff):
    comparison: AttributeComparison

    @property
    def result(self) -> DiffResult:
        return DiffResult.MISSING

    @property
    def target(self) -> DiffTarget:
        return DiffTarget.ATTRIBUTE

    @property
    def path(self) -> str:
        return self.comparison.control.path


@dataclass(frozen=True)
class UnexpectedAttrDiff(Diff):
    comparison: AttributeComparison

    @property
    def result(self) -> DiffResult:
        return DiffResult.UNEXPECTED

    @property
    def target(self) -> DiffTarget:
        return DiffTarget.ATTRIBUTE

    @property
    def path(self) -> str:
        return self.comparison.test.path
