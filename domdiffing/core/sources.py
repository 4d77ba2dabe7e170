"""Per-sibling-group source containers that track which sources were matched."""

from __future__ import annotations

from typing import Iterable, Iterator

from domdiffing.core.types import AttributeComparisonSource, ComparisonSource, SourceType


class SourceCollection:
    """
    Ordered node sources from one tree for one sibling group.

    Matchers read the unmatched entries; only the pipeline marks entries as
    matched, right after a matcher yields a comparison that uses them.
    """

    def __init__(self, source_type: SourceType, sources: Iterable[ComparisonSource]) -> None:
        self.source_type = source_type
        self._sources = list(sources)
        self._positions: dict[ComparisonSource, int] = {}
        for position, source in enumerate(self._sources):
            if source.source_type is not source_type:
                raise ValueError(f"{source.path!r} is a {source.source_type.value} source, expected {source_type.value}")
            self._positions[source] = position
        self._matched = [False] * len(self._sources)

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[ComparisonSource]:
        return iter(self._sources)

    def __getitem__(self, position: int) -> ComparisonSource:
        return self._sources[position]

    def __contains__(self, source: object) -> bool:
        return source in self._positions

    @property
    def unmatched_count(self) -> int:
        return self._matched.count(False)

    def position_of(self, source: ComparisonSource) -> int:
        try:
            return self._positions[source]
        except KeyError:
            raise ValueError(f"{source.path!r} is not part of this {self.source_type.value} collection") from None

    def is_unmatched(self, source: ComparisonSource) -> bool:
        return not self._matched[self.position_of(source)]

    def get_unmatched(self, start_position: int = 0) -> Iterator[ComparisonSource]:
        """Yield unmatched sources in order, re-checking the marker as iteration proceeds."""
        for position in range(start_position, len(self._sources)):
            if not self._matched[position]:
                yield self._sources[position]

    def mark_as_matched(self, source: ComparisonSource | None) -> None:
        if source is None:
            return
        position = self.position_of(source)
        if self._matched[position]:
            raise ValueError(f"{source.path!r} has already been matched")
        self._matched[position] = True


class SourceMap:
    """Attribute sources of one element keyed by lower-cased attribute name."""

    def __init__(self, source_type: SourceType, sources: Iterable[AttributeComparisonSource]) -> None:
        self.source_type = source_type
        self._sources: dict[str, AttributeComparisonSource] = {}
        for source in sources:
            if source.source_type is not source_type:
                raise ValueError(f"{source.path!r} is a {source.source_type.value} source, expected {source_type.value}")
            key = source.name.lower()
            if key in self._sources:
                raise ValueError(f"{source.path!r} appears more than once (attribute names are case-insensitive)")
            self._sources[key] = source
        self._matched: set[str] = set()

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[AttributeComparisonSource]:
        return iter(self._sources.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._sources

    def __getitem__(self, name: str) -> AttributeComparisonSource:
        return self._sources[name.lower()]

    def get(self, name: str) -> AttributeComparisonSource | None:
        return self._sources.get(name.lower())

    @property
    def unmatched_count(self) -> int:
        return len(self._sources) - len(self._matched)

    def is_unmatched(self, source: AttributeComparisonSource) -> bool:
        return self._key_of(source) not in self._matched

    def get_unmatched(self) -> Iterator[AttributeComparisonSource]:
        for key, source in self._sources.items():
            if key not in self._matched:
                yield source

    def mark_as_matched(self, source: AttributeComparisonSource | None) -> None:
        if source is None:
            return
        key = self._key_of(source)
        if key in self._matched:
            raise ValueError(f"{source.path!r} has already been matched")
        self._matched.add(key)

    def _key_of(self, source: AttributeComparisonSource) -> str:
        key = source.name.lower()
        if self._sources.get(key) != source:
            raise ValueError(f"{source.path!r} is not part of this {self.source_type.value} map")
        return key
