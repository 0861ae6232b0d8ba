"""Leaf criteria — single predicates over one request attribute.

Each criterion wraps a value (or a ValueMatcher) plus the attribute-specific
metadata the control plane needs: a header or metadata name, an invert flag.
Criteria are pure values. They are validated only in the context of the
composite match that contains them, at compile time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Self

from meshroute._values import (
    ExactMatcher,
    PrefixMatcher,
    RangeMatcher,
    RegexMatcher,
    SuffixMatcher,
    ValueMatcher,
)


@dataclass(frozen=True, slots=True)
class HostnameMatch:
    """Match on the request's host name."""

    kind: Literal["exact", "suffix"]
    value: str

    @classmethod
    def matching_exactly(cls, name: str) -> Self:
        return cls("exact", name)

    @classmethod
    def matching_suffix(cls, suffix: str) -> Self:
        return cls("suffix", suffix)

    def to_dict(self) -> dict[str, Any]:
        return {self.kind: self.value}


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Match on the full request path, exactly or by regex."""

    kind: Literal["exact", "regex"]
    value: str

    @classmethod
    def matching_exactly(cls, path: str) -> Self:
        return cls("exact", path)

    @classmethod
    def matching_regex(cls, regex: str) -> Self:
        return cls("regex", regex)

    def to_dict(self) -> dict[str, Any]:
        return {self.kind: self.value}


@dataclass(frozen=True, slots=True)
class QueryParameterMatch:
    """Match on a named query parameter. Only exact values are supported."""

    name: str
    matcher: ExactMatcher

    @classmethod
    def value_is(cls, name: str, value: str) -> Self:
        return cls(name, ExactMatcher(value))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "match": self.matcher.to_dict()}


@dataclass(frozen=True, slots=True)
class _NamedValueMatch:
    """Named attribute + ValueMatcher, optionally inverted.

    Shared shape of HTTP headers and gRPC metadata. The negated constructors
    set ``invert`` rather than wrapping the matcher.
    """

    name: str
    invert: bool
    matcher: ValueMatcher

    @classmethod
    def value_is(cls, name: str, value: str) -> Self:
        return cls(name, False, ExactMatcher(value))

    @classmethod
    def value_is_not(cls, name: str, value: str) -> Self:
        return cls(name, True, ExactMatcher(value))

    @classmethod
    def value_starts_with(cls, name: str, prefix: str) -> Self:
        return cls(name, False, PrefixMatcher(prefix))

    @classmethod
    def value_does_not_start_with(cls, name: str, prefix: str) -> Self:
        return cls(name, True, PrefixMatcher(prefix))

    @classmethod
    def value_ends_with(cls, name: str, suffix: str) -> Self:
        return cls(name, False, SuffixMatcher(suffix))

    @classmethod
    def value_does_not_end_with(cls, name: str, suffix: str) -> Self:
        return cls(name, True, SuffixMatcher(suffix))

    @classmethod
    def value_matches_regex(cls, name: str, regex: str) -> Self:
        return cls(name, False, RegexMatcher(regex))

    @classmethod
    def value_does_not_match_regex(cls, name: str, regex: str) -> Self:
        return cls(name, True, RegexMatcher(regex))

    @classmethod
    def values_is_in_range(cls, name: str, start: int | float, end: int | float) -> Self:
        return cls(name, False, RangeMatcher(start, end))

    @classmethod
    def values_is_not_in_range(cls, name: str, start: int | float, end: int | float) -> Self:
        return cls(name, True, RangeMatcher(start, end))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "invert": self.invert, "match": self.matcher.to_dict()}


@dataclass(frozen=True, slots=True)
class HeaderMatch(_NamedValueMatch):
    """Match on an HTTP request header."""


@dataclass(frozen=True, slots=True)
class MetadataMatch(_NamedValueMatch):
    """Match on a gRPC request metadata entry."""
