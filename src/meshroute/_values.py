"""Value matchers — the payload of header, metadata and query criteria.

Each matcher is a frozen dataclass holding a single variant of the
ValueMatcher union. Construction never fails: regex syntax is checked at
compile time by ``check_regex``, which uses ``google-re2`` because RE2 is the
dialect the mesh data plane evaluates. RE2 rejects backreferences and
lookaround, so a pattern that Python's ``re`` accepts may still fail here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import re2

from meshroute._errors import InvalidRegexPatternError


@dataclass(frozen=True, slots=True)
class ExactMatcher:
    """Value must equal ``value``."""

    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"exact": self.value}


@dataclass(frozen=True, slots=True)
class PrefixMatcher:
    """Value must start with ``prefix``."""

    prefix: str

    def to_dict(self) -> dict[str, Any]:
        return {"prefix": self.prefix}


@dataclass(frozen=True, slots=True)
class SuffixMatcher:
    """Value must end with ``suffix``."""

    suffix: str

    def to_dict(self) -> dict[str, Any]:
        return {"suffix": self.suffix}


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Value must match ``pattern``."""

    pattern: str

    def to_dict(self) -> dict[str, Any]:
        return {"regex": self.pattern}


@dataclass(frozen=True, slots=True)
class RangeMatcher:
    """Numeric value must fall in [start, end)."""

    start: int | float
    end: int | float

    def to_dict(self) -> dict[str, Any]:
        return {"range": {"start": self.start, "end": self.end}}


type ValueMatcher = (
    ExactMatcher | PrefixMatcher | SuffixMatcher | RegexMatcher | RangeMatcher
)


def check_regex(pattern: str) -> None:
    """Raise InvalidRegexPatternError unless ``pattern`` compiles under RE2."""
    try:
        re2.compile(pattern)
    except re2.error as e:
        raise InvalidRegexPatternError(pattern, str(e)) from e


def regex_of(matcher: ValueMatcher) -> str | None:
    """Return the pattern of a RegexMatcher, None for every other variant."""
    match matcher:
        case RegexMatcher(pattern=p):
            return p
        case _:
            return None
