"""Compile-time errors.

Every failure is a deterministic validation error raised while compiling a
spec. Nothing is retried or recovered; the caller fixes the spec.
"""

from __future__ import annotations


class GatewayRouteError(Exception):
    """Base class for gateway route compilation errors."""


class InvalidPrefixFormatError(GatewayRouteError):
    """A match prefix does not start with '/'."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"prefix path must start with '/', got: {prefix!r}")


class PrefixRewriteRequiresPrefixMatchError(GatewayRouteError):
    """A prefix rewrite was paired with a match that has no prefix."""

    def __init__(self) -> None:
        super().__init__("prefix rewrite requires a prefix-based match")


class PathRewriteConflictsWithPrefixMatchError(GatewayRouteError):
    """A path rewrite was paired with a prefix-based match."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(
            f"path rewrite cannot be combined with prefix match {prefix!r}"
        )


class MissingDiscriminantError(GatewayRouteError):
    """A composite match or rewrite carries none of its discriminant fields."""

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"{component} has no discriminant field set")


class InvalidRegexPatternError(GatewayRouteError):
    """A regex criterion is not valid RE2 syntax."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid regex pattern {pattern!r}: {reason}")


class ProtocolMismatchError(GatewayRouteError):
    """A match or rewrite builder does not belong to the spec's protocol."""

    def __init__(self, protocol: str, component: str) -> None:
        self.protocol = protocol
        self.component = component
        super().__init__(f"{component} cannot be used with a {protocol} route")


class AmbiguousDiscriminantError(GatewayRouteError):
    """A oneof value carries more than one of its discriminant fields."""

    def __init__(self, component: str, fields: tuple[str, ...]) -> None:
        self.component = component
        self.fields = fields
        super().__init__(f"{component} sets more than one of {', '.join(fields)}")
