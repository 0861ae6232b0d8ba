"""HTTP composite match — one primary discriminant plus optional criteria.

Six alternate constructors, one per discriminant, all converging on the same
normalized shape. Prefix and path are a single sum-typed field, so a match
can never carry both.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from meshroute._compiled import HttpRequestMatch
from meshroute._criteria import PathMatch
from meshroute._errors import MissingDiscriminantError

if TYPE_CHECKING:
    from meshroute._criteria import HeaderMatch, HostnameMatch, QueryParameterMatch
    from meshroute._types import BindingContext, Method


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """Match on a request path prefix. Must start with '/' (checked at compile)."""

    value: str


type PrefixOrPath = PrefixMatch | PathMatch


@dataclass(frozen=True, slots=True)
class HttpGatewayRouteMatch:
    """Criteria for selecting HTTP and HTTP/2 requests.

    Build through one of the ``from_*`` constructors. All criteria are ANDed
    by the control plane.
    """

    prefix_or_path: PrefixOrPath | None = None
    headers: tuple[HeaderMatch, ...] = ()
    hostname: HostnameMatch | None = None
    method: Method | None = None
    query_parameters: tuple[QueryParameterMatch, ...] = ()

    @classmethod
    def from_prefix(
        cls,
        prefix: str,
        *,
        headers: Sequence[HeaderMatch] = (),
        hostname: HostnameMatch | None = None,
        method: Method | None = None,
        query_parameters: Sequence[QueryParameterMatch] = (),
    ) -> Self:
        return cls(
            prefix_or_path=PrefixMatch(prefix),
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    @classmethod
    def from_path(
        cls,
        path: PathMatch,
        *,
        headers: Sequence[HeaderMatch] = (),
        hostname: HostnameMatch | None = None,
        method: Method | None = None,
        query_parameters: Sequence[QueryParameterMatch] = (),
    ) -> Self:
        return cls(
            prefix_or_path=path,
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    @classmethod
    def from_headers(
        cls,
        headers: Sequence[HeaderMatch],
        *,
        hostname: HostnameMatch | None = None,
        method: Method | None = None,
        query_parameters: Sequence[QueryParameterMatch] = (),
        prefix_or_path: PrefixOrPath | None = None,
    ) -> Self:
        return cls(
            prefix_or_path=prefix_or_path,
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    @classmethod
    def from_hostname(
        cls,
        hostname: HostnameMatch,
        *,
        headers: Sequence[HeaderMatch] = (),
        method: Method | None = None,
        query_parameters: Sequence[QueryParameterMatch] = (),
        prefix_or_path: PrefixOrPath | None = None,
    ) -> Self:
        return cls(
            prefix_or_path=prefix_or_path,
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    @classmethod
    def from_method(
        cls,
        method: Method,
        *,
        headers: Sequence[HeaderMatch] = (),
        hostname: HostnameMatch | None = None,
        query_parameters: Sequence[QueryParameterMatch] = (),
        prefix_or_path: PrefixOrPath | None = None,
    ) -> Self:
        return cls(
            prefix_or_path=prefix_or_path,
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    @classmethod
    def from_query_parameters(
        cls,
        query_parameters: Sequence[QueryParameterMatch],
        *,
        headers: Sequence[HeaderMatch] = (),
        hostname: HostnameMatch | None = None,
        method: Method | None = None,
        prefix_or_path: PrefixOrPath | None = None,
    ) -> Self:
        return cls(
            prefix_or_path=prefix_or_path,
            headers=tuple(headers),
            hostname=hostname,
            method=method,
            query_parameters=tuple(query_parameters),
        )

    def bind(self, ctx: BindingContext) -> HttpRequestMatch:
        """Resolve into the normalized match. Prefix defaulting is left to the compiler.

        Raises:
            MissingDiscriminantError: If no criterion is set at all.
        """
        if (
            self.prefix_or_path is None
            and not self.headers
            and self.hostname is None
            and self.method is None
            and not self.query_parameters
        ):
            raise MissingDiscriminantError(type(self).__name__)

        prefix, path = _resolve_prefix_or_path(self.prefix_or_path, ctx)
        return HttpRequestMatch(
            prefix=prefix,
            path=path,
            headers=tuple(self.headers),
            hostname=self.hostname,
            method=self.method,
            query_parameters=tuple(self.query_parameters),
        )


def _resolve_prefix_or_path(
    prefix_or_path: PrefixOrPath | None, _ctx: BindingContext
) -> tuple[str | None, PathMatch | None]:
    """Split the sum type back into the (prefix, path) field pair."""
    match prefix_or_path:
        case PrefixMatch(value=v):
            return v, None
        case PathMatch():
            return None, prefix_or_path
        case None:
            return None, None
        case _:
            msg = f"unknown prefix_or_path type: {type(prefix_or_path).__name__}"
            raise TypeError(msg)
