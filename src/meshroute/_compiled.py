"""Compiled configuration tree — what the control plane consumes.

Relationship to builder types:

| Builder type             | Compiled type       |
|--------------------------|---------------------|
| GatewayRouteSpec         | GatewayRouteSpecConfig |
| HttpGatewayRouteMatch    | HttpRequestMatch    |
| GrpcGatewayRouteMatch    | GrpcRequestMatch    |
| HttpGatewayRouteRewrite  | HttpRewriteConfig   |
| GrpcGatewayRouteRewrite  | GrpcRewriteConfig   |
| ServiceReference         | RouteTarget         |

Every node is frozen. ``to_dict()`` renders the control plane's camelCase
resource shape, leaving out absent fields and empty lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from meshroute._criteria import (
        HeaderMatch,
        HostnameMatch,
        MetadataMatch,
        PathMatch,
        QueryParameterMatch,
    )
    from meshroute._types import Default, Method


def _prune(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty list."""
    return {k: v for k, v in data.items() if v is not None and v != []}


# ═══════════════════════════════════════════════════════════════════════════════
# Match
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpRequestMatch:
    """Normalized HTTP match. At most one of prefix or path is set."""

    prefix: str | None = None
    path: PathMatch | None = None
    headers: tuple[HeaderMatch, ...] = ()
    hostname: HostnameMatch | None = None
    method: Method | None = None
    query_parameters: tuple[QueryParameterMatch, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "prefix": self.prefix,
                "path": self.path.to_dict() if self.path else None,
                "headers": [h.to_dict() for h in self.headers],
                "hostname": self.hostname.to_dict() if self.hostname else None,
                "method": self.method.value if self.method else None,
                "queryParameters": [q.to_dict() for q in self.query_parameters],
            }
        )


@dataclass(frozen=True, slots=True)
class GrpcRequestMatch:
    """Normalized gRPC match."""

    hostname: HostnameMatch | None = None
    metadata: tuple[MetadataMatch, ...] = ()
    service_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "hostname": self.hostname.to_dict() if self.hostname else None,
                "metadata": [m.to_dict() for m in self.metadata],
                "serviceName": self.service_name,
            }
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Rewrite
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HostnameRewrite:
    """Whether the host header is rewritten to the target's host name."""

    default_target_hostname: Default

    def to_dict(self) -> dict[str, Any]:
        return {"defaultTargetHostname": self.default_target_hostname.value}


@dataclass(frozen=True, slots=True)
class PathRewrite:
    """Replace the whole request path with ``exact``."""

    exact: str

    def to_dict(self) -> dict[str, Any]:
        return {"exact": self.exact}


@dataclass(frozen=True, slots=True)
class PrefixRewrite:
    """Rewrite the matched prefix.

    Exactly one field is set: ``default_prefix`` toggles the control plane's
    default behavior, ``value`` substitutes a custom prefix. Binding an
    HttpGatewayRouteRewrite rejects a PrefixRewrite with neither or both.
    """

    default_prefix: Default | None = None
    value: str | None = None

    @classmethod
    def default(cls, default: Default) -> Self:
        return cls(default_prefix=default)

    @classmethod
    def custom(cls, value: str) -> Self:
        return cls(value=value)

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "defaultPrefix": self.default_prefix.value if self.default_prefix else None,
                "value": self.value,
            }
        )


@dataclass(frozen=True, slots=True)
class HttpRewriteConfig:
    """Resolved HTTP rewrite. Path and prefix are never both set."""

    hostname: HostnameRewrite | None = None
    path: PathRewrite | None = None
    prefix: PrefixRewrite | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "hostname": self.hostname.to_dict() if self.hostname else None,
                "path": self.path.to_dict() if self.path else None,
                "prefix": self.prefix.to_dict() if self.prefix else None,
            }
        )


@dataclass(frozen=True, slots=True)
class GrpcRewriteConfig:
    """Resolved gRPC rewrite. Only the host name can be rewritten."""

    hostname: HostnameRewrite

    def to_dict(self) -> dict[str, Any]:
        return {"hostname": self.hostname.to_dict()}


# ═══════════════════════════════════════════════════════════════════════════════
# Route
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class RouteTarget:
    """Destination virtual service."""

    virtual_service_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"virtualService": {"virtualServiceName": self.virtual_service_name}}


@dataclass(frozen=True, slots=True)
class HttpRouteAction:
    target: RouteTarget
    rewrite: HttpRewriteConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "target": self.target.to_dict(),
                "rewrite": self.rewrite.to_dict() if self.rewrite else None,
            }
        )


@dataclass(frozen=True, slots=True)
class GrpcRouteAction:
    target: RouteTarget
    rewrite: GrpcRewriteConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "target": self.target.to_dict(),
                "rewrite": self.rewrite.to_dict() if self.rewrite else None,
            }
        )


@dataclass(frozen=True, slots=True)
class HttpRouteConfig:
    """Compiled HTTP or HTTP/2 gateway route."""

    match: HttpRequestMatch
    action: HttpRouteAction

    def to_dict(self) -> dict[str, Any]:
        return {"match": self.match.to_dict(), "action": self.action.to_dict()}


@dataclass(frozen=True, slots=True)
class GrpcRouteConfig:
    """Compiled gRPC gateway route."""

    match: GrpcRequestMatch
    action: GrpcRouteAction

    def to_dict(self) -> dict[str, Any]:
        return {"match": self.match.to_dict(), "action": self.action.to_dict()}


@dataclass(frozen=True, slots=True)
class GatewayRouteSpecConfig:
    """Protocol-tagged compiled route.

    INV: at most one slot is populated; exactly one for any output of
    compile_gateway_route_spec().
    """

    http: HttpRouteConfig | None = None
    http2: HttpRouteConfig | None = None
    grpc: GrpcRouteConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune(
            {
                "httpRoute": self.http.to_dict() if self.http else None,
                "http2Route": self.http2.to_dict() if self.http2 else None,
                "grpcRoute": self.grpc.to_dict() if self.grpc else None,
            }
        )
