"""Config loading — dict (JSON/YAML shaped) → GatewayRouteSpec.

  dict → parse_gateway_route_spec() → GatewayRouteSpec → compile() → GatewayRouteSpecConfig

Parsing is structural only: it checks types, required fields and oneof
shapes. Cross-field invariants (prefix format, rewrite/match pairing) stay
with the compiler, so a parsed spec may still fail to compile.

Shape::

    protocol: http            # http | http2 | grpc
    target: billing           # virtual service name
    match:
      prefix: /api            # or path: {exact: /health} | {regex: ...}
      headers:
        - {name: x-env, invert: false, exact: prod}
      hostname: {suffix: .example.com}
      method: GET
      query_parameters:
        - {name: debug, exact: "1"}
    rewrite:
      hostname: disabled
      prefix: {value: /v2}    # or {default: enabled}; or path: /check
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from meshroute._compiled import HostnameRewrite, PathRewrite, PrefixRewrite
from meshroute._criteria import (
    HeaderMatch,
    HostnameMatch,
    MetadataMatch,
    PathMatch,
    QueryParameterMatch,
)
from meshroute._spec import GatewayRouteSpec
from meshroute._types import Default, Method, Protocol, VirtualServiceRef
from meshroute._values import (
    ExactMatcher,
    PrefixMatcher,
    RangeMatcher,
    RegexMatcher,
    SuffixMatcher,
    ValueMatcher,
)
from meshroute.grpc import GrpcGatewayRouteMatch, GrpcGatewayRouteRewrite
from meshroute.http import HttpGatewayRouteMatch, HttpGatewayRouteRewrite, PrefixMatch

logger = logging.getLogger(__name__)

# Value match variant keys, in lookup order
_VALUE_MATCH_VARIANTS = ("exact", "prefix", "suffix", "regex", "range")


class ConfigParseError(Exception):
    """Error parsing a config dict into a gateway route spec."""


def parse_gateway_route_spec(data: dict[str, Any]) -> GatewayRouteSpec:
    """Parse a dict into a GatewayRouteSpec.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    _expect_dict(data, "gateway route spec")

    protocol = _parse_enum(_require(data, "protocol", "gateway route spec"), Protocol, "protocol")
    target = _require(data, "target", "gateway route spec")
    if not isinstance(target, str) or not target:
        msg = f"'target' must be a non-empty string, got {target!r}"
        raise ConfigParseError(msg)

    match: HttpGatewayRouteMatch | GrpcGatewayRouteMatch | None
    rewrite: HttpGatewayRouteRewrite | GrpcGatewayRouteRewrite | None
    if protocol is Protocol.GRPC:
        match = _parse_grpc_match(_require(data, "match", "grpc route"))
        rewrite = _parse_grpc_rewrite(data["rewrite"]) if "rewrite" in data else None
    else:
        match = _parse_http_match(data["match"]) if "match" in data else None
        rewrite = _parse_http_rewrite(data["rewrite"]) if "rewrite" in data else None

    spec = GatewayRouteSpec(protocol, VirtualServiceRef(target), match, rewrite)
    logger.debug("parsed %s gateway route spec targeting %s", protocol.value, target)
    return spec


# ═══════════════════════════════════════════════════════════════════════════════
# Match
# ═══════════════════════════════════════════════════════════════════════════════


def _parse_http_match(data: dict[str, Any]) -> HttpGatewayRouteMatch:
    _expect_dict(data, "match")

    if "prefix" in data and "path" in data:
        msg = "at most one of 'prefix' or 'path' may be set, got both"
        raise ConfigParseError(msg)

    prefix_or_path: PrefixMatch | PathMatch | None = None
    if "prefix" in data:
        prefix_or_path = PrefixMatch(_expect_str(data["prefix"], "prefix"))
    elif "path" in data:
        prefix_or_path = _parse_path_match(data["path"])

    method = None
    if "method" in data:
        method = _parse_enum(data["method"], Method, "method")

    return HttpGatewayRouteMatch(
        prefix_or_path=prefix_or_path,
        headers=tuple(
            _parse_named_value_match(h, HeaderMatch, "header")
            for h in _expect_list(data.get("headers", []), "headers")
        ),
        hostname=_parse_hostname_match(data["hostname"]) if "hostname" in data else None,
        method=method,
        query_parameters=tuple(
            _parse_query_parameter(q)
            for q in _expect_list(data.get("query_parameters", []), "query_parameters")
        ),
    )


def _parse_grpc_match(data: dict[str, Any]) -> GrpcGatewayRouteMatch:
    _expect_dict(data, "match")

    service_name = None
    if "service_name" in data:
        service_name = _expect_str(data["service_name"], "service_name")

    return GrpcGatewayRouteMatch(
        hostname=_parse_hostname_match(data["hostname"]) if "hostname" in data else None,
        metadata=tuple(
            _parse_named_value_match(m, MetadataMatch, "metadata")
            for m in _expect_list(data.get("metadata", []), "metadata")
        ),
        service_name=service_name,
    )


def _parse_hostname_match(data: dict[str, Any]) -> HostnameMatch:
    """Expected format: { "exact": "a.example.com" } or { "suffix": ".example.com" }."""
    _expect_dict(data, "hostname")
    kind = _single_key(data, ("exact", "suffix"), "hostname")
    return HostnameMatch(kind, _expect_str(data[kind], f"hostname {kind}"))


def _parse_path_match(data: dict[str, Any]) -> PathMatch:
    """Expected format: { "exact": "/health" } or { "regex": "^/v[0-9]+/" }."""
    _expect_dict(data, "path")
    kind = _single_key(data, ("exact", "regex"), "path")
    return PathMatch(kind, _expect_str(data[kind], f"path {kind}"))


def _parse_query_parameter(data: dict[str, Any]) -> QueryParameterMatch:
    _expect_dict(data, "query_parameter")
    name = _expect_str(_require(data, "name", "query_parameter"), "query_parameter name")
    value = _expect_str(_require(data, "exact", "query_parameter"), "query_parameter exact")
    return QueryParameterMatch(name, ExactMatcher(value))


def _parse_named_value_match[T: (HeaderMatch, MetadataMatch)](
    data: dict[str, Any], cls: type[T], what: str
) -> T:
    """Parse a header or metadata entry: name, optional invert, one value variant."""
    _expect_dict(data, what)
    name = _expect_str(_require(data, "name", what), f"{what} name")
    invert = data.get("invert", False)
    if not isinstance(invert, bool):
        msg = f"{what} 'invert' must be a bool, got {type(invert).__name__}"
        raise ConfigParseError(msg)
    return cls(name, invert, _parse_value_match(data, what))


def _parse_value_match(data: dict[str, Any], what: str) -> ValueMatcher:
    """Pick the single value variant out of a criterion dict."""
    variant = _single_key(data, _VALUE_MATCH_VARIANTS, what)
    value = data[variant]

    if variant == "range":
        _expect_dict(value, f"{what} range")
        start = _expect_number(_require(value, "start", f"{what} range"), "range start")
        end = _expect_number(_require(value, "end", f"{what} range"), "range end")
        return RangeMatcher(start, end)

    value = _expect_str(value, f"{what} {variant}")
    match variant:
        case "exact":
            return ExactMatcher(value)
        case "prefix":
            return PrefixMatcher(value)
        case "suffix":
            return SuffixMatcher(value)
        case _:
            return RegexMatcher(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Rewrite
# ═══════════════════════════════════════════════════════════════════════════════


def _parse_http_rewrite(data: dict[str, Any]) -> HttpGatewayRouteRewrite:
    _expect_dict(data, "rewrite")

    if "path" in data and "prefix" in data:
        msg = "at most one of rewrite 'path' or 'prefix' may be set, got both"
        raise ConfigParseError(msg)

    path_or_prefix: PathRewrite | PrefixRewrite | None = None
    if "path" in data:
        path_or_prefix = PathRewrite(_expect_str(data["path"], "rewrite path"))
    elif "prefix" in data:
        path_or_prefix = _parse_prefix_rewrite(data["prefix"])

    return HttpGatewayRouteRewrite(
        hostname=_parse_hostname_rewrite(data),
        path_or_prefix=path_or_prefix,
    )


def _parse_grpc_rewrite(data: dict[str, Any]) -> GrpcGatewayRouteRewrite:
    _expect_dict(data, "rewrite")
    unsupported = sorted(set(data) - {"hostname"})
    if unsupported:
        msg = f"grpc routes only support a 'hostname' rewrite, got keys: {unsupported}"
        raise ConfigParseError(msg)
    return GrpcGatewayRouteRewrite(hostname=_parse_hostname_rewrite(data))


def _parse_prefix_rewrite(data: dict[str, Any]) -> PrefixRewrite:
    """Expected format: { "default": "enabled" } or { "value": "/v2" }."""
    _expect_dict(data, "rewrite prefix")
    key = _single_key(data, ("default", "value"), "rewrite prefix")
    if key == "default":
        return PrefixRewrite.default(_parse_enum(data[key], Default, "rewrite prefix default"))
    return PrefixRewrite.custom(_expect_str(data[key], "rewrite prefix value"))


def _parse_hostname_rewrite(data: dict[str, Any]) -> HostnameRewrite | None:
    if "hostname" not in data:
        return None
    return HostnameRewrite(_parse_enum(data["hostname"], Default, "rewrite hostname"))


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _expect_dict(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        msg = f"{what} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)


def _expect_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        msg = f"'{what}' must be a list, got {type(data).__name__}"
        raise ConfigParseError(msg)
    return data


def _expect_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        msg = f"{what} must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value


def _expect_number(value: Any, what: str) -> int | float:
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        msg = f"{what} must be a number, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value


def _require(data: dict[str, Any], key: str, what: str) -> Any:
    if key not in data:
        msg = f"{what} missing required field '{key}'"
        raise ConfigParseError(msg)
    return data[key]


def _single_key(data: dict[str, Any], keys: tuple[str, ...], what: str) -> Any:
    """Enforce oneof: exactly one of ``keys`` is present in ``data``."""
    present = [k for k in keys if k in data]
    if len(present) != 1:
        msg = f"{what} must contain exactly one of {list(keys)}, got keys: {sorted(data.keys())}"
        raise ConfigParseError(msg)
    return present[0]


def _parse_enum[E: Enum](value: Any, enum: type[E], what: str) -> E:
    try:
        return enum(value)
    except (ValueError, TypeError) as e:
        expected = [m.value for m in enum]
        msg = f"{what} must be one of {expected}, got {value!r}"
        raise ConfigParseError(msg) from e
