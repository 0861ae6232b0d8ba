"""meshroute — Gateway route specification compiler for service-mesh gateways.

All public types are exported from this module for flat imports:

    from meshroute import GatewayRouteSpec, HostnameMatch, VirtualServiceRef

Protocol-specific builders live in meshroute.http and meshroute.grpc and are
re-exported here.
"""

__version__ = "0.1.0"

# Compiled output, see meshroute._compiled for the builder/output mapping
from meshroute._compiled import (
    GatewayRouteSpecConfig,
    GrpcRequestMatch,
    GrpcRewriteConfig,
    GrpcRouteAction,
    GrpcRouteConfig,
    HostnameRewrite,
    HttpRequestMatch,
    HttpRewriteConfig,
    HttpRouteAction,
    HttpRouteConfig,
    PathRewrite,
    PrefixRewrite,
    RouteTarget,
)

# Config loading
from meshroute._config import ConfigParseError, parse_gateway_route_spec

# Leaf criteria
from meshroute._criteria import (
    HeaderMatch,
    HostnameMatch,
    MetadataMatch,
    PathMatch,
    QueryParameterMatch,
)

# Errors
from meshroute._errors import (
    AmbiguousDiscriminantError,
    GatewayRouteError,
    InvalidPrefixFormatError,
    InvalidRegexPatternError,
    MissingDiscriminantError,
    PathRewriteConflictsWithPrefixMatchError,
    PrefixRewriteRequiresPrefixMatchError,
    ProtocolMismatchError,
)

# Compiler
from meshroute._spec import DEFAULT_PREFIX, GatewayRouteSpec, compile_gateway_route_spec

# Enums and protocols
from meshroute._types import (
    BindingContext,
    Default,
    Method,
    Protocol,
    ServiceReference,
    VirtualServiceRef,
)

# Value matchers
from meshroute._values import (
    ExactMatcher,
    PrefixMatcher,
    RangeMatcher,
    RegexMatcher,
    SuffixMatcher,
    ValueMatcher,
)
from meshroute.grpc import GrpcGatewayRouteMatch, GrpcGatewayRouteRewrite
from meshroute.http import (
    HttpGatewayRouteMatch,
    HttpGatewayRouteRewrite,
    PrefixMatch,
    PrefixOrPath,
)

__all__ = [
    # Enums and protocols
    "BindingContext",
    "Default",
    "Method",
    "Protocol",
    "ServiceReference",
    "VirtualServiceRef",
    # Value matchers
    "ExactMatcher",
    "PrefixMatcher",
    "SuffixMatcher",
    "RegexMatcher",
    "RangeMatcher",
    "ValueMatcher",
    # Leaf criteria
    "HostnameMatch",
    "HeaderMatch",
    "MetadataMatch",
    "PathMatch",
    "QueryParameterMatch",
    # Composite matches
    "HttpGatewayRouteMatch",
    "GrpcGatewayRouteMatch",
    "PrefixMatch",
    "PrefixOrPath",
    # Rewrites
    "HttpGatewayRouteRewrite",
    "GrpcGatewayRouteRewrite",
    "PathRewrite",
    "PrefixRewrite",
    "HostnameRewrite",
    # Compiler
    "GatewayRouteSpec",
    "compile_gateway_route_spec",
    "DEFAULT_PREFIX",
    # Compiled output
    "GatewayRouteSpecConfig",
    "HttpRouteConfig",
    "HttpRouteAction",
    "HttpRequestMatch",
    "HttpRewriteConfig",
    "GrpcRouteConfig",
    "GrpcRouteAction",
    "GrpcRequestMatch",
    "GrpcRewriteConfig",
    "RouteTarget",
    # Config
    "ConfigParseError",
    "parse_gateway_route_spec",
    # Errors
    "GatewayRouteError",
    "AmbiguousDiscriminantError",
    "InvalidPrefixFormatError",
    "PrefixRewriteRequiresPrefixMatchError",
    "PathRewriteConflictsWithPrefixMatchError",
    "MissingDiscriminantError",
    "InvalidRegexPatternError",
    "ProtocolMismatchError",
]
