"""meshroute.http — HTTP and HTTP/2 gateway route builders.

Provides the composite match (six discriminant entry points) and the
rewrite builder consumed by GatewayRouteSpec.http() and .http2().
"""

from meshroute.http._match import HttpGatewayRouteMatch, PrefixMatch, PrefixOrPath
from meshroute.http._rewrite import HttpGatewayRouteRewrite, PathOrPrefixRewrite

__all__ = [
    # Match
    "HttpGatewayRouteMatch",
    "PrefixMatch",
    "PrefixOrPath",
    # Rewrite
    "HttpGatewayRouteRewrite",
    "PathOrPrefixRewrite",
]
