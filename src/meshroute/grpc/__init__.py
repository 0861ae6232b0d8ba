"""meshroute.grpc — gRPC gateway route builders."""

from meshroute.grpc._match import GrpcGatewayRouteMatch
from meshroute.grpc._rewrite import GrpcGatewayRouteRewrite

__all__ = [
    "GrpcGatewayRouteMatch",
    "GrpcGatewayRouteRewrite",
]
