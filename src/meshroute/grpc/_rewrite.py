"""gRPC rewrite. Only host name rewriting is legal for gRPC routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from meshroute._compiled import GrpcRewriteConfig, HostnameRewrite
from meshroute._errors import MissingDiscriminantError

if TYPE_CHECKING:
    from meshroute._types import BindingContext, Default


@dataclass(frozen=True, slots=True)
class GrpcGatewayRouteRewrite:
    """Rewrite applied to gRPC requests before forwarding."""

    hostname: HostnameRewrite | None = None

    @classmethod
    def default_hostname(cls, default: Default) -> Self:
        return cls(hostname=HostnameRewrite(default))

    def bind(self, _ctx: BindingContext) -> GrpcRewriteConfig:
        if self.hostname is None:
            raise MissingDiscriminantError(type(self).__name__)
        return GrpcRewriteConfig(hostname=self.hostname)
