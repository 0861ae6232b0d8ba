"""gRPC composite match — host name, metadata, or service name as primary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from meshroute._compiled import GrpcRequestMatch
from meshroute._errors import MissingDiscriminantError

if TYPE_CHECKING:
    from meshroute._criteria import HostnameMatch, MetadataMatch
    from meshroute._types import BindingContext


@dataclass(frozen=True, slots=True)
class GrpcGatewayRouteMatch:
    """Criteria for selecting gRPC requests.

    INV: at least one of hostname, metadata, service_name is set. The
    ``from_*`` constructors guarantee it; bind() re-checks.
    """

    hostname: HostnameMatch | None = None
    metadata: tuple[MetadataMatch, ...] = ()
    service_name: str | None = None

    @classmethod
    def from_hostname(
        cls,
        hostname: HostnameMatch,
        *,
        metadata: Sequence[MetadataMatch] = (),
        service_name: str | None = None,
    ) -> Self:
        return cls(hostname=hostname, metadata=tuple(metadata), service_name=service_name)

    @classmethod
    def from_metadata(
        cls,
        metadata: Sequence[MetadataMatch],
        *,
        hostname: HostnameMatch | None = None,
        service_name: str | None = None,
    ) -> Self:
        return cls(hostname=hostname, metadata=tuple(metadata), service_name=service_name)

    @classmethod
    def from_service_name(
        cls,
        service_name: str,
        *,
        hostname: HostnameMatch | None = None,
        metadata: Sequence[MetadataMatch] = (),
    ) -> Self:
        return cls(hostname=hostname, metadata=tuple(metadata), service_name=service_name)

    def bind(self, _ctx: BindingContext) -> GrpcRequestMatch:
        """Resolve into the normalized match.

        Raises:
            MissingDiscriminantError: If hostname, metadata and service_name are all unset.
        """
        if self.hostname is None and not self.metadata and self.service_name is None:
            raise MissingDiscriminantError(type(self).__name__)
        return GrpcRequestMatch(
            hostname=self.hostname,
            metadata=tuple(self.metadata),
            service_name=self.service_name,
        )
