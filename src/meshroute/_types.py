"""Core enums and protocols for meshroute.

- Protocol selects which of the three output slots a spec compiles into
- Method and Default are the closed vocabularies the control plane accepts
- ServiceReference is the port through which a route names its destination
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol as _Protocol, runtime_checkable

# The binding context belongs to the hosting framework. meshroute never
# inspects it, only hands it down through every bind() call.
type BindingContext = Any


class Protocol(Enum):
    """Listener protocol of a gateway route."""

    HTTP = "http"
    HTTP2 = "http2"
    GRPC = "grpc"


class Method(Enum):
    """HTTP methods a gateway route can match on."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class Default(Enum):
    """Toggle for the control plane's default rewrite behavior."""

    ENABLED = "enabled"
    DISABLED = "disabled"


@runtime_checkable
class ServiceReference(_Protocol):
    """A downstream service a route forwards to.

    Resolution of the name belongs to the service registry. meshroute only
    copies the name into the compiled target.
    """

    @property
    def virtual_service_name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class VirtualServiceRef:
    """Plain value implementation of ServiceReference."""

    virtual_service_name: str
