"""Tests for the gRPC composite match builder."""

from __future__ import annotations

import pytest

from meshroute import (
    GrpcGatewayRouteMatch,
    GrpcRequestMatch,
    HostnameMatch,
    MetadataMatch,
    MissingDiscriminantError,
)

HOST = HostnameMatch.matching_exactly("grpc.example.com")
META = MetadataMatch.value_is_not("x-tenant", "internal")


class TestEntryPoints:
    def test_from_hostname(self) -> None:
        m = GrpcGatewayRouteMatch.from_hostname(HOST, service_name="billing.v1")
        assert m.hostname == HOST
        assert m.service_name == "billing.v1"
        assert m.metadata == ()

    def test_from_metadata(self) -> None:
        m = GrpcGatewayRouteMatch.from_metadata([META], hostname=HOST)
        assert m.metadata == (META,)
        assert m.hostname == HOST

    def test_from_service_name(self) -> None:
        m = GrpcGatewayRouteMatch.from_service_name("billing.v1", metadata=[META])
        assert m.service_name == "billing.v1"
        assert m.metadata == (META,)

    def test_entry_points_converge(self) -> None:
        a = GrpcGatewayRouteMatch.from_service_name("s", hostname=HOST)
        b = GrpcGatewayRouteMatch.from_hostname(HOST, service_name="s")
        assert a == b


class TestBind:
    def test_bind(self) -> None:
        bound = GrpcGatewayRouteMatch.from_metadata([META], service_name="svc").bind(None)
        assert bound == GrpcRequestMatch(metadata=(META,), service_name="svc")

    def test_empty_match_raises(self) -> None:
        with pytest.raises(MissingDiscriminantError):
            GrpcGatewayRouteMatch().bind(None)

    def test_empty_metadata_alone_is_not_a_discriminant(self) -> None:
        with pytest.raises(MissingDiscriminantError):
            GrpcGatewayRouteMatch.from_metadata([]).bind(None)

    def test_to_dict(self) -> None:
        bound = GrpcGatewayRouteMatch.from_service_name(
            "billing.v1", hostname=HOST, metadata=[META]
        ).bind(None)
        assert bound.to_dict() == {
            "hostname": {"exact": "grpc.example.com"},
            "metadata": [{"name": "x-tenant", "invert": True, "match": {"exact": "internal"}}],
            "serviceName": "billing.v1",
        }

    def test_to_dict_omits_absent(self) -> None:
        bound = GrpcGatewayRouteMatch.from_service_name("svc").bind(None)
        assert bound.to_dict() == {"serviceName": "svc"}
