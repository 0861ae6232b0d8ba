"""Tests for HTTP and gRPC rewrite builders."""

from __future__ import annotations

import pytest

from meshroute import (
    AmbiguousDiscriminantError,
    Default,
    GrpcGatewayRouteRewrite,
    GrpcRewriteConfig,
    HostnameRewrite,
    HttpGatewayRouteRewrite,
    HttpRewriteConfig,
    MissingDiscriminantError,
    PathRewrite,
    PrefixRewrite,
)


class TestHttpRewrite:
    def test_default_hostname_only(self) -> None:
        bound = HttpGatewayRouteRewrite.default_hostname(Default.DISABLED).bind(None)
        assert bound == HttpRewriteConfig(hostname=HostnameRewrite(Default.DISABLED))

    def test_default_hostname_with_path(self) -> None:
        bound = HttpGatewayRouteRewrite.default_hostname(
            Default.ENABLED, path_or_prefix=PathRewrite("/check")
        ).bind(None)
        assert bound.hostname == HostnameRewrite(Default.ENABLED)
        assert bound.path == PathRewrite("/check")
        assert bound.prefix is None

    def test_default_hostname_with_prefix(self) -> None:
        bound = HttpGatewayRouteRewrite.default_hostname(
            Default.ENABLED, path_or_prefix=PrefixRewrite.custom("/v2")
        ).bind(None)
        assert bound.prefix == PrefixRewrite(value="/v2")
        assert bound.path is None

    def test_path(self) -> None:
        bound = HttpGatewayRouteRewrite.path("/check").bind(None)
        assert bound == HttpRewriteConfig(path=PathRewrite("/check"))

    def test_path_with_hostname(self) -> None:
        bound = HttpGatewayRouteRewrite.path(
            "/check", default_target_hostname=Default.DISABLED
        ).bind(None)
        assert bound.hostname == HostnameRewrite(Default.DISABLED)

    def test_default_prefix(self) -> None:
        bound = HttpGatewayRouteRewrite.default_prefix(Default.ENABLED).bind(None)
        assert bound.prefix == PrefixRewrite(default_prefix=Default.ENABLED)
        assert bound.hostname is None

    def test_custom_prefix(self) -> None:
        bound = HttpGatewayRouteRewrite.custom_prefix(
            "/v2", default_target_hostname=Default.ENABLED
        ).bind(None)
        assert bound.prefix is not None
        assert bound.prefix.value == "/v2"
        assert bound.hostname == HostnameRewrite(Default.ENABLED)

    def test_empty_raises(self) -> None:
        with pytest.raises(MissingDiscriminantError) as exc:
            HttpGatewayRouteRewrite().bind(None)
        assert exc.value.component == "HttpGatewayRouteRewrite"

    def test_empty_prefix_rewrite_raises(self) -> None:
        rewrite = HttpGatewayRouteRewrite(path_or_prefix=PrefixRewrite())
        with pytest.raises(MissingDiscriminantError) as exc:
            rewrite.bind(None)
        assert exc.value.component == "PrefixRewrite"

    def test_prefix_rewrite_with_default_and_value_raises(self) -> None:
        rewrite = HttpGatewayRouteRewrite.default_hostname(
            Default.ENABLED,
            path_or_prefix=PrefixRewrite(default_prefix=Default.ENABLED, value="/v2"),
        )
        with pytest.raises(AmbiguousDiscriminantError) as exc:
            rewrite.bind(None)
        assert exc.value.component == "PrefixRewrite"
        assert exc.value.fields == ("default_prefix", "value")

    def test_to_dict(self) -> None:
        bound = HttpGatewayRouteRewrite.default_prefix(
            Default.DISABLED, default_target_hostname=Default.ENABLED
        ).bind(None)
        assert bound.to_dict() == {
            "hostname": {"defaultTargetHostname": "enabled"},
            "prefix": {"defaultPrefix": "disabled"},
        }

    def test_path_to_dict(self) -> None:
        bound = HttpGatewayRouteRewrite.path("/check").bind(None)
        assert bound.to_dict() == {"path": {"exact": "/check"}}


class TestGrpcRewrite:
    def test_default_hostname(self) -> None:
        bound = GrpcGatewayRouteRewrite.default_hostname(Default.DISABLED).bind(None)
        assert bound == GrpcRewriteConfig(hostname=HostnameRewrite(Default.DISABLED))
        assert bound.to_dict() == {"hostname": {"defaultTargetHostname": "disabled"}}

    def test_empty_raises(self) -> None:
        with pytest.raises(MissingDiscriminantError):
            GrpcGatewayRouteRewrite().bind(None)
