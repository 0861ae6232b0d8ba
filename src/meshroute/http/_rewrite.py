"""HTTP rewrite — host name toggle plus an optional path-or-prefix rewrite.

The builder does not know which match it will be paired with, so pairing
rules (prefix rewrite needs a prefix match, path rewrite forbids one) are
checked by the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from meshroute._compiled import (
    HostnameRewrite,
    HttpRewriteConfig,
    PathRewrite,
    PrefixRewrite,
)
from meshroute._errors import AmbiguousDiscriminantError, MissingDiscriminantError

if TYPE_CHECKING:
    from meshroute._types import BindingContext, Default


type PathOrPrefixRewrite = PathRewrite | PrefixRewrite


@dataclass(frozen=True, slots=True)
class HttpGatewayRouteRewrite:
    """Rewrite applied to HTTP and HTTP/2 requests before forwarding."""

    hostname: HostnameRewrite | None = None
    path_or_prefix: PathOrPrefixRewrite | None = None

    @classmethod
    def default_hostname(
        cls, default: Default, *, path_or_prefix: PathOrPrefixRewrite | None = None
    ) -> Self:
        return cls(hostname=HostnameRewrite(default), path_or_prefix=path_or_prefix)

    @classmethod
    def path(cls, exact: str, *, default_target_hostname: Default | None = None) -> Self:
        return cls(
            hostname=_hostname_rewrite(default_target_hostname),
            path_or_prefix=PathRewrite(exact),
        )

    @classmethod
    def default_prefix(
        cls, default: Default, *, default_target_hostname: Default | None = None
    ) -> Self:
        return cls(
            hostname=_hostname_rewrite(default_target_hostname),
            path_or_prefix=PrefixRewrite.default(default),
        )

    @classmethod
    def custom_prefix(
        cls, value: str, *, default_target_hostname: Default | None = None
    ) -> Self:
        return cls(
            hostname=_hostname_rewrite(default_target_hostname),
            path_or_prefix=PrefixRewrite.custom(value),
        )

    def bind(self, _ctx: BindingContext) -> HttpRewriteConfig:
        """Resolve into the {hostname?, path?, prefix?} shape.

        Raises:
            MissingDiscriminantError: If neither host name nor path/prefix is set,
                or a prefix rewrite has neither default_prefix nor value.
            AmbiguousDiscriminantError: If a prefix rewrite sets both.
        """
        match self.path_or_prefix:
            case PathRewrite():
                path, prefix = self.path_or_prefix, None
            case PrefixRewrite():
                path, prefix = None, _checked_prefix_rewrite(self.path_or_prefix)
            case None:
                if self.hostname is None:
                    raise MissingDiscriminantError(type(self).__name__)
                path, prefix = None, None
            case _:
                msg = f"unknown path_or_prefix type: {type(self.path_or_prefix).__name__}"
                raise TypeError(msg)
        return HttpRewriteConfig(hostname=self.hostname, path=path, prefix=prefix)


def _hostname_rewrite(default: Default | None) -> HostnameRewrite | None:
    return HostnameRewrite(default) if default is not None else None


def _checked_prefix_rewrite(rewrite: PrefixRewrite) -> PrefixRewrite:
    has_default = rewrite.default_prefix is not None
    has_value = rewrite.value is not None
    if has_default and has_value:
        raise AmbiguousDiscriminantError(type(rewrite).__name__, ("default_prefix", "value"))
    if not has_default and not has_value:
        raise MissingDiscriminantError(type(rewrite).__name__)
    return rewrite
