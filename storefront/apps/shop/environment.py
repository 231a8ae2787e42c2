"""Read-only snapshot of the request metadata the URL helpers consume."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from django.http import HttpRequest


def _freeze(values: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class RequestEnvironment:
    """
    Server variables and query parameters of a single request.

    ``meta`` uses WSGI naming (``HTTP_X_FORWARDED_HOST``, ``REMOTE_ADDR``);
    ``params`` holds the query string, last value winning for repeated keys.
    Both are copied on construction, so later changes to the source request
    don't leak in.
    """

    meta: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "meta", _freeze(self.meta))
        object.__setattr__(self, "params", _freeze(self.params))

    @classmethod
    def from_request(cls, request: HttpRequest) -> RequestEnvironment:
        meta = {key: value for key, value in request.META.items() if isinstance(value, str)}
        return cls(meta=meta, params=request.GET.dict())

    @staticmethod
    def header_key(name: str) -> str:
        """Map a header name (``X-Forwarded-Host``) to its WSGI key."""
        return "HTTP_" + name.upper().replace("-", "_")

    def header(self, name: str) -> str | None:
        return self.meta.get(self.header_key(name))

    def server(self, name: str) -> str | None:
        return self.meta.get(name)

    def param(self, name: str) -> str | None:
        return self.params.get(name)

    def current_host(
        self,
        use_ssl: bool = False,
        allow_proxy_headers: bool = True,
        lowercase: bool = False,
    ) -> str:
        """
        Return the host the client addressed, without port.

        The forwarded host is taken verbatim (no list splitting) when proxy
        headers are allowed. ``use_ssl`` prefixes ``https://``.
        """
        host = None
        if allow_proxy_headers:
            host = self.header("X-Forwarded-Host")
        if not host:
            host = self.header("Host") or self.server("SERVER_NAME") or ""

        host = host.partition(":")[0]
        if lowercase:
            host = host.lower()
        if use_ssl:
            host = f"https://{host}"
        return host
