"""Request-context helpers: scheme detection and URLs pointing back at this server."""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from fastapi import Request

from .config import Config


FORWARDED_PROTO_HEADER = Config.FORWARDED_PROTO_HEADER
FORWARDED_HOST_HEADER = "X-Forwarded-Host"


def _first_value(header_value: Optional[str]) -> Optional[str]:
    # Proxies append to comma separated lists; the first entry is the client-facing one
    if not header_value:
        return None
    return header_value.split(",", 1)[0].strip() or None


@dataclass(frozen=True)
class RequestContext:
    """The parts of an incoming request the helpers below read."""

    secure: bool
    protocol: str
    host: str
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)

    def get_header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @classmethod
    def from_request(
        cls,
        request: Request,
        trust_proxy: bool = False,
        proto_header: str = FORWARDED_PROTO_HEADER,
    ) -> "RequestContext":
        headers = request.headers
        if request.url.scheme in ("https", "wss"):
            protocol = "https"
        elif trust_proxy:
            protocol = _first_value(headers.get(proto_header)) or "http"
        else:
            protocol = "http"

        host = _first_value(headers.get(FORWARDED_HOST_HEADER)) if trust_proxy else None
        if not host:
            host = _first_value(headers.get("host")) or ""

        return cls(secure=protocol == "https", protocol=protocol, host=host, headers=headers)


@dataclass(frozen=True)
class Origin:
    protocol: str
    host: str


def check_http(ctx: RequestContext, header: str = FORWARDED_PROTO_HEADER) -> bool:
    """True if the client reached a proxy over plaintext http.

    Used as the trigger for upgrading the connection to https.
    """
    return not ctx.secure and ctx.get_header(header) == "http"


def check_https(ctx: RequestContext, header: str = FORWARDED_PROTO_HEADER) -> bool:
    return ctx.secure or ctx.get_header(header) == "https"


def origin(ctx: RequestContext, header: str = FORWARDED_PROTO_HEADER) -> Origin:
    """Get the server's own externally visible origin.

    Behind a TLS terminating load balancer the hop to this process is plain
    http, so the forwarded header decides the scheme.
    """
    return Origin(
        protocol="https" if check_https(ctx, header) else ctx.protocol,
        host=ctx.host,
    )


def url(server_origin: Origin, resource: Optional[str] = "") -> str:
    return f"{server_origin.protocol}://{server_origin.host}{resource or ''}"


def hkp_url(ctx: RequestContext, header: str = FORWARDED_PROTO_HEADER) -> str:
    """URL hkp clients use to reach this server, e.g. ``hkps://keys.example.org``."""
    return ("hkps://" if check_https(ctx, header) else "hkp://") + ctx.host
