"""Request descriptors for Graph API calls."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from urllib.parse import quote, urlencode

from .auth.tokens import AccessToken

GRAPH_API_HOST = "graph.facebook.com"
GRAPH_API_PORT = 443
MAX_REDIRECTS = 3


@dataclass(frozen=True, slots=True)
class GraphRequest:
    """Everything the transport needs to issue one Graph API call."""

    path: str
    query: tuple[tuple[str, str], ...] = ()
    method: str = "GET"
    host: str = GRAPH_API_HOST
    port: int = GRAPH_API_PORT
    secure: bool = True
    redirect_count: int = MAX_REDIRECTS

    @property
    def query_string(self) -> str:
        return urlencode(self.query, quote_via=quote)

    @property
    def url(self) -> str:
        scheme = "https" if self.secure else "http"
        default_port = 443 if self.secure else 80
        netloc = self.host if self.port == default_port else f"{self.host}:{self.port}"
        query_string = self.query_string
        suffix = f"?{query_string}" if query_string else ""
        return f"{scheme}://{netloc}{self.path}{suffix}"

    def with_method(self, method: str) -> GraphRequest:
        return replace(self, method=method.upper())

    def __repr__(self) -> str:
        # The query string carries tokens and secrets.
        keys = ",".join(key for key, _ in self.query)
        return f"GraphRequest(method={self.method!r}, path={self.path!r}, query_keys=[{keys}])"


def build_request(
    path: str,
    token: AccessToken | None = None,
    query: Iterable[tuple[str, str]] | None = None,
    *,
    method: str = "GET",
) -> GraphRequest:
    """Assemble a request for ``path`` on the Graph API.

    The token's ``access_token`` parameter, when given, precedes ``query``.
    Callers that authenticate with app `Credentials` instead contribute them
    to ``query`` before calling this.
    """

    pairs = list(query or ())
    if token is not None:
        pairs = token.contribute(pairs)
    normalized = path if path.startswith("/") else f"/{path}"
    return GraphRequest(path=normalized, query=tuple(pairs), method=method.upper())


__all__ = ["GraphRequest", "build_request", "GRAPH_API_HOST", "GRAPH_API_PORT", "MAX_REDIRECTS"]
