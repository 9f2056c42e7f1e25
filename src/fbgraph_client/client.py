"""High-level Facebook Graph API client."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from datetime import datetime, timedelta, timezone
from typing import Any, Union

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.credentials import Credentials
from .auth.tokens import AccessToken, AppAccessToken
from .config import ClientConfig
from .exceptions import ConfigurationError
from .http import execute
from .request import GraphRequest, build_request
from .resources import ObjectsResource, OpenGraphResource
from .response import Decoder, check_response, parse_response
from .simple_types import encode_simple

logger = logging.getLogger(__name__)

QueryInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


class GraphClient:
    """Call the Graph API with a user token, an app token, or app credentials."""

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        app_namespace: str | None = None,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.credentials = credentials
        self.config = ClientConfig(
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
            app_namespace=app_namespace,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.objects = ObjectsResource(self)
        self.opengraph = OpenGraphResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> GraphClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        token: AccessToken | None = None,
        query: QueryInput = None,
        decoder: Decoder | None = None,
        with_credentials: bool = False,
    ) -> Any:
        """Call ``path`` and return the decoded JSON body.

        Raises `FacebookException` when Facebook reports an error,
        `StatusCodeError` for other failures and `UnexpectedResponseError`
        when a successful body cannot be decoded. ``with_credentials`` sends
        the app credentials instead of a token and cannot be combined with
        ``token``.
        """

        graph_request = self._build(method, path, token=token, query=query, with_credentials=with_credentials)
        response = self._send(graph_request, token)
        return parse_response(response, decoder)

    def check(self, path: str, *, token: AccessToken | None = None, query: QueryInput = None) -> bool:
        """Send a HEAD request and report whether the status was 2xx."""

        graph_request = self._build("GET", path, token=token, query=query).with_method("HEAD")
        return check_response(self._send(graph_request, token))

    def get_app_access_token(self) -> AppAccessToken:
        """Exchange the configured credentials for an app access token."""

        payload = self.request(
            "GET",
            "/oauth/access_token",
            query=[("grant_type", "client_credentials")],
            decoder=_decode_token_payload,
            with_credentials=True,
        )
        token, expires_in = payload
        expires = None
        if expires_in is not None:
            expires = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return AppAccessToken(token=token, expires=expires)

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _build(
        self,
        method: str,
        path: str,
        *,
        token: AccessToken | None,
        query: QueryInput,
        with_credentials: bool = False,
    ) -> GraphRequest:
        pairs = self._prepare_query(query)
        if with_credentials:
            if token is not None:
                raise ConfigurationError("Pass either token= or with_credentials=True, not both")
            pairs = self._require_credentials().contribute(pairs)
        return build_request(path, token, pairs, method=method)

    def _send(self, graph_request: GraphRequest, token: AccessToken | None) -> requests.Response:
        self._log_request(graph_request, token)
        return execute(
            self._session,
            graph_request,
            headers=self._prepare_headers(),
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )

    def _prepare_headers(self) -> MutableMapping[str, str]:
        return self.config.resolved_headers()

    @staticmethod
    def _prepare_query(query: QueryInput) -> list[tuple[str, str]]:
        if query is None:
            return []
        items = query.items() if isinstance(query, Mapping) else query
        return [(key, value if isinstance(value, str) else encode_simple(value)) for key, value in items]

    def _require_credentials(self) -> Credentials:
        if self.credentials is None:
            raise ConfigurationError("This call needs app credentials; pass credentials= to GraphClient")
        return self.credentials

    def _log_request(self, graph_request: GraphRequest, token: AccessToken | None) -> None:
        logger.info(
            "Graph API request %s %s (token=%s)",
            graph_request.method,
            graph_request.path,
            token.kind if token is not None else "none",
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)


def _decode_token_payload(payload: Any) -> tuple[str, int | None]:
    if not isinstance(payload, Mapping):
        raise ValueError("Token response must be a JSON object")
    token = payload["access_token"]
    if not isinstance(token, str) or not token:
        raise ValueError("access_token must be a non-empty string")
    expires_in = payload.get("expires_in")
    return token, int(expires_in) if expires_in is not None else None
