"""HTTP transport for Graph API requests."""

from __future__ import annotations

from collections.abc import Mapping

from requests import Response, Session

from .request import GraphRequest


def execute(
    session: Session,
    request: GraphRequest,
    *,
    headers: Mapping[str, str] | None = None,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> Response:
    """Send ``request`` and return the response with its body still streaming.

    Status codes are not checked here; hand the response to
    `response.interpret` or `response.check_response`, which close it.
    The session follows at most ``request.redirect_count`` redirects.
    Network failures propagate as `requests.RequestException`.
    """

    session.max_redirects = request.redirect_count
    return session.request(
        method=request.method,
        url=request.url,
        headers=dict(headers or {}),
        timeout=timeout,
        verify=verify,
        allow_redirects=request.redirect_count > 0,
        stream=True,
    )

