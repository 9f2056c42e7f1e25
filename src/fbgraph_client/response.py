"""Interpretation of Graph API responses into values or typed errors."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import closing
from dataclasses import dataclass
from typing import Any

from requests import Response

from .exceptions import (
    FacebookException,
    GraphError,
    HeaderParseError,
    StatusCodeError,
    UnexpectedResponseError,
)
from .www_authenticate import parse_www_authenticate

Decoder = Callable[[Any], Any]


@dataclass(slots=True)
class GraphResponse:
    """Decoded response envelope."""

    status_code: int
    headers: Mapping[str, str]
    data: Any


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def interpret(response: Response, decoder: Decoder | None = None) -> GraphResponse:
    """Decode a successful response or raise the error it describes.

    The response is closed whatever the outcome.
    """

    with closing(response):
        if not is_success(response.status_code):
            raise _failure(response)
        data = _decode_json(response, decoder)
        return GraphResponse(status_code=response.status_code, headers=response.headers, data=data)


def parse_response(response: Response, decoder: Decoder | None = None) -> Any:
    """Same as `interpret`, returning only the decoded body."""

    return interpret(response, decoder).data


def check_response(response: Response) -> bool:
    """Report whether the status is 2xx; the body is closed unread."""

    with closing(response):
        return is_success(response.status_code)


def _decode_json(response: Response, decoder: Decoder | None) -> Any:
    try:
        value = response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            "Response did not contain valid JSON",
            status_code=response.status_code,
            headers=response.headers,
            details=str(exc),
        ) from exc
    if decoder is None:
        return value
    try:
        return decoder(value)
    except (ValueError, TypeError, LookupError, AttributeError) as exc:
        raise UnexpectedResponseError(
            "Response JSON did not have the expected shape",
            status_code=response.status_code,
            headers=response.headers,
            details=str(exc),
        ) from exc


def _failure(response: Response) -> GraphError:
    for attempt in (_exception_from_body, _exception_from_header):
        exc = attempt(response)
        if exc is not None:
            return exc
    return StatusCodeError(response.status_code, response.headers)


def _exception_from_body(response: Response) -> FacebookException | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    try:
        return FacebookException.from_json(payload, status_code=response.status_code)
    except ValueError:
        return None


def _exception_from_header(response: Response) -> FacebookException | None:
    header = response.headers.get("WWW-Authenticate")
    if header is None:
        return None
    try:
        return parse_www_authenticate(header, status_code=response.status_code)
    except HeaderParseError:
        return None


__all__ = ["GraphResponse", "Decoder", "interpret", "parse_response", "check_response", "is_success"]
