"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..auth.tokens import AccessToken
    from ..client import GraphClient
    from ..response import Decoder


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: GraphClient) -> None:
        self._client = client

    def _get(
        self,
        path: str,
        *,
        token: AccessToken | None = None,
        query: Iterable[tuple[str, Any]] | None = None,
        decoder: Decoder | None = None,
    ) -> Any:
        return self._client.request("GET", path, token=token, query=query, decoder=decoder)

    def _post(
        self,
        path: str,
        query: Iterable[tuple[str, Any]],
        *,
        token: AccessToken,
        decoder: Decoder | None = None,
    ) -> Any:
        return self._client.request("POST", path, token=token, query=query, decoder=decoder)

    def _delete(self, path: str, *, token: AccessToken, decoder: Decoder | None = None) -> Any:
        return self._client.request("DELETE", path, token=token, decoder=decoder)


def decode_id(payload: Any) -> str:
    """Pull the ``id`` out of a creation response."""

    if not isinstance(payload, dict):
        raise ValueError("Expected a JSON object with an 'id'")
    object_id = payload["id"]
    if isinstance(object_id, int) and not isinstance(object_id, bool):
        return str(object_id)
    if not isinstance(object_id, str) or not object_id:
        raise ValueError("'id' must be a non-empty string")
    return object_id


def decode_success(payload: Any) -> bool:
    """Accept both ``true`` and ``{"success": true}`` bodies."""

    if isinstance(payload, bool):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("success"), bool):
        return payload["success"]
    raise ValueError("Expected true/false or an object with a boolean 'success'")
