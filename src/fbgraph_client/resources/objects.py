"""Graph object helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..auth.tokens import AccessToken
from ..response import Decoder
from ..simple_types import Argument
from .base import ResourceBase, decode_id, decode_success


class ObjectsResource(ResourceBase):
    """Read, create and delete objects in the graph."""

    def get(
        self,
        object_id: str,
        *,
        token: AccessToken | None = None,
        fields: Sequence[str] | None = None,
        decoder: Decoder | None = None,
    ) -> Any:
        """Fetch an object, optionally limited to ``fields``.

        Args:
            object_id: The object's id, or ``me`` with a user token.
            token: Token to act with; public objects need none.
            fields: Field names to request instead of the defaults.
            decoder: Callable turning the JSON object into the caller's type.
        """
        query = [("fields", ",".join(fields))] if fields else None
        return self._get(f"/{object_id}", token=token, query=query, decoder=decoder)

    def post(self, path: str, arguments: Iterable[Argument], *, token: AccessToken) -> str:
        """Create an object under ``path`` and return its id."""
        return self._post(path, arguments, token=token, decoder=decode_id)

    def delete(self, object_id: str, *, token: AccessToken) -> bool:
        return self._delete(f"/{object_id}", token=token, decoder=decode_success)

    def exists(self, object_id: str, *, token: AccessToken | None = None) -> bool:
        return self._client.check(f"/{object_id}", token=token)
