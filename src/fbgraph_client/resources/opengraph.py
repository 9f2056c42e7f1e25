"""Open Graph actions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..auth.tokens import UserAccessToken
from ..exceptions import ConfigurationError
from ..simple_types import Argument
from .base import ResourceBase, decode_id

_ACTION_PATTERN = re.compile(r"[A-Za-z0-9_.\-]+")


@dataclass(frozen=True, slots=True)
class Action:
    """Name of an action defined by your app, e.g. ``Action("cook")``.

    Only ASCII letters, digits, ``_``, ``.`` and ``-`` are allowed.

    See https://developers.facebook.com/docs/opengraph/keyconcepts/#actions-objects
    """

    name: str

    def __post_init__(self) -> None:
        if not _ACTION_PATTERN.fullmatch(self.name):
            raise ValueError(f"Invalid Open Graph action name: {self.name!r}")

    def __str__(self) -> str:
        return self.name


class OpenGraphResource(ResourceBase):
    """Publish Open Graph actions on a user's timeline."""

    def create_action(
        self,
        action: Action | str,
        arguments: Iterable[Argument],
        token: UserAccessToken,
    ) -> str:
        """Create an action and return the id Facebook assigned to it.

        Example::

            now = datetime.now(timezone.utc)
            client.opengraph.create_action(
                "cook",
                [arg("recipe", "http://example.com/cookie.html"), arg("when", now)],
                token,
            )
        """
        if not isinstance(token, UserAccessToken):
            raise TypeError("Open Graph actions must be created with a UserAccessToken")
        namespace = self._client.config.app_namespace
        if not namespace:
            raise ConfigurationError("Creating actions needs app_namespace on GraphClient")
        action = action if isinstance(action, Action) else Action(action)
        return self._post(f"/me/{namespace}:{action}", arguments, token=token, decoder=decode_id)
