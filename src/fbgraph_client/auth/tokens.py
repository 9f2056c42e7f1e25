"""User and app access tokens.

There are two kinds of access tokens:

* `UserAccessToken` is obtained after a user accepts your application. It
  grants access to more information about that user and lets the app act on
  their behalf, depending on the permissions requested.
* `AppAccessToken` allows administrative actions for the application.

Operations that need a particular kind annotate it, and check it with
``isinstance`` where acting with the wrong kind would be harmful.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar

from .base import QueryContributor, QueryPairs


@dataclass(frozen=True, slots=True)
class AccessToken(QueryContributor):
    """An access token; instantiate `UserAccessToken` or `AppAccessToken`."""

    kind: ClassVar[str] = ""

    token: str = field(repr=False)
    expires: datetime | None = None

    def __post_init__(self) -> None:
        if not self.kind:
            raise TypeError("Use UserAccessToken or AppAccessToken instead of AccessToken")

    def query_pairs(self) -> QueryPairs:
        return [("access_token", self.token)]

    def is_expired(self, now: datetime | None = None) -> bool:
        """Report whether ``expires`` lies in the past. Tokens without one never expire."""

        if self.expires is None:
            return False
        current = now or datetime.now(timezone.utc)
        return _as_utc(self.expires) <= _as_utc(current)


@dataclass(frozen=True, slots=True)
class UserAccessToken(AccessToken):
    """Token scoped to an authenticated user."""

    kind: ClassVar[str] = "user"


@dataclass(frozen=True, slots=True)
class AppAccessToken(AccessToken):
    """Token scoped to the application."""

    kind: ClassVar[str] = "app"


def _as_utc(value: datetime) -> datetime:
    if value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
