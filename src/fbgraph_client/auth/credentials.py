"""Application credentials."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import QueryContributor, QueryPairs


@dataclass(frozen=True, slots=True)
class Credentials(QueryContributor):
    """The application id and secret issued when registering an app on Facebook."""

    client_id: str
    client_secret: str = field(repr=False)

    def query_pairs(self) -> QueryPairs:
        return [("client_id", self.client_id), ("client_secret", self.client_secret)]
