"""Base abstractions for query contributors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

QueryPairs = list[tuple[str, str]]


class QueryContributor(ABC):
    """Interface for values that travel in a request's query string."""

    __slots__ = ()

    @abstractmethod
    def query_pairs(self) -> QueryPairs:
        """Return the parameters this value contributes, in order."""

    def contribute(self, params: Iterable[tuple[str, str]]) -> QueryPairs:
        """Return a new list with this value's parameters ahead of ``params``."""
        return [*self.query_pairs(), *params]
