"""Abstract base classes for collection model interfaces.

Defines the contract a data-model collection must fulfill to back a
generated list route. Route handlers depend on these interfaces (not
concrete stores) so any async client exposing ``find`` fits, and tests
can substitute in-memory doubles.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any


class CollectionModelInterface(ABC):
    """Abstract interface for a queryable record collection.

    Mirrors the find-with-conditions/fields/options capability of
    document stores such as MongoDB.
    """

    model_name: str = "Collection"

    @abstractmethod
    async def find(
        self,
        predicate: Mapping[str, Any],
        fields: Mapping[str, Any],
        query_options: Mapping[str, Any],
    ) -> Sequence[dict[str, Any]]:
        """Fetch every record matching a predicate.

        Args:
            predicate: Filter conditions (equality, ``$or``, ``$regex``)
            fields: Projection mapping field names to 0/1
            query_options: Extra directives such as ``order`` or ``skip``

        Returns:
            Matching records, in store order
        """
        ...


class SearchableCollectionInterface(ABC):
    """Declares which fields a collection allows substring filtering on.

    ``searchable`` is the default capability name looked up by list
    routes; the name can be changed process-wide via ``configure``.
    """

    @abstractmethod
    def searchable(self) -> list[str]:
        """Return the field names eligible for ``?filter=`` matching."""
        ...
