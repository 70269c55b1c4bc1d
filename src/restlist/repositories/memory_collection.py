"""In-memory and JSON-file collections with a Mongo-style query subset."""

import copy
import json
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from src.restlist.repositories.interfaces import (
    CollectionModelInterface,
    SearchableCollectionInterface,
)

logger = logging.getLogger(__name__)


class InMemoryCollection(CollectionModelInterface, SearchableCollectionInterface):
    """Collection holding its records in a list.

    Supports the predicate shapes list routes emit: plain equality,
    top-level ``$or``, ``{"$regex": ..., "$options": ...}`` conditions and
    compiled ``re.Pattern`` values. Projection follows MongoDB rules
    (``_id`` is kept unless explicitly excluded). Query options honour
    ``order`` (list of ``{field, direction}``), ``skip`` and ``limit``.

    Stored records are never handed out directly; ``find`` returns copies.
    """

    def __init__(
        self,
        model_name: str,
        records: Iterable[Mapping[str, Any]] = (),
        searchable_fields: Sequence[str] | None = None,
    ) -> None:
        """Initialize collection.

        Args:
            model_name: Identifying name used in diagnostics
            records: Initial records
            searchable_fields: Fields eligible for substring filtering
        """
        self.model_name = model_name
        self._records: list[dict[str, Any]] = [dict(r) for r in records]
        self._searchable = list(searchable_fields or [])

    def searchable(self) -> list[str]:
        """Return the field names eligible for substring filtering."""
        return list(self._searchable)

    def __len__(self) -> int:
        return len(self._records)

    async def find(
        self,
        predicate: Mapping[str, Any],
        fields: Mapping[str, Any],
        query_options: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        """Fetch every record matching a predicate.

        Args:
            predicate: Filter conditions
            fields: Projection mapping field names to 0/1
            query_options: ``order``, ``skip`` and ``limit`` directives

        Returns:
            Projected copies of the matching records

        Raises:
            re.error: If a ``$regex`` condition is not a valid pattern
            TypeError: If the sort field holds values that cannot be compared
        """
        matched = [r for r in self._records if _matches(r, predicate)]

        for order in reversed(query_options.get("order") or []):
            matched = _sort_records(matched, order)

        skip = int(query_options.get("skip") or 0)
        if skip > 0:
            matched = matched[skip:]
        limit = int(query_options.get("limit") or 0)
        if limit > 0:
            matched = matched[:limit]

        return [_project(r, fields) for r in matched]


class JsonFileCollection(InMemoryCollection):
    """Collection loaded once from a JSON array of records on disk."""

    def __init__(
        self,
        path: Path,
        model_name: str,
        searchable_fields: Sequence[str] | None = None,
    ) -> None:
        """Load records from ``path``.

        Args:
            path: JSON file containing a list of objects
            model_name: Identifying name used in diagnostics
            searchable_fields: Fields eligible for substring filtering

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not hold a JSON array of objects
        """
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
            raise ValueError(f"{path} must contain a JSON array of objects")

        super().__init__(model_name, raw, searchable_fields)
        self.path = path
        logger.info("Loaded %d %s records from %s", len(raw), model_name, path)


def _matches(record: Mapping[str, Any], predicate: Mapping[str, Any]) -> bool:
    """Check a record against a predicate (all conditions must hold)."""
    for key, condition in predicate.items():
        if key == "$or":
            if not any(_matches(record, branch) for branch in condition):
                return False
        elif not _matches_condition(record.get(key), condition):
            return False
    return True


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, re.Pattern):
        return isinstance(value, str) and condition.search(value) is not None

    if isinstance(condition, Mapping) and "$regex" in condition:
        if not isinstance(value, str):
            return False
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        return re.search(condition["$regex"], value, flags) is not None

    return value == condition


def _sort_records(
    records: list[dict[str, Any]], order: Mapping[str, Any]
) -> list[dict[str, Any]]:
    """Stable sort on one field; records missing the field sort last."""
    field = order.get("field", "_id")
    descending = str(order.get("direction", "ASC")).upper() != "ASC"

    present = [r for r in records if r.get(field) is not None]
    missing = [r for r in records if r.get(field) is None]
    present.sort(key=lambda r: r[field], reverse=descending)
    return present + missing


def _project(record: Mapping[str, Any], fields: Mapping[str, Any]) -> dict[str, Any]:
    """Apply a MongoDB-style inclusion or exclusion projection."""
    if not fields:
        return copy.deepcopy(dict(record))

    included = [f for f, flag in fields.items() if flag and f != "_id"]
    if included:
        keep = set(included)
        if fields.get("_id", 1):
            keep.add("_id")
        return {k: copy.deepcopy(v) for k, v in record.items() if k in keep}

    excluded = {f for f, flag in fields.items() if not flag}
    return {k: copy.deepcopy(v) for k, v in record.items() if k not in excluded}
