"""Tests for the in-memory and JSON-file collections."""

import json
import re
from pathlib import Path

import pytest

from src.restlist.repositories.memory_collection import (
    InMemoryCollection,
    JsonFileCollection,
)

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def items() -> InMemoryCollection:
    return InMemoryCollection(
        "Items",
        json.loads((FIXTURES / "items.json").read_text(encoding="utf-8")),
        searchable_fields=["label", "description"],
    )


class TestInMemoryCollectionFind:
    """Tests for InMemoryCollection.find() predicate evaluation."""

    @pytest.mark.asyncio
    async def test_empty_predicate_matches_all(self, items: InMemoryCollection) -> None:
        assert len(await items.find({}, {}, {})) == 3

    @pytest.mark.asyncio
    async def test_equality(self, items: InMemoryCollection) -> None:
        results = await items.find({"enabled": True}, {}, {})
        assert {r["_id"] for r in results} == {"1", "3"}

    @pytest.mark.asyncio
    async def test_or_of_regex_branches(self, items: InMemoryCollection) -> None:
        predicate = {
            "$or": [
                {"enabled": True, "label": {"$regex": "lorem"}},
                {"enabled": True, "description": {"$regex": "lorem"}},
            ]
        }
        results = await items.find(predicate, {}, {})
        assert [r["_id"] for r in results] == ["1"]

    @pytest.mark.asyncio
    async def test_regex_is_case_sensitive(self, items: InMemoryCollection) -> None:
        results = await items.find({"label": {"$regex": "lorem"}}, {}, {})
        assert results == []

    @pytest.mark.asyncio
    async def test_regex_options_ignore_case(self, items: InMemoryCollection) -> None:
        results = await items.find(
            {"label": {"$regex": "lorem", "$options": "i"}}, {}, {}
        )
        assert [r["_id"] for r in results] == ["1"]

    @pytest.mark.asyncio
    async def test_compiled_pattern(self, items: InMemoryCollection) -> None:
        results = await items.find({"label": re.compile("^Am")}, {}, {})
        assert [r["_id"] for r in results] == ["3"]

    @pytest.mark.asyncio
    async def test_regex_on_non_string_does_not_match(
        self, items: InMemoryCollection
    ) -> None:
        assert await items.find({"enabled": {"$regex": "True"}}, {}, {}) == []

    @pytest.mark.asyncio
    async def test_empty_or_matches_nothing(self, items: InMemoryCollection) -> None:
        assert await items.find({"$or": []}, {}, {}) == []

    @pytest.mark.asyncio
    async def test_invalid_regex_raises(self, items: InMemoryCollection) -> None:
        with pytest.raises(re.error):
            await items.find({"label": {"$regex": "("}}, {}, {})


class TestInMemoryCollectionShaping:
    """Tests for projection, ordering, skip and limit."""

    @pytest.mark.asyncio
    async def test_inclusion_projection_keeps_id(
        self, items: InMemoryCollection
    ) -> None:
        results = await items.find({}, {"label": 1}, {})
        assert all(set(r) == {"_id", "label"} for r in results)

    @pytest.mark.asyncio
    async def test_inclusion_projection_can_drop_id(
        self, items: InMemoryCollection
    ) -> None:
        results = await items.find({}, {"label": 1, "_id": 0}, {})
        assert all(set(r) == {"label"} for r in results)

    @pytest.mark.asyncio
    async def test_exclusion_projection(self, items: InMemoryCollection) -> None:
        results = await items.find({}, {"ean13": 0, "ref": 0}, {})
        assert all("ean13" not in r and "ref" not in r and "label" in r for r in results)

    @pytest.mark.asyncio
    async def test_order_descending(self, items: InMemoryCollection) -> None:
        results = await items.find(
            {}, {}, {"order": [{"field": "_id", "direction": "DESC"}]}
        )
        assert [r["_id"] for r in results] == ["3", "2", "1"]

    @pytest.mark.asyncio
    async def test_order_ascending_is_case_insensitive(
        self, items: InMemoryCollection
    ) -> None:
        results = await items.find(
            {}, {}, {"order": [{"field": "label", "direction": "asc"}]}
        )
        assert [r["label"] for r in results] == ["Amet", "Dolor sit", "Lorem ipsum"]

    @pytest.mark.asyncio
    async def test_missing_sort_field_sorts_last(self) -> None:
        collection = InMemoryCollection(
            "Things", [{"_id": "a"}, {"_id": "b", "rank": 2}, {"_id": "c", "rank": 1}]
        )
        results = await collection.find(
            {}, {}, {"order": [{"field": "rank", "direction": "ASC"}]}
        )
        assert [r["_id"] for r in results] == ["c", "b", "a"]

    @pytest.mark.asyncio
    async def test_skip_and_limit(self, items: InMemoryCollection) -> None:
        results = await items.find(
            {},
            {},
            {"order": [{"field": "_id", "direction": "ASC"}], "skip": 1, "limit": 1},
        )
        assert [r["_id"] for r in results] == ["2"]

    @pytest.mark.asyncio
    async def test_returns_copies(self, items: InMemoryCollection) -> None:
        first = await items.find({}, {}, {})
        first[0]["label"] = "changed"
        first.clear()

        second = await items.find({}, {}, {})
        assert len(second) == 3
        assert "changed" not in {r["label"] for r in second}


class TestJsonFileCollection:
    """Tests for loading collections from JSON files."""

    @pytest.mark.asyncio
    async def test_loads_records(self) -> None:
        collection = JsonFileCollection(
            FIXTURES / "items.json", "Items", ["label", "description"]
        )
        assert len(collection) == 3
        assert collection.searchable() == ["label", "description"]
        assert collection.model_name == "Items"
        assert len(await collection.find({}, {}, {})) == 3

    def test_rejects_non_array(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"label": "x"}', encoding="utf-8")
        with pytest.raises(ValueError, match="JSON array"):
            JsonFileCollection(path, "Bad")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            JsonFileCollection(tmp_path / "missing.json", "Missing")
