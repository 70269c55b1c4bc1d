"""Tests for slicing result sets into page envelopes."""

import pytest

from src.restlist.services.page_assembler import assemble, count_pages

RECORDS = [{"_id": "1"}, {"_id": "2"}, {"_id": "3"}]


class TestCountPages:
    """Tests for count_pages()."""

    @pytest.mark.parametrize(
        ("total", "limit", "expected"),
        [(3, 2, 2), (4, 2, 2), (0, 2, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2)],
    )
    def test_ceiling_division(self, total: int, limit: int, expected: int) -> None:
        assert count_pages(total, limit) == expected

    @pytest.mark.parametrize("limit", [0, -1])
    def test_no_limit_is_single_page(self, limit: int) -> None:
        assert count_pages(25, limit) == 1


class TestAssemble:
    """Tests for assemble()."""

    @pytest.mark.parametrize(
        ("page", "offset", "expected_ids"),
        [(1, 0, ["1", "2"]), (2, 2, ["3"]), (3, 4, [])],
    )
    def test_page_windows(
        self, page: int, offset: int, expected_ids: list[str]
    ) -> None:
        envelope = assemble(RECORDS, limit=2, offset=offset, requested_page=page)

        assert [r["_id"] for r in envelope.results] == expected_ids
        assert envelope.total_results == 3
        assert envelope.total_pages == 2
        assert envelope.current_page == page
        assert envelope.limit == 2

    @pytest.mark.parametrize("limit", [0, -3])
    def test_no_limit_returns_everything(self, limit: int) -> None:
        envelope = assemble(RECORDS, limit=limit, offset=0, requested_page=None)

        assert envelope.results == RECORDS
        assert envelope.total_pages == 1
        assert envelope.total_results == 3

    def test_does_not_consume_input(self) -> None:
        records = list(RECORDS)
        assemble(records, limit=2, offset=0, requested_page=1)
        assert records == RECORDS

    @pytest.mark.parametrize("page", ["abc", "-2", "0", None])
    def test_bad_page_reports_first_page(self, page: str | None) -> None:
        envelope = assemble(RECORDS, limit=2, offset=0, requested_page=page)
        assert envelope.current_page == 1

    def test_empty_result_set(self) -> None:
        envelope = assemble([], limit=10, offset=0, requested_page=1)
        assert envelope.results == []
        assert envelope.total_pages == 0
        assert envelope.total_results == 0

    def test_serializes_with_camel_case_keys(self) -> None:
        body = assemble(RECORDS, limit=2, offset=0, requested_page=1).model_dump(
            by_alias=True
        )
        assert set(body) == {
            "results",
            "currentPage",
            "limit",
            "totalPages",
            "totalResults",
        }
