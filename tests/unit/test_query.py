"""
Unit tests for page parameters, the pagination envelope and QueryFilter.
"""

import math

import pytest

from bookstore.domain.models.book import Book
from bookstore.domain.schemas.pagination import Pagination
from bookstore.infrastructure.repositories.book_repository import book_filter
from bookstore.infrastructure.repositories.query import MAX_INT, PageParams, QueryFilter, coerce_positive_int


class TestPageParams:
    """Fallbacks for page/limit coming straight from a query string."""

    @pytest.mark.parametrize("page, limit", [
        (None, None),
        ("abc", "xyz"),
        ("0", "0"),
        (-3, -10),
        ("", " "),
        (True, False),
    ])
    def test_invalid_values_fall_back_to_defaults(self, page, limit):
        params = PageParams.from_raw(page, limit)

        assert params.page == 1
        assert params.limit == 10
        assert params.offset == 0

    def test_numeric_strings_are_parsed(self):
        params = PageParams.from_raw("3", " 25 ")

        assert params.page == 3
        assert params.limit == 25
        assert params.offset == 50

    def test_one_bad_value_does_not_reset_the_other(self):
        params = PageParams.from_raw("4", "nope")

        assert params.page == 4
        assert params.limit == 10
        assert params.offset == 30

    @pytest.mark.parametrize("page, limit", [
        (10**20, 10**20),
        (str(10**20), str(10**20)),
        (MAX_INT + 1, MAX_INT + 1),
        ("9" * 5000, "9" * 5000),
    ])
    def test_values_beyond_integer_range_fall_back(self, page, limit):
        params = PageParams.from_raw(page, limit)

        assert params.page == 1
        assert params.limit == 10

    def test_largest_page_keeps_offset_in_bigint_range(self):
        params = PageParams.from_raw(MAX_INT, MAX_INT)

        assert params.page == MAX_INT
        assert params.offset < 2**63

    def test_fractions_are_not_truncated(self):
        assert PageParams.from_raw("2.5", "7.9") == PageParams()

    def test_coerce_positive_int_with_none_default(self):
        assert coerce_positive_int("7", None) == 7
        assert coerce_positive_int("seven", None) is None
        assert coerce_positive_int(0, None) is None


class TestPagination:
    """totalPages is ceil(total / limit)."""

    @pytest.mark.parametrize("total, limit", [(0, 10), (1, 10), (10, 10), (25, 10), (101, 7)])
    def test_total_pages(self, total, limit):
        pagination = Pagination.build(page=1, limit=limit, total=total)

        assert pagination.total_pages == math.ceil(total / limit)

    def test_serializes_camel_case_total_pages(self):
        dumped = Pagination.build(page=3, limit=10, total=25).model_dump(by_alias=True)

        assert dumped == {"page": 3, "limit": 10, "total": 25, "totalPages": 3}


class TestQueryFilter:
    """Clause accumulation."""

    def test_empty_search_adds_nothing(self):
        query_filter = QueryFilter().search("", Book.title).search("   ", Book.title).search(None, Book.title)

        assert len(query_filter) == 0

    def test_none_equality_adds_nothing(self):
        assert len(QueryFilter().equals(Book.category_id, None)) == 0

    def test_book_filter_combines_search_and_category(self):
        query_filter = book_filter("tolkien", 3)

        assert len(query_filter) == 2
        sql = " ".join(str(clause) for clause in query_filter.clauses).lower()
        assert "books.title" in sql
        assert "books.author" in sql
        assert "books.isbn" in sql
        assert "books.category_id" in sql

    def test_clauses_is_a_copy(self):
        query_filter = QueryFilter().equals(Book.quantity, 1)
        query_filter.clauses.clear()

        assert len(query_filter) == 1
