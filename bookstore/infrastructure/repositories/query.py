"""
Query building blocks shared by the repositories.

``QueryFilter`` collects WHERE clauses once and applies them to any number of
queries, so a listing and its count always filter on the same predicates.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import or_
from sqlalchemy.orm import Query
from sqlalchemy.sql.elements import ColumnElement

from bookstore.domain.schemas.pagination import Pagination

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Largest value an INTEGER column holds; also keeps page * limit inside BIGINT
MAX_INT = 2**31 - 1


def coerce_positive_int(value: Any, default: int, maximum: int = MAX_INT) -> int:
    """Parse ``value`` as an int in ``[1, maximum]``, falling back to ``default``.

    Only whole numbers count: ``"2.5"`` is treated as non-numeric.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if 1 <= number <= maximum else default


@dataclass(frozen=True)
class PageParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_raw(cls, page: Any = None, limit: Any = None) -> "PageParams":
        return cls(
            page=coerce_positive_int(page, DEFAULT_PAGE),
            limit=coerce_positive_int(limit, DEFAULT_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PageResult(Generic[T]):
    items: List[T]
    pagination: Pagination


class QueryFilter:
    """Accumulates boolean clauses; each carries its own bound parameters."""

    def __init__(self) -> None:
        self._clauses: List[ColumnElement] = []

    @property
    def clauses(self) -> List[ColumnElement]:
        return list(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def add(self, clause: ColumnElement) -> "QueryFilter":
        self._clauses.append(clause)
        return self

    def search(self, term: Optional[str], *columns) -> "QueryFilter":
        """Case-insensitive substring match on any of ``columns``."""
        term = (term or "").strip()
        if not term or not columns:
            return self
        return self.add(or_(*[column.icontains(term, autoescape=True) for column in columns]))

    def equals(self, column, value: Any) -> "QueryFilter":
        if value is None:
            return self
        return self.add(column == value)

    def apply(self, query: Query) -> Query:
        if not self._clauses:
            return query
        return query.filter(*self._clauses)


def paginate(data_query: Query, count_query: Query, query_filter: QueryFilter, params: PageParams) -> PageResult:
    """Run a filtered listing and its matching count.

    ``limit``/``offset`` go on the data query only.
    """
    total = query_filter.apply(count_query).scalar() or 0
    items = (
        query_filter.apply(data_query)
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return PageResult(
        items=items,
        pagination=Pagination.build(params.page, params.limit, total),
    )
