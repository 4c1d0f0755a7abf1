"""
Keyset pagination over arbitrary SQLAlchemy queries.

Types in here:

- Pagination: user-supplied and validated paging params (``key``, ``page_size``)
- Page: one page of results plus the params that produced it
- Paginated: wraps a base ``Select``; call ``load_and_count_pages`` to run it

The base query is wrapped as a subquery and the total row count and the
maximum ``id`` are computed with window functions over the whole base
result, then the keyset filter (``id > key``) and the limit are applied on
the outside. One round trip returns every row of the page together with
both aggregates. ``next_key`` is that maximum id, reported only while
rows remain beyond the current page.

NB: this only works for queries that expose a unique integer ``id``
column. Nothing checks that for you.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Mapping, Optional, Tuple, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, aliased

from photothing.db.base import MAX_ID

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PER_PAGE = 30

TOTAL_COLUMN = "page_total_count"
MAX_ID_COLUMN = "page_max_id"


def _parse_int(value: Any) -> Optional[int]:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if not -MAX_ID - 1 <= parsed <= MAX_ID:
        return None
    return parsed


@dataclass(frozen=True)
class Pagination:
    """A validated set of pagination params."""

    key: Optional[int] = None
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def new(cls, key: Optional[int] = None, per_page: Optional[int] = None) -> "Pagination":
        if per_page is None or per_page < 1:
            per_page = DEFAULT_PER_PAGE
        return cls(key=key, per_page=per_page)

    @classmethod
    def first(cls) -> "Pagination":
        return cls.new()

    @classmethod
    def page(cls, key: int) -> "Pagination":
        return cls.new(key=key)

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "Pagination":
        """
        Build from request params.

        Unparseable values fall back to the defaults and unknown params
        are ignored.
        """
        return cls.new(
            key=_parse_int(params.get("key")),
            per_page=_parse_int(params.get("page_size")),
        )

    @property
    def limit(self) -> int:
        return self.per_page

    @property
    def lower_bound(self) -> int:
        return self.key if self.key is not None else 0


@dataclass
class Page(Generic[T]):
    """A page of results from the database."""

    key: Optional[int] = None
    next_key: Optional[int] = None
    remaining: int = 0
    items: List[T] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls()

    def is_empty(self) -> bool:
        return not self.items

    def map(self, mapper: Callable[[T], U]) -> "Page[U]":
        return self.map_items(lambda items: [mapper(item) for item in items])

    def map_items(self, item_mapper: Callable[[List[T]], List[U]]) -> "Page[U]":
        return Page(
            key=self.key,
            next_key=self.next_key,
            remaining=self.remaining,
            items=item_mapper(self.items),
        )


class Paginated:
    """A base query bound to a Pagination request."""

    def __init__(self, query: Select, page: Pagination):
        self.query = query
        self.page = page

    def statement(self, *entities) -> Select:
        """
        Build the wrapped statement.

        Each of ``entities`` is re-targeted at the wrapped subquery, so a
        base query selecting ``Photo`` and ``AlbumMembership`` yields those
        same ORM entities per row. Without entities every column of the
        base query is returned.
        """
        base = self.query.subquery("t")
        windowed = select(
            base,
            func.count().over().label(TOTAL_COLUMN),
            func.max(base.c.id).over().label(MAX_ID_COLUMN),
        ).subquery("w")

        if entities:
            columns = [aliased(entity, windowed) for entity in entities]
        else:
            columns = [c for c in windowed.c if c.key not in (TOTAL_COLUMN, MAX_ID_COLUMN)]

        return (
            select(*columns, windowed.c[TOTAL_COLUMN], windowed.c[MAX_ID_COLUMN])
            .where(windowed.c.id > self.page.lower_bound)
            .order_by(windowed.c.id.asc())
            .limit(self.page.limit)
        )

    def load_and_count_pages(self, db: Session, *entities) -> Page:
        """
        Run the query and build a Page.

        Items are single entities when one entity is given, tuples otherwise.
        """
        rows = db.execute(self.statement(*entities)).all()
        total, max_id = (rows[0][-2], rows[0][-1]) if rows else (0, None)

        width = len(entities)
        if width == 1:
            items = [row[0] for row in rows]
        else:
            items = [_strip_aggregates(row) for row in rows]

        remaining = total - len(items)
        return Page(
            key=self.page.key,
            next_key=max_id if remaining > 0 else None,
            remaining=remaining,
            items=items,
        )


def _strip_aggregates(row) -> Tuple:
    return tuple(row[:-2])


def paginate(query: Select, page: Pagination) -> Paginated:
    return Paginated(query, page)
