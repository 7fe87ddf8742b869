from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from user_search.config import MAX_PAGE_SIZE
from user_search.models import OrderBy, OrderField, SearchRequest, SearchResult, UserRecord


_SORT_KEYS: Dict[OrderField, Callable[[UserRecord], object]] = {
    OrderField.ID: lambda u: u.id,
    OrderField.AGE: lambda u: u.age,
    OrderField.NAME: lambda u: u.name,
}


def matches(user: UserRecord, query: str) -> bool:
    """Case-sensitive substring match on name or about; empty query matches all."""
    return query in user.name or query in user.about


def sort_users(users: List[UserRecord], order_field: OrderField | str, order_by: OrderBy | int) -> None:
    """Sort ``users`` in place.

    AS_IS keeps the current order. Unknown or empty fields sort by name.
    Python's sort is stable in both directions, so equal keys keep their
    relative order.
    """
    if order_by == OrderBy.AS_IS:
        return
    try:
        key = _SORT_KEYS[OrderField(order_field)]
    except (KeyError, ValueError):
        key = _SORT_KEYS[OrderField.NAME]
    users.sort(key=key, reverse=order_by == OrderBy.DESC)


class SearchEngine:
    """Filters, orders and pages the in-memory users for one request."""

    def __init__(self, users: Sequence[UserRecord], *, max_page_size: int = MAX_PAGE_SIZE):
        self._users = tuple(users)
        self.max_page_size = max_page_size

    def search(self, request: SearchRequest) -> SearchResult:
        # Work on a per-request copy; the shared tuple is never reordered.
        working = list(self._users)
        matched = [u for u in working if matches(u, request.query)]
        sort_users(matched, request.order_field, request.order_by)

        limit = min(request.limit, self.max_page_size)
        end = request.offset + limit
        return SearchResult(
            users=matched[request.offset:end],
            has_next_page=len(matched) > end,
        )
