from __future__ import annotations

import re
from typing import Mapping

from user_search.models import OrderBy, OrderField, SearchRequest


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_ALLOWED_ORDER_BY = frozenset(o.value for o in OrderBy)
_ALLOWED_ORDER_FIELDS = frozenset(f.value for f in OrderField)


class SearchValidationError(ValueError):
    """Base class for rejected search parameters.

    ``reason`` is the stable string sent back to clients in the error payload.
    """

    reason = "ErrorBadRequest"


class InvalidIntegerParam(SearchValidationError):
    reason = "ErrorBadIntegerParam"

    def __init__(self, param: str) -> None:
        super().__init__(f"invalid integer param [{param}]")
        self.param = param


class InvalidLimit(SearchValidationError):
    reason = "ErrorBadLimit"


class InvalidOffset(SearchValidationError):
    reason = "ErrorBadOffset"


class InvalidOrderBy(SearchValidationError):
    reason = "ErrorBadOrderBy"


class InvalidOrderField(SearchValidationError):
    reason = "ErrorBadOrderField"


def _int_param(params: Mapping[str, str], name: str) -> int:
    # ASCII digits only: int() would also take "1_0", padded or non-ASCII digits.
    raw = params.get(name)
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        raise InvalidIntegerParam(name)
    return int(raw)


def parse_search_request(params: Mapping[str, str]) -> SearchRequest:
    """Turn raw query parameters into a validated SearchRequest.

    Checks run in a fixed order and stop at the first failure: integer
    parsing (limit, offset, order_by), then ranges, then order_by and finally
    order_field membership. No defaults are applied except for ``query``,
    which is empty when absent.
    """
    limit = _int_param(params, "limit")
    offset = _int_param(params, "offset")
    order_by = _int_param(params, "order_by")

    if limit <= 0:
        raise InvalidLimit(f"limit must be > 0, got {limit}")
    if offset < 0:
        raise InvalidOffset(f"offset must be >= 0, got {offset}")

    if order_by not in _ALLOWED_ORDER_BY:
        raise InvalidOrderBy(f"order_by must be one of -1, 0, 1, got {order_by}")
    order_field = params.get("order_field")
    if order_field is None or order_field not in _ALLOWED_ORDER_FIELDS:
        raise InvalidOrderField(f"order_field {order_field!r} is not supported")

    return SearchRequest(
        query=params.get("query", ""),
        limit=limit,
        offset=offset,
        order_field=OrderField(order_field),
        order_by=OrderBy(order_by),
    )
