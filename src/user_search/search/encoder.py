from __future__ import annotations

import logging
from typing import List, Sequence

from pydantic import TypeAdapter

from user_search.models import SearchErrorResponse, UserRecord


logger = logging.getLogger(__name__)

INTERNAL_ERROR_REASON = "internal server error"
# Returned verbatim when even the error payload cannot be encoded.
INTERNAL_ERROR_CONTENT = b'{"error":"internal server error"}'

_USERS_ADAPTER = TypeAdapter(List[UserRecord])


class ResponseEncodingError(RuntimeError):
    pass


def encode_users(users: Sequence[UserRecord]) -> bytes:
    """Serialize users as a JSON array of ``{id, name, age, about, gender}``."""
    try:
        return _USERS_ADAPTER.dump_json(list(users))
    except Exception as exc:
        raise ResponseEncodingError(f"failed to encode {len(users)} users: {exc}") from exc


def encode_error(reason: str) -> bytes:
    try:
        return SearchErrorResponse(error=reason).model_dump_json().encode("utf-8")
    except Exception:
        logger.exception("Failed to encode error payload, falling back to generic content")
        return INTERNAL_ERROR_CONTENT
