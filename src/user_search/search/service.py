from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from user_search.config import MAX_PAGE_SIZE, Settings
from user_search.dataset import DatasetStore
from user_search.models import UserRecord

from .encoder import INTERNAL_ERROR_REASON, ResponseEncodingError, encode_error, encode_users
from .engine import SearchEngine
from .validation import SearchValidationError, parse_search_request


logger = logging.getLogger(__name__)

UNAUTHORIZED_REASON = "unauthorized"
HAS_NEXT_PAGE_HEADER = "X-Has-Next-Page"


@dataclass(frozen=True)
class SearchServiceConfig:
    access_tokens: FrozenSet[str] = frozenset()
    max_page_size: int = MAX_PAGE_SIZE
    fault_token: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchServiceConfig":
        return cls(
            access_tokens=settings.access_tokens,
            max_page_size=settings.max_page_size,
            fault_token=settings.fault_token,
        )


@dataclass(frozen=True)
class SearchReply:
    """Status code, JSON body and extra headers of one search response."""

    status_code: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def error(cls, status_code: int, reason: str) -> "SearchReply":
        return cls(status_code=status_code, body=encode_error(reason))


class SimulatedFault(RuntimeError):
    pass


class SearchService:
    """Server-side search orchestration.

    Every request goes through three gates, in order:
      1) authorization: 401 unless a configured access token is presented
      2) validation: 400 with the reason of the first rejected parameter
      3) execution: 200 with the JSON page, or 500 if it cannot be encoded

    ``handle`` never raises: any unexpected failure is logged and answered
    with a 500 so one bad request cannot take the server down.
    """

    def __init__(self, users: Iterable[UserRecord], config: SearchServiceConfig | None = None):
        self.config = config or SearchServiceConfig()
        self.engine = SearchEngine(tuple(users), max_page_size=self.config.max_page_size)

    @classmethod
    def from_store(cls, store: DatasetStore, config: SearchServiceConfig | None = None) -> "SearchService":
        return cls(store.users, config)

    def handle(self, token: Optional[str], params: Mapping[str, str]) -> SearchReply:
        try:
            return self._handle(token, params)
        except Exception:
            logger.exception("Unhandled error while serving search request")
            return SearchReply.error(500, INTERNAL_ERROR_REASON)

    def _handle(self, token: Optional[str], params: Mapping[str, str]) -> SearchReply:
        if not self._authorize(token):
            logger.info("Rejected search request: invalid access token")
            return SearchReply.error(401, UNAUTHORIZED_REASON)

        try:
            request = parse_search_request(params)
        except SearchValidationError as exc:
            logger.info("Rejected search request (%s): %s", exc.reason, exc)
            return SearchReply.error(400, exc.reason)

        result = self.engine.search(request)
        try:
            body = encode_users(result.users)
        except ResponseEncodingError:
            logger.exception("Failed to encode search result")
            return SearchReply.error(500, INTERNAL_ERROR_REASON)

        logger.debug(
            "Search query=%r returned %d users (next page: %s)",
            request.query,
            len(result.users),
            result.has_next_page,
        )
        return SearchReply(
            status_code=200,
            body=body,
            headers={HAS_NEXT_PAGE_HEADER: "true" if result.has_next_page else "false"},
        )

    def _authorize(self, token: Optional[str]) -> bool:
        if not token:
            return False
        if self.config.fault_token and token == self.config.fault_token:
            raise SimulatedFault("simulated internal server error")
        return token in self.config.access_tokens
