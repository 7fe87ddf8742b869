from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from user_search.config import MAX_PAGE_SIZE
from user_search.models import SearchErrorResponse, SearchRequest, SearchResult, UserRecord

from .errors import (
    BadAccessTokenError,
    BadRequestError,
    ErrorPayloadDecodeError,
    InvalidLimitError,
    InvalidOffsetError,
    InvalidOrderByError,
    InvalidOrderFieldError,
    ResultDecodeError,
    SearchNetworkError,
    SearchTimeoutError,
    UnexpectedStatusError,
)


logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "AccessToken"
HAS_NEXT_PAGE_HEADER = "X-Has-Next-Page"
DEFAULT_TIMEOUT_SECONDS = 1.0

_USERS_ADAPTER = TypeAdapter(List[UserRecord])


def _enum_value(value) -> object:
    return getattr(value, "value", value)


def build_params(request: SearchRequest, page_size: int = MAX_PAGE_SIZE) -> Dict[str, str]:
    """Encode ``request`` as query parameters.

    Every parameter is always sent. A zero limit means the default page and a
    limit above the page size is capped to it; negative values are passed
    through for the server to reject.
    """
    limit = request.limit
    if limit == 0 or limit > page_size:
        limit = page_size
    return {
        "query": request.query,
        "limit": str(limit),
        "offset": str(request.offset),
        "order_field": str(_enum_value(request.order_field)),
        "order_by": str(int(_enum_value(request.order_by))),
    }


class SearchClient:
    """Blocking client for the user search API.

    ``find_users`` returns a SearchResult or raises a SearchClientError
    subclass; see ``user_search.client.errors`` for the taxonomy. Requests are
    never retried.
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = MAX_PAGE_SIZE,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self.timeout = timeout
        self.page_size = page_size
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SearchClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def find_users(self, request: SearchRequest) -> SearchResult:
        params = build_params(request, self.page_size)
        encoded = str(httpx.QueryParams(params))
        # httpx timeouts apply per connect/read/write; the deadline bounds the whole call.
        deadline = time.monotonic() + self.timeout
        try:
            with self._client.stream(
                "GET",
                self.url,
                params=params,
                headers={ACCESS_TOKEN_HEADER: self.access_token},
                timeout=self.timeout,
            ) as response:
                content = self._read_body(response, deadline, encoded)
        except httpx.TimeoutException as exc:
            raise self._timed_out(encoded) from exc
        except httpx.RequestError as exc:
            logger.warning("Search request failed: %s", exc)
            raise SearchNetworkError(exc) from exc

        if response.status_code == 401:
            raise BadAccessTokenError()
        if response.status_code == 400:
            raise self._bad_request(content, request)
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code)

        try:
            users = _USERS_ADAPTER.validate_json(content)
        except ValidationError as exc:
            raise ResultDecodeError(exc) from exc

        flag = response.headers.get(HAS_NEXT_PAGE_HEADER)
        if flag is not None:
            has_next_page = flag.strip().lower() == "true"
        else:
            # Server did not echo the flag: a full page may have more behind it.
            has_next_page = len(users) == int(params["limit"])
        return SearchResult(users=users, has_next_page=has_next_page)

    def _timed_out(self, encoded: str) -> SearchTimeoutError:
        logger.warning("Search request timed out after %ss: %s", self.timeout, encoded)
        return SearchTimeoutError(encoded, self.timeout)

    def _read_body(self, response: httpx.Response, deadline: float, encoded: str) -> bytes:
        """Read the streamed body, giving up once ``deadline`` has passed."""
        chunks = []
        for chunk in response.iter_bytes():
            if time.monotonic() > deadline:
                raise self._timed_out(encoded)
            chunks.append(chunk)
        if time.monotonic() > deadline:
            raise self._timed_out(encoded)
        return b"".join(chunks)

    @staticmethod
    def _bad_request(content: bytes, request: SearchRequest) -> BadRequestError:
        try:
            reason = SearchErrorResponse.model_validate_json(content).error
        except ValidationError as exc:
            raise ErrorPayloadDecodeError(exc) from exc

        if reason == "ErrorBadOrderField":
            return InvalidOrderFieldError(reason, str(_enum_value(request.order_field)))
        if reason == "ErrorBadOrderBy":
            return InvalidOrderByError(reason)
        if reason == "ErrorBadLimit":
            return InvalidLimitError(reason)
        if reason == "ErrorBadOffset":
            return InvalidOffsetError(reason)
        return BadRequestError(reason)
