"""Errors raised by SearchClient."""

from __future__ import annotations


class SearchClientError(Exception):
    pass


class SearchTimeoutError(SearchClientError):
    def __init__(self, params: str, timeout: float) -> None:
        super().__init__(f"timeout for {params} after {timeout}s")
        self.params = params
        self.timeout = timeout


class SearchNetworkError(SearchClientError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"unknown network error: {cause}")


class BadAccessTokenError(SearchClientError):
    def __init__(self) -> None:
        super().__init__("bad access token")


class BadRequestError(SearchClientError):
    """The server rejected the search parameters (HTTP 400)."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or f"unknown bad request error: {reason}")
        self.reason = reason


class InvalidOrderFieldError(BadRequestError):
    def __init__(self, reason: str, order_field: str) -> None:
        super().__init__(reason, f"order field {order_field} invalid")
        self.order_field = order_field


class InvalidOrderByError(BadRequestError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason, "order_by invalid")


class InvalidLimitError(BadRequestError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason, "limit must be > 0")


class InvalidOffsetError(BadRequestError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason, "offset must be > 0")


class ResponseDecodeError(SearchClientError):
    pass


class ErrorPayloadDecodeError(ResponseDecodeError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"cant unpack error json: {cause}")


class ResultDecodeError(ResponseDecodeError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"cant unpack result json: {cause}")


class UnexpectedStatusError(SearchClientError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"unknown error: status {status_code}")
        self.status_code = status_code
