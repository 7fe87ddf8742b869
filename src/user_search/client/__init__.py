from .client import DEFAULT_TIMEOUT_SECONDS, SearchClient, build_params
from .errors import (
    BadAccessTokenError,
    BadRequestError,
    ErrorPayloadDecodeError,
    InvalidLimitError,
    InvalidOffsetError,
    InvalidOrderByError,
    InvalidOrderFieldError,
    ResponseDecodeError,
    ResultDecodeError,
    SearchClientError,
    SearchNetworkError,
    SearchTimeoutError,
    UnexpectedStatusError,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "SearchClient",
    "build_params",
    "BadAccessTokenError",
    "BadRequestError",
    "ErrorPayloadDecodeError",
    "InvalidLimitError",
    "InvalidOffsetError",
    "InvalidOrderByError",
    "InvalidOrderFieldError",
    "ResponseDecodeError",
    "ResultDecodeError",
    "SearchClientError",
    "SearchNetworkError",
    "SearchTimeoutError",
    "UnexpectedStatusError",
]
