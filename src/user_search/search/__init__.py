"""Search application layer.

This package implements the server side of the user search:
- Validation of raw query parameters into a SearchRequest
- Filtering, ordering and paging of the in-memory users
- Encoding of results and error payloads
- The SearchService that ties the steps together behind an access-token check
"""

from .engine import SearchEngine
from .service import HAS_NEXT_PAGE_HEADER, SearchReply, SearchService, SearchServiceConfig
from .validation import SearchValidationError, parse_search_request

__all__ = [
    "HAS_NEXT_PAGE_HEADER",
    "SearchEngine",
    "SearchReply",
    "SearchService",
    "SearchServiceConfig",
    "SearchValidationError",
    "parse_search_request",
]
