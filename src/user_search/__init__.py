"""In-memory user search over HTTP: FastAPI service and httpx client."""

from .models import OrderBy, OrderField, SearchRequest, SearchResult, UserRecord

__all__ = ["OrderBy", "OrderField", "SearchRequest", "SearchResult", "UserRecord"]
