from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Header, Request, Response

from user_search.models import SearchErrorResponse, UserRecord
from user_search.search import SearchService


ACCESS_TOKEN_HEADER = "AccessToken"

router = APIRouter(prefix="/search", tags=["search"])


def get_search_service(request: Request) -> SearchService:
    return request.app.state.search_service


@router.get(
    "",
    summary="Search users by name or about text",
    response_model=List[UserRecord],
    responses={
        400: {"model": SearchErrorResponse, "description": "Invalid search parameters."},
        401: {"model": SearchErrorResponse, "description": "Missing or unknown access token."},
        500: {"model": SearchErrorResponse, "description": "Internal server error."},
    },
)
def search_users(
    request: Request,
    access_token: str | None = Header(default=None, alias=ACCESS_TOKEN_HEADER),
    service: SearchService = Depends(get_search_service),
) -> Response:
    """Search users.

    Query parameters (``query``, ``limit``, ``offset``, ``order_field``,
    ``order_by``) are passed through raw so the service can report the exact
    validation failure instead of FastAPI's generic 422.
    """
    reply = service.handle(access_token, dict(request.query_params))
    return Response(
        content=reply.body,
        status_code=reply.status_code,
        media_type="application/json",
        headers=reply.headers,
    )
