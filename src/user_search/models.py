from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderBy(IntEnum):
    ASC = -1
    AS_IS = 0
    DESC = 1


class OrderField(str, Enum):
    DEFAULT = ""
    ID = "Id"
    AGE = "Age"
    NAME = "Name"


class UserRecord(BaseModel):
    """A single user as stored in the dataset and sent over the wire."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable user identifier.")
    name: str = Field(..., description="Display name: first and last name joined by a space.")
    age: int
    about: str
    gender: str


class SearchErrorResponse(BaseModel):
    error: str = Field(..., description="Machine-readable reason of the failure.")


@dataclass(frozen=True)
class SearchRequest:
    """Search parameters.

    Used both as the validated server-side request and as the client input.
    On the client, ``limit == 0`` asks for the default page size.
    """

    query: str = ""
    limit: int = 0
    offset: int = 0
    order_field: OrderField | str = OrderField.DEFAULT
    order_by: OrderBy | int = OrderBy.AS_IS


@dataclass(frozen=True)
class SearchResult:
    users: List[UserRecord] = field(default_factory=list)
    has_next_page: bool = False


__all__ = [
    "OrderBy",
    "OrderField",
    "SearchErrorResponse",
    "SearchRequest",
    "SearchResult",
    "UserRecord",
]
