from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Tuple

from pydantic import ValidationError

from user_search.models import UserRecord


logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """The dataset file is missing, malformed or empty."""


def _row_to_record(row: ET.Element) -> UserRecord:
    first_name = row.findtext("first_name", default="")
    last_name = row.findtext("last_name", default="")
    return UserRecord(
        id=row.findtext("id"),
        name=f"{first_name} {last_name}",
        age=row.findtext("age"),
        about=row.findtext("about", default=""),
        gender=row.findtext("gender", default=""),
    )


def load_all(path: str | Path) -> Tuple[UserRecord, ...]:
    """Parse the XML dataset at ``path`` into an ordered tuple of users.

    The file is expected to hold ``<row>`` elements under the root, each with
    ``id``, ``first_name``, ``last_name``, ``age``, ``about`` and ``gender``
    children. Raises DatasetError if the file cannot be read, is not valid
    XML, holds a row that does not convert, or holds no rows at all.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DatasetError(f"error reading dataset file [{path}]: {exc}") from exc

    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise DatasetError(f"error parsing xml [{path}]: {exc}") from exc

    users = []
    for idx, row in enumerate(root.iter("row")):
        try:
            users.append(_row_to_record(row))
        except ValidationError as exc:
            raise DatasetError(f"invalid row #{idx} in [{path}]: {exc}") from exc

    if not users:
        raise DatasetError(f"no users found in [{path}]")

    logger.info("Loaded %d users from %s", len(users), path)
    return tuple(users)


class DatasetStore:
    """Holds the users loaded once at startup; read-only afterwards."""

    def __init__(self, users: Tuple[UserRecord, ...]) -> None:
        self._users = tuple(users)

    @classmethod
    def from_file(cls, path: str | Path) -> "DatasetStore":
        return cls(load_all(path))

    @property
    def users(self) -> Tuple[UserRecord, ...]:
        return self._users

    def __len__(self) -> int:
        return len(self._users)
