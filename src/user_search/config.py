"""Runtime configuration based on environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Optional

from dotenv import load_dotenv


DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / "data" / "dataset.xml"
MAX_PAGE_SIZE = 50


def normalize_base_path(value: str | None) -> str:
    """Return ``value`` as ``/prefix`` without a trailing slash, or ``""``.

    Used for deployments under a subpath (e.g. https://example.com/user-search/...).
    """
    base_path = (value or "").strip()
    if base_path and not base_path.startswith("/"):
        base_path = "/" + base_path
    if base_path.endswith("/") and base_path != "/":
        base_path = base_path.rstrip("/")
    return base_path


def _split_tokens(raw: str | None) -> FrozenSet[str]:
    return frozenset(t.strip() for t in (raw or "").split(",") if t.strip())


@dataclass(frozen=True)
class Settings:
    dataset_path: Path = DEFAULT_DATASET_PATH
    access_tokens: FrozenSet[str] = field(default_factory=frozenset)
    max_page_size: int = MAX_PAGE_SIZE
    # Presenting this token makes the service fail on purpose (disabled when None).
    fault_token: Optional[str] = None
    base_path: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and ``.env``, if present).

        Env overrides:
          - USER_SEARCH_DATASET_PATH   (default: bundled dataset.xml)
          - USER_SEARCH_ACCESS_TOKENS  (comma separated, default: none)
          - USER_SEARCH_MAX_PAGE_SIZE  (default 50)
          - USER_SEARCH_FAULT_TOKEN    (default: unset)
          - API_BASE_PATH              (default: served at the root)
          - LOG_LEVEL                  (default INFO)
        """
        load_dotenv(override=True)

        max_page_size = int(os.getenv("USER_SEARCH_MAX_PAGE_SIZE", MAX_PAGE_SIZE))
        if max_page_size < 1:
            raise ValueError("USER_SEARCH_MAX_PAGE_SIZE must be >= 1")

        return cls(
            dataset_path=Path(os.getenv("USER_SEARCH_DATASET_PATH", str(DEFAULT_DATASET_PATH))),
            access_tokens=_split_tokens(os.getenv("USER_SEARCH_ACCESS_TOKENS")),
            max_page_size=max_page_size,
            fault_token=os.getenv("USER_SEARCH_FAULT_TOKEN") or None,
            base_path=normalize_base_path(os.getenv("API_BASE_PATH")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["DEFAULT_DATASET_PATH", "MAX_PAGE_SIZE", "Settings", "get_settings", "normalize_base_path"]
