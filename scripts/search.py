"""Run one user search against a running API using SearchClient.

Configuration via constants below (no CLI args). Run:
	uv run python scripts/search.py

Environment:
	USER_SEARCH_URL           (default http://localhost:8000/search)
	USER_SEARCH_ACCESS_TOKEN  (token sent in the AccessToken header)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import sys

from dotenv import load_dotenv

# Ensure 'src' on path
CURRENT_DIR = Path(__file__).resolve().parent
SRC_DIR = CURRENT_DIR.parent / "src"
if str(SRC_DIR) not in sys.path:
	sys.path.insert(0, str(SRC_DIR))

from user_search.client import SearchClient, SearchClientError  # noqa: E402
from user_search.models import OrderBy, OrderField, SearchRequest, SearchResult  # noqa: E402


# ---------------------------------------------------------------------------
# Configuration Constants
# ---------------------------------------------------------------------------
QUERY_TEXT: str = "commodo e"
LIMIT: int = 5
ORDER_FIELD: OrderField = OrderField.ID
ORDER_BY: OrderBy = OrderBy.DESC
LOG_LEVEL: str = "INFO"


def search(url: str, token: str) -> SearchResult:
	"""Run the configured search and log a compact multi-line summary."""
	logger = logging.getLogger(__name__)

	request = SearchRequest(query=QUERY_TEXT, limit=LIMIT, order_field=ORDER_FIELD, order_by=ORDER_BY)
	with SearchClient(url, token) as client:
		result = client.find_users(request)

	lines = [f"Returned {len(result.users)} users (next page: {result.has_next_page}). \nQuery: {QUERY_TEXT!r} \n"]
	for idx, user in enumerate(result.users, start=1):
		lines.append(f"{idx}. id={user.id}; age={user.age}; name={user.name}")
	logger.info("\n".join(lines))
	return result


def main() -> int:
	load_dotenv(override=True)
	logging.basicConfig(
		level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s - %(message)s",
	)
	url = os.getenv("USER_SEARCH_URL", "http://localhost:8000/search")
	token = os.getenv("USER_SEARCH_ACCESS_TOKEN", "")
	try:
		search(url, token)
		return 0
	except SearchClientError as e:
		logging.error("Search failed: %s", e)
		return 1

if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
