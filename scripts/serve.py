"""Serve the user search API with uvicorn.

Run:
	uv run python scripts/serve.py

Environment:
	HOST, PORT                 (default 127.0.0.1:8000)
	USER_SEARCH_*, API_BASE_PATH, LOG_LEVEL   see user_search.config
"""

from __future__ import annotations

import os
from pathlib import Path
import sys

import uvicorn

# Ensure 'src' on path
CURRENT_DIR = Path(__file__).resolve().parent
SRC_DIR = CURRENT_DIR.parent / "src"
if str(SRC_DIR) not in sys.path:
	sys.path.insert(0, str(SRC_DIR))


def main() -> int:
	uvicorn.run(
		"user_search.api.app:create_app",
		factory=True,
		host=os.getenv("HOST", "127.0.0.1"),
		port=int(os.getenv("PORT", "8000")),
	)
	return 0


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
