"""Shared pytest fixtures for the user search tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_search.api import create_app
from user_search.config import DEFAULT_DATASET_PATH, Settings
from user_search.dataset import load_all


VALID_TOKEN = "583-asgl-1s4gh-789b"
FAULT_TOKEN = "SIMULATE_INTERNAL_SERVER_ERROR"


@pytest.fixture(scope="session")
def users():
    return load_all(DEFAULT_DATASET_PATH)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        dataset_path=DEFAULT_DATASET_PATH,
        access_tokens=frozenset({VALID_TOKEN}),
        fault_token=FAULT_TOKEN,
    )


@pytest.fixture
def api(settings):
    with TestClient(create_app(settings)) as client:
        yield client
