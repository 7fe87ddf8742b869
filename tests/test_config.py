from __future__ import annotations

from pathlib import Path

import pytest

from user_search.config import DEFAULT_DATASET_PATH, MAX_PAGE_SIZE, Settings, normalize_base_path


ENV_VARS = [
    "USER_SEARCH_DATASET_PATH",
    "USER_SEARCH_ACCESS_TOKENS",
    "USER_SEARCH_MAX_PAGE_SIZE",
    "USER_SEARCH_FAULT_TOKEN",
    "API_BASE_PATH",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings.dataset_path == DEFAULT_DATASET_PATH
    assert settings.access_tokens == frozenset()
    assert settings.max_page_size == MAX_PAGE_SIZE
    assert settings.fault_token is None
    assert settings.base_path == ""
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("USER_SEARCH_DATASET_PATH", "/data/users.xml")
    monkeypatch.setenv("USER_SEARCH_ACCESS_TOKENS", " one, two ,,")
    monkeypatch.setenv("USER_SEARCH_MAX_PAGE_SIZE", "25")
    monkeypatch.setenv("USER_SEARCH_FAULT_TOKEN", "boom")
    monkeypatch.setenv("API_BASE_PATH", "user-search/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.dataset_path == Path("/data/users.xml")
    assert settings.access_tokens == frozenset({"one", "two"})
    assert settings.max_page_size == 25
    assert settings.fault_token == "boom"
    assert settings.base_path == "/user-search"
    assert settings.log_level == "DEBUG"


def test_rejects_non_positive_page_size(monkeypatch):
    monkeypatch.setenv("USER_SEARCH_MAX_PAGE_SIZE", "0")
    with pytest.raises(ValueError):
        Settings.from_env()


@pytest.mark.parametrize(
    "raw, expected",
    [(None, ""), ("", ""), ("  ", ""), ("/", "/"), ("api", "/api"), ("/api/", "/api"), ("/a/b//", "/a/b")],
)
def test_normalize_base_path(raw, expected):
    assert normalize_base_path(raw) == expected
