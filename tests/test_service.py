"""Tests for the search service gates, encoder and error boundary."""

from __future__ import annotations

import json

import pytest

from user_search.models import UserRecord
from user_search.search import encoder
from user_search.search.encoder import INTERNAL_ERROR_CONTENT, encode_error, encode_users
from user_search.search.service import SearchService, SearchServiceConfig

from .conftest import FAULT_TOKEN, VALID_TOKEN


VALID_PARAMS = {"query": "", "limit": "5", "offset": "0", "order_field": "", "order_by": "0"}


@pytest.fixture
def service(users):
    config = SearchServiceConfig(access_tokens=frozenset({VALID_TOKEN}), fault_token=FAULT_TOKEN)
    return SearchService(users, config)


def test_encode_users_uses_wire_field_names():
    user = UserRecord(id=7, name="Ann Lee", age=40, about="hi\n", gender="female")
    assert json.loads(encode_users([user])) == [
        {"id": 7, "name": "Ann Lee", "age": 40, "about": "hi\n", "gender": "female"}
    ]


def test_encode_error_payload():
    assert json.loads(encode_error("ErrorBadLimit")) == {"error": "ErrorBadLimit"}


def test_encode_error_falls_back_to_constant(monkeypatch):
    class Broken:
        def __init__(self, **kwargs):
            raise RuntimeError("boom")

    monkeypatch.setattr(encoder, "SearchErrorResponse", Broken)
    assert encode_error("anything") == INTERNAL_ERROR_CONTENT


@pytest.mark.parametrize("token", [None, "", "$GRANTMEACCESS$"])
def test_rejects_unknown_token(service, token):
    reply = service.handle(token, VALID_PARAMS)
    assert reply.status_code == 401
    assert json.loads(reply.body) == {"error": "unauthorized"}


def test_auth_runs_before_validation(service):
    reply = service.handle("bad", {"limit": "nope"})
    assert reply.status_code == 401


@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({"limit": "abc"}, "ErrorBadIntegerParam"),
        ({"limit": "0"}, "ErrorBadLimit"),
        ({"offset": "-1"}, "ErrorBadOffset"),
        ({"order_by": "3"}, "ErrorBadOrderBy"),
        ({"order_field": "Something"}, "ErrorBadOrderField"),
    ],
)
def test_validation_failures_return_400(service, overrides, reason):
    reply = service.handle(VALID_TOKEN, {**VALID_PARAMS, **overrides})
    assert reply.status_code == 400
    assert json.loads(reply.body) == {"error": reason}


def test_invalid_limit_is_rejected_before_search(service, monkeypatch):
    def _fail(request):
        raise AssertionError("engine must not run")

    monkeypatch.setattr(service.engine, "search", _fail)
    reply = service.handle(VALID_TOKEN, {**VALID_PARAMS, "limit": "-3"})
    assert reply.status_code == 400


def test_success_returns_page_and_flag(service):
    reply = service.handle(VALID_TOKEN, VALID_PARAMS)
    assert reply.status_code == 200
    assert [u["id"] for u in json.loads(reply.body)] == [0, 1, 2, 3, 4]
    assert reply.headers == {"X-Has-Next-Page": "true"}


def test_encoding_failure_returns_500(service, monkeypatch):
    def _broken(users):
        raise encoder.ResponseEncodingError("cannot encode")

    monkeypatch.setattr("user_search.search.service.encode_users", _broken)
    reply = service.handle(VALID_TOKEN, VALID_PARAMS)
    assert reply.status_code == 500
    assert json.loads(reply.body) == {"error": "internal server error"}


def test_fault_token_is_converted_to_500(service):
    reply = service.handle(FAULT_TOKEN, VALID_PARAMS)
    assert reply.status_code == 500
    assert json.loads(reply.body) == {"error": "internal server error"}


def test_unexpected_error_does_not_break_later_requests(service, monkeypatch):
    original = service.engine.search
    calls = []

    def _flaky(request):
        calls.append(request)
        if len(calls) == 1:
            raise KeyError("boom")
        return original(request)

    monkeypatch.setattr(service.engine, "search", _flaky)
    first = service.handle(VALID_TOKEN, VALID_PARAMS)
    second = service.handle(VALID_TOKEN, VALID_PARAMS)
    assert first.status_code == 500
    assert second.status_code == 200


def test_fault_token_disabled_by_default(users):
    service = SearchService(users, SearchServiceConfig(access_tokens=frozenset({VALID_TOKEN})))
    reply = service.handle(FAULT_TOKEN, VALID_PARAMS)
    assert reply.status_code == 401
