"""Shared pytest fixtures and configuration."""

import json
from unittest.mock import Mock

import httpx
import pytest

from foodapp.core.config import get_settings
from foodapp.services.gateway import ApiGateway, reset_gateway
from foodapp.services.session import (
    MemorySessionStorage,
    SessionStore,
    reset_session_store,
)

BASE_URL = "http://localhost:5000/api"


@pytest.fixture(autouse=True)
def clean_caches(monkeypatch):
    """Fresh settings, store and gateway for every test."""
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("CLIENT_HOSTNAME", raising=False)
    monkeypatch.setenv("SESSION_BACKEND", "memory")
    get_settings.cache_clear()
    reset_session_store()
    reset_gateway()
    yield
    get_settings.cache_clear()
    reset_session_store()
    reset_gateway()


@pytest.fixture
def navigator():
    return Mock()


@pytest.fixture
def storage():
    return MemorySessionStorage()


@pytest.fixture
def store(storage, navigator):
    return SessionStore(storage, navigator=navigator)


@pytest.fixture
def logged_in_store(store):
    store.record_login("tok-123", {"id": "u1", "name": "Ann", "email": "ann@example.com", "role": "customer"})
    return store


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response=None):
        self.response = response if response is not None else httpx.Response(200, json={})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        if callable(self.response):
            return self.response(request)
        return httpx.Response(
            self.response.status_code,
            headers=self.response.headers,
            content=self.response.content,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_gateway(store):
    """Build a gateway over a MockTransport; returns (gateway, handler)."""

    def _make(response=None, session_store=None):
        handler = RecordingHandler(response)
        gateway = ApiGateway(
            BASE_URL,
            session_store or store,
            transport=httpx.MockTransport(handler),
        )
        return gateway, handler

    return _make
