"""Shared fixtures for tests — all using the in-memory transport."""

from __future__ import annotations

import pytest

from oanda.api import APIClient
from observability.metrics import RequestMetrics
from providers.recording_transport import RecordingTransport
from schemas.client import Environment

API_KEY = "123456-7890"
ACCOUNT_ID = "001-001"


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def metrics() -> RequestMetrics:
    return RequestMetrics()


@pytest.fixture
def client(transport, metrics) -> APIClient:
    return APIClient(Environment.PRACTICE, API_KEY, transport=transport, metrics=metrics)


@pytest.fixture
def live_client(transport) -> APIClient:
    return APIClient(Environment.LIVE, API_KEY, transport=transport)
