"""
Pytest fixtures for Contract Guard tests. Resets adapter metrics, scam reports and
dependency overrides around each API test.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def analysis_metrics():
    """Fresh process-wide analysis counters."""
    from contract_guard.api_server.metrics import get_metrics

    metrics = get_metrics()
    metrics.reset()
    yield metrics
    metrics.reset()


@pytest.fixture
def report_store():
    """Empty scam report store."""
    from contract_guard.api_server.reports import get_report_store

    store = get_report_store()
    store.reset()
    yield store
    store.reset()


@pytest.fixture
def client(analysis_metrics, report_store, monkeypatch):
    """FastAPI TestClient with default settings (MAX_SOURCE_CHARS unset)."""
    from fastapi.testclient import TestClient

    from contract_guard.api_server.server import app

    monkeypatch.delenv("MAX_SOURCE_CHARS", raising=False)
    yield TestClient(app)
    app.dependency_overrides.clear()
