"""
In-process analysis counters for the HTTP server.

Adapter state only: the scoring engine never reads or writes it.
Guarded by a lock because uvicorn runs sync endpoints in a thread pool.
"""

from __future__ import annotations

import threading
from typing import Any

from contract_guard.analytics.risk_engine import RISK_HIGH, RISK_LEVELS


class AnalysisMetrics:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0
        self._failed = 0
        self._by_level: dict[str, int] = {level: 0 for level in RISK_LEVELS}

    def record(self, risk_level: str) -> None:
        with self._lock:
            self._total += 1
            self._by_level[risk_level] = self._by_level.get(risk_level, 0) + 1

    def record_failure(self) -> None:
        with self._lock:
            self._total += 1
            self._failed += 1

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_analyses": self._total,
                "high_risk_detected": self._by_level.get(RISK_HIGH, 0),
                "failed_analyses": self._failed,
                "by_level": dict(self._by_level),
            }

    def reset(self) -> None:
        with self._lock:
            self._total = 0
            self._failed = 0
            self._by_level = {level: 0 for level in RISK_LEVELS}


_metrics = AnalysisMetrics()


def get_metrics() -> AnalysisMetrics:
    """Process-wide counters shared by all requests."""
    return _metrics
