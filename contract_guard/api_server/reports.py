"""
In-memory scam report store for POST /api/report-scam.

Reports are user submissions awaiting review; they never feed back into
scoring. Lost on restart. Lock-guarded like AnalysisMetrics.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any

STATUS_PENDING = "pending"
STATUS_CONFIRMED = "confirmed"


class ScamReportStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reports: list[dict[str, Any]] = []

    def add(self, contract_address: str, network: str | None, reason: str) -> dict[str, Any]:
        report = {
            "id": uuid.uuid4().hex,
            "contract_address": contract_address,
            "network": network,
            "reason": reason,
            "status": STATUS_PENDING,
            "reported_at": datetime.now(timezone.utc).isoformat(),
        }
        with self._lock:
            self._reports.append(report)
        return dict(report)

    def entries(self) -> list[dict[str, Any]]:
        with self._lock:
            return [dict(r) for r in self._reports]

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "scam_reports": len(self._reports),
                "scams_confirmed": sum(1 for r in self._reports if r["status"] == STATUS_CONFIRMED),
            }

    def reset(self) -> None:
        with self._lock:
            self._reports = []


_reports = ScamReportStore()


def get_report_store() -> ScamReportStore:
    """Process-wide report store shared by all requests."""
    return _reports
