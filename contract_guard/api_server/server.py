"""
FastAPI server — contract scan endpoints.

POST /api/analyze scores submitted contract source and wraps the verdict in
a {"success", "data", "metrics"} envelope. GET /api/metrics and
GET /api/rules expose counters and the detector table. POST /api/report-scam
records user scam reports for review. Config via env (MAX_SOURCE_CHARS).
"""

from __future__ import annotations

import json
import uuid
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from contract_guard import __version__
from contract_guard.analytics import analyze
from contract_guard.analytics.detectors import MAX_RISK_SCORE, describe_rules
from contract_guard.analytics.encoder import is_encoding_failure
from contract_guard.api_server.metrics import AnalysisMetrics, get_metrics
from contract_guard.api_server.reports import ScamReportStore, get_report_store
from contract_guard.config import Settings, get_settings
from contract_guard.guard_logging import get_logger
from contract_guard.guard_logging.logger import bind_request

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class AnalyzeRequest(BaseModel):
    """POST /api/analyze body: contract source plus optional provenance."""

    source: str = Field(..., description="Raw smart-contract source text")
    contract_address: str | None = Field(None, max_length=128, description="Contract address, echoed back")
    network: str | None = Field(None, max_length=64, description="Network name, echoed back")


class AssessmentData(BaseModel):
    risk_score: int = Field(..., ge=0, le=MAX_RISK_SCORE, description="Sum of triggered detector weights")
    risk_level: str = Field(..., description="LOW | MEDIUM | HIGH")
    issues: list[str] = Field(default_factory=list, description="Triggered detector issues, in rule order")
    recommendations: list[str] = Field(default_factory=list, description="Single recommendation for the score")
    contract_address: str | None = None
    network: str | None = None


class AnalyzeResponse(BaseModel):
    success: bool
    data: AssessmentData
    metrics: dict[str, Any] = Field(default_factory=dict)


class ReportScamRequest(BaseModel):
    """POST /api/report-scam body: contract a user believes is a scam."""

    contract_address: str = Field(..., min_length=1, max_length=128, description="Reported contract address")
    network: str | None = Field(None, max_length=64, description="Network name")
    reason: str = Field("", max_length=2000, description="Free-text reason for the report")


class ScamReport(BaseModel):
    id: str
    contract_address: str
    network: str | None = None
    reason: str = ""
    status: str
    reported_at: str


class ReportScamResponse(BaseModel):
    success: bool
    report: ScamReport


def _metrics_view(metrics: AnalysisMetrics, reports: ScamReportStore) -> dict[str, Any]:
    return {**metrics.snapshot(), **reports.counts()}


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Contract Guard API",
    description="Lexical scam-pattern scanner for smart-contract source.",
    version=__version__,
)


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze_contract_source(
    body: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
    metrics: AnalysisMetrics = Depends(get_metrics),
    reports: ScamReportStore = Depends(get_report_store),
):
    """
    Score contract source. Any text, including empty, gets a verdict; 413 when
    the source exceeds MAX_SOURCE_CHARS, 500 if the verdict could not be encoded.
    """
    log = bind_request(uuid.uuid4().hex[:12])
    if settings.max_source_chars > 0 and len(body.source) > settings.max_source_chars:
        log.warning("analyze_source_too_large", source_chars=len(body.source), limit=settings.max_source_chars)
        raise HTTPException(
            status_code=413,
            detail=f"source exceeds {settings.max_source_chars} characters",
        )

    encoded = analyze(body.source)
    if is_encoding_failure(encoded):
        metrics.record_failure()
        log.error("analyze_encode_failed", contract_address=body.contract_address)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": encoded},
        )

    verdict = json.loads(encoded)
    metrics.record(verdict["risk_level"])
    log.info(
        "analyze_done",
        contract_address=body.contract_address,
        network=body.network,
        risk_score=verdict["risk_score"],
        risk_level=verdict["risk_level"],
    )
    data = AssessmentData(**verdict, contract_address=body.contract_address, network=body.network)
    return AnalyzeResponse(success=True, data=data, metrics=_metrics_view(metrics, reports))


@app.get("/api/metrics")
def analysis_metrics(
    metrics: AnalysisMetrics = Depends(get_metrics),
    reports: ScamReportStore = Depends(get_report_store),
) -> dict[str, Any]:
    """Counters since process start."""
    return _metrics_view(metrics, reports)


@app.post("/api/report-scam", status_code=201, response_model=ReportScamResponse)
def report_scam(
    body: ReportScamRequest,
    reports: ScamReportStore = Depends(get_report_store),
) -> ReportScamResponse:
    """Record a user scam report for review. Stored with status=pending."""
    contract_address = body.contract_address.strip()
    if not contract_address:
        raise HTTPException(status_code=400, detail="contract_address must be non-empty")
    report = reports.add(contract_address, body.network, body.reason.strip())
    logger.info("scam_report_received", report_id=report["id"], contract_address=contract_address, network=body.network)
    return ReportScamResponse(success=True, report=ScamReport(**report))


@app.get("/api/reports")
def list_reports(reports: ScamReportStore = Depends(get_report_store)) -> dict[str, Any]:
    """All reports received since process start, oldest first."""
    return {"reports": reports.entries()}


@app.get("/api/rules")
def detector_rules() -> dict[str, Any]:
    """Detector table used for scoring (patterns, weights, issue text)."""
    return {"rules": describe_rules(), "max_risk_score": MAX_RISK_SCORE}


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}
