"""
Result encoder: RiskAssessment -> compact JSON text.

Never raises. If serialization fails the caller gets ANALYSIS_FAILED,
which is not valid JSON and must be treated as a failed encoding rather
than a clean LOW verdict.
"""

from __future__ import annotations

import json

from contract_guard.analytics.risk_engine import RiskAssessment
from contract_guard.core.exceptions import EncodingFailure
from contract_guard.guard_logging import get_logger

logger = get_logger(__name__)

ANALYSIS_FAILED = "Analysis failed"


def _dump(assessment: RiskAssessment) -> str:
    try:
        return json.dumps(assessment.to_dict(), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodingFailure(str(e)) from e


def encode_assessment(assessment: RiskAssessment) -> str:
    """Serialize an assessment; returns ANALYSIS_FAILED on any encoding error."""
    try:
        return _dump(assessment)
    except EncodingFailure as e:
        logger.warning("risk_encode_failed", error=str(e))
        return ANALYSIS_FAILED


def is_encoding_failure(output: str) -> bool:
    return output == ANALYSIS_FAILED
