"""
Analytics pipeline: normalize -> detect -> aggregate -> classify -> encode.

analyze_contract() returns the typed RiskAssessment; analyze() returns the
JSON text contract used by the HTTP server and CLI. Both are pure and safe
to call concurrently.
"""

from __future__ import annotations

from contract_guard.analytics.detectors import DEFAULT_RULES, DetectorRule
from contract_guard.analytics.encoder import encode_assessment
from contract_guard.analytics.normalizer import normalize_source
from contract_guard.analytics.risk_engine import RiskAssessment, score_rules
from contract_guard.guard_logging import get_logger

logger = get_logger(__name__)


def analyze_contract(
    source: str | None,
    rules: tuple[DetectorRule, ...] = DEFAULT_RULES,
) -> RiskAssessment:
    """Score contract source against a rule table."""
    normalized = normalize_source(source)
    assessment = score_rules(normalized, rules)
    logger.debug(
        "contract_scan_done",
        source_chars=len(normalized),
        risk_score=assessment.risk_score,
        risk_level=assessment.risk_level,
        issue_count=len(assessment.issues),
    )
    return assessment


def analyze(source: str | None) -> str:
    """
    Analyze contract source and return the JSON-encoded verdict.

    {"risk_score": int, "risk_level": str, "issues": [...], "recommendations": [...]}
    or the literal "Analysis failed" if encoding fails.
    """
    return encode_assessment(analyze_contract(source))
