"""
Contract Guard analytics engine.

Scores smart-contract source text for scam patterns.
Modules: normalizer, detectors, risk_engine, encoder, analytics_pipeline.
"""

from contract_guard.analytics.analytics_pipeline import analyze, analyze_contract
from contract_guard.analytics.detectors import DEFAULT_RULES, MAX_RISK_SCORE, DetectorRule
from contract_guard.analytics.encoder import ANALYSIS_FAILED, encode_assessment
from contract_guard.analytics.risk_engine import RiskAssessment, score_rules

__all__ = [
    "analyze",
    "analyze_contract",
    "score_rules",
    "encode_assessment",
    "DetectorRule",
    "RiskAssessment",
    "DEFAULT_RULES",
    "MAX_RISK_SCORE",
    "ANALYSIS_FAILED",
]
