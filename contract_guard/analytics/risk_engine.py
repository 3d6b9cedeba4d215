"""
Risk engine: aggregate triggered detectors into a score, level and advice.

Score is the plain sum of triggered rule weights (no clamping; ceiling is
MAX_RISK_SCORE). Level and recommendation use two separate threshold
tables: level is HIGH at >= 70 and MEDIUM at >= 40, while the
recommendation is AVOID above 60 and CAUTION above 30. A score of 65 is
therefore MEDIUM with an AVOID recommendation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from contract_guard.analytics.detectors import DEFAULT_RULES, DetectorRule
from contract_guard.guard_logging import get_logger

logger = get_logger(__name__)

RISK_LOW = "LOW"
RISK_MEDIUM = "MEDIUM"
RISK_HIGH = "HIGH"
RISK_LEVELS = (RISK_LOW, RISK_MEDIUM, RISK_HIGH)

LEVEL_HIGH_MIN = 70
LEVEL_MEDIUM_MIN = 40

RECOMMEND_AVOID_ABOVE = 60
RECOMMEND_CAUTION_ABOVE = 30

RECOMMEND_AVOID = "AVOID: High scam probability"
RECOMMEND_CAUTION = "CAUTION: Conduct thorough research"
RECOMMEND_SAFE = "SAFE: Appears legitimate"


@dataclass(frozen=True)
class RiskAssessment:
    """Verdict for one contract source. Field order is the wire order."""

    risk_score: int = 0
    risk_level: str = RISK_LOW
    issues: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk_score": self.risk_score,
            "risk_level": self.risk_level,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }


def classify_level(score: int) -> str:
    """Map a risk score to LOW / MEDIUM / HIGH."""
    if score >= LEVEL_HIGH_MIN:
        return RISK_HIGH
    if score >= LEVEL_MEDIUM_MIN:
        return RISK_MEDIUM
    return RISK_LOW


def recommend(score: int) -> str:
    """Pick the single recommendation for a risk score."""
    if score > RECOMMEND_AVOID_ABOVE:
        return RECOMMEND_AVOID
    if score > RECOMMEND_CAUTION_ABOVE:
        return RECOMMEND_CAUTION
    return RECOMMEND_SAFE


def score_rules(
    normalized: str,
    rules: tuple[DetectorRule, ...] = DEFAULT_RULES,
) -> RiskAssessment:
    """
    Evaluate every rule against normalized source and build the assessment.

    All rules run; none short-circuits another. Issues follow rule order,
    not the order patterns appear in the source.
    """
    score = 0
    issues: list[str] = []
    triggered: list[str] = []
    for rule in rules:
        if rule.matches(normalized):
            score += rule.weight
            issues.append(rule.issue)
            triggered.append(rule.name)

    assessment = RiskAssessment(
        risk_score=score,
        risk_level=classify_level(score),
        issues=tuple(issues),
        recommendations=(recommend(score),),
    )
    logger.debug(
        "risk_engine_result",
        triggered=triggered,
        risk_score=score,
        risk_level=assessment.risk_level,
    )
    return assessment
