"""
Tests for risk aggregation and classification (risk_engine.py).

Level and recommendation use different thresholds (70/40 vs >60/>30);
boundaries are checked on both tables.
"""

from __future__ import annotations

import pytest

from contract_guard.analytics.detectors import DetectorRule
from contract_guard.analytics.risk_engine import (
    RECOMMEND_AVOID,
    RECOMMEND_CAUTION,
    RECOMMEND_SAFE,
    RISK_HIGH,
    RISK_LOW,
    RISK_MEDIUM,
    RiskAssessment,
    classify_level,
    recommend,
    score_rules,
)


@pytest.mark.parametrize(
    "score, level",
    [(0, RISK_LOW), (39, RISK_LOW), (40, RISK_MEDIUM), (69, RISK_MEDIUM), (70, RISK_HIGH), (115, RISK_HIGH)],
)
def test_classify_level_boundaries(score, level):
    assert classify_level(score) == level


@pytest.mark.parametrize(
    "score, advice",
    [(0, RECOMMEND_SAFE), (30, RECOMMEND_SAFE), (31, RECOMMEND_CAUTION), (60, RECOMMEND_CAUTION), (61, RECOMMEND_AVOID)],
)
def test_recommend_boundaries(score, advice):
    assert recommend(score) == advice


def test_threshold_tables_differ():
    """65 is MEDIUM yet already AVOID; 35 is LOW yet CAUTION."""
    assert classify_level(65) == RISK_MEDIUM
    assert recommend(65) == RECOMMEND_AVOID
    assert classify_level(35) == RISK_LOW
    assert recommend(35) == RECOMMEND_CAUTION


def test_recommendation_texts():
    assert RECOMMEND_AVOID == "AVOID: High scam probability"
    assert RECOMMEND_CAUTION == "CAUTION: Conduct thorough research"
    assert RECOMMEND_SAFE == "SAFE: Appears legitimate"


def test_score_rules_empty():
    r = score_rules("")
    assert r == RiskAssessment(0, RISK_LOW, (), (RECOMMEND_SAFE,))


def test_score_rules_sums_weights_without_short_circuit():
    """Every triggered rule contributes; no rule stops evaluation of later ones."""
    r = score_rules("selllimit withdraweth onlyowner setfee")
    assert r.risk_score == 115
    assert r.risk_level == RISK_HIGH
    assert len(r.issues) == 4
    assert r.recommendations == (RECOMMEND_AVOID,)


def test_score_rules_custom_table():
    """A caller-supplied rule table replaces the defaults; no clamping above 100."""
    rules = (
        DetectorRule("a", 80, "A found", lambda c: "a" in c),
        DetectorRule("b", 80, "B found", lambda c: "b" in c),
    )
    r = score_rules("ab", rules)
    assert r.risk_score == 160
    assert r.issues == ("A found", "B found")
    assert r.risk_level == RISK_HIGH


def test_score_rules_does_not_mutate_rules():
    from contract_guard.analytics.detectors import DEFAULT_RULES

    before = tuple(DEFAULT_RULES)
    score_rules("selllimit")
    assert DEFAULT_RULES == before


def test_to_dict_key_order():
    r = RiskAssessment(30, RISK_LOW, ("Honeypot pattern detected",), (RECOMMEND_SAFE,))
    d = r.to_dict()
    assert list(d) == ["risk_score", "risk_level", "issues", "recommendations"]
    assert d["issues"] == ["Honeypot pattern detected"]
    assert isinstance(d["recommendations"], list)
