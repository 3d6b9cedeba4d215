"""
Detector rules: fixed lexical checks for known scam pattern families.

Each rule is a pure predicate over normalized (lower-cased) contract source
plus a weight and the issue text reported when it triggers. Matching is a
literal substring test with no word-boundary awareness, so identifiers or
comments that merely contain a pattern also trigger.

DEFAULT_RULES is the shared, read-only rule table. Its order is the order
issues are reported in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

HONEYPOT_PATTERNS = (
    "selllimit",
    "maxsell",
    "whitelistonly",
    "tradingenabled",
    "isblacklisted",
    "cantransfer",
    "allowedtransfer",
)

RUGPULL_PATTERNS = (
    "mint(address,uint256)",
    "withdraweth",
    "drainliquidity",
    "emergencywithdraw",
    "withdrawtokens",
    "transferownership",
)

OWNERSHIP_MODIFIER = "onlyowner"
OWNERSHIP_RENOUNCE = "renounceownership"

FEE_PATTERNS = ("setfee", "updatetax", "changefee")

RULE_HONEYPOT = "honeypot"
RULE_RUGPULL = "rugpull"
RULE_OWNERSHIP = "ownership_risk"
RULE_FEE = "fee_manipulation"

ISSUE_HONEYPOT = "Honeypot pattern detected"
ISSUE_RUGPULL = "Rug pull pattern detected"
ISSUE_OWNERSHIP = "Centralized ownership risk"
ISSUE_FEE = "Dynamic fee manipulation possible"


@dataclass(frozen=True)
class DetectorRule:
    """One weighted scam-pattern rule."""

    name: str
    weight: int
    issue: str
    predicate: Callable[[str], bool]
    patterns: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def matches(self, normalized: str) -> bool:
        return bool(self.predicate(normalized))


def _contains_any(code: str, patterns: tuple[str, ...]) -> bool:
    return any(pattern in code for pattern in patterns)


def detect_honeypot(code: str) -> bool:
    """Sell limits, whitelists, trading switches or blacklists that can trap holders."""
    return _contains_any(code, HONEYPOT_PATTERNS)


def detect_rugpull(code: str) -> bool:
    """Owner mint, withdraw or liquidity-drain entry points."""
    return _contains_any(code, RUGPULL_PATTERNS)


def detect_ownership_risk(code: str) -> bool:
    """Owner-only functions with no way to renounce ownership."""
    return OWNERSHIP_MODIFIER in code and OWNERSHIP_RENOUNCE not in code


def detect_fee_manipulation(code: str) -> bool:
    """Fees or taxes the owner can change after deployment."""
    return _contains_any(code, FEE_PATTERNS)


DEFAULT_RULES: tuple[DetectorRule, ...] = (
    DetectorRule(RULE_HONEYPOT, 30, ISSUE_HONEYPOT, detect_honeypot, HONEYPOT_PATTERNS),
    DetectorRule(RULE_RUGPULL, 40, ISSUE_RUGPULL, detect_rugpull, RUGPULL_PATTERNS),
    DetectorRule(
        RULE_OWNERSHIP,
        25,
        ISSUE_OWNERSHIP,
        detect_ownership_risk,
        (OWNERSHIP_MODIFIER,),
        (OWNERSHIP_RENOUNCE,),
    ),
    DetectorRule(RULE_FEE, 20, ISSUE_FEE, detect_fee_manipulation, FEE_PATTERNS),
)

# Upper bound of any score produced by DEFAULT_RULES (115)
MAX_RISK_SCORE = sum(rule.weight for rule in DEFAULT_RULES)


def describe_rules(rules: tuple[DetectorRule, ...] = DEFAULT_RULES) -> list[dict[str, object]]:
    """Plain-dict view of a rule table (predicates omitted) for API output."""
    return [
        {
            "name": rule.name,
            "weight": rule.weight,
            "issue": rule.issue,
            "patterns": list(rule.patterns),
            "excludes": list(rule.excludes),
        }
        for rule in rules
    ]
