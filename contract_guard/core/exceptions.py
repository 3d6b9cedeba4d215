"""
Application-level exceptions.

The scoring engine is total over any string input, so the only failure
kind is EncodingFailure, raised while turning an assessment into text.
The encoder catches it and returns a sentinel string instead.
"""

from __future__ import annotations


class ContractGuardError(Exception):
    """Base class for Contract Guard errors."""


class EncodingFailure(ContractGuardError):
    """A RiskAssessment could not be serialized to JSON."""
