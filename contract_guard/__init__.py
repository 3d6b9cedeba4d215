"""
Contract Guard — lexical scam-pattern scanner for smart-contract source.

Scores contract source against a fixed table of red-flag detectors and
returns a risk verdict. The scoring engine is pure; the HTTP server and
CLI are thin adapters around it.
"""

__version__ = "0.1.0"
