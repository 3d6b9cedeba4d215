"""
API server package — HTTP interface over the contract scanner.

Accepts contract source, delegates to the analytics engine, and keeps
in-process analysis counters.
"""
