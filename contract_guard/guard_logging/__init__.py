"""
Structured logging for Contract Guard.

JSON logs with timestamp, event_type and keyword fields.
Use get_logger() in all modules for aggregation-friendly output.
"""

from contract_guard.guard_logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
