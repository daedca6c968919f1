"""
Structured logging for the reputation service (structlog).

Modules log through get_logger(__name__); request code wraps its work in
profiling(address) so every record carries the wallet being profiled.
"""

from backend_reputation.reputation_logging.logger import get_logger, profiling

__all__ = ["get_logger", "profiling"]
