"""
Test that reputation_logging can be imported without circular import and logger works.
"""

from __future__ import annotations

import structlog


def test_logging_import():
    from backend_reputation.reputation_logging import get_logger, profiling

    logger = get_logger("test")
    assert logger is not None
    for level in ("info", "debug", "warning", "error"):
        assert hasattr(logger, level)
    logger.info("test_message", key="value")
    with profiling("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"):
        logger.warning("source_degraded", source="nfts")


def test_profiling_binds_address_only_inside_block():
    from backend_reputation.reputation_logging import profiling

    with profiling("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"):
        assert structlog.contextvars.get_contextvars()["address"] == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
    assert "address" not in structlog.contextvars.get_contextvars()
