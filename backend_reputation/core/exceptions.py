"""
Application-level exceptions.

Every error carries an HTTP status and a public message so the API layer can
render it without inspecting the type. Only InvalidAddress and
AggregationFailed (and ScoringUnavailable on the role route) ever reach a
client; the per-source errors are absorbed by the aggregator.
"""

from __future__ import annotations


class ReputationError(Exception):
    """Base class for all Backend Reputation errors."""

    status_code = 500
    public_message = "Internal error"

    def __init__(self, message: str | None = None, *, source: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.source = source


class InvalidAddress(ReputationError):
    """Client supplied a missing, non-string or malformed address."""

    status_code = 400
    public_message = "Invalid Ethereum address"


class ChainDataUnavailable(ReputationError):
    """Balance or transaction count could not be read from the RPC."""

    public_message = "Chain data unavailable"


class AggregationFailed(ReputationError):
    """A fatal source failed; no profile can be produced."""

    public_message = "Failed to fetch onchain data"


class TokenQueryFailed(ReputationError):
    public_message = "Token query failed"


class IndexerUnavailable(ReputationError):
    public_message = "NFT indexer unavailable"


class GovernanceUnavailable(ReputationError):
    public_message = "Governance provider unavailable"


class ScoringUnavailable(ReputationError):
    """Downstream role scoring service failed or answered garbage."""

    public_message = "Failed to calculate role"
