"""
Data models for fetcher output and the assembled reputation profile.

Each fetcher owns exactly one of these sub-results; the aggregator only
composes them. All models are frozen so a sub-result cannot change after it
has been handed over.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ChainFacts:
    """Core identity signals read straight from the chain RPC."""

    native_balance: Decimal
    transaction_count: int
    is_contract: bool
    reverse_name: str | None = None


@dataclass(frozen=True)
class TokenBalance:
    """Balance of one configured ERC-20; error is set when the query failed (amount is then 0)."""

    symbol: str
    amount: Decimal
    error: str | None = None

    @classmethod
    def failed(cls, symbol: str, error: str) -> "TokenBalance":
        return cls(symbol=symbol, amount=Decimal(0), error=error or "unknown error")


@dataclass(frozen=True)
class NFTSummary:
    count: int = 0

    @property
    def has_any(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class GovernanceSummary:
    vote_count: int = 0


@dataclass(frozen=True)
class ReputationProfile:
    """
    One wallet's composite profile, rebuilt fresh for every request.

    Zeroed optional fields may mean a degraded source, not a verified absence.
    """

    address: str
    chain: ChainFacts
    tokens: tuple[TokenBalance, ...]
    nfts: NFTSummary
    governance: GovernanceSummary

    @property
    def contract_deployments(self) -> int:
        """Rough estimate: 1 when the address holds code and has sent transactions."""
        return 1 if self.chain.is_contract and self.chain.transaction_count > 0 else 0
