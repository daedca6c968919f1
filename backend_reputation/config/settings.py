"""
Application settings.

Responsibilities:
- Collect provider endpoints, deadlines and the static token list from env.
- Parse and validate the TOKEN_CONTRACTS override.
- Expose one frozen Settings object shared by the API server and fetchers.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field

from backend_reputation.config import env

# Mainnet ERC-20 contracts queried for every profile
DEFAULT_TOKEN_CONTRACTS = (
    ("DAI", "0x6B175474E89094C44Da98b954EedeAC495271d0F"),
    ("USDC", "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"),
)


@dataclass(frozen=True)
class TokenContract:
    """One statically configured ERC-20 contract."""

    symbol: str
    address: str


@dataclass(frozen=True)
class Settings:
    eth_rpc_url: str
    alchemy_nft_url: str | None
    snapshot_url: str
    scoring_service_url: str
    aggregation_timeout_sec: float = 8.0
    provider_timeout_sec: float = 10.0
    name_timeout_sec: float = 2.0
    snapshot_max_votes: int = 1000
    token_contracts: tuple[TokenContract, ...] = field(default_factory=tuple)
    cors_origins: tuple[str, ...] = ("*",)


def parse_token_contracts(raw: str) -> tuple[TokenContract, ...]:
    """
    Parse "SYM:0xaddr,SYM:0xaddr" into TokenContract entries (order kept).

    Addresses are checksummed; a malformed entry raises ValueError so a bad
    deployment fails at startup rather than on every request.
    """
    from backend_reputation.chain.address import InvalidAddress, validate_address

    if not raw.strip():
        return tuple(TokenContract(sym, addr) for sym, addr in DEFAULT_TOKEN_CONTRACTS)
    out: list[TokenContract] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        symbol, sep, address = item.partition(":")
        if not sep or not symbol.strip():
            raise ValueError(f"TOKEN_CONTRACTS entry must be SYMBOL:ADDRESS, got {item!r}")
        try:
            checksummed = validate_address(address)
        except InvalidAddress as e:
            raise ValueError(f"TOKEN_CONTRACTS entry {item!r} has an invalid address") from e
        out.append(TokenContract(symbol=symbol.strip(), address=checksummed))
    return tuple(out)


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, built from env on first call."""
    return Settings(
        eth_rpc_url=env.get_eth_rpc_url(),
        alchemy_nft_url=env.get_alchemy_nft_url(),
        snapshot_url=env.get_snapshot_url(),
        scoring_service_url=env.get_scoring_service_url(),
        aggregation_timeout_sec=env.get_aggregation_timeout_sec(),
        provider_timeout_sec=env.get_provider_timeout_sec(),
        name_timeout_sec=env.get_name_timeout_sec(),
        snapshot_max_votes=env.get_snapshot_max_votes(),
        token_contracts=parse_token_contracts(env.get_token_contracts_raw()),
        cors_origins=tuple(env.get_cors_origins()),
    )


def reset_settings_cache() -> None:
    """Drop cached settings (tests change env between cases)."""
    get_settings.cache_clear()
