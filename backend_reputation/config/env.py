"""
Environment variable loading for Backend Reputation.

- ETH_RPC_URL: Ethereum JSON-RPC endpoint (wins over INFURA_API_KEY)
- INFURA_API_KEY: builds the Infura mainnet URL when ETH_RPC_URL is unset
- ALCHEMY_API_KEY: NFT indexer key
- SNAPSHOT_URL: Snapshot hub GraphQL endpoint
- SCORING_SERVICE_URL: role scoring service base URL
- AGGREGATION_TIMEOUT_SEC / PROVIDER_TIMEOUT_SEC: deadlines (seconds)
- TOKEN_CONTRACTS: "SYM:0xaddr,SYM:0xaddr" override of the token list
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is backend_reputation/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

INFURA_MAINNET_URL_TEMPLATE = "https://mainnet.infura.io/v3/{key}"
ALCHEMY_NFT_URL_TEMPLATE = "https://eth-mainnet.g.alchemy.com/nft/v3/{key}"
DEFAULT_SNAPSHOT_URL = "https://hub.snapshot.org/graphql"
DEFAULT_SCORING_SERVICE_URL = "https://mlflaskmodel.onrender.com"
PUBLIC_RPC_URL = "https://cloudflare-eth.com"


def load_reputation_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_eth_rpc_url() -> str:
    """
    Resolve the Ethereum RPC URL.
    Order: ETH_RPC_URL > INFURA_API_KEY > public endpoint.
    """
    load_reputation_env()
    url = _env("ETH_RPC_URL")
    if url:
        return url
    key = _env("INFURA_API_KEY")
    if key:
        return INFURA_MAINNET_URL_TEMPLATE.format(key=key)
    return PUBLIC_RPC_URL


def get_alchemy_nft_url() -> str | None:
    """Alchemy NFT API base URL, or None when ALCHEMY_API_KEY is missing."""
    load_reputation_env()
    key = _env("ALCHEMY_API_KEY")
    if not key:
        return None
    return ALCHEMY_NFT_URL_TEMPLATE.format(key=key)


def get_snapshot_url() -> str:
    load_reputation_env()
    return _env("SNAPSHOT_URL", DEFAULT_SNAPSHOT_URL)


def get_scoring_service_url() -> str:
    load_reputation_env()
    return _env("SCORING_SERVICE_URL", DEFAULT_SCORING_SERVICE_URL).rstrip("/")


def get_aggregation_timeout_sec() -> float:
    """Deadline for the whole fetcher fan-out of one request."""
    load_reputation_env()
    return _env_float("AGGREGATION_TIMEOUT_SEC", 8.0)


def get_name_timeout_sec() -> float:
    """Budget for the ENS reverse lookup inside the chain fetcher."""
    load_reputation_env()
    return _env_float("ENS_TIMEOUT_SEC", 2.0)


def get_provider_timeout_sec() -> float:
    """Per-HTTP-call timeout handed to the shared httpx clients."""
    load_reputation_env()
    return _env_float("PROVIDER_TIMEOUT_SEC", 10.0)


def get_snapshot_max_votes() -> int:
    load_reputation_env()
    return int(_env_float("SNAPSHOT_MAX_VOTES", 1000))


def get_token_contracts_raw() -> str:
    load_reputation_env()
    return _env("TOKEN_CONTRACTS")


def get_cors_origins() -> list[str]:
    load_reputation_env()
    raw = _env("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]
