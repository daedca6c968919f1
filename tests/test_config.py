"""
Tests for settings loading from env (config.settings / config.env).
"""

from __future__ import annotations

import pytest

from backend_reputation.config import get_settings, reset_settings_cache
from backend_reputation.config.settings import DEFAULT_TOKEN_CONTRACTS, parse_token_contracts

ENV_VARS = (
    "ETH_RPC_URL",
    "INFURA_API_KEY",
    "ALCHEMY_API_KEY",
    "SNAPSHOT_URL",
    "SCORING_SERVICE_URL",
    "AGGREGATION_TIMEOUT_SEC",
    "PROVIDER_TIMEOUT_SEC",
    "ENS_TIMEOUT_SEC",
    "TOKEN_CONTRACTS",
    "SNAPSHOT_MAX_VOTES",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.alchemy_nft_url is None
    assert settings.snapshot_url == "https://hub.snapshot.org/graphql"
    assert settings.aggregation_timeout_sec == 8.0
    assert settings.name_timeout_sec == 2.0
    assert [(t.symbol, t.address) for t in settings.token_contracts] == list(DEFAULT_TOKEN_CONTRACTS)


def test_infura_key_builds_rpc_url(clean_env):
    clean_env.setenv("INFURA_API_KEY", "abc123")
    assert get_settings().eth_rpc_url == "https://mainnet.infura.io/v3/abc123"


def test_explicit_rpc_url_wins(clean_env):
    clean_env.setenv("INFURA_API_KEY", "abc123")
    clean_env.setenv("ETH_RPC_URL", "http://localhost:8545")
    assert get_settings().eth_rpc_url == "http://localhost:8545"


def test_alchemy_and_timeouts(clean_env):
    clean_env.setenv("ALCHEMY_API_KEY", "k")
    clean_env.setenv("AGGREGATION_TIMEOUT_SEC", "2.5")
    clean_env.setenv("ENS_TIMEOUT_SEC", "0.5")
    settings = get_settings()
    assert settings.alchemy_nft_url == "https://eth-mainnet.g.alchemy.com/nft/v3/k"
    assert settings.aggregation_timeout_sec == 2.5
    assert settings.name_timeout_sec == 0.5


def test_bad_timeout_rejected(clean_env):
    clean_env.setenv("AGGREGATION_TIMEOUT_SEC", "soon")
    with pytest.raises(ValueError, match="AGGREGATION_TIMEOUT_SEC"):
        get_settings()


def test_parse_token_contracts_keeps_order_and_checksums():
    tokens = parse_token_contracts(
        "USDC:0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48, DAI:0x6b175474e89094c44da98b954eedeac495271d0f"
    )
    assert [t.symbol for t in tokens] == ["USDC", "DAI"]
    assert tokens[0].address == "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


@pytest.mark.parametrize(
    "raw",
    [
        "DAI",
        "DAI:0x123",
        ":0x6b175474e89094c44da98b954eedeac495271d0f",
        # mixed case with the last letter flipped fails EIP-55
        "DAI:0x6B175474E89094C44Da98b954EedeAC495271d0f",
    ],
)
def test_parse_token_contracts_rejects_bad_entries(raw):
    with pytest.raises(ValueError):
        parse_token_contracts(raw)
