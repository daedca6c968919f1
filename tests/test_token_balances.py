"""
Tests for the token balance fetcher: per-token isolation, scaling, ordering.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

import httpx

from backend_reputation.chain.rpc import EthereumRpcClient
from backend_reputation.config import TokenContract
from backend_reputation.fetchers.token_balances import (
    failed_token_balances,
    fetch_token_balances,
    scale_amount,
)

from fakes import DAI, RPC_HOST, USDC, WALLET


def _rpc(fake) -> EthereumRpcClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake.handle))
    return EthereumRpcClient(http, f"https://{RPC_HOST}/v3/key")


def test_scale_amount():
    assert scale_amount(2_500_000, 6) == Decimal("2.5")
    assert scale_amount(1, 18) == Decimal("1E-18")
    assert scale_amount(0, 6) == Decimal(0)
    assert scale_amount(42, 0) == Decimal(42)


def test_all_tokens_succeed(fake):
    balances = asyncio.run(fetch_token_balances(_rpc(fake), (DAI, USDC), WALLET))
    assert [b.symbol for b in balances] == ["DAI", "USDC"]
    assert balances[0].amount == Decimal("1.5")
    assert balances[1].amount == Decimal("2.5")
    assert all(b.error is None for b in balances)


def test_one_failing_token_is_isolated(fake):
    fake.failing_tokens.add(DAI.address.lower())
    balances = asyncio.run(fetch_token_balances(_rpc(fake), (DAI, USDC), WALLET))
    assert len(balances) == 2
    dai, usdc = balances
    assert dai.symbol == "DAI"
    assert dai.amount == Decimal(0)
    assert dai.error and "DAI" in dai.error
    assert usdc.amount == Decimal("2.5")
    assert usdc.error is None


def test_order_follows_configuration_not_arrival(fake):
    """USDC answers instantly, DAI only after a delay; output order still follows config."""
    slow = TokenContract("SLOW", "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb")
    fake.tokens[slow.address.lower()] = (7, 0)
    original = fake.handle

    async def handle(request):
        if slow.address.lower()[2:] in request.content.decode().lower():
            await asyncio.sleep(0.05)
        return await original(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handle))
    rpc = EthereumRpcClient(http, f"https://{RPC_HOST}/v3/key")
    balances = asyncio.run(fetch_token_balances(rpc, (slow, USDC, DAI), WALLET))
    assert [b.symbol for b in balances] == ["SLOW", "USDC", "DAI"]
    assert balances[0].amount == Decimal(7)


def test_balance_and_decimals_queried_per_token(fake):
    asyncio.run(fetch_token_balances(_rpc(fake), (DAI, USDC), WALLET))
    calls = fake.calls_to(RPC_HOST)
    assert calls.count(f"eth_call:{DAI.address.lower()}") == 2
    assert calls.count(f"eth_call:{USDC.address.lower()}") == 2


def test_empty_token_list(fake):
    assert asyncio.run(fetch_token_balances(_rpc(fake), (), WALLET)) == ()


def test_failed_token_balances_placeholders():
    out = failed_token_balances((DAI, USDC), TimeoutError("tokens missed the deadline"))
    assert [t.symbol for t in out] == ["DAI", "USDC"]
    assert all(t.amount == 0 and t.error == "tokens missed the deadline" for t in out)
