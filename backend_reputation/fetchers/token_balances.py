"""
Token balance fetcher.

Queries balanceOf and decimals for every configured ERC-20, all tokens in
parallel. A failing token becomes amount 0 with its error string; it never
affects the other tokens. Output order follows the configured list.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Iterable

from backend_reputation.analysis_engine.models import TokenBalance
from backend_reputation.chain.rpc import EthereumRpcClient
from backend_reputation.config import TokenContract
from backend_reputation.core.exceptions import TokenQueryFailed
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)


def scale_amount(raw: int, decimals: int) -> Decimal:
    """raw / 10**decimals as an exact Decimal."""
    return Decimal(raw).scaleb(-decimals)


async def _fetch_one(rpc: EthereumRpcClient, token: TokenContract, owner: str) -> TokenBalance:
    try:
        raw, decimals = await asyncio.gather(
            rpc.erc20_balance_of(token.address, owner),
            rpc.erc20_decimals(token.address),
        )
    except Exception as e:
        err = TokenQueryFailed(f"{token.symbol}: {e}", source="tokens")
        logger.warning("token_query_failed", address=owner, symbol=token.symbol, error=str(err))
        return TokenBalance.failed(token.symbol, str(err))
    return TokenBalance(symbol=token.symbol, amount=scale_amount(raw, decimals))


async def fetch_token_balances(
    rpc: EthereumRpcClient,
    tokens: Iterable[TokenContract],
    owner: str,
) -> tuple[TokenBalance, ...]:
    """One TokenBalance per configured token, in configured order. Never raises for a token failure."""
    results = await asyncio.gather(*(_fetch_one(rpc, token, owner) for token in tokens))
    return tuple(results)


def failed_token_balances(
    tokens: Iterable[TokenContract],
    error: BaseException | str,
) -> tuple[TokenBalance, ...]:
    """Placeholder entries used when the whole token fan-out fails or misses the deadline."""
    return tuple(TokenBalance.failed(token.symbol, str(error)) for token in tokens)
