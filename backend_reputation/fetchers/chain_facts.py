"""
Chain fact fetcher: balance, transaction count, code presence, ENS name.

The four reads are independent and run concurrently. Balance and
transaction count are load-bearing; code presence decides isContract; the
ENS name is decorative and silently becomes None on any failure.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

from backend_reputation.analysis_engine.models import ChainFacts
from backend_reputation.chain.ens import lookup_name
from backend_reputation.chain.rpc import EthereumRpcClient
from backend_reputation.core.exceptions import ChainDataUnavailable
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)

WEI_DECIMALS = 18
DEFAULT_NAME_TIMEOUT_SEC = 2.0


def wei_to_ether(wei: int) -> Decimal:
    return Decimal(wei).scaleb(-WEI_DECIMALS)


async def fetch_chain_facts(
    rpc: EthereumRpcClient,
    address: str,
    *,
    name_timeout_sec: float = DEFAULT_NAME_TIMEOUT_SEC,
) -> ChainFacts:
    """
    Read ChainFacts for a validated, checksummed address.

    The ENS lookup gets its own name_timeout_sec budget so a hanging resolver
    yields no name instead of holding up the load-bearing reads.

    Raises ChainDataUnavailable when balance, transaction count or code
    cannot be read.
    """
    balance, tx_count, code, name = await asyncio.gather(
        rpc.get_balance(address),
        rpc.get_transaction_count(address),
        rpc.get_code(address),
        asyncio.wait_for(lookup_name(rpc, address), timeout=name_timeout_sec),
        return_exceptions=True,
    )

    for field_name, value in (("balance", balance), ("tx_count", tx_count), ("code", code)):
        if isinstance(value, BaseException):
            logger.error("chain_fact_failed", address=address, field=field_name, error=str(value))
            raise ChainDataUnavailable(f"{field_name} unavailable: {value}", source="chain") from value

    if isinstance(name, BaseException):
        logger.info("reverse_name_degraded", address=address, error=str(name) or type(name).__name__)
        name = None

    return ChainFacts(
        native_balance=wei_to_ether(balance),
        transaction_count=tx_count,
        is_contract=len(code) > 0,
        reverse_name=name,
    )
