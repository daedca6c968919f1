"""
Fetchers — one external data retrieval each.

Every fetcher returns its sub-result or raises a domain exception; the
aggregator's policy table decides what a failure means for the request.
"""

from backend_reputation.fetchers.chain_facts import fetch_chain_facts
from backend_reputation.fetchers.governance import SnapshotClient, fetch_governance_summary
from backend_reputation.fetchers.nft import AlchemyNFTClient, fetch_nft_summary
from backend_reputation.fetchers.token_balances import fetch_token_balances, failed_token_balances

__all__ = [
    "AlchemyNFTClient",
    "SnapshotClient",
    "fetch_chain_facts",
    "fetch_governance_summary",
    "fetch_nft_summary",
    "fetch_token_balances",
    "failed_token_balances",
]
