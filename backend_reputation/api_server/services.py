"""
Process-wide provider handles.

build_services() creates one httpx.AsyncClient per external provider and
wires the RPC client, indexer, Snapshot client, aggregator and scoring
client on top of them. The result is immutable and shared by every request.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from backend_reputation.analysis_engine.aggregator import ReputationAggregator
from backend_reputation.api_server.scoring_client import ScoringClient
from backend_reputation.chain.rpc import EthereumRpcClient
from backend_reputation.config import Settings
from backend_reputation.fetchers import AlchemyNFTClient, SnapshotClient
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppServices:
    aggregator: ReputationAggregator
    scoring: ScoringClient
    clients: tuple[httpx.AsyncClient, ...] = ()

    async def aclose(self) -> None:
        for client in self.clients:
            await client.aclose()


def build_services(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppServices:
    """
    Build shared provider handles from settings.

    transport replaces the network for every client (tests pass an
    httpx.MockTransport).
    """

    def _client() -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=settings.provider_timeout_sec, transport=transport)

    rpc_http, nft_http, snapshot_http, scoring_http = _client(), _client(), _client(), _client()
    rpc = EthereumRpcClient(rpc_http, settings.eth_rpc_url)
    aggregator = ReputationAggregator(
        rpc=rpc,
        indexer=AlchemyNFTClient(nft_http, settings.alchemy_nft_url),
        snapshot=SnapshotClient(snapshot_http, settings.snapshot_url, settings.snapshot_max_votes),
        tokens=settings.token_contracts,
        timeout_sec=settings.aggregation_timeout_sec,
        name_timeout_sec=settings.name_timeout_sec,
    )
    if settings.alchemy_nft_url is None:
        logger.warning("alchemy_not_configured", detail="nft summary will always degrade to zero")
    return AppServices(
        aggregator=aggregator,
        scoring=ScoringClient(scoring_http, settings.scoring_service_url),
        clients=(rpc_http, nft_http, snapshot_http, scoring_http),
    )
