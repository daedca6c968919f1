"""
NFT ownership fetcher (Alchemy NFT API v3, getNFTsForOwner).

Summary only: the indexer's total count of owned assets, never the assets
themselves.
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_reputation.analysis_engine.models import NFTSummary
from backend_reputation.core.exceptions import IndexerUnavailable


class AlchemyNFTClient:
    """Shared indexer handle; base_url is https://eth-mainnet.g.alchemy.com/nft/v3/<key>."""

    def __init__(self, client: httpx.AsyncClient, base_url: str | None) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/") if base_url else None

    async def get_nfts_for_owner(self, owner: str) -> dict[str, Any]:
        if not self._base_url:
            raise IndexerUnavailable("ALCHEMY_API_KEY is not configured", source="nfts")
        try:
            r = await self._client.get(
                f"{self._base_url}/getNFTsForOwner",
                params={"owner": owner, "withMetadata": "false"},
            )
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            raise IndexerUnavailable(f"indexer request failed: {e}", source="nfts") from e
        except ValueError as e:
            raise IndexerUnavailable("indexer response is not JSON", source="nfts") from e
        if not isinstance(data, dict):
            raise IndexerUnavailable("indexer response is not an object", source="nfts")
        return data


def _count_owned(data: dict[str, Any]) -> int:
    total = data.get("totalCount")
    if isinstance(total, int) and not isinstance(total, bool) and total >= 0:
        return total
    owned = data.get("ownedNfts")
    if owned is None:
        return 0
    if not isinstance(owned, list):
        raise IndexerUnavailable("ownedNfts is not a list", source="nfts")
    return len(owned)


async def fetch_nft_summary(indexer: AlchemyNFTClient, owner: str) -> NFTSummary:
    """Raises IndexerUnavailable on any provider failure."""
    data = await indexer.get_nfts_for_owner(owner)
    return NFTSummary(count=_count_owned(data))
