"""
Tests for the NFT summary and governance participation fetchers.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from backend_reputation.core.exceptions import GovernanceUnavailable, IndexerUnavailable
from backend_reputation.fetchers.governance import SnapshotClient, fetch_governance_summary
from backend_reputation.fetchers.nft import AlchemyNFTClient, fetch_nft_summary

from fakes import NFT_HOST, SNAPSHOT_HOST, WALLET


def _indexer(fake, base_url=f"https://{NFT_HOST}/nft/v3/key") -> AlchemyNFTClient:
    return AlchemyNFTClient(httpx.AsyncClient(transport=httpx.MockTransport(fake.handle)), base_url)


def _snapshot(fake) -> SnapshotClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake.handle))
    return SnapshotClient(http, f"https://{SNAPSHOT_HOST}/graphql", max_votes=500)


def test_nft_summary_uses_total_count(fake):
    fake.nft_payload = {"ownedNfts": [{"id": 1}], "totalCount": 12}
    summary = asyncio.run(fetch_nft_summary(_indexer(fake), WALLET))
    assert summary.count == 12
    assert summary.has_any is True
    assert fake.calls_to(NFT_HOST) == ["/nft/v3/key/getNFTsForOwner"]


def test_nft_summary_falls_back_to_list_length(fake):
    fake.nft_payload = {"ownedNfts": [{"id": 1}, {"id": 2}]}
    assert asyncio.run(fetch_nft_summary(_indexer(fake), WALLET)).count == 2


def test_nft_summary_empty(fake):
    fake.nft_payload = {"ownedNfts": [], "totalCount": 0}
    summary = asyncio.run(fetch_nft_summary(_indexer(fake), WALLET))
    assert summary.count == 0
    assert summary.has_any is False


def test_nft_provider_failure_raises(fake):
    fake.nft_status = 502
    with pytest.raises(IndexerUnavailable):
        asyncio.run(fetch_nft_summary(_indexer(fake), WALLET))


def test_nft_missing_api_key_raises_without_call(fake):
    with pytest.raises(IndexerUnavailable, match="ALCHEMY_API_KEY"):
        asyncio.run(fetch_nft_summary(_indexer(fake, base_url=None), WALLET))
    assert fake.calls == []


def test_governance_counts_votes_for_lowercased_voter(fake):
    summary = asyncio.run(fetch_governance_summary(_snapshot(fake), WALLET))
    assert summary.vote_count == 2
    sent = fake.last_json[SNAPSHOT_HOST]
    assert sent["variables"] == {"voter": WALLET.lower(), "first": 500}
    assert WALLET.lower() not in sent["query"]


def test_governance_no_votes(fake):
    fake.snapshot_payload = {"data": {"votes": []}}
    assert asyncio.run(fetch_governance_summary(_snapshot(fake), WALLET)).vote_count == 0


@pytest.mark.parametrize(
    "status, payload",
    [
        (500, None),
        (200, {"errors": [{"message": "bad query"}]}),
        (200, {"data": {"votes": "nope"}}),
    ],
)
def test_governance_provider_failure_raises(fake, status, payload):
    fake.snapshot_status = status
    fake.snapshot_payload = payload
    with pytest.raises(GovernanceUnavailable):
        asyncio.run(fetch_governance_summary(_snapshot(fake), WALLET))
