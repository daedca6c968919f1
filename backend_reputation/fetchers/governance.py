"""
Governance participation fetcher (Snapshot hub GraphQL).

Counts vote records whose voter is the lower-cased address. The voter is
sent as a GraphQL variable, never interpolated into the query text.
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_reputation.analysis_engine.models import GovernanceSummary
from backend_reputation.core.exceptions import GovernanceUnavailable

VOTES_QUERY = """
query Votes($voter: String!, $first: Int!) {
  votes(first: $first, where: { voter: $voter }) {
    id
  }
}
"""


class SnapshotClient:
    def __init__(self, client: httpx.AsyncClient, url: str, max_votes: int = 1000) -> None:
        self._client = client
        self._url = url
        self._max_votes = max_votes

    async def query_votes(self, voter: str) -> list[Any]:
        payload = {
            "query": VOTES_QUERY,
            "variables": {"voter": voter, "first": self._max_votes},
        }
        try:
            r = await self._client.post(self._url, json=payload)
            r.raise_for_status()
            body = r.json()
        except httpx.HTTPError as e:
            raise GovernanceUnavailable(f"snapshot request failed: {e}", source="governance") from e
        except ValueError as e:
            raise GovernanceUnavailable("snapshot response is not JSON", source="governance") from e
        if not isinstance(body, dict):
            raise GovernanceUnavailable("snapshot response is not an object", source="governance")
        if body.get("errors"):
            raise GovernanceUnavailable(f"snapshot errors: {body['errors']}", source="governance")
        votes = (body.get("data") or {}).get("votes")
        if votes is None:
            return []
        if not isinstance(votes, list):
            raise GovernanceUnavailable("votes is not a list", source="governance")
        return votes


async def fetch_governance_summary(snapshot: SnapshotClient, address: str) -> GovernanceSummary:
    """Raises GovernanceUnavailable; the aggregator degrades it to zero votes."""
    votes = await snapshot.query_votes(address.lower())
    return GovernanceSummary(vote_count=len(votes))
