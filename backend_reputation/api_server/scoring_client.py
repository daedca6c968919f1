"""
Client for the downstream role scoring service.

The service receives GitHub signals plus profile fields and answers a role
label with two sub-scores. Nothing is scored locally; this only shapes the
payload and validates the answer.
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_reputation.core.exceptions import ScoringUnavailable


class ScoringClient:
    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._predict_url = f"{base_url.rstrip('/')}/predict"

    async def predict(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        POST payload to /predict and return {role, githubScore, onchainScore}.

        Raises ScoringUnavailable on transport errors, non-2xx answers or a
        body without a role.
        """
        try:
            r = await self._client.post(self._predict_url, json=payload)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            raise ScoringUnavailable(f"scoring request failed: {e}", source="scoring") from e
        except ValueError as e:
            raise ScoringUnavailable("scoring response is not JSON", source="scoring") from e
        if not isinstance(data, dict) or "role" not in data:
            raise ScoringUnavailable("scoring response has no role", source="scoring")
        return {
            "role": data.get("role"),
            "githubScore": data.get("github_score"),
            "onchainScore": data.get("onchain_score"),
        }
