"""
FastAPI router: POST /calculate-role.

Forwards GitHub signals and on-chain profile fields to the scoring service
and relays its role label and sub-scores.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from backend_reputation.api_server.dependencies import get_scoring_client
from backend_reputation.api_server.scoring_client import ScoringClient
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Scoring"])


class CalculateRoleRequest(BaseModel):
    """Off-chain (GitHub) signals plus the profile fields, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    total_contributions: int | None = Field(None, alias="totalContributions")
    pull_requests: int | None = Field(None, alias="pullRequests")
    issues: int | None = None
    repositories_contributed_to: int | None = Field(None, alias="repositoriesContributedTo")
    followers: int | None = None
    repositories: int | None = None
    eth_balance: float | None = Field(None, alias="ethBalance")
    tx_count: int | None = Field(None, alias="txCount")
    is_contract_deployer: bool | None = Field(None, alias="isContractDeployer")
    contract_deployments: int | None = Field(None, alias="contractDeployments")
    token_balances: list[dict[str, Any]] | None = Field(None, alias="tokenBalances")
    nft_count: int | None = Field(None, alias="nftCount")
    dao_votes: int | None = Field(None, alias="daoVotes")
    has_nfts: bool | None = Field(None, alias="hasNFTs")


class CalculateRoleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: Any
    github_score: Any = Field(None, alias="githubScore")
    onchain_score: Any = Field(None, alias="onchainScore")


@router.post("/calculate-role", response_model=CalculateRoleResponse, response_model_by_alias=True)
async def calculate_role(
    body: CalculateRoleRequest,
    scoring: ScoringClient = Depends(get_scoring_client),
) -> dict[str, Any]:
    """Relay the scoring service's answer; failures map to 500 {"error": "Failed to calculate role"}."""
    payload = body.model_dump(by_alias=True, exclude_none=True)
    result = await scoring.predict(payload)
    logger.info("role_calculated", role=result.get("role"))
    return result
