"""
FastAPI router: GET /onchain-stats?address=0x...

Validates the address before anything touches the network, asks the
aggregator for a profile and renders it with the original camelCase wire
names. render_profile() is a pure mapping; all policy lives upstream.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from backend_reputation.analysis_engine.aggregator import ReputationAggregator
from backend_reputation.analysis_engine.models import ReputationProfile, TokenBalance
from backend_reputation.api_server.dependencies import get_aggregator
from backend_reputation.chain.address import validate_address
from backend_reputation.reputation_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Reputation"])


class TokenBalanceResponse(BaseModel):
    symbol: str
    balance: float = Field(..., ge=0)
    error: str | None = Field(None, description="Set only when this token's query failed")


class ProfileResponse(BaseModel):
    """GET /onchain-stats response. Zero optional fields may mean a degraded source."""

    model_config = ConfigDict(populate_by_name=True)

    address: str = Field(..., description="Checksummed wallet address")
    name: str | None = Field(None, description="Verified primary ENS name")
    eth_balance: float = Field(..., alias="ethBalance")
    tx_count: int = Field(..., ge=0, alias="txCount")
    is_contract_deployer: bool = Field(..., alias="isContractDeployer")
    contract_deployments: int = Field(..., ge=0, alias="contractDeployments")
    token_balances: list[TokenBalanceResponse] = Field(default_factory=list, alias="tokenBalances")
    nft_count: int = Field(..., ge=0, alias="nftCount")
    has_nfts: bool = Field(..., alias="hasNFTs")
    dao_votes: int = Field(..., ge=0, alias="daoVotes")


def _render_token(token: TokenBalance) -> dict[str, Any]:
    out = TokenBalanceResponse(symbol=token.symbol, balance=float(token.amount), error=token.error)
    return out.model_dump(exclude_none=True)


def render_profile(profile: ReputationProfile) -> dict[str, Any]:
    """ReputationProfile -> JSON body (camelCase keys; token error key only on failed tokens)."""
    body = ProfileResponse(
        address=profile.address,
        name=profile.chain.reverse_name,
        eth_balance=float(profile.chain.native_balance),
        tx_count=profile.chain.transaction_count,
        is_contract_deployer=profile.chain.is_contract,
        contract_deployments=profile.contract_deployments,
        nft_count=profile.nfts.count,
        has_nfts=profile.nfts.has_any,
        dao_votes=profile.governance.vote_count,
    ).model_dump(by_alias=True)
    body["tokenBalances"] = [_render_token(t) for t in profile.tokens]
    return body


@router.get("/onchain-stats", response_model=ProfileResponse)
async def onchain_stats(
    address: str | None = Query(None, description="Ethereum address (checksummed or single-case hex)"),
    aggregator: ReputationAggregator = Depends(get_aggregator),
) -> JSONResponse:
    """
    Return the reputation profile for address.

    400 {"error": "Invalid Ethereum address"} for malformed input (no provider
    is called); 500 {"error": "Failed to fetch onchain data"} when the chain
    read fails.
    """
    checksummed = validate_address(address)
    profile = await aggregator.build_profile(checksummed)
    return JSONResponse(status_code=200, content=render_profile(profile))
