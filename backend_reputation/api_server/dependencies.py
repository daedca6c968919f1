"""FastAPI dependencies resolving the shared services from app.state."""

from __future__ import annotations

from fastapi import Request

from backend_reputation.analysis_engine.aggregator import ReputationAggregator
from backend_reputation.api_server.scoring_client import ScoringClient


def get_aggregator(request: Request) -> ReputationAggregator:
    return request.app.state.services.aggregator


def get_scoring_client(request: Request) -> ScoringClient:
    return request.app.state.services.scoring
