"""
Analysis engine package — profile models, failure policy and the aggregator
that merges fetcher output into one ReputationProfile.

The aggregator imports the fetchers, which import the models from here, so
it is imported from backend_reputation.analysis_engine.aggregator directly.
"""

from backend_reputation.analysis_engine.models import (
    ChainFacts,
    GovernanceSummary,
    NFTSummary,
    ReputationProfile,
    TokenBalance,
)
from backend_reputation.analysis_engine.policy import (
    DEFAULT_POLICIES,
    SourceOutcome,
    SourcePolicy,
    resolve_failure,
)

__all__ = [
    "ChainFacts",
    "DEFAULT_POLICIES",
    "GovernanceSummary",
    "NFTSummary",
    "ReputationProfile",
    "SourceOutcome",
    "SourcePolicy",
    "TokenBalance",
    "resolve_failure",
]
