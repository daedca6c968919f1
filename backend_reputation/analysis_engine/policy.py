"""
Per-source failure policy.

The aggregator consults this table instead of scattering try/except blocks
around each fetcher: a source is either FATAL (abort the request), ISOLATE
(the source already isolates its items; a whole-source failure marks every
item failed) or DEGRADE (substitute a default value).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from backend_reputation.core.exceptions import AggregationFailed


class SourcePolicy(Enum):
    FATAL = "fatal"
    ISOLATE = "isolate"
    DEGRADE = "degrade"


# Source name -> policy
DEFAULT_POLICIES: dict[str, SourcePolicy] = {
    "chain": SourcePolicy.FATAL,
    "tokens": SourcePolicy.ISOLATE,
    "nfts": SourcePolicy.DEGRADE,
    "governance": SourcePolicy.DEGRADE,
}


@dataclass(frozen=True)
class SourceOutcome:
    """What the aggregator does with one failed source."""

    source: str
    policy: SourcePolicy
    value: Any


def resolve_failure(
    source: str,
    policy: SourcePolicy,
    error: BaseException,
    fallback: Callable[[BaseException], Any] | None,
) -> SourceOutcome:
    """
    Turn a source failure into its placeholder value, or raise AggregationFailed for FATAL sources.

    fallback receives the error so placeholders can carry it inline (token
    entries do; NFT and governance defaults ignore it).
    """
    if policy is SourcePolicy.FATAL:
        raise AggregationFailed(f"{source} failed: {error}", source=source) from error
    if fallback is None:
        raise ValueError(f"source {source!r} with policy {policy.value} needs a fallback")
    return SourceOutcome(source=source, policy=policy, value=fallback(error))
