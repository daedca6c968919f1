"""
Reputation aggregator — concurrent fan-out over the four fetchers.

All sources start at once as independent asyncio tasks and are joined under
one deadline. Sources still running at the deadline count as failed; they are
not cancelled and whatever they return later is dropped. Failures are
resolved through the policy table in analysis_engine.policy.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable

from backend_reputation.analysis_engine.models import (
    GovernanceSummary,
    NFTSummary,
    ReputationProfile,
)
from backend_reputation.analysis_engine.policy import (
    DEFAULT_POLICIES,
    SourcePolicy,
    resolve_failure,
)
from backend_reputation.chain.rpc import EthereumRpcClient
from backend_reputation.config import TokenContract
from backend_reputation.fetchers import (
    AlchemyNFTClient,
    SnapshotClient,
    failed_token_balances,
    fetch_chain_facts,
    fetch_governance_summary,
    fetch_nft_summary,
    fetch_token_balances,
)
from backend_reputation.reputation_logging import get_logger, profiling

logger = get_logger(__name__)

Fetch = Callable[[str], Awaitable[Any]]


def _discard_late_result(task: asyncio.Task) -> None:
    """Done-callback for tasks that missed the deadline: consume the outcome and drop it."""
    if task.cancelled():
        return
    exc = task.exception()
    logger.debug(
        "late_result_discarded",
        task=task.get_name(),
        error=str(exc) if exc else None,
    )


class ReputationAggregator:
    """
    Builds ReputationProfile objects from long-lived provider handles.

    The handles are shared across requests and only read here; nothing on
    the aggregator changes after construction.
    """

    def __init__(
        self,
        rpc: EthereumRpcClient,
        indexer: AlchemyNFTClient,
        snapshot: SnapshotClient,
        tokens: tuple[TokenContract, ...],
        *,
        timeout_sec: float = 8.0,
        name_timeout_sec: float = 2.0,
        policies: dict[str, SourcePolicy] | None = None,
    ) -> None:
        self._rpc = rpc
        self._indexer = indexer
        self._snapshot = snapshot
        self._tokens = tuple(tokens)
        self._timeout_sec = timeout_sec
        # the ENS lookup must give up well before the chain source is declared late
        self._name_timeout_sec = min(name_timeout_sec, timeout_sec / 2)
        self._policies = dict(DEFAULT_POLICIES if policies is None else policies)

    @property
    def timeout_sec(self) -> float:
        return self._timeout_sec

    def _sources(self) -> dict[str, tuple[Fetch, Callable[[BaseException], Any] | None]]:
        """Source name -> (fetch coroutine function, fallback for non-fatal policies)."""
        return {
            "chain": (
                lambda addr: fetch_chain_facts(self._rpc, addr, name_timeout_sec=self._name_timeout_sec),
                None,
            ),
            "tokens": (
                lambda addr: fetch_token_balances(self._rpc, self._tokens, addr),
                lambda err: failed_token_balances(self._tokens, err),
            ),
            "nfts": (
                lambda addr: fetch_nft_summary(self._indexer, addr),
                lambda err: NFTSummary(count=0),
            ),
            "governance": (
                lambda addr: fetch_governance_summary(self._snapshot, addr),
                lambda err: GovernanceSummary(vote_count=0),
            ),
        }

    def _outcome(self, name: str, task: asyncio.Task, done: set[asyncio.Task]) -> tuple[Any, BaseException | None]:
        """(result, None) for a task that succeeded in time, else (None, error)."""
        if task not in done:
            return None, TimeoutError(f"{name} missed the {self._timeout_sec}s deadline")
        if task.cancelled():
            return None, asyncio.CancelledError(f"{name} was cancelled")
        error = task.exception()
        if error is not None:
            return None, error
        return task.result(), None

    async def build_profile(self, address: str) -> ReputationProfile:
        """
        Fetch every source for a validated, checksummed address and merge the results.

        Raises AggregationFailed when a FATAL source fails or times out.
        """
        with profiling(address):
            return await self._build_profile(address)

    async def _build_profile(self, address: str) -> ReputationProfile:
        sources = self._sources()
        started = time.perf_counter()

        tasks: dict[str, asyncio.Task] = {
            name: asyncio.create_task(fetch(address), name=f"{name}:{address}")
            for name, (fetch, _) in sources.items()
        }
        done, pending = await asyncio.wait(tasks.values(), timeout=self._timeout_sec)
        for task in pending:
            task.add_done_callback(_discard_late_result)

        # every finished task is read before any policy can raise
        results: dict[str, Any] = {}
        failures: dict[str, BaseException] = {}
        for name, task in tasks.items():
            value, error = self._outcome(name, task, done)
            if error is None:
                results[name] = value
            else:
                failures[name] = error

        for name, error in failures.items():
            policy = self._policies.get(name, SourcePolicy.DEGRADE)
            if policy is SourcePolicy.FATAL:
                logger.error("source_failed_fatal", source=name, error=str(error))
            else:
                logger.warning("source_degraded", source=name, policy=policy.value, error=str(error))
            results[name] = resolve_failure(name, policy, error, sources[name][1]).value

        profile = ReputationProfile(
            address=address,
            chain=results["chain"],
            tokens=results["tokens"],
            nfts=results["nfts"],
            governance=results["governance"],
        )
        logger.info(
            "profile_built",
            degraded_sources=list(failures),
            pending_at_deadline=len(pending),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return profile
