"""Problem set service - cached company problem sets with time range escalation."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from loguru import logger

from app.errors import UpstreamFailure
from app.models.common import CachedProblemSet
from app.models.problems import PartitionKey, Problem, ProblemRequest, TimeRange
from app.repositories.common import CachedProblemSetRepository
from app.repositories.problems import ProblemSetRepository
from app.services.problems.single_flight import SingleFlight
from settings import CACHE_TTL_DAYS, FETCH_TIMEOUT, MAX_PROBLEM_SET_SIZE, MIN_PROBLEM_SET_SIZE


class ProblemSource(Protocol):
    """Anything that can fetch a company problem list for a time range."""

    async def fetch_problems(self, company: str, time_range: TimeRange) -> list[Problem]: ...


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP columns."""
    return datetime.now(UTC).replace(tzinfo=None)


def _dedupe(problems: list[Problem]) -> list[Problem]:
    """Drop repeated problem numbers, keeping the first occurrence."""
    seen: set[int] = set()
    result = []
    for p in problems:
        if p.number not in seen:
            seen.add(p.number)
            result.append(p)
    return result


@dataclass
class _Fetched:
    """One upstream result, shared by every caller that joined its fetch."""

    problems: list[Problem]
    stored: list[Problem] | None = None


class ProblemSetService:
    """Resolves company problem sets, preferring fresh cached partitions.

    Without an explicit time range, ranges are tried from narrowest to widest
    and the first one with at least ``min_size`` problems wins. The widest
    range is returned as-is when nothing reaches the threshold.
    """

    def __init__(
        self,
        problem_repo: ProblemSetRepository,
        ledger_repo: CachedProblemSetRepository,
        source: ProblemSource,
        ttl_days: int = CACHE_TTL_DAYS,
        min_size: int = MIN_PROBLEM_SET_SIZE,
        max_size: int = MAX_PROBLEM_SET_SIZE,
        fetch_timeout: float | None = FETCH_TIMEOUT,
        clock: Callable[[], datetime] = utcnow,
    ):
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        if min_size < 0:
            raise ValueError(f"min_size must not be negative, got {min_size}")
        if ttl_days < 0:
            raise ValueError(f"ttl_days must not be negative, got {ttl_days}")

        self._problems = problem_repo
        self._ledger = ledger_repo
        self._source = source
        self._ttl_days = ttl_days
        self._min_size = min_size
        self._max_size = max_size
        self._fetch_timeout = fetch_timeout
        self._clock = clock
        self._inflight = SingleFlight()
        logger.debug(
            "ProblemSetService initialized (ttl={}d, min={}, max={})",
            ttl_days,
            min_size,
            max_size,
        )

    async def resolve(
        self,
        company: str,
        time_range: TimeRange | None = None,
        explicit: bool = False,
    ) -> list[Problem]:
        """Problems for a company, ordered by frequency."""
        logger.info("Getting problems for company: {}, time_range: {}, explicit: {}", company, time_range, explicit)

        if explicit and time_range is not None:
            return await self._resolve_explicit(company, TimeRange(time_range))
        if explicit:
            logger.warning("Explicit time range requested without a range for {}, auto-selecting", company)
        return await self._resolve_auto(company)

    async def resolve_request(self, request: ProblemRequest) -> dict[str, list[Problem]]:
        """Resolve every company of a parsed request, one after another."""
        results = {}
        for company in request.companies:
            results[company] = await self.resolve(company, request.time_range, request.explicit_time_range)
        return results

    def invalidate(self, company: str, time_range: TimeRange) -> bool:
        """Drop one cached partition. Returns False if nothing was cached."""
        key = PartitionKey.of(company, time_range)
        if self._ledger.get(key) is None:
            return False

        logger.info("Invalidating cache for: {}", key)
        self._ledger.delete(key)
        self._problems.drop(key)
        return True

    def cached_sets(self) -> list[tuple[CachedProblemSet, bool]]:
        """Ledger records paired with their current freshness."""
        now = self._clock()
        return [(record, record.is_fresh(self._ttl_days, now)) for record in self._ledger.list_all()]

    async def _resolve_explicit(self, company: str, time_range: TimeRange) -> list[Problem]:
        key = PartitionKey.of(company, time_range)
        cached = self._ledger.get(key)
        if cached is not None and cached.is_fresh(self._ttl_days, self._clock()):
            logger.info("Using cached problem set: {}", key)
            return self._problems.read_all(key)

        logger.info("Cache miss or expired for {}, fetching", key)
        fetched = await self._fetch_shared(company, key)
        return self._store(key, fetched)

    async def _resolve_auto(self, company: str) -> list[Problem]:
        logger.info("Auto-selecting time range for company: {}", company)
        *candidates, widest = TimeRange.ordered()

        for time_range in candidates:
            key = PartitionKey.of(company, time_range)
            problems, accepted = await self._load_candidate(company, key, floor=False)
            if accepted:
                return problems
            logger.info("Only {} problems in range: {}, trying wider range...", len(problems), time_range.label)

        problems, _ = await self._load_candidate(company, PartitionKey.of(company, widest), floor=True)
        return problems

    async def _load_candidate(self, company: str, key: PartitionKey, floor: bool) -> tuple[list[Problem], bool]:
        """Try one range. Insufficient results are returned unpersisted unless floor is set."""
        cached = self._ledger.get(key)
        if (
            cached is not None
            and cached.is_fresh(self._ttl_days, self._clock())
            and cached.problem_count >= self._min_size
        ):
            logger.info(
                "Found cached problem set with {} problems in range: {}",
                cached.problem_count,
                key.time_range.label,
            )
            return self._problems.read_all(key), True

        fetched = await self._fetch_shared(company, key)
        problems = fetched.problems
        if len(problems) >= self._min_size:
            logger.info("Found {} problems in range: {}, caching...", len(problems), key.time_range.label)
            return self._store(key, fetched), True

        if floor:
            logger.warning(
                "Could not find {} problems for company: {}, returning all {} problems",
                self._min_size,
                key.company,
                len(problems),
            )
            return self._store(key, fetched), True

        return problems, False

    async def _fetch_shared(self, company: str, key: PartitionKey) -> _Fetched:
        """Fetch a partition, joining a fetch of the same key already in flight."""

        async def fetch() -> _Fetched:
            return _Fetched(await self._fetch(company, key.time_range))

        return await self._inflight.do(str(key), fetch)

    def _store(self, key: PartitionKey, fetched: _Fetched) -> list[Problem]:
        """Persist a shared fetch once; later joiners get the stored result."""
        if fetched.stored is None:
            fetched.stored = self._persist(key, fetched.problems)
        return fetched.stored

    async def _fetch(self, company: str, time_range: TimeRange) -> list[Problem]:
        try:
            return await asyncio.wait_for(
                self._source.fetch_problems(company, time_range),
                timeout=self._fetch_timeout,
            )
        except TimeoutError as e:
            raise UpstreamFailure(
                f"Fetching {company} ({time_range.label}) timed out after {self._fetch_timeout}s"
            ) from e
        except Exception as e:
            raise UpstreamFailure(f"Fetching {company} ({time_range.label}) failed: {e}") from e

    def _persist(self, key: PartitionKey, problems: list[Problem]) -> list[Problem]:
        """Dedupe, cap at max_size, write the store, then the ledger."""
        unique = _dedupe(problems)
        limited = unique[: self._max_size]
        if len(limited) < len(problems):
            logger.debug("Limiting {} fetched problems to {} for {}", len(problems), len(limited), key)

        self._problems.ensure(key)
        self._problems.replace_all(key, limited)
        self._ledger.upsert(key, len(limited), self._clock())

        logger.info("Cached {} problems for {}", len(limited), key)
        return limited
