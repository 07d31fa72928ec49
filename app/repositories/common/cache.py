"""Cache ledger repository - freshness metadata per problem set partition."""

from datetime import datetime

from loguru import logger

from app.models.common import CachedProblemSet
from app.models.problems import PartitionKey
from app.repositories.base import BaseRepository

_COLUMNS = "partition_key, company, time_range, problem_count, last_updated, created_at"


class CachedProblemSetRepository(BaseRepository):
    """Repository for cache ledger records."""

    def get(self, key: PartitionKey) -> CachedProblemSet | None:
        """Load the ledger record for a partition, None if never populated."""
        row = self.fetchone(
            f"SELECT {_COLUMNS} FROM cached_problem_set WHERE partition_key = ?",
            [str(key)],
        )
        if row is None:
            return None
        logger.debug("Ledger hit: {}", key)
        return CachedProblemSet(*row)

    def upsert(self, key: PartitionKey, problem_count: int, now: datetime) -> CachedProblemSet:
        """Record a successful population. created_at is only set on insert."""
        self._require_writable("write cache ledger")

        self.execute(
            f"""
            INSERT INTO cached_problem_set ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT (partition_key) DO UPDATE SET
                problem_count = excluded.problem_count,
                last_updated = excluded.last_updated
            """,
            [str(key), key.company, key.time_range.key, problem_count, now, now],
        )
        logger.debug("Ledger saved: {} ({} problems)", key, problem_count)
        return self.get(key)

    def delete(self, key: PartitionKey) -> None:
        """Remove the ledger record (idempotent)."""
        self._require_writable("delete cache ledger")
        self.execute("DELETE FROM cached_problem_set WHERE partition_key = ?", [str(key)])
        logger.debug("Ledger deleted: {}", key)

    def list_all(self) -> list[CachedProblemSet]:
        """All ledger records, most recently updated first."""
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM cached_problem_set ORDER BY last_updated DESC, partition_key"
        )
        return [CachedProblemSet(*r) for r in rows]
