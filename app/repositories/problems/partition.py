"""Problem set repository - problems stored per company/time range partition."""

from datetime import UTC, datetime

import polars as pl
from loguru import logger

from app.errors import NotProvisioned
from app.models.problems import Difficulty, PartitionKey, Problem
from app.repositories.base import BaseRepository

_PROBLEM_SCHEMA = {
    "partition_key": pl.Utf8,
    "number": pl.Int32,
    "name": pl.Utf8,
    "acceptance_rate": pl.Float64,
    "difficulty": pl.Utf8,
    "frequency": pl.Float64,
    "url": pl.Utf8,
}


def _to_frame(partition_key: str, problems: list[Problem]) -> pl.DataFrame:
    return pl.DataFrame(
        [
            {
                "partition_key": partition_key,
                "number": p.number,
                "name": p.name,
                "acceptance_rate": p.acceptance_rate,
                "difficulty": p.difficulty.value,
                "frequency": p.frequency,
                "url": p.url,
            }
            for p in problems
        ],
        schema=_PROBLEM_SCHEMA,
    )


class ProblemSetRepository(BaseRepository):
    """Repository for partitioned problem sets."""

    def ensure(self, key: PartitionKey) -> None:
        """Provision the partition if absent."""
        self._require_writable("provision partition")
        self.execute(
            "INSERT OR IGNORE INTO problem_partition (partition_key, generation, created_at) VALUES (?, 0, ?)",
            [str(key), datetime.now(UTC).replace(tzinfo=None)],
        )

    def exists(self, key: PartitionKey) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM problem_partition WHERE partition_key = ?", [str(key)])
        return row[0] > 0

    def replace_all(self, key: PartitionKey, problems: list[Problem]) -> None:
        """Swap the partition contents in one transaction.

        The new set is written under the next generation, the partition is
        pointed at it and the previous generation is deleted before commit.
        """
        self._require_writable("write problems")
        self._require_provisioned(key)
        partition_key = str(key)

        self.register("problems_df", _to_frame(partition_key, problems))
        try:
            self.execute("BEGIN TRANSACTION")
            try:
                generation = self._generation(partition_key) + 1
                if problems:
                    self.execute(
                        """
                        INSERT INTO problem
                            (partition_key, generation, number, name, acceptance_rate, difficulty, frequency, url)
                        SELECT partition_key, CAST(? AS INTEGER), number, name, acceptance_rate, difficulty, frequency, url
                        FROM problems_df
                        """,
                        [generation],
                    )
                self.execute(
                    "UPDATE problem_partition SET generation = ? WHERE partition_key = ?",
                    [generation, partition_key],
                )
                self.execute(
                    "DELETE FROM problem WHERE partition_key = ? AND generation < ?",
                    [partition_key, generation],
                )
                self.execute("COMMIT")
            except Exception:
                self.rollback()
                raise
        finally:
            self.unregister("problems_df")
        logger.debug("Saved {} problems to {} (generation {})", len(problems), partition_key, generation)

    def read_all(self, key: PartitionKey) -> list[Problem]:
        """Problems by frequency (missing counts as 0) descending, then number."""
        self._require_provisioned(key)
        rows = self.fetchall(
            """
            SELECT p.number, p.name, p.difficulty, p.acceptance_rate, p.frequency, p.url
            FROM problem p
            JOIN problem_partition pp
              ON pp.partition_key = p.partition_key AND pp.generation = p.generation
            WHERE p.partition_key = ?
            ORDER BY COALESCE(p.frequency, 0) DESC, p.number ASC
            """,
            [str(key)],
        )
        logger.debug("read_all({}): {} problems", key, len(rows))
        return [
            Problem(
                number=r[0],
                name=r[1],
                difficulty=Difficulty(r[2]),
                acceptance_rate=r[3] if r[3] is not None else 0.0,
                frequency=r[4],
                url=r[5],
            )
            for r in rows
        ]

    def count(self, key: PartitionKey) -> int:
        self._require_provisioned(key)
        return self.counts().get(str(key), 0)

    def drop(self, key: PartitionKey) -> None:
        """Remove the partition and its problems (idempotent)."""
        self._require_writable("drop partition")
        partition_key = str(key)

        self.execute("BEGIN TRANSACTION")
        try:
            self.execute("DELETE FROM problem WHERE partition_key = ?", [partition_key])
            self.execute("DELETE FROM problem_partition WHERE partition_key = ?", [partition_key])
            self.execute("COMMIT")
        except Exception:
            self.rollback()
            raise
        logger.warning("Dropped partition: {}", partition_key)

    def list_keys(self) -> list[str]:
        """Identifiers of all provisioned partitions."""
        rows = self.fetchall("SELECT partition_key FROM problem_partition ORDER BY partition_key")
        return [r[0] for r in rows]

    def counts(self) -> dict[str, int]:
        """Current-generation problem count per provisioned partition."""
        rows = self.fetchall(
            """
            SELECT pp.partition_key, COUNT(p.number)
            FROM problem_partition pp
            LEFT JOIN problem p
              ON p.partition_key = pp.partition_key AND p.generation = pp.generation
            GROUP BY pp.partition_key
            """
        )
        return {r[0]: int(r[1]) for r in rows}

    def _generation(self, partition_key: str) -> int:
        row = self.fetchone("SELECT generation FROM problem_partition WHERE partition_key = ?", [partition_key])
        return row[0]

    def _require_provisioned(self, key: PartitionKey) -> None:
        if not self.exists(key):
            raise NotProvisioned(str(key))
