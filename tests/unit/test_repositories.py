"""Tests for the problem set store and the cache ledger."""

from datetime import timedelta

import duckdb
import pytest

from app.errors import NotProvisioned, StorageFault
from app.models.common import is_fresh
from app.models.problems import Difficulty, PartitionKey, Problem, TimeRange
from app.repositories import CachedProblemSetRepository, ProblemSetRepository
from tests.fakes import NOW, make_problems

KEY = PartitionKey.of("Acme", TimeRange.LAST_30_DAYS)
OTHER = PartitionKey.of("Acme", TimeRange.LAST_3_MONTHS)


class TestProblemSetRepository:
    def test_ensure_is_idempotent(self, problem_repo):
        assert not problem_repo.exists(KEY)
        problem_repo.ensure(KEY)
        problem_repo.ensure(KEY)
        assert problem_repo.exists(KEY)
        assert problem_repo.list_keys() == [str(KEY)]

    def test_provisioned_but_empty(self, problem_repo):
        problem_repo.ensure(KEY)
        assert problem_repo.read_all(KEY) == []
        assert problem_repo.count(KEY) == 0

    def test_read_before_ensure(self, problem_repo):
        with pytest.raises(NotProvisioned):
            problem_repo.read_all(KEY)
        with pytest.raises(NotProvisioned):
            problem_repo.count(KEY)

    def test_read_order_frequency_then_number(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.replace_all(
            KEY,
            [
                Problem(number=30, name="C", frequency=0.5),
                Problem(number=10, name="A", frequency=0.5),
                Problem(number=5, name="Top", frequency=0.9),
                Problem(number=20, name="B", frequency=0.5),
                Problem(number=1, name="Unknown", frequency=None),
                Problem(number=2, name="Zero", frequency=0.0),
            ],
        )
        assert [p.number for p in problem_repo.read_all(KEY)] == [5, 10, 20, 30, 1, 2]

    def test_round_trips_fields(self, problem_repo):
        problem_repo.ensure(KEY)
        stored = Problem(number=4, name="Median of Two Sorted Arrays", difficulty=Difficulty.HARD, acceptance_rate=0.41)
        problem_repo.replace_all(KEY, [stored])
        assert problem_repo.read_all(KEY) == [stored]

    def test_replace_leaves_no_residue(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.replace_all(KEY, make_problems(40))
        problem_repo.replace_all(KEY, make_problems(5, start=100))
        assert problem_repo.count(KEY) == 5
        assert {p.number for p in problem_repo.read_all(KEY)} == set(range(100, 105))

    def test_partitions_are_isolated(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.ensure(OTHER)
        problem_repo.replace_all(KEY, make_problems(3))
        problem_repo.replace_all(OTHER, make_problems(7))
        problem_repo.replace_all(KEY, [])
        assert problem_repo.count(KEY) == 0
        assert problem_repo.count(OTHER) == 7

    def test_failed_replace_keeps_previous_generation(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.replace_all(KEY, make_problems(3))
        duplicate = [Problem(number=1, name="One"), Problem(number=1, name="Again")]
        with pytest.raises(StorageFault):
            problem_repo.replace_all(KEY, duplicate)
        assert problem_repo.count(KEY) == 3

    def test_drop(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.replace_all(KEY, make_problems(3))
        problem_repo.drop(KEY)
        problem_repo.drop(KEY)
        assert not problem_repo.exists(KEY)
        assert problem_repo.counts() == {}

    def test_counts(self, problem_repo):
        problem_repo.ensure(KEY)
        problem_repo.ensure(OTHER)
        problem_repo.replace_all(OTHER, make_problems(4))
        assert problem_repo.counts() == {str(KEY): 0, str(OTHER): 4}

    def test_read_only_rejects_writes(self, conn):
        repo = ProblemSetRepository(read_only=True, conn=conn)
        with pytest.raises(StorageFault):
            repo.ensure(KEY)

    def test_closed_connection_is_storage_fault(self):
        conn = duckdb.connect(":memory:")
        repo = ProblemSetRepository(conn=conn)
        conn.close()
        with pytest.raises(StorageFault):
            repo.exists(KEY)


class FlakyConnection:
    """Real connection that fails the named operations."""

    def __init__(self, conn, fail: set[str]):
        self._conn = conn
        self._fail = fail

    def execute(self, query, *args):
        if "rollback" in self._fail and query.strip() == "ROLLBACK":
            raise duckdb.TransactionException("rollback failed")
        return self._conn.execute(query, *args)

    def register(self, name, frame):
        if "register" in self._fail:
            raise duckdb.InvalidInputException("register failed")
        return self._conn.register(name, frame)

    def unregister(self, name):
        if "unregister" in self._fail:
            raise duckdb.InvalidInputException("unregister failed")
        return self._conn.unregister(name)


class TestConnectionFailures:
    def test_register_failure_is_storage_fault(self, conn):
        ProblemSetRepository(conn=conn).ensure(KEY)
        repo = ProblemSetRepository(conn=FlakyConnection(conn, {"register"}))
        with pytest.raises(StorageFault, match="register failed"):
            repo.replace_all(KEY, make_problems(3))
        assert repo.count(KEY) == 0

    def test_unregister_failure_keeps_write(self, conn):
        repo = ProblemSetRepository(conn=FlakyConnection(conn, {"unregister"}))
        repo.ensure(KEY)
        repo.replace_all(KEY, make_problems(3))
        assert repo.count(KEY) == 3

    def test_failed_rollback_keeps_original_error(self, conn):
        repo = ProblemSetRepository(conn=FlakyConnection(conn, {"rollback"}))
        repo.ensure(KEY)
        duplicate = [Problem(number=1, name="One"), Problem(number=1, name="Again")]
        with pytest.raises(StorageFault) as excinfo:
            repo.replace_all(KEY, duplicate)
        assert isinstance(excinfo.value.__cause__, duckdb.ConstraintException)
        conn.execute("ROLLBACK")


class TestCachedProblemSetRepository:
    def test_absent(self, ledger_repo):
        assert ledger_repo.get(KEY) is None

    def test_insert_sets_both_timestamps(self, ledger_repo):
        record = ledger_repo.upsert(KEY, 40, NOW)
        assert record.partition_key == "acme_last30days"
        assert record.company == "acme"
        assert record.time_range == "last30days"
        assert record.problem_count == 40
        assert record.created_at == record.last_updated == NOW

    def test_update_keeps_created_at(self, ledger_repo):
        ledger_repo.upsert(KEY, 40, NOW)
        later = NOW + timedelta(days=3)
        record = ledger_repo.upsert(KEY, 12, later)
        assert record.problem_count == 12
        assert record.last_updated == later
        assert record.created_at == NOW

    def test_delete_is_idempotent(self, ledger_repo):
        ledger_repo.upsert(KEY, 40, NOW)
        ledger_repo.delete(KEY)
        ledger_repo.delete(KEY)
        assert ledger_repo.get(KEY) is None

    def test_list_all_newest_first(self, ledger_repo):
        ledger_repo.upsert(KEY, 1, NOW)
        ledger_repo.upsert(OTHER, 2, NOW + timedelta(hours=1))
        assert [r.partition_key for r in ledger_repo.list_all()] == [str(OTHER), str(KEY)]

    def test_read_only_rejects_writes(self, conn):
        repo = CachedProblemSetRepository(read_only=True, conn=conn)
        with pytest.raises(StorageFault):
            repo.upsert(KEY, 1, NOW)


class TestFreshness:
    def test_exactly_ttl_old_is_stale(self, ledger_repo):
        record = ledger_repo.upsert(KEY, 40, NOW - timedelta(days=30))
        assert not is_fresh(record, 30, NOW)

    def test_one_second_younger_is_fresh(self, ledger_repo):
        record = ledger_repo.upsert(KEY, 40, NOW - timedelta(days=30) + timedelta(seconds=1))
        assert is_fresh(record, 30, NOW)
        assert record.is_fresh(30, NOW)

    def test_zero_ttl_is_always_stale(self, ledger_repo):
        record = ledger_repo.upsert(KEY, 40, NOW)
        assert not is_fresh(record, 0, NOW)
