"""Shared fixtures: in-memory DuckDB with tables, repositories bound to it, service factory."""

import duckdb
import pytest

from app.repositories import CachedProblemSetRepository, ProblemSetRepository, init_tables
from app.services.problems import ProblemSetService
from tests.fakes import NOW


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def problem_repo(conn):
    return ProblemSetRepository(conn=conn)


@pytest.fixture
def ledger_repo(conn):
    return CachedProblemSetRepository(conn=conn)


@pytest.fixture
def make_service(problem_repo, ledger_repo):
    def factory(source, **kwargs) -> ProblemSetService:
        options = {"ttl_days": 30, "min_size": 30, "max_size": 50, "fetch_timeout": 5.0, "clock": lambda: NOW}
        options.update(kwargs)
        return ProblemSetService(problem_repo=problem_repo, ledger_repo=ledger_repo, source=source, **options)

    return factory
