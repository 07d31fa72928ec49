"""Dependency Injection container - initialized at app startup."""

from app.repositories import close_db
from app.repositories.common import CachedProblemSetRepository
from app.repositories.problems import ProblemSetRepository
from app.services.problems import ProblemSetService
from leetcode_client import MockProblemClient, ProblemClient, set_api_config
from settings import API_BASE_URL, API_TIMEOUT, MAX_CONCURRENT


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, live: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.problem_repo = ProblemSetRepository()
        self.ledger_repo = CachedProblemSetRepository()

        # Problem source
        if live:
            set_api_config(API_BASE_URL, API_TIMEOUT)
            self.source = ProblemClient(max_concurrent=MAX_CONCURRENT)
        else:
            self.source = MockProblemClient()

        # Services (with injected repos)
        self.problem_sets = ProblemSetService(
            problem_repo=self.problem_repo,
            ledger_repo=self.ledger_repo,
            source=self.source,
        )

        self._initialized = True

    async def close(self) -> None:
        """Release the problem source and DB connection. The container can be initialized again afterwards."""
        if self._initialized:
            await self.source.aclose()
            close_db()
            self._initialized = False


# Global container instance
container = Container()
