"""Company problems API client."""

from loguru import logger

from app.models.problems import Problem, TimeRange
from leetcode_client.base import BaseClient
from leetcode_client.problems.schemas import ProblemSchema


class ProblemClient(BaseClient):
    """Client for company problem frequency endpoints."""

    async def problems(self, company: str, time_range: TimeRange) -> list[dict]:
        """GET /companies/{company}/problems?timeRange={key} - raw problem list."""
        return await self._get(f"companies/{company}/problems", params={"timeRange": time_range.key})

    async def fetch_problems(self, company: str, time_range: TimeRange) -> list[Problem]:
        """Fetch and validate problems, keeping the source's frequency order."""
        raw = await self.problems(company, time_range)
        problems = [ProblemSchema.model_validate(item).to_problem() for item in raw]
        logger.info("Fetched {} problems for {} ({})", len(problems), company, time_range.label)
        return problems
