"""Company problems clients - live API and offline catalog."""

from leetcode_client.problems.client import ProblemClient
from leetcode_client.problems.mock import MockProblemClient
from leetcode_client.problems.schemas import ProblemSchema

__all__ = [
    "ProblemClient",
    "MockProblemClient",
    "ProblemSchema",
]
