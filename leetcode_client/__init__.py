"""Problem source client package."""

from leetcode_client.base import BaseClient, set_api_config
from leetcode_client.problems import MockProblemClient, ProblemClient, ProblemSchema

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    # Clients
    "ProblemClient",
    "MockProblemClient",
    "ProblemSchema",
]
