"""Problem set repositories."""

from app.repositories.problems.partition import ProblemSetRepository

__all__ = ["ProblemSetRepository"]
