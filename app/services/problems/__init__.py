"""Problem set services."""

from app.services.problems.service import ProblemSetService, ProblemSource, utcnow
from app.services.problems.single_flight import SingleFlight
from app.services.problems.validation import validate_cache

__all__ = [
    "ProblemSetService",
    "ProblemSource",
    "SingleFlight",
    "utcnow",
    "validate_cache",
]
