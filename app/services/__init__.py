"""Services package - service class exports."""

from app.services.problems import ProblemSetService, SingleFlight, validate_cache

__all__ = [
    "ProblemSetService",
    "SingleFlight",
    "validate_cache",
]
