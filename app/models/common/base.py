"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-friendly dictionary."""
        result = asdict(self)
        for key, value in result.items():
            if isinstance(value, Enum):
                result[key] = value.value
            elif isinstance(value, datetime):
                result[key] = value.isoformat()
        return result
