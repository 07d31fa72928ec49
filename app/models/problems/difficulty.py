"""Problem difficulty."""

from enum import StrEnum


class Difficulty(StrEnum):
    """Problem difficulty levels."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str | None) -> "Difficulty":
        """Case-insensitive lookup, unknown labels fall back to MEDIUM."""
        if text is None:
            return cls.MEDIUM
        return _ALIASES.get(text.strip().lower(), cls.MEDIUM)


_LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Med.",
    Difficulty.HARD: "Hard",
}

_ALIASES = {
    "easy": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "med": Difficulty.MEDIUM,
    "med.": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
}
