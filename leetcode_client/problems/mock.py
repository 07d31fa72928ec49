"""Offline problem source backed by a fixed catalog."""

import random

from loguru import logger

from app.models.problems import Difficulty, Problem, TimeRange

# (number, name, difficulty)
CATALOG = [
    (1, "Two Sum", "Easy"),
    (2, "Add Two Numbers", "Medium"),
    (3, "Longest Substring Without Repeating Characters", "Medium"),
    (7, "Reverse Integer", "Medium"),
    (9, "Palindrome Number", "Easy"),
    (13, "Roman to Integer", "Easy"),
    (14, "Longest Common Prefix", "Easy"),
    (20, "Valid Parentheses", "Easy"),
    (21, "Merge Two Sorted Lists", "Easy"),
    (53, "Maximum Subarray", "Medium"),
    (121, "Best Time to Buy and Sell Stock", "Easy"),
    (125, "Valid Palindrome", "Easy"),
    (206, "Reverse Linked List", "Easy"),
    (217, "Contains Duplicate", "Easy"),
    (226, "Invert Binary Tree", "Easy"),
    (242, "Valid Anagram", "Easy"),
    (283, "Move Zeroes", "Easy"),
    (344, "Reverse String", "Easy"),
    (387, "First Unique Character in a String", "Easy"),
    (394, "Decode String", "Medium"),
    (4, "Median of Two Sorted Arrays", "Hard"),
    (15, "3Sum", "Medium"),
    (17, "Letter Combinations of a Phone Number", "Medium"),
    (19, "Remove Nth Node From End of List", "Medium"),
    (22, "Generate Parentheses", "Medium"),
    (33, "Search in Rotated Sorted Array", "Medium"),
    (39, "Combination Sum", "Medium"),
    (46, "Permutations", "Medium"),
    (48, "Rotate Image", "Medium"),
    (49, "Group Anagrams", "Medium"),
    (56, "Merge Intervals", "Medium"),
    (75, "Sort Colors", "Medium"),
    (78, "Subsets", "Medium"),
    (79, "Word Search", "Medium"),
    (253, "Meeting Rooms II", "Medium"),
    (2235, "Add Two Integers", "Easy"),
]

# Inclusive lower bound and width of the simulated problem count per range
SIZE_BANDS = {
    TimeRange.LAST_30_DAYS: (35, 20),
    TimeRange.LAST_3_MONTHS: (50, 30),
    TimeRange.LAST_6_MONTHS: (70, 40),
    TimeRange.MORE_THAN_6_MONTHS: (100, 50),
    TimeRange.ALL: (150, 100),
}


class MockProblemClient:
    """Problem source returning catalog slices with simulated metrics."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self._request_count = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def aclose(self) -> None:
        logger.info("Total mock requests: {}", self._request_count)

    async def fetch_problems(self, company: str, time_range: TimeRange) -> list[Problem]:
        self._request_count += 1
        low, width = SIZE_BANDS[time_range]
        count = min(low + self._rng.randrange(width), len(CATALOG))

        problems = [
            Problem(
                number=number,
                name=name,
                difficulty=Difficulty.parse(difficulty),
                acceptance_rate=0.3 + self._rng.random() * 0.6,
                frequency=round(1.0 - i * 0.01, 2),
            )
            for i, (number, name, difficulty) in enumerate(CATALOG[:count])
        ]
        logger.info("MOCK: returning {} problems for {} ({})", len(problems), company, time_range.label)
        return problems
