"""
Keyword-vocabulary classification of item priority and category.
"""

import re
from typing import List, Tuple

from .models import Category, Priority

HIGH_PRIORITY_PATTERN = re.compile(
    r"\b(?:achieved|increased|improved|reduced|led|managed|developed|created|designed|"
    r"implemented|optimized|streamlined|delivered|executed|launched|built)\b",
    re.IGNORECASE,
)
MEDIUM_PRIORITY_PATTERN = re.compile(
    r"\b(?:experience|skills|knowledge|proficient|familiar|worked|assisted|"
    r"participated|collaborated|supported)\b",
    re.IGNORECASE,
)

# Checked in order, first match wins
CATEGORY_PATTERNS: List[Tuple[Category, "re.Pattern[str]"]] = [
    ("experience", re.compile(r"\b(?:years?|experience|background)\b", re.IGNORECASE)),
    ("technical", re.compile(r"\b(?:skills?|technology|programming|software|tools?)\b", re.IGNORECASE)),
    ("education", re.compile(r"\b(?:education|degree|certification|training|course)\b", re.IGNORECASE)),
    ("achievement", re.compile(r"\b(?:achieved|accomplished|delivered|increased|improved)\b", re.IGNORECASE)),
    ("leadership", re.compile(r"\b(?:leadership|managed|led|team|project)\b", re.IGNORECASE)),
]


def assess_priority(content: str) -> Priority:
    """Rank content as high (impact verbs), medium (competency words) or low."""
    if HIGH_PRIORITY_PATTERN.search(content):
        return "high"
    if MEDIUM_PRIORITY_PATTERN.search(content):
        return "medium"
    return "low"


def categorize(content: str) -> Category:
    """Return the first matching topical category, or 'general'."""
    for category, pattern in CATEGORY_PATTERNS:
        if pattern.search(content):
            return category
    return "general"
