"""
Cleanup of AI-suggested job titles and job recommendation groups.
"""

import re
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

TITLE_SECTION_HEADER = re.compile(r"^(?:CURRENT|GROWTH|DIFFERENT|EMERGING)", re.IGNORECASE)
GENERIC_TITLE = re.compile(r"^(?:positions?|roles?|jobs?)$", re.IGNORECASE)

CATEGORY_HEADER_PATTERNS = [
    re.compile(
        r"^(?:CURRENT LEVEL|GROWTH|ADVANCEMENT|DIFFERENT INDUSTRIES|EMERGING ROLES|"
        r"SIMILAR ROLES|SENIOR POSITIONS|ALTERNATIVE CAREERS)",
        re.IGNORECASE,
    ),
    re.compile(r"^[A-Z\s]{10,}(?:POSITIONS?|OPPORTUNITIES|ROLES?):", re.IGNORECASE),
    re.compile(r"^[A-Z\s&\-']{8,}:$", re.IGNORECASE),
]

LIST_MARKER = re.compile(r"^[-•*]\s*")
NUMBER_MARKER = re.compile(r"^\d+\.\s*")


def _strip_markers(line: str) -> str:
    cleaned = NUMBER_MARKER.sub("", line)
    cleaned = LIST_MARKER.sub("", cleaned)
    cleaned = re.sub(r"^[:−]\s*", "", cleaned)
    return cleaned.strip()


def format_job_titles(job_titles: Optional[str]) -> List[str]:
    """
    Extract a clean list of job titles from generated text.

    Skips group headers, bracketed instructions and placeholder words such
    as "roles" or "etc".
    """
    if not job_titles:
        return []

    titles = []
    for line in job_titles.split("\n"):
        trimmed = line.strip()
        if not trimmed or TITLE_SECTION_HEADER.match(trimmed):
            continue
        if "[" in trimmed or "]" in trimmed or "List" in trimmed:
            continue

        cleaned = _strip_markers(trimmed)
        if (3 < len(cleaned) < 100
                and not GENERIC_TITLE.match(cleaned)
                and "etc" not in cleaned
                and "..." not in cleaned):
            titles.append(cleaned)

    return titles


def _is_category_header(line: str) -> bool:
    return any(pattern.match(line) for pattern in CATEGORY_HEADER_PATTERNS)


def _is_job_title(line: str) -> bool:
    if LIST_MARKER.match(line) or NUMBER_MARKER.match(line):
        return True
    return "where" not in line and "because" not in line and len(line) < 100


def format_job_recommendations(job_titles: Optional[str]) -> Dict[str, Any]:
    """
    Group recommended job titles under their category headers.

    Args:
        job_titles: Raw job recommendations text

    Returns:
        Dict with the non-empty categories, the total job count and a
        plain-text rendering
    """
    if not job_titles:
        return {"categories": [], "total": 0, "formatted": ""}

    categories: List[Dict[str, Any]] = []
    current: Optional[Dict[str, Any]] = None

    for line in (l.strip() for l in job_titles.split("\n")):
        if not line:
            continue

        if _is_category_header(line):
            current = {
                "name": re.sub(r":$", "", NUMBER_MARKER.sub("", line)).strip(),
                "jobs": [],
                "description": "",
            }
            categories.append(current)
        elif current is not None:
            if _is_job_title(line):
                title = NUMBER_MARKER.sub("", LIST_MARKER.sub("", line)).strip()
                if 3 < len(title) < 80:
                    current["jobs"].append(title)
            elif len(line) > 10 and not current["description"]:
                current["description"] = line

    valid = [category for category in categories if category["jobs"]]
    total = sum(len(category["jobs"]) for category in valid)
    logger.debug(f"Parsed {total} job recommendations in {len(valid)} categories")

    return {
        "categories": valid,
        "total": total,
        "formatted": format_job_categories_for_display(valid),
    }


def format_job_categories_for_display(categories: List[Dict[str, Any]]) -> str:
    """Render job categories as a header, optional description and bullet list each."""
    if not categories:
        return ""

    blocks = []
    for category in categories:
        lines = [category["name"]]
        if category.get("description"):
            lines.append(category["description"])
            lines.append("")
        lines.extend(f"• {job}" for job in category["jobs"])
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks).strip()
