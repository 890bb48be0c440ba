"""
Resume rating helpers: score extraction, grade mapping and rating insights.
"""

import re
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict

# (attribute, display name) for the five 0-2 sub-scores
RATING_CATEGORIES = [
    ("content_quality", "Content Quality"),
    ("structure_organization", "Structure & Organization"),
    ("formatting_design", "Formatting & Design"),
    ("impact_language", "Impact & Language"),
    ("ats_compatibility", "ATS Compatibility"),
]

SUB_SCORE_MAX = 2
TOTAL_SCORE_MAX = 10

CRITICAL_MARKERS = ("missing", "lacks", "no quantifiable", "weak")
IMPORTANT_MARKERS = ("improve", "enhance", "better", "add")

# Lower bound, letter, label, description, tone
GRADE_SCALE = [
    (9, "A+", "Excellent", "Job-ready with competitive advantage", "positive"),
    (7, "B+", "Good", "Strong foundation, minor polish needed", "info"),
    (5, "C", "Average", "Needs improvement in several areas", "warning"),
    (3, "D", "Weak", "Requires major fixes and improvements", "caution"),
    (float("-inf"), "F", "Poor", "Needs complete rewrite", "critical"),
]

NEXT_STEPS = [
    ("content_quality", "Add quantifiable achievements and specific results to your experience"),
    ("impact_language", "Replace passive language with strong action verbs"),
    ("ats_compatibility", "Optimize with industry-specific keywords and improve formatting"),
    ("structure_organization", "Reorganize content with clear sections and logical flow"),
    ("formatting_design", "Improve visual presentation and ensure consistent formatting"),
]
DEFAULT_NEXT_STEP = "Focus on minor polish and tailoring for specific job applications"


@dataclass
class ResumeRating:
    """Rating returned by the analysis model: five 0-2 sub-scores and a 0-10 total."""

    content_quality: float = 0
    structure_organization: float = 0
    formatting_design: float = 0
    impact_language: float = 0
    ats_compatibility: float = 0
    total_score: float = 0
    improvements: List[str] = field(default_factory=list)
    breakdown: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeRating":
        """Build a rating from a dict, accepting snake_case or camelCase keys."""
        def pick(snake: str, camel: str, default: Any = 0) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            content_quality=pick("content_quality", "contentQuality"),
            structure_organization=pick("structure_organization", "structureOrganization"),
            formatting_design=pick("formatting_design", "formattingDesign"),
            impact_language=pick("impact_language", "impactLanguage"),
            ats_compatibility=pick("ats_compatibility", "atsCompatibility"),
            total_score=pick("total_score", "totalScore"),
            improvements=list(pick("improvements", "improvements", []) or []),
            breakdown=pick("breakdown", "breakdown", "") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def extract_rating(text: str) -> float:
    """Extract the first 'N/10' score from text, or 0 if none is present."""
    if not text:
        return 0
    match = re.search(r"(\d+(?:\.\d+)?)\s*/\s*10", text)
    return float(match.group(1)) if match else 0


def get_grade_info(total_score: float) -> Dict[str, str]:
    """Map a 0-10 total score to a letter grade with label and description."""
    grade = next((entry for entry in GRADE_SCALE if total_score >= entry[0]), GRADE_SCALE[-1])
    _, letter, label, description, tone = grade
    return {
        "letter": letter,
        "label": label,
        "description": description,
        "tone": tone,
    }


def categorize_improvements(improvements: List[str]) -> Dict[str, List[str]]:
    """Sort improvement suggestions into critical, important and minor buckets."""
    categories: Dict[str, List[str]] = {"critical": [], "important": [], "minor": []}
    for improvement in improvements:
        text = improvement.lower()
        if any(marker in text for marker in CRITICAL_MARKERS):
            categories["critical"].append(improvement)
        elif any(marker in text for marker in IMPORTANT_MARKERS):
            categories["important"].append(improvement)
        else:
            categories["minor"].append(improvement)
    return categories


def generate_rating_insights(rating: ResumeRating) -> List[Dict[str, str]]:
    insights = []

    if rating.content_quality >= 2:
        insights.append({"type": "positive", "text": "Strong content with measurable achievements"})
    elif rating.content_quality == 1:
        insights.append({"type": "warning", "text": "Content needs more quantified results"})
    else:
        insights.append({"type": "critical", "text": "Content lacks impact and specificity"})

    if rating.ats_compatibility >= 2:
        insights.append({"type": "positive", "text": "Excellent ATS compatibility"})
    elif rating.ats_compatibility == 1:
        insights.append({"type": "warning", "text": "Minor ATS optimization needed"})
    else:
        insights.append({"type": "critical", "text": "High risk of ATS rejection"})

    if rating.total_score >= 8:
        insights.append({"type": "success", "text": "Resume is market-ready and competitive"})
    elif rating.total_score >= 6:
        insights.append({"type": "info", "text": "Good foundation, focus on weak areas"})
    else:
        insights.append({"type": "warning", "text": "Significant improvements needed before job applications"})

    return insights


def identify_strengths(rating: ResumeRating) -> List[str]:
    return [name for key, name in RATING_CATEGORIES if getattr(rating, key) >= SUB_SCORE_MAX]


def identify_weaknesses(rating: ResumeRating) -> List[Dict[str, Any]]:
    """Sub-scores of 1 or less, weakest first."""
    weaknesses = []
    for key, name in RATING_CATEGORIES:
        score = getattr(rating, key)
        if score <= 1:
            weaknesses.append({
                "area": name,
                "score": score,
                "priority": "critical" if score == 0 else "important",
            })
    return sorted(weaknesses, key=lambda weakness: weakness["score"])


def suggest_next_steps(rating: ResumeRating) -> List[str]:
    steps = [step for key, step in NEXT_STEPS if getattr(rating, key) <= 1]
    return steps or [DEFAULT_NEXT_STEP]


def enhance_resume_rating(rating: Optional[Any]) -> Optional[Dict[str, Any]]:
    """
    Add percentages, grade, categorized improvements and insights to a rating.

    Args:
        rating: ResumeRating or a dict as returned by the analysis model

    Returns:
        Dict with the original scores plus derived presentation data, or None
    """
    if not rating:
        return None
    if isinstance(rating, dict):
        rating = ResumeRating.from_dict(rating)

    enhanced = rating.to_dict()
    enhanced["percentages"] = {
        key: round(getattr(rating, key) / SUB_SCORE_MAX * 100)
        for key, _ in RATING_CATEGORIES
    }
    enhanced["percentages"]["overall"] = round(rating.total_score / TOTAL_SCORE_MAX * 100)
    enhanced["grade_info"] = get_grade_info(rating.total_score)
    enhanced["categorized_improvements"] = categorize_improvements(rating.improvements)
    enhanced["insights"] = generate_rating_insights(rating)
    enhanced["performance"] = {
        "strengths": identify_strengths(rating),
        "weaknesses": identify_weaknesses(rating),
        "next_steps": suggest_next_steps(rating),
    }
    return enhanced
