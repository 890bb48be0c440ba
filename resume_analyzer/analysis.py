"""
Formatting of a complete AI resume analysis for presentation.
"""

import logging
from typing import Any, Dict, Optional

from .formatter import format_professional_summary, standardize_analysis_text
from .jobs import format_job_recommendations
from .ratings import ResumeRating, enhance_resume_rating
from .structure import StructureReconstructor

logger = logging.getLogger(__name__)

# Free-text fields that get a structured counterpart under "<field>_structured"
STRUCTURED_FIELDS = ("summary", "strengths", "weaknesses")


def format_complete_analysis(
    analysis: Optional[Dict[str, Any]],
    reconstructor: Optional[StructureReconstructor] = None,
) -> Optional[Dict[str, Any]]:
    """
    Clean every section of an analysis and add structured versions.

    Args:
        analysis: Dict with any of summary, strengths, weaknesses, job_titles,
            professional_summary and rating
        reconstructor: Reconstructor to use (default: standard noise filter)

    Returns:
        A new dict; the input is left untouched
    """
    if not analysis:
        return analysis

    reconstructor = reconstructor or StructureReconstructor()
    formatted = dict(analysis)

    for key in STRUCTURED_FIELDS:
        if formatted.get(key):
            formatted[key] = standardize_analysis_text(formatted[key])
            formatted[f"{key}_structured"] = reconstructor.reconstruct(formatted[key]).to_dict()

    if formatted.get("job_titles"):
        formatted["job_titles"] = standardize_analysis_text(formatted["job_titles"])
        formatted["job_recommendations"] = format_job_recommendations(formatted["job_titles"])

    if formatted.get("professional_summary"):
        formatted["professional_summary"] = format_professional_summary(formatted["professional_summary"])

    if formatted.get("rating"):
        rating = formatted["rating"]
        rating = rating.to_dict() if isinstance(rating, ResumeRating) else dict(rating)
        if rating.get("breakdown"):
            rating["breakdown"] = standardize_analysis_text(rating["breakdown"])
        formatted["rating"] = rating
        formatted["rating_enhanced"] = enhance_resume_rating(rating)

    logger.info(f"Formatted analysis with sections: {', '.join(sorted(formatted))}")
    return formatted
