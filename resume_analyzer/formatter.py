"""
Text cleanup helpers for AI-generated analysis text.

These functions strip markdown, normalize bullet markers and whitespace, and
turn prose paragraphs into bullet points ahead of structure reconstruction.
"""

import re
import logging
from typing import List

from .filters import filter_unwanted_content
from .splitting import split_sentences

logger = logging.getLogger(__name__)

BULLET = "•"

# A line that is already a bullet, a numbered item or an all-caps header
PRESERVED_LINE_PATTERN = re.compile(r"^(?:[-•*]|\d+[.)]|[A-Z][A-Z\s&\-']{3,}(?::|$))")
BULLET_PREFIX_PATTERN = re.compile(r"^[-•*]")

SUBSTANTIAL_LINE_LENGTH = 15
SEGMENT_SPLIT_LENGTH = 30
LINE_SPLIT_LENGTH = 80
MIN_SENTENCE_LENGTH = 10

TRANSITION_WORDS = [
    "However", "Furthermore", "Additionally", "Moreover", "Nevertheless",
    "On the other hand", "In contrast", "Similarly", "For example", "In summary",
    "Therefore", "Consequently", "As a result", "For instance",
]


def strip_markdown_emphasis(text: str) -> str:
    """Remove bold, italic and code-span delimiters, keeping the enclosed text."""
    text = re.sub(r"\*\*([^*]+)\*\*", r"\1", text)
    text = re.sub(r"\*([^*]+)\*", r"\1", text)
    text = re.sub(r"`([^`]+)`", r"\1", text)
    return text


def normalize_list_markers(text: str) -> str:
    """Rewrite -, * and • bullets as '• ' and '1)' style numbering as '1. '."""
    text = re.sub(r"^[ \t]*[-•*][ \t]+", f"{BULLET} ", text, flags=re.MULTILINE)
    text = re.sub(r"^[ \t]*(\d+)[.)][ \t]+", r"\1. ", text, flags=re.MULTILINE)
    return text


def format_analysis_text(text: str) -> str:
    """
    Strip markdown and normalize whitespace while keeping line structure.

    Args:
        text: Raw text from the AI

    Returns:
        Cleaned text with at most one blank line between paragraphs
    """
    if not text:
        return ""

    formatted = text.replace("\r\n", "\n")

    # Markdown headers, keeping their text
    formatted = re.sub(r"^#{1,6}\s+", "", formatted, flags=re.MULTILINE)
    formatted = strip_markdown_emphasis(formatted)

    formatted = re.sub(r"[ \t]{3,}", " ", formatted)
    formatted = re.sub(r"\n{3,}", "\n\n", formatted)

    formatted = normalize_list_markers(formatted)

    formatted = re.sub(r"^[ \t]+|[ \t]+$", "", formatted, flags=re.MULTILINE)
    formatted = re.sub(r"  +", " ", formatted)

    return formatted.strip()


def format_with_markdown_support(text: str) -> str:
    """Normalize spacing and list markers, then drop emphasis markers."""
    if not text:
        return ""

    formatted = text.replace("\r\n", "\n")
    formatted = re.sub(r"[ \t]{2,}", " ", formatted)
    formatted = re.sub(r"\n{3,}", "\n\n", formatted)
    formatted = normalize_list_markers(formatted)
    formatted = strip_markdown_emphasis(formatted)
    formatted = re.sub(r"[ \t]+$", "", formatted, flags=re.MULTILINE)
    formatted = re.sub(r"  +", " ", formatted)
    return formatted.strip()


def format_professional_summary(summary: str) -> str:
    """Clean a generated professional summary of quotes, markdown and echoed instructions."""
    if not summary:
        return ""

    formatted = re.sub(r"^[\"']|[\"']$", "", summary.strip())
    formatted = format_analysis_text(formatted)
    formatted = re.sub(
        r"^(?:Write only the professional summary|The summary should).*$",
        "",
        formatted,
        flags=re.MULTILINE | re.IGNORECASE,
    )
    return formatted.strip()


def standardize_analysis_text(text: str) -> str:
    """
    Filter noise and normalize an AI analysis block for consistent display.

    Args:
        text: Raw AI-generated text

    Returns:
        Cleaned and standardized text
    """
    if not text:
        return ""

    standardized = filter_unwanted_content(text.replace("\r\n", "\n"))

    standardized = re.sub(r"[ \t]+", " ", standardized)
    standardized = re.sub(r"\n{3,}", "\n\n", standardized)
    standardized = normalize_list_markers(standardized)
    standardized = strip_markdown_emphasis(standardized)
    standardized = re.sub(r"[ \t]+$", "", standardized, flags=re.MULTILINE)

    # Exactly one space after sentence punctuation
    standardized = re.sub(r"([.!?])[ \t]*([A-Z])", r"\1 \2", standardized)

    return standardized.strip()


def improve_readability(text: str) -> str:
    """Insert paragraph breaks before transition words and inline bullets."""
    if not text:
        return ""

    improved = text
    for word in TRANSITION_WORDS:
        improved = re.sub(rf"(\.)\s+({re.escape(word)})", r"\1\n\n\2", improved, flags=re.IGNORECASE)

    improved = re.sub(r"([.!?])\s*([-•*])\s*([A-Z])", r"\1\n\2 \3", improved)

    improved = re.sub(r"\n{3,}", "\n\n", improved)
    improved = re.sub(r"[ \t]+$", "", improved, flags=re.MULTILINE)
    return improved.strip()


def _bulletize_sentences(line: str) -> List[str]:
    sentences = [s for s in split_sentences(line) if len(s.strip()) > MIN_SENTENCE_LENGTH]
    if len(sentences) > 1:
        return [f"{BULLET} {sentence.strip()}" for sentence in sentences]
    return []


def _bulletize_line(line: str, split_threshold: int, allow_split: bool = True) -> str:
    if PRESERVED_LINE_PATTERN.match(line):
        return line

    if allow_split and len(line) > split_threshold:
        bullets = _bulletize_sentences(line)
        if bullets:
            return "\n".join(bullets)

    if len(line) > SUBSTANTIAL_LINE_LENGTH and not BULLET_PREFIX_PATTERN.match(line):
        return f"{BULLET} {line}"

    return line


def _non_empty_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def convert_to_bullet_points(text: str) -> str:
    """
    Turn paragraph text into bullet points.

    Multi-paragraph text bulletizes each paragraph on its own, splitting
    single-line paragraphs into one bullet per sentence. Single-paragraph
    text splits only its long lines. Headers and existing list items pass
    through unchanged.
    """
    if not text:
        return ""

    segments = [segment for segment in re.split(r"\n\s*\n", text) if segment.strip()]

    if len(segments) > 1:
        converted_segments = []
        for segment in segments:
            lines = _non_empty_lines(segment)
            converted = [
                _bulletize_line(line, SEGMENT_SPLIT_LENGTH, allow_split=(index == 0 and len(lines) == 1))
                for index, line in enumerate(lines)
            ]
            converted_segments.append("\n".join(converted))
        return "\n\n".join(converted_segments)

    return "\n".join(_bulletize_line(line, LINE_SPLIT_LENGTH) for line in _non_empty_lines(text))
