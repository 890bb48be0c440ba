"""
Display-oriented sectioning of resume and analysis text.
"""

import re
from typing import Any, Dict, List, Optional

from .splitting import intelligent_sentence_split, split_sentences

LONG_PARAGRAPH_LENGTH = 150

SECTION_KEYWORDS = (
    "EXPERIENCE|SKILLS|BACKGROUND|COMPETENCIES|LEVEL|ACHIEVEMENTS|QUALIFICATIONS|EXPERTISE|"
    "HIGHLIGHTS|STRENGTHS|WEAKNESSES|AREAS|RECOMMENDATIONS|SUGGESTIONS|IMPROVEMENTS|ANALYSIS|"
    "TRAJECTORY|FOCUS"
)

DISPLAY_HEADER_PATTERNS = [
    # "1. PROFESSIONAL BACKGROUND AND EXPERIENCE LEVEL"
    re.compile(r"^[0-9]+\.\s*[A-Z][A-Z\s&\-']+$", re.IGNORECASE),
    re.compile(r"^[A-Z\s&\-']{4,}:$", re.IGNORECASE),
    re.compile(r"^[A-Z\s&\-']+\s*\([^)]+\):?$", re.IGNORECASE),
    re.compile(r"^[A-Z][A-Z\s&\-']+ (?:OR|AND|FOR|OF|WITH|IN) [A-Z\s&\-']+$", re.IGNORECASE),
    re.compile(rf"^[A-Z\s&\-']+(?:{SECTION_KEYWORDS})[A-Z\s&\-']*$", re.IGNORECASE),
]
PLAIN_CAPS_HEADER = re.compile(r"^[A-Z\s&\-']{4,}$")

LIST_MARKER = re.compile(r"^(?:[-•*]|\d+[.)])\s+")
PARAGRAPH_BREAK = re.compile(
    r"(?:,\s+(?:and|or|but|however|furthermore|additionally|moreover)|\s+(?:while|whereas|although|because)\s+)",
    re.IGNORECASE,
)

# Resume section buckets, checked in order
RESUME_SECTION_PATTERNS = [
    ("contact", re.compile(r"(?:contact|personal|address|phone|email)", re.IGNORECASE)),
    ("summary", re.compile(r"(?:summary|objective|profile|about)", re.IGNORECASE)),
    ("experience", re.compile(r"(?:experience|work|employment|career|professional)", re.IGNORECASE)),
    ("education", re.compile(r"(?:education|academic|degree|university|college)", re.IGNORECASE)),
    ("skills", re.compile(r"(?:skills|technical|competencies|expertise|technologies)", re.IGNORECASE)),
]


def is_display_header(line: str) -> bool:
    if any(pattern.match(line) for pattern in DISPLAY_HEADER_PATTERNS):
        return True
    return bool(PLAIN_CAPS_HEADER.match(line)) and not re.search(r"[a-z]", line)


def _split_long_paragraph(line: str) -> List[Dict[str, Any]]:
    parts = [s.strip() for s in split_sentences(line) if s.strip()]
    if len(parts) <= 1:
        parts = [p.strip() for p in PARAGRAPH_BREAK.split(line) if p and p.strip()]
    if len(parts) <= 1:
        return [{"type": "paragraph", "content": line}]
    return [
        {"type": "paragraph", "content": part, "is_part_of_longer": index > 0}
        for index, part in enumerate(parts)
    ]


def extract_display_sections(text: Optional[str]) -> List[Dict[str, Any]]:
    """
    Split text into header-led sections of list items and paragraphs.

    Args:
        text: Text with section headers

    Returns:
        List of dicts with 'header', 'content' and 'content_type' keys
    """
    if not text or not isinstance(text, str):
        return []

    sections = []
    current: Dict[str, Any] = {"header": "", "content": [], "content_type": "mixed"}

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if is_display_header(line):
            if current["header"] or current["content"]:
                sections.append(current)
            header = re.sub(r":$", "", re.sub(r"^[0-9]+\.\s*", "", line))
            current = {"header": header, "content": [], "content_type": "mixed"}
        elif LIST_MARKER.match(line):
            current["content_type"] = "list"
            current["content"].append({"type": "list_item", "content": LIST_MARKER.sub("", line).strip()})
        elif len(line) > LONG_PARAGRAPH_LENGTH:
            current["content"].extend(_split_long_paragraph(line))
        else:
            current["content"].append({"type": "paragraph", "content": line})

    if current["header"] or current["content"]:
        sections.append(current)

    return sections


def assess_readability(content: str) -> str:
    """Rate text as simple, medium or complex by word count and word length."""
    words = content.split()
    if not words:
        return "simple"
    avg_word_length = len(re.sub(r"\s", "", content)) / len(words)

    if len(words) > 25 or avg_word_length > 6:
        return "complex"
    if len(words) > 15 or avg_word_length > 5:
        return "medium"
    return "simple"


def parse_paragraphs(lines: List[str]) -> List[Dict[str, Any]]:
    """Turn lines into paragraph entries, splitting long ones, with readability."""
    paragraphs = []
    for line in lines:
        if len(line) > LONG_PARAGRAPH_LENGTH:
            for sentence in intelligent_sentence_split(line):
                paragraphs.append({
                    "type": "paragraph",
                    "content": sentence.strip(),
                    "length": "long",
                    "readability": assess_readability(sentence),
                })
        else:
            paragraphs.append({
                "type": "paragraph",
                "content": line,
                "length": "normal",
                "readability": assess_readability(line),
            })
    return paragraphs


def extract_basic_sections(text: str) -> Dict[str, str]:
    """
    Bucket the paragraphs of a raw resume into common resume sections.

    A paragraph goes to the first section whose keywords it mentions.
    Paragraphs containing an '@' count as contact details. Everything
    unmatched lands in 'other'.
    """
    buckets: Dict[str, List[str]] = {
        name: [] for name in ("contact", "summary", "experience", "education", "skills", "other")
    }
    if not text:
        return {name: "" for name in buckets}

    for paragraph in re.split(r"\n\s*\n", text):
        if not paragraph.strip():
            continue
        for name, pattern in RESUME_SECTION_PATTERNS:
            if pattern.search(paragraph) or (name == "contact" and "@" in paragraph):
                buckets[name].append(paragraph.strip())
                break
        else:
            buckets["other"].append(paragraph.strip())

    return {name: "\n\n".join(paragraphs) for name, paragraphs in buckets.items()}
