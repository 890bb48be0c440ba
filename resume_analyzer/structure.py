"""
Reconstruction of structured sections and bullets from AI-generated prose.
"""

import re
import logging
from typing import Dict, List, Optional

from .classifiers import assess_priority, categorize
from .filters import NoiseFilter
from .formatter import convert_to_bullet_points, format_analysis_text
from .models import (
    PRIORITY_ORDER,
    NO_CONTENT_MESSAGE,
    UNPROCESSABLE_CONTENT_MESSAGE,
    BulletListDocument,
    CategoryGroup,
    EnhancedListDocument,
    Item,
    Section,
    SectionedDocument,
    StructuredDocument,
    TextDocument,
)
from .splitting import split_sentences

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^[A-Z][A-Z\s&\-']{3,}(?::|$)")
NUMBERED_HEADER_PATTERN = re.compile(r"^\d+\.\s*[A-Z][A-Z\s&\-']{3,}(?::|$)")
SECTION_HEADER_PATTERN = re.compile(r"^(?:\d+\.\s*)?[A-Z][A-Z\s&\-']{3,}(?::|$)")
LIST_ITEM_PATTERN = re.compile(r"^(?:[-•*]|\d+[.)]|[a-z][.)])\s+", re.IGNORECASE)
BULLET_PATTERN = re.compile(r"^(?:[-•*]|\d+[.)])\s+")
LEADING_MARKER_PATTERN = re.compile(r"^[-•*]\s*")

SECTION_ITEM_MIN_LENGTH = 15
SECTION_SPLIT_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
MIN_SENTENCE_LENGTH = 10


def is_header(line: str) -> bool:
    return bool(HEADER_PATTERN.match(line) or NUMBERED_HEADER_PATTERN.match(line))


def clean_header_title(line: str) -> str:
    title = re.sub(r"^\d+\.\s*", "", line)
    return re.sub(r":$", "", title).strip()


class StructureReconstructor:
    """
    Rebuilds a StructuredDocument from unstructured analysis text.

    The pipeline runs in fixed order:
    1. Noise filtering (replaceable rule list)
    2. Markdown stripping
    3. Bulletization
    4. Classification into sections, an enhanced list or a bullet list
    5. Priority and category annotation of every item
    """

    def __init__(self, noise_filter: Optional[NoiseFilter] = None):
        """
        Initialize the reconstructor.

        Args:
            noise_filter: Filter applied before any other step (default: standard rules)
        """
        self.noise_filter = noise_filter or NoiseFilter()

    def prepare_lines(self, text: str) -> List[str]:
        """Run the cleanup stages and return the non-empty, trimmed lines."""
        filtered = self.noise_filter.filter(text.replace("\r\n", "\n"))
        cleaned = format_analysis_text(filtered)
        if not cleaned.strip():
            return []
        bulletized = convert_to_bullet_points(cleaned)
        return [line.strip() for line in bulletized.split("\n") if line.strip()]

    def reconstruct(self, text: Optional[str]) -> StructuredDocument:
        """
        Reconstruct structured content from free text.

        Args:
            text: AI-generated analysis text (None and "" are accepted)

        Returns:
            SectionedDocument, EnhancedListDocument, BulletListDocument, or a
            TextDocument placeholder when there is nothing to structure
        """
        if not text or not isinstance(text, str):
            return TextDocument(NO_CONTENT_MESSAGE)

        lines = self.prepare_lines(text)
        if not lines:
            logger.info("No content left after cleanup")
            return TextDocument(UNPROCESSABLE_CONTENT_MESSAGE)

        if any(is_header(line) for line in lines):
            document = self.parse_sections(lines)
        elif sum(1 for line in lines if LIST_ITEM_PATTERN.match(line)) > 1:
            document = self.parse_list(lines)
        else:
            document = self.parse_bullets(lines)

        logger.debug(f"Reconstructed {len(lines)} lines as {document.kind}")
        return document

    def parse_sections(self, lines: List[str]) -> SectionedDocument:
        """
        Group lines under their headers.

        Lines before the first header are kept in a leading untitled section.
        """
        sections: List[Section] = []
        title: Optional[str] = None
        items: List[Item] = []

        def close_section():
            if title is not None or items:
                sections.append(Section(title=title or "", items=tuple(items)))

        for line in lines:
            # A header line is never treated as a bullet
            if SECTION_HEADER_PATTERN.match(line):
                close_section()
                title = clean_header_title(line)
                items = []
            elif BULLET_PATTERN.match(line):
                content = BULLET_PATTERN.sub("", line).strip()
                items.append(Item(content=content, priority=assess_priority(content)))
            elif len(line) > SECTION_ITEM_MIN_LENGTH:
                content = LEADING_MARKER_PATTERN.sub("", line).strip()
                if len(content) > SECTION_SPLIT_LENGTH:
                    for sentence in split_sentences(content):
                        sentence = sentence.strip()
                        if len(sentence) > MIN_SENTENCE_LENGTH:
                            items.append(Item(content=sentence, priority=assess_priority(sentence)))
                else:
                    items.append(Item(content=content, priority=assess_priority(content)))

        close_section()
        return SectionedDocument(sections=tuple(sections))

    def parse_list(self, lines: List[str]) -> EnhancedListDocument:
        """Classify list items and descriptions, then group them by category."""
        items: List[Item] = []
        for line in lines:
            if LIST_ITEM_PATTERN.match(line):
                content = LIST_ITEM_PATTERN.sub("", line).strip()
                items.append(Item(
                    content=content,
                    priority=assess_priority(content),
                    category=categorize(content),
                    item_type="list_item",
                ))
            elif len(line) > DESCRIPTION_MIN_LENGTH:
                items.append(Item(
                    content=line,
                    priority=assess_priority(line),
                    item_type="description",
                ))

        return EnhancedListDocument(groups=group_by_category(items))

    def parse_bullets(self, lines: List[str]) -> BulletListDocument:
        """Fallback when no structure is detected: one bullet per line."""
        items = []
        for line in lines:
            content = LEADING_MARKER_PATTERN.sub("", line).strip()
            items.append(Item(
                content=content,
                priority=assess_priority(content),
                category=categorize(content),
            ))
        return BulletListDocument(items=tuple(items))


def group_by_category(items: List[Item]) -> tuple:
    """
    Group items by category in first-seen order.

    Items without a category land in 'general'. Each group is stably sorted
    by priority, high first.
    """
    groups: Dict[str, List[Item]] = {}
    for item in items:
        groups.setdefault(item.category or "general", []).append(item)

    return tuple(
        CategoryGroup(
            category=category,
            items=tuple(sorted(group, key=lambda item: PRIORITY_ORDER.get(item.priority, 1), reverse=True)),
        )
        for category, group in groups.items()
    )


def reconstruct(text: Optional[str]) -> StructuredDocument:
    """Reconstruct text with the default noise filter."""
    return StructureReconstructor().reconstruct(text)
