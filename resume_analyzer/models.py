"""
Structured document models produced by the structure reconstructor.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple
from dataclasses import dataclass

Priority = Literal["high", "medium", "low"]
Category = Literal["experience", "technical", "education", "achievement", "leadership", "general"]
ItemType = Literal["bullet", "list_item", "description"]

PRIORITY_ORDER = {"high": 3, "medium": 2, "low": 1}
CATEGORIES = ("experience", "technical", "education", "achievement", "leadership", "general")

NO_CONTENT_MESSAGE = "No content available"
UNPROCESSABLE_CONTENT_MESSAGE = "Content could not be processed"


@dataclass(frozen=True)
class Item:
    """A single classified bullet with priority and category metadata."""

    content: str
    priority: Priority
    category: Optional[Category] = None
    item_type: ItemType = "bullet"

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.item_type,
            "content": self.content,
            "priority": self.priority,
        }
        if self.category is not None:
            data["category"] = self.category
        return data


@dataclass(frozen=True)
class Section:
    """A titled run of items."""

    title: str
    items: Tuple[Item, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "section",
            "title": self.title,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class CategoryGroup:
    """Items sharing a category, ordered by descending priority."""

    category: Category
    items: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class StructuredDocument:
    """Base class for every reconstruction result."""

    kind = "text"

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class SectionedDocument(StructuredDocument):
    sections: Tuple[Section, ...] = ()

    kind = "sections"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "content": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class EnhancedListDocument(StructuredDocument):
    groups: Tuple[CategoryGroup, ...] = ()

    kind = "enhanced_list"

    @property
    def categories(self) -> List[str]:
        return [group.category for group in self.groups]

    def group(self, category: str) -> Tuple[Item, ...]:
        for group in self.groups:
            if group.category == category:
                return group.items
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "content": {
                group.category: [item.to_dict() for item in group.items]
                for group in self.groups
            },
        }


@dataclass(frozen=True)
class BulletListDocument(StructuredDocument):
    items: Tuple[Item, ...] = ()

    kind = "bullets"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "content": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class TextDocument(StructuredDocument):
    """Placeholder result for empty or unprocessable input."""

    content: str = NO_CONTENT_MESSAGE

    kind = "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "content": self.content}
