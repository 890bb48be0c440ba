"""
Resume Analyzer Text Pipeline
=============================

This package prepares resumes for AI analysis and cleans up what comes back:
boundary-aware overlapping chunking of extracted document text, and
reconstruction of free-form analysis text into prioritized, categorized
structure.
"""

__version__ = "0.1.0"

from .chunker import InvalidArgumentError, TextChunker, chunk_text
from .filters import NoiseFilter, filter_unwanted_content
from .models import (
    BulletListDocument,
    EnhancedListDocument,
    Item,
    Section,
    SectionedDocument,
    StructuredDocument,
    TextDocument,
)
from .structure import StructureReconstructor, reconstruct

# Avoid importing the document stack until it is needed
def get_document_processor():
    from .processor import DocumentProcessor
    return DocumentProcessor

__all__ = [
    "chunk_text",
    "TextChunker",
    "InvalidArgumentError",
    "reconstruct",
    "StructureReconstructor",
    "NoiseFilter",
    "filter_unwanted_content",
    "StructuredDocument",
    "SectionedDocument",
    "EnhancedListDocument",
    "BulletListDocument",
    "TextDocument",
    "Section",
    "Item",
    "get_document_processor",
]
