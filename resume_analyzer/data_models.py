from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DocumentMetadata:
    """File-level facts gathered during validation and extraction."""
    file_name: str
    file_size: int
    file_type: str
    page_count: int = 1

    def to_dict(self) -> dict:
        return {
            "file_name": self.file_name,
            "file_size": self.file_size,
            "file_size_mb": round(self.file_size / 1024 / 1024, 2),
            "file_type": self.file_type.upper(),
            "page_count": self.page_count,
        }


@dataclass
class TextAnalysis:
    """Basic statistics of the extracted text."""
    word_count: int
    character_count: int
    chunk_count: int
    estimated_reading_time: int  # minutes

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "character_count": self.character_count,
            "chunk_count": self.chunk_count,
            "estimated_reading_time": self.estimated_reading_time,
        }


@dataclass
class ProcessedDocument:
    """Final result of processing one document, ready for JSON output."""
    original_text: str
    chunks: List[str]
    metadata: DocumentMetadata
    analysis: TextAnalysis
    sections: Dict[str, str] = field(default_factory=dict)
    processed_at: str = ""
    processing_mode: str = "direct"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "original_text": self.original_text,
            "chunks": self.chunks,
            "metadata": self.metadata.to_dict(),
            "analysis": self.analysis.to_dict(),
            "sections": self.sections,
            "processed_at": self.processed_at,
            "processing_mode": self.processing_mode,
        }


@dataclass
class FileResult:
    """Outcome of one file in a multi-file run."""
    path: str
    success: bool
    document: Optional[ProcessedDocument] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "success": self.success,
            "result": self.document.to_dict() if self.document else None,
            "error": self.error,
        }
