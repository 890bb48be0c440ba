"""
Document utility functions for validating files and extracting their text.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..config import MAX_FILE_SIZE, SUPPORTED_EXTENSIONS
from ..data_models import DocumentMetadata

logger = logging.getLogger(__name__)


class DocumentValidationError(ValueError):
    """Raised when a file cannot be accepted for processing."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(", ".join(errors))


class DocumentExtractionError(RuntimeError):
    """Raised when no text can be extracted from an accepted file."""


def detect_file_type(path: Union[str, Path]) -> str:
    """Return 'pdf', 'docx', 'text' or 'unknown' from the file extension."""
    return SUPPORTED_EXTENSIONS.get(Path(path).suffix.lower(), "unknown")


def validate_file(path: Union[str, Path], max_size: int = MAX_FILE_SIZE) -> Dict[str, Any]:
    """
    Check that a file exists, is not empty, is small enough and has a supported type.

    Args:
        path: Path to the document
        max_size: Maximum accepted size in bytes

    Returns:
        Dict with is_valid, errors, file_type and file_size
    """
    path = Path(path)
    errors = []

    if not path.is_file():
        return {"is_valid": False, "errors": [f"File not found: {path}"], "file_type": "unknown", "file_size": 0}

    file_size = path.stat().st_size
    if file_size > max_size:
        errors.append(
            f"File size must be less than {max_size / 1024 / 1024:g}MB. "
            f"Current size: {file_size / 1024 / 1024:.2f}MB"
        )
    if file_size == 0:
        errors.append("File cannot be empty")

    file_type = detect_file_type(path)
    if file_type == "unknown":
        errors.append("File must be a PDF (.pdf), Word document (.docx, .doc) or text file (.txt)")

    return {
        "is_valid": not errors,
        "errors": errors,
        "file_type": file_type,
        "file_size": file_size,
    }


class DocumentExtractor:
    """
    Extracts plain text from PDF, DOCX and text documents.

    This class is responsible for:
    1. Validating the file before reading it
    2. Extracting text with the library suited to the file type
    3. Collecting basic metadata (size, type, page count)
    """

    def __init__(self, max_size: int = MAX_FILE_SIZE):
        """
        Initialize the document extractor.

        Args:
            max_size: Maximum accepted file size in bytes
        """
        self.max_size = max_size

    def extract(self, path: Union[str, Path]) -> Tuple[str, DocumentMetadata]:
        """
        Validate a document and extract its text.

        Args:
            path: Path to the document

        Returns:
            Tuple of (extracted text, metadata)

        Raises:
            DocumentValidationError: If the file fails validation
            DocumentExtractionError: If no text could be extracted
        """
        path = Path(path)
        validation = validate_file(path, self.max_size)
        if not validation["is_valid"]:
            raise DocumentValidationError(validation["errors"])

        file_type = validation["file_type"]
        logger.info(f"Extracting text from {file_type.upper()} document: {path}")

        if file_type == "pdf":
            text, page_count = self.extract_pdf_text(path)
        elif file_type == "docx":
            text, page_count = self.extract_docx_text(path), 1
        else:
            text, page_count = self.extract_plain_text(path), 1

        if not text or not text.strip():
            raise DocumentExtractionError(f"No text could be extracted from the document: {path.name}")

        metadata = DocumentMetadata(
            file_name=path.name,
            file_size=validation["file_size"],
            file_type=file_type,
            page_count=page_count,
        )
        logger.info(f"Extracted {len(text)} characters from {path.name} ({page_count} pages)")
        return text.strip(), metadata

    def extract_pdf_text(self, pdf_path: Path) -> Tuple[str, int]:
        """
        Extract text from a PDF with pypdf, falling back to PyMuPDF.

        Returns:
            Tuple of (text, page count)
        """
        try:
            text, page_count = self._extract_with_pypdf(pdf_path)
            if text.strip():
                return text, page_count
            logger.warning(f"pypdf found no text in {pdf_path.name}, trying PyMuPDF")
        except ImportError:
            raise
        except Exception as e:
            logger.warning(f"pypdf failed on {pdf_path.name}: {str(e)}, trying PyMuPDF")

        try:
            return self._extract_with_pymupdf(pdf_path)
        except ImportError:
            raise
        except Exception as e:
            raise DocumentExtractionError(f"Failed to process PDF file: {str(e)}") from e

    def _extract_with_pypdf(self, pdf_path: Path) -> Tuple[str, int]:
        try:
            from pypdf import PdfReader
        except ImportError:
            raise ImportError(
                "pypdf package not installed. "
                "Install it with: pip install pypdf"
            )

        with open(pdf_path, "rb") as f:
            reader = PdfReader(f)
            pages = [page.extract_text() or "" for page in reader.pages]
        return "\n".join(pages), len(pages)

    def _extract_with_pymupdf(self, pdf_path: Path) -> Tuple[str, int]:
        try:
            import fitz  # PyMuPDF
        except ImportError:
            raise ImportError(
                "PyMuPDF package not installed. "
                "Install it with: pip install pymupdf"
            )

        with fitz.open(pdf_path) as pdf_document:
            pages = [page.get_text() for page in pdf_document]
        return "\n".join(pages), len(pages)

    def extract_docx_text(self, docx_path: Path) -> str:
        """Extract paragraph and table text from a DOCX file with python-docx."""
        try:
            from docx import Document
        except ImportError:
            raise ImportError(
                "python-docx package not installed. "
                "Install it with: pip install python-docx"
            )

        try:
            document = Document(str(docx_path))
        except Exception as e:
            raise DocumentExtractionError(f"Failed to process DOCX file: {str(e)}") from e

        parts = [paragraph.text for paragraph in document.paragraphs if paragraph.text]
        for table in document.tables:
            for row in table.rows:
                for cell in row.cells:
                    if cell.text:
                        parts.append(cell.text)
        return "\n".join(parts)

    def extract_plain_text(self, text_path: Path) -> str:
        with open(text_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def get_file_info(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Describe a file without extracting its text."""
        path = Path(path)
        validation = validate_file(path, self.max_size)
        return {
            "file_name": path.name,
            "file_size": validation["file_size"],
            "file_size_mb": round(validation["file_size"] / 1024 / 1024, 2),
            "file_type": validation["file_type"],
            "is_valid": validation["is_valid"],
            "errors": validation["errors"],
        }
