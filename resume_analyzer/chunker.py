"""
Boundary-aware text chunking for feeding size-limited language models.

Chunks overlap so context survives the cut, and each cut prefers, in order:
a sentence terminator, a space, a raw character position. A boundary is only
accepted past the midpoint of the current window so chunks never degenerate
into tiny fragments.
"""

import logging
from typing import Iterator, List

from .config import CHUNK_SIZE, CHUNK_OVERLAP

logger = logging.getLogger(__name__)

SENTENCE_TERMINATORS = (".", "?", "!")


class InvalidArgumentError(ValueError):
    """Raised when chunking parameters are out of range."""


def validate_chunk_parameters(chunk_size: int, overlap: int) -> None:
    """
    Check chunk_size and overlap, raising InvalidArgumentError if invalid.

    Args:
        chunk_size: Maximum characters per chunk (must be > 0)
        overlap: Characters shared by consecutive chunks (0 <= overlap < chunk_size)
    """
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be > 0, got {chunk_size}")
    if overlap < 0:
        raise InvalidArgumentError(f"overlap must be >= 0, got {overlap}")
    if overlap >= chunk_size:
        raise InvalidArgumentError(
            f"overlap ({overlap}) must be less than chunk_size ({chunk_size})"
        )


def find_chunk_end(text: str, start: int, chunk_size: int) -> int:
    """
    Pick the end position of the window starting at `start`.

    Args:
        text: Full source text
        start: Window start position
        chunk_size: Target window length

    Returns:
        Exclusive end index of the chunk
    """
    end = start + chunk_size
    if end >= len(text):
        return end

    midpoint = start + chunk_size / 2

    # Positions are searched inclusively up to `end`
    last_terminator = max(text.rfind(mark, 0, end + 1) for mark in SENTENCE_TERMINATORS)
    if last_terminator > midpoint:
        return last_terminator + 1

    last_space = text.rfind(" ", 0, end + 1)
    if last_space > midpoint:
        return last_space

    return end


def iter_chunks(text: str, chunk_size: int = CHUNK_SIZE, overlap: int = CHUNK_OVERLAP) -> Iterator[str]:
    """
    Lazily yield overlapping chunks of `text`.

    Callers that need progress reporting or cancellation consume this
    generator and check their own flags between chunks.
    """
    validate_chunk_parameters(chunk_size, overlap)

    if text is None:
        return

    if len(text) <= chunk_size:
        stripped = text.strip()
        if stripped:
            yield stripped
        return

    start = 0
    text_length = len(text)
    while start < text_length:
        end = find_chunk_end(text, start, chunk_size)

        chunk = text[start:end].strip()
        if chunk:
            yield chunk

        start = max(start + 1, end - overlap)


def chunk_text(text: str, chunk_size: int = CHUNK_SIZE, overlap: int = CHUNK_OVERLAP) -> List[str]:
    """
    Split text into overlapping chunks that respect sentence and word boundaries.

    Args:
        text: Document text to split
        chunk_size: Maximum size of each chunk in characters (default: 700)
        overlap: Characters shared between consecutive chunks (default: 200)

    Returns:
        Ordered list of non-empty, trimmed chunks

    Raises:
        InvalidArgumentError: If chunk_size <= 0 or overlap is outside [0, chunk_size)
    """
    chunks = list(iter_chunks(text, chunk_size=chunk_size, overlap=overlap))
    logger.debug(f"Split {len(text or '')} characters into {len(chunks)} chunks")
    return chunks


class TextChunker:
    """
    Chunker bound to a fixed chunk size and overlap.

    Parameters are validated once at construction so a misconfigured
    processor fails before any document is read.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE, overlap: int = CHUNK_OVERLAP):
        validate_chunk_parameters(chunk_size, overlap)
        self.chunk_size = chunk_size
        self.overlap = overlap

    def chunk(self, text: str) -> List[str]:
        return chunk_text(text, chunk_size=self.chunk_size, overlap=self.overlap)

    def iter_chunks(self, text: str) -> Iterator[str]:
        return iter_chunks(text, chunk_size=self.chunk_size, overlap=self.overlap)
