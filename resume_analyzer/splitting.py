"""
Sentence-level splitting helpers for long lines of prose.
"""

import re
from typing import List

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
CAPITALIZED_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")
CONJUNCTION_BOUNDARY = re.compile(
    r",\s+(?:and|or|but|however|therefore|furthermore|moreover|additionally|specifically|particularly)\s+",
    re.IGNORECASE,
)
COMMA_BOUNDARY = re.compile(r",\s+")

LONG_SENTENCE_LENGTH = 100


def split_sentences(text: str) -> List[str]:
    """Split after '.', '!' or '?' followed by whitespace."""
    if not text:
        return []
    return [s for s in SENTENCE_BOUNDARY.split(text) if s]


def split_at_conjunctions(sentence: str) -> List[str]:
    """Split a long sentence at ', and' / ', however' style joints."""
    return [part.strip() for part in CONJUNCTION_BOUNDARY.split(sentence) if part.strip()]


def intelligent_sentence_split(text: str) -> List[str]:
    """
    Split text into sentences, then break sentences longer than 100
    characters at logical conjunctions.
    """
    if not text:
        return []

    sentences = CAPITALIZED_SENTENCE_BOUNDARY.split(text)
    result = []
    for sentence in sentences:
        if len(sentence) > LONG_SENTENCE_LENGTH:
            result.extend(split_at_conjunctions(sentence))
        else:
            result.append(sentence)
    return [s for s in result if s.strip()]


def _split_by_words(sentence: str, max_length: int) -> List[str]:
    pieces = []
    current = ""
    for word in sentence.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_length:
            current = candidate
        else:
            if current:
                pieces.append(current)
            current = word
    if current:
        pieces.append(current)
    return pieces


def smart_text_chunking(text: str, max_length: int = 200) -> List[str]:
    """
    Pack sentences into display-sized chunks of at most `max_length` characters.

    A sentence that does not fit on its own is broken at conjunctions, then
    at commas, and finally at word boundaries.

    Args:
        text: Long text to chunk
        max_length: Maximum length per chunk

    Returns:
        List of non-empty chunks
    """
    if not text or len(text) <= max_length:
        return [text] if text else []

    chunks = []
    current = ""

    for sentence in split_sentences(text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= max_length:
            current = candidate
            continue

        if current:
            chunks.append(current.strip())
            current = ""
            if len(sentence) <= max_length:
                current = sentence
                continue

        parts = split_at_conjunctions(sentence)
        if len(parts) <= 1:
            parts = [p.strip() for p in COMMA_BOUNDARY.split(sentence) if p.strip()]

        pieces = []
        for part in parts:
            if len(part) > max_length:
                pieces.extend(_split_by_words(part, max_length))
            else:
                pieces.append(part)
        chunks.extend(pieces[:-1])
        current = pieces[-1] if pieces else ""

    if current:
        chunks.append(current.strip())

    return [chunk for chunk in chunks if chunk]
