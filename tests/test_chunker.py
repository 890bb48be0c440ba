"""
Test suite for the text chunker.
"""

import sys
import unittest
from pathlib import Path
import pytest

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from resume_analyzer.chunker import (
    InvalidArgumentError,
    TextChunker,
    chunk_text,
    find_chunk_end,
    iter_chunks,
)
from resume_analyzer.batch import BatchProcessor


SAMPLE_TEXT = (
    "Senior backend engineer with eight years of experience building payment systems. "
    "Led the migration of a monolith to services, cutting deploy times in half. "
    "Mentored four junior developers and ran the weekly architecture review. "
    "Comfortable with Python, Go, PostgreSQL and Kafka in production. "
    "Holds a degree in Computer Science and an AWS certification. "
) * 6


class TestBatchProcessor(unittest.TestCase):
    """Tests for the BatchProcessor class."""

    def test_create_batches(self):
        """Test creating batches from a list of paths."""
        paths = [f"resume_{i+1}.pdf" for i in range(10)]

        processor1 = BatchProcessor(batch_size=4)
        batches1 = processor1.create_batches(paths)

        processor2 = BatchProcessor(batch_size=2)
        batches2 = processor2.create_batches(paths)

        # Check batch counts
        self.assertEqual(len(batches1), 3)  # 10/4 = 2 full batches + 1 partial
        self.assertEqual(len(batches2), 5)  # 10/2 = 5 full batches

        # Check batch sizes
        self.assertEqual(len(batches1[0]), 4)
        self.assertEqual(len(batches1[1]), 4)
        self.assertEqual(len(batches1[2]), 2)

        # Check order
        self.assertEqual(batches1[0][0], "resume_1.pdf")
        self.assertEqual(batches1[1][0], "resume_5.pdf")
        self.assertEqual(batches1[2][0], "resume_9.pdf")

    def test_invalid_batch_size(self):
        with self.assertRaises(ValueError):
            BatchProcessor(batch_size=0)


class TestChunkParameters(unittest.TestCase):
    """Tests for chunk parameter validation."""

    def test_zero_chunk_size_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            chunk_text(SAMPLE_TEXT, chunk_size=0, overlap=0)

    def test_negative_overlap_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            chunk_text(SAMPLE_TEXT, chunk_size=100, overlap=-1)

    def test_overlap_equal_to_chunk_size_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            chunk_text(SAMPLE_TEXT, chunk_size=100, overlap=100)

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            chunk_text(SAMPLE_TEXT, chunk_size=50, overlap=80)

    def test_validation_runs_for_short_text(self):
        with self.assertRaises(InvalidArgumentError):
            chunk_text("short text", chunk_size=10, overlap=20)

    def test_text_chunker_validates_on_init(self):
        with self.assertRaises(InvalidArgumentError):
            TextChunker(chunk_size=100, overlap=150)


class TestChunkText(unittest.TestCase):
    """Tests for chunk_text and its helpers."""

    def test_short_text_is_single_chunk(self):
        self.assertEqual(chunk_text("short text"), ["short text"])

    def test_short_text_is_trimmed(self):
        self.assertEqual(chunk_text("  short text \n"), ["short text"])

    def test_empty_input(self):
        self.assertEqual(chunk_text(""), [])
        self.assertEqual(chunk_text("   \n\t "), [])
        self.assertEqual(chunk_text(None), [])

    def test_chunks_are_substrings_and_cover_text(self):
        chunks = chunk_text(SAMPLE_TEXT, chunk_size=200, overlap=50)

        self.assertGreater(len(chunks), 1)
        for chunk in chunks:
            self.assertIn(chunk, SAMPLE_TEXT)
            # A terminator exactly at the cut is kept in the chunk
            self.assertLessEqual(len(chunk), 201)

        self.assertTrue(SAMPLE_TEXT.startswith(chunks[0]))
        self.assertTrue(SAMPLE_TEXT.rstrip().endswith(chunks[-1]))

    def test_consecutive_chunks_overlap(self):
        chunks = chunk_text(SAMPLE_TEXT, chunk_size=200, overlap=50)
        positions = []
        search_from = 0
        for chunk in chunks:
            position = SAMPLE_TEXT.index(chunk, search_from)
            positions.append((position, position + len(chunk)))
            search_from = position + 1

        # Each chunk starts before the previous one ends, leaving no gaps
        for (_, previous_end), (next_start, _) in zip(positions, positions[1:]):
            self.assertLessEqual(next_start, previous_end)

    def test_chunks_are_non_empty_and_trimmed(self):
        text = "First sentence here." + " " * 300 + "Second sentence here."
        chunks = chunk_text(text, chunk_size=100, overlap=20)

        self.assertTrue(chunks)
        for chunk in chunks:
            self.assertTrue(chunk)
            self.assertEqual(chunk, chunk.strip())

    def test_prefers_sentence_boundary(self):
        text = "A" * 60 + ". " + "b" * 60
        chunks = chunk_text(text, chunk_size=100, overlap=10)

        self.assertEqual(chunks[0], "A" * 60 + ".")
        self.assertEqual(len(chunks), 2)
        self.assertTrue(chunks[1].endswith("b" * 60))

    def test_falls_back_to_word_boundary(self):
        text = " ".join(["abcdefghi"] * 30)
        chunks = chunk_text(text, chunk_size=100, overlap=20)

        self.assertGreater(len(chunks), 1)
        for chunk in chunks:
            self.assertTrue(all(word == "abcdefghi" for word in chunk.split()))

    def test_raw_cut_without_boundaries(self):
        text = "x" * 250
        chunks = chunk_text(text, chunk_size=100, overlap=0)
        self.assertEqual([len(chunk) for chunk in chunks], [100, 100, 50])

    def test_terminates_with_maximum_overlap(self):
        chunks = chunk_text("x" * 1000, chunk_size=10, overlap=9)

        # 991 full windows, then tail windows of 9 down to 1 characters
        self.assertEqual(len(chunks), 1000)
        self.assertTrue(all(len(chunk) == 10 for chunk in chunks[:991]))
        self.assertEqual([len(chunk) for chunk in chunks[991:]], list(range(9, 0, -1)))

    def test_tail_windows_are_emitted(self):
        chunks = chunk_text("x" * 1100, chunk_size=700, overlap=200)
        self.assertEqual([len(chunk) for chunk in chunks], [700, 600, 100])

    def test_every_cut_follows_a_terminator(self):
        text = " ".join(["A. B. C. D. E."] * 20)
        chunks = chunk_text(text, chunk_size=50, overlap=10)

        self.assertGreater(len(chunks), 1)
        for chunk in chunks:
            self.assertTrue(chunk.endswith("."))

    def test_terminator_exactly_at_window_end(self):
        text = "a" * 9 + "." + "b" * 20

        self.assertEqual(find_chunk_end(text, 0, 9), 10)
        self.assertEqual(chunk_text(text, chunk_size=9, overlap=2)[0], "aaaaaaaaa.")

    def test_terminator_before_midpoint_is_ignored(self):
        text = "Hi. " + "word " * 40
        end = find_chunk_end(text, 0, 100)
        # The terminator at index 2 is too early, so the last space wins
        self.assertEqual(text[end], " ")
        self.assertGreater(end, 50)

    def test_iter_chunks_matches_chunk_text(self):
        self.assertEqual(
            list(iter_chunks(SAMPLE_TEXT, chunk_size=300, overlap=60)),
            chunk_text(SAMPLE_TEXT, chunk_size=300, overlap=60),
        )

    def test_text_chunker(self):
        chunker = TextChunker(chunk_size=250, overlap=40)
        self.assertEqual(chunker.chunk(SAMPLE_TEXT), chunk_text(SAMPLE_TEXT, 250, 40))
        self.assertEqual(list(chunker.iter_chunks(SAMPLE_TEXT)), chunker.chunk(SAMPLE_TEXT))


@pytest.mark.parametrize("chunk_size,overlap", [(50, 0), (120, 30), (700, 200)])
def test_every_chunk_within_size(chunk_size, overlap):
    chunks = chunk_text(SAMPLE_TEXT, chunk_size=chunk_size, overlap=overlap)
    assert chunks
    assert all(0 < len(chunk) <= chunk_size + 1 for chunk in chunks)


if __name__ == "__main__":
    unittest.main()
