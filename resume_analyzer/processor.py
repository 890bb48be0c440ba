"""
Document processing pipeline: validate, extract, chunk and analyse resumes.
"""

import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from tqdm import tqdm

from .batch import BatchProcessor
from .chunker import TextChunker
from .config import (
    CHUNK_OVERLAP,
    CHUNK_PROGRESS_INTERVAL,
    CHUNK_SIZE,
    FILE_BATCH_SIZE,
    MAX_FILE_SIZE,
    USE_BACKGROUND_WORKER,
    WORDS_PER_MINUTE,
    WORKER_TIMEOUT_SECONDS,
)
from .data_models import FileResult, ProcessedDocument, TextAnalysis
from .display import extract_basic_sections
from .utils.documents import DocumentExtractor

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, str], None]

# Progress milestones, in percent
PROGRESS_STARTED = 10
PROGRESS_EXTRACTED = 60
PROGRESS_CHUNKED = 90
PROGRESS_COMPLETE = 100


class ProcessingCancelledError(RuntimeError):
    """Raised when processing stops because the cancel flag was set."""


def analyze_text(text: str, chunk_count: int) -> TextAnalysis:
    """Compute word, character and reading-time statistics for extracted text."""
    word_count = len(text.split())
    return TextAnalysis(
        word_count=word_count,
        character_count=len(text),
        chunk_count=chunk_count,
        estimated_reading_time=math.ceil(word_count / WORDS_PER_MINUTE),
    )


def _log_abandoned_result(future) -> None:
    # Runs on the worker thread once a timed-out worker finally stops
    error = future.exception()
    if error is not None:
        logger.warning(f"Abandoned worker stopped: {str(error)}")


class DocumentProcessor:
    """
    Turns resume files into chunked, analysed documents.

    This class is responsible for:
    1. Running each file on a background worker, or synchronously when no
       worker can be started
    2. Reporting progress and honouring cancellation between chunks
    3. Processing several files in batches, recording failures per file
    """

    def __init__(
        self,
        chunk_size: int = CHUNK_SIZE,
        overlap: int = CHUNK_OVERLAP,
        use_background_worker: bool = USE_BACKGROUND_WORKER,
        batch_size: int = FILE_BATCH_SIZE,
        max_size: int = MAX_FILE_SIZE,
        worker_timeout: float = WORKER_TIMEOUT_SECONDS,
    ):
        """
        Initialize the document processor.

        Args:
            chunk_size: Maximum characters per chunk (default: 700)
            overlap: Characters shared by consecutive chunks (default: 200)
            use_background_worker: Try a worker thread before running inline
            batch_size: Number of files per batch in multi-file runs
            max_size: Maximum accepted file size in bytes
            worker_timeout: Seconds to wait for the worker before giving up
        """
        self.chunker = TextChunker(chunk_size=chunk_size, overlap=overlap)
        self.extractor = DocumentExtractor(max_size=max_size)
        self.batch_processor = BatchProcessor(batch_size=batch_size)
        self.use_background_worker = use_background_worker
        self.worker_timeout = worker_timeout

        logger.info(
            f"Initialized DocumentProcessor with chunk_size={chunk_size}, overlap={overlap}, "
            f"background_worker={use_background_worker}"
        )

    def process_file(
        self,
        path: Union[str, Path],
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ProcessedDocument:
        """
        Process a single document.

        Args:
            path: Path to a PDF, DOCX or text file
            on_progress: Optional callback receiving (percent, message)
            cancel_event: Optional event; when set, processing stops before the next chunk

        Returns:
            ProcessedDocument with chunks, metadata, statistics and sections

        Raises:
            DocumentValidationError: If the file is rejected
            DocumentExtractionError: If no text can be extracted
            ProcessingCancelledError: If cancel_event is set during processing
            TimeoutError: If the background worker does not finish in time
        """
        if self.use_background_worker:
            try:
                executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="document-worker")
            except (RuntimeError, OSError) as e:
                logger.warning(f"Background worker unavailable, processing directly: {str(e)}")
            else:
                return self._process_with_worker(executor, path, on_progress, cancel_event)

        return self._process_directly(path, on_progress, cancel_event)

    def _process_with_worker(
        self,
        executor: ThreadPoolExecutor,
        path: Union[str, Path],
        on_progress: Optional[ProgressCallback],
        cancel_event: Optional[threading.Event],
    ) -> ProcessedDocument:
        # Stops the worker at its next chunk if we stop waiting for it
        abandon_event = threading.Event()

        try:
            try:
                future = executor.submit(
                    self._process_directly, path, on_progress, cancel_event, "worker", abandon_event
                )
            except RuntimeError as e:
                logger.warning(f"Could not start background worker, processing directly: {str(e)}")
                return self._process_directly(path, on_progress, cancel_event)

            try:
                return future.result(timeout=self.worker_timeout)
            except FutureTimeoutError:
                abandon_event.set()
                future.add_done_callback(_log_abandoned_result)
                raise TimeoutError(
                    f"Background worker did not finish {Path(path).name} within {self.worker_timeout}s"
                )
        finally:
            executor.shutdown(wait=False)

    def _process_directly(
        self,
        path: Union[str, Path],
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        processing_mode: str = "direct",
        abandon_event: Optional[threading.Event] = None,
    ) -> ProcessedDocument:
        path = Path(path)
        logger.info(f"Processing {path.name} ({processing_mode})")

        def report(percent: int, message: str) -> None:
            if on_progress:
                on_progress(percent, message)

        def check_cancelled() -> None:
            if (cancel_event and cancel_event.is_set()) or (abandon_event and abandon_event.is_set()):
                raise ProcessingCancelledError(f"Processing of {path.name} was cancelled")

        report(PROGRESS_STARTED, "Reading file...")
        check_cancelled()

        text, metadata = self.extractor.extract(path)
        report(PROGRESS_EXTRACTED, "Splitting text into chunks...")

        chunks = []
        # Estimated from the window advance; only used to scale progress
        step = max(1, self.chunker.chunk_size - self.chunker.overlap)
        estimated_total = max(1, math.ceil(len(text) / step))

        for chunk in self.chunker.iter_chunks(text):
            check_cancelled()
            chunks.append(chunk)
            if len(chunks) % CHUNK_PROGRESS_INTERVAL == 0:
                fraction = min(1.0, len(chunks) / estimated_total)
                percent = PROGRESS_EXTRACTED + int(fraction * (PROGRESS_CHUNKED - PROGRESS_EXTRACTED))
                report(percent, f"Processed {len(chunks)} chunks...")

        check_cancelled()
        report(PROGRESS_CHUNKED, "Analyzing document...")

        document = ProcessedDocument(
            original_text=text,
            chunks=chunks,
            metadata=metadata,
            analysis=analyze_text(text, len(chunks)),
            sections=extract_basic_sections(text),
            processed_at=datetime.now(timezone.utc).isoformat(),
            processing_mode=processing_mode,
        )

        report(PROGRESS_COMPLETE, "Processing complete!")
        logger.info(
            f"Processed {path.name}: {document.analysis.word_count} words, {len(chunks)} chunks"
        )
        return document

    def process_multiple_files(
        self,
        paths: Sequence[Union[str, Path]],
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[FileResult]:
        """
        Process several documents in batches.

        A file that fails is recorded with its error and the run continues.
        Cancellation stops the whole run.

        Args:
            paths: Files to process, in order
            on_progress: Optional callback receiving (percent, message) per file
            cancel_event: Optional event shared by every file in the run

        Returns:
            One FileResult per input path, in input order
        """
        results = []
        batches = self.batch_processor.create_batches(list(paths))

        for batch_index, batch in enumerate(tqdm(batches, desc="Processing document batches")):
            logger.info(f"Processing batch {batch_index+1}/{len(batches)}")

            for path in batch:
                try:
                    document = self.process_file(path, on_progress=on_progress, cancel_event=cancel_event)
                    results.append(FileResult(path=str(path), success=True, document=document))
                except ProcessingCancelledError:
                    raise
                except Exception as e:
                    logger.error(f"Error processing {path}: {str(e)}")
                    results.append(FileResult(path=str(path), success=False, error=str(e)))

        succeeded = sum(1 for result in results if result.success)
        logger.info(f"Processed {succeeded}/{len(results)} files successfully")
        return results

    def get_file_info(self, path: Union[str, Path]) -> dict:
        """Describe a file (name, size, type, validation errors) without processing it."""
        return self.extractor.get_file_info(path)
