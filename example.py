"""
Example script demonstrating how to use the Resume Analyzer pipeline.
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent))

from resume_analyzer import chunk_text, reconstruct, get_document_processor
DocumentProcessor = get_document_processor()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SAMPLE_ANALYSIS = """STRENGTHS:
- Led a team of 8 engineers through a platform migration
- Improved API response times by 40% over two quarters
- Strong Python and SQL skills across data tooling

AREAS FOR IMPROVEMENT:
- Add quantifiable results to earlier roles
- Expand the summary with career goals
"""


def main():
    """Run the example."""
    parser = argparse.ArgumentParser(description="Resume Analyzer Example")
    parser.add_argument(
        "resume_path", type=str, nargs="?",
        help="Path to a resume (PDF, DOCX or text). Without it only the text demos run."
    )
    parser.add_argument(
        "--chunk-size", type=int, default=300,
        help="Maximum characters per chunk (default: 300)"
    )
    parser.add_argument(
        "--overlap", type=int, default=50,
        help="Characters shared by consecutive chunks (default: 50)"
    )
    args = parser.parse_args()

    # Chunk a piece of text directly
    text = " ".join([SAMPLE_ANALYSIS.replace("\n", " ")] * 3)
    chunks = chunk_text(text, chunk_size=args.chunk_size, overlap=args.overlap)
    logger.info(f"Split {len(text)} characters into {len(chunks)} chunks")
    for index, chunk in enumerate(chunks):
        logger.info(f"Chunk {index+1}: {chunk[:60]}...")

    # Reconstruct structure from analysis text
    document = reconstruct(SAMPLE_ANALYSIS)
    logger.info(f"Reconstructed analysis as a '{document.kind}' document")
    print(json.dumps(document.to_dict(), indent=2, ensure_ascii=False))

    # Process a resume file if one was given
    if args.resume_path:
        resume_path = Path(args.resume_path)
        if not resume_path.exists():
            logger.error(f"Resume file not found: {resume_path}")
            return

        processor = DocumentProcessor(chunk_size=args.chunk_size, overlap=args.overlap)
        processed = processor.process_file(
            resume_path,
            on_progress=lambda percent, message: logger.info(f"[{percent}%] {message}"),
        )

        logger.info(f"Words: {processed.analysis.word_count}")
        logger.info(f"Chunks: {processed.analysis.chunk_count}")
        logger.info(f"Reading time: {processed.analysis.estimated_reading_time} min")
        for name, content in processed.sections.items():
            if content:
                logger.info(f"Section '{name}': {content[:80]}...")


if __name__ == "__main__":
    main()
