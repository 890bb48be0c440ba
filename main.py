#!/usr/bin/env python3
import os
import argparse
import json
import logging
import sys

from resume_analyzer.config import CHUNK_OVERLAP, CHUNK_SIZE, LOG_FILE

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(LOG_FILE)
    ]
)
logger = logging.getLogger(__name__)


def default_output_path(input_path: str, suffix: str) -> str:
    """Build output/<input name>_<suffix>.json next to this script."""
    input_name = os.path.splitext(os.path.basename(input_path))[0]
    output_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    return os.path.join(output_dir, f"{input_name}_{suffix}.json")


def write_json(result: dict, output_path: str) -> None:
    os.makedirs(os.path.dirname(output_path), exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
    logger.info(f"Output saved to {output_path}")


def run_chunk(args) -> dict:
    from resume_analyzer import get_document_processor
    DocumentProcessor = get_document_processor()

    processor = DocumentProcessor(
        chunk_size=args.chunk_size,
        overlap=args.overlap,
        use_background_worker=not args.no_worker,
    )
    document = processor.process_file(
        args.input,
        on_progress=lambda percent, message: logger.info(f"[{percent:3d}%] {message}"),
    )
    return document.to_dict()


def run_format(args) -> dict:
    from resume_analyzer import reconstruct
    from resume_analyzer.analysis import format_complete_analysis

    with open(args.input, 'r', encoding='utf-8') as f:
        content = f.read()

    if args.input.lower().endswith('.json'):
        return format_complete_analysis(json.loads(content)) or {}

    document = reconstruct(content)
    logger.info(f"Reconstructed text as {document.kind} document")
    return document.to_dict()


def run_info(args) -> dict:
    from resume_analyzer.utils.documents import DocumentExtractor

    return DocumentExtractor().get_file_info(args.input)


COMMANDS = {
    "chunk": (run_chunk, "chunks"),
    "format": (run_format, "formatted"),
    "info": (run_info, "info"),
}


def main():
    """
    Main entry point for the Resume Analyzer text pipeline.
    """
    parser = argparse.ArgumentParser(
        description="Resume Analyzer: document chunking and analysis text reconstruction"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chunk_parser = subparsers.add_parser("chunk", help="Extract and chunk a resume (PDF, DOCX or text)")
    format_parser = subparsers.add_parser(
        "format",
        help="Reconstruct analysis text (.txt) or format a complete analysis (.json)"
    )
    info_parser = subparsers.add_parser("info", help="Show file information and validation results")

    for sub in (chunk_parser, format_parser, info_parser):
        sub.add_argument(
            "-i", "--input",
            required=True,
            help="Path to the input file"
        )
        sub.add_argument(
            "-o", "--output",
            help="Path to save the output JSON file. If not provided, will write to output/<input>_<command>.json"
        )

    chunk_parser.add_argument(
        "--chunk-size", type=int, default=CHUNK_SIZE,
        help=f"Maximum characters per chunk (default: {CHUNK_SIZE})"
    )
    chunk_parser.add_argument(
        "--overlap", type=int, default=CHUNK_OVERLAP,
        help=f"Characters shared by consecutive chunks (default: {CHUNK_OVERLAP})"
    )
    chunk_parser.add_argument(
        "--no-worker", action="store_true",
        help="Process on the main thread instead of a background worker"
    )

    args = parser.parse_args()

    # Validate input file
    args.input = os.path.abspath(args.input)
    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)

    handler, suffix = COMMANDS[args.command]
    output_path = os.path.abspath(args.output) if args.output else default_output_path(args.input, suffix)

    logger.info(f"Running '{args.command}' on {args.input}")

    try:
        result = handler(args)
        write_json(result, output_path)
    except Exception as e:
        logger.error(f"Error during processing: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
