import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Chunking configuration
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "700"))
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "200"))
CHUNK_PROGRESS_INTERVAL = int(os.getenv("CHUNK_PROGRESS_INTERVAL", "5"))  # Report progress every N chunks

# Document handling configuration
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "50"))
MAX_FILE_SIZE = MAX_FILE_SIZE_MB * 1024 * 1024
SUPPORTED_EXTENSIONS = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "docx",
    ".txt": "text",
}
FILE_BATCH_SIZE = int(os.getenv("FILE_BATCH_SIZE", "3"))  # Number of files processed together
WORDS_PER_MINUTE = int(os.getenv("WORDS_PER_MINUTE", "200"))

# Background worker configuration
USE_BACKGROUND_WORKER = _env_bool("USE_BACKGROUND_WORKER", "true")
WORKER_TIMEOUT_SECONDS = float(os.getenv("WORKER_TIMEOUT_SECONDS", "30"))

# Logging
LOG_FILE = os.getenv("LOG_FILE", "resume_analyzer.log")
