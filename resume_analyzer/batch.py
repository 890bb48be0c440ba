"""
Batching of document paths for multi-file processing.
"""

from pathlib import Path
from typing import List, Sequence, Union

PathLike = Union[str, Path]


class BatchProcessor:
    """
    Creates fixed-size batches of files for processing.

    Files inside a batch are processed together; batches run one after
    another so a large upload never occupies every worker at once.
    """

    def __init__(self, batch_size: int = 3):
        """
        Initialize the batch processor.

        Args:
            batch_size: Number of files per batch (default: 3)
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be > 0, got {batch_size}")
        self.batch_size = batch_size

    def create_batches(self, paths: Sequence[PathLike]) -> List[List[PathLike]]:
        """
        Split paths into batches of the configured size, preserving order.

        Args:
            paths: Files to process

        Returns:
            List of batches, where each batch is a list of paths
        """
        batches = []

        for i in range(0, len(paths), self.batch_size):
            batch = list(paths[i:i+self.batch_size])
            batches.append(batch)

        return batches
