"""Shared helpers for worker counts and timing logs."""

import os
import time

from ._logging import logger


def get_n_processes(n_jobs: int | None, n_tasks: int) -> int:
    """Get the number of worker processes for a batch of recordings.

    Args:
        n_jobs: Requested number of jobs.
                - None or -1: all available CPUs
                - Positive int: exactly that many
                - Below -1: all CPUs but ``|n_jobs| - 1``
                - 0: treated as 1
        n_tasks: Number of recordings, caps the result

    Returns:
        Number of processes, at least 1
    """
    if n_jobs is None:
        n_jobs = -1
    if n_jobs == 0:
        logger.warning("n_jobs=0 requests no workers, using 1")
        n_jobs = 1
    n_processes = n_jobs if n_jobs > 0 else (os.cpu_count() or 1) + n_jobs + 1
    n_processes = max(1, min(n_processes, n_tasks))
    logger.debug(f"Using {n_processes} processes for {n_tasks} recordings")
    return n_processes


def log_start(n_times: int) -> float:
    """Log the start of a detection run and return the current time."""
    logger.debug("Starting PQRST detection on %s samples...", n_times)
    return time.time()


def log_end(start_time: float, n_beats: int) -> None:
    """Log the number of detected beats and the elapsed time."""
    logger.info("Detected %s beats. Time taken: %.3f s", n_beats, time.time() - start_time)
