"""Runs image filters in a thread pool and reports finished files."""

from __future__ import annotations

import concurrent.futures
import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePath

from .filters import ImageAlgorithm, run_algorithm

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Job:
    source_file: str
    dest_file: str
    algorithm: ImageAlgorithm


class ImageProcessor:
    """Applies filters to image files in background threads.

    When a job that was not aborted completes, the processor records its
    source file and algorithm and calls *on_finished* with the output path.
    """

    def __init__(
        self,
        on_finished: Callable[[str], None] | None = None,
        temp_path: str | os.PathLike[str] | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._on_finished = on_finished
        self._temp_path = os.getcwd() if temp_path is None else os.fspath(temp_path)
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=max_workers)
        self._lock = threading.Lock()
        self._jobs: list[_Job] = []
        self._futures: set[concurrent.futures.Future[None]] = set()
        self._source_file = ""
        self._algorithm: ImageAlgorithm | None = None

    @property
    def source_file(self) -> str:
        """Source file of the most recently reported job, or ''."""
        return self._source_file

    @property
    def algorithm(self) -> ImageAlgorithm | None:
        """Algorithm of the most recently reported job, or None."""
        return self._algorithm

    def set_temp_path(self, temp_path: str | os.PathLike[str]) -> None:
        """Set the directory that output files are written to."""
        self._temp_path = os.fspath(temp_path)

    def destination_for(self, file: str, algorithm: ImageAlgorithm | int) -> str:
        """Return the output path used for *file* processed with *algorithm*."""
        name = PurePath(file).name
        return f"{self._temp_path}/{int(algorithm)}_{name}"

    def process(self, file: str, algorithm: ImageAlgorithm | int) -> str:
        """Queue *file* for processing and return its output path."""
        job = _Job(file, self.destination_for(file, algorithm), ImageAlgorithm(algorithm))
        with self._lock:
            self._jobs.append(job)
        future = self._executor.submit(self._run, job)
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(self._forget)
        return job.dest_file

    def abort(self, file: str, algorithm: ImageAlgorithm | int) -> None:
        """Stop reporting the first pending job for *file* and *algorithm*."""
        with self._lock:
            for job in self._jobs:
                if job.source_file == file and job.algorithm == algorithm:
                    self._jobs.remove(job)
                    break

    def wait(self) -> None:
        """Block until every submitted job has completed."""
        with self._lock:
            pending = list(self._futures)
        concurrent.futures.wait(pending)

    def close(self) -> None:
        """Wait for running jobs and release the worker threads."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> ImageProcessor:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _forget(self, future: concurrent.futures.Future[None]) -> None:
        with self._lock:
            self._futures.discard(future)

    def _run(self, job: _Job) -> None:
        try:
            run_algorithm(job.algorithm, job.source_file, job.dest_file)
        except Exception:
            logger.exception("processing %s failed", job.source_file)
        with self._lock:
            if job not in self._jobs:
                return
            self._jobs.remove(job)
            self._source_file = job.source_file
            self._algorithm = job.algorithm
        if self._on_finished is not None:
            self._on_finished(job.dest_file)