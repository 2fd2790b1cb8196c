# MIT License (see LICENSE)
"""
Chunked parallel execution of per-particle work.

Particles are partitioned into consecutive fixed-size batches and each
batch is handed to a worker thread. Callers must keep every unit of work
writing only to its own particle; other particles are read-only for the
duration of a run() call.
"""
from __future__ import annotations
import os
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Sequence, TypeVar

from ..constants import BATCH_SIZE
from ..util import batched

T = TypeVar("T")
R = TypeVar("R")


def _run_chunk(fn: Callable[[T], R], chunk: Sequence[T]) -> list[R]:
    return [fn(item) for item in chunk]


class BatchExecutor:
    """
    Fixed-size chunked parallel map over a thread pool.

    Attributes:
        batch_size: Items per unit of parallel work.
        max_workers: Worker threads. 1 runs every batch inline on the
            calling thread without creating a pool.

    Example:
        with BatchExecutor(batch_size=128) as executor:
            executor.run(lambda p: integrate(p, dt), particles)
    """

    def __init__(self, batch_size: int = BATCH_SIZE, max_workers: int | None = None) -> None:
        if batch_size < 1:
            raise ValueError(f"Batch size must be >= 1, got {batch_size}")
        self.batch_size = int(batch_size)
        if max_workers is None:
            max_workers = os.cpu_count() or 1
        self.max_workers = int(max_workers)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._pool: ThreadPoolExecutor | None = None
        if self.max_workers > 1:
            self._pool = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="particle-life"
            )

    def run(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        """
        Apply fn to every item, batch by batch, and wait for completion.

        Returns:
            Results in item order.

        Raises:
            Whatever fn raised first, once all submitted batches are collected.
        """
        chunks = list(batched(items, self.batch_size))
        out: list[R] = []
        if self._pool is None:
            for chunk in chunks:
                out.extend(_run_chunk(fn, chunk))
            return out
        futures = [self._pool.submit(_run_chunk, fn, chunk) for chunk in chunks]
        # Every batch must finish before an error reaches the caller.
        wait(futures)
        for fut in futures:
            out.extend(fut.result())
        return out

    def close(self) -> None:
        """Shut down the worker pool, waiting for running batches."""
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def __enter__(self) -> BatchExecutor:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
