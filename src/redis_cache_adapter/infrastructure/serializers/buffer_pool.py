"""Reusable encode buffer pool.

ONLY buffer reuse - a lock-guarded free list of general purpose byte
buffers so encoding does not allocate a fresh buffer per call.
"""

import io
import threading
from contextlib import contextmanager
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class BufferPoolStats:
    """Buffer pool usage counters."""

    acquire_count: int = 0
    created_count: int = 0
    release_count: int = 0
    discard_count: int = 0


class BufferPool:
    """Pool of ``io.BytesIO`` buffers safe for concurrent acquire/release.

    Released buffers are cleared before they become available again.
    Buffers that grew past ``max_buffer_bytes``, closed buffers, and buffers
    released while the pool is full are dropped instead of pooled.
    """

    def __init__(self, max_pooled: int = 64, max_buffer_bytes: int = 64 * 1024):
        if max_pooled < 0:
            raise ValueError("max_pooled cannot be negative")
        if max_buffer_bytes <= 0:
            raise ValueError("max_buffer_bytes must be positive")

        self._max_pooled = max_pooled
        self._max_buffer_bytes = max_buffer_bytes
        self._free: List[io.BytesIO] = []
        self._lock = threading.Lock()
        self._stats = BufferPoolStats()

    def acquire(self) -> io.BytesIO:
        """Take an empty buffer from the pool, creating one if none is free."""
        with self._lock:
            self._stats.acquire_count += 1
            if self._free:
                return self._free.pop()
            self._stats.created_count += 1
        return io.BytesIO()

    def release(self, buffer: Optional[io.BytesIO]) -> None:
        """Clear a buffer and return it to the pool."""
        if buffer is None:
            return

        if buffer.closed:
            with self._lock:
                self._stats.discard_count += 1
            return

        size = buffer.seek(0, io.SEEK_END)
        buffer.seek(0)
        buffer.truncate()

        with self._lock:
            if size > self._max_buffer_bytes or len(self._free) >= self._max_pooled:
                self._stats.discard_count += 1
                return
            self._free.append(buffer)
            self._stats.release_count += 1

    @contextmanager
    def buffer(self) -> Iterator[io.BytesIO]:
        """Borrow a buffer for the duration of a ``with`` block."""
        buf = self.acquire()
        try:
            yield buf
        finally:
            self.release(buf)

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            stats = asdict(self._stats)
            stats["pooled"] = len(self._free)
        return stats
