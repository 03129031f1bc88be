from __future__ import annotations

from typing import Callable, Iterator

from mediasuite.errors import FetchError
from mediasuite.settings import FETCH_CHUNK_SIZE
from mediasuite.streaming.sources.base import (
    Chunk,
    check_chunk_size,
    is_bytes_like,
    split_fixed,
)

Fetcher = Callable[[], bytes]


class FetchSource:
    """Simulated remote source: one fetcher call per stream(), split into sub-chunks."""

    id = "fetch"

    def __init__(self, fetcher: Fetcher, chunk_size: int = FETCH_CHUNK_SIZE) -> None:
        self._fetcher = fetcher
        self._chunk_size = check_chunk_size(chunk_size)

    def stream(self) -> Iterator[Chunk]:
        try:
            data = self._fetcher()
        except Exception as exc:
            raise FetchError(
                "fetcher failed", source=self.id, error=type(exc).__name__
            ) from exc

        if not is_bytes_like(data):
            raise FetchError(
                "fetcher returned a non-bytes payload",
                source=self.id,
                payload_type=type(data).__name__,
            )

        for sub in split_fixed(bytes(data), self._chunk_size):
            yield Chunk(payload=sub, metadata={"remote": "true"})
