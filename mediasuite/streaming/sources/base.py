from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol


@dataclass(frozen=True)
class Chunk:
    payload: bytes
    metadata: dict[str, str] = field(default_factory=dict)

    # metadata is mutable, so chunks are compared by value but never hashed
    __hash__ = None  # type: ignore[assignment]


class MediaSource(Protocol):
    id: str

    def stream(self) -> Iterator[Chunk]:
        ...


def split_fixed(data: bytes, chunk_size: int) -> Iterator[bytes]:
    for pos in range(0, len(data), chunk_size):
        yield data[pos : pos + chunk_size]


BYTES_TYPES = (bytes, bytearray, memoryview)


def is_bytes_like(value: object) -> bool:
    return isinstance(value, BYTES_TYPES)


def check_chunk_size(chunk_size: int) -> int:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return chunk_size
