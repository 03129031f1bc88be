from __future__ import annotations

from typing import Iterable, Iterator

from mediasuite.streaming.sources.base import Chunk, is_bytes_like


class SegmentListSource:
    """Pre-split segments (e.g. HLS segments already on hand), one chunk each."""

    id = "segments"

    def __init__(self, segments: Iterable[bytes]) -> None:
        segments = tuple(segments)
        for index, segment in enumerate(segments):
            if not is_bytes_like(segment):
                raise TypeError(
                    f"segment {index} must be bytes-like, got {type(segment).__name__}"
                )
        self._segments = tuple(bytes(segment) for segment in segments)

    def __len__(self) -> int:
        return len(self._segments)

    def stream(self) -> Iterator[Chunk]:
        for index, segment in enumerate(self._segments):
            yield Chunk(payload=segment, metadata={"segment": f"HLS-{index}"})
