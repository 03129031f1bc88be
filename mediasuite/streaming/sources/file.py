from __future__ import annotations

from pathlib import Path
from typing import Iterator

from mediasuite.reporting import LogReporter, Reporter, report
from mediasuite.settings import FILE_CHUNK_SIZE
from mediasuite.streaming.sources.base import Chunk, check_chunk_size


class FileSource:
    id = "file"

    def __init__(
        self,
        path: str | Path,
        chunk_size: int = FILE_CHUNK_SIZE,
        reporter: Reporter | None = None,
    ) -> None:
        self._path = Path(path)
        self._chunk_size = check_chunk_size(chunk_size)
        self._reporter = reporter or LogReporter()

    @property
    def path(self) -> Path:
        return self._path

    def stream(self) -> Iterator[Chunk]:
        # An unreadable file ends the stream early; chunks already yielded stand.
        origin = str(self._path)
        try:
            with open(self._path, "rb") as f:
                while True:
                    block = f.read(self._chunk_size)
                    if not block:
                        break
                    yield Chunk(payload=block, metadata={"source": origin})
        except (OSError, ValueError) as exc:
            # ValueError covers paths open() refuses outright, e.g. embedded NUL.
            report(
                self._reporter,
                "io_error",
                "FileSource",
                f"[FileSource] Error: {exc}",
                path=origin,
                error=str(exc),
            )
