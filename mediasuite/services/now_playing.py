from __future__ import annotations

from mediasuite.models.now_playing import NowPlaying


class NowPlayingState:
    def __init__(self) -> None:
        self._current: NowPlaying | None = None

    def set(self, value: NowPlaying) -> None:
        self._current = value

    def get(self) -> NowPlaying | None:
        return self._current

    def advance(self) -> None:
        if self._current is None:
            return
        self._current = self._current.model_copy(
            update={"chunks_rendered": self._current.chunks_rendered + 1}
        )
