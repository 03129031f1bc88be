from __future__ import annotations


class MediaSuiteError(Exception):
    """Base exception with context"""

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{super().__str__()} ({context_str})"
        return super().__str__()


class FetchError(MediaSuiteError):
    """Raised when a fetch-backed source cannot obtain its payload.

    Fatal for the stream() call that triggered it, no retry is attempted.
    """


class RendererStateError(MediaSuiteError):
    """Raised on start/render/stop calls outside the allowed lifecycle state."""


class PlaylistError(MediaSuiteError):
    pass
