from __future__ import annotations

from enum import Enum

from mediasuite.errors import RendererStateError
from mediasuite.reporting import LogReporter, Reporter, report


class RendererState(str, Enum):
    """Lifecycle of a renderer session. STOPPED is terminal."""

    IDLE = "idle"
    STARTED = "started"
    STOPPED = "stopped"


class Renderer:
    """Terminal consumer of chunks.

    Variants differ only in ``label``. Misuse (start twice, render outside
    start/stop, stop twice) raises RendererStateError. A stopped renderer
    cannot be restarted, use a fresh instance per run.
    """

    label = "Base"

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or LogReporter()
        self.state = RendererState.IDLE
        self.chunks_rendered = 0
        self.bytes_rendered = 0

    def start(self) -> None:
        self._require(RendererState.IDLE, "start")
        self.state = RendererState.STARTED
        report(
            self._reporter,
            "renderer_started",
            self.name,
            f"[Renderer] {self.label} start",
            renderer=self.label,
        )

    def render(self, payload: bytes, metadata: dict[str, str]) -> None:
        self._require(RendererState.STARTED, "render")
        self.chunks_rendered += 1
        self.bytes_rendered += len(payload)
        report(
            self._reporter,
            "render",
            self.name,
            f"[{self.name}] Rendering {len(payload)} bytes {metadata}",
            renderer=self.label,
            size=len(payload),
            metadata=dict(metadata),
        )

    def stop(self) -> None:
        self._require(RendererState.STARTED, "stop")
        self.state = RendererState.STOPPED
        report(
            self._reporter,
            "renderer_stopped",
            self.name,
            f"[Renderer] {self.label} stop",
            renderer=self.label,
            chunks=self.chunks_rendered,
            bytes=self.bytes_rendered,
        )

    @property
    def name(self) -> str:
        return type(self).__name__

    def _require(self, expected: RendererState, operation: str) -> None:
        if self.state is not expected:
            raise RendererStateError(
                f"cannot {operation} renderer",
                renderer=self.label,
                state=self.state.value,
                expected=expected.value,
            )


class SoftwareRenderer(Renderer):
    label = "Software"


class HardwareRenderer(Renderer):
    label = "Hardware"
