from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Protocol, Sequence

from mediasuite.reporting import LogReporter, Reporter, report


class RenderFunction(Protocol):
    def render(self, payload: bytes, metadata: dict[str, str]) -> None:
        ...


class RenderPlugin(Protocol):
    name: str

    def wrap(self, inner: RenderFunction) -> RenderFunction:
        ...


class _PluginRender:
    """Capability produced by RenderPlugin.wrap: plugin hook, then inner."""

    def __init__(self, plugin: _HookPlugin, inner: RenderFunction) -> None:
        self._plugin = plugin
        self._inner = inner

    def render(self, payload: bytes, metadata: dict[str, str]) -> None:
        self._plugin.before_render(payload, metadata)
        self._inner.render(payload, metadata)


class _HookPlugin(ABC):
    name = "plugin"

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or LogReporter()

    def wrap(self, inner: RenderFunction) -> RenderFunction:
        return _PluginRender(self, inner)

    @abstractmethod
    def before_render(self, payload: bytes, metadata: dict[str, str]) -> None:
        ...

    def _report(self, message: str, value: str) -> None:
        report(
            self._reporter,
            "plugin",
            self.name,
            f"[Plugin] {message}",
            plugin=self.name,
            value=value,
        )


class WatermarkPlugin(_HookPlugin):
    name = "watermark"

    def __init__(self, text: str, reporter: Reporter | None = None) -> None:
        super().__init__(reporter)
        self.text = text

    def before_render(self, payload: bytes, metadata: dict[str, str]) -> None:
        metadata["watermark"] = self.text
        self._report(f"Watermark: {self.text}", self.text)


class SubtitlePlugin(_HookPlugin):
    name = "subtitle"

    def __init__(self, lines: Iterable[str], reporter: Reporter | None = None) -> None:
        super().__init__(reporter)
        self.lines = tuple(lines)
        if not self.lines:
            raise ValueError("SubtitlePlugin needs at least one caption line")
        self.cursor = 0

    def before_render(self, payload: bytes, metadata: dict[str, str]) -> None:
        line = self.lines[self.cursor % len(self.lines)]
        self.cursor += 1
        self._report(f"Subtitle: {line}", line)


def compose(base: RenderFunction, plugins: Sequence[RenderPlugin]) -> RenderFunction:
    """Wrap ``base`` so that ``plugins[0]`` runs first.

    ``compose(base, [a, b])`` is ``a.wrap(b.wrap(base))``.
    """
    render = base
    for plugin in reversed(plugins):
        render = plugin.wrap(render)
    return render
