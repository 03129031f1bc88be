from __future__ import annotations

from typing import Sequence

from mediasuite.models.now_playing import NowPlaying
from mediasuite.rendering.plugins import RenderPlugin, compose
from mediasuite.rendering.renderers import Renderer
from mediasuite.reporting import LogReporter, Reporter, report
from mediasuite.services.now_playing import NowPlayingState
from mediasuite.streaming.playlist import MediaItem


class Pipeline:
    def __init__(
        self,
        renderer: Renderer,
        plugins: Sequence[RenderPlugin] = (),
        reporter: Reporter | None = None,
        now_playing: NowPlayingState | None = None,
    ) -> None:
        self._renderer = renderer
        self._plugins = tuple(plugins)
        self._reporter = reporter or LogReporter()
        self.now_playing = now_playing or NowPlayingState()

    def run(self, item: MediaItem) -> int:
        render = compose(self._renderer, self._plugins)
        rendered = 0

        report(
            self._reporter,
            "pipeline_started",
            "Pipeline",
            f"Playing {item.title!r} on {self._renderer.label} renderer "
            f"with {len(self._plugins)} plugin(s)",
            title=item.title,
            renderer=self._renderer.label,
            plugins=[plugin.name for plugin in self._plugins],
        )

        self._renderer.start()
        try:
            # Streams are pulled fresh every run, never cached.
            for leaf in item.leaves():
                self.now_playing.set(
                    NowPlaying(
                        title=leaf.title,
                        source=leaf.source.id,
                        renderer=self._renderer.label,
                    )
                )
                for chunk in leaf.stream():
                    render.render(chunk.payload, chunk.metadata)
                    self.now_playing.advance()
                    rendered += 1
        finally:
            self._renderer.stop()

        report(
            self._reporter,
            "pipeline_finished",
            "Pipeline",
            f"Finished {item.title!r}: {rendered} chunk(s)",
            title=item.title,
            chunks=rendered,
        )
        return rendered
