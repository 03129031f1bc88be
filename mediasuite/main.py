from __future__ import annotations

from loguru import logger

from mediasuite.logconfig import configure_logging
from mediasuite.rendering.plugins import SubtitlePlugin, WatermarkPlugin
from mediasuite.rendering.renderers import HardwareRenderer, SoftwareRenderer
from mediasuite.reporting import LogReporter, Reporter
from mediasuite.settings import Settings
from mediasuite.streaming.pipeline import Pipeline
from mediasuite.streaming.playlist import MediaFileItem, Playlist
from mediasuite.streaming.sources import FetchSource, FileSource, SegmentListSource


def build_playlist(settings: Settings, reporter: Reporter) -> Playlist:
    remote_payload = settings.remote_payload.encode()

    local = FileSource(
        settings.demo_file, chunk_size=settings.file_chunk_size, reporter=reporter
    )
    hls = SegmentListSource(segment.encode() for segment in settings.hls_segments)
    remote = FetchSource(lambda: remote_payload, chunk_size=settings.fetch_chunk_size)

    playlist = Playlist("My Playlist")
    playlist.add(MediaFileItem(local, "Local File"))
    playlist.add(MediaFileItem(hls, "HLS Stream"))
    playlist.add(MediaFileItem(remote, "Remote API"))
    return playlist


def run_demo(settings: Settings, reporter: Reporter | None = None) -> None:
    reporter = reporter or LogReporter()
    logger.info("=== Modular Media Streaming Suite Demo ===")

    playlist = build_playlist(settings, reporter)

    plugin_settings = settings.plugins()
    watermark = WatermarkPlugin(plugin_settings.watermark_text, reporter=reporter)
    subtitles = SubtitlePlugin(plugin_settings.subtitle_lines, reporter=reporter)

    Pipeline(
        SoftwareRenderer(reporter=reporter),
        plugins=[subtitles, watermark],
        reporter=reporter,
    ).run(playlist)

    logger.info("=== Switching Renderer to Hardware ===")
    Pipeline(HardwareRenderer(reporter=reporter), reporter=reporter).run(playlist)

    logger.info("=== Demo Complete ===")


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level, settings.log_file)
    run_demo(settings)


if __name__ == "__main__":
    main()
