import pytest

from mediasuite.errors import RendererStateError
from mediasuite.rendering.plugins import SubtitlePlugin, WatermarkPlugin, compose
from mediasuite.rendering.renderers import (
    HardwareRenderer,
    RendererState,
    SoftwareRenderer,
)


class _OrderReporter:
    def __init__(self, log):
        self.log = log

    def emit(self, event):
        if event.kind == "plugin":
            self.log.append(event.data["plugin"])


@pytest.mark.parametrize("renderer_cls,label", [(SoftwareRenderer, "Software"), (HardwareRenderer, "Hardware")])
def test_renderer_lifecycle(reporter, renderer_cls, label):
    renderer = renderer_cls(reporter=reporter)
    assert renderer.state is RendererState.IDLE

    renderer.start()
    renderer.render(b"12345", {"k": "v"})
    renderer.stop()

    assert renderer.state is RendererState.STOPPED
    assert renderer.chunks_rendered == 1
    assert renderer.bytes_rendered == 5
    assert [e.kind for e in reporter.events] == ["renderer_started", "render", "renderer_stopped"]
    render_event = reporter.of_kind("render")[0]
    assert render_event.data == {"renderer": label, "size": 5, "metadata": {"k": "v"}}
    assert f"{label}Renderer" in render_event.message


def test_start_stop_without_render(reporter):
    renderer = SoftwareRenderer(reporter=reporter)
    renderer.start()
    renderer.stop()
    assert renderer.chunks_rendered == 0


def test_render_before_start_is_rejected(reporter):
    renderer = SoftwareRenderer(reporter=reporter)
    with pytest.raises(RendererStateError):
        renderer.render(b"x", {})
    assert reporter.events == []


@pytest.mark.parametrize("calls", [["start", "start"], ["stop"], ["start", "stop", "stop"], ["start", "stop", "start"]])
def test_lifecycle_misuse_is_rejected(reporter, calls):
    renderer = HardwareRenderer(reporter=reporter)
    *valid, invalid = calls
    for name in valid:
        getattr(renderer, name)()
    with pytest.raises(RendererStateError):
        getattr(renderer, invalid)()


def test_render_after_stop_is_rejected(reporter):
    renderer = SoftwareRenderer(reporter=reporter)
    renderer.start()
    renderer.stop()
    with pytest.raises(RendererStateError) as exc_info:
        renderer.render(b"x", {})
    assert "state=stopped" in str(exc_info.value)


def test_render_event_snapshots_metadata(reporter):
    renderer = SoftwareRenderer(reporter=reporter)
    metadata = {"a": "1"}
    renderer.start()
    renderer.render(b"", metadata)
    metadata["a"] = "2"
    assert reporter.of_kind("render")[0].data["metadata"] == {"a": "1"}


def test_watermark_sets_metadata_then_delegates(reporter, recording_render):
    render = WatermarkPlugin("W", reporter=reporter).wrap(recording_render)
    metadata = {"source": "f"}

    render.render(b"abc", metadata)

    assert metadata == {"source": "f", "watermark": "W"}
    assert recording_render.calls == [(b"abc", {"source": "f", "watermark": "W"})]
    event = reporter.of_kind("plugin")[0]
    assert event.data == {"plugin": "watermark", "value": "W"}
    assert event.message == "[Plugin] Watermark: W"


def test_wrap_does_not_mutate_inner(reporter, recording_render):
    plugin = WatermarkPlugin("W", reporter=reporter)
    wrapped = plugin.wrap(recording_render)
    assert wrapped is not recording_render
    recording_render.render(b"x", {})
    assert recording_render.calls == [(b"x", {})]
    assert reporter.events == []


def test_subtitle_cycles_through_lines(reporter, recording_render):
    lines = ["Hello!", "Enjoy the show!", "Bye"]
    render = SubtitlePlugin(lines, reporter=reporter).wrap(recording_render)

    for i in range(7):
        render.render(bytes([i]), {})

    emitted = [e.data["value"] for e in reporter.of_kind("plugin")]
    assert emitted == [lines[i % len(lines)] for i in range(7)]
    assert len(recording_render.calls) == 7


def test_subtitle_requires_lines():
    with pytest.raises(ValueError):
        SubtitlePlugin([])


def test_compose_first_plugin_runs_first(make_render):
    log = []
    base = make_render(log)
    watermark = WatermarkPlugin("W", reporter=_OrderReporter(log))
    subtitle = SubtitlePlugin(["s"], reporter=_OrderReporter(log))

    compose(base, [subtitle, watermark]).render(b"x", {})

    assert log == ["subtitle", "watermark", "base"]


def test_compose_equals_nested_wrap(make_render):
    log_a, log_b = [], []
    base_a, base_b = make_render(log_a), make_render(log_b)
    p1 = WatermarkPlugin("W", reporter=_OrderReporter(log_a))
    p2 = SubtitlePlugin(["s"], reporter=_OrderReporter(log_a))
    q1 = WatermarkPlugin("W", reporter=_OrderReporter(log_b))
    q2 = SubtitlePlugin(["s"], reporter=_OrderReporter(log_b))

    compose(base_a, [p1, p2]).render(b"x", {})
    q1.wrap(q2.wrap(base_b)).render(b"x", {})

    assert log_a == log_b == ["watermark", "subtitle", "base"]


def test_compose_without_plugins_returns_base(recording_render):
    assert compose(recording_render, []) is recording_render


def test_plugin_order_changes_only_emission_order(make_render):
    results = []
    for order in (("watermark", "subtitle"), ("subtitle", "watermark")):
        log = []
        base = make_render(log)
        plugins = {
            "watermark": WatermarkPlugin("W", reporter=_OrderReporter(log)),
            "subtitle": SubtitlePlugin(["line"], reporter=_OrderReporter(log)),
        }
        metadata = {"segment": "HLS-0"}
        compose(base, [plugins[name] for name in order]).render(b"data", metadata)
        results.append((log, metadata, base.calls))

    (log_1, meta_1, calls_1), (log_2, meta_2, calls_2) = results
    assert log_1 != log_2
    assert meta_1 == meta_2 == {"segment": "HLS-0", "watermark": "W"}
    assert calls_1 == calls_2 == [(b"data", {"segment": "HLS-0", "watermark": "W"})]


def test_plugin_base_requires_hook():
    from mediasuite.rendering.plugins import _HookPlugin

    class Incomplete(_HookPlugin):
        name = "incomplete"

    with pytest.raises(TypeError):
        Incomplete()
