from types import SimpleNamespace

from PIL import Image

from mapper.components.editor_state import EditorState
from mapper.events.bus import EVENT_EXPORT_COMPLETED, EVENT_EXPORT_FAILED, EventBus
from mapper.rendering.exporter import MapExporter
from mapper.systems.render import RenderSystem
from mapper.utils.world_state import require_component


def _listen(bus):
    events = []
    bus.subscribe(EVENT_EXPORT_COMPLETED, lambda sender, **kw: events.append(("ok", kw)))
    bus.subscribe(EVENT_EXPORT_FAILED, lambda sender, **kw: events.append(("failed", kw)))
    return events


def test_export_writes_png(tmp_path):
    bus = EventBus()
    events = _listen(bus)
    path = tmp_path / "screen.png"
    exporter = MapExporter(bus, path)
    assert exporter.export(Image.new("RGBA", (64, 32), (255, 255, 255, 255)))
    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (64, 32)
    assert events == [("ok", {"path": str(path)})]


def test_export_failure_is_reported_not_raised(tmp_path):
    bus = EventBus()
    events = _listen(bus)
    exporter = MapExporter(bus, tmp_path)  # a directory cannot be written as a file
    assert not exporter.export(Image.new("RGB", (4, 4)))
    assert [kind for kind, _ in events] == ["failed"]


def test_capture_failure_is_reported(tmp_path):
    bus = EventBus()
    events = _listen(bus)

    def capture():
        raise RuntimeError("no GL context")

    exporter = MapExporter(bus, tmp_path / "screen.png")
    assert not exporter.capture_and_export(capture)
    assert events[0][1]["error"] == "no GL context"
    assert not (tmp_path / "screen.png").exists()


def test_render_system_consumes_export_flag_once(editor, tmp_path):
    path = tmp_path / "screen.png"
    exporter = MapExporter(editor.bus, path)
    window = SimpleNamespace(width=64, height=32)
    render = RenderSystem(editor.world, window, editor.drag, exporter)
    captures = []

    def capture():
        captures.append(1)
        return Image.new("RGBA", (window.width, window.height))

    assert not render.export_if_requested(capture)
    require_component(editor.world, EditorState).export_requested = True
    assert render.export_if_requested(capture)
    assert not require_component(editor.world, EditorState).export_requested
    assert not render.export_if_requested(capture)
    assert captures == [1]
    assert path.exists()
