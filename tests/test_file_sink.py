import io
import threading
from duallog.models.severity import MESSAGE, ERROR
from duallog.sinks.console_sink import ConsoleSink
from duallog.sinks.file_sink import FileSink
from duallog.utils.data_utils.format_utils import SWITCH_MARKER
from duallog.utils.monitoring_utils.color_strategy import NullColorizer
from duallog.utils.sync_utils.lock_utils import ConsoleLock


class BrokenFile:
    def __init__(self):
        self.closed = False

    def write(self, text):
        raise OSError("disk full")

    def flush(self):
        raise OSError("disk full")

    def close(self):
        self.closed = True


def make_sink(console_lock=None):
    stream = io.StringIO()
    fault_stream = io.StringIO()
    console = ConsoleSink(
        "Net",
        console_lock or ConsoleLock.owned(),
        colorizer=NullColorizer(),
        stream=stream,
        fault_stream=fault_stream,
    )
    return FileSink("Net", console), stream, fault_stream


def test_enable_creates_directory_and_writes_header(tmp_path):
    sink, stream, _ = make_sink()
    path = tmp_path / "nested" / "dir" / "app.log"
    sink.enable(path)
    assert sink.is_open
    assert sink.path == str(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("=== Log Started: ")
    assert lines[1] == "Logger: Net"
    assert lines[2] == "==================================="
    assert f"[MESSAGE] File logging enabled: {path}" in stream.getvalue()
    sink.close()


def test_write_when_closed_is_ignored(tmp_path):
    sink, stream, _ = make_sink()
    sink.write(MESSAGE, "ignored")
    sink.flush()
    assert not sink.is_open
    assert stream.getvalue() == ""


def test_disable_when_closed_is_silent():
    sink, stream, fault_stream = make_sink()
    sink.disable()
    assert stream.getvalue() == ""
    assert fault_stream.getvalue() == ""


def test_reenable_switches_files(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    first.write_text("previous content\n", encoding="utf-8")

    sink, _, _ = make_sink()
    sink.enable(first)
    sink.write(MESSAGE, "line one")
    sink.enable(second)
    sink.write(MESSAGE, "line two")
    sink.disable()

    first_text = first.read_text(encoding="utf-8")
    assert first_text.startswith("previous content\n=== Log Started: ")
    assert "line one\n" + SWITCH_MARKER + "\n=== Log Ended: " in first_text
    assert "line two" not in first_text

    second_text = second.read_text(encoding="utf-8")
    assert second_text.startswith("=== Log Started: ")
    assert "line two\n=== Log Ended: " in second_text
    assert second_text.endswith(" ===\n\n")


def test_open_failure_reports_error_and_stays_closed(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    path = blocker / "app.log"

    sink, stream, _ = make_sink()
    sink.enable(path)

    assert not sink.is_open
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert f"[ERROR..] Failed to open log file: {path}" in lines[0]


def test_failed_switch_leaves_old_file_closed(tmp_path):
    first = tmp_path / "first.log"
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    sink, _, _ = make_sink()
    sink.enable(first)
    sink.enable(blocker / "app.log")

    assert not sink.is_open
    assert first.read_text(encoding="utf-8").endswith(" ===\n\n")


def test_write_fault_goes_to_fault_channel(tmp_path):
    sink, stream, fault_stream = make_sink()
    sink.enable(tmp_path / "app.log")
    real_file = sink._file
    sink._file = BrokenFile()

    sink.write(ERROR, "lost")

    assert "ERROR: Failed to write to log file: disk full" in fault_stream.getvalue()
    assert "lost" not in stream.getvalue()
    sink._file = real_file
    sink.close()


def test_write_fault_with_console_lock_held_does_not_deadlock(tmp_path):
    shared = threading.Lock()
    sink, _, fault_stream = make_sink(ConsoleLock.borrowed(shared))
    sink.enable(tmp_path / "app.log")
    real_file = sink._file
    sink._file = BrokenFile()

    with shared:
        sink.write(MESSAGE, "lost")

    assert "disk full" in fault_stream.getvalue()
    sink._file = real_file
    sink.close()


def test_close_writes_footer_without_notification(tmp_path):
    path = tmp_path / "app.log"
    sink, stream, _ = make_sink()
    sink.enable(path)
    sink.close()

    assert not sink.is_open
    assert "File logging disabled" not in stream.getvalue()
    assert path.read_text(encoding="utf-8").rstrip("\n").splitlines()[-1].startswith("=== Log Ended: ")


def test_invalid_path_reports_error_instead_of_raising(tmp_path):
    sink, stream, _ = make_sink()
    sink.enable(str(tmp_path / "bad\0name.log"))
    sink.enable(None)

    assert not sink.is_open
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert all("[ERROR..] Failed to open log file: " in line for line in lines)
    assert lines[1].endswith("Failed to open log file: None")
