import os
import threading
from typing import Optional, TextIO
from duallog.models.severity import Severity, MESSAGE, ERROR
from duallog.sinks.console_sink import ConsoleSink
from duallog.utils.data_utils.format_utils import (
    SWITCH_MARKER,
    format_log_line,
    format_session_footer,
    format_session_header,
)
from duallog.utils.monitoring_utils.logging import get_logger

logger = get_logger("file-sink")


class FileSink:
    """
    Appends formatted lines to a text file.

    Closed --enable(path)--> Open --disable()--> Closed. Enabling while open
    closes the current file (switch marker and footer) before opening the new
    one. Console notifications and diagnostics are emitted only after the file
    lock is released.
    """

    def __init__(self, name: str, console: ConsoleSink) -> None:
        self.name = name
        self.console = console
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        self._path: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def path(self) -> Optional[str]:
        return self._path

    def enable(self, path) -> None:
        error: Optional[Exception] = None
        with self._lock:
            if self._file is not None:
                self._write_raw(SWITCH_MARKER + "\n" + format_session_footer())
                self._close_file()

            try:
                path = os.fspath(path)
                parent = os.path.dirname(path)
                if parent:
                    os.makedirs(parent, exist_ok=True)
                log_file = open(path, "a", encoding="utf-8")
            except (OSError, ValueError, TypeError) as e:
                error = e
            else:
                self._file = log_file
                self._path = path
                if not self._write_raw(format_session_header(self.name), flush=True):
                    self._close_file()
                    error = OSError(f"could not write session header to {path}")

        if error is None:
            self.console.write(MESSAGE, f"File logging enabled: {path}")
        else:
            logger.warning(f"Could not open log file {path!r}: {error}")
            self.console.write(ERROR, f"Failed to open log file: {path}")

    def disable(self) -> None:
        with self._lock:
            if self._file is None:
                return
            self._write_raw(format_session_footer())
            self._close_file()

        self.console.write(MESSAGE, "File logging disabled")

    def write(self, severity: Severity, message: str) -> None:
        with self._lock:
            if self._file is not None:
                line = format_log_line(severity.prefix, message, self.name)
                self._write_raw(line + "\n", flush=severity.force_flush)

    def flush(self) -> None:
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.flush()
            except (OSError, ValueError) as e:
                self._report_fault(e)

    def close(self) -> None:
        """Teardown: footer and close like disable(), without touching the console sink."""
        with self._lock:
            if self._file is None:
                return
            self._write_raw(format_session_footer())
            self._close_file()

    # Helpers below run with self._lock held and must not log through `logger`.

    def _write_raw(self, text: str, flush: bool = False) -> bool:
        try:
            self._file.write(text)
            if flush:
                self._file.flush()
        except (OSError, ValueError) as e:
            self._report_fault(e)
            return False
        return True

    def _close_file(self) -> None:
        log_file, self._file = self._file, None
        try:
            log_file.close()
        except (OSError, ValueError) as e:
            self._report_fault(e)
        self._path = None

    def _report_fault(self, error: Exception) -> None:
        self.console.report_fault(f"ERROR: Failed to write to log file: {error}")
