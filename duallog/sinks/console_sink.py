import sys
from typing import Optional, TextIO
from duallog.models.severity import Severity
from duallog.utils.data_utils.format_utils import format_log_line
from duallog.utils.monitoring_utils.color_strategy import TerminalColorizer, get_colorizer
from duallog.utils.sync_utils.lock_utils import ConsoleLock


class ConsoleSink:
    """Writes formatted lines to the console stream, one full line per lock hold."""

    def __init__(
        self,
        name: str,
        console_lock: ConsoleLock,
        colorizer: Optional[TerminalColorizer] = None,
        stream: Optional[TextIO] = None,
        fault_stream: Optional[TextIO] = None,
    ) -> None:
        self.name = name
        self.console_lock = console_lock
        self.stream = stream if stream is not None else sys.stdout
        self.fault_stream = fault_stream
        self.colorizer = colorizer if colorizer is not None else get_colorizer(self.stream)

    def write(self, severity: Severity, message: str) -> None:
        with self.console_lock:
            # Formatted under the lock so timestamps follow output order
            line = format_log_line(severity.prefix, message, self.name)
            try:
                self.colorizer.set_color(severity.color)
                self.stream.write(line + "\n")
            except (OSError, ValueError) as e:
                self.report_fault(f"ERROR: Failed to write to console: {e}")
            finally:
                self._reset_and_flush()

    def flush(self) -> None:
        with self.console_lock:
            try:
                self.stream.flush()
            except (OSError, ValueError) as e:
                self.report_fault(f"ERROR: Failed to flush console: {e}")

    def report_fault(self, text: str) -> None:
        """Raw diagnostic channel: never takes the console lock."""
        stream = self.fault_stream if self.fault_stream is not None else sys.stderr
        stream.write(text + "\n")
        stream.flush()

    def _reset_and_flush(self) -> None:
        # Reset before flushing so the reset sequence is not left in the buffer
        try:
            self.colorizer.reset()
            self.stream.flush()
        except (OSError, ValueError) as e:
            self.report_fault(f"ERROR: Failed to flush console: {e}")
