import os
import sys
from datetime import datetime
from typing import Optional, TextIO
from duallog.models.severity import Severity, MESSAGE, SUCCESS, WARNING, ERROR
from duallog.sinks.console_sink import ConsoleSink
from duallog.sinks.file_sink import FileSink
from duallog.utils.config_utils.config_loader import LoggerConfig, load_logger_config
from duallog.utils.monitoring_utils.color_strategy import TerminalColorizer, get_colorizer
from duallog.utils.monitoring_utils.logging import get_logger
from duallog.utils.sync_utils.lock_utils import ConsoleLock, resolve_console_lock

logger = get_logger("logger")


class Logger:
    """
    Thread-safe logger writing every line to the console and, once enabled, to a file.

    Pass `console_lock` (a threading.Lock or a ConsoleLock) to share console
    serialization with other loggers; the lock must outlive this logger.
    Logging calls never raise: file problems are reported on the console.
    """

    def __init__(
        self,
        name: str,
        console_lock=None,
        *,
        stream: Optional[TextIO] = None,
        colorizer: Optional[TerminalColorizer] = None,
        fault_stream: Optional[TextIO] = None,
    ) -> None:
        self._name = name
        self._console_lock: ConsoleLock = resolve_console_lock(console_lock)
        self._console = ConsoleSink(
            name,
            self._console_lock,
            colorizer=colorizer,
            stream=stream,
            fault_stream=fault_stream,
        )
        self._file = FileSink(name, self._console)
        logger.debug(
            f"Created logger '{name}' ({self._console_lock.ownership.value} console lock, "
            f"colorizer {type(self._console.colorizer).__name__})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def console_lock(self) -> ConsoleLock:
        return self._console_lock

    @property
    def colors_enabled(self) -> bool:
        return self._console.colorizer.is_enabled

    @property
    def file_logging_enabled(self) -> bool:
        return self._file.is_open

    @property
    def log_file_path(self) -> Optional[str]:
        return self._file.path

    # -------------------------------File logging-------------------------------
    def enable_file_logging(self, file_path) -> None:
        self._file.enable(file_path)

    def disable_file_logging(self) -> None:
        self._file.disable()

    # -------------------------------Severity methods-------------------------------
    def log_message(self, message: str) -> None:
        self._log(MESSAGE, message)

    def log_success(self, message: str) -> None:
        self._log(SUCCESS, message)

    def log_warning(self, message: str) -> None:
        self._log(WARNING, message)

    def log_error(self, message: str) -> None:
        self._log(ERROR, message)
        # Flush both sinks again, one lock at a time
        self._console.flush()
        self._file.flush()

    def _log(self, severity: Severity, message: str) -> None:
        message = str(message)
        self._console.write(severity, message)
        self._file.write(severity, message)

    # -------------------------------Teardown-------------------------------
    def close(self) -> None:
        """Close the log file (footer written) without console notification."""
        self._file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __del__(self):
        file_sink = getattr(self, "_file", None)
        if file_sink is not None:
            file_sink.close()

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, file={self._file.path!r})"


def create_logger(name: str, console_lock=None, config: Optional[LoggerConfig] = None) -> Logger:
    """
    Build a Logger from LoggerConfig (read from the environment when not given).
    With a log directory configured, file logging starts at
    <log_dir>/<name>_<YYYY-MM-DD>.log.
    """
    if config is None:
        config = load_logger_config()

    stream = sys.stdout
    colorizer = get_colorizer(stream, config.color_mode)
    dual_logger = Logger(name, console_lock, stream=stream, colorizer=colorizer)

    if config.log_dir:
        log_file = os.path.join(config.log_dir, f"{name}_{datetime.now().strftime('%Y-%m-%d')}.log")
        dual_logger.enable_file_logging(log_file)

    return dual_logger
