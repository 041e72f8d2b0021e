import re
from typing import Optional
from duallog.models.log_entry import LogEntry
from duallog.utils.data_utils.time_utils import current_timestamp, parse_timestamp

NAME_WIDTH = 15
PREFIX_WIDTH = 7
PAD_CHAR = "."

HEADER_RULE = "==================================="
SWITCH_MARKER = "=== Switching to new log file ==="

LOG_LINE_PATTERN = re.compile(
    r"^\[(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3})\] "
    r"\[(?P<name>[^\]]*)\] "
    r"\[(?P<prefix>[^\]]*)\] "
    r"(?P<message>.*)$",
    re.DOTALL,
)
HEADER_PATTERN = re.compile(r"^=== Log Started: (?P<timestamp>.+) ===$")
FOOTER_PATTERN = re.compile(r"^=== Log Ended: (?P<timestamp>.+) ===$")
LOGGER_NAME_PATTERN = re.compile(r"^Logger: (?P<name>.*)$")


def format_log_line(prefix: str, message: str, name: str, timestamp: Optional[str] = None) -> str:
    """
    Build `[timestamp] [name...........] [PREFIX.] message`.
    Name and prefix are left justified and dot padded, never truncated.
    The message is written as-is, embedded newlines included.
    """
    if timestamp is None:
        timestamp = current_timestamp()
    return (
        f"[{timestamp}] "
        f"[{name.ljust(NAME_WIDTH, PAD_CHAR)}] "
        f"[{prefix.ljust(PREFIX_WIDTH, PAD_CHAR)}] "
        f"{message}"
    )


def parse_log_line(line: str) -> Optional[LogEntry]:
    """Read a formatted line back into a LogEntry, or None if it is not a log line."""
    match = LOG_LINE_PATTERN.match(line.rstrip("\n"))
    if not match:
        return None
    timestamp = parse_timestamp(match.group("timestamp"))
    if timestamp is None:
        return None
    return LogEntry(
        timestamp=timestamp,
        name=_strip_padding(match.group("name"), NAME_WIDTH),
        prefix=_strip_padding(match.group("prefix"), PREFIX_WIDTH),
        message=match.group("message"),
    )


def _strip_padding(value: str, width: int) -> str:
    # Only the padded tail can be dots added by ljust; longer values were never padded.
    if len(value) > width:
        return value
    return value.rstrip(PAD_CHAR)


def format_session_header(name: str, timestamp: Optional[str] = None) -> str:
    if timestamp is None:
        timestamp = current_timestamp()
    return (
        f"=== Log Started: {timestamp} ===\n"
        f"Logger: {name}\n"
        f"{HEADER_RULE}\n"
    )


def format_session_footer(timestamp: Optional[str] = None) -> str:
    if timestamp is None:
        timestamp = current_timestamp()
    return f"=== Log Ended: {timestamp} ===\n\n"
