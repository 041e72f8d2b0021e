# log_repository.py
import os
from typing import List, Optional

from duallog.models.log_entry import LogEntry, LogSession
from duallog.utils.data_utils.format_utils import (
    FOOTER_PATTERN,
    HEADER_PATTERN,
    HEADER_RULE,
    LOGGER_NAME_PATTERN,
    SWITCH_MARKER,
    parse_log_line,
)
from duallog.utils.data_utils.time_utils import parse_timestamp
from duallog.utils.monitoring_utils.logging import get_logger

logger = get_logger("log-repo")


def read_sessions(path: str) -> List[LogSession]:
    """
    Read a file written by the file sink, grouped into sessions.
    Lines that do not start a new entry are continuation lines of a
    multi-line message and are appended to the previous entry.
    """
    if not os.path.exists(path):
        logger.debug(f"Log file not found: {path}")
        return []

    sessions: List[LogSession] = []
    current: Optional[LogSession] = None
    last_entry: Optional[LogEntry] = None

    with open(path, "r", encoding="utf-8") as log_file:
        for raw_line in log_file:
            line = raw_line.rstrip("\n")

            header = HEADER_PATTERN.match(line)
            if header:
                current = LogSession(started_at=parse_timestamp(header.group("timestamp")))
                sessions.append(current)
                last_entry = None
                continue

            if current is None:
                # Content before any header, keep it in an anonymous session
                current = LogSession()
                sessions.append(current)

            if line == SWITCH_MARKER:
                current.switched = True
                continue

            footer = FOOTER_PATTERN.match(line)
            if footer:
                current.ended_at = parse_timestamp(footer.group("timestamp"))
                last_entry = None
                continue

            name = LOGGER_NAME_PATTERN.match(line)
            if name and current.name is None and not current.entries:
                current.name = name.group("name")
                continue

            if line == HEADER_RULE and not current.entries:
                continue

            entry = parse_log_line(line)
            if entry is not None:
                current.entries.append(entry)
                last_entry = entry
            elif last_entry is not None:
                last_entry.message += "\n" + line

    return sessions


def read_log_entries(path: str) -> List[LogEntry]:
    return [entry for session in read_sessions(path) for entry in session.entries]
