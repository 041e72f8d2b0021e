from dataclasses import dataclass, field, asdict
from typing import Optional, List
from datetime import datetime
from duallog.utils.data_utils.time_utils import format_timestamp


@dataclass
class LogEntry:
    timestamp: datetime
    name: str
    prefix: str
    message: str

    def to_dict(self):
        d = asdict(self)
        d["timestamp"] = format_timestamp(self.timestamp)
        return d


@dataclass
class LogSession:
    name: Optional[str] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    switched: bool = False  # closed by a re-enable rather than a disable
    entries: List[LogEntry] = field(default_factory=list)

    @property
    def is_closed(self) -> bool:
        return self.ended_at is not None

    def to_dict(self):
        return {
            "name": self.name,
            "started_at": format_timestamp(self.started_at) if self.started_at else None,
            "ended_at": format_timestamp(self.ended_at) if self.ended_at else None,
            "switched": self.switched,
            "entries": [entry.to_dict() for entry in self.entries],
        }
