from dataclasses import dataclass
from enum import IntFlag
from typing import Dict


class ColorFlag(IntFlag):
    """Foreground color bits. Values match the Windows console attribute bits."""
    NONE = 0
    RED = 0x0001
    GREEN = 0x0002
    BLUE = 0x0004
    INTENSITY = 0x0008

    YELLOW = RED | GREEN
    WHITE = RED | GREEN | BLUE


@dataclass(frozen=True)
class Severity:
    prefix: str
    color: ColorFlag
    force_flush: bool = False


MESSAGE = Severity("MESSAGE", ColorFlag.WHITE)
SUCCESS = Severity("SUCCESS", ColorFlag.GREEN | ColorFlag.INTENSITY)
WARNING = Severity("WARNING", ColorFlag.YELLOW)
ERROR = Severity("ERROR", ColorFlag.RED | ColorFlag.INTENSITY, force_flush=True)

SEVERITIES: Dict[str, Severity] = {
    s.prefix: s for s in (MESSAGE, SUCCESS, WARNING, ERROR)
}


def get_severity(prefix: str) -> Severity:
    severity = SEVERITIES.get(prefix.upper())
    if severity is None:
        raise ValueError(f"Unknown severity: {prefix}")
    return severity
