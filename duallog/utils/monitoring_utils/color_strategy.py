from abc import ABC, abstractmethod
from typing import TextIO
from humanfriendly.compat import on_windows
from humanfriendly.terminal import (
    ANSI_RESET,
    ansi_style,
    connected_to_terminal,
    enable_ansi_support,
)
from duallog.models.severity import ColorFlag
from duallog.utils.monitoring_utils.logging import get_logger

logger = get_logger("color-strategy")

# Color bit combination to ANSI color name
ANSI_COLOR_NAMES = {
    ColorFlag.RED: "red",
    ColorFlag.GREEN: "green",
    ColorFlag.BLUE: "blue",
    ColorFlag.YELLOW: "yellow",
    ColorFlag.WHITE: "white",
}

STD_OUTPUT_HANDLE = -11


def ansi_sequence(color: int) -> str:
    """
    Map color bits to an SGR sequence.
    - red, green, blue, yellow (red+green) and white (red+green+blue) are recognized
    - INTENSITY selects the bright variant (90-97 instead of 30-37)
    - any other combination maps to an empty sequence
    """
    color = ColorFlag(color)
    name = ANSI_COLOR_NAMES.get(color & ColorFlag.WHITE)
    if name is None:
        return ""
    return ansi_style(color=name, bright=bool(color & ColorFlag.INTENSITY))


class TerminalColorizer(ABC):
    @property
    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def set_color(self, color: int) -> None:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass


class NullColorizer(TerminalColorizer):
    """Plain text output, used when the stream is not a terminal."""

    @property
    def is_enabled(self) -> bool:
        return False

    def set_color(self, color: int) -> None:
        pass

    def reset(self) -> None:
        pass


class AnsiColorizer(TerminalColorizer):
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    @property
    def is_enabled(self) -> bool:
        return True

    def set_color(self, color: int) -> None:
        sequence = ansi_sequence(color)
        if sequence:
            self.stream.write(sequence)

    def reset(self) -> None:
        self.stream.write(ANSI_RESET)


class WindowsConsoleColorizer(TerminalColorizer):
    """
    Colors through the native console API (SetConsoleTextAttribute).
    reset() restores `default_attribute`, which is white unless the caller
    knows the console's real default.
    """

    def __init__(self, kernel32=None, default_attribute: int = ColorFlag.WHITE) -> None:
        if kernel32 is None:
            import ctypes
            kernel32 = ctypes.windll.kernel32
        self.kernel32 = kernel32
        self.default_attribute = int(default_attribute)
        self.handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        if self.handle in (None, 0, -1):
            logger.debug("No usable console handle, native colors disabled")
            self.handle = None

    @property
    def is_enabled(self) -> bool:
        return self.handle is not None

    def set_color(self, color: int) -> None:
        if self.handle is not None:
            self.kernel32.SetConsoleTextAttribute(self.handle, int(color))

    def reset(self) -> None:
        self.set_color(self.default_attribute)


def get_colorizer(stream: TextIO, mode: str = "auto") -> TerminalColorizer:
    """Pick the color backend for `stream`: 'auto' detects, 'always' forces ANSI, 'never' disables."""
    strategies = {
        "auto": _detect_colorizer,
        "always": AnsiColorizer,
        "never": lambda _stream: NullColorizer(),
    }

    strategy = strategies.get(mode)
    if not strategy:
        raise ValueError(f"No colorizer strategy found for mode: {mode}")

    colorizer = strategy(stream)
    logger.debug(f"Color mode: {mode}, selected colorizer: {type(colorizer).__name__}")
    return colorizer


def _detect_colorizer(stream: TextIO) -> TerminalColorizer:
    if not connected_to_terminal(stream):
        return NullColorizer()
    if on_windows():
        if enable_ansi_support():
            return AnsiColorizer(stream)
        return WindowsConsoleColorizer()
    return AnsiColorizer(stream)
