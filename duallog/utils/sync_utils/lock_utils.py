import threading
from enum import Enum


class LockOwnership(Enum):
    OWNED = "owned"
    BORROWED = "borrowed"


class ConsoleLock:
    """
    Lock serializing console lines.
    An OWNED lock belongs to a single logger. A BORROWED lock is supplied by the
    caller and shared between loggers; the caller keeps it alive at least as
    long as every logger using it.
    """

    def __init__(self, lock, ownership: LockOwnership) -> None:
        if not (callable(getattr(lock, "acquire", None)) and callable(getattr(lock, "release", None))):
            raise TypeError(f"Console lock must provide acquire() and release(), got {type(lock).__name__}")
        self._lock = lock
        self.ownership = ownership

    @classmethod
    def owned(cls) -> "ConsoleLock":
        return cls(threading.Lock(), LockOwnership.OWNED)

    @classmethod
    def borrowed(cls, lock) -> "ConsoleLock":
        return cls(lock, LockOwnership.BORROWED)

    @property
    def is_shared(self) -> bool:
        return self.ownership is LockOwnership.BORROWED

    @property
    def lock(self):
        return self._lock

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._lock.release()
        return False


def resolve_console_lock(console_lock=None) -> ConsoleLock:
    """None -> a fresh owned lock; a ConsoleLock as-is; anything else is borrowed."""
    if console_lock is None:
        return ConsoleLock.owned()
    if isinstance(console_lock, ConsoleLock):
        return console_lock
    return ConsoleLock.borrowed(console_lock)
