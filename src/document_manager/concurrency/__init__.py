# Concurrency package

from .locks import ReadWriteLock, NoOpLock

__all__ = [
    "ReadWriteLock",
    "NoOpLock"
]
