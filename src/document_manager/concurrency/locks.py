import threading
from contextlib import contextmanager
from typing import Iterator

class ReadWriteLock:
    def __init__(self) -> None:
        self.reads = 0
        self.read_lock = threading.Lock()
        self.write_lock = threading.Lock()

    def acquire_read(self) -> None:
        with self.read_lock:
            self.reads += 1
            if self.reads == 1:
                self.write_lock.acquire()

    def release_read(self) -> None:
        with self.read_lock:
            self.reads -= 1
            if self.reads == 0:
                self.write_lock.release()

    def acquire_write(self) -> None:
        self.write_lock.acquire()

    def release_write(self) -> None:
        self.write_lock.release()

    @contextmanager
    def reading(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

class NoOpLock(ReadWriteLock):
    """Lock with the ReadWriteLock interface that never blocks, for single-threaded use."""

    def acquire_read(self) -> None:
        self.reads += 1

    def release_read(self) -> None:
        self.reads -= 1

    def acquire_write(self) -> None:
        pass

    def release_write(self) -> None:
        pass
