import logging

from filelock import FileLock, Timeout

logger = logging.getLogger(__name__)


class WriteLock:
    """
    Cross-process file lock around inventory writes.
    Several console processes may share one database; only one writes at a time.
    """

    def __init__(self, path: str, timeout: float = 10):
        self.path = path
        self._lock = FileLock(path, timeout=timeout)

    def __enter__(self):
        try:
            self._lock.acquire()
        except Timeout:
            logger.error("Could not acquire write lock %s", self.path)
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self._lock.release()
