"""Engine components orchestrating fetch → scan → cache."""

from .cache import ReadWriteLock, SnapshotCache
from .fetcher import FetchRequest, Fetcher, build_http_client
from .scanner import MarkerScanner

__all__ = [
    "FetchRequest",
    "Fetcher",
    "MarkerScanner",
    "ReadWriteLock",
    "SnapshotCache",
    "build_http_client",
]
