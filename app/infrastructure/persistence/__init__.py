"""Persistence layer for the user room mapping document.

Provides a single-writer JSON document store:

- WriteQueue: FIFO serialization of read-modify-write critical sections
- JsonDocumentStore: whole-document reads, atomic write-temp-then-rename updates
- resolve_data_dir: once-per-process resolution of a writable data directory
- StoreError: raised for any I/O failure other than a missing file
"""

from infrastructure.persistence.errors import StoreError
from infrastructure.persistence.json_store import JsonDocumentStore
from infrastructure.persistence.paths import resolve_data_dir
from infrastructure.persistence.write_queue import WriteQueue

__all__ = [
    "JsonDocumentStore",
    "StoreError",
    "WriteQueue",
    "resolve_data_dir",
]
