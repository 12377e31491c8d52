"""
스토리지 모듈

Ledger 이벤트 저장소 인터페이스와 Memory / SQLite 구현체 제공
"""

from core.storage.event_store import EventStore
from core.storage.memory_store import MemoryEventStore
from core.storage.sqlite_store import SQLiteEventStore

__all__ = [
    "EventStore",
    "MemoryEventStore",
    "SQLiteEventStore",
]
