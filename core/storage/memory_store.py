"""
MemoryEventStore - 메모리 이벤트 저장소

프로세스 재시작 시 데이터 유실 (테스트 / demo 용).
"""

import logging
import threading
from typing import Sequence

from core.domain.events import Event
from core.errors import LedgerNotFoundError
from core.storage.event_store import sort_by_created_at

logger = logging.getLogger(__name__)


class MemoryEventStore:
    """메모리 이벤트 저장소

    ledger_id → 이벤트 리스트 맵을 단일 Lock으로 보호.
    여러 스레드에서 동시에 append/read 해도 유실이나 부분 조회 없음.
    조회 결과는 스냅샷 복사본.
    """

    def __init__(self) -> None:
        self._events: dict[str, list[Event]] = {}
        self._lock = threading.Lock()

    async def init(self) -> None:
        """초기화 (메모리 저장소는 할 일 없음)"""
        return None

    async def append(self, ledger_id: str, events: Sequence[Event]) -> None:
        """이벤트 추가 (Lock 안에서 한 번에 extend)"""
        if not events:
            return

        with self._lock:
            self._events.setdefault(ledger_id, []).extend(events)

        logger.debug(
            "이벤트 저장 완료",
            extra={"ledger_id": ledger_id, "count": len(events)},
        )

    async def read(self, ledger_id: str) -> list[Event]:
        """Ledger 이벤트 조회 (created_at 오름차순)"""
        with self._lock:
            snapshot = list(self._events.get(ledger_id, []))

        if not snapshot:
            raise LedgerNotFoundError(ledger_id)

        return sort_by_created_at(snapshot)

    async def ledger_ids(self) -> list[str]:
        """이벤트가 있는 ledger ID 목록"""
        with self._lock:
            return sorted(self._events)

    async def count(self, ledger_id: str) -> int:
        """Ledger 이벤트 개수"""
        with self._lock:
            return len(self._events.get(ledger_id, []))
