"""
SQLiteEventStore - SQLite 이벤트 저장소

이벤트 1건당 1행 (seq, created_at, ledger_id, event_json).
조회는 ledger_id + created_at 순, 같은 시각은 seq(저장 순서)로 정렬.
"""

import logging
import sqlite3
from typing import Sequence

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.domain.events import Event, event_from_json
from core.errors import LedgerNotFoundError, SchemaError, StorageError
from core.utils.timezone import to_sortable_iso

logger = logging.getLogger(__name__)


class SQLiteEventStore:
    """SQLite 이벤트 저장소

    저장소 엔진 오류는 StorageError로 감싸서 전달
    (aiosqlite / sqlite3 예외를 상위로 노출하지 않음).

    Args:
        db: SQLiteAdapter 인스턴스 (연결된 상태)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        store = SQLiteEventStore(db)
        await store.init()

        await store.append("main", [event])
        events = await store.read("main")
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def init(self) -> None:
        """스키마 생성 (멱등)

        Raises:
            SchemaError: 테이블 / 인덱스 생성 실패
        """
        try:
            await init_schema(self.db)
        except (sqlite3.Error, RuntimeError) as e:
            logger.error(
                "스키마 초기화 실패",
                extra={"db_path": str(self.db.db_path), "error": str(e)},
            )
            raise SchemaError(f"스키마 초기화 실패: {e}") from e

    async def append(self, ledger_id: str, events: Sequence[Event]) -> None:
        """이벤트 추가 (단일 트랜잭션, all-or-nothing)"""
        if not events:
            return

        rows = [
            (to_sortable_iso(event.created_at), ledger_id, event.to_json())
            for event in events
        ]

        try:
            async with self.db.transaction() as conn:
                await conn.executemany(
                    """
                    INSERT INTO ledger_events (created_at, ledger_id, event_json)
                    VALUES (?, ?, ?)
                    """,
                    rows,
                )
        except (sqlite3.Error, RuntimeError) as e:
            logger.error(
                "이벤트 저장 실패",
                extra={"ledger_id": ledger_id, "count": len(rows), "error": str(e)},
            )
            raise StorageError(f"이벤트 저장 실패: {e}") from e

        logger.debug(
            "이벤트 저장 완료",
            extra={"ledger_id": ledger_id, "count": len(rows)},
        )

    async def read(self, ledger_id: str) -> list[Event]:
        """Ledger 이벤트 조회 (created_at, seq 오름차순)

        Raises:
            LedgerNotFoundError: 이벤트가 없는 ledger
            CorruptEventError: payload 복원 실패
            StorageError: 조회 실패
        """
        try:
            rows = await self.db.fetchall(
                """
                SELECT event_json
                FROM ledger_events
                WHERE ledger_id = ?
                ORDER BY created_at ASC, seq ASC
                """,
                (ledger_id,),
            )
        except (sqlite3.Error, RuntimeError) as e:
            logger.error(
                "이벤트 조회 실패",
                extra={"ledger_id": ledger_id, "error": str(e)},
            )
            raise StorageError(f"이벤트 조회 실패: {e}") from e

        if not rows:
            raise LedgerNotFoundError(ledger_id)

        return [event_from_json(row[0]) for row in rows]

    async def ledger_ids(self) -> list[str]:
        """이벤트가 있는 ledger ID 목록"""
        try:
            rows = await self.db.fetchall(
                "SELECT DISTINCT ledger_id FROM ledger_events ORDER BY ledger_id"
            )
        except (sqlite3.Error, RuntimeError) as e:
            raise StorageError(f"Ledger 목록 조회 실패: {e}") from e

        return [row[0] for row in rows]

    async def count(self, ledger_id: str) -> int:
        """Ledger 이벤트 개수"""
        try:
            row = await self.db.fetchone(
                "SELECT COUNT(*) AS event_count FROM ledger_events WHERE ledger_id = ?",
                (ledger_id,),
            )
        except (sqlite3.Error, RuntimeError) as e:
            raise StorageError(f"이벤트 개수 조회 실패: {e}") from e

        return row[0] if row else 0
