"""
SQLite 어댑터

Ledger 이벤트 DB 연결 관리 (aiosqlite).
- 쓰기 연결: WAL 모드, 쓰기 트랜잭션은 BEGIN IMMEDIATE
- 읽기 연결: mode=ro URI (Web 조회용)

주의: 단일 프로세스 단일 writer 전제 (다중 프로세스 동시 쓰기 미지원)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Iterable

import aiosqlite

logger = logging.getLogger(__name__)

# 다른 연결이 잠금을 잡고 있을 때 대기 시간 (ms)
BUSY_TIMEOUT_MS = 30000

# 스키마 DDL (멱등)
SCHEMA_STATEMENTS = (
    # ledger_events: 이벤트 1건당 1행, seq는 같은 created_at 내 저장 순서
    """
    CREATE TABLE IF NOT EXISTS ledger_events (
        seq         INTEGER PRIMARY KEY AUTOINCREMENT,
        created_at  TEXT NOT NULL,
        ledger_id   TEXT NOT NULL,
        event_json  TEXT NOT NULL
    )
    """,
    # ledger별 시간순 조회
    """
    CREATE INDEX IF NOT EXISTS ix_ledger_events_ledger_ts
    ON ledger_events(ledger_id, created_at)
    """,
)


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성

    Args:
        db_path: DB 파일 경로 (상위 디렉토리 자동 생성)
        readonly: True면 mode=ro 로 열고 WAL 설정 생략

    Returns:
        aiosqlite 연결 객체
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if readonly:
        conn = await aiosqlite.connect(f"file:{path}?mode=ro", uri=True)
    else:
        conn = await aiosqlite.connect(str(path))
        await conn.execute("PRAGMA journal_mode=WAL")

    await conn.execute(f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}")

    logger.debug(
        "SQLite 연결 생성",
        extra={"db_path": str(path), "readonly": readonly},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    연결 1개를 감싸고 조회 / 트랜잭션 헬퍼 제공.
    연결 전 호출은 RuntimeError.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (Web 조회용)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        async with db.transaction() as conn:
            await conn.executemany("INSERT INTO ledger_events ...", rows)
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError(f"DB 연결 전입니다: {self.db_path}")
        return self._conn

    async def connect(self) -> None:
        """연결 생성 (이미 연결되어 있으면 무시)"""
        if self._conn is None:
            self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        await conn.close()
        logger.debug("SQLite 연결 종료", extra={"db_path": str(self.db_path)})

    # -------------------------------------------------------------------------
    # 실행 / 조회
    # -------------------------------------------------------------------------

    async def execute(self, sql: str, parameters: Iterable[Any] = ()) -> aiosqlite.Cursor:
        return await self._require_conn().execute(sql, tuple(parameters))

    async def executemany(
        self, sql: str, parameters: Iterable[Iterable[Any]]
    ) -> aiosqlite.Cursor:
        return await self._require_conn().executemany(sql, parameters)

    async def fetchone(self, sql: str, parameters: Iterable[Any] = ()) -> tuple[Any, ...] | None:
        async with self._require_conn().execute(sql, tuple(parameters)) as cursor:
            return await cursor.fetchone()

    async def fetchall(self, sql: str, parameters: Iterable[Any] = ()) -> list[tuple[Any, ...]]:
        async with self._require_conn().execute(sql, tuple(parameters)) as cursor:
            return list(await cursor.fetchall())

    async def commit(self) -> None:
        await self._require_conn().commit()

    async def rollback(self) -> None:
        await self._require_conn().rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """쓰기 트랜잭션

        BEGIN IMMEDIATE로 쓰기 잠금을 먼저 확보.
        블록 정상 종료 시 커밋, 예외 시 롤백 후 재전파.
        """
        conn = self._require_conn()
        if not conn.in_transaction:
            await conn.execute("BEGIN IMMEDIATE")

        try:
            yield conn
        except BaseException:
            await conn.rollback()
            raise
        await conn.commit()

    # -------------------------------------------------------------------------
    # 메타데이터
    # -------------------------------------------------------------------------

    async def table_exists(self, table_name: str) -> bool:
        row = await self.fetchone(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table_name,),
        )
        return row is not None

    async def get_table_info(self, table_name: str) -> list[dict[str, Any]]:
        """컬럼 정보 (PRAGMA table_info)"""
        rows = await self.fetchall(f"PRAGMA table_info({table_name})")
        keys = ("cid", "name", "type", "notnull", "default_value", "pk")
        return [
            {**dict(zip(keys, row)), "notnull": bool(row[3]), "pk": bool(row[5])}
            for row in rows
        ]

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 / 인덱스 생성, 멱등)

    Args:
        adapter: 연결된 SQLiteAdapter (쓰기 가능)
    """
    async with adapter.transaction() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)

    logger.info("스키마 초기화 완료", extra={"db_path": str(adapter.db_path)})
