"""
SQLite 어댑터 테스트

쓰기 트랜잭션(BEGIN IMMEDIATE), 연결 전 호출, 읽기 전용 연결, ledger 스키마 테스트.
"""

from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import (
    BUSY_TIMEOUT_MS,
    SQLiteAdapter,
    create_connection,
    init_schema,
)


async def _journal_mode(adapter: SQLiteAdapter) -> str:
    row = await adapter.fetchone("PRAGMA journal_mode")
    return row[0].lower()


@pytest_asyncio.fixture
async def adapter(tmp_path: Path) -> SQLiteAdapter:
    """스키마 초기화된 쓰기 어댑터"""
    db = SQLiteAdapter(tmp_path / "ledger.db")
    await db.connect()
    await init_schema(db)
    yield db
    await db.close()


class TestCreateConnection:
    """create_connection 테스트"""

    @pytest.mark.asyncio
    async def test_busy_timeout_applied(self, tmp_path: Path) -> None:
        conn = await create_connection(tmp_path / "nested" / "ledger.db")
        try:
            async with conn.execute("PRAGMA busy_timeout") as cursor:
                row = await cursor.fetchone()
            assert row[0] == BUSY_TIMEOUT_MS
        finally:
            await conn.close()

    @pytest.mark.asyncio
    async def test_readonly_missing_file(self, tmp_path: Path) -> None:
        """읽기 전용은 파일을 새로 만들지 않음"""
        with pytest.raises(aiosqlite.OperationalError):
            await create_connection(tmp_path / "missing.db", readonly=True)

        assert not (tmp_path / "missing.db").exists()


class TestRequireConnection:
    """연결 전 / 종료 후 호출 테스트"""

    @pytest.mark.asyncio
    async def test_execute_before_connect(self, tmp_path: Path) -> None:
        db = SQLiteAdapter(tmp_path / "ledger.db")

        with pytest.raises(RuntimeError, match="DB 연결 전"):
            await db.execute("SELECT 1")

    @pytest.mark.asyncio
    async def test_transaction_before_connect(self, tmp_path: Path) -> None:
        db = SQLiteAdapter(tmp_path / "ledger.db")

        with pytest.raises(RuntimeError):
            async with db.transaction():
                pass

    @pytest.mark.asyncio
    async def test_fetch_after_close(self, tmp_path: Path) -> None:
        async with SQLiteAdapter(tmp_path / "ledger.db") as db:
            pass

        assert db.is_connected is False
        with pytest.raises(RuntimeError):
            await db.fetchall("SELECT 1")

    @pytest.mark.asyncio
    async def test_connect_and_close_idempotent(self, tmp_path: Path) -> None:
        db = SQLiteAdapter(tmp_path / "ledger.db")

        await db.connect()
        await db.connect()
        assert db.is_connected is True

        await db.close()
        await db.close()
        assert db.is_connected is False


class TestTransaction:
    """transaction() 테스트"""

    @pytest.mark.asyncio
    async def test_begins_before_first_statement(self, adapter: SQLiteAdapter) -> None:
        """블록 진입 즉시 트랜잭션 시작 (BEGIN IMMEDIATE)"""
        async with adapter.transaction() as conn:
            assert conn.in_transaction is True

        assert conn.in_transaction is False

    @pytest.mark.asyncio
    async def test_holds_write_lock(self, adapter: SQLiteAdapter) -> None:
        """다른 연결의 쓰기 트랜잭션은 잠금 대기 → 실패"""
        other = await aiosqlite.connect(str(adapter.db_path))
        await other.execute("PRAGMA busy_timeout=0")
        try:
            async with adapter.transaction():
                with pytest.raises(aiosqlite.OperationalError, match="locked"):
                    await other.execute("BEGIN IMMEDIATE")
        finally:
            await other.close()

    @pytest.mark.asyncio
    async def test_joins_open_transaction(self, adapter: SQLiteAdapter) -> None:
        """이미 트랜잭션 중이면 BEGIN 생략, 블록 종료 시 함께 커밋"""
        await adapter.execute(
            "INSERT INTO ledger_events (created_at, ledger_id, event_json) VALUES ('t1', 'a', '{}')"
        )
        assert adapter._require_conn().in_transaction is True

        async with adapter.transaction() as conn:
            await conn.execute(
                "INSERT INTO ledger_events (created_at, ledger_id, event_json) VALUES ('t2', 'a', '{}')"
            )

        rows = await adapter.fetchall("SELECT created_at FROM ledger_events ORDER BY seq")
        assert [r[0] for r in rows] == ["t1", "t2"]
        assert adapter._require_conn().in_transaction is False

    @pytest.mark.asyncio
    async def test_rollback_and_reraise(self, adapter: SQLiteAdapter) -> None:
        with pytest.raises(ValueError):
            async with adapter.transaction() as conn:
                await conn.execute(
                    "INSERT INTO ledger_events (created_at, ledger_id, event_json) VALUES ('t', 'a', '{}')"
                )
                raise ValueError("중단")

        assert await adapter.fetchall("SELECT seq FROM ledger_events") == []
        assert adapter._require_conn().in_transaction is False


class TestReadonly:
    """읽기 전용 연결 테스트"""

    @pytest.mark.asyncio
    async def test_writable_uses_wal(self, adapter: SQLiteAdapter) -> None:
        assert await _journal_mode(adapter) == "wal"

    @pytest.mark.asyncio
    async def test_readonly_skips_wal(self, tmp_path: Path) -> None:
        """읽기 전용 연결은 journal_mode를 바꾸지 않음"""
        db_path = tmp_path / "plain.db"
        conn = await aiosqlite.connect(str(db_path))
        await conn.execute("CREATE TABLE t (id INTEGER)")
        await conn.commit()
        await conn.close()

        async with SQLiteAdapter(db_path, readonly=True) as db:
            assert await _journal_mode(db) == "delete"

    @pytest.mark.asyncio
    async def test_readonly_rejects_write(self, adapter: SQLiteAdapter) -> None:
        async with SQLiteAdapter(adapter.db_path, readonly=True) as db:
            with pytest.raises(aiosqlite.OperationalError):
                await db.execute(
                    "INSERT INTO ledger_events (created_at, ledger_id, event_json) VALUES ('t', 'l', '{}')"
                )


class TestInitSchema:
    """init_schema 테스트"""

    @pytest.mark.asyncio
    async def test_idempotent(self, adapter: SQLiteAdapter) -> None:
        await init_schema(adapter)

        assert await adapter.table_exists("ledger_events") is True

    @pytest.mark.asyncio
    async def test_ledger_events_columns(self, adapter: SQLiteAdapter) -> None:
        columns = {c["name"]: c for c in await adapter.get_table_info("ledger_events")}

        assert list(columns) == ["seq", "created_at", "ledger_id", "event_json"]
        assert columns["seq"]["pk"] is True
        assert all(columns[name]["notnull"] is True for name in ("created_at", "ledger_id", "event_json"))

    @pytest.mark.asyncio
    async def test_ledger_index(self, adapter: SQLiteAdapter) -> None:
        """ledger + 시간 조회 인덱스"""
        row = await adapter.fetchone(
            "SELECT name FROM sqlite_master WHERE type='index' AND name=?",
            ("ix_ledger_events_ledger_ts",),
        )

        assert row is not None
