"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.storage import SQLiteEventStore


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_event_store() -> AsyncGenerator[SQLiteEventStore, None]:
    """조회용 EventStore (읽기 전용 연결)

    요청 종료 시 (라우트 예외 포함) 연결 종료.
    """
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield SQLiteEventStore(db)


async def get_event_store_write() -> AsyncGenerator[SQLiteEventStore, None]:
    """쓰기용 EventStore (이벤트 추가 시 사용)"""
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield SQLiteEventStore(db)
