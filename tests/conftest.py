"""
pytest 공통 fixture 정의

Money / Event / Projection 테스트용 고정 시각과 이벤트
"""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from core.config.loader import reset_settings
from core.domain.events import DividendPaid, PriceObtained, StocksBought


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def iphone_launched_at() -> datetime:
    """고정 시각 (아이폰 발표: 2007-01-09 09:42 UTC)"""
    return datetime(2007, 1, 9, 9, 42, tzinfo=timezone.utc)


@pytest.fixture
def december_second() -> datetime:
    """고정 시각 (2001-12-02 00:00 UTC)"""
    return datetime(2001, 12, 2, tzinfo=timezone.utc)


@pytest.fixture
def aapl_bought(iphone_launched_at: datetime) -> StocksBought:
    """AAPL 10주 150 USD 매수"""
    return StocksBought.create(10, "150.0 USD", "AAPL", created_at=iphone_launched_at)


@pytest.fixture
def aapl_price(iphone_launched_at: datetime) -> PriceObtained:
    """AAPL 170 USD 가격 관측"""
    return PriceObtained.create("170.0 USD", "AAPL", created_at=iphone_launched_at)


@pytest.fixture
def aapl_dividend(iphone_launched_at: datetime) -> DividendPaid:
    """AAPL 주당 0.5 USD 배당"""
    return DividendPaid.create("0.5 USD", "AAPL", created_at=iphone_launched_at)


@pytest.fixture
def isolated_settings(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """임시 DB 경로로 설정 격리

    Returns:
        DB 파일 경로
    """
    db_path = temp_dir / "bullboard.db"
    monkeypatch.setenv("BULLBOARD_HOME", str(temp_dir))
    monkeypatch.setenv("BULLBOARD_DB_PATH", str(db_path))
    monkeypatch.setenv("BULLBOARD_LEDGER_ID", "test-ledger")
    reset_settings()
    yield db_path
    reset_settings()
