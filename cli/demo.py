"""
데모 데이터

저장소 없이 고정 이벤트로 Dashboard 생성 (python -m cli demo).
"""

from datetime import datetime, timezone

from core.domain.events import Event, PriceObtained, StocksBought
from core.projection import Dashboard

# 아이폰 발표 시각
IPHONE_LAUNCHED_AT = datetime(2007, 1, 9, 9, 42, tzinfo=timezone.utc)


def demo_events() -> list[Event]:
    """데모용 이벤트 목록 (AAPL / ASR.AS / MSFT)"""
    jan_first = datetime(2020, 1, 1, tzinfo=timezone.utc)
    feb_first = datetime(2020, 2, 1, tzinfo=timezone.utc)

    return [
        StocksBought.create(10, "150.0 USD", "AAPL", created_at=IPHONE_LAUNCHED_AT),
        PriceObtained.create("170.0 USD", "AAPL", created_at=jan_first),
        StocksBought.create(5, "160.0 USD", "AAPL", created_at=IPHONE_LAUNCHED_AT),
        PriceObtained.create("160.0 USD", "AAPL", created_at=feb_first),
        StocksBought.create(4, "13.37 EUR", "ASR.AS", created_at=IPHONE_LAUNCHED_AT),
        PriceObtained.create("14.20 EUR", "ASR.AS", created_at=feb_first),
        StocksBought.create(8, "100.0 USD", "MSFT", created_at=IPHONE_LAUNCHED_AT),
        PriceObtained.create("110.0 USD", "MSFT", created_at=feb_first),
    ]


def demo() -> Dashboard:
    """데모 Dashboard (입력 순서대로 fold)"""
    return Dashboard.from_events(demo_events())
