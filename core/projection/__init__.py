"""
Projection 모듈

이벤트 목록을 fold하여 조회용 뷰 생성.
- Dashboard: 보유 종목, 매수금액, 평가금액, 배당
- Journal: 시간순 거래 일지

사용 예시:
```python
from core.projection import Dashboard, Journal

events = await store.read("main")
dashboard = Dashboard.from_events(events)
journal = Journal.from_events(events)
```
"""

from core.projection.dashboard import Asset, Dashboard
from core.projection.journal import Journal, JournalEntry, JournalEntryType

__all__ = [
    "Asset",
    "Dashboard",
    "Journal",
    "JournalEntry",
    "JournalEntryType",
]
