"""
Journal Projection

이벤트를 입력 순서 그대로 거래 일지 행으로 변환.
PriceObtained는 일지에 나타나지 않음.
"""

from dataclasses import dataclass
import datetime as dt
from enum import Enum
from typing import Iterable

from core.domain.events import DividendPaid, Event, StockIdentifier, StocksBought
from core.domain.money import Amount


class JournalEntryType(str, Enum):
    """일지 행 유형"""

    BUY = "Buy"
    DIVIDEND = "Dividend"


@dataclass(frozen=True)
class JournalEntry:
    """일지 행"""

    kind: JournalEntryType
    date: dt.date
    identifier: StockIdentifier
    amount: float
    price: Amount
    total: Amount


class Journal:
    """Journal Projection

    entries 순서 = 입력 이벤트 순서 = 표시 순서 (정렬 / 중복 제거 없음)
    """

    def __init__(self, entries: list[JournalEntry] | None = None):
        self.entries: list[JournalEntry] = entries or []

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "Journal":
        entries = []
        for event in events:
            entry = _to_entry(event)
            if entry is not None:
                entries.append(entry)
        return cls(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def _to_entry(event: Event) -> JournalEntry | None:
    if isinstance(event, StocksBought):
        return JournalEntry(
            kind=JournalEntryType.BUY,
            date=event.created_at.date(),
            identifier=event.identifier,
            amount=event.amount,
            price=event.price,
            total=event.price * event.amount,
        )

    if isinstance(event, DividendPaid):
        # 배당 행은 수량 1, 합계 = 가격
        return JournalEntry(
            kind=JournalEntryType.DIVIDEND,
            date=event.created_at.date(),
            identifier=event.identifier,
            amount=1.0,
            price=event.price,
            total=event.price,
        )

    return None
