"""
Ledger 서비스

EventStore 조회 + Projection 생성.
조회마다 전체 이벤트 재생 (캐시 없음).
"""

import logging
from datetime import datetime

from core.domain.events import Event, create_event
from core.domain.money import Amount
from core.projection import Dashboard, Journal
from core.storage import EventStore
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class LedgerService:
    """Ledger 서비스

    Args:
        store: EventStore 구현체 (SQLite / Memory)
    """

    def __init__(self, store: EventStore):
        self.store = store

    async def get_events(self, ledger_id: str) -> list[Event]:
        """이벤트 목록 (created_at 오름차순)

        Raises:
            LedgerNotFoundError: 이벤트가 없는 ledger
        """
        return await self.store.read(ledger_id)

    async def get_dashboard(self, ledger_id: str) -> Dashboard:
        events = await self.store.read(ledger_id)
        return Dashboard.from_events(events)

    async def get_journal(self, ledger_id: str) -> Journal:
        events = await self.store.read(ledger_id)
        return Journal.from_events(events)

    async def add_event(
        self,
        ledger_id: str,
        event_type: str,
        price: str,
        currency: str,
        identifier: str,
        amount: float = 1.0,
        created_at: datetime | None = None,
    ) -> Event:
        """이벤트 생성 후 저장

        Args:
            event_type: "buy" | "dividend" | "price"
            price: 가격 숫자 문자열 (예: "150.0")
            currency: 통화 코드

        Raises:
            MalformedAmountError: 가격 / 통화 형식 오류
            ValueError: 알 수 없는 event_type
        """
        parsed_price = Amount.parse(f"{price} {currency}")
        event = create_event(
            event_type,
            parsed_price,
            identifier,
            amount=amount,
            created_at=created_at or now_utc(),
        )

        await self.store.append(ledger_id, [event])

        logger.info(
            "이벤트 추가",
            extra={"ledger_id": ledger_id, "event_type": event.event_type},
        )

        return event
