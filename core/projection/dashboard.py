"""
Dashboard Projection

이벤트 목록을 왼쪽부터 fold하여 보유 종목 / 매수금액 / 평가금액 / 배당 계산.
같은 입력이면 항상 같은 결과 (I/O 없음, 숨은 상태 없음).
조회마다 전체 재생 (증분 갱신 없음).
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable

from core.domain.events import (
    DividendPaid,
    Event,
    EventTypes,
    PriceObtained,
    StockIdentifier,
    StocksBought,
)
from core.domain.money import Amount, Amounts


@dataclass(frozen=True)
class Asset:
    """보유 종목 스냅샷 (저장하지 않음, 조회마다 재구축)

    value가 None이면 아직 가격 관측이 없는 종목.
    """

    identifier: StockIdentifier
    amount: float
    dividends: Amount
    value: Amount | None = None


class Dashboard:
    """Dashboard Projection

    사용 예시:
    ```python
    events = await store.read(ledger_id)
    dashboard = Dashboard.from_events(events)
    dashboard.total_buying_price.sorted()
    ```
    """

    def __init__(self) -> None:
        self.number_of_positions: int = 0
        self.total_dividend: Amounts = Amounts.zero()
        self.total_buying_price: Amounts = Amounts.zero()
        self.total_value: Amounts = Amounts.zero()
        self._assets: dict[StockIdentifier, Asset] = {}

        # 이벤트 타입별 핸들러
        self._handlers: dict[str, Callable[[Event], None]] = {
            EventTypes.STOCKS_BOUGHT: self._handle_stocks_bought,
            EventTypes.PRICE_OBTAINED: self._handle_price_obtained,
            EventTypes.DIVIDEND_PAID: self._handle_dividend_paid,
        }

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "Dashboard":
        """이벤트 목록에서 Dashboard 생성

        Raises:
            CurrencyMismatchError: 같은 종목에 다른 통화 배당이 섞인 경우 등
        """
        dashboard = cls()
        for event in events:
            dashboard._apply(event)
        return dashboard

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def assets(self) -> list[Asset]:
        """보유 종목 목록 (처음 매수한 순서)"""
        return list(self._assets.values())

    def asset(self, identifier: StockIdentifier | str) -> Asset | None:
        return self._assets.get(StockIdentifier.of(identifier))

    def amount_of(self, identifier: StockIdentifier) -> float:
        """보유 수량 (미보유 시 0)"""
        asset = self._assets.get(identifier)
        return asset.amount if asset is not None else 0.0

    # -------------------------------------------------------------------------
    # Fold
    # -------------------------------------------------------------------------

    def _apply(self, event: Event) -> None:
        handler = self._handlers.get(event.event_type)
        if handler is not None:
            handler(event)

    def _handle_stocks_bought(self, event: StocksBought) -> None:
        self.total_buying_price.upsert(event.price * event.amount)

        current = self._assets.get(event.identifier)
        if current is None:
            self.number_of_positions += 1
            self._assets[event.identifier] = Asset(
                identifier=event.identifier,
                amount=event.amount,
                dividends=Amount.zero(event.currency),
            )
            return

        # 기존 value / dividends 유지
        self._assets[event.identifier] = replace(
            current, amount=current.amount + event.amount
        )

    def _handle_price_obtained(self, event: PriceObtained) -> None:
        current = self._assets.get(event.identifier)
        # 보유하지 않은 종목 가격은 무시
        if current is None:
            return

        value = event.price * current.amount
        self._assets[event.identifier] = replace(current, value=value)

        # 같은 종목 가격이 반복되면 누적됨 (최신 가격으로 교체하지 않음)
        self.total_value.upsert(value)

    def _handle_dividend_paid(self, event: DividendPaid) -> None:
        current = self._assets.get(event.identifier)
        dividend = event.price * self.amount_of(event.identifier)

        if current is not None:
            self._assets[event.identifier] = replace(
                current, dividends=current.dividends + dividend
            )

        self.total_dividend.upsert(dividend)
