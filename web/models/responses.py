"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 정밀도 보존을 위해 문자열로 반환.
"""

import datetime as dt

from pydantic import BaseModel, Field

from core.domain.events import Event
from core.domain.money import Amount, Amounts
from core.projection import Asset, Dashboard, Journal, JournalEntry


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    ledger_id: str = Field(..., description="기본 ledger ID")
    version: str = Field(..., description="API 버전")


class AmountResponse(BaseModel):
    """금액 응답"""

    num: str = Field(..., description="금액 (Decimal 문자열)")
    currency: str | None = Field(default=None, description="통화 코드 (None이면 통화 미정)")
    display: str = Field(..., description="표시 문자열 (예: 150.00 USD)")

    @classmethod
    def from_amount(cls, amount: Amount) -> "AmountResponse":
        return cls(num=str(amount.num), currency=amount.currency, display=str(amount))

    @classmethod
    def from_amounts(cls, amounts: Amounts) -> list["AmountResponse"]:
        return [cls.from_amount(amount) for amount in amounts.sorted()]


class AssetResponse(BaseModel):
    """보유 종목 응답"""

    identifier: str = Field(..., description="종목 티커")
    amount: float = Field(..., description="보유 수량")
    dividends: AmountResponse = Field(..., description="누적 배당")
    value: AmountResponse | None = Field(default=None, description="평가금액 (가격 관측 전 None)")

    @classmethod
    def from_asset(cls, asset: Asset) -> "AssetResponse":
        return cls(
            identifier=str(asset.identifier),
            amount=asset.amount,
            dividends=AmountResponse.from_amount(asset.dividends),
            value=AmountResponse.from_amount(asset.value) if asset.value is not None else None,
        )


class DashboardResponse(BaseModel):
    """대시보드 응답"""

    ledger_id: str = Field(..., description="Ledger ID")
    number_of_positions: int = Field(..., description="보유 종목 수")
    total_buying_price: list[AmountResponse] = Field(..., description="통화별 총 매수금액")
    total_value: list[AmountResponse] = Field(..., description="통화별 총 평가금액")
    total_dividend: list[AmountResponse] = Field(..., description="통화별 총 배당")
    assets: list[AssetResponse] = Field(default_factory=list, description="보유 종목")

    @classmethod
    def from_dashboard(cls, ledger_id: str, dashboard: Dashboard) -> "DashboardResponse":
        return cls(
            ledger_id=ledger_id,
            number_of_positions=dashboard.number_of_positions,
            total_buying_price=AmountResponse.from_amounts(dashboard.total_buying_price),
            total_value=AmountResponse.from_amounts(dashboard.total_value),
            total_dividend=AmountResponse.from_amounts(dashboard.total_dividend),
            assets=[AssetResponse.from_asset(asset) for asset in dashboard.assets()],
        )


class JournalEntryResponse(BaseModel):
    """일지 행 응답"""

    type: str = Field(..., description="Buy / Dividend")
    date: dt.date = Field(..., description="날짜")
    identifier: str = Field(..., description="종목 티커")
    amount: float = Field(..., description="수량")
    price: AmountResponse = Field(..., description="가격")
    total: AmountResponse = Field(..., description="합계")

    @classmethod
    def from_entry(cls, entry: JournalEntry) -> "JournalEntryResponse":
        return cls(
            type=entry.kind.value,
            date=entry.date,
            identifier=str(entry.identifier),
            amount=entry.amount,
            price=AmountResponse.from_amount(entry.price),
            total=AmountResponse.from_amount(entry.total),
        )


class JournalResponse(BaseModel):
    """일지 응답"""

    ledger_id: str = Field(..., description="Ledger ID")
    entries: list[JournalEntryResponse] = Field(default_factory=list, description="일지 행")

    @classmethod
    def from_journal(cls, ledger_id: str, journal: Journal) -> "JournalResponse":
        return cls(
            ledger_id=ledger_id,
            entries=[JournalEntryResponse.from_entry(entry) for entry in journal],
        )


class EventResponse(BaseModel):
    """이벤트 응답"""

    type: str = Field(..., description="이벤트 타입")
    created_at: dt.datetime = Field(..., description="발생 시각 (UTC)")
    identifier: str = Field(..., description="종목 티커")
    price: AmountResponse = Field(..., description="가격")
    amount: float | None = Field(default=None, description="수량 (StocksBought만)")

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            type=event.event_type,
            created_at=event.created_at,
            identifier=str(getattr(event, "identifier")),
            price=AmountResponse.from_amount(getattr(event, "price")),
            amount=getattr(event, "amount", None),
        )


class EventListResponse(BaseModel):
    """이벤트 목록 응답"""

    ledger_id: str = Field(..., description="Ledger ID")
    events: list[EventResponse] = Field(default_factory=list, description="이벤트 목록")
    total: int = Field(..., description="전체 개수")


class ErrorResponse(BaseModel):
    """에러 응답"""

    detail: str = Field(..., description="에러 메시지")
