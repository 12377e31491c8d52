"""
Event 도메인 모델

Ledger 상태는 이벤트 목록의 함수 (Event Sourcing 원칙).
이벤트는 생성 시각을 가진 불변 사실이며, 저장 후 수정/삭제되지 않음.
"""

import json
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import InvalidOperation
from typing import Any, Callable, ClassVar

from core.domain.money import Amount, Currency
from core.errors import CorruptEventError
from core.utils.timezone import ensure_utc, now_utc, parse_iso


class EventTypes:
    """Event Type 상수 (직렬화 태그)"""

    STOCKS_BOUGHT: str = "StocksBought"
    PRICE_OBTAINED: str = "PriceObtained"
    DIVIDEND_PAID: str = "DividendPaid"

    @classmethod
    def all_types(cls) -> list[str]:
        """모든 이벤트 타입 목록 반환"""
        return [
            value
            for name, value in vars(cls).items()
            if not name.startswith("_") and isinstance(value, str) and name.isupper()
        ]

    @classmethod
    def is_valid_type(cls, event_type: str) -> bool:
        """유효한 이벤트 타입인지 확인"""
        return event_type in cls.all_types()


@dataclass(frozen=True)
class StockIdentifier:
    """종목 식별자 (티커)"""

    ticker: str

    @classmethod
    def of(cls, value: "StockIdentifier | str") -> "StockIdentifier":
        if isinstance(value, StockIdentifier):
            return value
        return cls(ticker=value)

    def __str__(self) -> str:
        return self.ticker


@dataclass(frozen=True)
class Event:
    """이벤트 기본 클래스

    created_at은 항상 UTC (naive 입력은 UTC로 간주).
    """

    created_at: datetime

    event_type: ClassVar[str] = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", ensure_utc(self.created_at))

    @property
    def currency(self) -> Currency | None:
        """이벤트 가격의 통화"""
        price: Amount | None = getattr(self, "price", None)
        return price.currency if price is not None else None

    def to_dict(self) -> dict[str, Any]:
        """태그 포함 딕셔너리로 변환 (직렬화용)"""
        data: dict[str, Any] = {"type": self.event_type}
        for f in fields(self):
            data[f.name] = _encode_value(getattr(self, f.name))
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


@dataclass(frozen=True)
class StocksBought(Event):
    """주식 매수 (amount: 소수점 주식 허용, price: 주당 가격)"""

    amount: float
    price: Amount
    identifier: StockIdentifier

    event_type: ClassVar[str] = EventTypes.STOCKS_BOUGHT

    @classmethod
    def create(
        cls,
        amount: float,
        price: Amount | str,
        identifier: StockIdentifier | str,
        created_at: datetime | None = None,
    ) -> "StocksBought":
        """매수 이벤트 생성

        Args:
            amount: 매수 수량
            price: 주당 가격 (Amount 또는 '13.37 USD')
            identifier: 종목 (StockIdentifier 또는 티커)
            created_at: 생성 시각 (없으면 현재 UTC)
        """
        return cls(
            created_at=created_at or now_utc(),
            amount=float(amount),
            price=Amount.of(price),
            identifier=StockIdentifier.of(identifier),
        )


@dataclass(frozen=True)
class PriceObtained(Event):
    """가격 관측 (price: 주당 가격)"""

    price: Amount
    identifier: StockIdentifier

    event_type: ClassVar[str] = EventTypes.PRICE_OBTAINED

    @classmethod
    def create(
        cls,
        price: Amount | str,
        identifier: StockIdentifier | str,
        created_at: datetime | None = None,
    ) -> "PriceObtained":
        return cls(
            created_at=created_at or now_utc(),
            price=Amount.of(price),
            identifier=StockIdentifier.of(identifier),
        )


@dataclass(frozen=True)
class DividendPaid(Event):
    """배당 지급 (price: 주당 배당금)"""

    price: Amount
    identifier: StockIdentifier

    event_type: ClassVar[str] = EventTypes.DIVIDEND_PAID

    @classmethod
    def create(
        cls,
        price: Amount | str,
        identifier: StockIdentifier | str,
        created_at: datetime | None = None,
    ) -> "DividendPaid":
        return cls(
            created_at=created_at or now_utc(),
            price=Amount.of(price),
            identifier=StockIdentifier.of(identifier),
        )


# 타입 태그 → 이벤트 클래스
EVENT_CLASSES: dict[str, type[Event]] = {
    cls.event_type: cls for cls in (StocksBought, PriceObtained, DividendPaid)
}


def _decode_identifier(value: Any) -> StockIdentifier:
    if not isinstance(value, str):
        raise TypeError(f"identifier는 문자열이어야 합니다: {value!r}")
    return StockIdentifier(value)


# 필드명 → 역직렬화 함수
_FIELD_DECODERS: dict[str, Callable[[Any], Any]] = {
    "created_at": parse_iso,
    "amount": float,
    "price": Amount.from_dict,
    "identifier": _decode_identifier,
}


def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Amount):
        return value.to_dict()
    if isinstance(value, StockIdentifier):
        return value.ticker
    return value


def event_from_dict(data: dict[str, Any]) -> Event:
    """딕셔너리에서 이벤트 복원 (역직렬화용)

    알 수 없는 추가 키는 무시 (하위 호환).

    Raises:
        CorruptEventError: 알 수 없는 type 또는 필드 누락/오류
    """
    event_type = data.get("type")
    if not isinstance(event_type, str) or not EventTypes.is_valid_type(event_type):
        raise CorruptEventError(f"알 수 없는 이벤트 타입: {event_type!r}")
    event_cls = EVENT_CLASSES[event_type]

    try:
        kwargs = {
            f.name: _FIELD_DECODERS[f.name](data[f.name])
            for f in fields(event_cls)
        }
        return event_cls(**kwargs)
    except (KeyError, TypeError, ValueError, InvalidOperation) as e:
        raise CorruptEventError(f"{event_type} 이벤트 복원 실패: {e!r}") from e


def event_from_json(text: str) -> Event:
    """JSON 문자열에서 이벤트 복원"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptEventError(f"이벤트 JSON 파싱 실패: {e}") from e

    if not isinstance(data, dict):
        raise CorruptEventError(f"이벤트 payload가 객체가 아닙니다: {type(data).__name__}")

    return event_from_dict(data)


# 입력 종류 (CLI --type / HTTP type) → 이벤트 클래스
EVENT_KINDS: dict[str, type[Event]] = {
    "buy": StocksBought,
    "dividend": DividendPaid,
    "price": PriceObtained,
}


def create_event(
    kind: str,
    price: Amount | str,
    identifier: StockIdentifier | str,
    amount: float = 1.0,
    created_at: datetime | None = None,
) -> Event:
    """입력 종류로 이벤트 생성

    amount는 buy에서만 사용.

    Raises:
        ValueError: 알 수 없는 kind
        MalformedAmountError: price 문자열 형식 오류
    """
    if kind not in EVENT_KINDS:
        raise ValueError(f"알 수 없는 이벤트 종류: {kind} (가능: {', '.join(EVENT_KINDS)})")

    if kind == "buy":
        return StocksBought.create(amount, price, identifier, created_at=created_at)
    return EVENT_KINDS[kind].create(price, identifier, created_at=created_at)
