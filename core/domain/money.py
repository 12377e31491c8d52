"""
Money 값 객체

Amount (금액 + 통화), Amounts (통화별 금액 묶음).
금액은 반드시 Decimal 사용 (float 누적 오차 방지).
통화가 다른 금액끼리의 덧셈은 CurrencyMismatchError.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from core.errors import CurrencyMismatchError, MalformedAmountError

# 통화 코드 (예: "USD", "EUR")
Currency = str


def to_decimal(value: int | float | Decimal | str) -> Decimal:
    """수량/배수를 Decimal로 변환

    float는 str()을 거쳐 변환 (10.0 → Decimal("10.0"), 이진 오차 제거)
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Amount:
    """금액 (불변)

    currency가 None이면 "통화 미정" 상태.
    실제 통화가 정해지기 전 0 초기화 용도로만 사용.
    """

    num: Decimal
    currency: Currency | None = None

    @classmethod
    def zero(cls, currency: Currency | None = None) -> "Amount":
        """0 금액 생성"""
        return cls(num=Decimal("0"), currency=currency)

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """'123.45 EUR' 형식 문자열 파싱

        Raises:
            MalformedAmountError: 토큰이 2개가 아니거나 숫자가 유효하지 않은 경우
        """
        parts = text.split()
        if len(parts) != 2:
            raise MalformedAmountError(text, "숫자와 통화 코드 2개 토큰이 필요합니다")

        try:
            num = Decimal(parts[0])
        except InvalidOperation as e:
            raise MalformedAmountError(text, "유효한 숫자가 아닙니다") from e

        if not num.is_finite():
            raise MalformedAmountError(text, "유효한 숫자가 아닙니다")

        return cls(num=num, currency=parts[1])

    @classmethod
    def of(cls, value: "Amount | str") -> "Amount":
        """Amount 또는 문자열을 Amount로 변환"""
        if isinstance(value, Amount):
            return value
        return cls.parse(value)

    @property
    def has_currency(self) -> bool:
        return bool(self.currency)

    def add(self, other: "Amount") -> "Amount":
        """같은 통화끼리 덧셈

        통화 미정(0 초기화) 금액은 상대 통화를 따름.

        Raises:
            CurrencyMismatchError: 서로 다른 통화인 경우
        """
        if not other.has_currency:
            currency = self.currency
        elif not self.has_currency:
            currency = other.currency
        elif self.currency == other.currency:
            currency = self.currency
        else:
            raise CurrencyMismatchError(self.currency, other.currency)

        return Amount(num=self.num + other.num, currency=currency)

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __mul__(self, factor: int | float | Decimal) -> "Amount":
        if isinstance(factor, Amount):
            return NotImplemented
        return Amount(num=self.num * to_decimal(factor), currency=self.currency)

    __rmul__ = __mul__

    def __str__(self) -> str:
        num = f"{self.num:.2f}"
        if not self.has_currency:
            return num
        return f"{num} {self.currency}"

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (직렬화용)"""
        return {
            "num": str(self.num),
            "currency": self.currency,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Amount":
        """딕셔너리에서 생성 (역직렬화용)"""
        return Amount(num=Decimal(str(data["num"])), currency=data.get("currency"))


class Amounts:
    """통화별 금액 묶음

    통화 코드당 하나의 Amount 유지.
    zero()는 통화 미정 0 항목 하나를 가짐 (빈 묶음 방지).
    """

    def __init__(self, amounts: list[Amount] | None = None):
        self._amounts: dict[Currency | None, Amount] = {}
        for amount in amounts or []:
            self._amounts[amount.currency] = amount

    @classmethod
    def zero(cls) -> "Amounts":
        return cls([Amount.zero()])

    def for_currency(self, currency: Currency | None) -> Amount:
        """통화별 금액 조회 (없으면 0, 변경 없음)"""
        return self._amounts.get(currency, Amount.zero(currency))

    def upsert(self, amount: Amount) -> None:
        """같은 통화 항목에 합산, 없으면 추가

        실제 통화가 들어오면 통화 미정 0 항목은 제거.
        """
        if amount.has_currency:
            placeholder = self._amounts.get(None)
            if placeholder is not None and placeholder.num == 0:
                del self._amounts[None]

        existing = self._amounts.get(amount.currency)
        if existing is None:
            self._amounts[amount.currency] = amount
        else:
            self._amounts[amount.currency] = existing.add(amount)

    def sorted(self) -> list[Amount]:
        """통화 코드 오름차순 정렬 (통화 미정 항목이 먼저)"""
        return sorted(self._amounts.values(), key=lambda a: a.currency or "")

    def currencies(self) -> list[Currency | None]:
        return [amount.currency for amount in self.sorted()]

    def __len__(self) -> int:
        return len(self._amounts)

    def __iter__(self):
        return iter(self.sorted())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amounts):
            return NotImplemented
        return self._amounts == other._amounts

    def __repr__(self) -> str:
        return f"Amounts({[str(a) for a in self.sorted()]})"

    def __str__(self) -> str:
        return "\n".join(str(amount) for amount in self.sorted())
