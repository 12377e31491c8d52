"""
예외 정의

Money / Event Store 계층에서 발생하는 타입 있는 예외.
Core는 출력하지 않고 예외만 올림 (표시는 CLI / Web 책임).
"""


class BullboardError(Exception):
    """Bullboard 기본 예외"""

    pass


# -------------------------------------------------------------------------
# Money
# -------------------------------------------------------------------------

class MalformedAmountError(BullboardError, ValueError):
    """'123.45 EUR' 형식이 아닌 금액 문자열"""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        message = f"금액 형식이 잘못되었습니다: '{text}' (예: '123.45 EUR')"
        if reason:
            message = f"{message} - {reason}"
        super().__init__(message)


class CurrencyMismatchError(BullboardError):
    """서로 다른 통화 간 연산"""

    def __init__(self, left: str | None, right: str | None) -> None:
        self.left = left
        self.right = right
        super().__init__(f"서로 다른 통화는 더할 수 없습니다: {left} / {right}")


# -------------------------------------------------------------------------
# Event Store
# -------------------------------------------------------------------------

class EventStoreError(BullboardError):
    """Event Store 기본 예외"""

    pass


class LedgerNotFoundError(EventStoreError):
    """이벤트가 한 번도 저장되지 않은 ledger 조회"""

    def __init__(self, ledger_id: str) -> None:
        self.ledger_id = ledger_id
        super().__init__(f"Ledger를 찾을 수 없습니다: {ledger_id}")


class StorageError(EventStoreError):
    """저장소 엔진 / 직렬화 실패 (원본 메시지 보존)"""

    pass


class SchemaError(EventStoreError):
    """스키마 초기화 실패"""

    pass


class CorruptEventError(EventStoreError):
    """알려진 이벤트 형태로 복원할 수 없는 payload"""

    pass
