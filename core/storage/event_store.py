"""
EventStore 인터페이스

Ledger(aggregate) ID별 append-only 이벤트 저장소.
Protocol 기반으로 정의하여 Memory / SQLite 구현체 교체 가능.
"""

from typing import Protocol, Sequence, runtime_checkable

from core.domain.events import Event


@runtime_checkable
class EventStore(Protocol):
    """이벤트 저장소 인터페이스

    모든 구현체는 같은 외부 계약을 따름:
    - append: 호출 순서대로 ledger 끝에 추가 (호출 단위 all-or-nothing)
    - read: created_at 오름차순 (같은 시각은 저장 순서)
    """

    async def init(self) -> None:
        """저장소 초기화 (멱등)"""
        ...

    async def append(self, ledger_id: str, events: Sequence[Event]) -> None:
        """이벤트 추가

        Args:
            ledger_id: Ledger ID
            events: 추가할 이벤트 (순서 유지)

        Raises:
            StorageError: 저장 실패
        """
        ...

    async def read(self, ledger_id: str) -> list[Event]:
        """Ledger 전체 이벤트 조회

        Returns:
            created_at 오름차순 이벤트 리스트

        Raises:
            LedgerNotFoundError: 한 번도 append되지 않은 ledger
        """
        ...


def sort_by_created_at(events: Sequence[Event]) -> list[Event]:
    """created_at 오름차순 정렬 (stable: 같은 시각은 입력 순서 유지)"""
    return sorted(events, key=lambda event: event.created_at)
