"""
Events 라우트

GET  /ledgers/{ledger_id}/events - 이벤트 목록 (발생 시각 순)
POST /ledgers/{ledger_id}/events - 이벤트 추가
"""

from fastapi import APIRouter, Depends, Query

from core.storage import SQLiteEventStore
from web.dependencies import get_event_store, get_event_store_write
from web.models.requests import EventCreateRequest
from web.models.responses import ErrorResponse, EventListResponse, EventResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/ledgers", tags=["Events"])


@router.get(
    "/{ledger_id}/events",
    response_model=EventListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_events(
    ledger_id: str,
    event_type: str | None = Query(default=None, description="이벤트 타입 필터 (예: StocksBought)"),
    identifier: str | None = Query(default=None, description="종목 티커 필터"),
    store: SQLiteEventStore = Depends(get_event_store),
) -> EventListResponse:
    """이벤트 목록 조회"""
    service = LedgerService(store)
    events = await service.get_events(ledger_id)

    if event_type:
        events = [e for e in events if e.event_type == event_type]
    if identifier:
        events = [e for e in events if str(getattr(e, "identifier", "")) == identifier]

    return EventListResponse(
        ledger_id=ledger_id,
        events=[EventResponse.from_event(e) for e in events],
        total=len(events),
    )


@router.post(
    "/{ledger_id}/events",
    response_model=EventResponse,
    status_code=201,
    responses={422: {"model": ErrorResponse}},
)
async def create_event(
    ledger_id: str,
    request: EventCreateRequest,
    store: SQLiteEventStore = Depends(get_event_store_write),
) -> EventResponse:
    """이벤트 추가"""
    service = LedgerService(store)
    event = await service.add_event(
        ledger_id,
        event_type=request.type,
        price=request.price,
        currency=request.currency,
        identifier=request.identifier,
        amount=request.amount,
        created_at=request.created_at,
    )
    return EventResponse.from_event(event)
