"""
Journal 라우트

거래 일지 조회 API (매수 / 배당, 발생 시각 순)
"""

from fastapi import APIRouter, Depends

from core.storage import SQLiteEventStore
from web.dependencies import get_event_store
from web.models.responses import ErrorResponse, JournalResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/ledgers", tags=["Journal"])


@router.get(
    "/{ledger_id}/journal",
    response_model=JournalResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_journal(
    ledger_id: str,
    store: SQLiteEventStore = Depends(get_event_store),
) -> JournalResponse:
    """거래 일지 조회"""
    service = LedgerService(store)
    journal = await service.get_journal(ledger_id)
    return JournalResponse.from_journal(ledger_id, journal)
