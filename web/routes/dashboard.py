"""
Dashboard 라우트

보유 종목 / 매수금액 / 평가금액 / 배당 조회 API
"""

from fastapi import APIRouter, Depends

from core.storage import SQLiteEventStore
from web.dependencies import get_event_store
from web.models.responses import DashboardResponse, ErrorResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/ledgers", tags=["Dashboard"])


@router.get(
    "/{ledger_id}/dashboard",
    response_model=DashboardResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_dashboard(
    ledger_id: str,
    store: SQLiteEventStore = Depends(get_event_store),
) -> DashboardResponse:
    """대시보드 조회

    조회마다 ledger 전체 이벤트를 재생하여 계산.
    """
    service = LedgerService(store)
    dashboard = await service.get_dashboard(ledger_id)
    return DashboardResponse.from_dashboard(ledger_id, dashboard)
