"""
Web 서비스 패키지

EventStore 조회 + Projection 생성 로직
"""

from web.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
