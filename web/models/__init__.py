"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import EventCreateRequest
from web.models.responses import (
    AmountResponse,
    AssetResponse,
    DashboardResponse,
    ErrorResponse,
    EventListResponse,
    EventResponse,
    HealthResponse,
    JournalEntryResponse,
    JournalResponse,
)

__all__ = [
    # Requests
    "EventCreateRequest",
    # Responses
    "AmountResponse",
    "AssetResponse",
    "DashboardResponse",
    "ErrorResponse",
    "EventListResponse",
    "EventResponse",
    "HealthResponse",
    "JournalEntryResponse",
    "JournalResponse",
]
