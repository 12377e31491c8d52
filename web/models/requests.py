"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class EventCreateRequest(BaseModel):
    """이벤트 추가 요청

    price + currency는 '150.0 USD' 형식으로 합쳐서 파싱.
    """

    type: Literal["buy", "dividend", "price"] = Field(..., description="이벤트 종류")
    price: str = Field(..., min_length=1, description="가격 (예: 150.0)")
    currency: str = Field(..., min_length=1, description="통화 코드 (예: USD)")
    identifier: str = Field(..., min_length=1, description="종목 티커 (예: AAPL)")
    amount: float = Field(default=1.0, gt=0, description="수량 (buy에서만 사용)")
    created_at: datetime | None = Field(default=None, description="발생 시각 (기본: 현재 UTC)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "type": "buy",
                    "price": "150.0",
                    "currency": "USD",
                    "identifier": "AAPL",
                    "amount": 10,
                    "created_at": "2007-01-09T09:42:00Z",
                },
            ]
        }
    }
