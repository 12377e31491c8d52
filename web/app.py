"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from core.errors import (
    CurrencyMismatchError,
    EventStoreError,
    LedgerNotFoundError,
    MalformedAmountError,
)
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.routes import dashboard, events, health, journal

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    logger.info("Web: 시작", extra={"db_path": str(settings.db_path)})

    yield

    logger.info("Web: 종료")


app = FastAPI(
    title="Bullboard API",
    description="이벤트 소싱 기반 투자 장부 API",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================================================
# 예외 핸들러
# =========================================================================

@app.exception_handler(LedgerNotFoundError)
async def ledger_not_found_handler(request: Request, exc: LedgerNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(MalformedAmountError)
async def malformed_amount_handler(request: Request, exc: MalformedAmountError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(CurrencyMismatchError)
async def currency_mismatch_handler(request: Request, exc: CurrencyMismatchError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(EventStoreError)
async def event_store_error_handler(request: Request, exc: EventStoreError) -> JSONResponse:
    logger.error("EventStore 오류", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(dashboard.router)
app.include_router(journal.router)
app.include_router(events.router)


@app.get("/", include_in_schema=False)
async def home():
    """홈페이지 (API 문서로 리다이렉트)"""
    return RedirectResponse(url="/docs")
