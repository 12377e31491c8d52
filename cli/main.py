"""
Bullboard CLI

실행 방법:
    python -m cli init
    python -m cli add --type buy --date 2020-08-10 --price 150.0 --currency USD --identifier AAPL --amount 10
    python -m cli journal
    python -m cli dashboard
    python -m cli demo

DB 경로: BULLBOARD_DB_PATH (기본: 현재 디렉토리 bullboard.db)
Ledger: BULLBOARD_LEDGER_ID (기본: main)
"""

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from adapters.db.sqlite_adapter import SQLiteAdapter
from cli.date_utils import parse_datetime_or
from cli.demo import demo
from cli.output import format_dashboard, format_journal
from core.config.loader import ConfigLoadError, Settings, get_settings
from core.domain.events import EVENT_KINDS, Event, create_event
from core.domain.money import Amount
from core.errors import BullboardError
from core.logging import setup_logging
from core.projection import Dashboard, Journal
from core.storage import SQLiteEventStore
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """argparse 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="bullboard",
        description="이벤트 소싱 기반 투자 장부",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="이벤트 저장소 초기화")

    add_parser = subparsers.add_parser("add", help="이벤트 추가")
    add_parser.add_argument(
        "--type",
        dest="event_type",
        required=True,
        choices=list(EVENT_KINDS),
        help="이벤트 종류",
    )
    add_parser.add_argument(
        "--date",
        default=None,
        help="이벤트 날짜 (YYYY-MM-DD 또는 DD-MM-YYYY, 기본: 현재)",
    )
    add_parser.add_argument("--price", required=True, help="가격 (예: 150.0)")
    add_parser.add_argument("--currency", required=True, help="통화 코드 (예: USD)")
    add_parser.add_argument("--identifier", required=True, help="종목 티커 (예: AAPL)")
    add_parser.add_argument(
        "--amount",
        type=float,
        default=1.0,
        help="수량 (기본: 1)",
    )

    subparsers.add_parser("journal", help="거래 일지 출력")
    subparsers.add_parser("dashboard", help="대시보드 출력")
    subparsers.add_parser("demo", help="데모 대시보드 출력")

    return parser


def build_event(args: argparse.Namespace) -> Event:
    """add 인자로 이벤트 생성

    Raises:
        DateParseError: 날짜 형식 오류
        MalformedAmountError: 가격 / 통화 형식 오류
    """
    created_at = parse_datetime_or(args.date, now_utc)
    price = Amount.parse(f"{args.price} {args.currency}")
    return create_event(
        args.event_type,
        price,
        args.identifier,
        amount=args.amount,
        created_at=created_at,
    )


async def run_command(args: argparse.Namespace, settings: Settings) -> str | None:
    """저장소가 필요한 명령 실행

    Returns:
        출력할 문자열 (없으면 None)
    """
    async with SQLiteAdapter(settings.db_path) as db:
        store = SQLiteEventStore(db)

        if args.command == "init":
            await store.init()
            logger.info("이벤트 저장소 초기화", extra={"db_path": str(settings.db_path)})
            return f"이벤트 저장소 초기화 완료: {settings.db_path}"

        if args.command == "add":
            event = build_event(args)
            await store.append(settings.ledger_id, [event])
            logger.info(
                "이벤트 추가",
                extra={"ledger_id": settings.ledger_id, "event_type": event.event_type},
            )
            return None

        events = await store.read(settings.ledger_id)
        if args.command == "journal":
            return format_journal(Journal.from_events(events))
        return format_dashboard(Dashboard.from_events(events))


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 진입점

    Returns:
        종료 코드 (0: 성공, 1: 실패)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        print(format_dashboard(demo()))
        return 0

    try:
        settings = get_settings()
    except ConfigLoadError as e:
        print(f"설정 오류: {e}", file=sys.stderr)
        return 1

    setup_logging("cli", file_level=getattr(logging, settings.log_level, logging.INFO))

    try:
        output = asyncio.run(run_command(args, settings))
    except BullboardError as e:
        logger.warning(f"명령 실패: {args.command}", extra={"error": str(e)})
        print(f"오류: {e}", file=sys.stderr)
        return 1

    if output is not None:
        print(output)
    return 0
