"""
날짜 파싱 유틸리티

CLI --date 인자 처리.
지원 형식: YYYY-MM-DD, DD-MM-YYYY (한 자리 월/일 허용)
"""

from datetime import datetime, timezone
from typing import Callable

from core.errors import BullboardError

# 시도 순서대로
DATE_FORMATS = ("%Y-%m-%d", "%d-%m-%Y")


class DateParseError(BullboardError, ValueError):
    """날짜 문자열 파싱 실패"""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"날짜를 해석할 수 없습니다: '{text}' (예: 2020-08-10, 10-08-2020)")


def parse_datetime_or(
    text: str | None,
    fallback: Callable[[], datetime],
) -> datetime:
    """날짜 문자열 파싱, 없으면 fallback() 반환

    Args:
        text: 날짜 문자열 (None이면 fallback 사용)
        fallback: 기본값 생성 함수 (예: now_utc)

    Returns:
        해당 날짜 00:00:00 UTC

    Raises:
        DateParseError: 어떤 형식으로도 해석되지 않는 경우 (2020-02-31 등)
    """
    if text is None:
        return fallback()

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=timezone.utc)

    raise DateParseError(text)
