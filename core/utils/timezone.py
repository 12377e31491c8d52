"""
타임존 유틸리티

내부 저장: UTC 원칙 준수를 위한 헬퍼 함수
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """datetime을 UTC로 정규화

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        UTC 타임존의 datetime
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_sortable_iso(dt: datetime) -> str:
    """정렬 가능한 ISO 8601 문자열로 변환

    UTC + 마이크로초 고정 자릿수라서 문자열 정렬 = 시간 정렬.

    Example:
        >>> to_sortable_iso(datetime(2007, 1, 9, 9, 42))
        '2007-01-09T09:42:00.000000+00:00'
    """
    return ensure_utc(dt).isoformat(timespec="microseconds")


def parse_iso(text: str) -> datetime:
    """ISO 8601 문자열을 UTC datetime으로 변환"""
    return ensure_utc(datetime.fromisoformat(text))
