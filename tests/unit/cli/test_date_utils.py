"""
cli/date_utils.py 테스트
"""

from datetime import datetime, timezone

import pytest

from cli.date_utils import DateParseError, parse_datetime_or
from core.errors import BullboardError


class TestParseDatetimeOr:
    """parse_datetime_or 테스트"""

    def test_none_uses_fallback(self, iphone_launched_at: datetime) -> None:
        assert parse_datetime_or(None, lambda: iphone_launched_at) == iphone_launched_at

    @pytest.mark.parametrize(
        "text",
        ["2020-8-10", "2020-08-10", "10-8-2020", "10-08-2020"],
    )
    def test_supported_formats(self, text: str, iphone_launched_at: datetime) -> None:
        """YYYY-MM-DD / DD-MM-YYYY → 해당 날짜 00:00 UTC"""
        result = parse_datetime_or(text, lambda: iphone_launched_at)

        assert result == datetime(2020, 8, 10, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text", ["2020-02-31", "yesterday", "2020/08/10", ""])
    def test_invalid(self, text: str, iphone_launched_at: datetime) -> None:
        with pytest.raises(DateParseError) as exc_info:
            parse_datetime_or(text, lambda: iphone_launched_at)

        assert exc_info.value.text == text

    def test_error_is_bullboard_error(self) -> None:
        """CLI 공통 오류 처리 대상"""
        with pytest.raises(BullboardError):
            parse_datetime_or("nope", lambda: datetime.now(timezone.utc))
