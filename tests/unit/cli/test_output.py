"""
cli/output.py 테스트

Dashboard / Journal 텍스트 출력 테스트
"""

from datetime import datetime

from cli.demo import demo, demo_events
from cli.output import format_amount, format_dashboard, format_journal, format_quantity
from core.domain.events import DividendPaid, StocksBought
from core.projection import Dashboard, Journal


class TestFormatHelpers:
    """포맷 헬퍼 테스트"""

    def test_quantity_integer(self) -> None:
        assert format_quantity(10.0) == "10"

    def test_quantity_fraction(self) -> None:
        assert format_quantity(0.5) == "0.5"

    def test_unknown_amount(self) -> None:
        assert format_amount(None) == "??.?? ???"


class TestFormatDashboard:
    """Dashboard 출력 테스트"""

    def test_empty(self) -> None:
        text = format_dashboard(Dashboard.from_events([]))

        assert "Dashboard" in text
        assert "Number of positions" in text
        assert "0.00" in text

    def test_demo(self) -> None:
        text = format_dashboard(demo())
        lines = text.splitlines()

        assert any(line.startswith("Number of positions") and line.endswith("3") for line in lines)
        assert "53.48 EUR" in text
        assert "3100.00 USD" in text
        # 평가금액 내림차순: AAPL(2400) > MSFT(880) > ASR.AS(56.80)
        ticker_order = [
            line.split()[0] for line in lines if line.split()[:1] in (["AAPL"], ["MSFT"], ["ASR.AS"])
        ]
        assert ticker_order == ["AAPL", "MSFT", "ASR.AS"]

    def test_unknown_value(self, aapl_bought: StocksBought) -> None:
        text = format_dashboard(Dashboard.from_events([aapl_bought]))

        assert "??.?? ???" in text

    def test_multi_currency_totals_one_line_each(self, iphone_launched_at: datetime) -> None:
        dashboard = Dashboard.from_events([
            StocksBought.create(1, "10 USD", "AAPL", created_at=iphone_launched_at),
            StocksBought.create(1, "20 EUR", "ASR.AS", created_at=iphone_launched_at),
        ])

        lines = format_dashboard(dashboard).splitlines()
        buying_index = next(i for i, line in enumerate(lines) if line.startswith("Total buying price"))

        assert lines[buying_index].endswith("20.00 EUR")
        assert lines[buying_index + 1].strip() == "10.00 USD"


class TestFormatJournal:
    """Journal 출력 테스트"""

    def test_header(self) -> None:
        text = format_journal(Journal.from_events([]))

        assert "My Journal" in text
        for title in ("Date", "Type", "Ticker", "Amount", "Price", "Total"):
            assert title in text

    def test_rows(self, aapl_bought: StocksBought, aapl_dividend: DividendPaid) -> None:
        text = format_journal(Journal.from_events([aapl_bought, aapl_dividend]))
        lines = text.splitlines()

        buy_line = next(line for line in lines if " Buy " in line)
        dividend_line = next(line for line in lines if " Dividend " in line)

        assert buy_line.startswith("2007-01-09")
        assert "AAPL" in buy_line
        assert buy_line.endswith("1500.00 USD")
        assert dividend_line.endswith("0.50 USD")


class TestDemo:
    """데모 데이터 테스트"""

    def test_demo_events(self) -> None:
        events = demo_events()

        assert len(events) == 8
        assert {str(e.identifier) for e in events} == {"AAPL", "ASR.AS", "MSFT"}

    def test_demo_dashboard(self) -> None:
        dashboard = demo()

        assert dashboard.number_of_positions == 3
        assert str(dashboard.asset("AAPL").value) == "2400.00 USD"
        assert dashboard.amount_of(dashboard.asset("AAPL").identifier) == 15.0
