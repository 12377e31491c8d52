"""
CLI 텍스트 출력

Dashboard / Journal을 터미널용 표로 변환.
여러 통화 합계는 통화별 한 줄씩 (통화 코드 오름차순).
"""

from decimal import Decimal

from core.constants import Defaults
from core.domain.money import Amount, Amounts
from core.projection import Asset, Dashboard, Journal

COLUMN_SEPARATOR = "  "


def format_amounts(amounts: Amounts) -> str:
    """통화별 한 줄씩"""
    return "\n".join(str(amount) for amount in amounts.sorted())


def format_amount(amount: Amount | None) -> str:
    """금액 표시 (없으면 ??.?? ???)"""
    return str(amount) if amount is not None else Defaults.UNKNOWN_VALUE


def format_quantity(value: float) -> str:
    """수량 표시 (정수면 소수점 생략)"""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _value_sort_key(asset: Asset) -> tuple[int, Decimal, str]:
    # 평가금액 없는 종목이 가장 뒤 (통화 구분 없이 금액 크기순)
    if asset.value is None:
        return (0, Decimal("0"), "")
    return (1, asset.value.num, asset.value.currency or "")


def _render_table(
    rows: list[list[str]],
    titles: list[str] | None = None,
    right_align: set[int] | None = None,
) -> str:
    """고정폭 표 문자열 생성

    셀 안 줄바꿈은 여러 줄로 펼침.
    """
    right_align = right_align or set()
    all_rows = ([titles] if titles else []) + rows

    # 셀 → 줄 목록
    split_rows = [[cell.split("\n") for cell in row] for row in all_rows]
    column_count = max((len(row) for row in split_rows), default=0)

    widths = [0] * column_count
    for row in split_rows:
        for index, lines in enumerate(row):
            widths[index] = max(widths[index], *(len(line) for line in lines))

    output: list[str] = []
    for row_index, row in enumerate(split_rows):
        height = max(len(lines) for lines in row)
        is_title = titles is not None and row_index == 0
        for line_index in range(height):
            cells = []
            for index, lines in enumerate(row):
                text = lines[line_index] if line_index < len(lines) else ""
                if is_title:
                    cells.append(text.center(widths[index]))
                elif index in right_align:
                    cells.append(text.rjust(widths[index]))
                else:
                    cells.append(text.ljust(widths[index]))
            output.append(COLUMN_SEPARATOR.join(cells).rstrip())

    return "\n".join(output)


def format_dashboard(dashboard: Dashboard) -> str:
    """Dashboard 출력

    요약 표 + 종목 표 (평가금액 내림차순, 평가금액 없으면 '??.?? ???').
    """
    meta_rows = [
        ["Number of positions", str(dashboard.number_of_positions)],
        ["Total buying price", format_amounts(dashboard.total_buying_price)],
        ["Total value", format_amounts(dashboard.total_value)],
        ["Total dividend", format_amounts(dashboard.total_dividend)],
    ]

    assets = sorted(dashboard.assets(), key=_value_sort_key, reverse=True)
    asset_rows = [
        [
            str(asset.identifier),
            format_quantity(asset.amount),
            str(asset.dividends),
            format_amount(asset.value),
        ]
        for asset in assets
    ]

    meta_table = _render_table(meta_rows, right_align={1})
    asset_table = _render_table(
        asset_rows,
        titles=["Ticker", "Amount", "Dividend", "Value"],
        right_align={1, 2, 3},
    )

    return f"\nDashboard\n\n{meta_table}\n\n{asset_table}"


def format_journal(journal: Journal) -> str:
    """Journal 출력 (입력 순서 그대로)"""
    rows = [
        [
            entry.date.isoformat(),
            entry.kind.value,
            str(entry.identifier),
            format_quantity(entry.amount),
            str(entry.price),
            str(entry.total),
        ]
        for entry in journal
    ]

    table = _render_table(
        rows,
        titles=["Date", "Type", "Ticker", "Amount", "Price", "Total"],
        right_align={3, 4, 5},
    )

    return f"\nMy Journal\n{table}"
