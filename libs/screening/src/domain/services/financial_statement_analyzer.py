"""Financial Statement Analyzer

Turns FinMind quarterly statement rows into FundamentalMetricsDTO.

- EPS: trailing four quarters
- EPS growth: latest quarter vs same quarter a year earlier
- YoY growth: latest quarter revenue vs same quarter a year earlier
- Revenue growth: trailing four quarters vs the previous four
  (falls back to YoY when fewer than 8 quarters are available)
- Dividend years: consecutive most-recent years with a cash distribution
"""

from libs.screening.src.domain.services.fundamental_estimators import (
    DEBT_RATIO_ESTIMATORS,
    ROE_ESTIMATORS,
    estimate_first,
)
from libs.shared.src.constants.fundamental_defaults import (
    DEFAULT_DEBT_RATIO,
    DEFAULT_DIVIDEND_YEARS,
    DEFAULT_EPS_GROWTH,
    DEFAULT_REVENUE_GROWTH,
    DEFAULT_YOY_GROWTH,
)
from libs.shared.src.dtos.screening.estimator_inputs_dto import EstimatorInputsDTO
from libs.shared.src.dtos.screening.finmind_row_dto import (
    FinMindDividendRowDTO,
    FinMindStatementRowDTO,
)
from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.twse_valuation_dto import TwseValuationDTO
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)

QuarterSeries = list[tuple[str, float]]

# Item names in priority order (FinMind type codes, then Chinese line-item names)
REVENUE_ITEMS = ("Revenue", "營業收入合計", "營業收入")
EPS_ITEMS = ("EPS", "基本每股盈餘（元）", "基本每股盈餘")
NET_INCOME_ITEMS = (
    "IncomeAfterTaxes",
    "本期淨利（淨損）",
    "淨利（淨損）",
    "本期淨利",
)
TOTAL_ASSETS_ITEMS = ("TotalAssets", "資產總額", "資產總計")
LIABILITIES_ITEMS = ("Liabilities", "負債總額", "負債總計")
EQUITY_ITEMS = (
    "EquityAttributableToOwnersOfParent",
    "Equity",
    "歸屬於母公司業主之權益合計",
    "權益總額",
)


def quarterly_series(
    rows: list[FinMindStatementRowDTO], items: tuple[str, ...]
) -> QuarterSeries:
    """
    Extract one line item per quarter, oldest first

    A row matches on `type` or `origin_name`; when several items match the
    same quarter, the one listed first in `items` wins.
    """
    best: dict[str, tuple[int, float]] = {}
    for row in rows:
        for priority, item in enumerate(items):
            if row.get("type") == item or row.get("origin_name") == item:
                current = best.get(row["date"])
                if current is None or priority < current[0]:
                    best[row["date"]] = (priority, float(row["value"]))
                break
    return [(d, best[d][1]) for d in sorted(best)]


def growth_pct(current: float | None, previous: float | None) -> float | None:
    """(current - previous) / |previous| × 100; None on missing or zero base"""
    if current is None or previous is None or previous == 0:
        return None
    return (current - previous) / abs(previous) * 100


def trailing_sum(series: QuarterSeries, quarters: int = 4, offset: int = 0) -> float | None:
    """Sum of `quarters` quarters ending `offset` quarters before the latest"""
    end = len(series) - offset
    if end - quarters < 0:
        return None
    return sum(value for _, value in series[end - quarters : end])


def annualized_trailing(series: QuarterSeries, quarters: int = 4) -> float | None:
    """Trailing sum, scaled up to a full year when fewer quarters exist"""
    if not series:
        return None
    window = series[-quarters:]
    return sum(value for _, value in window) * quarters / len(window)


def same_quarter_last_year(series: QuarterSeries) -> tuple[float, float] | None:
    """(latest quarter, same quarter one year earlier)"""
    if not series:
        return None
    latest_date, latest_value = series[-1]
    target = f"{int(latest_date[:4]) - 1}{latest_date[4:]}"
    for d, value in series:
        if d == target:
            return latest_value, value
    return None


def latest_value(series: QuarterSeries) -> float | None:
    return series[-1][1] if series else None


def value_in_year(series: QuarterSeries, year: int) -> float | None:
    """Last reported value inside a calendar year (balance sheet items)"""
    values = [value for d, value in series if d.startswith(f"{year}-")]
    return values[-1] if values else None


def sum_in_year(series: QuarterSeries, year: int) -> float | None:
    """Sum of all quarters inside a calendar year (income statement items)"""
    values = [value for d, value in series if d.startswith(f"{year}-")]
    return sum(values) if values else None


def consecutive_dividend_years(
    rows: list[FinMindDividendRowDTO], as_of_year: int
) -> int:
    """
    Count consecutive years with a cash distribution

    The streak ends at the latest paying year and counts as broken (0)
    when that year is older than last year.
    """
    paying_years = set()
    for row in rows:
        cash = float(row.get("CashEarningsDistribution") or 0) + float(
            row.get("CashStatutorySurplus") or 0
        )
        if cash > 0:
            paying_years.add(int(row["date"][:4]))

    if not paying_years:
        return 0

    year = max(paying_years)
    if year < as_of_year - 1:
        return 0

    streak = 0
    while year in paying_years:
        streak += 1
        year -= 1
    return streak


def build_estimator_inputs(
    statements: list[FinMindStatementRowDTO],
    balance_sheet: list[FinMindStatementRowDTO],
    valuation: TwseValuationDTO | None,
) -> EstimatorInputsDTO:
    """Collect the raw figures the ROE / debt-ratio chains may use"""
    return {
        "net_income_ttm": annualized_trailing(
            quarterly_series(statements, NET_INCOME_ITEMS)
        ),
        "equity": latest_value(quarterly_series(balance_sheet, EQUITY_ITEMS)),
        "total_assets": latest_value(
            quarterly_series(balance_sheet, TOTAL_ASSETS_ITEMS)
        ),
        "liabilities": latest_value(
            quarterly_series(balance_sheet, LIABILITIES_ITEMS)
        ),
        "pe_ratio": valuation["pe_ratio"] if valuation else None,
        "pb_ratio": valuation["pb_ratio"] if valuation else None,
    }


def build_fundamental_metrics(
    symbol: str,
    statements: list[FinMindStatementRowDTO],
    balance_sheet: list[FinMindStatementRowDTO],
    dividends: list[FinMindDividendRowDTO],
    valuation: TwseValuationDTO | None,
    as_of_year: int,
) -> tuple[FundamentalMetricsDTO, dict[str, str]]:
    """
    Derive screening fundamentals from raw statement data

    Returns:
        tuple: (metrics, sources) where sources names the estimator or
        "default" used for roe / debt_ratio

    Raises:
        StockDataUnavailableError: EPS missing or ROE not estimable
    """
    eps_series = quarterly_series(statements, EPS_ITEMS)
    revenue_series = quarterly_series(statements, REVENUE_ITEMS)

    eps = trailing_sum(eps_series) if len(eps_series) >= 4 else latest_value(eps_series)
    if eps is None:
        raise StockDataUnavailableError(symbol, "缺少 EPS 資料")

    inputs = build_estimator_inputs(statements, balance_sheet, valuation)
    roe = estimate_first(inputs, ROE_ESTIMATORS)
    if roe is None:
        raise StockDataUnavailableError(symbol, "無法估算 ROE")

    sources = {"roe": roe[1]}
    debt = estimate_first(inputs, DEBT_RATIO_ESTIMATORS)
    if debt is None:
        debt_ratio = DEFAULT_DEBT_RATIO
        sources["debt_ratio"] = "default"
    else:
        debt_ratio = debt[0]
        sources["debt_ratio"] = debt[1]

    eps_pair = same_quarter_last_year(eps_series)
    eps_growth = growth_pct(*eps_pair) if eps_pair else None

    revenue_pair = same_quarter_last_year(revenue_series)
    yoy_growth = growth_pct(*revenue_pair) if revenue_pair else None

    revenue_growth = growth_pct(
        trailing_sum(revenue_series), trailing_sum(revenue_series, offset=4)
    )
    if revenue_growth is None:
        revenue_growth = yoy_growth

    metrics: FundamentalMetricsDTO = {
        "roe": float(roe[0]),
        "revenue_growth": (
            DEFAULT_REVENUE_GROWTH if revenue_growth is None else revenue_growth
        ),
        "yoy_growth": DEFAULT_YOY_GROWTH if yoy_growth is None else yoy_growth,
        "eps_growth": DEFAULT_EPS_GROWTH if eps_growth is None else eps_growth,
        "eps": float(eps),
        "debt_ratio": float(debt_ratio),
        "dividend_years": (
            consecutive_dividend_years(dividends, as_of_year)
            if dividends
            else DEFAULT_DIVIDEND_YEARS
        ),
    }
    return metrics, sources
