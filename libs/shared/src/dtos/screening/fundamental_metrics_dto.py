"""Fundamental Metrics DTO"""

from typing import TypedDict


class FundamentalMetricsDTO(TypedDict):
    """Per-stock fundamentals consumed by the screening engine

    Percentages are expressed in percent (15.0 means 15%).
    """

    roe: float  # Return on equity (%)
    revenue_growth: float  # Revenue growth (%)
    yoy_growth: float  # Year-over-year growth (%)
    eps_growth: float  # EPS growth (%)
    eps: float  # Earnings per share (TWD)
    debt_ratio: float  # Liabilities / total assets (%)
    dividend_years: int  # Consecutive years paying dividends
