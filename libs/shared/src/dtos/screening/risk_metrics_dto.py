"""Risk Metrics DTO"""

from typing import TypedDict


class RiskMetricsDTO(TypedDict):
    """Price based risk figures attached to screening rows"""

    volatility: float  # Annualized volatility of daily returns
    sharpe_ratio: float  # Daily Sharpe ratio
