"""Risk Metrics

Annualized volatility and Sharpe ratio of daily close-to-close returns
"""

import numpy as np

from libs.shared.src.dtos.screening.risk_metrics_dto import RiskMetricsDTO

TRADING_DAYS_PER_YEAR = 252


def calculate_daily_returns(prices: list[float]) -> np.ndarray:
    """Simple returns r_t = p_t / p_{t-1} - 1"""
    if len(prices) < 2:
        return np.array([], dtype=float)
    arr = np.asarray(prices, dtype=float)
    return arr[1:] / arr[:-1] - 1


def calculate_volatility(prices: list[float]) -> float:
    """
    Annualized volatility

    Population standard deviation of daily returns × sqrt(252)
    """
    returns = calculate_daily_returns(prices)
    if len(returns) == 0:
        return 0.0
    return float(np.std(returns) * np.sqrt(TRADING_DAYS_PER_YEAR))


def calculate_sharpe_ratio(returns: list[float], risk_free_rate: float = 0.0) -> float:
    """
    Sharpe ratio (mean - rf) / std on the returns' own frequency

    Returns 0 for empty input or zero deviation.
    """
    if len(returns) == 0:
        return 0.0
    arr = np.asarray(returns, dtype=float)
    std = float(np.std(arr))
    if std == 0:
        return 0.0
    return float((np.mean(arr) - risk_free_rate) / std)


def calculate_risk_metrics(prices: list[float]) -> RiskMetricsDTO:
    """Volatility and Sharpe ratio of a close series"""
    return {
        "volatility": calculate_volatility(prices),
        "sharpe_ratio": calculate_sharpe_ratio(calculate_daily_returns(prices)),
    }
