"""Fundamental Default Values

Substitution policy of the fetch layer when a metric cannot be derived.
EPS and ROE have no default: the stock is reported as unavailable instead.
"""

DEFAULT_REVENUE_GROWTH = 0.0
DEFAULT_YOY_GROWTH = 0.0
DEFAULT_EPS_GROWTH = 0.0
DEFAULT_DEBT_RATIO = 50.0
DEFAULT_DIVIDEND_YEARS = 0

# P/E tier heuristic (last-resort ROE estimate)
PE_TIER_ROE: tuple[tuple[float, float], ...] = (
    (15.0, 20.0),  # 0 < P/E < 15 -> ROE 20
    (25.0, 15.0),  # 15 <= P/E < 25 -> ROE 15
)
PE_TIER_FALLBACK_ROE = 10.0
