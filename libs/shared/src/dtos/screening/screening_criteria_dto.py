"""Screening Criteria DTO"""

from typing import TypedDict


class ScreeningCriteriaDTO(TypedDict):
    """Tunable thresholds of the quality stage"""

    min_yoy_growth: float  # YoY growth for the excellent tier (%)
    min_eps_growth: float  # EPS growth for the excellent tier (%)
    min_eps: float  # Minimum EPS (binary check)
